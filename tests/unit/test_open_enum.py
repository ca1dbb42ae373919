"""Tests for open enums: documented values, unknown values, defaults."""

from __future__ import annotations

import json

import pytest
from pydantic import TypeAdapter

from aml_models import catalog
from aml_models.core.enums import UNKNOWN_VALUE
from aml_models.models.compute import ClusterPurpose, Compute, ComputeType, OsType, VmPriority
from aml_models.models.job import ClassificationMultilabelPrimaryMetrics
from aml_models.models.workspace import ConnectionAuthType

ALL_MEMBERS = [
    pytest.param(entry.enum, member, id=f"{entry.name}.{member.name}")
    for entry in catalog.list_enums()
    for member in entry.enum
]


class TestKnownValues:
    @pytest.mark.parametrize("enum, member", ALL_MEMBERS)
    def test_round_trip(self, enum, member):
        adapter = TypeAdapter(enum)
        decoded = adapter.validate_json(json.dumps(member.value))
        assert decoded is member
        assert decoded.is_known
        assert adapter.dump_python(decoded, mode="json") == member.value

    def test_irregular_wire_names(self):
        assert ComputeType("AKS") is ComputeType.AKS
        assert ConnectionAuthType("PAT") is ConnectionAuthType.PAT
        assert ConnectionAuthType("SAS") is ConnectionAuthType.SAS
        assert ClassificationMultilabelPrimaryMetrics("IOU") is ClassificationMultilabelPrimaryMetrics.IOU
        assert ClassificationMultilabelPrimaryMetrics("AUCWeighted") is ClassificationMultilabelPrimaryMetrics.AUC_WEIGHTED

    def test_str_is_wire_value(self):
        assert str(ComputeType.HD_INSIGHT) == "HDInsight"
        assert f"{ComputeType.AML_COMPUTE}" == "AmlCompute"

    def test_known_values(self):
        assert VmPriority.known_values() == ["Dedicated", "LowPriority"]


class TestUnknownValues:
    def test_decode_keeps_original_string(self):
        value = ComputeType("SomeFutureComputeType")
        assert isinstance(value, ComputeType)
        assert value.is_known is False
        assert value.name == UNKNOWN_VALUE
        assert value.value == "SomeFutureComputeType"
        assert value == "SomeFutureComputeType"

    def test_round_trip_through_model(self):
        compute = Compute.from_wire('{"computeType": "SomeFutureComputeType"}')
        assert compute.compute_type.is_known is False
        assert compute.to_json() == '{"computeType":"SomeFutureComputeType"}'

    def test_matching_is_case_sensitive(self):
        value = ComputeType("aks")
        assert value is not ComputeType.AKS
        assert value.is_known is False
        assert value.value == "aks"

    def test_unknown_values_compare_by_text(self):
        assert ComputeType("Quantum") == ComputeType("Quantum")
        assert ComputeType("Quantum") != ComputeType("Photonic")

    def test_non_string_still_rejected(self):
        with pytest.raises(ValueError):
            ComputeType(42)


class TestDefaults:
    def test_cluster_purpose_default(self):
        assert ClusterPurpose.default() is ClusterPurpose.FAST_PROD

    def test_os_type_default(self):
        assert OsType.default() is OsType.LINUX

    def test_no_default(self):
        with pytest.raises(TypeError, match="no default"):
            ComputeType.default()

    def test_default_does_not_affect_decoding(self):
        assert ClusterPurpose("DevTest") is ClusterPurpose.DEV_TEST
        assert ClusterPurpose("Other").is_known is False

    def test_default_is_not_a_member(self):
        assert "__default__" not in ClusterPurpose.__members__
        assert len(ClusterPurpose) == 3
