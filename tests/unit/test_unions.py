"""Tests for tagged unions: variant selection, unknown tags, serialization."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from aml_models.models.common import AmlToken, IdentityConfiguration, IdentityConfigurationUnion, ManagedIdentity
from aml_models.models.compute import (
    Aks,
    AmlCompute,
    Compute,
    ComputeResource,
    ComputeType,
    ComputeUnion,
    Kubernetes,
    SynapseSpark,
)
from aml_models.models.datastore import (
    AccountKeyDatastoreCredentials,
    DatastoreCredentialsUnion,
    NoneDatastoreCredentials,
)

compute_adapter = TypeAdapter(ComputeUnion)


class TestVariantSelection:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("AKS", Aks),
            ("Kubernetes", Kubernetes),
            ("AmlCompute", AmlCompute),
            ("SynapseSpark", SynapseSpark),
        ],
    )
    def test_tag_selects_variant(self, tag, expected):
        value = compute_adapter.validate_python({"computeType": tag})
        assert type(value) is expected

    def test_variant_reads_its_own_fields(self):
        value = compute_adapter.validate_python(
            {"computeType": "AKS", "properties": {"clusterFqdn": "aks.example.com", "agentCount": 3}}
        )
        assert isinstance(value, Aks)
        assert value.aks_schema.properties.cluster_fqdn == "aks.example.com"
        assert value.aks_schema.properties.agent_count == 3

    def test_same_key_different_shape_per_variant(self):
        spark = compute_adapter.validate_python(
            {"computeType": "SynapseSpark", "properties": {"sparkVersion": "3.3", "nodeCount": 2}}
        )
        assert isinstance(spark, SynapseSpark)
        assert spark.properties.spark_version == "3.3"

    def test_from_raw_json(self):
        value = compute_adapter.validate_json('{"computeType": "Kubernetes", "description": "k8s"}')
        assert isinstance(value, Kubernetes)
        assert value.compute.description == "k8s"

    def test_tag_match_is_case_sensitive(self):
        value = compute_adapter.validate_python({"computeType": "aks"})
        assert type(value) is Compute
        assert value.compute_type.is_known is False


class TestUnknownTags:
    def test_unknown_tag_decodes_as_base(self):
        value = compute_adapter.validate_python(
            {"computeType": "QuantumAnnealer", "description": "new kind", "properties": {"qubits": 128}}
        )
        assert type(value) is Compute
        assert value.compute_type == "QuantumAnnealer"
        assert value.compute_type.is_known is False
        assert value.description == "new kind"

    def test_unknown_tag_survives_round_trip(self):
        value = compute_adapter.validate_python({"computeType": "QuantumAnnealer", "description": "x"})
        assert compute_adapter.dump_python(value, mode="json", by_alias=True) == {
            "computeType": "QuantumAnnealer",
            "description": "x",
        }

    def test_missing_tag_is_required_field_error(self):
        with pytest.raises(ValidationError, match="computeType"):
            compute_adapter.validate_python({"description": "no kind"})

    def test_known_tag_wrong_shape_is_error(self):
        with pytest.raises(ValidationError):
            TypeAdapter(DatastoreCredentialsUnion).validate_python({"credentialsType": "AccountKey"})



class TestPythonNames:
    def test_tag_under_attribute_name(self):
        resource = ComputeResource(properties={"compute_type": "AKS", "properties": {"agent_count": 2}})
        assert isinstance(resource.properties, Aks)
        assert resource.properties.aks_schema.properties.agent_count == 2
        assert resource.to_wire()["properties"] == {"computeType": "AKS", "properties": {"agentCount": 2}}

    def test_tag_inside_layer_mapping(self):
        value = compute_adapter.validate_python({"compute": {"compute_type": "Kubernetes", "description": "k8s"}})
        assert isinstance(value, Kubernetes)
        assert value.compute.description == "k8s"

    def test_tag_inside_layer_instance(self):
        layer = Compute(compute_type=ComputeType.AML_COMPUTE)
        value = compute_adapter.validate_python({"compute": layer})
        assert isinstance(value, AmlCompute)

    def test_tag_as_enum_member(self):
        value = compute_adapter.validate_python({"compute_type": ComputeType.SYNAPSE_SPARK})
        assert isinstance(value, SynapseSpark)

    def test_nested_union_by_attribute_names(self):
        value = TypeAdapter(DatastoreCredentialsUnion).validate_python(
            {"credentials_type": "AccountKey", "secrets": {"secrets_type": "AccountKey", "key": "c2VjcmV0"}}
        )
        assert isinstance(value, AccountKeyDatastoreCredentials)
        assert value.secrets.key == "c2VjcmV0"

class TestSerialization:
    def test_variant_serializes_flat(self):
        value = AmlCompute(compute=Compute(compute_type=ComputeType.AML_COMPUTE, description="test"))
        assert compute_adapter.dump_python(value, mode="json", by_alias=True) == {
            "computeType": "AmlCompute",
            "description": "test",
        }

    def test_base_layer_serializes_in_union(self):
        value = Compute(compute_type="Unlisted")
        assert compute_adapter.dump_python(value, mode="json", by_alias=True) == {"computeType": "Unlisted"}

    def test_round_trip_with_nested_union(self):
        payload = {
            "credentialsType": "AccountKey",
            "secrets": {"secretsType": "AccountKey", "key": "c2VjcmV0"},
        }
        adapter = TypeAdapter(DatastoreCredentialsUnion)
        value = adapter.validate_python(payload)
        assert isinstance(value, AccountKeyDatastoreCredentials)
        assert value.secrets.key == "c2VjcmV0"
        assert adapter.dump_python(value, mode="json", by_alias=True) == payload

    def test_variant_without_extra_fields(self):
        adapter = TypeAdapter(DatastoreCredentialsUnion)
        value = adapter.validate_python({"credentialsType": "None"})
        assert isinstance(value, NoneDatastoreCredentials)
        assert adapter.dump_python(value, mode="json", by_alias=True) == {"credentialsType": "None"}


class TestIdentityUnion:
    adapter = TypeAdapter(IdentityConfigurationUnion)

    def test_managed(self):
        value = self.adapter.validate_python({"identityType": "Managed", "clientId": "abc"})
        assert isinstance(value, ManagedIdentity)
        assert value.client_id == "abc"

    def test_aml_token(self):
        assert isinstance(self.adapter.validate_python({"identityType": "AMLToken"}), AmlToken)

    def test_unknown(self):
        value = self.adapter.validate_python({"identityType": "Federated"})
        assert type(value) is IdentityConfiguration
