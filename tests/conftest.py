"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from aml_models.config.manager import ConfigManager


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AML_MODELS_FORMAT", raising=False)
    monkeypatch.delenv("AML_MODELS_CONFIG", raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document into the temp dir and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def aml_compute_payload() -> dict:
    """An AmlCompute cluster as returned inside a compute resource."""
    return {
        "computeType": "AmlCompute",
        "computeLocation": "westeurope",
        "provisioningState": "Succeeded",
        "description": "gpu cluster",
        "createdOn": "2024-03-01T10:00:00Z",
        "isAttachedCompute": False,
        "properties": {
            "osType": "Linux",
            "vmSize": "STANDARD_NC6",
            "vmPriority": "Dedicated",
            "scaleSettings": {
                "maxNodeCount": 4,
                "minNodeCount": 0,
                "nodeIdleTimeBeforeScaleDown": "PT2M",
            },
            "remoteLoginPortPublicAccess": "NotSpecified",
            "allocationState": "Steady",
            "currentNodeCount": 0,
            "nodeStateCounts": {"idleNodeCount": 0, "runningNodeCount": 0},
        },
    }


@pytest.fixture
def compute_resource_payload(aml_compute_payload: dict) -> dict:
    return {
        "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.MachineLearningServices/workspaces/ws/computes/gpu",
        "name": "gpu",
        "type": "Microsoft.MachineLearningServices/workspaces/computes",
        "location": "westeurope",
        "systemData": {
            "createdBy": "someone@example.com",
            "createdByType": "User",
            "createdAt": "2024-03-01T10:00:00Z",
        },
        "properties": aml_compute_payload,
    }


@pytest.fixture
def compute_pages(compute_resource_payload: dict) -> list[dict]:
    """Three listing pages chained by nextLink."""
    second = dict(compute_resource_payload, name="cpu")
    third = dict(compute_resource_payload, name="spark")
    return [
        {"value": [compute_resource_payload], "nextLink": "https://management.azure.com/computes?page=2"},
        {"value": [second], "nextLink": "https://management.azure.com/computes?page=3"},
        {"value": [third], "nextLink": ""},
    ]
