"""Pydantic models for the Azure Machine Learning management REST API."""

from aml_models.models.common import ErrorDetail, ErrorResponse, ManagedServiceIdentity, Sku
from aml_models.models.compute import (
    Compute,
    ComputeInstanceState,
    ComputeResource,
    ComputeType,
    ComputeUnion,
    PaginatedComputeResourcesList,
)
from aml_models.models.datastore import Datastore, DatastoreResourceArmPaginatedResult
from aml_models.models.endpoint import (
    BatchDeployment,
    BatchEndpoint,
    OnlineDeployment,
    OnlineEndpoint,
)
from aml_models.models.job import JobBase, JobBaseResourceArmPaginatedResult, JobStatus
from aml_models.models.monitoring import MonitorDefinition
from aml_models.models.registry import Registry, RegistryTrackedResourceArmPaginatedResult
from aml_models.models.schedule import Schedule, ScheduleProvisioningState, ScheduleResourceArmPaginatedResult
from aml_models.models.workspace import Workspace, WorkspaceListResult

__all__ = [
    "BatchDeployment",
    "BatchEndpoint",
    "Compute",
    "ComputeInstanceState",
    "ComputeResource",
    "ComputeType",
    "ComputeUnion",
    "Datastore",
    "DatastoreResourceArmPaginatedResult",
    "ErrorDetail",
    "ErrorResponse",
    "JobBase",
    "JobBaseResourceArmPaginatedResult",
    "JobStatus",
    "ManagedServiceIdentity",
    "MonitorDefinition",
    "OnlineDeployment",
    "OnlineEndpoint",
    "PaginatedComputeResourcesList",
    "Registry",
    "RegistryTrackedResourceArmPaginatedResult",
    "Schedule",
    "ScheduleProvisioningState",
    "ScheduleResourceArmPaginatedResult",
    "Sku",
    "Workspace",
    "WorkspaceListResult",
]
