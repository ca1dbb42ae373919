"""Registries and their regional replication details."""

from __future__ import annotations

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import TrackedResource
from aml_models.core.wire import WireModel
from aml_models.models.common import ArmResourceId, ManagedServiceIdentity, PartialSku, Sku


class EndpointServiceConnectionStatus(OpenEnum):
    """Connection status of the service consumer with the service provider."""

    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"
    DISCONNECTED = "Disconnected"
    TIMEOUT = "Timeout"


class SystemCreatedAcrAccount(WireModel):
    acr_account_name: str | None = None
    acr_account_sku: str | None = None
    arm_resource_id: ArmResourceId | None = None


class UserCreatedAcrAccount(WireModel):
    arm_resource_id: ArmResourceId | None = None


class AcrDetails(WireModel):
    """Details of ACR account to be used for the Registry."""

    system_created_acr_account: SystemCreatedAcrAccount | None = None
    user_created_acr_account: UserCreatedAcrAccount | None = None


class SystemCreatedStorageAccount(WireModel):
    allow_blob_public_access: bool | None = None
    arm_resource_id: ArmResourceId | None = None
    storage_account_hns_enabled: bool | None = None
    storage_account_name: str | None = None
    # e.g. "Standard_LRS", "Premium_ZRS".
    storage_account_type: str | None = None


class UserCreatedStorageAccount(WireModel):
    arm_resource_id: ArmResourceId | None = None


class StorageAccountDetails(WireModel):
    """Details of storage account to be used for the Registry."""

    system_created_storage_account: SystemCreatedStorageAccount | None = None
    user_created_storage_account: UserCreatedStorageAccount | None = None


class RegistryRegionArmDetails(WireModel):
    """Details for each region the registry is in."""

    acr_details: list[AcrDetails] = Field(default_factory=list)
    location: str | None = None
    storage_account_details: list[StorageAccountDetails] = Field(default_factory=list)


class PrivateEndpointResource(WireModel):
    """The PE network resource that is linked to this PE connection."""

    id: str | None = None
    subnet_arm_id: str | None = None


class RegistryPrivateLinkServiceConnectionState(WireModel):
    """The connection state."""

    actions_required: str | None = None
    description: str | None = None
    status: EndpointServiceConnectionStatus | None = None


class RegistryPrivateEndpointConnectionProperties(WireModel):
    group_ids: list[str] = Field(default_factory=list)
    private_endpoint: PrivateEndpointResource | None = None
    registry_private_link_service_connection_state: RegistryPrivateLinkServiceConnectionState | None = None
    provisioning_state: str | None = None


class RegistryPrivateEndpointConnection(WireModel):
    """Private endpoint connection definition."""

    id: str | None = None
    location: str | None = None
    properties: RegistryPrivateEndpointConnectionProperties | None = None


class RegistryProperties(WireModel):
    """Details of the Registry."""

    discovery_url: str | None = None
    intellectual_property_publisher: str | None = None
    managed_resource_group: ArmResourceId | None = None
    ml_flow_registry_uri: str | None = None
    registry_private_endpoint_connections: list[RegistryPrivateEndpointConnection] = Field(default_factory=list)
    public_network_access: str | None = None
    region_details: list[RegistryRegionArmDetails] = Field(default_factory=list)


class Registry(TrackedResource[RegistryProperties]):
    identity: ManagedServiceIdentity | None = None
    kind: str | None = None
    sku: Sku | None = None


class RegistryTrackedResourceArmPaginatedResult(PagedResult[Registry]):
    """A paginated list of Registry entities."""


class RegistryPartialManagedServiceIdentity(ManagedServiceIdentity):
    """Managed service identity (system assigned and/or user assigned identities)."""


class PartialRegistryPartialTrackedResource(WireModel):
    """Strictly used in update requests."""

    identity: RegistryPartialManagedServiceIdentity | None = None
    sku: PartialSku | None = None
    tags: dict[str, str] = Field(default_factory=dict)
