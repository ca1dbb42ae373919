"""Workspaces, their keys and connections, usages and quotas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import Resource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ManagedServiceIdentity, Sku


class WorkspaceProvisioningState(OpenEnum):
    """The current deployment state of workspace resource."""

    UNKNOWN = "Unknown"
    UPDATING = "Updating"
    CREATING = "Creating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class EncryptionStatus(OpenEnum):
    """Indicates whether or not the encryption is enabled for the workspace."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class PublicNetworkAccess(OpenEnum):
    """Whether requests from Public Network are allowed."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class IdentityForCmk(WireModel):
    """Identity that will be used to access key vault for encryption at rest."""

    user_assigned_identity: str | None = None


class KeyVaultProperties(WireModel):
    key_vault_arm_id: str
    key_identifier: str
    identity_client_id: str | None = None


class EncryptionProperty(WireModel):
    status: EncryptionStatus
    identity: IdentityForCmk | None = None
    key_vault_properties: KeyVaultProperties


class NotebookPreparationError(WireModel):
    error_message: str | None = None
    status_code: int | None = None


class NotebookResourceInfo(WireModel):
    fqdn: str | None = None
    # The data plane resourceId used to initialize the notebook component.
    resource_id: str | None = None
    notebook_preparation_error: NotebookPreparationError | None = None


class CosmosDbSettings(WireModel):
    collections_throughput: int | None = None


class ServiceManagedResourcesSettings(WireModel):
    cosmos_db: CosmosDbSettings | None = None


# -- Private links -----------------------------------------------------------------


class PrivateEndpointServiceConnectionStatus(OpenEnum):
    """The private endpoint connection status."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    DISCONNECTED = "Disconnected"
    TIMEOUT = "Timeout"


class PrivateEndpointConnectionProvisioningState(OpenEnum):
    """The current provisioning state."""

    SUCCEEDED = "Succeeded"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"


class PrivateEndpoint(WireModel):
    """The Private Endpoint resource."""

    id: str | None = None
    subnet_arm_id: str | None = None


class PrivateLinkServiceConnectionState(WireModel):
    """A collection of information about the state of the connection between service consumer and provider."""

    status: PrivateEndpointServiceConnectionStatus | None = None
    description: str | None = None
    actions_required: str | None = None


class PrivateEndpointConnectionProperties(WireModel):
    private_endpoint: PrivateEndpoint | None = None
    private_link_service_connection_state: PrivateLinkServiceConnectionState
    provisioning_state: PrivateEndpointConnectionProvisioningState | None = None


class PrivateEndpointConnection(Resource[PrivateEndpointConnectionProperties]):
    """The Private Endpoint Connection resource."""

    properties: PrivateEndpointConnectionProperties | None = None
    identity: ManagedServiceIdentity | None = None
    location: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    sku: Sku | None = None


class SharedPrivateLinkResourceProperty(WireModel):
    private_link_resource_id: str | None = None
    group_id: str | None = None
    request_message: str | None = None
    status: PrivateEndpointServiceConnectionStatus | None = None


class SharedPrivateLinkResource(WireModel):
    name: str | None = None
    properties: SharedPrivateLinkResourceProperty | None = None


# -- Workspace ---------------------------------------------------------------------


class WorkspaceProperties(WireModel):
    """The properties of a machine learning workspace."""

    # Immutable once the workspace exists.
    workspace_id: str | None = None
    description: str | None = None
    friendly_name: str | None = None
    key_vault: str | None = None
    application_insights: str | None = None
    container_registry: str | None = None
    storage_account: str | None = None
    discovery_url: str | None = None
    provisioning_state: WorkspaceProvisioningState | None = None
    encryption: EncryptionProperty | None = None
    hbi_workspace: bool | None = None
    service_provisioned_resource_group: str | None = None
    private_link_count: int | None = None
    image_build_compute: str | None = None
    allow_public_access_when_behind_vnet: bool | None = None
    public_network_access: PublicNetworkAccess | None = None
    private_endpoint_connections: list[PrivateEndpointConnection] = Field(default_factory=list)
    shared_private_link_resources: list[SharedPrivateLinkResource] = Field(default_factory=list)
    notebook_info: NotebookResourceInfo | None = None
    service_managed_resources_settings: ServiceManagedResourcesSettings | None = None
    primary_user_assigned_identity: str | None = None
    tenant_id: str | None = None
    storage_hns_enabled: bool | None = None
    mlflow_tracking_uri: str | None = None
    v1_legacy_mode: bool | None = None


class Workspace(Resource[WorkspaceProperties]):
    """An object that represents a machine learning workspace."""

    properties: WorkspaceProperties | None = None
    identity: ManagedServiceIdentity | None = None
    location: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    sku: Sku | None = None


class WorkspaceListResult(PagedResult[Workspace]):
    """The result of a request to list machine learning workspaces."""


class WorkspacePropertiesUpdateParameters(WireModel):
    """The parameters for updating the properties of a machine learning workspace."""

    description: str | None = None
    friendly_name: str | None = None
    image_build_compute: str | None = None
    service_managed_resources_settings: ServiceManagedResourcesSettings | None = None
    primary_user_assigned_identity: str | None = None
    public_network_access: PublicNetworkAccess | None = None
    application_insights: str | None = None
    container_registry: str | None = None


class WorkspaceUpdateParameters(WireModel):
    """The parameters for updating a machine learning workspace."""

    tags: dict[str, str] = Field(default_factory=dict)
    sku: Sku | None = None
    identity: ManagedServiceIdentity | None = None
    properties: WorkspacePropertiesUpdateParameters | None = None


# -- Keys --------------------------------------------------------------------------


class Password(WireModel):
    name: str | None = None
    value: str | None = None


class RegistryListCredentialsResult(WireModel):
    location: str | None = None
    username: str | None = None
    passwords: list[Password] = Field(default_factory=list)


class ListNotebookKeysResult(WireModel):
    primary_access_key: str | None = None
    secondary_access_key: str | None = None


class ListStorageAccountKeysResult(WireModel):
    user_storage_key: str | None = None


class NotebookAccessTokenResult(WireModel):
    notebook_resource_id: str | None = None
    host_name: str | None = None
    public_dns: str | None = None
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None


class ListWorkspaceKeysResult(WireModel):
    user_storage_key: str | None = None
    user_storage_resource_id: str | None = None
    app_insights_instrumentation_key: str | None = None
    container_registry_credentials: RegistryListCredentialsResult | None = None
    notebook_access_keys: ListNotebookKeysResult | None = None


# -- Connections -------------------------------------------------------------------


class ConnectionAuthType(OpenEnum):
    """Authentication type of the connection target."""

    PAT = "PAT"
    MANAGED_IDENTITY = "ManagedIdentity"
    USERNAME_PASSWORD = "UsernamePassword"
    NONE = "None"
    SAS = "SAS"
    SERVICE_PRINCIPAL = "ServicePrincipal"
    ACCESS_KEY = "AccessKey"


class ConnectionCategory(OpenEnum):
    """Category of the connection."""

    PYTHON_FEED = "PythonFeed"
    CONTAINER_REGISTRY = "ContainerRegistry"
    GIT = "Git"
    S3 = "S3"
    SNOWFLAKE = "Snowflake"
    AZURE_SQL_DB = "AzureSqlDb"
    AZURE_SYNAPSE_ANALYTICS = "AzureSynapseAnalytics"
    AZURE_MY_SQL_DB = "AzureMySqlDb"
    AZURE_POSTGRES_DB = "AzurePostgresDb"
    ADLS_GEN2 = "ADLSGen2"
    REDIS = "Redis"


class ValueFormat(OpenEnum):
    """Format for the workspace connection value."""

    JSON = "JSON"


class WorkspaceConnectionPropertiesV2(WireModel):
    auth_type: ConnectionAuthType
    category: ConnectionCategory | None = None
    expiry_time: datetime | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    target: str | None = None
    is_shared_to_all: bool | None = None
    value: str | None = None
    value_format: ValueFormat | None = None


class WorkspaceConnectionPersonalAccessToken(WireModel):
    pat: str | None = None


class WorkspaceConnectionSharedAccessSignature(WireModel):
    sas: str | None = None


class WorkspaceConnectionUsernamePassword(WireModel):
    username: str | None = None
    password: str | None = None
    # Optional, required by connections like SalesForce for extra security in addition to UsernamePassword.
    security_token: str | None = None


class WorkspaceConnectionManagedIdentity(WireModel):
    resource_id: str | None = None
    client_id: str | None = None


class WorkspaceConnectionServicePrincipal(WireModel):
    client_id: str | None = None
    client_secret: str | None = None
    tenant_id: str | None = None


class WorkspaceConnectionAccessKey(WireModel):
    access_key_id: str | None = None
    secret_access_key: str | None = None


class PATAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.PAT.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionPersonalAccessToken | None = None


class SASAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.SAS.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionSharedAccessSignature | None = None


class UsernamePasswordAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.USERNAME_PASSWORD.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionUsernamePassword | None = None


class ManagedIdentityAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.MANAGED_IDENTITY.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionManagedIdentity | None = None


class ServicePrincipalAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.SERVICE_PRINCIPAL.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionServicePrincipal | None = None


class AccessKeyAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.ACCESS_KEY.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]
    credentials: WorkspaceConnectionAccessKey | None = None


class NoneAuthTypeWorkspaceConnectionProperties(WireModel):
    wire_tag: ClassVar[str] = ConnectionAuthType.NONE.value

    connection_properties: Annotated[WorkspaceConnectionPropertiesV2, Flatten()]


WorkspaceConnectionPropertiesV2Union = tagged_union(
    "authType",
    PATAuthTypeWorkspaceConnectionProperties,
    SASAuthTypeWorkspaceConnectionProperties,
    UsernamePasswordAuthTypeWorkspaceConnectionProperties,
    ManagedIdentityAuthTypeWorkspaceConnectionProperties,
    ServicePrincipalAuthTypeWorkspaceConnectionProperties,
    AccessKeyAuthTypeWorkspaceConnectionProperties,
    NoneAuthTypeWorkspaceConnectionProperties,
    fallback=WorkspaceConnectionPropertiesV2,
)


class WorkspaceConnectionPropertiesV2BasicResource(Resource[WorkspaceConnectionPropertiesV2Union]):
    """A workspace connection wrapped in the ARM resource envelope."""


class WorkspaceConnectionPropertiesV2BasicResourceArmPaginatedResult(
    PagedResult[WorkspaceConnectionPropertiesV2BasicResource]
):
    """A paginated list of workspace connections."""


# -- Usages and quotas -------------------------------------------------------------


class UsageUnit(OpenEnum):
    """An enum describing the unit of usage measurement."""

    COUNT = "Count"


class QuotaUnit(OpenEnum):
    """An enum describing the unit of quota measurement."""

    COUNT = "Count"


class UsageName(WireModel):
    """The Usage Names."""

    value: str | None = None
    localized_value: str | None = None


class Usage(WireModel):
    """Describes AML Resource Usage."""

    id: str | None = None
    aml_workspace_location: str | None = None
    type: str | None = None
    unit: UsageUnit | None = None
    current_value: int | None = None
    limit: int | None = None
    name: UsageName | None = None


class ListUsagesResult(PagedResult[Usage]):
    """The List Usages operation response."""


class ResourceName(WireModel):
    """The Resource Name."""

    value: str | None = None
    localized_value: str | None = None


class ResourceQuota(WireModel):
    """The quota assigned to a resource."""

    id: str | None = None
    aml_workspace_location: str | None = None
    type: str | None = None
    name: ResourceName | None = None
    limit: int | None = None
    unit: QuotaUnit | None = None


class ListWorkspaceQuotas(PagedResult[ResourceQuota]):
    """The List WorkspaceQuotasByVMFamily operation response."""


class QuotaBaseProperties(WireModel):
    """The properties for Quota update or retrieval."""

    id: str | None = None
    type: str | None = None
    limit: int | None = None
    unit: QuotaUnit | None = None


class QuotaUpdateParameters(WireModel):
    """Quota update parameters."""

    value: list[QuotaBaseProperties] = Field(default_factory=list)
    location: str | None = None


class QuotaUpdateStatus(OpenEnum):
    """Status of update workspace quota."""

    UNDEFINED = "Undefined"
    SUCCESS = "Success"
    FAILURE = "Failure"
    INVALID_QUOTA_BELOW_CLUSTER_MINIMUM = "InvalidQuotaBelowClusterMinimum"
    INVALID_QUOTA_EXCEEDS_SUBSCRIPTION_LIMIT = "InvalidQuotaExceedsSubscriptionLimit"
    INVALID_VM_FAMILY_NAME = "InvalidVMFamilyName"
    OPERATION_NOT_SUPPORTED_FOR_SKU = "OperationNotSupportedForSku"
    OPERATION_NOT_ENABLED_FOR_REGION = "OperationNotEnabledForRegion"


class UpdateWorkspaceQuotas(WireModel):
    """The properties for update Quota response."""

    id: str | None = None
    type: str | None = None
    limit: int | None = None
    unit: QuotaUnit | None = None
    status: QuotaUpdateStatus | None = None


class UpdateWorkspaceQuotasResult(PagedResult[UpdateWorkspaceQuotas]):
    """The result of update workspace quota."""
