"""Online and batch inference endpoints and their deployments."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import TrackedResource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ManagedServiceIdentity, Sku
from aml_models.models.job import ResourceConfiguration


class EndpointAuthMode(OpenEnum):
    """Enum to determine endpoint authentication mode."""

    AML_TOKEN = "AMLToken"
    KEY = "Key"
    AAD_TOKEN = "AADToken"


class EndpointProvisioningState(OpenEnum):
    """State of endpoint provisioning."""

    CREATING = "Creating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UPDATING = "Updating"
    CANCELED = "Canceled"


class DeploymentProvisioningState(OpenEnum):
    """Possible values for DeploymentProvisioningState."""

    CREATING = "Creating"
    DELETING = "Deleting"
    SCALING = "Scaling"
    UPDATING = "Updating"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class EndpointComputeType(OpenEnum):
    """Enum to determine endpoint compute type."""

    MANAGED = "Managed"
    KUBERNETES = "Kubernetes"
    AZURE_ML_COMPUTE = "AzureMLCompute"


class PublicNetworkAccessType(OpenEnum):
    """Enum to determine whether PublicNetworkAccess is Enabled or Disabled."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class EgressPublicNetworkAccessType(OpenEnum):
    """Enum to determine whether PublicNetworkAccess is Enabled or Disabled for egress of a deployment."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class EndpointAuthKeys(WireModel):
    """Keys for endpoint authentication."""

    primary_key: str | None = None
    secondary_key: str | None = None


class EndpointAuthToken(WireModel):
    """Service Token."""

    access_token: str | None = None
    # Seconds since the Unix epoch.
    expiry_time_utc: int | None = None
    refresh_after_time_utc: int | None = None
    token_type: str | None = None


class EndpointPropertiesBase(WireModel):
    """Inference Endpoint base definition."""

    auth_mode: EndpointAuthMode
    description: str | None = None
    # Only present in responses to list-keys requests.
    keys: EndpointAuthKeys | None = None
    properties: dict[str, str | None] = Field(default_factory=dict)
    scoring_uri: str | None = None
    swagger_uri: str | None = None


class CodeConfiguration(WireModel):
    """Configuration for a scoring code asset."""

    code_id: str | None = None
    scoring_script: str


class EndpointDeploymentPropertiesBase(WireModel):
    """Base definition for endpoint deployment."""

    code_configuration: CodeConfiguration | None = None
    description: str | None = None
    environment_id: str | None = None
    environment_variables: dict[str, str | None] = Field(default_factory=dict)
    properties: dict[str, str | None] = Field(default_factory=dict)


# -- Online ------------------------------------------------------------------------


class OnlineEndpointProperties(WireModel):
    """Online endpoint configuration."""

    endpoint_properties_base: Annotated[EndpointPropertiesBase, Flatten()]
    compute: str | None = None
    # Deployment name to percentage of live traffic mirrored to it.
    mirror_traffic: dict[str, int] = Field(default_factory=dict)
    provisioning_state: EndpointProvisioningState | None = None
    public_network_access: PublicNetworkAccessType | None = None
    traffic: dict[str, int] = Field(default_factory=dict)


class OnlineEndpoint(TrackedResource[OnlineEndpointProperties]):
    identity: ManagedServiceIdentity | None = None
    # Metadata used by portal/tooling/etc to render different UX experiences for resources of the same type.
    kind: str | None = None
    sku: Sku | None = None


class OnlineEndpointTrackedResourceArmPaginatedResult(PagedResult[OnlineEndpoint]):
    """A paginated list of OnlineEndpoint entities."""


class ScaleType(OpenEnum):
    DEFAULT = "Default"
    TARGET_UTILIZATION = "TargetUtilization"


class OnlineScaleSettings(WireModel):
    """Online deployment scaling configuration."""

    scale_type: ScaleType


class DefaultScaleSettings(WireModel):
    wire_tag: ClassVar[str] = ScaleType.DEFAULT.value

    online_scale_settings: Annotated[OnlineScaleSettings, Flatten()]


class TargetUtilizationScaleSettings(WireModel):
    wire_tag: ClassVar[str] = ScaleType.TARGET_UTILIZATION.value

    online_scale_settings: Annotated[OnlineScaleSettings, Flatten()]
    max_instances: int | None = None
    min_instances: int | None = None
    # ISO 8601 duration.
    polling_interval: str | None = None
    target_utilization_percentage: int | None = None


OnlineScaleSettingsUnion = tagged_union(
    "scaleType",
    DefaultScaleSettings,
    TargetUtilizationScaleSettings,
    fallback=OnlineScaleSettings,
)


class ProbeSettings(WireModel):
    """Deployment container liveness/readiness probe configuration."""

    failure_threshold: int | None = None
    initial_delay: str | None = None
    period: str | None = None
    success_threshold: int | None = None
    timeout: str | None = None


class OnlineRequestSettings(WireModel):
    """Online deployment scoring requests configuration."""

    max_concurrent_requests_per_instance: int | None = None
    max_queue_wait: str | None = None
    request_timeout: str | None = None


class OnlineDeploymentProperties(WireModel):
    endpoint_deployment_properties_base: Annotated[EndpointDeploymentPropertiesBase, Flatten()] = Field(
        default_factory=EndpointDeploymentPropertiesBase,
    )
    app_insights_enabled: bool | None = None
    egress_public_network_access: EgressPublicNetworkAccessType | None = None
    endpoint_compute_type: EndpointComputeType
    instance_type: str | None = None
    liveness_probe: ProbeSettings | None = None
    model: str | None = None
    model_mount_path: str | None = None
    provisioning_state: DeploymentProvisioningState | None = None
    readiness_probe: ProbeSettings | None = None
    request_settings: OnlineRequestSettings | None = None
    scale_settings: OnlineScaleSettingsUnion | None = None


class ManagedOnlineDeployment(WireModel):
    """Properties specific to a ManagedOnlineDeployment."""

    wire_tag: ClassVar[str] = EndpointComputeType.MANAGED.value

    online_deployment_properties: Annotated[OnlineDeploymentProperties, Flatten()]


class ContainerResourceSettings(WireModel):
    cpu: str | None = None
    gpu: str | None = None
    memory: str | None = None


class ContainerResourceRequirements(WireModel):
    """Resource requirements for each container instance within an online deployment."""

    container_resource_limits: ContainerResourceSettings | None = None
    container_resource_requests: ContainerResourceSettings | None = None


class KubernetesOnlineDeployment(WireModel):
    """Properties specific to a KubernetesOnlineDeployment."""

    wire_tag: ClassVar[str] = EndpointComputeType.KUBERNETES.value

    online_deployment_properties: Annotated[OnlineDeploymentProperties, Flatten()]
    container_resource_requirements: ContainerResourceRequirements | None = None


OnlineDeploymentPropertiesUnion = tagged_union(
    "endpointComputeType",
    ManagedOnlineDeployment,
    KubernetesOnlineDeployment,
    fallback=OnlineDeploymentProperties,
)


class OnlineDeployment(TrackedResource[OnlineDeploymentPropertiesUnion]):
    identity: ManagedServiceIdentity | None = None
    kind: str | None = None
    sku: Sku | None = None


class OnlineDeploymentTrackedResourceArmPaginatedResult(PagedResult[OnlineDeployment]):
    """A paginated list of OnlineDeployment entities."""


class ContainerType(OpenEnum):
    STORAGE_INITIALIZER = "StorageInitializer"
    INFERENCE_SERVER = "InferenceServer"


class DeploymentLogsRequest(WireModel):
    container_type: ContainerType | None = None
    # The maximum number of lines to tail.
    tail: int | None = None


class DeploymentLogs(WireModel):
    content: str | None = None


# -- Batch -------------------------------------------------------------------------


class BatchEndpointDefaults(WireModel):
    """Batch endpoint default values."""

    deployment_name: str | None = None


class BatchEndpointProperties(WireModel):
    """Batch endpoint configuration."""

    endpoint_properties_base: Annotated[EndpointPropertiesBase, Flatten()]
    defaults: BatchEndpointDefaults | None = None
    provisioning_state: EndpointProvisioningState | None = None


class BatchEndpoint(TrackedResource[BatchEndpointProperties]):
    identity: ManagedServiceIdentity | None = None
    kind: str | None = None
    sku: Sku | None = None


class BatchEndpointTrackedResourceArmPaginatedResult(PagedResult[BatchEndpoint]):
    """A paginated list of BatchEndpoint entities."""


class BatchLoggingLevel(OpenEnum):
    """Log verbosity for batch inferencing."""

    INFO = "Info"
    WARNING = "Warning"
    DEBUG = "Debug"


class BatchOutputAction(OpenEnum):
    """Enum to determine how batch inferencing will handle output."""

    SUMMARY_ONLY = "SummaryOnly"
    APPEND_ROW = "AppendRow"


class BatchRetrySettings(WireModel):
    """Retry settings for a batch inference operation."""

    max_retries: int | None = None
    timeout: str | None = None


class ReferenceType(OpenEnum):
    """Enum to determine which reference method to use for an asset."""

    ID = "Id"
    DATA_PATH = "DataPath"
    OUTPUT_PATH = "OutputPath"


class AssetReferenceBase(WireModel):
    """Base definition for asset references."""

    reference_type: ReferenceType


class IdAssetReference(WireModel):
    """Reference to an asset via its ARM resource ID."""

    wire_tag: ClassVar[str] = ReferenceType.ID.value

    asset_reference_base: Annotated[AssetReferenceBase, Flatten()]
    asset_id: str


class DataPathAssetReference(WireModel):
    """Reference to an asset via its path in a datastore."""

    wire_tag: ClassVar[str] = ReferenceType.DATA_PATH.value

    asset_reference_base: Annotated[AssetReferenceBase, Flatten()]
    datastore_id: str | None = None
    path: str | None = None


class OutputPathAssetReference(WireModel):
    """Reference to an asset via its path in a job output."""

    wire_tag: ClassVar[str] = ReferenceType.OUTPUT_PATH.value

    asset_reference_base: Annotated[AssetReferenceBase, Flatten()]
    job_id: str | None = None
    path: str | None = None


AssetReferenceUnion = tagged_union(
    "referenceType",
    IdAssetReference,
    DataPathAssetReference,
    OutputPathAssetReference,
    fallback=AssetReferenceBase,
)


class DeploymentResourceConfiguration(WireModel):
    resource_configuration: Annotated[ResourceConfiguration, Flatten()] = Field(
        default_factory=ResourceConfiguration,
    )


class BatchDeploymentProperties(WireModel):
    """Batch inference settings per deployment."""

    endpoint_deployment_properties_base: Annotated[EndpointDeploymentPropertiesBase, Flatten()] = Field(
        default_factory=EndpointDeploymentPropertiesBase,
    )
    compute: str | None = None
    # -1 disables the error threshold.
    error_threshold: int | None = None
    logging_level: BatchLoggingLevel | None = None
    max_concurrency_per_instance: int | None = None
    mini_batch_size: int | None = None
    model: AssetReferenceUnion | None = None
    output_action: BatchOutputAction | None = None
    output_file_name: str | None = None
    provisioning_state: DeploymentProvisioningState | None = None
    resources: DeploymentResourceConfiguration | None = None
    retry_settings: BatchRetrySettings | None = None


class BatchDeployment(TrackedResource[BatchDeploymentProperties]):
    identity: ManagedServiceIdentity | None = None
    kind: str | None = None
    sku: Sku | None = None


class BatchDeploymentTrackedResourceArmPaginatedResult(PagedResult[BatchDeployment]):
    """A paginated list of BatchDeployment entities."""
