"""Compute targets: the generic compute record, its kinds and their listings."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import Continuable, PagedResult
from aml_models.core.resource import Resource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ErrorResponse, ManagedServiceIdentity, ResourceId, Sku
from aml_models.models.schedule import (
    RecurrenceFrequency,
    ScheduleProvisioningState,
    ScheduleStatus,
    TriggerType,
    WeekDay,
)


class ComputeType(OpenEnum):
    """The type of compute."""

    AKS = "AKS"
    KUBERNETES = "Kubernetes"
    AML_COMPUTE = "AmlCompute"
    COMPUTE_INSTANCE = "ComputeInstance"
    DATA_FACTORY = "DataFactory"
    VIRTUAL_MACHINE = "VirtualMachine"
    HD_INSIGHT = "HDInsight"
    DATABRICKS = "Databricks"
    DATA_LAKE_ANALYTICS = "DataLakeAnalytics"
    SYNAPSE_SPARK = "SynapseSpark"


class ComputeProvisioningState(OpenEnum):
    """The provision state of the cluster."""

    UNKNOWN = "Unknown"
    UPDATING = "Updating"
    CREATING = "Creating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class Compute(WireModel):
    """Machine Learning compute object.

    Every compute kind flattens this record into its own wire object, next to
    its kind-specific schema.
    """

    compute_type: ComputeType
    compute_location: str | None = None
    provisioning_state: ComputeProvisioningState | None = None
    description: str | None = None
    created_on: datetime | None = None
    modified_on: datetime | None = None
    resource_id: str | None = None
    provisioning_errors: list[ErrorResponse] = Field(default_factory=list)
    is_attached_compute: bool | None = None
    disable_local_auth: bool | None = None


# -- AKS ---------------------------------------------------------------------


class ClusterPurpose(OpenEnum):
    """Intended usage of the cluster."""

    __default__ = "FastProd"

    FAST_PROD = "FastProd"
    DENSE_PROD = "DenseProd"
    DEV_TEST = "DevTest"


class LoadBalancerType(OpenEnum):
    """Load Balancer Type."""

    __default__ = "PublicIp"

    PUBLIC_IP = "PublicIp"
    INTERNAL_LOAD_BALANCER = "InternalLoadBalancer"


class SslConfigStatus(OpenEnum):
    """Enable or disable ssl for scoring."""

    DISABLED = "Disabled"
    ENABLED = "Enabled"
    AUTO = "Auto"


class SslConfiguration(WireModel):
    """The ssl configuration for scoring."""

    status: SslConfigStatus | None = None
    cert: str | None = None
    key: str | None = None
    cname: str | None = None
    leaf_domain_label: str | None = None
    overwrite_existing_domain: bool | None = None


class AksNetworkingConfiguration(WireModel):
    """Advance configuration for AKS networking."""

    subnet_id: str | None = None
    service_cidr: str | None = None
    dns_service_ip: str | None = Field(default=None, alias="dnsServiceIP")
    docker_bridge_cidr: str | None = None


class SystemService(WireModel):
    """A system service running on a compute."""

    system_service_type: str | None = None
    public_ip_address: str | None = None
    version: str | None = None


class AksSchemaProperties(WireModel):
    """AKS properties."""

    cluster_fqdn: str | None = None
    system_services: list[SystemService] = Field(default_factory=list)
    agent_count: int | None = None
    agent_vm_size: str | None = None
    cluster_purpose: ClusterPurpose | None = None
    ssl_configuration: SslConfiguration | None = None
    aks_networking_configuration: AksNetworkingConfiguration | None = None
    load_balancer_type: LoadBalancerType | None = None
    load_balancer_subnet: str | None = None


class AksSchema(WireModel):
    properties: AksSchemaProperties | None = None


class Aks(WireModel):
    """A Machine Learning compute based on AKS."""

    wire_tag: ClassVar[str] = ComputeType.AKS.value

    compute: Annotated[Compute, Flatten()]
    aks_schema: Annotated[AksSchema, Flatten()] = Field(default_factory=AksSchema)


# -- Kubernetes ----------------------------------------------------------------


class InstanceTypeSchemaResources(WireModel):
    """Resource requests/limits for this instance type."""

    requests: dict[str, str] = Field(default_factory=dict)
    limits: dict[str, str] = Field(default_factory=dict)


class InstanceTypeSchema(WireModel):
    """Instance type schema."""

    node_selector: dict[str, str] = Field(default_factory=dict)
    resources: InstanceTypeSchemaResources | None = None


class KubernetesProperties(WireModel):
    """Kubernetes properties."""

    relay_connection_string: str | None = None
    service_bus_connection_string: str | None = None
    extension_principal_id: str | None = None
    extension_instance_release_train: str | None = None
    vc_name: str | None = None
    namespace: str | None = None
    default_instance_type: str | None = None
    instance_types: dict[str, InstanceTypeSchema] = Field(default_factory=dict)


class KubernetesSchema(WireModel):
    properties: KubernetesProperties | None = None


class Kubernetes(WireModel):
    """A Machine Learning compute based on Kubernetes Compute."""

    wire_tag: ClassVar[str] = ComputeType.KUBERNETES.value

    compute: Annotated[Compute, Flatten()]
    kubernetes_schema: Annotated[KubernetesSchema, Flatten()] = Field(default_factory=KubernetesSchema)


# -- AmlCompute --------------------------------------------------------------


class OsType(OpenEnum):
    """Compute OS Type."""

    __default__ = "Linux"

    LINUX = "Linux"
    WINDOWS = "Windows"


class VmPriority(OpenEnum):
    """Virtual Machine priority."""

    DEDICATED = "Dedicated"
    LOW_PRIORITY = "LowPriority"


class RemoteLoginPortPublicAccess(OpenEnum):
    """State of the public SSH port.

    ``NotSpecified`` closes the port on all nodes when a VNet is defined and
    opens it otherwise. It is only valid at creation time; afterwards the
    service reports either ``Enabled`` or ``Disabled``.
    """

    __default__ = "NotSpecified"

    ENABLED = "Enabled"
    DISABLED = "Disabled"
    NOT_SPECIFIED = "NotSpecified"


class AllocationState(OpenEnum):
    """Allocation state of the compute: ``Steady`` or ``Resizing``."""

    STEADY = "Steady"
    RESIZING = "Resizing"


class VirtualMachineImage(WireModel):
    """Virtual Machine image for Windows AML Compute."""

    id: str


class ScaleSettings(WireModel):
    """Scale settings for AML Compute."""

    max_node_count: int
    min_node_count: int | None = None
    # ISO 8601 duration, e.g. "PT2M"; kept verbatim.
    node_idle_time_before_scale_down: str | None = None


class UserAccountCredentials(WireModel):
    """Settings for user account that gets created on each on the nodes of a compute."""

    admin_user_name: str
    admin_user_ssh_public_key: str | None = None
    admin_user_password: str | None = None


class NodeStateCounts(WireModel):
    """Counts of various compute node states on the amlCompute."""

    idle_node_count: int | None = None
    running_node_count: int | None = None
    preparing_node_count: int | None = None
    unusable_node_count: int | None = None
    leaving_node_count: int | None = None
    preempted_node_count: int | None = None


class AmlComputeProperties(WireModel):
    """AML Compute properties."""

    os_type: OsType | None = None
    vm_size: str | None = None
    vm_priority: VmPriority | None = None
    virtual_machine_image: VirtualMachineImage | None = None
    isolated_network: bool | None = None
    scale_settings: ScaleSettings | None = None
    user_account_credentials: UserAccountCredentials | None = None
    subnet: ResourceId | None = None
    remote_login_port_public_access: RemoteLoginPortPublicAccess | None = None
    allocation_state: AllocationState | None = None
    allocation_state_transition_time: datetime | None = None
    errors: list[ErrorResponse] = Field(default_factory=list)
    current_node_count: int | None = None
    target_node_count: int | None = None
    node_state_counts: NodeStateCounts | None = None
    enable_node_public_ip: bool | None = None
    property_bag: Any = None


class AmlComputeSchema(WireModel):
    properties: AmlComputeProperties | None = None


class AmlCompute(WireModel):
    """An Azure Machine Learning compute."""

    wire_tag: ClassVar[str] = ComputeType.AML_COMPUTE.value

    compute: Annotated[Compute, Flatten()]
    aml_compute_schema: Annotated[AmlComputeSchema, Flatten()] = Field(default_factory=AmlComputeSchema)


class NodeState(OpenEnum):
    """State of the compute node."""

    IDLE = "idle"
    RUNNING = "running"
    PREPARING = "preparing"
    UNUSABLE = "unusable"
    LEAVING = "leaving"
    PREEMPTED = "preempted"


class AmlComputeNodeInformation(WireModel):
    """Compute node information related to a AmlCompute."""

    node_id: str | None = None
    private_ip_address: str | None = None
    public_ip_address: str | None = None
    port: int | None = None
    node_state: NodeState | None = None
    run_id: str | None = None


class AmlComputeNodesInformation(Continuable):
    """A page of nodes of an AmlCompute, with ``nextLink``."""

    items_field: ClassVar[str] = "nodes"

    nodes: list[AmlComputeNodeInformation] = Field(default_factory=list)


class ScaleSettingsInformation(WireModel):
    scale_settings: ScaleSettings | None = None


class ClusterUpdateProperties(WireModel):
    """The properties of a amlCompute that need to be updated."""

    properties: ScaleSettingsInformation | None = None


class ClusterUpdateParameters(WireModel):
    """AmlCompute update parameters."""

    properties: ClusterUpdateProperties | None = None


# -- ComputeInstance -----------------------------------------------------------


class ComputeInstanceState(OpenEnum):
    """Current state of a ComputeInstance."""

    CREATING = "Creating"
    CREATE_FAILED = "CreateFailed"
    DELETING = "Deleting"
    RUNNING = "Running"
    RESTARTING = "Restarting"
    JOB_RUNNING = "JobRunning"
    SETTING_UP = "SettingUp"
    SETUP_FAILED = "SetupFailed"
    STARTING = "Starting"
    STOPPED = "Stopped"
    STOPPING = "Stopping"
    USER_SETTING_UP = "UserSettingUp"
    USER_SETUP_FAILED = "UserSetupFailed"
    UNKNOWN = "Unknown"
    UNUSABLE = "Unusable"


class ApplicationSharingPolicy(OpenEnum):
    """Policy for sharing applications on a compute instance among workspace users."""

    __default__ = "Shared"

    PERSONAL = "Personal"
    SHARED = "Shared"


class SshPublicAccess(OpenEnum):
    """State of the public SSH port."""

    __default__ = "Disabled"

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class ComputeInstanceAuthorizationType(OpenEnum):
    """The Compute Instance Authorization type."""

    __default__ = "personal"

    PERSONAL = "personal"


class ComputeInstanceSshSettings(WireModel):
    """Specifies policy and settings for SSH access."""

    ssh_public_access: SshPublicAccess | None = None
    admin_user_name: str | None = None
    ssh_port: int | None = None
    admin_public_key: str | None = None


class ComputeInstanceApplication(WireModel):
    """Defines an Aml Instance application and its connectivity endpoint URI."""

    display_name: str | None = None
    endpoint_uri: str | None = None


class ComputeInstanceConnectivityEndpoints(WireModel):
    public_ip_address: str | None = None
    private_ip_address: str | None = None


class ComputeInstanceCreatedBy(WireModel):
    """Describes information on user who created this ComputeInstance."""

    user_name: str | None = None
    user_org_id: str | None = None
    user_id: str | None = None


class OperationName(OpenEnum):
    CREATE = "Create"
    START = "Start"
    STOP = "Stop"
    RESTART = "Restart"
    REIMAGE = "Reimage"
    DELETE = "Delete"


class OperationStatus(OpenEnum):
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    CREATE_FAILED = "CreateFailed"
    START_FAILED = "StartFailed"
    STOP_FAILED = "StopFailed"
    RESTART_FAILED = "RestartFailed"
    REIMAGE_FAILED = "ReimageFailed"
    DELETE_FAILED = "DeleteFailed"


class OperationTrigger(OpenEnum):
    USER = "User"
    SCHEDULE = "Schedule"
    IDLE_SHUTDOWN = "IdleShutdown"


class ComputeInstanceLastOperation(WireModel):
    """The last operation on ComputeInstance."""

    operation_name: OperationName | None = None
    operation_time: datetime | None = None
    operation_status: OperationStatus | None = None
    operation_trigger: OperationTrigger | None = None


class AssignedUser(WireModel):
    """A user that can be assigned to a compute instance."""

    object_id: str
    tenant_id: str


class PersonalComputeInstanceSettings(WireModel):
    assigned_user: AssignedUser | None = None


class ScriptReference(WireModel):
    """Script reference."""

    script_source: str | None = None
    script_data: str | None = None
    script_arguments: str | None = None
    timeout: str | None = None


class ScriptsToExecute(WireModel):
    """Customized setup scripts."""

    startup_script: ScriptReference | None = None
    creation_script: ScriptReference | None = None


class SetupScripts(WireModel):
    scripts: ScriptsToExecute | None = None


class ImageMetadata(WireModel):
    """Returns metadata about the operating system image for this compute instance."""

    current_image_version: str | None = None
    latest_image_version: str | None = None
    is_latest_os_image_version: bool | None = None


class ComputePowerAction(OpenEnum):
    """The compute power action."""

    START = "Start"
    STOP = "Stop"


class ComputeRecurrenceSchedule(WireModel):
    hours: list[int]
    minutes: list[int]
    month_days: list[int] = Field(default_factory=list)
    week_days: list[WeekDay] = Field(default_factory=list)


class ComputeRecurrence(WireModel):
    """The workflow trigger recurrence for a compute start/stop schedule."""

    frequency: RecurrenceFrequency | None = None
    interval: int | None = None
    start_time: str | None = None
    time_zone: str | None = None
    schedule: ComputeRecurrenceSchedule | None = None


class ComputeCron(WireModel):
    """The workflow trigger cron for a compute start/stop schedule."""

    start_time: str | None = None
    time_zone: str | None = None
    expression: str | None = None


class ComputeScheduleBase(WireModel):
    id: str | None = None
    provisioning_status: ScheduleProvisioningState | None = None
    status: ScheduleStatus | None = None


class ComputeStartStopSchedule(WireModel):
    """Compute start stop schedule properties."""

    id: str | None = None
    provisioning_status: ScheduleProvisioningState | None = None
    status: ScheduleStatus | None = None
    action: ComputePowerAction | None = None
    trigger_type: TriggerType | None = None
    recurrence: ComputeRecurrence | None = None
    cron: ComputeCron | None = None
    schedule: ComputeScheduleBase | None = None


class ComputeSchedules(WireModel):
    """The list of schedules to be applied on the computes."""

    compute_start_stop: list[ComputeStartStopSchedule] = Field(default_factory=list)


class ComputeInstanceProperties(WireModel):
    """Compute Instance properties."""

    vm_size: str | None = None
    subnet: ResourceId | None = None
    application_sharing_policy: ApplicationSharingPolicy | None = None
    ssh_settings: ComputeInstanceSshSettings | None = None
    os_image_metadata: ImageMetadata | None = None
    connectivity_endpoints: ComputeInstanceConnectivityEndpoints | None = None
    applications: list[ComputeInstanceApplication] = Field(default_factory=list)
    created_by: ComputeInstanceCreatedBy | None = None
    errors: list[ErrorResponse] = Field(default_factory=list)
    state: ComputeInstanceState | None = None
    compute_instance_authorization_type: ComputeInstanceAuthorizationType | None = None
    personal_compute_instance_settings: PersonalComputeInstanceSettings | None = None
    setup_scripts: SetupScripts | None = None
    last_operation: ComputeInstanceLastOperation | None = None
    schedules: ComputeSchedules | None = None
    enable_node_public_ip: bool | None = None


class ComputeInstanceSchema(WireModel):
    properties: ComputeInstanceProperties | None = None


class ComputeInstance(WireModel):
    """An Azure Machine Learning compute instance."""

    wire_tag: ClassVar[str] = ComputeType.COMPUTE_INSTANCE.value

    compute: Annotated[Compute, Flatten()]
    compute_instance_schema: Annotated[ComputeInstanceSchema, Flatten()] = Field(
        default_factory=ComputeInstanceSchema,
    )


# -- Attached computes ---------------------------------------------------------


class VirtualMachineSshCredentials(WireModel):
    """Admin credentials for virtual machine."""

    username: str | None = None
    password: str | None = None
    public_key_data: str | None = None
    private_key_data: str | None = None


class VirtualMachineSchemaProperties(WireModel):
    virtual_machine_size: str | None = None
    ssh_port: int | None = None
    notebook_server_port: int | None = None
    address: str | None = None
    administrator_account: VirtualMachineSshCredentials | None = None
    is_notebook_instance_compute: bool | None = None


class VirtualMachineSchema(WireModel):
    properties: VirtualMachineSchemaProperties | None = None


class VirtualMachine(WireModel):
    """A Machine Learning compute based on Azure Virtual Machines."""

    wire_tag: ClassVar[str] = ComputeType.VIRTUAL_MACHINE.value

    compute: Annotated[Compute, Flatten()]
    virtual_machine_schema: Annotated[VirtualMachineSchema, Flatten()] = Field(
        default_factory=VirtualMachineSchema,
    )


class HDInsightProperties(WireModel):
    """HDInsight compute properties."""

    ssh_port: int | None = None
    address: str | None = None
    administrator_account: VirtualMachineSshCredentials | None = None


class HDInsightSchema(WireModel):
    properties: HDInsightProperties | None = None


class HDInsight(WireModel):
    """A HDInsight compute."""

    wire_tag: ClassVar[str] = ComputeType.HD_INSIGHT.value

    compute: Annotated[Compute, Flatten()]
    hd_insight_schema: Annotated[HDInsightSchema, Flatten()] = Field(default_factory=HDInsightSchema)


class DatabricksProperties(WireModel):
    """Properties of Databricks."""

    databricks_access_token: str | None = None
    workspace_url: str | None = None


class DatabricksSchema(WireModel):
    properties: DatabricksProperties | None = None


class Databricks(WireModel):
    """A DataFactory compute."""

    wire_tag: ClassVar[str] = ComputeType.DATABRICKS.value

    compute: Annotated[Compute, Flatten()]
    databricks_schema: Annotated[DatabricksSchema, Flatten()] = Field(default_factory=DatabricksSchema)


class DataLakeAnalyticsSchemaProperties(WireModel):
    data_lake_store_account_name: str | None = None


class DataLakeAnalyticsSchema(WireModel):
    properties: DataLakeAnalyticsSchemaProperties | None = None


class DataLakeAnalytics(WireModel):
    """A DataLakeAnalytics compute."""

    wire_tag: ClassVar[str] = ComputeType.DATA_LAKE_ANALYTICS.value

    compute: Annotated[Compute, Flatten()]
    data_lake_analytics_schema: Annotated[DataLakeAnalyticsSchema, Flatten()] = Field(
        default_factory=DataLakeAnalyticsSchema,
    )


class DataFactory(WireModel):
    """A DataFactory compute."""

    wire_tag: ClassVar[str] = ComputeType.DATA_FACTORY.value

    compute: Annotated[Compute, Flatten()]


class AutoScaleProperties(WireModel):
    """Auto scale properties."""

    min_node_count: int | None = None
    enabled: bool | None = None
    max_node_count: int | None = None


class AutoPauseProperties(WireModel):
    """Auto pause properties."""

    delay_in_minutes: int | None = None
    enabled: bool | None = None


class SynapseSparkProperties(WireModel):
    auto_scale_properties: AutoScaleProperties | None = None
    auto_pause_properties: AutoPauseProperties | None = None
    spark_version: str | None = None
    node_count: int | None = None
    node_size: str | None = None
    node_size_family: str | None = None
    subscription_id: str | None = None
    resource_group: str | None = None
    workspace_name: str | None = None
    pool_name: str | None = None


class SynapseSpark(WireModel):
    """A SynapseSpark compute."""

    wire_tag: ClassVar[str] = ComputeType.SYNAPSE_SPARK.value

    compute: Annotated[Compute, Flatten()]
    properties: SynapseSparkProperties | None = None


ComputeUnion = tagged_union(
    "computeType",
    Aks,
    Kubernetes,
    AmlCompute,
    ComputeInstance,
    DataFactory,
    VirtualMachine,
    HDInsight,
    Databricks,
    DataLakeAnalytics,
    SynapseSpark,
    fallback=Compute,
)


class ComputeResource(Resource[ComputeUnion]):
    """Machine Learning compute object wrapped into ARM resource envelope."""

    properties: ComputeUnion | None = None
    identity: ManagedServiceIdentity | None = None
    location: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    sku: Sku | None = None


class PaginatedComputeResourcesList(PagedResult[ComputeResource]):
    """Paginated list of Machine Learning compute objects wrapped in ARM resource envelope."""


# -- Secrets -------------------------------------------------------------------


class ComputeSecrets(WireModel):
    """Secrets related to a Machine Learning compute. Might differ for every type of compute."""

    compute_type: ComputeType


class AksComputeSecretsProperties(WireModel):
    """Properties of AksComputeSecrets."""

    user_kube_config: str | None = None
    admin_kube_config: str | None = None
    image_pull_secret_name: str | None = None


class AksComputeSecrets(WireModel):
    """Secrets related to a Machine Learning compute based on AKS."""

    wire_tag: ClassVar[str] = ComputeType.AKS.value

    compute_secrets: Annotated[ComputeSecrets, Flatten()]
    aks_compute_secrets_properties: Annotated[AksComputeSecretsProperties, Flatten()] = Field(
        default_factory=AksComputeSecretsProperties,
    )


class VirtualMachineSecretsSchema(WireModel):
    administrator_account: VirtualMachineSshCredentials | None = None


class VirtualMachineSecrets(WireModel):
    """Secrets related to a Machine Learning compute based on AKS."""

    wire_tag: ClassVar[str] = ComputeType.VIRTUAL_MACHINE.value

    compute_secrets: Annotated[ComputeSecrets, Flatten()]
    virtual_machine_secrets_schema: Annotated[VirtualMachineSecretsSchema, Flatten()] = Field(
        default_factory=VirtualMachineSecretsSchema,
    )


class DatabricksComputeSecretsProperties(WireModel):
    databricks_access_token: str | None = None


class DatabricksComputeSecrets(WireModel):
    """Secrets related to a Machine Learning compute based on Databricks."""

    wire_tag: ClassVar[str] = ComputeType.DATABRICKS.value

    compute_secrets: Annotated[ComputeSecrets, Flatten()]
    databricks_compute_secrets_properties: Annotated[DatabricksComputeSecretsProperties, Flatten()] = Field(
        default_factory=DatabricksComputeSecretsProperties,
    )


ComputeSecretsUnion = tagged_union(
    "computeType",
    AksComputeSecrets,
    VirtualMachineSecrets,
    DatabricksComputeSecrets,
    fallback=ComputeSecrets,
)


# -- Virtual machine sizes -----------------------------------------------------


class BillingCurrency(OpenEnum):
    """Three lettered code specifying the currency of the VM price."""

    USD = "USD"


class UnitOfMeasure(OpenEnum):
    """The unit of time measurement for the specified VM price."""

    ONE_HOUR = "OneHour"


class VmPriceOsType(OpenEnum):
    """Operating system type used by the VM."""

    LINUX = "Linux"
    WINDOWS = "Windows"


class VmTier(OpenEnum):
    """The type of the VM."""

    STANDARD = "Standard"
    LOW_PRIORITY = "LowPriority"
    SPOT = "Spot"


class EstimatedVmPrice(WireModel):
    """The estimated price info for using a VM of a particular OS type, tier, etc."""

    retail_price: float
    os_type: VmPriceOsType
    vm_tier: VmTier


class EstimatedVmPrices(WireModel):
    """The estimated price info for using a VM."""

    billing_currency: BillingCurrency
    unit_of_measure: UnitOfMeasure
    values: list[EstimatedVmPrice]


class VirtualMachineSize(WireModel):
    """Describes the properties of a VM size."""

    name: str | None = None
    family: str | None = None
    v_cpus: int | None = Field(default=None, alias="vCPUs")
    gpus: int | None = None
    os_vhd_size_mb: int | None = Field(default=None, alias="osVhdSizeMB")
    max_resource_volume_mb: int | None = Field(default=None, alias="maxResourceVolumeMB")
    memory_gb: float | None = Field(default=None, alias="memoryGB")
    low_priority_capable: bool | None = None
    premium_io: bool | None = Field(default=None, alias="premiumIO")
    estimated_vm_prices: EstimatedVmPrices | None = Field(default=None, alias="estimatedVMPrices")
    supported_compute_types: list[str] = Field(default_factory=list)


class VirtualMachineSizeListResult(WireModel):
    """The List Virtual Machine size operation response."""

    value: list[VirtualMachineSize] = Field(default_factory=list)
