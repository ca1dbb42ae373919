"""Jobs: inputs and outputs, command/sweep/pipeline/AutoML jobs and their envelope."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import Resource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import IdentityConfigurationUnion, ResourceBase


class JobType(OpenEnum):
    """Enum to determine the type of job."""

    AUTO_ML = "AutoML"
    COMMAND = "Command"
    LABELING = "Labeling"
    SWEEP = "Sweep"
    PIPELINE = "Pipeline"
    SPARK = "Spark"


class JobStatus(OpenEnum):
    """The status of a job."""

    NOT_STARTED = "NotStarted"
    STARTING = "Starting"
    PROVISIONING = "Provisioning"
    PREPARING = "Preparing"
    QUEUED = "Queued"
    RUNNING = "Running"
    FINALIZING = "Finalizing"
    CANCEL_REQUESTED = "CancelRequested"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    NOT_RESPONDING = "NotResponding"
    PAUSED = "Paused"
    UNKNOWN = "Unknown"


# -- Inputs and outputs ------------------------------------------------------------


class JobInputType(OpenEnum):
    """Enum to determine the Job Input Type."""

    LITERAL = "literal"
    URI_FILE = "uri_file"
    URI_FOLDER = "uri_folder"
    MLTABLE = "mltable"
    CUSTOM_MODEL = "custom_model"
    MLFLOW_MODEL = "mlflow_model"
    TRITON_MODEL = "triton_model"


class JobOutputType(OpenEnum):
    """Enum to determine the Job Output Type."""

    URI_FILE = "uri_file"
    URI_FOLDER = "uri_folder"
    MLTABLE = "mltable"
    CUSTOM_MODEL = "custom_model"
    MLFLOW_MODEL = "mlflow_model"
    TRITON_MODEL = "triton_model"


class InputDeliveryMode(OpenEnum):
    """Enum to determine the input data delivery mode."""

    READ_ONLY_MOUNT = "ReadOnlyMount"
    READ_WRITE_MOUNT = "ReadWriteMount"
    DOWNLOAD = "Download"
    DIRECT = "Direct"
    EVAL_MOUNT = "EvalMount"
    EVAL_DOWNLOAD = "EvalDownload"


class OutputDeliveryMode(OpenEnum):
    """Output data delivery mode enums."""

    READ_WRITE_MOUNT = "ReadWriteMount"
    UPLOAD = "Upload"
    DIRECT = "Direct"


class JobInput(WireModel):
    """Command job definition."""

    description: str | None = None
    job_input_type: JobInputType


class AssetJobInput(WireModel):
    """Asset input type."""

    mode: InputDeliveryMode | None = None
    uri: str


class LiteralJobInput(WireModel):
    """Literal input type."""

    wire_tag: ClassVar[str] = JobInputType.LITERAL.value

    job_input: Annotated[JobInput, Flatten()]
    value: str


class UriFileJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.URI_FILE.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


class UriFolderJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.URI_FOLDER.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


class MLTableJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.MLTABLE.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


class CustomModelJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.CUSTOM_MODEL.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


class MLFlowModelJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.MLFLOW_MODEL.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


class TritonModelJobInput(WireModel):
    wire_tag: ClassVar[str] = JobInputType.TRITON_MODEL.value

    asset_job_input: Annotated[AssetJobInput, Flatten()]
    job_input: Annotated[JobInput, Flatten()]


JobInputUnion = tagged_union(
    "jobInputType",
    LiteralJobInput,
    UriFileJobInput,
    UriFolderJobInput,
    MLTableJobInput,
    CustomModelJobInput,
    MLFlowModelJobInput,
    TritonModelJobInput,
    fallback=JobInput,
)


class JobOutput(WireModel):
    """Job output definition container information on where to find job output/logs."""

    description: str | None = None
    job_output_type: JobOutputType


class AssetJobOutput(WireModel):
    """Asset output type."""

    mode: OutputDeliveryMode | None = None
    uri: str | None = None


class UriFileJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.URI_FILE.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


class UriFolderJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.URI_FOLDER.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


class MLTableJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.MLTABLE.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


class CustomModelJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.CUSTOM_MODEL.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


class MLFlowModelJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.MLFLOW_MODEL.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


class TritonModelJobOutput(WireModel):
    wire_tag: ClassVar[str] = JobOutputType.TRITON_MODEL.value

    asset_job_output: Annotated[AssetJobOutput, Flatten()] = Field(default_factory=AssetJobOutput)
    job_output: Annotated[JobOutput, Flatten()]


JobOutputUnion = tagged_union(
    "jobOutputType",
    UriFileJobOutput,
    UriFolderJobOutput,
    MLTableJobOutput,
    CustomModelJobOutput,
    MLFlowModelJobOutput,
    TritonModelJobOutput,
    fallback=JobOutput,
)


# -- Distribution, limits and resources --------------------------------------------


class DistributionType(OpenEnum):
    """Enum to determine the job distribution type."""

    PY_TORCH = "PyTorch"
    TENSOR_FLOW = "TensorFlow"
    MPI = "Mpi"


class DistributionConfiguration(WireModel):
    """Base definition for job distribution configuration."""

    distribution_type: DistributionType


class PyTorch(WireModel):
    """PyTorch distribution configuration."""

    wire_tag: ClassVar[str] = DistributionType.PY_TORCH.value

    distribution_configuration: Annotated[DistributionConfiguration, Flatten()]
    process_count_per_instance: int | None = None


class TensorFlow(WireModel):
    """TensorFlow distribution configuration."""

    wire_tag: ClassVar[str] = DistributionType.TENSOR_FLOW.value

    distribution_configuration: Annotated[DistributionConfiguration, Flatten()]
    parameter_server_count: int | None = None
    worker_count: int | None = None


class Mpi(WireModel):
    """MPI distribution configuration."""

    wire_tag: ClassVar[str] = DistributionType.MPI.value

    distribution_configuration: Annotated[DistributionConfiguration, Flatten()]
    process_count_per_instance: int | None = None


DistributionConfigurationUnion = tagged_union(
    "distributionType",
    PyTorch,
    TensorFlow,
    Mpi,
    fallback=DistributionConfiguration,
)


class JobLimitsType(OpenEnum):
    COMMAND = "Command"
    SWEEP = "Sweep"


class JobLimits(WireModel):
    job_limits_type: JobLimitsType
    # ISO 8601 duration.
    timeout: str | None = None


class CommandJobLimits(WireModel):
    """Command Job limit class."""

    job_limits: Annotated[JobLimits, Flatten()]


class SweepJobLimits(WireModel):
    """Sweep Job limit class."""

    job_limits: Annotated[JobLimits, Flatten()]
    max_concurrent_trials: int | None = None
    max_total_trials: int | None = None
    trial_timeout: str | None = None


class ResourceConfiguration(WireModel):
    instance_count: int | None = None
    instance_type: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)


class JobResourceConfiguration(WireModel):
    resource_configuration: Annotated[ResourceConfiguration, Flatten()] = Field(
        default_factory=ResourceConfiguration,
    )
    docker_args: str | None = None
    # Size of the docker container's shared memory block, e.g. "2g".
    shm_size: str | None = None


class JobService(WireModel):
    """Job endpoint definition."""

    endpoint: str | None = None
    error_message: str | None = None
    job_service_type: str | None = None
    port: int | None = None
    properties: dict[str, str] = Field(default_factory=dict)
    status: str | None = None


# -- Sweep -------------------------------------------------------------------------


class EarlyTerminationPolicyType(OpenEnum):
    BANDIT = "Bandit"
    MEDIAN_STOPPING = "MedianStopping"
    TRUNCATION_SELECTION = "TruncationSelection"


class EarlyTerminationPolicy(WireModel):
    """Early termination policies enable canceling poor-performing runs before they complete."""

    delay_evaluation: int | None = None
    evaluation_interval: int | None = None
    policy_type: EarlyTerminationPolicyType


class BanditPolicy(WireModel):
    """Defines an early termination policy based on slack criteria, and a frequency and delay interval for evaluation."""

    wire_tag: ClassVar[str] = EarlyTerminationPolicyType.BANDIT.value

    early_termination_policy: Annotated[EarlyTerminationPolicy, Flatten()]
    slack_amount: float | None = None
    slack_factor: float | None = None


class MedianStoppingPolicy(WireModel):
    """Defines an early termination policy based on running averages of the primary metric of all runs."""

    wire_tag: ClassVar[str] = EarlyTerminationPolicyType.MEDIAN_STOPPING.value

    early_termination_policy: Annotated[EarlyTerminationPolicy, Flatten()]


class TruncationSelectionPolicy(WireModel):
    """Defines an early termination policy that cancels a given percentage of runs at each evaluation interval."""

    wire_tag: ClassVar[str] = EarlyTerminationPolicyType.TRUNCATION_SELECTION.value

    early_termination_policy: Annotated[EarlyTerminationPolicy, Flatten()]
    truncation_percentage: int | None = None


EarlyTerminationPolicyUnion = tagged_union(
    "policyType",
    BanditPolicy,
    MedianStoppingPolicy,
    TruncationSelectionPolicy,
    fallback=EarlyTerminationPolicy,
)


class SamplingAlgorithmType(OpenEnum):
    GRID = "Grid"
    RANDOM = "Random"
    BAYESIAN = "Bayesian"


class SamplingAlgorithm(WireModel):
    """The Sampling Algorithm used to generate hyperparameter values."""

    sampling_algorithm_type: SamplingAlgorithmType


class GridSamplingAlgorithm(WireModel):
    wire_tag: ClassVar[str] = SamplingAlgorithmType.GRID.value

    sampling_algorithm: Annotated[SamplingAlgorithm, Flatten()]


class RandomSamplingAlgorithmRule(OpenEnum):
    """The specific type of random algorithm."""

    RANDOM = "Random"
    SOBOL = "Sobol"


class RandomSamplingAlgorithm(WireModel):
    wire_tag: ClassVar[str] = SamplingAlgorithmType.RANDOM.value

    sampling_algorithm: Annotated[SamplingAlgorithm, Flatten()]
    rule: RandomSamplingAlgorithmRule | None = None
    seed: int | None = None


class BayesianSamplingAlgorithm(WireModel):
    wire_tag: ClassVar[str] = SamplingAlgorithmType.BAYESIAN.value

    sampling_algorithm: Annotated[SamplingAlgorithm, Flatten()]


SamplingAlgorithmUnion = tagged_union(
    "samplingAlgorithmType",
    GridSamplingAlgorithm,
    RandomSamplingAlgorithm,
    BayesianSamplingAlgorithm,
    fallback=SamplingAlgorithm,
)


class Goal(OpenEnum):
    """Defines supported metric goals for hyperparameter tuning."""

    MINIMIZE = "Minimize"
    MAXIMIZE = "Maximize"


class Objective(WireModel):
    """Optimization objective."""

    goal: Goal
    primary_metric: str


class TrialComponent(WireModel):
    """Trial component definition."""

    code_id: str | None = None
    command: str
    distribution: DistributionConfigurationUnion | None = None
    environment_id: str
    environment_variables: dict[str, str] = Field(default_factory=dict)
    resources: JobResourceConfiguration | None = None


# -- AutoML ------------------------------------------------------------------------


class TaskType(OpenEnum):
    """AutoMLJob Task type."""

    CLASSIFICATION = "Classification"
    REGRESSION = "Regression"
    FORECASTING = "Forecasting"
    IMAGE_CLASSIFICATION = "ImageClassification"
    IMAGE_CLASSIFICATION_MULTILABEL = "ImageClassificationMultilabel"
    IMAGE_OBJECT_DETECTION = "ImageObjectDetection"
    IMAGE_INSTANCE_SEGMENTATION = "ImageInstanceSegmentation"
    TEXT_CLASSIFICATION = "TextClassification"
    TEXT_CLASSIFICATION_MULTILABEL = "TextClassificationMultilabel"
    TEXT_NER = "TextNER"


class LogVerbosity(OpenEnum):
    """Enum for setting log verbosity."""

    NOT_SET = "NotSet"
    DEBUG = "Debug"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class ClassificationPrimaryMetrics(OpenEnum):
    """Primary metrics for classification tasks."""

    AUC_WEIGHTED = "AUCWeighted"
    ACCURACY = "Accuracy"
    NORM_MACRO_RECALL = "NormMacroRecall"
    AVERAGE_PRECISION_SCORE_WEIGHTED = "AveragePrecisionScoreWeighted"
    PRECISION_SCORE_WEIGHTED = "PrecisionScoreWeighted"


class ClassificationMultilabelPrimaryMetrics(OpenEnum):
    """Primary metrics for classification multilabel tasks."""

    AUC_WEIGHTED = "AUCWeighted"
    ACCURACY = "Accuracy"
    NORM_MACRO_RECALL = "NormMacroRecall"
    AVERAGE_PRECISION_SCORE_WEIGHTED = "AveragePrecisionScoreWeighted"
    PRECISION_SCORE_WEIGHTED = "PrecisionScoreWeighted"
    IOU = "IOU"


class RegressionPrimaryMetrics(OpenEnum):
    """Primary metrics for Regression task."""

    SPEARMAN_CORRELATION = "SpearmanCorrelation"
    NORMALIZED_ROOT_MEAN_SQUARED_ERROR = "NormalizedRootMeanSquaredError"
    R2_SCORE = "R2Score"
    NORMALIZED_MEAN_ABSOLUTE_ERROR = "NormalizedMeanAbsoluteError"


class ForecastingPrimaryMetrics(OpenEnum):
    """Primary metrics for Forecasting task."""

    SPEARMAN_CORRELATION = "SpearmanCorrelation"
    NORMALIZED_ROOT_MEAN_SQUARED_ERROR = "NormalizedRootMeanSquaredError"
    R2_SCORE = "R2Score"
    NORMALIZED_MEAN_ABSOLUTE_ERROR = "NormalizedMeanAbsoluteError"


class ObjectDetectionPrimaryMetrics(OpenEnum):
    """Primary metrics for Image ObjectDetection task."""

    MEAN_AVERAGE_PRECISION = "MeanAveragePrecision"


class InstanceSegmentationPrimaryMetrics(OpenEnum):
    """Primary metrics for InstanceSegmentation tasks."""

    MEAN_AVERAGE_PRECISION = "MeanAveragePrecision"


class AutoMLVertical(WireModel):
    """AutoML vertical class.

    Base class for AutoML verticals - TableVertical/ImageVertical/NLPVertical.
    """

    log_verbosity: LogVerbosity | None = None
    target_column_name: str | None = None
    task_type: TaskType
    training_data: MLTableJobInput


class NCrossValidationsMode(OpenEnum):
    """Determines how N-Cross validations value is determined."""

    AUTO = "Auto"
    CUSTOM = "Custom"


class NCrossValidations(WireModel):
    """N-Cross validations value."""

    mode: NCrossValidationsMode


class AutoNCrossValidations(WireModel):
    wire_tag: ClassVar[str] = NCrossValidationsMode.AUTO.value

    n_cross_validations: Annotated[NCrossValidations, Flatten()]


class CustomNCrossValidations(WireModel):
    wire_tag: ClassVar[str] = NCrossValidationsMode.CUSTOM.value

    n_cross_validations: Annotated[NCrossValidations, Flatten()]
    value: int


NCrossValidationsUnion = tagged_union(
    "mode",
    AutoNCrossValidations,
    CustomNCrossValidations,
    fallback=NCrossValidations,
)


class TableVertical(WireModel):
    """Settings shared by the tabular verticals."""

    cv_split_column_names: list[str] = Field(default_factory=list)
    n_cross_validations: NCrossValidationsUnion | None = None
    test_data: MLTableJobInput | None = None
    test_data_size: float | None = None
    validation_data: MLTableJobInput | None = None
    validation_data_size: float | None = None
    weight_column_name: str | None = None


class Classification(WireModel):
    """Classification task in AutoML Table vertical."""

    wire_tag: ClassVar[str] = TaskType.CLASSIFICATION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    table_vertical: Annotated[TableVertical, Flatten()] = Field(default_factory=TableVertical)
    positive_label: str | None = None
    primary_metric: ClassificationPrimaryMetrics | None = None


class Regression(WireModel):
    """Regression task in AutoML Table vertical."""

    wire_tag: ClassVar[str] = TaskType.REGRESSION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    table_vertical: Annotated[TableVertical, Flatten()] = Field(default_factory=TableVertical)
    primary_metric: RegressionPrimaryMetrics | None = None


class ForecastHorizonMode(OpenEnum):
    """Enum to determine forecast horizon selection mode."""

    AUTO = "Auto"
    CUSTOM = "Custom"


class ForecastHorizon(WireModel):
    """The desired maximum forecast horizon in units of time-series frequency."""

    mode: ForecastHorizonMode


class AutoForecastHorizon(WireModel):
    wire_tag: ClassVar[str] = ForecastHorizonMode.AUTO.value

    forecast_horizon: Annotated[ForecastHorizon, Flatten()]


class CustomForecastHorizon(WireModel):
    wire_tag: ClassVar[str] = ForecastHorizonMode.CUSTOM.value

    forecast_horizon: Annotated[ForecastHorizon, Flatten()]
    value: int


ForecastHorizonUnion = tagged_union(
    "mode",
    AutoForecastHorizon,
    CustomForecastHorizon,
    fallback=ForecastHorizon,
)


class ForecastingSettings(WireModel):
    """Forecasting specific parameters."""

    country_or_region_for_holidays: str | None = None
    forecast_horizon: ForecastHorizonUnion | None = None
    time_column_name: str | None = None
    time_series_id_column_names: list[str] = Field(default_factory=list)


class Forecasting(WireModel):
    """Forecasting task in AutoML Table vertical."""

    wire_tag: ClassVar[str] = TaskType.FORECASTING.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    table_vertical: Annotated[TableVertical, Flatten()] = Field(default_factory=TableVertical)
    forecasting_settings: ForecastingSettings | None = None
    primary_metric: ForecastingPrimaryMetrics | None = None


class ImageLimitSettings(WireModel):
    """Limit settings for the AutoML job."""

    max_concurrent_trials: int | None = None
    max_trials: int | None = None
    timeout: str | None = None


class ImageVertical(WireModel):
    """Abstract class for AutoML tasks that train image (computer vision) models."""

    limit_settings: ImageLimitSettings
    validation_data: MLTableJobInput | None = None
    validation_data_size: float | None = None


class ImageClassification(WireModel):
    """Image Classification. Multi-class image classification is used when an image is classified with only a single label from a set of classes."""

    wire_tag: ClassVar[str] = TaskType.IMAGE_CLASSIFICATION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    image_vertical: Annotated[ImageVertical, Flatten()]
    primary_metric: ClassificationPrimaryMetrics | None = None


class ImageClassificationMultilabel(WireModel):
    """Image Classification Multilabel. An image can be classified with one or more labels from a set of labels."""

    wire_tag: ClassVar[str] = TaskType.IMAGE_CLASSIFICATION_MULTILABEL.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    image_vertical: Annotated[ImageVertical, Flatten()]
    primary_metric: ClassificationMultilabelPrimaryMetrics | None = None


class ImageObjectDetection(WireModel):
    """Image Object Detection. Identifies objects in an image and locates each with a bounding box."""

    wire_tag: ClassVar[str] = TaskType.IMAGE_OBJECT_DETECTION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    image_vertical: Annotated[ImageVertical, Flatten()]
    primary_metric: ObjectDetectionPrimaryMetrics | None = None


class ImageInstanceSegmentation(WireModel):
    """Image Instance Segmentation. Identifies objects at the pixel level, drawing a polygon around each."""

    wire_tag: ClassVar[str] = TaskType.IMAGE_INSTANCE_SEGMENTATION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    image_vertical: Annotated[ImageVertical, Flatten()]
    primary_metric: InstanceSegmentationPrimaryMetrics | None = None


class NlpVertical(WireModel):
    """Abstract class for NLP related AutoML tasks."""

    validation_data: MLTableJobInput | None = None


class TextClassification(WireModel):
    """Text Classification task in AutoML NLP vertical."""

    wire_tag: ClassVar[str] = TaskType.TEXT_CLASSIFICATION.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    nlp_vertical: Annotated[NlpVertical, Flatten()] = Field(default_factory=NlpVertical)
    primary_metric: ClassificationPrimaryMetrics | None = None


class TextClassificationMultilabel(WireModel):
    """Text Classification Multilabel task in AutoML NLP vertical."""

    wire_tag: ClassVar[str] = TaskType.TEXT_CLASSIFICATION_MULTILABEL.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    nlp_vertical: Annotated[NlpVertical, Flatten()] = Field(default_factory=NlpVertical)
    # Read-only: the service always reports this metric.
    primary_metric: ClassificationMultilabelPrimaryMetrics | None = None


class TextNer(WireModel):
    """Text-NER task in AutoML NLP vertical."""

    wire_tag: ClassVar[str] = TaskType.TEXT_NER.value

    auto_ml_vertical: Annotated[AutoMLVertical, Flatten()]
    nlp_vertical: Annotated[NlpVertical, Flatten()] = Field(default_factory=NlpVertical)
    primary_metric: ClassificationPrimaryMetrics | None = None


AutoMLVerticalUnion = tagged_union(
    "taskType",
    Classification,
    Regression,
    Forecasting,
    ImageClassification,
    ImageClassificationMultilabel,
    ImageObjectDetection,
    ImageInstanceSegmentation,
    TextClassification,
    TextClassificationMultilabel,
    TextNer,
    fallback=AutoMLVertical,
)


# -- Jobs --------------------------------------------------------------------------


class JobBaseProperties(WireModel):
    """Base definition for a job."""

    resource_base: Annotated[ResourceBase, Flatten()] = Field(default_factory=ResourceBase)
    component_id: str | None = None
    compute_id: str | None = None
    display_name: str | None = None
    experiment_name: str | None = None
    identity: IdentityConfigurationUnion | None = None
    is_archived: bool | None = None
    job_type: JobType
    services: dict[str, JobService] = Field(default_factory=dict)
    status: JobStatus | None = None


class CommandJob(WireModel):
    """Command job definition."""

    wire_tag: ClassVar[str] = JobType.COMMAND.value

    job_base_properties: Annotated[JobBaseProperties, Flatten()]
    code_id: str | None = None
    command: str
    distribution: DistributionConfigurationUnion | None = None
    environment_id: str
    environment_variables: dict[str, str] = Field(default_factory=dict)
    inputs: dict[str, JobInputUnion] = Field(default_factory=dict)
    limits: CommandJobLimits | None = None
    outputs: dict[str, JobOutputUnion] = Field(default_factory=dict)
    # Read-only, input-parameter values from the last run.
    parameters: Any = None
    resources: JobResourceConfiguration | None = None


class PipelineJob(WireModel):
    """Pipeline Job definition: defines generic to MFE attributes."""

    wire_tag: ClassVar[str] = JobType.PIPELINE.value

    job_base_properties: Annotated[JobBaseProperties, Flatten()]
    inputs: dict[str, JobInputUnion] = Field(default_factory=dict)
    jobs: dict[str, Any] = Field(default_factory=dict)
    outputs: dict[str, JobOutputUnion] = Field(default_factory=dict)
    settings: Any = None
    source_job_id: str | None = None


class SweepJob(WireModel):
    """Sweep job definition."""

    wire_tag: ClassVar[str] = JobType.SWEEP.value

    job_base_properties: Annotated[JobBaseProperties, Flatten()]
    early_termination: EarlyTerminationPolicyUnion | None = None
    inputs: dict[str, JobInputUnion] = Field(default_factory=dict)
    limits: SweepJobLimits | None = None
    objective: Objective
    outputs: dict[str, JobOutputUnion] = Field(default_factory=dict)
    sampling_algorithm: SamplingAlgorithmUnion
    search_space: dict[str, Any]
    trial: TrialComponent


class AutoMLJob(WireModel):
    """AutoMLJob class.

    Use this class for executing AutoML tasks like Classification/Regression etc.
    """

    wire_tag: ClassVar[str] = JobType.AUTO_ML.value

    job_base_properties: Annotated[JobBaseProperties, Flatten()]
    environment_id: str | None = None
    environment_variables: dict[str, str] = Field(default_factory=dict)
    outputs: dict[str, JobOutputUnion] = Field(default_factory=dict)
    resources: JobResourceConfiguration | None = None
    task_details: AutoMLVerticalUnion


JobBasePropertiesUnion = tagged_union(
    "jobType",
    CommandJob,
    PipelineJob,
    SweepJob,
    AutoMLJob,
    fallback=JobBaseProperties,
)


class JobBase(Resource[JobBasePropertiesUnion]):
    """Azure Resource Manager resource envelope."""


class JobBaseResourceArmPaginatedResult(PagedResult[JobBase]):
    """A paginated list of JobBase entities."""
