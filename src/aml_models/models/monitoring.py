"""Model monitoring: input data, feature filters, thresholds and signals."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ManagedServiceIdentity
from aml_models.models.job import JobInputType, JobInputUnion


class MonitoringSignalType(OpenEnum):
    DATA_DRIFT = "DataDrift"
    PREDICTION_DRIFT = "PredictionDrift"
    DATA_QUALITY = "DataQuality"
    FEATURE_ATTRIBUTION_DRIFT = "FeatureAttributionDrift"
    MODEL_PERFORMANCE = "ModelPerformance"
    CUSTOM = "Custom"


class MonitoringNotificationType(OpenEnum):
    AML_NOTIFICATION = "AmlNotification"


class MonitoringFeatureDataType(OpenEnum):
    NUMERICAL = "Numerical"
    CATEGORICAL = "Categorical"


class MonitoringModelType(OpenEnum):
    CLASSIFICATION = "Classification"
    REGRESSION = "Regression"


# -- Input data ----------------------------------------------------------------


class MonitoringInputDataType(OpenEnum):
    """Monitoring input data type enum."""

    STATIC = "Static"
    ROLLING = "Rolling"
    FIXED = "Fixed"


class MonitoringInputDataBase(WireModel):
    # Mapping of column names to special uses.
    columns: dict[str, str] = Field(default_factory=dict)
    data_context: str | None = None
    input_data_type: MonitoringInputDataType
    job_input_type: JobInputType
    uri: str


class FixedInputData(WireModel):
    """Fixed input data definition."""

    wire_tag: ClassVar[str] = MonitoringInputDataType.FIXED.value

    monitoring_input_data_base: Annotated[MonitoringInputDataBase, Flatten()]


class RollingInputData(WireModel):
    """Rolling input data definition."""

    wire_tag: ClassVar[str] = MonitoringInputDataType.ROLLING.value

    monitoring_input_data_base: Annotated[MonitoringInputDataBase, Flatten()]
    preprocessing_component_id: str | None = None
    # ISO 8601 durations.
    window_offset: str
    window_size: str


class StaticInputData(WireModel):
    """Static input data definition."""

    wire_tag: ClassVar[str] = MonitoringInputDataType.STATIC.value

    monitoring_input_data_base: Annotated[MonitoringInputDataBase, Flatten()]
    preprocessing_component_id: str | None = None
    window_end: datetime
    window_start: datetime


MonitoringInputDataUnion = tagged_union(
    "inputDataType",
    FixedInputData,
    RollingInputData,
    StaticInputData,
    fallback=MonitoringInputDataBase,
)


# -- Feature filters -----------------------------------------------------------


class MonitoringFeatureFilterType(OpenEnum):
    ALL_FEATURES = "AllFeatures"
    TOP_N_BY_ATTRIBUTION = "TopNByAttribution"
    FEATURE_SUBSET = "FeatureSubset"


class MonitoringFeatureFilterBase(WireModel):
    filter_type: MonitoringFeatureFilterType


class AllFeatures(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureFilterType.ALL_FEATURES.value

    monitoring_feature_filter_base: Annotated[MonitoringFeatureFilterBase, Flatten()]


class FeatureSubset(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureFilterType.FEATURE_SUBSET.value

    monitoring_feature_filter_base: Annotated[MonitoringFeatureFilterBase, Flatten()]
    features: list[str]


class TopNFeaturesByAttribution(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureFilterType.TOP_N_BY_ATTRIBUTION.value

    monitoring_feature_filter_base: Annotated[MonitoringFeatureFilterBase, Flatten()]
    top: int | None = None


MonitoringFeatureFilterUnion = tagged_union(
    "filterType",
    AllFeatures,
    FeatureSubset,
    TopNFeaturesByAttribution,
    fallback=MonitoringFeatureFilterBase,
)


class FeatureImportanceMode(OpenEnum):
    DISABLED = "Disabled"
    ENABLED = "Enabled"


class FeatureImportanceSettings(WireModel):
    mode: FeatureImportanceMode | None = None
    target_column: str | None = None


# -- Thresholds ------------------------------------------------------------------


class MonitoringThreshold(WireModel):
    # Documented as a float in [0, 1] for rate metrics; not enforced.
    value: float | None = None


class MetricThresholdBase(WireModel):
    """Threshold shared by every per-data-type metric threshold."""

    data_type: MonitoringFeatureDataType
    threshold: MonitoringThreshold | None = None


class NumericalDataDriftMetric(OpenEnum):
    JENSEN_SHANNON_DISTANCE = "JensenShannonDistance"
    POPULATION_STABILITY_INDEX = "PopulationStabilityIndex"
    NORMALIZED_WASSERSTEIN_DISTANCE = "NormalizedWassersteinDistance"
    TWO_SAMPLE_KOLMOGOROV_SMIRNOV_TEST = "TwoSampleKolmogorovSmirnovTest"


class CategoricalDataDriftMetric(OpenEnum):
    JENSEN_SHANNON_DISTANCE = "JensenShannonDistance"
    POPULATION_STABILITY_INDEX = "PopulationStabilityIndex"
    PEARSONS_CHI_SQUARED_TEST = "PearsonsChiSquaredTest"


class NumericalDataDriftMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.NUMERICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: NumericalDataDriftMetric


class CategoricalDataDriftMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.CATEGORICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: CategoricalDataDriftMetric


DataDriftMetricThresholdUnion = tagged_union(
    "dataType",
    NumericalDataDriftMetricThreshold,
    CategoricalDataDriftMetricThreshold,
    fallback=MetricThresholdBase,
)


class NumericalPredictionDriftMetric(OpenEnum):
    JENSEN_SHANNON_DISTANCE = "JensenShannonDistance"
    POPULATION_STABILITY_INDEX = "PopulationStabilityIndex"
    NORMALIZED_WASSERSTEIN_DISTANCE = "NormalizedWassersteinDistance"
    TWO_SAMPLE_KOLMOGOROV_SMIRNOV_TEST = "TwoSampleKolmogorovSmirnovTest"


class CategoricalPredictionDriftMetric(OpenEnum):
    JENSEN_SHANNON_DISTANCE = "JensenShannonDistance"
    POPULATION_STABILITY_INDEX = "PopulationStabilityIndex"
    PEARSONS_CHI_SQUARED_TEST = "PearsonsChiSquaredTest"


class NumericalPredictionDriftMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.NUMERICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: NumericalPredictionDriftMetric


class CategoricalPredictionDriftMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.CATEGORICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: CategoricalPredictionDriftMetric


PredictionDriftMetricThresholdUnion = tagged_union(
    "dataType",
    NumericalPredictionDriftMetricThreshold,
    CategoricalPredictionDriftMetricThreshold,
    fallback=MetricThresholdBase,
)


class NumericalDataQualityMetric(OpenEnum):
    NULL_VALUE_RATE = "NullValueRate"
    DATA_TYPE_ERROR_RATE = "DataTypeErrorRate"
    OUT_OF_BOUNDS_RATE = "OutOfBoundsRate"


class CategoricalDataQualityMetric(OpenEnum):
    NULL_VALUE_RATE = "NullValueRate"
    DATA_TYPE_ERROR_RATE = "DataTypeErrorRate"
    OUT_OF_BOUNDS_RATE = "OutOfBoundsRate"


class NumericalDataQualityMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.NUMERICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: NumericalDataQualityMetric


class CategoricalDataQualityMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringFeatureDataType.CATEGORICAL.value

    metric_threshold: Annotated[MetricThresholdBase, Flatten()]
    metric: CategoricalDataQualityMetric


DataQualityMetricThresholdUnion = tagged_union(
    "dataType",
    NumericalDataQualityMetricThreshold,
    CategoricalDataQualityMetricThreshold,
    fallback=MetricThresholdBase,
)


class FeatureAttributionMetric(OpenEnum):
    NORMALIZED_DISCOUNTED_CUMULATIVE_GAIN = "NormalizedDiscountedCumulativeGain"


class FeatureAttributionMetricThreshold(WireModel):
    metric: FeatureAttributionMetric
    threshold: MonitoringThreshold | None = None


class ClassificationModelPerformanceMetric(OpenEnum):
    ACCURACY = "Accuracy"
    PRECISION = "Precision"
    RECALL = "Recall"


class RegressionModelPerformanceMetric(OpenEnum):
    MEAN_ABSOLUTE_ERROR = "MeanAbsoluteError"
    ROOT_MEAN_SQUARED_ERROR = "RootMeanSquaredError"
    MEAN_SQUARED_ERROR = "MeanSquaredError"


class ModelPerformanceMetricThresholdBase(WireModel):
    model_type: MonitoringModelType
    threshold: MonitoringThreshold | None = None


class ClassificationModelPerformanceMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringModelType.CLASSIFICATION.value

    model_performance_metric_threshold: Annotated[ModelPerformanceMetricThresholdBase, Flatten()]
    metric: ClassificationModelPerformanceMetric


class RegressionModelPerformanceMetricThreshold(WireModel):
    wire_tag: ClassVar[str] = MonitoringModelType.REGRESSION.value

    model_performance_metric_threshold: Annotated[ModelPerformanceMetricThresholdBase, Flatten()]
    metric: RegressionModelPerformanceMetric


ModelPerformanceMetricThresholdUnion = tagged_union(
    "modelType",
    ClassificationModelPerformanceMetricThreshold,
    RegressionModelPerformanceMetricThreshold,
    fallback=ModelPerformanceMetricThresholdBase,
)


class CustomMetricThreshold(WireModel):
    metric: str
    threshold: MonitoringThreshold | None = None


# -- Signals ---------------------------------------------------------------------


class MonitoringSignalBase(WireModel):
    notification_types: list[MonitoringNotificationType] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)
    signal_type: MonitoringSignalType


class DataDriftMonitoringSignal(WireModel):
    wire_tag: ClassVar[str] = MonitoringSignalType.DATA_DRIFT.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    feature_data_type_override: dict[str, MonitoringFeatureDataType] = Field(default_factory=dict)
    feature_importance_settings: FeatureImportanceSettings | None = None
    features: MonitoringFeatureFilterUnion | None = None
    metric_thresholds: list[DataDriftMetricThresholdUnion]
    production_data: MonitoringInputDataUnion
    reference_data: MonitoringInputDataUnion


class DataQualityMonitoringSignal(WireModel):
    wire_tag: ClassVar[str] = MonitoringSignalType.DATA_QUALITY.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    feature_data_type_override: dict[str, MonitoringFeatureDataType] = Field(default_factory=dict)
    feature_importance_settings: FeatureImportanceSettings | None = None
    features: MonitoringFeatureFilterUnion | None = None
    metric_thresholds: list[DataQualityMetricThresholdUnion]
    production_data: MonitoringInputDataUnion
    reference_data: MonitoringInputDataUnion


class PredictionDriftMonitoringSignal(WireModel):
    wire_tag: ClassVar[str] = MonitoringSignalType.PREDICTION_DRIFT.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    feature_data_type_override: dict[str, MonitoringFeatureDataType] = Field(default_factory=dict)
    metric_thresholds: list[PredictionDriftMetricThresholdUnion]
    production_data: MonitoringInputDataUnion
    reference_data: MonitoringInputDataUnion


class FeatureAttributionDriftMonitoringSignal(WireModel):
    wire_tag: ClassVar[str] = MonitoringSignalType.FEATURE_ATTRIBUTION_DRIFT.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    feature_data_type_override: dict[str, MonitoringFeatureDataType] = Field(default_factory=dict)
    feature_importance_settings: FeatureImportanceSettings
    metric_threshold: FeatureAttributionMetricThreshold
    production_data: list[MonitoringInputDataUnion]
    reference_data: MonitoringInputDataUnion


class MonitoringDataSegment(WireModel):
    feature: str | None = None
    values: list[str] = Field(default_factory=list)


class ModelPerformanceSignal(WireModel):
    """Model performance signal definition."""

    wire_tag: ClassVar[str] = MonitoringSignalType.MODEL_PERFORMANCE.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    data_segment: MonitoringDataSegment | None = None
    metric_threshold: ModelPerformanceMetricThresholdUnion
    production_data: list[MonitoringInputDataUnion]
    reference_data: MonitoringInputDataUnion


class MonitoringWorkspaceConnection(WireModel):
    """Monitoring workspace connection definition."""

    environment_variables: dict[str, str] = Field(default_factory=dict)
    secrets: dict[str, str] = Field(default_factory=dict)


class CustomMonitoringSignal(WireModel):
    wire_tag: ClassVar[str] = MonitoringSignalType.CUSTOM.value

    monitoring_signal_base: Annotated[MonitoringSignalBase, Flatten()]
    component_id: str
    input_assets: dict[str, MonitoringInputDataUnion] = Field(default_factory=dict)
    inputs: dict[str, JobInputUnion] = Field(default_factory=dict)
    metric_thresholds: list[CustomMetricThreshold]
    workspace_connection: MonitoringWorkspaceConnection | None = None


MonitoringSignalUnion = tagged_union(
    "signalType",
    DataDriftMonitoringSignal,
    DataQualityMonitoringSignal,
    PredictionDriftMonitoringSignal,
    FeatureAttributionDriftMonitoringSignal,
    ModelPerformanceSignal,
    CustomMonitoringSignal,
    fallback=MonitoringSignalBase,
)


# -- Monitor definition ------------------------------------------------------------


class MonitorComputeIdentityType(OpenEnum):
    AML_TOKEN = "AmlToken"
    MANAGED_IDENTITY = "ManagedIdentity"


class MonitorComputeIdentityBase(WireModel):
    compute_identity_type: MonitorComputeIdentityType


class AmlTokenComputeIdentity(WireModel):
    """AML token compute identity definition."""

    wire_tag: ClassVar[str] = MonitorComputeIdentityType.AML_TOKEN.value

    monitor_compute_identity_base: Annotated[MonitorComputeIdentityBase, Flatten()]


class ManagedComputeIdentity(WireModel):
    """Managed compute identity definition."""

    wire_tag: ClassVar[str] = MonitorComputeIdentityType.MANAGED_IDENTITY.value

    monitor_compute_identity_base: Annotated[MonitorComputeIdentityBase, Flatten()]
    identity: ManagedServiceIdentity | None = None


MonitorComputeIdentityUnion = tagged_union(
    "computeIdentityType",
    AmlTokenComputeIdentity,
    ManagedComputeIdentity,
    fallback=MonitorComputeIdentityBase,
)


class MonitorComputeType(OpenEnum):
    SERVERLESS_SPARK = "ServerlessSpark"


class MonitorComputeConfigurationBase(WireModel):
    compute_type: MonitorComputeType


class MonitorServerlessSparkCompute(WireModel):
    """Monitor serverless spark compute definition."""

    wire_tag: ClassVar[str] = MonitorComputeType.SERVERLESS_SPARK.value

    monitor_compute_configuration_base: Annotated[MonitorComputeConfigurationBase, Flatten()]
    compute_identity: MonitorComputeIdentityUnion
    instance_type: str
    runtime_version: str


MonitorComputeConfigurationUnion = tagged_union(
    "computeType",
    MonitorServerlessSparkCompute,
    fallback=MonitorComputeConfigurationBase,
)


class ModelTaskType(OpenEnum):
    """Model task type enum."""

    CLASSIFICATION = "Classification"
    REGRESSION = "Regression"


class MonitoringTarget(WireModel):
    """Monitoring target definition."""

    deployment_id: str | None = None
    model_id: str | None = None
    task_type: ModelTaskType


class MonitorEmailNotificationSettings(WireModel):
    emails: list[str] = Field(default_factory=list)


class MonitorNotificationSettings(WireModel):
    email_notification_settings: MonitorEmailNotificationSettings | None = None


class MonitorDefinition(WireModel):
    alert_notification_settings: MonitorNotificationSettings | None = None
    compute_configuration: MonitorComputeConfigurationUnion
    monitoring_target: MonitoringTarget | None = None
    # Signal name to signal definition.
    signals: dict[str, MonitoringSignalUnion]
