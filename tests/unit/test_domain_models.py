"""Decoding realistic payloads of each resource kind."""

from __future__ import annotations

import pytest

from aml_models.core.errors import MalformedPayloadError
from aml_models.core.inspect import find_unknown_enums
from aml_models.models.compute import (
    ClusterPurpose,
    ComputeInstance,
    ComputeInstanceState,
    ComputeResource,
    VirtualMachineSize,
)
from aml_models.models.datastore import (
    AzureBlobDatastore,
    AzureDataLakeGen2Datastore,
    Datastore,
    SasDatastoreCredentials,
)
from aml_models.models.job import (
    AutoMLJob,
    AutoNCrossValidations,
    ClassificationMultilabelPrimaryMetrics,
    CommandJob,
    CustomForecastHorizon,
    Forecasting,
    ForecastingSettings,
    JobBase,
    NCrossValidations,
    PyTorch,
    SweepJob,
    TextClassificationMultilabel,
    UriFolderJobInput,
)
from aml_models.models.monitoring import DataDriftMonitoringSignal, NumericalDataDriftMetricThreshold
from aml_models.models.registry import Registry
from aml_models.models.schedule import (
    CreateMonitorAction,
    CronTrigger,
    JobScheduleAction,
    RecurrenceTrigger,
    Schedule,
    WeekDay,
)
from aml_models.models.workspace import (
    PATAuthTypeWorkspaceConnectionProperties,
    WorkspaceConnectionPropertiesV2,
    WorkspaceConnectionPropertiesV2BasicResource,
)


class TestCompute:
    def test_compute_instance(self):
        payload = {
            "properties": {
                "computeType": "ComputeInstance",
                "properties": {
                    "vmSize": "STANDARD_DS3_V2",
                    "state": "Running",
                    "sshSettings": {"sshPublicAccess": "Disabled", "adminUserName": "azureuser"},
                    "schedules": {
                        "computeStartStop": [
                            {
                                "action": "Stop",
                                "triggerType": "Cron",
                                "cron": {"expression": "0 18 * * *", "timeZone": "UTC"},
                            }
                        ]
                    },
                },
            }
        }
        resource = ComputeResource.from_wire(payload)
        instance = resource.properties
        assert isinstance(instance, ComputeInstance)
        props = instance.compute_instance_schema.properties
        assert props.state is ComputeInstanceState.RUNNING
        assert props.schedules.compute_start_stop[0].cron.expression == "0 18 * * *"
        assert resource.to_wire() == payload

    def test_aks_cluster_purpose(self):
        resource = ComputeResource.from_wire(
            {"properties": {"computeType": "AKS", "properties": {"clusterPurpose": "DevTest"}}}
        )
        assert resource.properties.aks_schema.properties.cluster_purpose is ClusterPurpose.DEV_TEST

    def test_vm_size_irregular_keys(self):
        payload = {
            "name": "Standard_NC6",
            "family": "standardNCFamily",
            "vCPUs": 6,
            "gpus": 1,
            "osVhdSizeMB": 1047552,
            "maxResourceVolumeMB": 344064,
            "memoryGB": 56.0,
            "lowPriorityCapable": True,
            "premiumIO": False,
            "estimatedVMPrices": {
                "billingCurrency": "USD",
                "unitOfMeasure": "OneHour",
                "values": [{"retailPrice": 0.9, "osType": "Linux", "vmTier": "Standard"}],
            },
            "supportedComputeTypes": ["AmlCompute", "ComputeInstance"],
        }
        size = VirtualMachineSize.from_wire(payload)
        assert size.v_cpus == 6
        assert size.memory_gb == 56.0
        assert size.premium_io is False
        assert size.estimated_vm_prices.values[0].retail_price == 0.9
        assert size.to_wire() == payload


class TestDatastore:
    def test_blob_with_sas(self):
        payload = {
            "properties": {
                "datastoreType": "AzureBlob",
                "accountName": "mystorage",
                "containerName": "data",
                "credentials": {"credentialsType": "Sas", "secrets": {"secretsType": "Sas", "sasToken": "sv=x"}},
                "isDefault": True,
            }
        }
        datastore = Datastore.from_wire(payload)
        assert isinstance(datastore.properties, AzureBlobDatastore)
        assert isinstance(datastore.properties.datastore_properties.credentials, SasDatastoreCredentials)
        assert datastore.to_wire() == payload

    def test_gen2_requires_filesystem(self):
        with pytest.raises(MalformedPayloadError, match="filesystem"):
            Datastore.from_wire(
                {
                    "properties": {
                        "datastoreType": "AzureDataLakeGen2",
                        "accountName": "lake",
                        "credentials": {"credentialsType": "None"},
                    }
                }
            )

    def test_gen2(self):
        datastore = Datastore.from_wire(
            {
                "properties": {
                    "datastoreType": "AzureDataLakeGen2",
                    "accountName": "lake",
                    "filesystem": "raw",
                    "credentials": {"credentialsType": "None"},
                }
            }
        )
        assert isinstance(datastore.properties, AzureDataLakeGen2Datastore)
        assert datastore.properties.filesystem == "raw"


class TestJobs:
    def test_command_job(self):
        payload = {
            "properties": {
                "jobType": "Command",
                "command": "python train.py --data ${{inputs.data}}",
                "environmentId": "azureml:sklearn:1",
                "computeId": "/subscriptions/sub/computes/gpu",
                "inputs": {"data": {"jobInputType": "uri_folder", "uri": "azureml://datastores/d/paths/x", "mode": "ReadOnlyMount"}},
                "distribution": {"distributionType": "PyTorch", "processCountPerInstance": 2},
                "limits": {"jobLimitsType": "Command", "timeout": "PT1H"},
                "status": "Running",
            }
        }
        job = JobBase.from_wire(payload)
        command = job.properties
        assert isinstance(command, CommandJob)
        assert isinstance(command.inputs["data"], UriFolderJobInput)
        assert isinstance(command.distribution, PyTorch)
        assert command.limits.job_limits.timeout == "PT1H"
        assert job.to_wire() == payload

    def test_command_job_requires_command(self):
        with pytest.raises(MalformedPayloadError, match="command"):
            JobBase.from_wire({"properties": {"jobType": "Command", "environmentId": "env"}})

    def test_sweep_job(self):
        payload = {
            "jobType": "Sweep",
            "objective": {"goal": "Maximize", "primaryMetric": "accuracy"},
            "samplingAlgorithm": {"samplingAlgorithmType": "Random", "seed": 7},
            "earlyTermination": {"policyType": "Bandit", "slackFactor": 0.1, "evaluationInterval": 1},
            "searchSpace": {"lr": ["uniform", [0.01, 0.1]]},
            "trial": {"command": "python train.py", "environmentId": "env"},
        }
        sweep = SweepJob.from_wire(payload)
        assert sweep.sampling_algorithm.seed == 7
        assert sweep.early_termination.slack_factor == 0.1
        assert sweep.to_wire() == payload

    def test_sweep_job_rejects_null_search_space(self):
        payload = {
            "jobType": "Sweep",
            "objective": {"goal": "Maximize", "primaryMetric": "accuracy"},
            "samplingAlgorithm": {"samplingAlgorithmType": "Grid"},
            "searchSpace": None,
            "trial": {"command": "python train.py", "environmentId": "env"},
        }
        with pytest.raises(MalformedPayloadError, match="searchSpace"):
            SweepJob.from_wire(payload)

    def test_forecasting_mode_unions(self):
        payload = {
            "taskType": "Forecasting",
            "trainingData": {"jobInputType": "mltable", "uri": "azureml:sales:1"},
            "nCrossValidations": {"mode": "Auto"},
            "forecastingSettings": {
                "timeColumnName": "date",
                "forecastHorizon": {"mode": "Custom", "value": 14},
            },
        }
        task = Forecasting.from_wire(payload)
        assert isinstance(task.table_vertical.n_cross_validations, AutoNCrossValidations)
        horizon = task.forecasting_settings.forecast_horizon
        assert isinstance(horizon, CustomForecastHorizon)
        assert horizon.value == 14
        assert task.to_wire() == payload

    def test_forecasting_custom_horizon_requires_value(self):
        with pytest.raises(MalformedPayloadError, match="value"):
            ForecastingSettings.from_wire({"forecastHorizon": {"mode": "Custom"}})

    def test_forecasting_unknown_mode_is_reported(self):
        task = Forecasting.from_wire(
            {
                "taskType": "Forecasting",
                "trainingData": {"jobInputType": "mltable", "uri": "azureml:sales:1"},
                "nCrossValidations": {"mode": "Adaptive"},
            }
        )
        assert type(task.table_vertical.n_cross_validations) is NCrossValidations
        found = find_unknown_enums(task)
        assert [(f.path, f.enum, f.value) for f in found] == [("nCrossValidations.mode", "NCrossValidationsMode", "Adaptive")]

    def test_automl_text_multilabel(self):
        job = AutoMLJob.from_wire(
            {
                "jobType": "AutoML",
                "taskDetails": {
                    "taskType": "TextClassificationMultilabel",
                    "primaryMetric": "IOU",
                    "trainingData": {"jobInputType": "mltable", "uri": "azureml:train:1"},
                },
            }
        )
        task = job.task_details
        assert isinstance(task, TextClassificationMultilabel)
        assert task.primary_metric is ClassificationMultilabelPrimaryMetrics.IOU

    def test_unknown_job_type(self):
        job = JobBase.from_wire(
            {"properties": {"jobType": "SomeFutureJobType", "displayName": "etl", "entry": {"file": "x.py"}}}
        )
        assert job.properties.job_type.is_known is False
        assert job.properties.display_name == "etl"


class TestSchedule:
    def test_cron_job_schedule(self):
        payload = {
            "properties": {
                "displayName": "nightly",
                "isEnabled": True,
                "trigger": {"triggerType": "Cron", "expression": "0 2 * * *", "timeZone": "UTC"},
                "action": {
                    "actionType": "CreateJob",
                    "jobDefinition": {"jobType": "Command", "command": "python etl.py", "environmentId": "env"},
                },
            }
        }
        schedule = Schedule.from_wire(payload)
        assert isinstance(schedule.properties.trigger, CronTrigger)
        assert isinstance(schedule.properties.action, JobScheduleAction)
        assert isinstance(schedule.properties.action.job_definition, CommandJob)
        assert schedule.to_wire() == payload

    def test_recurrence_trigger(self):
        schedule = Schedule.from_wire(
            {
                "properties": {
                    "trigger": {
                        "triggerType": "Recurrence",
                        "frequency": "Week",
                        "interval": 1,
                        "schedule": {"hours": [9], "minutes": [0], "weekDays": ["Monday", "Friday"]},
                    },
                    "action": {"actionType": "InvokeBatchEndpoint", "endpointInvocationDefinition": {}},
                }
            }
        )
        trigger = schedule.properties.trigger
        assert isinstance(trigger, RecurrenceTrigger)
        assert trigger.schedule.week_days == [WeekDay.MONDAY, WeekDay.FRIDAY]

    def test_endpoint_invocation_definition_rejects_null(self):
        payload = {
            "properties": {
                "trigger": {"triggerType": "Cron", "expression": "0 9 * * *"},
                "action": {"actionType": "InvokeBatchEndpoint", "endpointInvocationDefinition": None},
            }
        }
        with pytest.raises(MalformedPayloadError, match="endpointInvocationDefinition"):
            Schedule.from_wire(payload)

    def test_empty_endpoint_invocation_definition_is_kept(self):
        action = {"actionType": "InvokeBatchEndpoint", "endpointInvocationDefinition": {}}
        schedule = Schedule.from_wire(
            {"properties": {"trigger": {"triggerType": "Cron", "expression": "0 9 * * *"}, "action": action}}
        )
        assert schedule.to_wire()["properties"]["action"] == action

    def test_monitor_action(self):
        action = {
            "actionType": "CreateMonitor",
            "monitorDefinition": {
                "computeConfiguration": {
                    "computeType": "ServerlessSpark",
                    "computeIdentity": {"computeIdentityType": "AmlToken"},
                    "instanceType": "standard_e4s_v3",
                    "runtimeVersion": "3.3",
                },
                "monitoringTarget": {"taskType": "Classification", "deploymentId": "dep"},
                "signals": {
                    "drift": {
                        "signalType": "DataDrift",
                        "metricThresholds": [
                            {"dataType": "Numerical", "metric": "JensenShannonDistance", "threshold": {"value": 0.1}}
                        ],
                        "productionData": {
                            "inputDataType": "Rolling",
                            "jobInputType": "mltable",
                            "uri": "azureml:prod:1",
                            "windowOffset": "P0D",
                            "windowSize": "P7D",
                        },
                        "referenceData": {"inputDataType": "Fixed", "jobInputType": "mltable", "uri": "azureml:ref:1"},
                    }
                },
            },
        }
        schedule = Schedule.from_wire(
            {"properties": {"trigger": {"triggerType": "Cron", "expression": "0 0 * * *"}, "action": action}}
        )
        monitor = schedule.properties.action
        assert isinstance(monitor, CreateMonitorAction)
        signal = monitor.monitor_definition.signals["drift"]
        assert isinstance(signal, DataDriftMonitoringSignal)
        assert isinstance(signal.metric_thresholds[0], NumericalDataDriftMetricThreshold)
        assert schedule.to_wire()["properties"]["action"] == action


class TestWorkspaceConnection:
    def test_pat_connection(self):
        payload = {
            "name": "github",
            "properties": {
                "authType": "PAT",
                "category": "Git",
                "target": "https://github.com/org/repo",
                "credentials": {"pat": "ghp_x"},
            },
        }
        connection = WorkspaceConnectionPropertiesV2BasicResource.from_wire(payload)
        assert isinstance(connection.properties, PATAuthTypeWorkspaceConnectionProperties)
        assert connection.properties.credentials.pat == "ghp_x"
        assert connection.to_wire() == payload

    def test_unknown_auth_type(self):
        connection = WorkspaceConnectionPropertiesV2BasicResource.from_wire(
            {"properties": {"authType": "OAuth2", "target": "https://example.com"}}
        )
        assert type(connection.properties) is WorkspaceConnectionPropertiesV2
        assert connection.properties.auth_type.is_known is False


class TestRegistry:
    def test_registry(self):
        payload = {
            "location": "eastus",
            "properties": {
                "discoveryUrl": "https://eastus.api.azureml.ms/registry/discovery",
                "regionDetails": [
                    {
                        "location": "eastus",
                        "acrDetails": [{"systemCreatedAcrAccount": {"acrAccountSku": "Premium"}}],
                    }
                ],
            },
        }
        registry = Registry.from_wire(payload)
        assert registry.properties.region_details[0].acr_details[0].system_created_acr_account.acr_account_sku == "Premium"
        assert registry.to_wire() == payload
