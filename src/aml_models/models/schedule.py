"""Schedules: triggers, the actions they fire and the schedule envelope."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import Resource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ResourceBase
from aml_models.models.job import JobBasePropertiesUnion
from aml_models.models.monitoring import MonitorDefinition


class ScheduleStatus(OpenEnum):
    """Is the schedule enabled or disabled?"""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class ScheduleProvisioningState(OpenEnum):
    """The current deployment state of schedule."""

    COMPLETED = "Completed"
    PROVISIONING = "Provisioning"
    FAILED = "Failed"


class ScheduleProvisioningStatus(OpenEnum):
    CREATING = "Creating"
    UPDATING = "Updating"
    DELETING = "Deleting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class TriggerType(OpenEnum):
    RECURRENCE = "Recurrence"
    CRON = "Cron"


class RecurrenceFrequency(OpenEnum):
    """Enum to describe the frequency of a recurrence schedule."""

    MINUTE = "Minute"
    HOUR = "Hour"
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"


class WeekDay(OpenEnum):
    """Enum of weekday."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class TriggerBase(WireModel):
    # Timestamps here are ISO 8601 strings that may omit the UTC offset,
    # which is taken from time_zone instead; they are kept verbatim.
    end_time: str | None = None
    start_time: str | None = None
    time_zone: str | None = None
    trigger_type: TriggerType


class RecurrenceSchedule(WireModel):
    hours: list[int]
    minutes: list[int]
    month_days: list[int] = Field(default_factory=list)
    week_days: list[WeekDay] = Field(default_factory=list)


class RecurrenceTrigger(WireModel):
    wire_tag: ClassVar[str] = TriggerType.RECURRENCE.value

    trigger_base: Annotated[TriggerBase, Flatten()]
    frequency: RecurrenceFrequency
    interval: int
    schedule: RecurrenceSchedule | None = None


class CronTrigger(WireModel):
    wire_tag: ClassVar[str] = TriggerType.CRON.value

    trigger_base: Annotated[TriggerBase, Flatten()]
    # NCronTab expression.
    expression: str


TriggerUnion = tagged_union(
    "triggerType",
    RecurrenceTrigger,
    CronTrigger,
    fallback=TriggerBase,
)


class ScheduleActionType(OpenEnum):
    CREATE_JOB = "CreateJob"
    INVOKE_BATCH_ENDPOINT = "InvokeBatchEndpoint"
    CREATE_MONITOR = "CreateMonitor"


class ScheduleActionBase(WireModel):
    action_type: ScheduleActionType


class JobScheduleAction(WireModel):
    wire_tag: ClassVar[str] = ScheduleActionType.CREATE_JOB.value

    schedule_action_base: Annotated[ScheduleActionBase, Flatten()]
    job_definition: JobBasePropertiesUnion


class EndpointScheduleAction(WireModel):
    wire_tag: ClassVar[str] = ScheduleActionType.INVOKE_BATCH_ENDPOINT.value

    schedule_action_base: Annotated[ScheduleActionBase, Flatten()]
    # Free-form batch endpoint invocation body.
    endpoint_invocation_definition: dict[str, Any]


class CreateMonitorAction(WireModel):
    wire_tag: ClassVar[str] = ScheduleActionType.CREATE_MONITOR.value

    schedule_action_base: Annotated[ScheduleActionBase, Flatten()]
    monitor_definition: MonitorDefinition


ScheduleActionUnion = tagged_union(
    "actionType",
    JobScheduleAction,
    EndpointScheduleAction,
    CreateMonitorAction,
    fallback=ScheduleActionBase,
)


class ScheduleProperties(WireModel):
    """Base definition of a schedule."""

    resource_base: Annotated[ResourceBase, Flatten()] = Field(default_factory=ResourceBase)
    action: ScheduleActionUnion
    display_name: str | None = None
    is_enabled: bool | None = None
    provisioning_state: ScheduleProvisioningStatus | None = None
    trigger: TriggerUnion


class Schedule(Resource[ScheduleProperties]):
    """Azure Resource Manager resource envelope."""


class ScheduleResourceArmPaginatedResult(PagedResult[Schedule]):
    """A paginated list of Schedule entities."""
