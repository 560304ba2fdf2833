"""Datastream payloads, including the schedule-only update body."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..parameters import Parameter
from ..validators import validate_date, validate_time
from .base import FlattenedRequestModel, RequestModel, ResponseModel, parameters_field, wire_field


@dataclass(slots=True)
class Schedule(RequestModel):
    """One fetch schedule; used in request bodies and echoed back by the API."""

    cron_preset: str | None = None
    cron_type: str | None = None
    cron_interval: int | None = None
    cron_interval_start: int | None = None
    cron_start_of_day: str | None = None
    time_range_preset: int | None = None
    delta_type: int | None = None
    delta_interval: int | None = None
    delta_interval_start: int | None = None
    delta_start_of_day: str | None = None
    fixed_start: str | None = None
    fixed_end: str | None = None
    offset_days: int | None = None
    not_before_date: str | None = None
    not_before_time: str | None = None

    def validate(self) -> None:
        validate_date(self.not_before_date, "not_before_date")
        validate_time(self.not_before_time, "not_before_time")


@dataclass(slots=True)
class DatastreamScheduleConfig(RequestModel):
    """Body for ``PATCH datastreams/{id}/``; carries no dynamic parameters."""

    schedules: list[Schedule] | None = None
    enabled: bool | None = None
    data_type: str | None = wire_field("datatype", default=None)


@dataclass(slots=True)
class DatastreamCreateConfig(FlattenedRequestModel):
    name: str | None = None
    description: str | None = None
    stack_id: int | None = wire_field("stack", default=None)
    auth_id: int | None = wire_field("auth", default=None)
    data_type: str | None = wire_field("datatype", default=None)
    retention_type: int | None = None
    retention_number: int | None = None
    overwrite_key_columns: bool | None = None
    overwrite_datastream: bool | None = None
    overwrite_filename: bool | None = None
    is_insights_mediaplan: bool | None = None
    manage_extract_names: bool | None = None
    extract_name_keys: str | None = None
    schedules: list[Schedule] | None = None
    enabled: bool | None = None
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class DatastreamUpdateConfig(FlattenedRequestModel):
    """General update body; scheduling goes through `DatastreamScheduleConfig`."""

    name: str | None = None
    description: str | None = None
    stack_id: int | None = wire_field("stack", default=None)
    auth_id: int | None = wire_field("auth", default=None)
    retention_type: int | None = None
    retention_number: int | None = None
    overwrite_key_columns: bool | None = None
    overwrite_datastream: bool | None = None
    overwrite_filename: bool | None = None
    is_insights_mediaplan: bool | None = None
    manage_extract_names: bool | None = None
    extract_name_keys: str | None = None
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class DatastreamResponse(ResponseModel):
    id: int = 0
    slug: str = ""
    name: str = ""
    description: str = ""
    data_type: str = wire_field("datatype", default="")
    creator: str = ""
    datastream_type_id: int = 0
    absolute_url: str = ""
    overview_url: str = ""
    created: str = ""
    updated: str = ""
    enabled: bool = False
    auth_id: int = wire_field("auth", default=0)
    stack_id: int = 0
    frequency: str = ""
    last_fetch: str = ""
    next_run: str = ""
    schedules: list[Schedule] = field(default_factory=list)
    retention_type: int = 0
    retention_number: int = 0
    overwrite_key_columns: bool = False
    overwrite_datastream: bool = False
    overwrite_filename: bool = False
    is_insights_mediaplan: bool = False
    manage_extract_names: bool = False
    extract_name_keys: str = ""
