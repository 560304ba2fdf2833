"""Format checks for schedule values sent to the API."""

from __future__ import annotations

import re

from .exceptions import ValidationError

DATE_YYYY_MM_DD = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")
TIME_HH_MM_SS = re.compile(r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$")


def validate_date(value: str | None, field_name: str) -> None:
    if value is None:
        return
    if not DATE_YYYY_MM_DD.match(value):
        raise ValidationError(
            f"Invalid date for {field_name}: {value!r}. Expected YYYY-MM-DD (e.g. 2025-05-01)."
        )


def validate_time(value: str | None, field_name: str) -> None:
    if value is None:
        return
    if not TIME_HH_MM_SS.match(value):
        raise ValidationError(
            f"Invalid time for {field_name}: {value!r}. Expected HH:MM:SS (e.g. 16:00:00)."
        )
