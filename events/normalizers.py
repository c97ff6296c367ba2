"""
Normalization applied to an Event right before it is validated and written.

This module provides:
- normalize_date: Canonical YYYY-MM-DD calendar dates
- normalize_time: Canonical 24-hour HH:MM times
- normalize_event: Slug derivation plus date/time normalization driven by FieldChanges
"""

from __future__ import annotations

import datetime as dt
import re
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ValidationError

from events.slugs import unique_slug


if TYPE_CHECKING:
    import random

    from events.models import Event
    from utils.changes import FieldChanges


DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
TIME_PATTERN = re.compile(r"([0-1]?[0-9]|2[0-3]):([0-5][0-9])")

# Missing values are reported by the required-field validation instead
EMPTY_VALUES = (None, "")

# Years 0-99 do not survive a round-trip through a UTC timestamp and are rejected
MIN_DATE_YEAR = 100

TRIMMED_FIELDS = (
    "title",
    "slug",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "audience",
    "organizer",
)


def normalize_date(value: Any) -> str:
    """
    Return the date as a zero-padded YYYY-MM-DD string.

    Raises:
        ValidationError: If the value is not a string, does not match the pattern, or is not a
            real calendar date

    """
    if not isinstance(value, str):
        msg = "Date must be a string in YYYY-MM-DD format"
        raise ValidationError(msg, code="invalid")

    match = DATE_PATTERN.fullmatch(value)
    if not match:
        msg = "Date must be in YYYY-MM-DD format"
        raise ValidationError(msg, code="invalid")

    year, month, day = (int(part) for part in match.groups())
    msg = "Invalid date components"
    if year < MIN_DATE_YEAR:
        raise ValidationError(msg, code="invalid_date")
    try:
        date = dt.date(year, month, day)
    except ValueError as exc:
        raise ValidationError(msg, code="invalid_date") from exc

    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def normalize_time(value: Any) -> str:
    """
    Return the time as a zero-padded HH:MM string.

    Raises:
        ValidationError: If the value is not a 24-hour H:MM or HH:MM time

    """
    match = TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        msg = "Time must be in HH:MM format"
        raise ValidationError(msg, code="invalid")

    hours, minutes = match.groups()
    return f"{hours.zfill(2)}:{minutes}"


def normalize_event(
    event: Event,
    changes: FieldChanges,
    *,
    rng: random.Random | None = None,
) -> None:
    """
    Prepare an event for validation, mutating it in place.

    The slug is derived when the event is new without a slug or its title changed. Date and time
    are normalized only when they changed.

    Args:
        event: The event about to be saved
        changes: Fields changed since the event was last persisted
        rng: Random source for slug suffixes

    Raises:
        ValidationError: Keyed by field when the date or time is malformed

    """
    for name in TRIMMED_FIELDS:
        value = getattr(event, name)
        if isinstance(value, str):
            setattr(event, name, value.strip())

    if isinstance(event.mode, str):
        event.mode = event.mode.lower()

    if isinstance(event.tags, list) and all(isinstance(tag, str) for tag in event.tags):
        # Tags behave as a set; keep the first occurrence of each
        event.tags = list(dict.fromkeys(event.tags))

    if ((changes.is_new and not event.slug) or changes.has_changed("title")) and event.title:
        event.slug = unique_slug(event.title, event.slug_taken, rng=rng)

    errors: dict[str, list[ValidationError]] = {}
    if changes.has_changed("date") and event.date not in EMPTY_VALUES:
        try:
            event.date = normalize_date(event.date)
        except ValidationError as exc:
            errors["date"] = exc.error_list
    if changes.has_changed("time") and event.time not in EMPTY_VALUES:
        try:
            event.time = normalize_time(event.time)
        except ValidationError as exc:
            errors["time"] = exc.error_list

    if errors:
        raise ValidationError(errors)
