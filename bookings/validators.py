"""
Validators for the Booking model.

This module provides the email format check and the existence check that keeps every booking
pointing at a real event.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog
from django.core.exceptions import ValidationError

from events.models import Event


if TYPE_CHECKING:
    from bookings.models import Booking
    from utils.changes import FieldChanges


logger = structlog.get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email_address(value: str) -> None:
    """Validate that the value looks like local-part@domain.tld without whitespace."""
    if not EMAIL_PATTERN.fullmatch(value):
        msg = "Please provide a valid email address"
        raise ValidationError(msg, code="invalid")


def validate_event_reference(booking: Booking, changes: FieldChanges) -> None:
    """
    Check that the booking references an existing event.

    The lookup only runs when the reference is new or changed; unchanged references are trusted.

    Args:
        booking: The booking about to be saved
        changes: Fields changed since the booking was last persisted

    Raises:
        ValidationError: If the event id is missing or no such event exists

    """
    if not changes.has_changed("event_id"):
        return

    if booking.event_id is None:
        raise ValidationError({"event": ["Event ID is required"]})

    target_field = booking._meta.get_field("event").target_field  # noqa: SLF001
    try:
        event_id = target_field.to_python(booking.event_id)
    except ValidationError as exc:
        logger.warning("event_reference_malformed", event_id=booking.event_id)
        raise ValidationError({"event": ["Referenced event does not exist"]}) from exc

    if not Event.objects.filter(pk=event_id).exists():
        logger.warning("event_reference_missing", event_id=event_id)
        raise ValidationError({"event": ["Referenced event does not exist"]})

    logger.debug("booking_event_reference_checked", event_id=event_id)
