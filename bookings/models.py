"""Booking model: one reservation against an Event."""

from typing import Any, ClassVar

from django.db import models
from django.utils.translation import gettext_lazy as _

from bookings.validators import validate_email_address, validate_event_reference
from events.models import Event
from utils.changes import ChangeTrackingModel


MAX_EMAIL_LENGTH = 254


class Booking(ChangeTrackingModel):
    """
    Represents a reservation for an event.

    The event is referenced by id only: there is no database constraint, no cascade on delete
    and no reverse accessor on Event.
    """

    event = models.ForeignKey(
        Event,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="+",
        help_text=_("Event this booking is for"),
    )
    email = models.CharField(
        max_length=MAX_EMAIL_LENGTH,
        validators=[validate_email_address],
        error_messages={"blank": _("Email is required"), "null": _("Email is required")},
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Booking model."""

        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering: ClassVar[list[str]] = ["created_at"]

    def __str__(self) -> str:
        """Return the email and the booked event id."""
        return f"{self.email} for event {self.event_id}"

    def clean(self) -> None:
        """Ensure the email is trimmed and lowercase."""
        super().clean()
        if isinstance(self.email, str):
            self.email = self.email.strip().lower()

    def save(self, *args: Any, **kwargs: Any) -> None:
        """
        Validate the booking and save it.

        Django's own foreign key lookup is skipped in favour of validate_event_reference, which
        only queries when the event id changed.

        Raises:
            ValidationError: If the email is invalid or the referenced event does not exist

        """
        changes = self.get_field_changes()
        self.clean()
        self.full_clean(exclude=["event"], validate_unique=False)
        validate_event_reference(self, changes)
        super().save(*args, **kwargs)
