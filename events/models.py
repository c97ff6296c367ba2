"""Event model: a schedulable public or private gathering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from django.db import models
from django.utils.text import format_lazy
from django.utils.translation import gettext_lazy as _

from events.normalizers import normalize_event
from events.validators import validate_string_list
from utils.changes import ChangeTrackingModel


if TYPE_CHECKING:
    import random

MAX_EVENT_TITLE_LENGTH = 200
MAX_EVENT_SLUG_LENGTH = 255
MAX_FIELD_LENGTH = 200
MAX_IMAGE_LENGTH = 500


def _required(label: str) -> dict[str, Any]:
    message = format_lazy(_("{label} is required"), label=label)
    return {"blank": message, "null": message}


class Event(ChangeTrackingModel):
    """Represents an event that visitors can book."""

    class Mode(models.TextChoices):
        """How attendees take part in the event."""

        ONLINE = "online", _("Online")
        OFFLINE = "offline", _("Offline")
        HYBRID = "hybrid", _("Hybrid")

    title = models.CharField(
        max_length=MAX_EVENT_TITLE_LENGTH,
        error_messages=_required("Title"),
        help_text=_("Display name of the event"),
    )
    slug = models.SlugField(
        max_length=MAX_EVENT_SLUG_LENGTH,
        unique=True,
        error_messages=_required("Slug"),
        help_text=_("URL identifier derived from the title"),
    )
    description = models.TextField(error_messages=_required("Description"))
    overview = models.TextField(error_messages=_required("Overview"))
    image = models.CharField(
        max_length=MAX_IMAGE_LENGTH,
        error_messages=_required("Image"),
        help_text=_("Reference to the event image"),
    )
    venue = models.CharField(max_length=MAX_FIELD_LENGTH, error_messages=_required("Venue"))
    location = models.CharField(max_length=MAX_FIELD_LENGTH, error_messages=_required("Location"))
    date = models.CharField(
        max_length=10,
        error_messages=_required("Date"),
        help_text=_("Calendar date as YYYY-MM-DD"),
    )
    time = models.CharField(
        max_length=5,
        error_messages=_required("Time"),
        help_text=_("Start time as 24-hour HH:MM"),
    )
    mode = models.CharField(
        max_length=10,
        choices=Mode.choices,
        error_messages=_required("Mode"),
    )
    audience = models.CharField(max_length=MAX_FIELD_LENGTH, error_messages=_required("Audience"))
    agenda = models.JSONField(
        validators=[validate_string_list],
        error_messages={
            "blank": _("Agenda must contain at least one item"),
            "null": _("Agenda is required"),
        },
        help_text=_("Ordered list of agenda items"),
    )
    organizer = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        error_messages=_required("Organizer"),
    )
    tags = models.JSONField(
        validators=[validate_string_list],
        error_messages={
            "blank": _("Tags must contain at least one item"),
            "null": _("Tags are required"),
        },
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Metadata for the Event model."""

        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering: ClassVar[list[str]] = ["date", "time"]

    def __str__(self) -> str:
        """Return the event title."""
        return self.title

    def slug_taken(self, candidate: str) -> bool:
        """Return True if another event already uses the slug."""
        return Event.objects.filter(slug=candidate).exclude(pk=self.pk).exists()

    def save(self, *args: Any, rng: random.Random | None = None, **kwargs: Any) -> None:
        """
        Normalize, validate and save the event.

        Uniqueness of the slug is left to the database constraint.

        Raises:
            ValidationError: If a field is missing or malformed

        """
        normalize_event(self, self.get_field_changes(), rng=rng)
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)
