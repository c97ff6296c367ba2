"""Defines the configuration for the Events app."""

from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Configuration class for the Events app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
