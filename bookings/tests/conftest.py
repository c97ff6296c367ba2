"""Shared test fixtures for the bookings app."""

import pytest
from model_bakery import baker

from events.models import Event


@pytest.fixture()
def event() -> Event:
    """Create and return a saved event."""
    return baker.make(
        Event,
        title="Bookable Event",
        date="2025-06-01",
        time="19:00",
        mode=Event.Mode.HYBRID,
        agenda=["Opening", "Closing"],
        tags=["community"],
    )


@pytest.fixture()
def other_event() -> Event:
    """Create and return a second saved event."""
    return baker.make(
        Event,
        title="Another Event",
        date="2025-07-01",
        time="9:30",
        mode=Event.Mode.ONLINE,
        agenda=["Talk"],
        tags=["online"],
    )
