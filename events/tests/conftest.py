"""Shared test fixtures for the events app."""

from typing import Any

import pytest


@pytest.fixture()
def event_data() -> dict[str, Any]:
    """Return the fields of a valid event, without a slug."""
    return {
        "title": "PyData Meetup",
        "description": "An evening of talks about data.",
        "overview": "Talks, pizza and networking.",
        "image": "/images/pydata-meetup.png",
        "venue": "Community Hall",
        "location": "Berlin",
        "date": "2025-04-23",
        "time": "18:30",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Welcome", "Talks", "Networking"],
        "organizer": "PyData Berlin",
        "tags": ["python", "data"],
    }
