"""
Slug derivation for events.

Slugs are built from the event title and made unique against the existing events. The lookup is
supplied by the caller so this module stays free of queries.
"""

import random
import re
import string
from collections.abc import Callable
from datetime import datetime

import structlog
from django.utils import timezone
from django.utils.http import int_to_base36


logger = structlog.get_logger(__name__)

SLUG_ALPHABET = string.digits + string.ascii_lowercase
SHORT_ID_LENGTH = 6
MAX_SUFFIX_ATTEMPTS = 3
FALLBACK_SLUG = "untitled"

_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

_default_rng = random.Random()  # noqa: S311


def slugify_title(title: str) -> str:
    """Turn a title into a lowercase, hyphen-separated slug base."""
    base = _NON_SLUG_CHARS.sub("", title.lower().strip())
    base = _WHITESPACE.sub("-", base)
    base = _HYPHENS.sub("-", base).strip("-")
    return base or FALLBACK_SLUG


def generate_short_id(rng: random.Random | None = None) -> str:
    """Return a random six character token drawn from 0-9a-z."""
    rng = rng or _default_rng
    return "".join(rng.choice(SLUG_ALPHABET) for _ in range(SHORT_ID_LENGTH))


def unique_slug(
    title: str,
    slug_exists: Callable[[str], bool],
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> str:
    """
    Derive a slug for the title that no other event uses.

    Args:
        title: The event title
        slug_exists: Returns True if another event already uses the candidate
        rng: Random source for the suffixes (seed it in tests)
        now: Moment used for the timestamp fallback

    Returns:
        str: The bare slug base if free, otherwise the base with a random suffix. When every
        suffixed candidate collides, a timestamp-based candidate is returned unchecked.

    """
    base = slugify_title(title)
    if not slug_exists(base):
        return base

    for attempt in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        candidate = f"{base}-{generate_short_id(rng)}"
        if not slug_exists(candidate):
            return candidate
        logger.debug("slug_collision", candidate=candidate, attempt=attempt)

    now = now or timezone.now()
    timestamp = int_to_base36(int(now.timestamp() * 1000))
    candidate = f"{base}-{timestamp}{generate_short_id(rng)}"
    logger.warning("slug_fallback_used", base=base, candidate=candidate)
    return candidate
