"""Tests for slug derivation in events.slugs."""

import random
import re
from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest
from django.utils.http import int_to_base36

from events.slugs import (
    MAX_SUFFIX_ATTEMPTS,
    SHORT_ID_LENGTH,
    SLUG_ALPHABET,
    generate_short_id,
    slugify_title,
    unique_slug,
)


SLUG_RE = re.compile(r"[a-z0-9_]+(-[a-z0-9_]+)*")


class TestSlugifyTitle:
    """Verify slugify_title builds clean slug bases."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("My Event", "my-event"),
            ("  Hello, World!  ", "hello-world"),
            ("PyCon DE & PyData 2025", "pycon-de-pydata-2025"),
            ("a -- b", "a-b"),
            ("--leading and trailing--", "leading-and-trailing"),
            ("tabs\tand\nnewlines", "tabs-and-newlines"),
            ("Café Night", "caf-night"),
            ("snake_case title", "snake_case-title"),
        ],
    )
    def test_slugify(self, title: str, expected: str) -> None:
        """Lowercase, strip punctuation and join words with single hyphens."""
        assert slugify_title(title) == expected

    @pytest.mark.parametrize("title", ["", "   ", "!!!", "---", "€€€"])
    def test_empty_result_falls_back_to_untitled(self, title: str) -> None:
        """Titles without usable characters become 'untitled'."""
        assert slugify_title(title) == "untitled"

    @pytest.mark.parametrize(
        "title",
        ["Data Science Day", "  x  ", "A - B - C", "Rock'n'Roll 2025!!", "ÄÖÜ meets Python"],
    )
    def test_slug_shape(self, title: str) -> None:
        """Slugs are non-empty, lowercase and have no leading, trailing or double hyphens."""
        slug = slugify_title(title)
        assert slug
        assert SLUG_RE.fullmatch(slug)
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")


class TestGenerateShortId:
    """Verify the random suffix generator."""

    def test_length_and_alphabet(self) -> None:
        """Short ids have six characters from 0-9a-z."""
        short_id = generate_short_id()
        assert len(short_id) == SHORT_ID_LENGTH
        assert set(short_id) <= set(SLUG_ALPHABET)

    def test_seeded_source_is_reproducible(self) -> None:
        """The same seed yields the same token."""
        assert generate_short_id(random.Random(42)) == generate_short_id(random.Random(42))

    def test_alphabet(self) -> None:
        """The alphabet is the 36 digits and lowercase letters."""
        assert SLUG_ALPHABET == "0123456789abcdefghijklmnopqrstuvwxyz"


class TestUniqueSlug:
    """Verify collision handling in unique_slug."""

    def test_free_base_is_used(self) -> None:
        """Without collisions the base is adopted after a single lookup."""
        lookup = MagicMock(return_value=False)
        assert unique_slug("My Event", lookup) == "my-event"
        lookup.assert_called_once_with("my-event")

    def test_collision_appends_short_id(self) -> None:
        """A taken base gets a six character suffix."""
        taken = {"my-event"}
        slug = unique_slug("My Event", taken.__contains__)
        assert re.fullmatch(r"my-event-[0-9a-z]{6}", slug)

    def test_seeded_collision_is_reproducible(self) -> None:
        """With a seeded source the suffix is predictable."""
        taken = {"my-event"}
        expected = f"my-event-{generate_short_id(random.Random(7))}"
        assert unique_slug("My Event", taken.__contains__, rng=random.Random(7)) == expected

    def test_retries_until_free(self) -> None:
        """Suffixed candidates are retried until one is free."""
        lookup = MagicMock(side_effect=[True, True, False])
        slug = unique_slug("My Event", lookup, rng=random.Random(1))
        assert re.fullmatch(r"my-event-[0-9a-z]{6}", slug)
        assert lookup.call_count == 3  # noqa: PLR2004

    @patch("events.slugs.logger")
    def test_timestamp_fallback(self, mock_logger: MagicMock) -> None:
        """After three colliding suffixes a timestamp candidate is used unchecked."""
        lookup = MagicMock(return_value=True)
        now = datetime(2024, 1, 1, tzinfo=UTC)

        slug = unique_slug("My Event", lookup, now=now)

        prefix = f"my-event-{int_to_base36(1704067200000)}"
        assert slug.startswith(prefix)
        assert re.fullmatch(r"[0-9a-z]{6}", slug.removeprefix(prefix))
        assert lookup.call_count == 1 + MAX_SUFFIX_ATTEMPTS
        mock_logger.warning.assert_called_once()

    def test_untitled_base_collision(self) -> None:
        """Suffixes are appended to the 'untitled' fallback base."""
        taken = {"untitled"}
        slug = unique_slug("???", taken.__contains__)
        assert re.fullmatch(r"untitled-[0-9a-z]{6}", slug)
