"""Tests for Post timestamp parsing and EventBatch construction."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from calorie_scale.domain.event import (
    TWITTER_TIME_FORMAT,
    EventBatch,
    Post,
    TimestampParseError,
    parse_created_at,
)


# ── Helpers ──────────────────────────────────────────────────────────────────

_BASE = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _post_at(ts: datetime, post_id: str = "1") -> Post:
    """Build a Post whose created_at is in the upstream wire format."""
    return Post(post_id=post_id, created_at=ts.strftime(TWITTER_TIME_FORMAT))


def _posts_at_offsets(offsets: list[float]) -> list[Post]:
    """Posts at *offsets* seconds after _BASE, in the order given."""
    return [
        _post_at(_BASE + timedelta(seconds=off), post_id=str(i))
        for i, off in enumerate(offsets)
    ]


# ── Parsing ──────────────────────────────────────────────────────────────────


class TestParseCreatedAt:
    def test_twitter_format(self) -> None:
        parsed = parse_created_at("Thu Jan 01 12:00:00 +0000 2026")
        assert parsed == _BASE

    def test_twitter_format_with_offset_is_normalised_to_utc(self) -> None:
        parsed = parse_created_at("Thu Jan 01 21:00:00 +0900 2026")
        assert parsed == _BASE
        assert parsed.tzinfo == timezone.utc

    def test_iso_format_fallback(self) -> None:
        assert parse_created_at("2026-01-01T12:00:00+00:00") == _BASE

    def test_naive_iso_is_assumed_utc(self) -> None:
        assert parse_created_at("2026-01-01T12:00:00") == _BASE

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_created_at("yesterday-ish")


class TestPost:
    def test_timestamp_roundtrips_wire_format(self) -> None:
        assert _post_at(_BASE).timestamp() == _BASE

    def test_bad_timestamp_raises_parse_error_with_context(self) -> None:
        post = Post(post_id="42", created_at="not a date")
        with pytest.raises(TimestampParseError) as info:
            post.timestamp()
        assert info.value.post_id == "42"
        assert info.value.raw == "not a date"
        assert "42" in str(info.value)

    def test_post_is_frozen(self) -> None:
        post = _post_at(_BASE)
        with pytest.raises(Exception):
            post.text = "changed"  # type: ignore[misc]


class TestEventBatch:
    def test_from_posts_preserves_order(self) -> None:
        batch = EventBatch.from_posts(_posts_at_offsets([6, 3, 0]))
        assert batch.timestamps == (
            _BASE + timedelta(seconds=6),
            _BASE + timedelta(seconds=3),
            _BASE,
        )
        assert len(batch) == 3

    def test_empty(self) -> None:
        assert len(EventBatch.from_posts([])) == 0

    def test_one_bad_post_fails_whole_batch(self) -> None:
        posts = _posts_at_offsets([6, 3]) + [Post(post_id="bad", created_at="??")]
        with pytest.raises(TimestampParseError) as info:
            EventBatch.from_posts(posts)
        assert info.value.post_id == "bad"
