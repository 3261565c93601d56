"""Tests for ProfileContextCache."""

import dataclasses

import pytest

from creator_context.context.cache import ProfileContextCache
from creator_context.utils.constants import CREATOR_PROFILE_FALLBACK
from tests.conftest import FakeClock

TTL = 1000


@pytest.fixture
def clock():
    return FakeClock(start=10_000)


@pytest.fixture
def cache(clock):
    return ProfileContextCache(ttl_ms=TTL, clock=clock)


def test_get_missing_key_returns_none(cache):
    assert cache.get("nobody") is None


def test_put_then_get(cache):
    cache.put("user-1", "profile text")
    assert cache.get("user-1") == "profile text"


def test_entry_fresh_just_before_ttl(cache, clock):
    cache.put("user-1", "profile text")
    clock.advance(TTL - 1)
    assert cache.get("user-1") == "profile text"


def test_entry_expires_at_ttl(cache, clock):
    cache.put("user-1", "profile text")
    clock.advance(TTL)
    assert cache.get("user-1") is None


def test_entry_expired_after_ttl(cache, clock):
    cache.put("user-1", "profile text")
    clock.advance(TTL + 1)
    assert cache.get("user-1") is None


def test_expiry_is_lazy(cache, clock):
    cache.put("user-1", "profile text")
    clock.advance(TTL + 1)
    assert cache.get("user-1") is None
    assert len(cache) == 1
    assert cache.stats().size == 1


def test_put_with_explicit_timestamp(cache, clock):
    cache.put("user-1", "old", now=clock.now - TTL - 5)
    assert cache.get("user-1") is None


def test_put_overwrites_last_writer_wins(cache, clock):
    cache.put("user-1", "first")
    clock.advance(TTL - 10)
    cache.put("user-1", "second")
    clock.advance(20)
    assert cache.get("user-1") == "second"


def test_invalidate_single_key(cache):
    cache.put("user-1", "a")
    cache.put("user-2", "b")
    cache.invalidate("user-1")
    assert cache.get("user-1") is None
    assert cache.get("user-2") == "b"


def test_invalidate_missing_key_is_noop(cache):
    cache.put("user-1", "a")
    cache.invalidate("nobody")
    assert cache.stats().size == 1


def test_invalidate_all(cache):
    cache.put("user-1", "a")
    cache.put("user-2", "b")
    cache.invalidate()
    assert cache.stats().size == 0
    assert cache.stats().entries == ()


def test_contains_fresh(cache, clock):
    cache.put("user-1", "a")
    assert cache.contains_fresh("user-1")
    clock.advance(TTL)
    assert not cache.contains_fresh("user-1")
    assert not cache.contains_fresh("nobody")


def test_stats_reports_age_and_fallback(cache, clock):
    cache.put("user-1", "profile text")
    clock.advance(250)
    cache.put("user-2", CREATOR_PROFILE_FALLBACK)
    clock.advance(50)

    stats = cache.stats()
    by_key = {e.key: e for e in stats.entries}

    assert stats.size == 2
    assert by_key["user-1"].age_ms == 300
    assert by_key["user-1"].is_fallback is False
    assert by_key["user-2"].age_ms == 50
    assert by_key["user-2"].is_fallback is True


def test_stats_is_a_snapshot(cache):
    cache.put("user-1", "a")
    stats = cache.stats()

    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.entries[0].key = "hijacked"  # type: ignore[misc]

    cache.put("user-2", "b")
    assert stats.size == 1
    assert len(stats.entries) == 1
    assert cache.get("user-1") == "a"


def test_zero_ttl_never_hits(clock):
    cache = ProfileContextCache(ttl_ms=0, clock=clock)
    cache.put("user-1", "a")
    assert cache.get("user-1") is None


def test_negative_ttl_rejected(clock):
    with pytest.raises(ValueError):
        ProfileContextCache(ttl_ms=-1, clock=clock)


def test_independent_instances_do_not_share_state(clock):
    first = ProfileContextCache(ttl_ms=TTL, clock=clock)
    second = ProfileContextCache(ttl_ms=TTL, clock=clock)
    first.put("user-1", "a")
    assert second.get("user-1") is None
