"""Tests for the registry holding open compose sessions."""

from __future__ import annotations

import pytest

from loyalty_console.application.use_cases.notifications import ComposeStatus
from loyalty_console.infrastructure.compose_sessions import ComposeSessionRegistry


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(clock) -> ComposeSessionRegistry:
    return ComposeSessionRegistry(idle_timeout=60, clock=clock)


def test_idle_session_expires(registry, clock, customers) -> None:
    session = registry.create()
    session.open(customers)

    clock.now += 61

    assert registry.get(session.id) is None
    assert len(registry) == 0
    assert session.status is ComposeStatus.IDLE
    assert session.selector.customers == []


def test_reading_a_session_keeps_it_alive(registry, clock) -> None:
    session = registry.create()

    clock.now += 45
    assert registry.get(session.id) is session
    clock.now += 45

    assert registry.get(session.id) is session


def test_creating_sessions_evicts_abandoned_ones(registry, clock) -> None:
    abandoned = registry.create()
    clock.now += 120

    fresh = registry.create()

    assert len(registry) == 1
    assert registry.get(fresh.id) is fresh
    assert registry.get(abandoned.id) is None


def test_sessions_with_an_outstanding_dispatch_are_kept(registry, clock, customers) -> None:
    session = registry.create()
    session.open(customers)
    session.status = ComposeStatus.SUBMITTING

    clock.now += 600

    assert registry.evict_expired() == 0
    assert registry.get(session.id) is session


def test_close_reports_unknown_sessions(registry) -> None:
    session = registry.create()

    assert registry.close(session.id) is True
    assert registry.close(session.id) is False
