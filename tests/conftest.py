"""Shared fixtures: deterministic clock, sleep and random source for the governor."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from loopgov.governor import LoopGovernor


class FakeTime:
    """Virtual clock whose sleep advances time and records every call."""

    def __init__(self, rand_value: float = 0.4) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []
        self.rand_value = rand_value

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def rand(self) -> float:
        return self.rand_value

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def make_governor(fake_time: FakeTime) -> Callable[..., LoopGovernor]:
    def _make(**kwargs: float) -> LoopGovernor:
        return LoopGovernor(
            clock=fake_time.clock,
            sleep=fake_time.sleep,
            rand=fake_time.rand,
            **kwargs,
        )

    return _make


@pytest.fixture
def governor(make_governor: Callable[..., LoopGovernor]) -> LoopGovernor:
    return make_governor()
