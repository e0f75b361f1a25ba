"""Property tests for LoopGovernor pacing invariants."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from loopgov.governor import LoopGovernor, Outcome


class _VirtualTime:
    def __init__(self, rand_value: float) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []
        self.rand_value = rand_value

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


_configs = st.tuples(
    st.floats(min_value=0.1, max_value=100.0, allow_nan=False, allow_infinity=False),
    st.floats(min_value=1.0, max_value=50.0, allow_nan=False, allow_infinity=False),
    st.floats(min_value=1.01, max_value=4.0, allow_nan=False, allow_infinity=False),
)
_outcomes = st.sampled_from(
    [Outcome.success(), Outcome.generic(), Outcome.no_hint(), Outcome.with_hint(0)]
)


def _governor(config: tuple[float, float, float], vt: _VirtualTime) -> LoopGovernor:
    min_sec, span, factor = config
    return LoopGovernor(
        min_interval_sec=min_sec,
        max_interval_sec=min_sec * span,
        backoff_factor=factor,
        clock=vt.clock,
        sleep=vt.sleep,
        rand=lambda: vt.rand_value,
    )


@given(config=_configs, previous=st.floats(min_value=0.0, max_value=1e6), outcome=_outcomes,
       rand_value=st.floats(min_value=0.0, max_value=0.999))
@settings(max_examples=100, deadline=None)
def test_property_next_target_within_bounds(
    config: tuple[float, float, float],
    previous: float,
    outcome: Outcome,
    rand_value: float,
) -> None:
    vt = _VirtualTime(rand_value)
    governor = _governor(config, vt)
    target = governor.next_target(previous, outcome)
    assert 0.0 <= target <= governor.max_interval_sec


@given(config=_configs, previous=st.floats(min_value=0.0, max_value=1e6))
@settings(max_examples=50, deadline=None)
def test_property_success_resets_to_min(config: tuple[float, float, float], previous: float) -> None:
    governor = _governor(config, _VirtualTime(0.5))
    assert governor.next_target(previous, Outcome.success()) == governor.min_interval_sec


@given(
    config=_configs,
    iterations=st.integers(min_value=1, max_value=25),
    sequence=st.lists(_outcomes, min_size=25, max_size=25),
)
@settings(max_examples=50, deadline=None)
def test_property_invocations_match_budget(
    config: tuple[float, float, float],
    iterations: int,
    sequence: list[Outcome],
) -> None:
    vt = _VirtualTime(0.25)
    governor = _governor(config, vt)
    outcomes = iter(sequence)
    calls: list[Outcome] = []

    def work() -> Outcome:
        outcome = next(outcomes)
        calls.append(outcome)
        return outcome

    governor.run(iterations, work)

    assert len(calls) == iterations
    assert all(seconds >= 0 for seconds in vt.sleeps)


@given(config=_configs, iterations=st.integers(min_value=1, max_value=20), work_fraction=st.floats(0.0, 0.9))
@settings(max_examples=50, deadline=None)
def test_property_successful_cycles_sleep_remaining_interval(
    config: tuple[float, float, float],
    iterations: int,
    work_fraction: float,
) -> None:
    vt = _VirtualTime(0.0)
    governor = _governor(config, vt)
    work_sec = governor.min_interval_sec * work_fraction

    def work() -> None:
        vt.now += work_sec

    governor.run(iterations, work)

    assert len(vt.sleeps) == iterations - 1
    for seconds in vt.sleeps:
        assert abs(seconds - (governor.min_interval_sec - work_sec)) < 1e-6 * max(1.0, vt.now)
