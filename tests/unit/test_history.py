"""Tests for the rolling sample history."""

import pytest

from monitor.history import SampleHistory
from monitor.sample import Sample


def test_history_starts_empty():
    history = SampleHistory(capacity=3)

    assert len(history) == 0
    assert history.latest() is None
    assert history.samples() == []


def test_history_evicts_oldest_first():
    """After capacity+1 appends the first sample is gone and order is kept."""
    history = SampleHistory(capacity=10)
    for gas in range(11):
        history.append(Sample(gas=gas))

    assert len(history) == 10
    assert history.series("gas") == list(range(1, 11))
    assert history.latest().gas == 10


def test_history_never_exceeds_capacity():
    history = SampleHistory(capacity=3)
    for gas in range(50):
        history.append(Sample(gas=gas))
        assert len(history) <= 3


def test_history_rejects_zero_capacity():
    with pytest.raises(ValueError):
        SampleHistory(capacity=0)


def test_iteration_is_a_copy():
    history = SampleHistory(capacity=2)
    history.append(Sample(gas=1))

    for _ in history:
        history.append(Sample(gas=2))

    assert history.series("gas") == [1, 2]
    assert [d["gas"] for d in history.to_dicts()] == [1, 2]
