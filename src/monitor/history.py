"""Bounded rolling buffer of recent samples (in-memory only)."""

from collections import deque
from typing import Deque, Dict, Iterator, List

from config.config import HISTORY_CAPACITY
from monitor.sample import Sample


class SampleHistory:
    """FIFO window over the most recent samples, oldest first."""

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._buffer: Deque[Sample] = deque(maxlen=capacity)

    def append(self, sample: Sample) -> Sample:
        self._buffer.append(sample)
        return sample

    def latest(self) -> Sample | None:
        return self._buffer[-1] if self._buffer else None

    def samples(self) -> List[Sample]:
        return list(self._buffer)

    def series(self, field: str) -> List[float]:
        """Values of one reading across the window, in arrival order."""
        return [getattr(sample, field) for sample in self._buffer]

    def to_dicts(self) -> List[Dict[str, object]]:
        return [sample.to_dict() for sample in self._buffer]

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[Sample]:
        return iter(list(self._buffer))
