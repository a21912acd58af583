"""Sensor polling core: samples, rolling history, connection lifecycle."""

from monitor.history import SampleHistory
from monitor.poller import ConnectionState, PollHandle, PollerSnapshot, SensorPoller
from monitor.sample import PayloadValidationError, Sample, parse_payload

__all__ = [
    "ConnectionState",
    "PayloadValidationError",
    "PollHandle",
    "PollerSnapshot",
    "Sample",
    "SampleHistory",
    "SensorPoller",
    "parse_payload",
]
