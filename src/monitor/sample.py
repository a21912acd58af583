"""Sensor sample model and payload normalization.

The endpoint answers with ``{"success": true, "data": {...}}``. A payload is
accepted only when ``success`` is truthy and ``data`` is a JSON object; each
reading that is missing or null becomes 0.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from config.config import FLAME_DETECTED
from config.schemas import Number, SampleDict, SensorReading


class PayloadValidationError(ValueError):
    """Raised when a response body does not match the sensor contract."""


def _coerce_number(name: str, value: Any) -> Number:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise PayloadValidationError(f"Field '{name}' is not numeric: {value!r}")


@dataclass(frozen=True)
class Sample:
    gas: Number = 0
    humidity: Number = 0
    temperature: Number = 0
    flame: int = 0
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def fire_detected(self) -> bool:
        return self.flame == FLAME_DETECTED

    @classmethod
    def from_reading(cls, reading: SensorReading, received_at: Optional[datetime] = None) -> 'Sample':
        """Build a sample from the ``data`` object, defaulting absent fields to 0."""
        return cls(
            gas=_coerce_number('gas', reading.get('gas')),
            humidity=_coerce_number('humidity', reading.get('humidity')),
            temperature=_coerce_number('temperature', reading.get('temperature')),
            flame=int(_coerce_number('flame', reading.get('flame'))),
            received_at=received_at or datetime.now(timezone.utc),
        )

    def to_dict(self) -> SampleDict:
        return {
            'gas': self.gas,
            'humidity': self.humidity,
            'temperature': self.temperature,
            'flame': self.flame,
            'received_at': self.received_at.isoformat(),
        }


def parse_payload(payload: Any, received_at: Optional[datetime] = None) -> Sample:
    """Validate a decoded response body and return the normalized sample.

    Raises:
        PayloadValidationError: if ``success`` is falsy or ``data`` is missing.
    """
    if not isinstance(payload, dict):
        raise PayloadValidationError("Invalid data format: response is not a JSON object")
    if not payload.get('success'):
        raise PayloadValidationError("Invalid data format: 'success' is missing or false")
    data = payload.get('data')
    if not isinstance(data, dict):
        raise PayloadValidationError("Invalid data format: 'data' is missing")
    return Sample.from_reading(data, received_at=received_at)
