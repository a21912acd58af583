"""Schema definitions for the JSON exchanged with the sensor endpoint."""

from typing import Optional, TypedDict, Union

Number = Union[int, float]


class SensorReading(TypedDict, total=False):
    gas: Optional[Number]
    humidity: Optional[Number]
    temperature: Optional[Number]
    flame: Optional[int]  # 1 = fire detected


class SampleDict(TypedDict):
    gas: Number
    humidity: Number
    temperature: Number
    flame: int
    received_at: str  # ISO8601 (UTC)


class Notification(TypedDict):
    level: str  # "error" | "warning" | "info"
    message: str
