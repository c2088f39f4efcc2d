from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Region:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Threshold:
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class LampCalibration:
    name: str
    region: Region
    threshold: Threshold


@dataclass(frozen=True)
class Snapshot:
    yellow: bool
    green: bool
    captured_at: datetime  # wall clock, for display only
    monotonic: float       # time.monotonic() at capture; ages are measured from this


@dataclass(frozen=True)
class SensorReadout:
    yellow: bool
    green: bool
    age_seconds: int
    captured_at: datetime


class HeaterTarget(str, Enum):
    ON = "on"
    OFF = "off"
    UNKNOWN = "unknown"  # output cannot report its driven level

    @classmethod
    def from_level(cls, level: bool | None) -> "HeaterTarget":
        if level is None:
            return cls.UNKNOWN
        return cls.ON if level else cls.OFF


@dataclass(frozen=True)
class TransitionResult:
    previous: HeaterTarget
    changed: bool
