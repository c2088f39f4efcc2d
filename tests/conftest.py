from __future__ import annotations

from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np
import pytest

from heater_control.domain.calibration import Calibration
from heater_control.domain.models import LampCalibration, Region, Snapshot, Threshold

WIDTH = 40
HEIGHT = 20

YELLOW = LampCalibration("yellow", Region(x=5, y=4, width=6, height=8), Threshold(155, 105, 0))
GREEN = LampCalibration("green", Region(x=20, y=4, width=6, height=8), Threshold(145, 180, 0))


class FakeClock:
    """Wall clock (call it) and monotonic clock (.monotonic) that tests drive."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.mono = 1000.0

    def __call__(self) -> datetime:
        return self.now

    def monotonic(self) -> float:
        return self.mono

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)
        self.mono += seconds

    def set_wall(self, when: datetime) -> None:
        # NTP step: wall time moves, elapsed time does not
        self.now = when

    def snapshot(self, yellow: bool, green: bool) -> Snapshot:
        return Snapshot(yellow=yellow, green=green, captured_at=self.now, monotonic=self.mono)


class FakeOutput:
    output_id = "fake_out"

    def __init__(self, level: Optional[bool] = False, readback: bool = True) -> None:
        self.level = level
        self.readback = readback
        self.writes: list[bool] = []
        self.closed = False

    def set(self, on: bool) -> None:
        self.writes.append(on)
        self.level = on

    def get(self) -> Optional[bool]:
        return self.level if self.readback else None

    def close(self) -> None:
        self.closed = True


class FakeCapture:
    """Replays queued frames or exceptions, one per capture call."""

    source_id = "fake_capture"

    def __init__(self, *results) -> None:
        self.results = deque(results)
        self.calls = 0

    def capture(self) -> bytes:
        self.calls += 1
        item = self.results.popleft()
        if isinstance(item, BaseException):
            raise item
        return item


def make_frame(yellow: bool = False, green: bool = False) -> np.ndarray:
    frame = np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8)
    for lamp, lit in ((YELLOW, yellow), (GREEN, green)):
        if lit:
            r = lamp.region
            frame[r.y:r.y + r.height, r.x:r.x + r.width] = [
                min(255, t + 20) for t in lamp.threshold.as_tuple()
            ]
    return frame


def frame_bytes(yellow: bool = False, green: bool = False) -> bytes:
    return make_frame(yellow, green).tobytes()


@pytest.fixture
def calibration() -> Calibration:
    return Calibration(yellow=YELLOW, green=GREEN)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
