from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .analyzer import validate_region
from .errors import CalibrationError
from .models import LampCalibration, Region, Threshold

logger = logging.getLogger(__name__)


class RegionIn(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int
    height: int


class LampIn(BaseModel):
    region: RegionIn
    threshold: tuple[int, int, int]


class CalibrationIn(BaseModel):
    yellow: LampIn
    green: LampIn


@dataclass(frozen=True)
class Calibration:
    yellow: LampCalibration
    green: LampCalibration

    def lamps(self) -> list[LampCalibration]:
        return [self.yellow, self.green]

    def validate_for(self, width: int, height: int) -> None:
        for lamp in self.lamps():
            validate_region(lamp.region, width, height, name=lamp.name)


def _to_lamp(name: str, lamp: LampIn) -> LampCalibration:
    r = lamp.region
    return LampCalibration(
        name=name,
        region=Region(x=r.x, y=r.y, width=r.width, height=r.height),
        threshold=Threshold(*lamp.threshold),
    )


def parse_calibration(data: dict) -> Calibration:
    try:
        cal = CalibrationIn.model_validate(data)
    except ValidationError as e:
        raise CalibrationError(f"Invalid calibration: {e}") from e
    return Calibration(
        yellow=_to_lamp("yellow", cal.yellow),
        green=_to_lamp("green", cal.green),
    )


def load_calibration(path: str | Path) -> Calibration:
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise CalibrationError(f"Cannot read calibration file {path}: {e}") from e
    cal = parse_calibration(data)
    logger.info(
        "Loaded calibration from %s: yellow=%s %s green=%s %s",
        path,
        cal.yellow.region, cal.yellow.threshold.as_tuple(),
        cal.green.region, cal.green.threshold.as_tuple(),
    )
    return cal
