from __future__ import annotations
import logging
import random
from typing import Optional

import numpy as np

from ..domain.calibration import Calibration
from ..domain.models import LampCalibration

logger = logging.getLogger(__name__)


class SimulatedCapture:
    """Synthetic panel frames with each lamp randomly lit or dark."""

    source_id = "capture_sim"

    def __init__(
        self,
        width: int,
        height: int,
        calibration: Calibration,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._width = width
        self._height = height
        self._calibration = calibration
        self._rng = rng or random.Random()

    def _paint(self, frame: np.ndarray, lamp: LampCalibration, lit: bool) -> None:
        r = lamp.region
        if lit:
            color = [min(255, t + 50) for t in lamp.threshold.as_tuple()]
        else:
            color = [0, 0, 0]
        frame[r.y:r.y + r.height, r.x:r.x + r.width] = color

    def capture(self) -> bytes:
        frame = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        lit = {}
        for lamp in self._calibration.lamps():
            lit[lamp.name] = self._rng.random() < 0.5
            self._paint(frame, lamp, lit[lamp.name])
        logger.debug("Simulated frame: %s", lit)
        return frame.tobytes()
