from __future__ import annotations
import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)


class SimulatedHeaterOutput:
    output_id = "heater_sim_01"

    def __init__(self, initial: Optional[bool] = None) -> None:
        self._state = random.choice([True, False]) if initial is None else initial

    def set(self, on: bool) -> None:
        self._state = bool(on)
        logger.info("HEATER set=%s", self._state)

    def get(self) -> Optional[bool]:
        return self._state

    def close(self) -> None:
        pass
