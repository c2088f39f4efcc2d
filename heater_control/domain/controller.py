from __future__ import annotations
import logging
import threading

from .errors import HardwareUnavailable
from .interfaces import DigitalOutput
from .models import HeaterTarget, TransitionResult

logger = logging.getLogger(__name__)


class HeaterController:
    """Idempotent on/off control of the heater output.

    A write reaches the output only when the request differs from the
    driven level. When the level cannot be read back the request is always
    written, since the pin may not match it.
    """

    def __init__(self, output: DigitalOutput | None) -> None:
        if output is None:
            raise HardwareUnavailable("Heater output not available")
        self._output = output
        self._lock = threading.Lock()

    def current_target(self) -> HeaterTarget:
        return HeaterTarget.from_level(self._output.get())

    def apply(self, requested: HeaterTarget) -> TransitionResult:
        if requested is HeaterTarget.UNKNOWN:
            raise ValueError("Heater can only be requested on or off")

        with self._lock:
            previous = self.current_target()
            if previous is requested:
                logger.info("heater: already %s, no-op", requested.value)
                return TransitionResult(previous=previous, changed=False)

            self._output.set(requested is HeaterTarget.ON)
            logger.info("heater: %s -> %s", previous.value, requested.value)
            return TransitionResult(previous=previous, changed=True)

    def close(self) -> None:
        with self._lock:
            self._output.close()
