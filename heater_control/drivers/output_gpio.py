from __future__ import annotations

import logging
from typing import Optional

from gpiozero import DigitalOutputDevice, GPIOZeroError
from gpiozero.pins import Factory

from ..domain.errors import HardwareUnavailable

logger = logging.getLogger(__name__)


class GpioHeaterOutput:
    """Heater relay on a single GPIO pin (BCM numbering)."""

    def __init__(
        self,
        pin: int,
        readback: bool = True,
        pin_factory: Optional[Factory] = None,
    ) -> None:
        self.output_id = f"gpio{pin}"
        self._readback = readback
        try:
            self._device = DigitalOutputDevice(pin, initial_value=False, pin_factory=pin_factory)
        except (GPIOZeroError, OSError) as e:
            raise HardwareUnavailable(f"Unable to claim GPIO{pin}: {e}") from e
        logger.info("Heater output claimed on GPIO%d (readback=%s)", pin, readback)

    def set(self, on: bool) -> None:
        if on:
            self._device.on()
        else:
            self._device.off()

    def get(self) -> Optional[bool]:
        if not self._readback:
            return None
        return bool(self._device.value)

    def close(self) -> None:
        self._device.close()
