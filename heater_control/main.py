from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.log import configure_logging

from .api.routes import router as api_router
import heater_control.api.routes as routes_module

from .domain.calibration import load_calibration
from .domain.controller import HeaterController
from .domain.interfaces import CaptureSource, DigitalOutput
from .services.poller import SensorPoller
from .services.sensor_state import SensorState


logger = logging.getLogger(__name__)


calibration = load_calibration(settings.calibration_path)


def build_capture() -> CaptureSource:
    if settings.hardware_mode.lower() == "rpi":
        from .drivers.capture_libcamera import LibcameraCapture
        return LibcameraCapture(
            width=settings.image_width,
            height=settings.image_height,
            command=settings.capture_command,
            timeout=settings.capture_timeout_seconds,
        )

    # default to sim
    from .drivers.capture_sim import SimulatedCapture
    return SimulatedCapture(settings.image_width, settings.image_height, calibration)


def build_output() -> DigitalOutput:
    if settings.hardware_mode.lower() == "rpi":
        from .drivers.output_gpio import GpioHeaterOutput
        return GpioHeaterOutput(pin=settings.heater_pin, readback=settings.heater_readback)

    from .drivers.output_sim import SimulatedHeaterOutput
    return SimulatedHeaterOutput()


# --- Singletons ---
sensor_state = SensorState()
heater = HeaterController(build_output())
poller: SensorPoller | None = None


def get_sensor_state() -> SensorState:
    return sensor_state


def get_heater() -> HeaterController:
    return heater


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting %s (mode=%s)", settings.app_name, settings.hardware_mode)

    global poller
    poller = SensorPoller(
        capture=build_capture(),
        state=sensor_state,
        calibration=calibration,
        width=settings.image_width,
        height=settings.image_height,
        interval_seconds=settings.poll_interval_seconds,
    )
    await poller.start()

    try:
        yield
    finally:
        if poller:
            await poller.stop()

        heater.close()

        logger.info("Shutdown complete")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Make the dependency functions in routes resolve to the real ones
app.dependency_overrides[routes_module.get_sensor_state] = get_sensor_state
app.dependency_overrides[routes_module.get_heater] = get_heater

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    return {}


if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
