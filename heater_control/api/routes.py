from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..domain.controller import HeaterController
from ..domain.models import HeaterTarget
from ..services.sensor_state import SensorState
from .schemas import (
    CameraResponse,
    HeaterEnableRequest,
    HeaterEnableResponse,
    HeaterStateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Dependency getters ---
# main.py points these at the real singletons via app.dependency_overrides.
def get_sensor_state() -> SensorState:  # overridden in main
    raise RuntimeError("Sensor state dependency not configured")

def get_heater() -> HeaterController:  # overridden in main
    raise RuntimeError("Heater dependency not configured")


@router.get("/camera", response_model=CameraResponse)
async def get_camera(state: SensorState = Depends(get_sensor_state)):
    r = state.read()
    return CameraResponse(
        yellow=r.yellow,
        green=r.green,
        age=r.age_seconds,
        captured_at=r.captured_at.isoformat(),
    )


# Plain def: the output may block on hardware, so these run in the threadpool.
@router.get("/heater/state", response_model=HeaterStateResponse)
def get_heater_state(heater: HeaterController = Depends(get_heater)):
    return HeaterStateResponse(target=heater.current_target().value)


@router.post("/heater/enable", response_model=HeaterEnableResponse)
def heater_enable(req: HeaterEnableRequest, heater: HeaterController = Depends(get_heater)):
    logger.info("heater enable request: state=%s", req.state)
    result = heater.apply(HeaterTarget(req.state))
    return HeaterEnableResponse(previous=result.previous.value, changed=result.changed)
