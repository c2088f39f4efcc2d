from __future__ import annotations
from pydantic import BaseModel
from typing import Literal


class HeaterEnableRequest(BaseModel):
    state: Literal["on", "off"]


class HeaterEnableResponse(BaseModel):
    previous: Literal["on", "off", "unknown"]
    changed: bool


class HeaterStateResponse(BaseModel):
    target: Literal["on", "off", "unknown"]


class CameraResponse(BaseModel):
    yellow: bool
    green: bool
    age: int
    captured_at: str
