from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CaptureSource(Protocol):
    source_id: str

    def capture(self) -> bytes:
        """Return one raw RGB frame. Raise CaptureFailure on failure."""
        ...


@runtime_checkable
class DigitalOutput(Protocol):
    output_id: str

    def set(self, on: bool) -> None:
        ...

    def get(self) -> Optional[bool]:
        """Driven level, or None when the hardware cannot report it."""
        ...

    def close(self) -> None:
        ...
