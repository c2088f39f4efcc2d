from __future__ import annotations

import logging
import subprocess

from ..domain.errors import CaptureFailure

logger = logging.getLogger(__name__)


class LibcameraCapture:
    """Grab a single raw RGB still from the Pi camera via libcamera-still."""

    source_id = "libcamera"

    def __init__(
        self,
        width: int,
        height: int,
        command: str = "libcamera-still",
        timeout: float = 20.0,
    ) -> None:
        self._width = width
        self._height = height
        self._command = command
        self._timeout = timeout

    def argv(self) -> list[str]:
        return [
            self._command,
            "--width", str(self._width),
            "--height", str(self._height),
            "--immediate",
            "--nopreview",
            "--flush",
            "--encoding", "rgb",
            "--output", "-",
        ]

    def capture(self) -> bytes:
        try:
            proc = subprocess.run(
                self.argv(),
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CaptureFailure(f"{self._command} timed out after {self._timeout}s") from e
        except OSError as e:
            raise CaptureFailure(f"Unable to run {self._command}: {e}") from e

        stderr = proc.stderr.decode("utf-8", errors="replace")
        logger.debug("%s stderr: %s", self._command, stderr)

        if proc.returncode != 0:
            raise CaptureFailure(
                f"{self._command} exited with {proc.returncode}: {stderr.strip()[-200:]}"
            )
        return proc.stdout
