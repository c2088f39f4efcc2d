from __future__ import annotations
import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional

from ..core.timeutil import now_utc
from ..domain.analyzer import decode_frame, region_is_on
from ..domain.calibration import Calibration
from ..domain.errors import CaptureFailure, DecodeFailure
from ..domain.interfaces import CaptureSource
from ..domain.models import Snapshot
from .sensor_state import SensorState


logger = logging.getLogger(__name__)


class SensorPoller:
    IDLE = "idle"
    CAPTURING = "capturing"

    def __init__(
        self,
        capture: CaptureSource,
        state: SensorState,
        calibration: Calibration,
        width: int,
        height: int,
        interval_seconds: float,
        clock: Callable[[], datetime] = now_utc,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        calibration.validate_for(width, height)

        self._capture = capture
        self._state = state
        self._calibration = calibration
        self._width = width
        self._height = height
        self._interval = interval_seconds
        self._clock = clock
        self._monotonic = monotonic

        self.phase = self.IDLE
        self._task: Optional[asyncio.Task] = None
        self._stop = asyncio.Event()
        self._executor: Optional[ThreadPoolExecutor] = None

    def poll_once(self) -> bool:
        """Run one capture cycle. Returns True when a new snapshot was published."""
        self.phase = self.CAPTURING
        try:
            try:
                raw = self._capture.capture()
            except CaptureFailure as e:
                logger.error("Capture failed (source=%s): %s", self._capture.source_id, e)
                return False

            try:
                image = decode_frame(raw, self._width, self._height)
            except DecodeFailure as e:
                logger.error("Decode failed (source=%s): %s", self._capture.source_id, e)
                return False

            cal = self._calibration
            snapshot = Snapshot(
                yellow=region_is_on(image, cal.yellow.region, cal.yellow.threshold),
                green=region_is_on(image, cal.green.region, cal.green.threshold),
                captured_at=self._clock(),
                monotonic=self._monotonic(),
            )
            self._state.publish(snapshot)
            logger.debug("Snapshot published: yellow=%s green=%s", snapshot.yellow, snapshot.green)
            return True
        finally:
            self.phase = self.IDLE

    async def start(self) -> None:
        self._stop.clear()
        # capture blocks for seconds; keep it off the request loop and its default pool
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sensor_poller")
        self._task = asyncio.create_task(self._run(), name="sensor_poller")

    async def stop(self) -> None:
        self._stop.set()
        if self._task:
            await self._task
            self._task = None
        if self._executor:
            self._executor.shutdown(wait=True)
            self._executor = None

    async def _run(self) -> None:
        logger.info(
            "Poller started (interval=%ss image=%dx%d source=%s)",
            self._interval, self._width, self._height, self._capture.source_id,
        )
        loop = asyncio.get_running_loop()

        while not self._stop.is_set():
            started = loop.time()
            try:
                await loop.run_in_executor(self._executor, self.poll_once)
            except Exception as e:
                logger.exception("Poll cycle error: %s", e)

            # sleep out the rest of the interval, waking early on stop
            remaining = max(0.0, self._interval - (loop.time() - started))
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=remaining)
            except asyncio.TimeoutError:
                pass

        logger.info("Poller stopped")
