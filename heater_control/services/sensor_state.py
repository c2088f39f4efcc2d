from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Callable, Optional

from ..core.timeutil import age_seconds, now_utc
from ..domain.models import SensorReadout, Snapshot


class SensorState:
    """Latest lamp snapshot, written by the poller and read by requests.

    Snapshots are immutable, so a read is a single reference load and never
    waits on a publish. Publishes are serialized by a lock. Age is measured
    on the monotonic clock; ``captured_at`` is for display only.
    """

    def __init__(
        self,
        initial: Optional[Snapshot] = None,
        clock: Callable[[], datetime] = now_utc,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._snapshot = initial or Snapshot(
            yellow=False, green=False, captured_at=clock(), monotonic=monotonic()
        )

    def publish(self, snapshot: Snapshot) -> None:
        with self._lock:
            self._snapshot = snapshot

    def snapshot(self) -> Snapshot:
        return self._snapshot

    def read(self) -> SensorReadout:
        snap = self._snapshot
        return SensorReadout(
            yellow=snap.yellow,
            green=snap.green,
            age_seconds=age_seconds(snap.monotonic, self._monotonic()),
            captured_at=snap.captured_at,
        )
