# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Runscope Contributors
#
# This file is part of Runscope.
#
# Runscope is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Runscope is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import time
import tracemalloc
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from runscope.telemetry.types import Info

MemoryMeter = Callable[[], tuple[int, int]]
"""
Returns (current, peak) memory usage in bytes.
"""


def tracemalloc_meter() -> tuple[int, int]:
    if not tracemalloc.is_tracing():
        return 0, 0
    return tracemalloc.get_traced_memory()


class TelemetrySystem:
    """
    Produces telemetry snapshots relative to the moment it was created.

    Typical lifecycle:
      telemetry = TelemetrySystem()
      info = telemetry.snapshot()
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.perf_counter,
        memory_meter: MemoryMeter = tracemalloc_meter,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._clock = clock
        self._memory_meter = memory_meter
        self._now = now
        self._start = clock()
        self._previous = self._start

    def snapshot(self) -> Info:
        current = self._clock()
        memory, peak = self._memory_meter()

        info = Info(
            time=self._now(),
            duration_since_start=timedelta(seconds=current - self._start),
            duration_since_previous=timedelta(seconds=current - self._previous),
            memory_usage=memory,
            peak_memory_usage=peak,
        )
        self._previous = current
        return info
