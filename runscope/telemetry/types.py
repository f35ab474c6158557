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

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class TelemetryInfo(Protocol):
    """
    Point-in-time telemetry record attached to every event.

    Only the textual rendering is relied upon by event consumers.
    """

    def as_string(self) -> str: ...


def format_duration(value: timedelta) -> str:
    """
    HH:MM:SS.ffffff rendering of a non-negative duration.
    """
    total_us = max(0, value // timedelta(microseconds=1))
    seconds, micros = divmod(total_us, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{micros:06d}"


@dataclass(frozen=True, slots=True)
class Info:
    """
    Telemetry snapshot taken when an event is emitted.
    """

    time: datetime
    duration_since_start: timedelta
    duration_since_previous: timedelta
    memory_usage: int  # bytes
    peak_memory_usage: int  # bytes

    def as_string(self) -> str:
        return (
            f"[{format_duration(self.duration_since_start)} / "
            f"{format_duration(self.duration_since_previous)}] "
            f"[{self.memory_usage} bytes]"
        )

    def __str__(self) -> str:
        return self.as_string()
