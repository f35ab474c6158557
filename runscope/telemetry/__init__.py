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

from runscope.telemetry.system import MemoryMeter, TelemetrySystem, tracemalloc_meter
from runscope.telemetry.types import Info, TelemetryInfo, format_duration

__all__ = [
    "Info",
    "TelemetryInfo",
    "TelemetrySystem",
    "MemoryMeter",
    "format_duration",
    "tracemalloc_meter",
]
