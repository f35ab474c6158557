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
from typing import Protocol, runtime_checkable

from runscope.configuration.types import Configuration
from runscope.telemetry.types import TelemetryInfo


@runtime_checkable
class Event(Protocol):
    """
    Anything the dispatcher can deliver: carries telemetry and renders itself.
    """

    @property
    def telemetry_info(self) -> TelemetryInfo: ...

    def as_string(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ConfigurationCombined:
    """
    Emitted once, when the run configuration has been fully merged.

    A read-only carrier: it neither owns nor mutates the telemetry snapshot or
    the configuration it references.
    """

    telemetry_info: TelemetryInfo
    configuration: Configuration

    def as_string(self) -> str:
        return f"{self.telemetry_info.as_string()} Test Runner Configuration Combined"

    def __str__(self) -> str:
        return self.as_string()
