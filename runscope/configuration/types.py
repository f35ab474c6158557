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

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from runscope._version import __version__
from runscope.configuration.source import Source


@dataclass(frozen=True, slots=True)
class Configuration:
    """
    Fully merged run configuration.

    Built once after CLI arguments and configuration files have been combined.
    Subsystems should not mutate it.
    """

    source: Source
    configuration_file: Path | None = None
    cache_directory: Path | None = None
    output_format: str = "text"
    deterministic: bool = True
    tool_version: str = __version__

    # Settings owned by other subsystems, passed through untouched.
    extra: Mapping[str, Any] = field(default_factory=dict)

    def has_configuration_file(self) -> bool:
        return self.configuration_file is not None
