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
from typing import Any


class ConfigurationError(Exception):
    """
    Base class for all configuration-related errors.

    These errors describe a problem with how the run was configured (or with how
    a caller used the configuration), never an internal crash.
    """

    code: str
    message: str
    file: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "configuration_error",
        file: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.file = file
        self.details = details

    def __str__(self) -> str:
        loc = f"{self.file}: " if self.file else ""
        return f"{loc}{self.message}"


class NoBaselineError(ConfigurationError):
    """Raised when the baseline is requested but none is configured."""

    def __init__(self, message: str = "No baseline has been configured.") -> None:
        super().__init__(message, code="no_baseline")


class SourceConfigError(ConfigurationError):
    """Raised when source configuration input is malformed."""

    pass
