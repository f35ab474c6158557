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

from runscope.configuration.errors import ConfigurationError, NoBaselineError, SourceConfigError
from runscope.configuration.loader import DefaultSourceLoader
from runscope.configuration.source import DeprecationTriggers, IssueKind, Source
from runscope.configuration.types import Configuration

__all__ = [
    "Source",
    "DeprecationTriggers",
    "IssueKind",
    "Configuration",
    "DefaultSourceLoader",
    "ConfigurationError",
    "NoBaselineError",
    "SourceConfigError",
]
