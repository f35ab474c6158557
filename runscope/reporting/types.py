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

from runscope.configuration.source import IssueKind


@dataclass(frozen=True, slots=True)
class Issue:
    """
    A deprecation, notice, warning or error observed while the tests ran.
    """

    kind: IssueKind
    message: str
    file: str | None = None
    line: int | None = None

    # True when the call site asked for the issue to be silenced
    suppressed: bool = False

    # Fully qualified function or method whose invocation raised the issue
    trigger: str | None = None

    def location(self) -> str:
        if self.file is None:
            return "<unknown>"
        return self.file if self.line is None else f"{self.file}:{self.line}"
