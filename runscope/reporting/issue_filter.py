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

import logging
from collections.abc import Iterable
from pathlib import Path

from runscope.configuration.source import IssueKind, Source
from runscope.filters.select import SourceFilter
from runscope.reporting.types import Issue

logger = logging.getLogger(__name__)

_DEPRECATIONS = (IssueKind.DEPRECATION, IssueKind.NATIVE_DEPRECATION)


class IssueFilter:
    """
    Applies the reporting policy of a Source to observed issues.

    Policy (in order):
      1) deprecations raised by a configured trigger are always reported
      2) suppressed issues are dropped unless suppression of their kind is ignored
      3) restricted kinds are only reported for files inside the scope

    Issue files are usually absolute. Without an explicit ``source_filter``,
    they are matched relative to ``root`` (the current working directory by
    default), so relative include directories still apply to them.
    """

    def __init__(
        self,
        source: Source,
        source_filter: SourceFilter | None = None,
        *,
        root: Path | None = None,
    ) -> None:
        self._source = source
        if source_filter is None:
            source_filter = SourceFilter(source, root=root if root is not None else Path.cwd())
        self._filter = source_filter

    def should_report(self, issue: Issue) -> bool:
        src = self._source

        if issue.kind in _DEPRECATIONS and issue.trigger is not None:
            if src.deprecation_triggers.contains(issue.trigger):
                return True

        if issue.suppressed and not src.ignores_suppression_of(issue.kind):
            logger.debug("Suppressed %s at %s", issue.kind, issue.location())
            return False

        if src.restricts(issue.kind):
            if issue.file is None or not self._filter.includes(issue.file):
                logger.debug("Out-of-scope %s at %s", issue.kind, issue.location())
                return False

        return True

    def filter(self, issues: Iterable[Issue]) -> tuple[Issue, ...]:
        """
        Deterministic: preserves incoming order.
        """
        return tuple(i for i in issues if self.should_report(i))
