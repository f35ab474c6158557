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

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from runscope.configuration.errors import NoBaselineError, SourceConfigError
from runscope.filters.types import FileCollection, FilterDirectoryCollection

# Issue categories


class IssueKind(StrEnum):
    """
    Category of an issue raised while the tests run.

    "Native" categories are emitted by the interpreter or the standard library
    itself; the others are triggered by user code.
    """

    DEPRECATION = auto()
    NATIVE_DEPRECATION = auto()
    ERROR = auto()
    NOTICE = auto()
    NATIVE_NOTICE = auto()
    WARNING = auto()
    NATIVE_WARNING = auto()

    @classmethod
    def from_str(cls, value: str) -> "IssueKind":
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise SourceConfigError(
                f"Unknown issue kind: {value!r}",
                code="invalid_issue_kind",
                details={"supported": [k.value for k in cls]},
            ) from e


# Deprecation triggers


@dataclass(frozen=True, slots=True)
class DeprecationTriggers:
    """
    Functions and methods whose invocation is always reported as a deprecation.

    Names are kept in the order they were configured. Duplicates are allowed.
    """

    functions: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "functions", _names("functions", self.functions))
        object.__setattr__(self, "methods", _names("methods", self.methods))

    def is_empty(self) -> bool:
        return not self.functions and not self.methods

    def contains(self, name: str) -> bool:
        return name in self.functions or name in self.methods

    def to_dict(self) -> dict[str, list[str]]:
        return {"functions": list(self.functions), "methods": list(self.methods)}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "DeprecationTriggers":
        return DeprecationTriggers(
            functions=data.get("functions") or (),
            methods=data.get("methods") or (),
        )


def _names(key: str, raw: Sequence[str]) -> tuple[str, ...]:
    if isinstance(raw, str):
        raise SourceConfigError(f"Deprecation trigger '{key}' must be a list of names, not a string.")
    out = tuple(raw)
    for name in out:
        if not isinstance(name, str) or not name:
            raise SourceConfigError(
                f"Deprecation trigger '{key}' entries must be non-empty strings.",
                code="invalid_deprecation_trigger",
                details={"key": key, "value": name},
            )
    return out


# Source (core)


@dataclass(frozen=True, slots=True)
class Source:
    """
    Which code is in scope for the run, and how issues in it are reported.

    Source is:
      - constructed once, by configuration assembly
      - NEVER mutated afterwards
      - shared read-only by coverage and issue reporting

    The baseline is stored in ``baseline_file``; callers read it through
    ``baseline()``, which fails loudly when none is configured. Check
    ``use_baseline()`` (not ``has_baseline()``) before applying it: a run can
    ignore a configured baseline without discarding it.
    """

    baseline_file: str | None = None
    ignore_baseline: bool = False

    include_directories: FilterDirectoryCollection = field(default_factory=FilterDirectoryCollection)
    include_files: FileCollection = field(default_factory=FileCollection)
    exclude_directories: FilterDirectoryCollection = field(default_factory=FilterDirectoryCollection)
    exclude_files: FileCollection = field(default_factory=FileCollection)

    # Only report issues located inside the include scope
    restrict_deprecations: bool = False
    restrict_notices: bool = False
    restrict_warnings: bool = False

    # Report issues even where the call site suppresses them
    ignore_suppression_of_deprecations: bool = False
    ignore_suppression_of_native_deprecations: bool = False
    ignore_suppression_of_errors: bool = False
    ignore_suppression_of_notices: bool = False
    ignore_suppression_of_native_notices: bool = False
    ignore_suppression_of_warnings: bool = False
    ignore_suppression_of_native_warnings: bool = False

    deprecation_triggers: DeprecationTriggers = field(default_factory=DeprecationTriggers)

    def __post_init__(self) -> None:
        if self.baseline_file is not None:
            if not isinstance(self.baseline_file, str):
                raise SourceConfigError(
                    f"Baseline must be a string, got {type(self.baseline_file).__name__}.",
                    code="invalid_baseline",
                )
            if not self.baseline_file.strip():
                raise SourceConfigError(
                    "Baseline must be a non-empty string when configured.",
                    code="empty_baseline",
                )

        for name, expected in (
            ("include_directories", FilterDirectoryCollection),
            ("include_files", FileCollection),
            ("exclude_directories", FilterDirectoryCollection),
            ("exclude_files", FileCollection),
            ("deprecation_triggers", DeprecationTriggers),
        ):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise SourceConfigError(
                    f"'{name}' must be a {expected.__name__}, got {type(value).__name__}.",
                    code="invalid_source",
                )

    # Baseline

    def has_baseline(self) -> bool:
        return self.baseline_file is not None

    def use_baseline(self) -> bool:
        return self.has_baseline() and not self.ignore_baseline

    def baseline(self) -> str:
        """
        The configured baseline identifier.

        Raises NoBaselineError when has_baseline() is false.
        """
        if self.baseline_file is None:
            raise NoBaselineError()
        return self.baseline_file

    # Scope

    def not_empty(self) -> bool:
        # exclude sets can only remove from an include scope, never define one
        return self.include_directories.not_empty() or self.include_files.not_empty()

    def is_empty(self) -> bool:
        return not self.not_empty()

    # Per-kind lookups (used by issue reporting)

    def restricts(self, kind: IssueKind) -> bool:
        """
        Whether issues of this kind are only reported inside the include scope.
        Errors are never restricted.
        """
        if kind in (IssueKind.DEPRECATION, IssueKind.NATIVE_DEPRECATION):
            return self.restrict_deprecations
        if kind in (IssueKind.NOTICE, IssueKind.NATIVE_NOTICE):
            return self.restrict_notices
        if kind in (IssueKind.WARNING, IssueKind.NATIVE_WARNING):
            return self.restrict_warnings
        return False

    def ignores_suppression_of(self, kind: IssueKind) -> bool:
        return {
            IssueKind.DEPRECATION: self.ignore_suppression_of_deprecations,
            IssueKind.NATIVE_DEPRECATION: self.ignore_suppression_of_native_deprecations,
            IssueKind.ERROR: self.ignore_suppression_of_errors,
            IssueKind.NOTICE: self.ignore_suppression_of_notices,
            IssueKind.NATIVE_NOTICE: self.ignore_suppression_of_native_notices,
            IssueKind.WARNING: self.ignore_suppression_of_warnings,
            IssueKind.NATIVE_WARNING: self.ignore_suppression_of_native_warnings,
        }[kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseline": self.baseline_file,
            "ignore_baseline": self.ignore_baseline,
            "include": {
                "directories": [d.to_dict() for d in self.include_directories],
                "files": [f.path for f in self.include_files],
            },
            "exclude": {
                "directories": [d.to_dict() for d in self.exclude_directories],
                "files": [f.path for f in self.exclude_files],
            },
            "restrict": {
                "deprecations": self.restrict_deprecations,
                "notices": self.restrict_notices,
                "warnings": self.restrict_warnings,
            },
            "ignore_suppression": {
                "deprecations": self.ignore_suppression_of_deprecations,
                "native_deprecations": self.ignore_suppression_of_native_deprecations,
                "errors": self.ignore_suppression_of_errors,
                "notices": self.ignore_suppression_of_notices,
                "native_notices": self.ignore_suppression_of_native_notices,
                "warnings": self.ignore_suppression_of_warnings,
                "native_warnings": self.ignore_suppression_of_native_warnings,
            },
            "deprecation_triggers": self.deprecation_triggers.to_dict(),
        }
