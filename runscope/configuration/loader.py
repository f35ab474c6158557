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

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from runscope.configuration.errors import SourceConfigError
from runscope.configuration.source import DeprecationTriggers, Source
from runscope.filters.types import File, FileCollection, FilterDirectory, FilterDirectoryCollection

logger = logging.getLogger(__name__)

_SOURCE_KEYS = (
    "baseline",
    "ignore_baseline",
    "include",
    "exclude",
    "restrict",
    "ignore_suppression",
    "deprecation_triggers",
)

_SCOPE_KEYS = ("directories", "files")

_TRIGGER_KEYS = ("functions", "methods")

_RESTRICT_KEYS = ("deprecations", "notices", "warnings")

_IGNORE_SUPPRESSION_KEYS = (
    "deprecations",
    "native_deprecations",
    "errors",
    "notices",
    "native_notices",
    "warnings",
    "native_warnings",
)


class DefaultSourceLoader:
    """
    Loads a Source from runscope.yaml / runscope.yml / runscope.json

    The document is either a mapping with a top-level ``source`` key or the
    source mapping itself. Missing keys fall back to Source defaults.
    """

    def load(self, path: Path) -> Source:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise SourceConfigError(
                f"Configuration file does not exist: {path}",
                code="source_not_found",
                file=str(path),
            )

        if not path.is_file():
            raise SourceConfigError(
                f"Configuration path is not a file: {path}",
                code="source_not_file",
                file=str(path),
            )

        data = self._read_file(path)
        logger.debug("Loaded source configuration from %s", path)

        try:
            return self.load_mapping(data)
        except SourceConfigError as e:
            if e.file is None:
                e.file = str(path)
            raise

    def load_mapping(self, data: Any) -> Source:
        if data is None:
            return Source()

        if not isinstance(data, Mapping):
            raise SourceConfigError("Configuration root must be a mapping/object.", code="invalid_source")

        raw = data.get("source", data)
        if raw is None:
            return Source()
        if not isinstance(raw, Mapping):
            raise SourceConfigError("'source' must be a mapping/object.", code="invalid_source")

        self._check_keys(raw, "source", _SOURCE_KEYS)

        baseline = raw.get("baseline")
        if baseline is not None and not isinstance(baseline, str):
            raise SourceConfigError("'baseline' must be a string when present.", code="invalid_baseline")

        include = self._section(raw, "include", _SCOPE_KEYS)
        exclude = self._section(raw, "exclude", _SCOPE_KEYS)
        restrict = self._flags(raw, "restrict", _RESTRICT_KEYS)
        ignore_suppression = self._flags(raw, "ignore_suppression", _IGNORE_SUPPRESSION_KEYS)

        source = Source(
            baseline_file=baseline,
            ignore_baseline=self._bool(raw.get("ignore_baseline", False), "ignore_baseline"),
            include_directories=self._parse_directories(include.get("directories"), "include.directories"),
            include_files=self._parse_files(include.get("files"), "include.files"),
            exclude_directories=self._parse_directories(exclude.get("directories"), "exclude.directories"),
            exclude_files=self._parse_files(exclude.get("files"), "exclude.files"),
            restrict_deprecations=restrict["deprecations"],
            restrict_notices=restrict["notices"],
            restrict_warnings=restrict["warnings"],
            ignore_suppression_of_deprecations=ignore_suppression["deprecations"],
            ignore_suppression_of_native_deprecations=ignore_suppression["native_deprecations"],
            ignore_suppression_of_errors=ignore_suppression["errors"],
            ignore_suppression_of_notices=ignore_suppression["notices"],
            ignore_suppression_of_native_notices=ignore_suppression["native_notices"],
            ignore_suppression_of_warnings=ignore_suppression["warnings"],
            ignore_suppression_of_native_warnings=ignore_suppression["native_warnings"],
            deprecation_triggers=self._parse_triggers(raw.get("deprecation_triggers")),
        )

        if source.is_empty():
            logger.debug("Source configuration defines no include scope")

        return source

    def _read_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceConfigError(
                f"Failed to decode configuration file (expected utf-8): {path}",
                code="encoding_error",
                file=str(path),
                details={"error": str(e)},
            ) from e
        except OSError as e:
            raise SourceConfigError(
                f"Failed to read configuration file: {path}",
                code="read_error",
                file=str(path),
                details={"error": str(e)},
            ) from e

        try:
            if suffix == ".json":
                return json.loads(raw)

            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SourceConfigError(
                f"Could not parse configuration file: {e}",
                code="invalid_syntax",
                file=str(path),
            ) from e

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise SourceConfigError(
                    f"Unsupported configuration file extension: {path.suffix!s}",
                    code="unsupported_extension",
                    file=str(path),
                    details={"supported": [".yaml", ".yml", ".json"]},
                ) from e

    def _section(self, raw: Mapping[str, Any], key: str, names: tuple[str, ...]) -> Mapping[str, Any]:
        value = raw.get(key)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise SourceConfigError(f"'{key}' must be a mapping/object.", code="invalid_source")
        self._check_keys(value, key, names)
        return value

    @staticmethod
    def _check_keys(section: Mapping[str, Any], where: str, names: tuple[str, ...]) -> None:
        # a misspelt key would otherwise silently fall back to the default policy
        unknown = sorted(str(k) for k in section if k not in names)
        if unknown:
            raise SourceConfigError(
                f"Unknown keys in '{where}': {', '.join(unknown)}",
                code="unknown_key",
                details={"supported": list(names)},
            )

    def _flags(self, raw: Mapping[str, Any], key: str, names: tuple[str, ...]) -> dict[str, bool]:
        section = self._section(raw, key, names)
        return {name: self._bool(section.get(name, False), f"{key}.{name}") for name in names}

    @staticmethod
    def _bool(value: Any, where: str) -> bool:
        if not isinstance(value, bool):
            raise SourceConfigError(f"'{where}' must be true or false.", code="invalid_flag")
        return value

    def _parse_directories(self, raw: Any, where: str) -> FilterDirectoryCollection:
        if raw is None:
            return FilterDirectoryCollection()
        if not isinstance(raw, list):
            raise SourceConfigError(f"'{where}' must be a list when present.", code="invalid_source")

        dirs: list[FilterDirectory] = []
        for item in raw:
            # Support:
            #   - src
            #   - { path: src, prefix: test_, suffix: .py }
            if isinstance(item, str) and item.strip():
                dirs.append(FilterDirectory(path=item.strip()))
                continue

            if isinstance(item, Mapping):
                path = item.get("path")
                if not isinstance(path, str) or not path.strip():
                    raise SourceConfigError(f"Entries in '{where}' need a non-empty 'path'.", code="invalid_source")
                dirs.append(FilterDirectory.from_dict({**item, "path": path.strip()}))
                continue

            raise SourceConfigError(
                f"Entries in '{where}' must be paths or objects with a 'path'.",
                code="invalid_source",
            )

        return FilterDirectoryCollection(directories=tuple(dirs))

    def _parse_files(self, raw: Any, where: str) -> FileCollection:
        if raw is None:
            return FileCollection()
        if not isinstance(raw, list):
            raise SourceConfigError(f"'{where}' must be a list when present.", code="invalid_source")

        files: list[File] = []
        for item in raw:
            if not isinstance(item, str) or not item.strip():
                raise SourceConfigError(f"Entries in '{where}' must be non-empty paths.", code="invalid_source")
            files.append(File(path=item.strip()))

        return FileCollection(files=tuple(files))

    def _parse_triggers(self, raw: Any) -> DeprecationTriggers:
        if raw is None:
            return DeprecationTriggers()
        if not isinstance(raw, Mapping):
            raise SourceConfigError("'deprecation_triggers' must be a mapping/object.", code="invalid_source")
        self._check_keys(raw, "deprecation_triggers", _TRIGGER_KEYS)

        for key in _TRIGGER_KEYS:
            value = raw.get(key)
            if value is not None and not isinstance(value, list):
                raise SourceConfigError(
                    f"'deprecation_triggers.{key}' must be a list when present.",
                    code="invalid_deprecation_trigger",
                )

        return DeprecationTriggers.from_dict(raw)
