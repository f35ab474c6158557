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

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Filter entries


@dataclass(frozen=True, slots=True)
class FilterDirectory:
    """
    A directory that contributes source files to (or removes them from) the scope.

    Only files whose basename starts with ``prefix`` and ends with ``suffix``
    are selected. ``path`` may contain glob wildcards (``*``, ``?``, ``**``).
    """

    path: str
    prefix: str = ""
    suffix: str = ".py"

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "prefix": self.prefix, "suffix": self.suffix}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "FilterDirectory":
        return FilterDirectory(
            path=str(data["path"]),
            prefix=str(data.get("prefix") or ""),
            suffix=str(data.get("suffix", ".py") or ""),
        )


@dataclass(frozen=True, slots=True)
class File:
    """
    A single source file, addressed by path.
    """

    path: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path}


# Collections


@dataclass(frozen=True, slots=True)
class FilterDirectoryCollection:
    """
    Ordered, immutable collection of FilterDirectory entries.
    """

    directories: tuple[FilterDirectory, ...] = field(default_factory=tuple)

    @staticmethod
    def from_iterable(items: Iterable[FilterDirectory | str]) -> "FilterDirectoryCollection":
        return FilterDirectoryCollection(
            directories=tuple(d if isinstance(d, FilterDirectory) else FilterDirectory(path=str(d)) for d in items)
        )

    def as_tuple(self) -> tuple[FilterDirectory, ...]:
        return self.directories

    def not_empty(self) -> bool:
        return len(self.directories) > 0

    def is_empty(self) -> bool:
        return not self.not_empty()

    def __len__(self) -> int:
        return len(self.directories)

    def __iter__(self) -> Iterator[FilterDirectory]:
        return iter(self.directories)


@dataclass(frozen=True, slots=True)
class FileCollection:
    """
    Ordered, immutable collection of File entries.
    """

    files: tuple[File, ...] = field(default_factory=tuple)

    @staticmethod
    def from_iterable(items: Iterable[File | str]) -> "FileCollection":
        return FileCollection(files=tuple(f if isinstance(f, File) else File(path=str(f)) for f in items))

    def as_tuple(self) -> tuple[File, ...]:
        return self.files

    def not_empty(self) -> bool:
        return len(self.files) > 0

    def is_empty(self) -> bool:
        return not self.not_empty()

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[File]:
        return iter(self.files)
