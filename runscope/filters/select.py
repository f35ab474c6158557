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

import re
from functools import lru_cache
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from runscope.filters.types import FileCollection, FilterDirectory, FilterDirectoryCollection

if TYPE_CHECKING:
    from runscope.configuration.source import Source


@lru_cache(maxsize=2048)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Translate a directory glob to a compiled regex, supporting:
      - **  => match zero or more path segments
      - *   => [^/]*
      - ?   => [^/]
    The match is anchored at the start and accepts anything below the directory.
    """
    i = 0
    n = len(pattern)
    out: list[str] = ["^"]
    while i < n:
        c = pattern[i]
        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                if i + 2 < n and pattern[i + 2] == "/":
                    out.append("(?:(?:.*/)|)")
                    i += 3
                else:
                    out.append(".*")
                    i += 2
            else:
                out.append("[^/]*")
                i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        else:
            out.append(re.escape(c))
            i += 1
    out.append("(?:/.*)?$")
    return re.compile("".join(out))


def normalize_path(path: str | Path, root: Path | None = None) -> str:
    """
    Repo-relative POSIX form of a path (or the POSIX form of the path itself
    when it does not live under root).
    """
    p = Path(path)
    if root is not None and p.is_absolute():
        try:
            p = p.relative_to(root)
        except ValueError:
            pass
    posix = p.as_posix()
    while posix.startswith("./"):
        posix = posix[2:]
    return posix.rstrip("/") or "."


def directory_matches(directory: FilterDirectory, path: str, root: Path | None = None) -> bool:
    dir_path = normalize_path(directory.path.replace("\\", "/"), root)
    if dir_path != "." and glob_to_regex(dir_path).match(path) is None:
        return False

    name = PurePosixPath(path).name
    return name.startswith(directory.prefix) and name.endswith(directory.suffix)


def file_matches(files: FileCollection, path: str, root: Path | None = None) -> bool:
    return any(normalize_path(f.path.replace("\\", "/"), root) == path for f in files)


def any_directory_matches(directories: FilterDirectoryCollection, path: str, root: Path | None = None) -> bool:
    return any(directory_matches(d, path, root) for d in directories)


class SourceFilter:
    """
    Decides whether a file belongs to the scope described by a Source.

    A file is in scope when it is selected by an include directory or listed as
    an include file, and neither an exclude directory nor an exclude file
    removes it. An empty scope includes nothing.
    """

    def __init__(self, source: "Source", root: Path | None = None) -> None:
        self._source = source
        self._root = root.resolve() if root is not None else None

    @property
    def source(self) -> "Source":
        return self._source

    def includes(self, path: str | Path) -> bool:
        if self._source.is_empty():
            return False

        rel = normalize_path(path, self._root)
        src = self._source

        included = file_matches(src.include_files, rel, self._root) or any_directory_matches(
            src.include_directories, rel, self._root
        )
        if not included:
            return False

        if file_matches(src.exclude_files, rel, self._root):
            return False

        return not any_directory_matches(src.exclude_directories, rel, self._root)
