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

from runscope.filters.select import SourceFilter, glob_to_regex, normalize_path
from runscope.filters.types import File, FileCollection, FilterDirectory, FilterDirectoryCollection

__all__ = [
    "File",
    "FileCollection",
    "FilterDirectory",
    "FilterDirectoryCollection",
    "SourceFilter",
    "glob_to_regex",
    "normalize_path",
]
