from pathlib import Path

import pytest
from runscope.configuration.source import Source
from runscope.filters.select import SourceFilter, glob_to_regex, normalize_path
from runscope.filters.types import File, FileCollection, FilterDirectory, FilterDirectoryCollection

# ----------------------------
# Collections
# ----------------------------


def test_collections_emptiness_and_iteration():
    d = FilterDirectoryCollection.from_iterable(["src", FilterDirectory(path="tests", prefix="test_")])
    f = FileCollection.from_iterable(["a.py", File(path="b.py")])

    assert d.not_empty() and not d.is_empty()
    assert len(d) == 2
    assert [x.path for x in d] == ["src", "tests"]
    assert [x.path for x in f] == ["a.py", "b.py"]

    assert FilterDirectoryCollection().is_empty()
    assert not FileCollection().not_empty()


def test_filter_directory_from_dict_defaults():
    assert FilterDirectory.from_dict({"path": "src"}) == FilterDirectory(path="src", prefix="", suffix=".py")
    assert FilterDirectory.from_dict({"path": "src", "suffix": None}).suffix == ""


# ----------------------------
# Path helpers
# ----------------------------


def test_normalize_path():
    assert normalize_path("./src/a.py") == "src/a.py"
    assert normalize_path("src/") == "src"
    assert normalize_path(Path("/repo/src/a.py"), Path("/repo")) == "src/a.py"
    assert normalize_path(Path("/elsewhere/a.py"), Path("/repo")) == "/elsewhere/a.py"


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("src", "src/a.py", True),
        ("src", "src/pkg/a.py", True),
        ("src", "srcx/a.py", False),
        ("src/*/gen", "src/pkg/gen/a.py", True),
        ("src/*/gen", "src/a/b/gen/a.py", False),
        ("**/generated", "src/pkg/generated/a.py", True),
        ("**/generated", "generated/a.py", True),
        ("pkg?", "pkg1/a.py", True),
    ],
)
def test_glob_to_regex(pattern: str, path: str, expected: bool):
    assert (glob_to_regex(pattern).match(path) is not None) is expected


# ----------------------------
# SourceFilter
# ----------------------------


def make_source(**kwargs) -> Source:
    return Source(
        include_directories=FilterDirectoryCollection.from_iterable(kwargs.pop("include_directories", ())),
        include_files=FileCollection.from_iterable(kwargs.pop("include_files", ())),
        exclude_directories=FilterDirectoryCollection.from_iterable(kwargs.pop("exclude_directories", ())),
        exclude_files=FileCollection.from_iterable(kwargs.pop("exclude_files", ())),
        **kwargs,
    )


def test_empty_scope_includes_nothing():
    flt = SourceFilter(make_source(exclude_directories=["vendor"]))
    assert flt.includes("src/a.py") is False


def test_include_directory_with_suffix():
    flt = SourceFilter(make_source(include_directories=["src"]))

    assert flt.includes("src/a.py") is True
    assert flt.includes("src/pkg/b.py") is True
    assert flt.includes("src/data.json") is False
    assert flt.includes("lib/a.py") is False


def test_include_directory_with_prefix():
    flt = SourceFilter(make_source(include_directories=[FilterDirectory(path="tests", prefix="test_")]))

    assert flt.includes("tests/test_a.py") is True
    assert flt.includes("tests/helpers.py") is False


def test_include_file_outside_directories():
    flt = SourceFilter(make_source(include_directories=["src"], include_files=["bin/tool.py"]))

    assert flt.includes("bin/tool.py") is True
    assert flt.includes("bin/other.py") is False


def test_excludes_win_over_includes():
    flt = SourceFilter(
        make_source(
            include_directories=["src"],
            exclude_directories=["src/generated"],
            exclude_files=["src/settings.py"],
        )
    )

    assert flt.includes("src/a.py") is True
    assert flt.includes("src/generated/models.py") is False
    assert flt.includes("src/settings.py") is False


def test_absolute_paths_are_made_relative_to_root(tmp_path: Path):
    flt = SourceFilter(make_source(include_directories=["src"]), root=tmp_path)

    assert flt.includes(tmp_path / "src" / "a.py") is True
    assert flt.includes(tmp_path / "other" / "a.py") is False
    assert flt.source.not_empty()
