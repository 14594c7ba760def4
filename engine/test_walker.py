from pathlib import Path

from conftest import write_tree
from engine.walker import walk_tree


def test_missing_root_is_empty(tmp_path: Path):
    assert walk_tree(tmp_path / "nope", ".js") == []


def test_empty_root_is_empty(tmp_path: Path):
    assert walk_tree(tmp_path, ".js") == []


def test_filters_by_extension(tmp_path: Path):
    write_tree(tmp_path, {"a.js": b"", "b.css": b"", "c.js.map": b"", "d.JS": b""})
    assert walk_tree(tmp_path, ".js") == [tmp_path / "a.js"]
    assert walk_tree(tmp_path, ".css") == [tmp_path / "b.css"]


def test_lexical_depth_first_order(tmp_path: Path):
    write_tree(
        tmp_path,
        {
            "b.js": b"",
            "a/z.js": b"",
            "a/b/y.js": b"",
            "c/x.js": b"",
            "a.js": b"",
        },
    )
    found = [p.relative_to(tmp_path).as_posix() for p in walk_tree(tmp_path, ".js")]
    assert found == ["a/b/y.js", "a/z.js", "a.js", "b.js", "c/x.js"]


def test_directories_matching_extension_are_descended(tmp_path: Path):
    write_tree(tmp_path, {"lib.js/inner.js": b""})
    assert walk_tree(tmp_path, ".js") == [tmp_path / "lib.js" / "inner.js"]


def test_order_is_stable(tmp_path: Path):
    write_tree(tmp_path, {f"m{i}/f{j}.js": b"" for i in range(4) for j in range(4)})
    assert walk_tree(tmp_path, ".js") == walk_tree(tmp_path, ".js")


def test_file_root(tmp_path: Path):
    write_tree(tmp_path, {"one.js": b""})
    assert walk_tree(tmp_path / "one.js", ".js") == [tmp_path / "one.js"]
    assert walk_tree(tmp_path / "one.js", ".css") == []
