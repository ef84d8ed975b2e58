import os

import pytest

from mdpress.fsutil import (
    copy_files_except_ext,
    create_file,
    get_404_output_file,
    normalize_path,
    path_to_root,
    remove_dir_content,
    write_file,
)


def test_copy_files_except_ext(tmp_path):
    (tmp_path / "file.txt").touch()
    (tmp_path / "file.md").touch()
    (tmp_path / "file.png").touch()
    (tmp_path / "sub_dir").mkdir()
    (tmp_path / "sub_dir" / "file.png").touch()
    (tmp_path / "sub_dir_exists").mkdir()
    (tmp_path / "sub_dir_exists" / "file.txt").touch()
    os.symlink(tmp_path / "file.png", tmp_path / "symlink.png")

    (tmp_path / "output").mkdir()
    (tmp_path / "output" / "sub_dir_exists").mkdir()

    copy_files_except_ext(tmp_path, tmp_path / "output", True, None, ["md"])

    assert (tmp_path / "output" / "file.txt").exists()
    assert not (tmp_path / "output" / "file.md").exists()
    assert (tmp_path / "output" / "file.png").exists()
    assert (tmp_path / "output" / "sub_dir" / "file.png").exists()
    assert (tmp_path / "output" / "sub_dir_exists" / "file.txt").exists()
    assert (tmp_path / "output" / "symlink.png").exists()
    assert not (tmp_path / "output" / "output").exists()


def test_copy_files_respects_avoid_dir_and_recursion(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_bytes(b"alpha")
    (src / "build").mkdir()
    (src / "build" / "b.txt").touch()
    (src / "nested").mkdir()
    (src / "nested" / "c.txt").touch()

    out = tmp_path / "out"
    out.mkdir()
    copy_files_except_ext(src, out, True, src / "build", [])
    assert (out / "a.txt").read_bytes() == b"alpha"
    assert (out / "nested" / "c.txt").exists()
    assert not (out / "build").exists()

    flat = tmp_path / "flat"
    flat.mkdir()
    copy_files_except_ext(src, flat, False, None, [])
    assert sorted(p.name for p in flat.iterdir()) == ["a.txt"]


def test_copy_files_same_source_and_destination_is_noop(tmp_path):
    (tmp_path / "x.txt").write_bytes(b"x")
    copy_files_except_ext(tmp_path, tmp_path, True, None, [])
    assert sorted(p.name for p in tmp_path.iterdir()) == ["x.txt"]


def test_copy_files_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_files_except_ext(tmp_path / "missing", tmp_path / "out", True, None, [])


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("some/relative/path", "../../"),
        ("print.md", ""),
        ("a/b.md", "../"),
        ("a/b/c/d.md", "../../../"),
    ],
)
def test_path_to_root(path, expected):
    assert path_to_root(path) == expected


def test_normalize_path_keeps_forward_slashes():
    assert normalize_path("a/b/c.html") == "a/b/c.html"
    assert normalize_path(os.path.join("x", "y.md")) == "x/y.md"


def test_write_file_creates_parent_directories(tmp_path):
    write_file(tmp_path, "deep/nested/file.txt", b"content")
    assert (tmp_path / "deep" / "nested" / "file.txt").read_bytes() == b"content"


def test_write_file_overwrites(tmp_path):
    write_file(tmp_path, "f.txt", b"first")
    write_file(tmp_path, "f.txt", b"2")
    assert (tmp_path / "f.txt").read_bytes() == b"2"


def test_create_file_returns_writable_handle(tmp_path):
    target = tmp_path / "one" / "two.bin"
    with create_file(target) as handle:
        handle.write(b"\x00\x01")
    assert target.read_bytes() == b"\x00\x01"


def test_remove_dir_content_keeps_directory(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "file.txt").touch()
    (root / "sub").mkdir()
    (root / "sub" / "inner.txt").touch()

    remove_dir_content(root)

    assert root.is_dir()
    assert list(root.iterdir()) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "404.html"),
        ("missing.md", "missing.html"),
        ("", ""),
        ("custom.txt", "custom.txt"),
    ],
)
def test_get_404_output_file(value, expected):
    assert get_404_output_file(value) == expected