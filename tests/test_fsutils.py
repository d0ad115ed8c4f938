from pathlib import Path

import pytest

from samlib.fsutils import (
    FSError,
    PathDoesNotExistError,
    PathInsufficientPermissionError,
    PathNotDirectoryError,
    PathNotFileError,
    TempDirectory,
    TempFile,
    ensure_exists,
    ensure_is_directory,
    ensure_is_file,
    ensure_sufficient_permissions,
    replace_home_variable,
    walk_dir,
)


def test_temp_directory_created_and_removed():
    tmp = TempDirectory()
    assert tmp.path.is_dir()
    assert tmp.path.name.startswith("sam-temp-dir-")
    tmp.cleanup()
    assert not tmp.path.exists()


def test_temp_directory_context_manager_removes_contents():
    with TempDirectory() as tmp:
        (tmp.path / "inner.txt").write_text("data")
        path = tmp.path
        assert (path / "inner.txt").is_file()
    assert not path.exists()


def test_temp_file_created_and_removed():
    with TempFile() as tmp:
        assert tmp.path.is_file()
        assert tmp.path.suffix == ".tmp"
        path = tmp.path
    assert not path.exists()


def test_temp_files_have_distinct_paths():
    with TempFile() as a, TempFile() as b:
        assert a.path != b.path


def test_walk_dir_lists_files_and_one_level_of_subdirs(tmp_path):
    (tmp_path / "top.txt").write_text("x")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner.txt").write_text("y")
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "hidden.txt").write_text("z")

    found = set(walk_dir(tmp_path))
    assert found == {tmp_path / "top.txt", sub / "inner.txt", deeper}


def test_walk_dir_missing_directory_raises(tmp_path):
    with pytest.raises(FSError):
        walk_dir(tmp_path / "missing")


def test_replace_home_variable(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    home = str(Path.home())
    assert replace_home_variable("$HOME/aliases.yaml") == f"{home}/aliases.yaml"


def test_replace_home_variable_without_placeholder():
    assert replace_home_variable("/etc/sam.toml") == "/etc/sam.toml"


def test_ensure_exists(tmp_path):
    assert ensure_exists(tmp_path) == tmp_path
    with pytest.raises(PathDoesNotExistError) as info:
        ensure_exists(tmp_path / "nope")
    assert info.value.path == tmp_path / "nope"


def test_ensure_is_directory(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("a")
    assert ensure_is_directory(tmp_path) == tmp_path
    with pytest.raises(PathNotDirectoryError):
        ensure_is_directory(f)


def test_ensure_is_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("a")
    assert ensure_is_file(f) == f
    with pytest.raises(PathNotFileError) as info:
        ensure_is_file(tmp_path)
    assert str(info.value) == f"provided path {tmp_path} is not a file"


def test_ensure_sufficient_permissions(tmp_path):
    assert ensure_sufficient_permissions(tmp_path) == tmp_path
    with pytest.raises(PathInsufficientPermissionError):
        ensure_sufficient_permissions(tmp_path / "missing")


def test_path_errors_are_fs_errors(tmp_path):
    with pytest.raises(FSError):
        ensure_exists(tmp_path / "missing")