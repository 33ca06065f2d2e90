import os

from hcsbench.filesystem import (
    combine_path,
    create_dir,
    create_file,
    is_dir_exists,
    is_file_exists,
    remove_dir,
    remove_file,
)


def test_combine_path_joins_with_slash():
    assert combine_path("dir", "file.txt") == "dir/file.txt"


def test_create_file_writes_data(tmp_path, capsys):
    assert create_file(str(tmp_path), "data.txt", "hello\nworld\n") is True
    path = tmp_path / "data.txt"
    assert path.read_text(encoding="utf-8") == "hello\nworld\n"
    assert f"filePath: {tmp_path}/data.txt" in capsys.readouterr().out


def test_create_file_with_empty_data_is_empty(tmp_path):
    assert create_file(str(tmp_path), "empty.txt", "") is True
    assert (tmp_path / "empty.txt").read_text(encoding="utf-8") == ""


def test_create_file_without_dir_uses_file_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert create_file("", "plain.txt", "abc") is True
    assert (tmp_path / "plain.txt").read_text(encoding="utf-8") == "abc"


def test_create_file_in_missing_dir_fails(tmp_path):
    assert create_file(str(tmp_path / "missing"), "x.txt", "abc") is False


def test_is_file_exists(tmp_path):
    path = tmp_path / "f.txt"
    assert is_file_exists(str(path)) is False
    path.write_text("x", encoding="utf-8")
    assert is_file_exists(str(path)) is True


def test_is_file_exists_false_for_directory(tmp_path):
    assert is_file_exists(str(tmp_path)) is False


def test_is_dir_exists_leaves_no_probe(tmp_path):
    assert is_dir_exists(str(tmp_path)) is True
    assert os.listdir(tmp_path) == []


def test_is_dir_exists_keeps_existing_probe_file(tmp_path):
    probe = tmp_path / "tmp"
    probe.write_text("keep", encoding="utf-8")
    assert is_dir_exists(str(tmp_path)) is True
    assert probe.read_text(encoding="utf-8") == "keep"


def test_is_dir_exists_false_for_missing(tmp_path):
    assert is_dir_exists(str(tmp_path / "nope")) is False


def test_create_dir_then_again(tmp_path):
    target = str(tmp_path / "new")
    assert create_dir(target) is True
    assert os.path.isdir(target)
    assert create_dir(target) is False


def test_create_dir_with_missing_parent_fails(tmp_path):
    assert create_dir(str(tmp_path / "a" / "b")) is False
    assert not (tmp_path / "a").exists()


def test_remove_file(tmp_path):
    (tmp_path / "r.txt").write_text("x", encoding="utf-8")
    assert remove_file(str(tmp_path), "r.txt") is True
    assert not (tmp_path / "r.txt").exists()
    assert remove_file(str(tmp_path), "r.txt") is False


def test_remove_dir(tmp_path):
    target = tmp_path / "d"
    target.mkdir()
    assert remove_dir(str(target)) is True
    assert not target.exists()
    assert remove_dir(str(target)) is False


def test_remove_dir_refuses_non_empty(tmp_path):
    target = tmp_path / "full"
    target.mkdir()
    (target / "inner.txt").write_text("x", encoding="utf-8")
    assert remove_dir(str(target)) is False
    assert target.is_dir()