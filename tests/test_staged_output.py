"""Tests for staged, all-or-nothing output writes."""

from pathlib import Path

import pytest

from cl_thumbnail_tools.utils.staged_output import remove_stale, staged_output


def test_commit_moves_file(tmp_path: Path):
    target = tmp_path / "thumb.jpg"

    with staged_output(target) as staged:
        assert staged.path.parent == tmp_path
        assert staged.path.stat().st_size == 0
        _ = staged.path.write_bytes(b"data")
        assert staged.commit()

    assert target.read_bytes() == b"data"
    assert list(tmp_path.iterdir()) == [target]


def test_empty_file_is_not_committed(tmp_path: Path):
    target = tmp_path / "thumb.jpg"

    with staged_output(target) as staged:
        staged.path.touch()
        assert not staged.commit()

    assert list(tmp_path.iterdir()) == []


def test_uncommitted_file_removed_on_error(tmp_path: Path):
    with pytest.raises(RuntimeError):
        with staged_output(tmp_path / "thumb.jpg") as staged:
            _ = staged.path.write_bytes(b"partial")
            raise RuntimeError("encoder crashed")

    assert list(tmp_path.iterdir()) == []


def test_missing_output_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        with staged_output(tmp_path / "missing" / "thumb.jpg"):
            pass


def test_remove_stale(tmp_path: Path):
    target = tmp_path / "thumb.jpg"
    _ = target.write_bytes(b"old")

    remove_stale(target)
    remove_stale(target)

    assert not target.exists()


def test_numbered_siblings_removed(tmp_path: Path):
    target = tmp_path / "thumb.jpg"

    with staged_output(target) as staged:
        for frame in range(2):
            numbered = staged.path.with_name(f"{staged.path.stem}-{frame}{staged.path.suffix}")
            _ = numbered.write_bytes(b"frame")
        assert not staged.commit()

    assert list(tmp_path.iterdir()) == []


def test_numbered_siblings_removed_after_commit(tmp_path: Path):
    target = tmp_path / "[thumb].jpg"

    with staged_output(target) as staged:
        _ = staged.path.write_bytes(b"data")
        _ = staged.path.with_name(f"{staged.path.stem}-1{staged.path.suffix}").write_bytes(b"x")
        assert staged.commit()

    assert list(tmp_path.iterdir()) == [target]
