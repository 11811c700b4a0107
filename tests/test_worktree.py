from unittest import mock

import pytest

from grovewt.worktree import (
    WorktreeError,
    copy_dir_all,
    is_worktree,
    move_dir,
    read_head_branch,
)


def test_is_worktree_with_git_directory(tmp_path):
    (tmp_path / ".git").mkdir()
    assert is_worktree(tmp_path) is True


def test_is_worktree_with_git_file(tmp_path):
    (tmp_path / ".git").write_text("gitdir: /elsewhere\n")
    assert is_worktree(tmp_path) is True


def test_is_worktree_without_git(tmp_path):
    assert is_worktree(tmp_path) is False


def test_read_head_branch_main_worktree(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/feature-x\n")
    assert read_head_branch(tmp_path) == "feature-x"


def test_read_head_branch_linked_relative_gitdir(tmp_path):
    wt = tmp_path / "wt"
    wt.mkdir()
    gitdir = tmp_path / "meta" / "worktrees" / "wt"
    gitdir.mkdir(parents=True)
    (gitdir / "HEAD").write_text("ref: refs/heads/DESKTOP-1-wt\n")
    (wt / ".git").write_text("gitdir: ../meta/worktrees/wt\n")
    assert read_head_branch(wt) == "DESKTOP-1-wt"


def test_read_head_branch_linked_absolute_gitdir(tmp_path):
    wt = tmp_path / "wt"
    wt.mkdir()
    gitdir = tmp_path / "gd"
    gitdir.mkdir()
    (gitdir / "HEAD").write_text("ref: refs/heads/topic\n")
    (wt / ".git").write_text(f"gitdir: {gitdir}\n")
    assert read_head_branch(wt) == "topic"


def test_read_head_branch_detached_is_none(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("0123456789abcdef0123456789abcdef01234567\n")
    assert read_head_branch(tmp_path) is None


def test_read_head_branch_missing_is_none(tmp_path):
    assert read_head_branch(tmp_path) is None


def test_read_head_branch_bad_git_file_is_none(tmp_path):
    (tmp_path / ".git").write_text("not a gitdir line\n")
    assert read_head_branch(tmp_path) is None


def _make_tree(root):
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "sub" / "b.txt").write_text("beta")
    (root / "sub" / "deep" / "c.txt").write_text("gamma")


def test_copy_dir_all_copies_nested_tree(tmp_path):
    src = tmp_path / "src"
    _make_tree(src)
    dest = tmp_path / "dest"
    copy_dir_all(src, dest)
    assert (dest / "a.txt").read_text() == "alpha"
    assert (dest / "sub" / "deep" / "c.txt").read_text() == "gamma"
    assert (src / "a.txt").exists()


def test_move_dir_renames_and_creates_parent(tmp_path):
    src = tmp_path / "src"
    _make_tree(src)
    dest = tmp_path / "new" / "parent" / "dest"
    move_dir(src, dest)
    assert not src.exists()
    assert (dest / "sub" / "b.txt").read_text() == "beta"


def test_move_dir_falls_back_to_copy(tmp_path):
    src = tmp_path / "src"
    _make_tree(src)
    dest = tmp_path / "dest"
    with mock.patch("grovewt.worktree.os.rename", side_effect=OSError("cross-device")):
        move_dir(src, dest)
    assert not src.exists()
    assert (dest / "a.txt").read_text() == "alpha"
    assert (dest / "sub" / "deep" / "c.txt").read_text() == "gamma"


def test_move_dir_missing_source_raises(tmp_path):
    with pytest.raises(WorktreeError):
        move_dir(tmp_path / "absent", tmp_path / "dest")