"""Filesystem helpers for inspecting and relocating git worktrees."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

_GITDIR_PREFIX = "gitdir: "
_HEAD_REF_PREFIX = "ref: refs/heads/"


class WorktreeError(OSError):
    """Raised when a worktree directory cannot be moved or created."""


def is_worktree(path: str | os.PathLike[str]) -> bool:
    """True if *path* has a ``.git`` entry (file for linked, directory for main)."""
    return (Path(path) / ".git").exists()


def read_head_branch(path: str | os.PathLike[str]) -> str | None:
    """Return the branch checked out in the worktree at *path*, or None."""
    root = Path(path)
    dot_git = root / ".git"
    try:
        if dot_git.is_file():
            content = dot_git.read_text(encoding="utf-8")
            if not content.startswith(_GITDIR_PREFIX):
                return None
            gitdir = Path(content[len(_GITDIR_PREFIX):].strip())
            if not gitdir.is_absolute():
                gitdir = root / gitdir
            head_path = gitdir / "HEAD"
        else:
            head_path = dot_git / "HEAD"
        head = head_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    if not head.startswith(_HEAD_REF_PREFIX):
        return None
    return head[len(_HEAD_REF_PREFIX):].strip()


def copy_dir_all(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Recursively copy the directory *src* into *dest*."""
    dest_path = Path(dest)
    dest_path.mkdir(parents=True, exist_ok=True)
    with os.scandir(src) as entries:
        for entry in entries:
            target = dest_path / entry.name
            if entry.is_dir(follow_symlinks=False):
                copy_dir_all(entry.path, target)
            else:
                shutil.copy(entry.path, target)


def move_dir(src: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Move *src* to *dest*, falling back to copy-and-delete across filesystems."""
    src_path = Path(src)
    dest_path = Path(dest)
    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WorktreeError(str(exc)) from exc

    try:
        os.rename(src_path, dest_path)
        return
    except OSError:
        pass

    try:
        copy_dir_all(src_path, dest_path)
        shutil.rmtree(src_path)
    except OSError as exc:
        raise WorktreeError(str(exc)) from exc