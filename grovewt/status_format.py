"""Working-tree status records and their short textual forms."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from grovewt.project import Project

_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Status:
    """Git status of one worktree.

    ``ahead`` and ``behind`` are None when there is no upstream to compare with.
    """

    dirty: bool = False
    ahead: int | None = None
    behind: int | None = None
    untracked: int = 0
    is_pushed: bool = True


@dataclass
class ProjectRow:
    """One project as shown in a listing."""

    tag: str
    project: Project
    status: Status | None = None
    missing: bool = False


def _counts(status: Status) -> tuple[int, int]:
    return status.ahead or 0, status.behind or 0


def format_status(status: Status | None) -> str:
    """Return a word or phrase describing *status*, e.g. ``"2 ahead"``."""
    if status is None:
        return "unknown"
    if status.dirty:
        return "dirty"
    ahead, behind = status.ahead, status.behind
    if ahead is None or behind is None:
        return "clean"
    if ahead == 0 and behind == 0:
        return "clean"
    if ahead > 0 and behind == 0:
        return f"{ahead} ahead"
    if ahead == 0 and behind > 0:
        return f"{behind} behind"
    return f"{ahead} ahead, {behind} behind"


def status_glyph(status: Status | None) -> str:
    """Return the single-character symbol for *status*."""
    if status is None:
        return "?"
    if status.dirty:
        return "●"
    ahead, behind = _counts(status)
    if ahead == 0 and behind == 0:
        return "✓"
    if behind == 0:
        return "↑"
    if ahead == 0:
        return "↓"
    return "↕"


def status_color(row: ProjectRow) -> str:
    """Return the colour name used for the status of *row*.

    ``"dim"`` marks a row whose status was not scanned.
    """
    if row.missing:
        return "red"
    status = row.status
    if status is None:
        return "dim"
    if status.dirty:
        return "yellow"
    ahead, behind = _counts(status)
    if ahead == 0 and behind == 0:
        return "green"
    if behind == 0:
        return "cyan"
    if ahead == 0:
        return "magenta"
    return "yellow"


def strip_issue_prefix(branch: str) -> str | None:
    """If *branch* starts with ``<PREFIX>-<digits>-``, return what follows it."""
    _, first_dash, after_prefix = branch.partition("-")
    if not first_dash:
        return None
    middle, second_dash, rest = after_prefix.partition("-")
    if not second_dash:
        return None
    if middle and all(c in _ASCII_DIGITS for c in middle):
        return rest
    return None


def build_summary(rows: Iterable[ProjectRow]) -> str:
    """Return a footer such as ``"4 projects · 1 dirty · 2 ahead · 1 frozen"``."""
    total = dirty = ahead = behind = frozen = missing = scanned = 0
    for row in rows:
        total += 1
        if row.project.frozen:
            frozen += 1
        if row.missing:
            missing += 1
            continue
        if row.status is None:
            continue
        scanned += 1
        if row.status.dirty:
            dirty += 1
            continue
        row_ahead, row_behind = _counts(row.status)
        if row_ahead > 0:
            ahead += 1
        if row_behind > 0:
            behind += 1

    parts = [f"{total} {'project' if total == 1 else 'projects'}"]
    for count, label in (
        (dirty, "dirty"),
        (ahead, "ahead"),
        (behind, "behind"),
        (frozen, "frozen"),
        (missing, "missing"),
        (max(total - (scanned + missing), 0), "unscanned"),
    ):
        if count > 0:
            parts.append(f"{count} {label}")
    return " · ".join(parts)