"""Planning which projects open as terminal tabs, and with what command."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from grovewt.project import Project

DEFAULT_SHELL_COMMAND = (
    "fish -l -c 'claude --dangerously-skip-permissions --continue; exec fish'"
)
NO_CLAUDE_SHELL_COMMAND = "fish -l"


class TerminalKind(enum.Enum):
    """Terminal emulators that tabs can be opened in."""

    WINDOWS_TERMINAL = "windows_terminal"
    WEZTERM = "wezterm"


@dataclass(frozen=True)
class LaunchTab:
    """One tab to open: its working directory, title and command."""

    cwd: Path
    title: str | None = None
    command: str | None = None


@dataclass
class LaunchPlan:
    """Tabs to open, plus the frozen projects that were left out."""

    tabs: list[LaunchTab] = field(default_factory=list)
    skipped_frozen: list[str] = field(default_factory=list)


class NoProjectsMatchedError(LookupError):
    """Raised when no project is left to launch after filtering."""

    def __init__(self, skipped_frozen: Iterable[str] = ()) -> None:
        super().__init__("no projects matched the filter")
        self.skipped_frozen = list(skipped_frozen)

    def __str__(self) -> str:
        return str(self.args[0])


def parse_only(value: str | Iterable[str] | None) -> frozenset[str] | None:
    """Turn a comma-separated tag list (or several of them) into a set of tags.

    Returns None when no filter was given.
    """
    if value is None:
        return None
    pieces = [value] if isinstance(value, str) else list(value)
    return frozenset(
        tag.strip()
        for piece in pieces
        for tag in piece.split(",")
        if tag.strip()
    )


def select_shell_command(no_claude: bool, configured: str | None = None) -> str:
    """Return the command each tab runs."""
    if no_claude:
        return NO_CLAUDE_SHELL_COMMAND
    return configured if configured is not None else DEFAULT_SHELL_COMMAND


def plan_launch(
    projects: Mapping[str, Project],
    only: Iterable[str] | None,
    shell_command: str,
) -> LaunchPlan:
    """Build tabs for the matching, non-frozen projects, sorted by tag.

    Raises NoProjectsMatchedError when nothing is left to open.
    """
    wanted = frozenset(only) if only is not None else None
    plan = LaunchPlan()
    for tag in sorted(projects):
        if wanted is not None and tag not in wanted:
            continue
        project = projects[tag]
        if project.frozen:
            plan.skipped_frozen.append(tag)
            continue
        plan.tabs.append(LaunchTab(cwd=project.path, title=tag, command=shell_command))
    if not plan.tabs:
        raise NoProjectsMatchedError(plan.skipped_frozen)
    return plan


def parse_terminal_kind(name: str | None) -> TerminalKind | None:
    """Map a configured terminal name to a kind; unknown names give None."""
    if name in ("wt", "windows_terminal"):
        return TerminalKind.WINDOWS_TERMINAL
    if name == "wezterm":
        return TerminalKind.WEZTERM
    return None