"""Naming, project records, worktree helpers, listings and launch planning for git worktrees."""

__version__ = "0.1.0"

__all__ = [
    "launching",
    "listing",
    "matching",
    "naming",
    "project",
    "status_format",
    "version",
    "worktree",
]