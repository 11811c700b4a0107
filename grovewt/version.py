"""Build identification gathered from the git checkout."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

UNKNOWN = "unknown"


@dataclass(frozen=True)
class BuildInfo:
    """Short commit id (with ``-dirty`` suffix if modified) and commit date."""

    sha: str = UNKNOWN
    date: str = UNKNOWN


def _git(args: list[str], repo_dir: str | os.PathLike[str] | None) -> str | None:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=repo_dir,
            capture_output=True,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def git_build_info(repo_dir: str | os.PathLike[str] | None = None) -> BuildInfo:
    """Describe the checkout at *repo_dir*; fields are ``unknown`` when git fails."""
    sha_out = _git(["rev-parse", "--short=12", "HEAD"], repo_dir)
    sha = sha_out.strip() if sha_out is not None else UNKNOWN

    status_out = _git(["status", "--porcelain"], repo_dir)
    if status_out:
        sha = f"{sha}-dirty"

    date_out = _git(["log", "-1", "--format=%cI", "HEAD"], repo_dir)
    date = date_out.strip() if date_out is not None else UNKNOWN

    return BuildInfo(sha=sha, date=date)


def long_version(version: str, info: BuildInfo) -> str:
    """Return ``<version> (<sha> <date>)``."""
    return f"{version} ({info.sha} {info.date})"