"""Plain-text and JSON renderings of project listings across repos."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from grovewt.matching import innermost_match
from grovewt.status_format import ProjectRow, Status, format_status, status_glyph

JSON_SCHEMA_VERSION = 1

Section = tuple[str, Sequence[ProjectRow]]


def render_header(repo_id: str, is_cwd: bool = False) -> str:
    """Return the section title for *repo_id*, marked when it holds the cwd."""
    marker = " (here)" if is_cwd else ""
    return f"── {repo_id}{marker} ──"


def render_short_section(repo_id: str, rows: Sequence[ProjectRow]) -> str:
    """Return one aligned line per project: ``<repo>/<tag>  <branch>  <glyph> <status>``."""
    if not rows:
        return ""
    labels = [f"{repo_id}/{row.tag}" for row in rows]
    label_width = max(len(label) for label in labels)
    branch_width = max(len(row.project.branch) for row in rows)
    lines = []
    for label, row in zip(labels, rows):
        glyph = status_glyph(row.status)
        text = format_status(row.status)
        lines.append(
            f"{label:<{label_width}}  {row.project.branch:<{branch_width}}  {glyph} {text}\n"
        )
    return "".join(lines)


def _status_json(status: Status) -> dict[str, Any]:
    return {
        "dirty": status.dirty,
        "ahead": status.ahead,
        "behind": status.behind,
        "untracked": status.untracked,
    }


def project_json(row: ProjectRow, include_status: bool = True) -> dict[str, Any]:
    """Return the JSON object for one project row.

    ``issue`` is left out when unset; ``status`` when unscanned or not wanted.
    """
    project = row.project
    data: dict[str, Any] = {
        "tag": row.tag,
        "path": str(project.path),
        "branch": project.branch,
        "base": project.base,
    }
    if project.issue is not None:
        data["issue"] = project.issue
    data["frozen"] = project.frozen
    data["created"] = project.to_dict()["created"]
    if include_status and row.status is not None:
        data["status"] = _status_json(row.status)
    return data


def render_json(sections: Iterable[Section], include_status: bool = True) -> str:
    """Return the pretty-printed JSON document for all repo sections."""
    document = {
        "version": JSON_SCHEMA_VERSION,
        "repos": [
            {
                "id": repo_id,
                "projects": [project_json(row, include_status) for row in rows],
            }
            for repo_id, rows in sections
        ],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def cwd_repo_id(
    cwd: str | os.PathLike[str],
    work_dirs: Mapping[str, str | os.PathLike[str]],
) -> str | None:
    """Return the id of the repo whose work dir most deeply contains *cwd*."""
    return innermost_match(cwd, work_dirs)


def order_sections(sections: Iterable[Section], cwd_id: str | None) -> list[Section]:
    """Sort sections alphabetically by id, with the cwd's repo first."""
    return sorted(sections, key=lambda section: (section[0] != cwd_id, section[0]))