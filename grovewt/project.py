"""The record kept for each worktree project."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _format_rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_rfc3339(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass
class Project:
    """A worktree project: where it lives, its branch and what it is based on."""

    path: Path
    branch: str
    base: str
    created: datetime = field(default_factory=_now_utc)
    issue: int | None = None
    frozen: bool = False

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; ``issue`` is left out when unset."""
        data: dict[str, Any] = {
            "path": str(self.path),
            "branch": self.branch,
            "base": self.base,
            "created": _format_rfc3339(self.created),
        }
        if self.issue is not None:
            data["issue"] = self.issue
        data["frozen"] = self.frozen
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        """Build a project from a mapping produced by :meth:`to_dict`."""
        try:
            path = data["path"]
            branch = data["branch"]
            base = data["base"]
            created = data["created"]
        except KeyError as exc:
            raise ValueError(f"project record is missing field {exc.args[0]!r}") from None
        issue = data.get("issue")
        return cls(
            path=Path(path),
            branch=str(branch),
            base=str(base),
            created=_parse_rfc3339(str(created)),
            issue=int(issue) if issue is not None else None,
            frozen=bool(data.get("frozen", False)),
        )