"""Tag look-up helpers: fuzzy suggestions and working-directory inference."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path, PurePath

from grovewt.naming import InvalidTagError

ORIG_CWD_ENV = "GROVE_ORIG_CWD"
SUGGESTION_THRESHOLD = 0.8


class UnknownTagError(LookupError):
    """Raised when a tag names no registered project."""

    def __init__(self, tag: str, suggestion: str | None = None) -> None:
        if suggestion is None:
            message = f"unknown tag '{tag}'"
        else:
            message = f"unknown tag '{tag}' — did you mean '{suggestion}'?"
        super().__init__(message)
        self.tag = tag
        self.suggestion = suggestion

    def __str__(self) -> str:
        return str(self.args[0])


class SourceResolutionError(LookupError):
    """Raised when the project to act on cannot be worked out from the cwd."""

    def __init__(self, hint: str) -> None:
        super().__init__(hint)
        self.hint = hint

    def __str__(self) -> str:
        return self.hint


def _jaro(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    search_range = max(max(len(a), len(b)) // 2 - 1, 0)
    b_used = [False] * len(b)
    a_matched: list[str] = []

    for i, ch in enumerate(a):
        low = max(i - search_range, 0)
        high = min(len(b), i + search_range + 1)
        for j, other in enumerate(b[low:high], start=low):
            if not b_used[j] and ch == other:
                b_used[j] = True
                a_matched.append(ch)
                break

    matches = len(a_matched)
    if matches == 0:
        return 0.0

    b_matched = (ch for ch, used in zip(b, b_used) if used)
    transpositions = sum(x != y for x, y in zip(a_matched, b_matched)) // 2

    return (
        matches / len(a)
        + matches / len(b)
        + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler(a: str, b: str) -> float:
    """Jaro-Winkler similarity of *a* and *b*, from 0.0 to 1.0."""
    similarity = _jaro(a, b)
    if similarity <= 0.7:
        return similarity
    prefix = 0
    for x, y in zip(a[:4], b):
        if x != y:
            break
        prefix += 1
    return similarity + 0.1 * prefix * (1.0 - similarity)


def suggest_near_match(tag: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate most similar to *tag* if it scores above 0.8."""
    best: tuple[float, str] | None = None
    for candidate in candidates:
        score = jaro_winkler(tag, candidate)
        if score <= SUGGESTION_THRESHOLD:
            continue
        # Later candidates win ties.
        if best is None or score >= best[0]:
            best = (score, candidate)
    return best[1] if best is not None else None


def check_known_tag(tag: str, candidates: Iterable[str]) -> str:
    """Return *tag* if it is among *candidates*, else raise UnknownTagError."""
    known = list(candidates)
    if tag in known:
        return tag
    raise UnknownTagError(tag, suggest_near_match(tag, known))


def original_cwd() -> Path | None:
    """The directory the user invoked from: $GROVE_ORIG_CWD, else the cwd."""
    env = os.environ.get(ORIG_CWD_ENV)
    if env is not None:
        return Path(env)
    try:
        return Path.cwd()
    except OSError:
        return None


def _is_within(child: PurePath, parent: PurePath) -> bool:
    return child.parts[: len(parent.parts)] == parent.parts


def innermost_match(
    cwd: str | os.PathLike[str],
    paths: Mapping[str, str | os.PathLike[str]],
) -> str | None:
    """Return the key whose path most deeply contains *cwd*, or None.

    Keys are considered in sorted order; the first of equally deep matches wins.
    """
    cwd_path = PurePath(cwd)
    best: tuple[int, str] | None = None
    for key in sorted(paths):
        path = PurePath(paths[key])
        if not _is_within(cwd_path, path):
            continue
        depth = len(path.parts)
        if best is None or depth > best[0]:
            best = (depth, key)
    return best[1] if best is not None else None


def parse_fork_positionals(
    positionals: Sequence[str],
    project_paths: Mapping[str, str | os.PathLike[str]],
    cwd: str | os.PathLike[str] | None = None,
) -> tuple[str, str]:
    """Resolve ``(source_tag, new_tag)`` from one or two positional arguments.

    With one argument the source is the project containing *cwd*
    (defaulting to :func:`original_cwd`).
    """
    if len(positionals) == 2:
        source_tag, new_tag = positionals
        return source_tag, new_tag
    if len(positionals) != 1:
        raise InvalidTagError(
            "", f"fork takes 1 or 2 arguments, got {len(positionals)}"
        )

    (new_tag,) = positionals
    where = cwd if cwd is not None else original_cwd()
    if where is None:
        raise SourceResolutionError(
            "cannot determine current directory; pass source explicitly"
        )
    source_tag = innermost_match(where, project_paths)
    if source_tag is None:
        raise SourceResolutionError(
            "cwd is not inside any known project; pass source explicitly: "
            "grove fork <source> <new-tag>"
        )
    return source_tag, new_tag