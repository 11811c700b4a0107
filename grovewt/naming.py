"""Tag validation and branch / base-ref naming rules."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

MAX_TAG_LENGTH = 40
DEFAULT_ISSUE_PREFIX = "ISSUE"

_ASCII_DIGITS = frozenset("0123456789")


class InvalidTagError(ValueError):
    """Raised when a project tag is not acceptable."""

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(f"invalid tag '{tag}': {reason}")
        self.tag = tag
        self.reason = reason


def validate_tag(tag: str) -> None:
    """Raise InvalidTagError unless *tag* is 1-40 bytes with no slash or whitespace."""
    length = len(tag.encode("utf-8"))
    if length == 0 or length > MAX_TAG_LENGTH:
        raise InvalidTagError(tag, f"length must be 1–{MAX_TAG_LENGTH}, got {length}")
    if "/" in tag or any(c.isspace() for c in tag):
        raise InvalidTagError(tag, "must not contain slashes or whitespace")


def compute_branch_name(
    tag: str,
    issue: int | None,
    branch_override: str | None,
    issue_prefix: str | None,
) -> str:
    """Return the branch name for a new project.

    An explicit override wins; otherwise an issue number yields
    ``<PREFIX>-<issue>-<tag>``; otherwise the tag itself is used.
    """
    if branch_override is not None:
        if issue is not None:
            log.warning("Both --branch and --issue supplied; --branch takes precedence")
        return branch_override
    if issue is not None:
        prefix = issue_prefix if issue_prefix is not None else DEFAULT_ISSUE_PREFIX
        return f"{prefix}-{issue}-{tag}"
    return tag


def compute_base_ref(base: str | None, upstream: str, default_base: str) -> str:
    """Expand a user-supplied base into a fully qualified remote ref."""
    if base is None:
        return f"{upstream}/{default_base}"
    if "/" in base:
        return base
    if looks_like_version(base):
        return f"{upstream}/stable/{base}"
    return f"{upstream}/{base}"


def _all_digits(s: str) -> bool:
    return bool(s) and all(c in _ASCII_DIGITS for c in s)


def looks_like_version(s: str) -> bool:
    """True for strings shaped like ``<digits>.<digits>``, e.g. ``25.3``."""
    major, _, minor = s.partition(".")
    return _all_digits(major) and _all_digits(minor)