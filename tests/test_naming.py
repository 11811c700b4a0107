import pytest

from grovewt.naming import (
    InvalidTagError,
    compute_base_ref,
    compute_branch_name,
    looks_like_version,
    validate_tag,
)


# ── branch name computation ─────────────────────────────────────────────


def test_branch_no_issue_no_override():
    assert compute_branch_name("lazy-vm", None, None, None) == "lazy-vm"


def test_branch_with_issue_and_prefix():
    assert compute_branch_name("lazy-vm", 9947, None, "DESKTOP") == "DESKTOP-9947-lazy-vm"


def test_branch_with_issue_no_prefix_falls_back():
    assert compute_branch_name("foo", 42, None, None) == "ISSUE-42-foo"


def test_branch_override_wins_over_issue():
    assert compute_branch_name("foo", 42, "my-custom-branch", "DESK") == "my-custom-branch"


def test_branch_override_no_issue():
    assert compute_branch_name("foo", None, "explicit", None) == "explicit"


# ── base ref computation ────────────────────────────────────────────────


def test_base_none_uses_default():
    assert compute_base_ref(None, "if", "master") == "if/master"


def test_base_version_gets_stable_prefix():
    assert compute_base_ref("25.3", "if", "master") == "if/stable/25.3"


def test_base_version_single_digit_segments():
    assert compute_base_ref("1.0", "if", "master") == "if/stable/1.0"


def test_base_plain_name_no_stable_prefix():
    assert compute_base_ref("develop", "if", "master") == "if/develop"


def test_base_already_fully_qualified():
    assert compute_base_ref("if/some/branch", "if", "master") == "if/some/branch"


# ── tag validation ──────────────────────────────────────────────────────


def test_tag_with_slash_invalid():
    with pytest.raises(InvalidTagError):
        validate_tag("foo/bar")


def test_tag_with_space_invalid():
    with pytest.raises(InvalidTagError):
        validate_tag("foo bar")


def test_tag_empty_invalid():
    with pytest.raises(InvalidTagError) as info:
        validate_tag("")
    assert info.value.tag == ""


def test_tag_too_long_invalid():
    with pytest.raises(InvalidTagError):
        validate_tag("x" * 41)


@pytest.mark.parametrize("tag", ["lazy-vm", "feature_x", "x" * 40])
def test_tag_valid(tag):
    assert validate_tag(tag) is None


# ── looks_like_version ──────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value, expected",
    [
        ("25.3", True),
        ("1.0", True),
        ("develop", False),
        ("master", False),
        ("25", False),
        (".3", False),
    ],
)
def test_version_detection(value, expected):
    assert looks_like_version(value) is expected