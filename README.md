# grovewt

Building blocks for managing many git worktrees across several repositories.
Each worktree is a *project* identified by a short tag. `grovewt` supplies the
rules for naming projects, the record kept about each one, helpers for finding
and moving worktrees on disk, text and JSON renderings of project listings,
and the planning of terminal tabs that open them.

Pure Python, no third-party dependencies, Python 3.10 or newer.

## Naming (`grovewt.naming`)

Tags are 1–40 bytes (UTF-8) long and contain no slash or whitespace;
`validate_tag` raises `InvalidTagError` (a `ValueError`) otherwise:

```python
from grovewt.naming import validate_tag, InvalidTagError

validate_tag("lazy-vm")        # fine
try:
    validate_tag("foo/bar")
except InvalidTagError as err:
    print(err.tag, err.reason)
```

Branch names come from the tag, an optional issue number and an optional issue
prefix (default `ISSUE`). An explicit branch always wins:

```python
from grovewt.naming import compute_branch_name

compute_branch_name("lazy-vm", 9947, None, "DESKTOP")    # "DESKTOP-9947-lazy-vm"
compute_branch_name("foo", 42, None, None)               # "ISSUE-42-foo"
compute_branch_name("foo", 42, "my-custom-branch", None) # "my-custom-branch"
```

Base refs are expanded against the upstream remote. Names shaped like
`<digits>.<digits>` (see `looks_like_version`) go under `stable/`; refs that
already contain a slash are kept as they are:

```python
from grovewt.naming import compute_base_ref

compute_base_ref(None, "if", "master")             # "if/master"
compute_base_ref("25.3", "if", "master")           # "if/stable/25.3"
compute_base_ref("develop", "if", "master")        # "if/develop"
compute_base_ref("if/some/branch", "if", "master") # "if/some/branch"
```

## Projects (`grovewt.project`)

`Project` is a dataclass holding a worktree's `path`, `branch`, `base`,
`created` time (UTC now by default), optional `issue` number and `frozen`
flag. `to_dict()` gives a JSON-ready mapping (RFC 3339 timestamp, `issue`
left out when unset) and `Project.from_dict(...)` reads it back, raising
`ValueError` when a required field is missing.

## Worktrees on disk (`grovewt.worktree`)

- `is_worktree(path)` — true when the directory has a `.git` entry (file or directory);
- `read_head_branch(path)` — the checked-out branch, following a linked
  worktree's `gitdir:` pointer; `None` when HEAD is detached or unreadable;
- `move_dir(src, dest)` — rename, falling back to copy-then-delete across
  filesystems; failures raise `WorktreeError`;
- `copy_dir_all(src, dest)` — recursive directory copy.

## Finding the project you mean (`grovewt.matching`)

- `jaro_winkler(a, b)` — string similarity from 0.0 to 1.0;
- `suggest_near_match(tag, candidates)` — the closest candidate scoring above 0.8, or `None`;
- `check_known_tag(tag, candidates)` — returns the tag or raises
  `UnknownTagError`, with a "did you mean" hint when a close match exists;
- `original_cwd()` — `$GROVE_ORIG_CWD` if set, else the current directory;
- `innermost_match(cwd, paths)` — the key whose path most deeply contains `cwd`;
- `parse_fork_positionals(positionals, project_paths, cwd=None)` — resolves
  `[source] new_tag`, inferring the source from the current directory when it
  is omitted; raises `SourceResolutionError` when it cannot.

## Status and listings (`grovewt.status_format`, `grovewt.listing`)

`Status` describes a worktree (dirty, ahead, behind, untracked, pushed) and
`ProjectRow` pairs a tag and `Project` with an optional status and a
`missing` flag. `format_status` gives `clean`, `dirty`, `2 ahead`,
`1 behind`, `2 ahead, 3 behind` or `unknown`; `status_glyph` gives
`✓ ● ↑ ↓ ↕ ?`; `status_color` names a colour for the row;
`strip_issue_prefix("PROJ-1-alpha")` gives `"alpha"`; `build_summary` builds
lines such as `3 projects · 1 dirty · 1 ahead · 1 frozen`.

`grovewt.listing` renders repo sections, each a `(repo_id, rows)` pair:
`render_header`, `render_short_section` (one aligned line per project),
`project_json` and `render_json` (pretty JSON, schema version 1, status
optional), `cwd_repo_id` and `order_sections` (the repo containing the
current directory first, the rest alphabetically).

## Launch planning (`grovewt.launching`)

`plan_launch(projects, only, shell_command)` returns a `LaunchPlan` of
`LaunchTab`s sorted by tag, skipping frozen projects (listed in
`skipped_frozen`) and honouring a filter from `parse_only("alpha,charlie")`.
If nothing is left it raises `NoProjectsMatchedError`.
`select_shell_command(no_claude, configured)` picks the command each tab
runs, and `parse_terminal_kind` maps `wt`, `windows_terminal` or `wezterm` to
a `TerminalKind`.

## Build information (`grovewt.version`)

`git_build_info(repo_dir)` asks `git` for the short commit id (suffixed
`-dirty` when the checkout has changes) and commit date, using `unknown` when
git fails; `long_version("0.1.0", info)` formats `0.1.0 (<sha> <date>)`.

## What this package does not do

There is no command-line program. The package does not store a project
registry or repo configuration on disk, does not run git to create, fetch or
remove worktrees and branches, does not scan worktrees for their git status,
and does not open terminal windows: it plans tabs and formats status that the
caller supplies.