"""Split a multi-file ``git diff`` into one patch per changed file."""

import re

from diff_insight.core.application.diff.hunk_line_tracker import FILE_BOUNDARY_PREFIX

_FILE_BOUNDARY_RE = re.compile(rf"^(?={re.escape(FILE_BOUNDARY_PREFIX)})", re.MULTILINE)


def split_file_patches(diff_text: str) -> tuple[str, ...]:
    """Return the per-file patches of ``diff_text`` in order of appearance.

    Text before the first ``diff --git`` boundary is dropped. Input without any
    boundary is treated as a single-file patch.
    """
    if not diff_text.strip():
        return ()
    if not _FILE_BOUNDARY_RE.search(diff_text):
        return (diff_text,)
    parts = _FILE_BOUNDARY_RE.split(diff_text)
    return tuple(part for part in parts if part.startswith(FILE_BOUNDARY_PREFIX))


# The last " b/" separates the sides, so paths may contain spaces.
_PREFIXED_PATHS_RE = re.compile(r"^diff --git a/(?P<old>.+) b/(?P<new>.+?)\s*$")
_BARE_PATHS_RE = re.compile(r"^diff --git (?P<old>\S+) (?P<new>\S+)\s*$")


def boundary_target_path(file_patch: str) -> str | None:
    """New-side path named on the ``diff --git`` line of a single-file patch."""
    first_line = file_patch.split("\n", 1)[0].removesuffix("\r")
    match = _PREFIXED_PATHS_RE.match(first_line) or _BARE_PATHS_RE.match(first_line)
    return match.group("new") if match else None
