"""Pure functions for walking a unified-diff body and recovering line numbers."""

import re
from dataclasses import dataclass

from diff_insight.core.domain.analysis import DiffLine, LineMode

HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
FILE_BOUNDARY_PREFIX = "diff --git "


@dataclass
class _HunkCursor:
    """Running position inside the current hunk.

    ``counter`` is the post-change line number of the next new-file line; it is
    None until the first hunk header. The remaining counts are the lines the
    hunk header still promises on each side.
    """

    counter: int | None = None
    old_remaining: int = 0
    new_remaining: int = 0

    @property
    def in_body(self) -> bool:
        return self.old_remaining > 0 or self.new_remaining > 0

    def start_hunk(self, match: re.Match[str]) -> None:
        old_count, new_start, new_count = match.group(2), match.group(3), match.group(4)
        self.counter = int(new_start)
        self.old_remaining = int(old_count) if old_count is not None else 1
        self.new_remaining = int(new_count) if new_count is not None else 1

    def consume(self, old: int, new: int) -> None:
        self.old_remaining = max(self.old_remaining - old, 0)
        self.new_remaining = max(self.new_remaining - new, 0)


def track_lines(patch: str, mode: LineMode) -> tuple[DiffLine, ...]:
    """Collect the added or removed lines of ``patch`` with their line numbers.

    Added lines take the post-change line number and advance the counter.
    Removed lines are tagged with the current counter and do not advance it.
    Context lines advance the counter. Anything before the first hunk header,
    and anything unrecognised, is skipped rather than rejected.

    Call once per mode: the two collections interleave in the patch and must
    not share a counter.
    """
    cursor = _HunkCursor()
    collected: list[DiffLine] = []
    for raw_line in patch.split("\n"):
        line = raw_line.removesuffix("\r")
        header = HUNK_HEADER_RE.match(line)
        if header:
            cursor.start_hunk(header)
            continue
        if line.startswith(FILE_BOUNDARY_PREFIX):
            cursor = _HunkCursor()
            continue
        if cursor.counter is None:
            continue
        _track_line(line, mode, cursor, collected)
    return tuple(collected)


def _track_line(line: str, mode: LineMode, cursor: _HunkCursor, collected: list[DiffLine]) -> None:
    """Classify one physical line and update the cursor accordingly."""
    in_body = cursor.in_body
    if line.startswith("+") and (in_body or not line.startswith("+++")):
        if mode == LineMode.ADDED:
            collected.append(DiffLine(line_number=cursor.counter, content=line[1:]))
        cursor.counter += 1
        cursor.consume(old=0, new=1)
    elif line.startswith("-") and (in_body or not line.startswith("---")):
        if mode == LineMode.REMOVED:
            collected.append(DiffLine(line_number=cursor.counter, content=line[1:]))
        cursor.consume(old=1, new=0)
    elif line.startswith(" ") or (in_body and line == ""):
        # Some producers strip the single space from blank context lines.
        cursor.counter += 1
        cursor.consume(old=1, new=1)
