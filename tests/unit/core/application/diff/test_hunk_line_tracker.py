"""Unit tests — track_lines (pure, zero I/O)."""

from diff_insight.core.application.diff import track_lines
from diff_insight.core.domain.analysis import DiffLine, LineMode


def _patch(*lines: str) -> str:
    return "\n".join(lines)


class TestAddedLines:
    def test_numbers_added_lines_from_hunk_start(self, two_hunk_patch: str) -> None:
        added = track_lines(two_hunk_patch, LineMode.ADDED)

        assert added == (
            DiffLine(10, "function computeTotal(x, y) {"),
            DiffLine(11, "  return x + y;"),
            DiffLine(12, "}"),
            DiffLine(13, ""),
        )

    def test_counter_restarts_at_each_hunk_header(self) -> None:
        patch = _patch(
            "@@ -1,1 +1,2 @@",
            " a",
            "+b",
            "@@ -40,1 +41,2 @@",
            " x",
            "+y",
        )

        added = track_lines(patch, LineMode.ADDED)

        assert [line.line_number for line in added] == [2, 42]

    def test_line_numbers_never_decrease_within_a_hunk(self) -> None:
        patch = _patch("@@ -3,3 +3,5 @@", "+a", " b", "-c", "+d", "+e", " f")

        numbers = [line.line_number for line in track_lines(patch, LineMode.ADDED)]

        assert numbers == sorted(numbers)
        assert numbers == [3, 5, 6]

    def test_removed_line_does_not_shift_following_context(self) -> None:
        patch = _patch("@@ -1,3 +1,3 @@", " a", "-b", " c", "+d")

        added = track_lines(patch, LineMode.ADDED)

        assert added == (DiffLine(3, "d"),)

    def test_patch_with_only_removals_has_no_added_lines(self) -> None:
        patch = _patch("@@ -1,2 +0,0 @@", "-a", "-b")

        assert track_lines(patch, LineMode.ADDED) == ()

    def test_hunk_header_without_counts_defaults_to_one(self) -> None:
        patch = _patch("@@ -5 +5 @@", "-old", "+new")

        assert track_lines(patch, LineMode.ADDED) == (DiffLine(5, "new"),)


class TestRemovedLines:
    def test_removed_line_tagged_with_running_counter(self, two_hunk_patch: str) -> None:
        removed = track_lines(two_hunk_patch, LineMode.REMOVED)

        assert removed == (DiffLine(21, '  console.log("removing", id);'),)

    def test_consecutive_removals_share_the_counter(self) -> None:
        patch = _patch("@@ -10,4 +10,2 @@", " keep", "-gone1", "-gone2", " tail")

        removed = track_lines(patch, LineMode.REMOVED)

        assert [line.line_number for line in removed] == [11, 11]


class TestMalformedInput:
    def test_patch_without_hunk_headers_is_empty(self) -> None:
        patch = _patch("--- a/x.py", "+++ b/x.py", "+stray", "-stray")

        assert track_lines(patch, LineMode.ADDED) == ()
        assert track_lines(patch, LineMode.REMOVED) == ()

    def test_binary_patch_is_empty(self) -> None:
        patch = _patch(
            "diff --git a/logo.png b/logo.png",
            "Binary files a/logo.png and b/logo.png differ",
        )

        assert track_lines(patch, LineMode.ADDED) == ()

    def test_empty_patch_is_empty(self) -> None:
        assert track_lines("", LineMode.ADDED) == ()

    def test_no_newline_marker_is_ignored(self) -> None:
        patch = _patch("@@ -1 +1 @@", "-a", "\\ No newline at end of file", "+b")

        assert track_lines(patch, LineMode.ADDED) == (DiffLine(1, "b"),)

    def test_crlf_line_endings_are_stripped(self) -> None:
        patch = "@@ -1 +1 @@\r\n-a\r\n+b\r\n"

        assert track_lines(patch, LineMode.ADDED) == (DiffLine(1, "b"),)
        assert track_lines(patch, LineMode.REMOVED) == (DiffLine(1, "a"),)


class TestHunkBody:
    def test_marker_lookalikes_inside_hunk_are_content(self) -> None:
        patch = _patch(
            "--- a/query.sql",
            "+++ b/query.sql",
            "@@ -1,2 +1,2 @@",
            "--- old comment",
            "+++ new counter",
            " SELECT 1;",
        )

        assert track_lines(patch, LineMode.REMOVED) == (DiffLine(1, "-- old comment"),)
        assert track_lines(patch, LineMode.ADDED) == (DiffLine(1, "++ new counter"),)

    def test_blank_context_line_without_space_still_counts(self) -> None:
        patch = _patch("@@ -1,3 +1,4 @@", " a", "", "+c", " d", "")

        assert track_lines(patch, LineMode.ADDED) == (DiffLine(3, "c"),)

    def test_next_file_boundary_resets_the_counter(self) -> None:
        patch = _patch(
            "diff --git a/a.py b/a.py",
            "--- a/a.py",
            "+++ b/a.py",
            "@@ -1,1 +1,5 @@",
            "+x",
            "diff --git a/b.py b/b.py",
            "--- a/b.py",
            "+++ b/b.py",
            "@@ -7,0 +8,1 @@",
            "+y",
        )

        assert track_lines(patch, LineMode.ADDED) == (DiffLine(1, "x"), DiffLine(8, "y"))
        assert track_lines(patch, LineMode.REMOVED) == ()
