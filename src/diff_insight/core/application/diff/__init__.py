from diff_insight.core.application.diff.hunk_line_tracker import track_lines
from diff_insight.core.application.diff.language_detector import (
    detect_language,
    extract_target_path,
    language_from_path,
    resolve_language,
)
from diff_insight.core.application.diff.patch_splitter import (
    boundary_target_path,
    split_file_patches,
)
from diff_insight.core.application.diff.test_file_classifier import is_test_file

__all__ = [
    "boundary_target_path",
    "detect_language",
    "extract_target_path",
    "is_test_file",
    "language_from_path",
    "resolve_language",
    "split_file_patches",
    "track_lines",
]
