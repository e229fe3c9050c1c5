"""Recover the target file of a patch and infer a language tag from it."""

from collections.abc import Mapping

from diff_insight.core.application.diff.hunk_line_tracker import (
    FILE_BOUNDARY_PREFIX,
    HUNK_HEADER_RE,
)
from diff_insight.core.domain.analysis import UNKNOWN_LANGUAGE

_TARGET_HEADER = "+++"
_TARGET_PREFIX = "b/"
_DEV_NULL = "/dev/null"


def extract_target_path(patch: str) -> str | None:
    """Return the new-side path from the first ``+++`` header, if any.

    The ``---`` header is never consulted: added and renamed files have no
    meaningful old-side path. A deleted file (``+++ /dev/null``) has no target.
    Headers only appear between a file boundary and its first hunk header; a
    ``+++`` line inside a hunk body is an added line starting with ``++``.
    """
    in_header = True
    for line in patch.split("\n"):
        if line.startswith(FILE_BOUNDARY_PREFIX):
            in_header = True
            continue
        if HUNK_HEADER_RE.match(line):
            in_header = False
            continue
        if not in_header:
            continue
        stripped = line.strip()
        if not stripped.startswith(_TARGET_HEADER):
            continue
        path = stripped[len(_TARGET_HEADER) :].split("\t", 1)[0].strip()
        path = path.removeprefix(_TARGET_PREFIX).strip()
        if not path or path == _DEV_NULL:
            return None
        return path
    return None


def language_from_path(path: str | None) -> str:
    """Lower-cased extension of the basename of ``path``, or ``unknown``."""
    if not path:
        return UNKNOWN_LANGUAGE
    basename = path.rsplit("/", 1)[-1]
    stem, dot, extension = basename.rpartition(".")
    if not dot or not stem or not extension:
        return UNKNOWN_LANGUAGE
    return extension.lower()


def detect_language(patch: str) -> str:
    return language_from_path(extract_target_path(patch))


def resolve_language(language: str, aliases: Mapping[str, str]) -> str:
    """Map an extension tag onto the key used by the pattern tables."""
    return aliases.get(language, language)
