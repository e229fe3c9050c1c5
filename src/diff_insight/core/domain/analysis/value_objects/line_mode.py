from enum import StrEnum


class LineMode(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
