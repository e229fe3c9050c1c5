from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineMatches:
    """Added lines picked out by one structural matcher.

    ``lines`` and ``line_numbers`` are parallel. ``language_supported`` is False
    when the matcher has no pattern table for the language, which callers must
    tell apart from "nothing matched".
    """

    lines: tuple[str, ...] = ()
    line_numbers: tuple[int, ...] = ()
    language_supported: bool = True

    def __post_init__(self) -> None:
        if len(self.lines) != len(self.line_numbers):
            raise ValueError(
                f"lines and line_numbers must be parallel "
                f"({len(self.lines)} != {len(self.line_numbers)})"
            )

    @classmethod
    def unsupported(cls) -> LineMatches:
        return cls(language_supported=False)

    def __bool__(self) -> bool:
        return bool(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
