from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One added or removed line of a patch.

    ``line_number`` is the post-change line number for an added line. For a
    removed line it is the running post-change counter at the point of removal,
    since removed lines occupy no slot in the new file.
    """

    line_number: int
    content: str
