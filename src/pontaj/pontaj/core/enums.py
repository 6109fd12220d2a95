from __future__ import annotations

from enum import Enum


class RecordStatus(str, Enum):
    """Starea unei zile de pontaj, așa cum e salvată în baza de date."""

    PRESENT = "present"
    SICK = "sick"
    VACATION = "vacation"
    ABSENT = "absent"
    DELEGATION = "delegation"
    UNPAID = "unpaid"
    FREE = "liber"

    @property
    def code(self) -> str:
        """Abbreviation printed in the collective report ('' for present)."""
        return STATUS_CODES[self]


STATUS_CODES = {
    RecordStatus.PRESENT: "",
    RecordStatus.SICK: "CM",
    RecordStatus.VACATION: "CO",
    RecordStatus.ABSENT: "A",
    RecordStatus.DELEGATION: "D",
    RecordStatus.UNPAID: "CFP",
    RecordStatus.FREE: "L",
}


class CellTag(str, Enum):
    """Semantic tag attached to every report cell; renderers map it to a style."""

    TITLE = "title"
    HEADER = "header"
    LABEL = "label"
    VALUE = "value"
    TOTAL = "total"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    STATUS = "status"
    EMPTY = "empty"


class DeleteKind(str, Enum):
    SOFT = "soft_delete"
    HARD = "hard_delete"
