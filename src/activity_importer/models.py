# src/activity_importer/models.py

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .errors import Status

# A page is the ordered text fragments of one PDF page or the raw lines of a
# CSV file. After CSV normalization the single page holds one dict per row.
Page = Sequence[str]
CsvRecords = list[dict[str, str]]


class Extension(str, Enum):
    PDF = "pdf"
    CSV = "csv"

    @classmethod
    def parse(cls, value: str) -> "Extension":
        """Case-insensitive lookup. Raises ValueError for unknown values."""
        return cls(value.strip().lower())


@dataclass(frozen=True)
class ParseResult:
    """What an implementation hands back for a document.

    `activities` may contain `None` holes for activities the implementation
    could not construct. `None` for the whole field means the implementation
    produced no activity sequence at all.
    """

    activities: Sequence[Any | None] | None = None
    status: int = Status.OK

    def with_changes(self, **changes: Any) -> "ParseResult":
        return replace(self, **changes)


@dataclass(frozen=True)
class ParsedFile:
    pages: tuple[Page, ...]
    extension: str


@dataclass(frozen=True)
class Outcome:
    """Terminal, caller-visible result for one file.

    Immutable. Always status-coded. Build through `from_result` or `failure`.
    """

    file: str
    activities: tuple[Any, ...] | None
    status: int
    successful: bool

    @classmethod
    def from_result(cls, file: str, result: ParseResult) -> "Outcome":
        activities = None
        if result.status == Status.OK and result.activities:
            activities = tuple(result.activities)
        return cls(
            file=file,
            activities=activities,
            status=int(result.status),
            successful=activities is not None,
        )

    @classmethod
    def failure(cls, file: str, status: int) -> "Outcome":
        return cls(file=file, activities=None, status=int(status), successful=False)
