# src/activity_importer/errors.py

import json
from enum import IntEnum
from typing import Any


class Status(IntEnum):
    """Terminal disposition of an imported file.

    The integer values are a wire contract. Never renumber.
    """

    OK = 0
    NO_IMPLEMENTATION = 1
    AMBIGUOUS_IMPLEMENTATION = 2
    PARSER_ERROR = 3
    UNSUPPORTED_EXTENSION = 4
    NO_ACTIVITIES = 5
    INVALID_ACTIVITIES = 6
    IGNORED_DOCUMENT = 7


class ImporterError(Exception):
    """Base class for every failure that maps onto a status code."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = int(status)

    @property
    def data(self) -> dict[str, int]:
        return {"status": self.status}


class DocumentError(ImporterError):
    """File-level failure: unsupported extension, no or ambiguous
    implementation, empty or ignored document (statuses 1, 2, 4 and 7)."""

    def __init__(self, message: str, file_name: str, status: int) -> None:
        super().__init__(f"{message}\nFile: {file_name}", status)
        self.file_name = file_name


class ExtractionError(DocumentError):
    """The source could not be read or decoded into pages."""

    def __init__(self, message: str, file_name: str) -> None:
        super().__init__(message, file_name, Status.NO_IMPLEMENTATION)


class ParserError(ImporterError):
    """A value inside a page could not be interpreted (status 3)."""

    def __init__(
        self, message: str, value: Any, status: int = Status.PARSER_ERROR
    ) -> None:
        super().__init__(f"{message}\nInput: {value}", status)
        self.value = value


class ActivityValidationError(ImporterError):
    """A constructed activity failed semantic validation."""

    def __init__(
        self, message: str, activity: Any, status: int = Status.PARSER_ERROR
    ) -> None:
        super().__init__(f"{message}\nActivity: {_render_activity(activity)}", status)
        self.activity = activity


_UNDEFINED = ">>>  undefined  <<<"


def _render_activity(activity: Any) -> str:
    if isinstance(activity, dict):
        activity = {k: _UNDEFINED if v is None else v for k, v in activity.items()}
    return json.dumps(activity, indent=2, default=str)
