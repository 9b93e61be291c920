# implementations/base.py

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from activity_importer.models import ParseResult


class Implementation(ABC):
    """A broker- or app-specific statement parser.

    Requirements:
    - Stateless: one instance is shared by every concurrent import
    - `can_parse_document` is a pure predicate and never mutates pages
    - `parse_pages` raises ParserError / ActivityValidationError for
      malformed input, never untyped errors
    """

    name: str = ""

    @abstractmethod
    def can_parse_document(self, pages: Sequence[Sequence[str]], extension: str) -> bool:
        """Decide from the page content whether this implementation owns the
        document. Must be safe to call for any extension."""
        raise NotImplementedError

    @abstractmethod
    def parse_pages(self, pages: Sequence[Sequence[Any]]) -> ParseResult:
        """Turn the pages of an owned document into activities.

        PDF pages arrive as text fragments. CSV documents arrive as a single
        page of row dicts.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
