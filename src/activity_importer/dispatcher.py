# src/activity_importer/dispatcher.py

import logging
from collections.abc import Callable, Sequence

from .csv_records import csv_lines_to_records
from .errors import ImporterError, ParserError
from .implementations.base import Implementation
from .models import CsvRecords, Extension, Page, ParseResult

logger = logging.getLogger(__name__)

CsvConverter = Callable[[Sequence[str]], CsvRecords]


class ParseDispatcher:
    """Hands a classified document to its implementation.

    CSV documents are normalized into row dicts first. PDF pages are passed
    through untouched.
    """

    def __init__(self, csv_converter: CsvConverter = csv_lines_to_records) -> None:
        self.csv_converter = csv_converter

    def dispatch(
        self, pages: Sequence[Page], extension: str, impl: Implementation
    ) -> ParseResult:
        content: Sequence = pages
        if Extension.parse(extension) is Extension.CSV:
            try:
                content = [self.csv_converter(pages[0])]
            except Exception as e:
                logger.error("Failed to normalize CSV for %s: %s", impl.name, e)
                raise ParserError("Unable to read CSV rows", repr(e)) from e

        logger.debug("Dispatching %d page(s) to %s", len(content), impl.name)

        try:
            result = impl.parse_pages(content)
        except ImporterError:
            raise
        except Exception as e:
            logger.error("Implementation %s failed: %s", impl.name, e)
            raise ParserError(
                f"Implementation '{impl.name}' failed to parse document", repr(e)
            ) from e

        if not isinstance(result, ParseResult):
            raise ParserError(
                f"Implementation '{impl.name}' returned an unexpected result",
                type(result).__name__,
            )

        return result
