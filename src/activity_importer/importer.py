# src/activity_importer/importer.py

import asyncio
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from time import monotonic
from typing import Any

from activity_importer.observability import names
from activity_importer.observability.base import MetricsHook, NoOpMetricsHook

from .config import ImporterConfig
from .dispatcher import ParseDispatcher
from .errors import ActivityValidationError, DocumentError, ImporterError, Status
from .extraction import PageExtractor, Source
from .models import Outcome, Page, ParsedFile, ParseResult
from .result_filter import filter_result
from .selector import ImplementationSelector

logger = logging.getLogger(__name__)

# Stands in for sources that carry no name; its empty extension is rejected
UNNAMED_FILE = "<unnamed>"


class ActivityImporter:
    """Runs documents through extraction, selection, parsing and filtering.

    Stateless between calls, so one instance can serve concurrent imports.
    `process` never raises for a recognized failure; it resolves to an
    `Outcome` carrying the status code instead.
    """

    def __init__(
        self,
        selector: ImplementationSelector,
        dispatcher: ParseDispatcher,
        extractor: PageExtractor,
        config: ImporterConfig,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.selector = selector
        self.dispatcher = dispatcher
        self.extractor = extractor
        self.config = config
        self.metrics_hook = metrics_hook

    async def parse_file(self, source: Source, file_name: str | None = None) -> ParsedFile:
        file_name = resolve_file_name(source, file_name)
        extension = extension_of(file_name)

        # Reject before touching the content
        self.selector.check_extension(file_name, extension)

        return await self.extractor.extract(source, file_name, extension)

    def parse_pages(
        self, pages: Sequence[Page], file_name: str, extension: str
    ) -> ParseResult:
        if not pages:
            raise DocumentError(
                "Invalid document. Document is empty.",
                file_name,
                Status.NO_IMPLEMENTATION,
            )

        impl = self.selector.select(pages, file_name, extension)
        result = self.dispatcher.dispatch(pages, extension, impl)
        return filter_result(result)

    def parse_activities_from_pages(
        self, pages: Sequence[Page], file_name: str, extension: str
    ) -> list[Any]:
        """Like `parse_pages`, but returns the activities directly and raises
        `ActivityValidationError` when the document yields none."""
        result = self.parse_pages(pages, file_name, extension)
        if result.activities is None:
            raise ActivityValidationError(
                f"Document produced no usable activities\nFile: {file_name}",
                None,
                result.status or Status.NO_ACTIVITIES,
            )
        return list(result.activities)

    async def process(self, source: Source, file_name: str | None = None) -> Outcome:
        start = monotonic()
        try:
            file_name = resolve_file_name(source, file_name)
        except ValueError:
            file_name = UNNAMED_FILE

        try:
            parsed = await self.parse_file(source, file_name)
            result = self.parse_pages(parsed.pages, file_name, parsed.extension)
            outcome = Outcome.from_result(file_name, result)
        except DocumentError as e:
            logger.warning("Rejected %s (status %d): %s", file_name, e.status, e)
            outcome = Outcome.failure(file_name, e.status)
        except ImporterError as e:
            logger.error("Failed to parse %s (status %d): %s", file_name, e.status, e)
            outcome = Outcome.failure(file_name, e.status)
        except Exception:
            logger.exception("Unexpected failure while importing %s", file_name)
            outcome = Outcome.failure(file_name, Status.PARSER_ERROR)

        elapsed_ms = 1000 * (monotonic() - start)
        labels = {"status": str(outcome.status)}
        self.metrics_hook.record_latency(names.IMPORT_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.IMPORTS_TOTAL, labels=labels)
        if not outcome.successful:
            self.metrics_hook.increment(names.IMPORT_ERRORS_TOTAL, labels=labels)

        logger.info(
            "Imported %s: status=%d, activities=%d, latency=%.0fms",
            file_name,
            outcome.status,
            len(outcome.activities or ()),
            elapsed_ms,
        )
        return outcome

    async def process_many(
        self, sources: Iterable[Source | tuple[Source, str]]
    ) -> list[Outcome]:
        """Process files concurrently. One Outcome per source, in order.

        Unnamed sources (raw bytes, anonymous buffers) are passed as
        `(source, file_name)` pairs.
        """
        tasks = []
        for item in sources:
            if isinstance(item, tuple):
                tasks.append(self.process(*item))
            else:
                tasks.append(self.process(item))
        return list(await asyncio.gather(*tasks))


def resolve_file_name(source: Source, file_name: str | None = None) -> str:
    if file_name:
        return file_name
    if isinstance(source, (str, Path)):
        return Path(source).name
    name = getattr(source, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name
    raise ValueError("file_name is required when the source carries no name")


def extension_of(file_name: str) -> str:
    return Path(file_name).suffix.lstrip(".").lower()


async def process(source: Source, file_name: str | None = None) -> Outcome:
    """Import one file with the built-in implementations."""
    from .factory import default_importer

    return await default_importer().process(source, file_name)


async def parse_file(source: Source, file_name: str | None = None) -> ParsedFile:
    from .factory import default_importer

    return await default_importer().parse_file(source, file_name)


def parse_activities_from_pages(
    pages: Sequence[Page], file_name: str, extension: str
) -> list[Any]:
    from .factory import default_importer

    return default_importer().parse_activities_from_pages(pages, file_name, extension)
