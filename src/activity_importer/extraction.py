# src/activity_importer/extraction.py

from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path
from time import monotonic
from typing import Any, BinaryIO, Union, cast

import pdfplumber

from activity_importer.observability import names
from activity_importer.observability.base import MetricsHook, NoOpMetricsHook

from .errors import ExtractionError
from .models import Extension, Page, ParsedFile

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, BinaryIO]


class PageExtractor:
    """
    Turns a source file into ordered pages.

    - PDF: one page per physical page. Fragments are the trimmed, non-empty
      lines of pdfplumber's `extract_text()` layout, so text runs sharing a
      baseline arrive joined by spaces, not as separate items
    - CSV: exactly one page holding the trimmed, non-empty lines
    - Read and decode failures raise ExtractionError, never retried
    """

    def __init__(
        self,
        max_file_size_mb: float = 20.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.max_file_size_mb = max_file_size_mb
        self.metrics_hook = metrics_hook

    async def extract(self, source: Source, file_name: str, extension: str) -> ParsedFile:
        start = monotonic()
        kind = Extension.parse(extension)

        # pdfplumber and file reads are blocking; keep them off the event loop
        pages = await asyncio.to_thread(self._extract_sync, source, file_name, kind)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.EXTRACTION_DURATION, elapsed_ms, labels={"extension": kind.value}
        )
        self.metrics_hook.record_gauge(names.EXTRACTION_PAGES, len(pages))
        logger.info(
            "Extracted %d page(s) from %s in %.0fms", len(pages), file_name, elapsed_ms
        )
        return ParsedFile(pages=pages, extension=kind.value)

    def _extract_sync(
        self, source: Source, file_name: str, kind: Extension
    ) -> tuple[Page, ...]:
        data = self._read_bytes(source, file_name)

        if kind is Extension.PDF:
            return self._pdf_pages(data, file_name)
        return (self._csv_lines(data, file_name),)

    def _read_bytes(self, source: Source, file_name: str) -> bytes:
        try:
            if isinstance(source, bytes):
                data = source
            elif isinstance(source, (str, Path)):
                data = Path(source).read_bytes()
            else:
                data = source.read()
        except Exception as e:
            raise ExtractionError(f"Failed to read file: {e}", file_name) from e

        size_mb = len(data) / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise ExtractionError(
                f"File too large: {size_mb:.2f}MB (max: {self.max_file_size_mb}MB)",
                file_name,
            )
        return data

    def _pdf_pages(self, data: bytes, file_name: str) -> tuple[Page, ...]:
        pages: list[Page] = []
        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, io.BytesIO(data))) as pdf:
                for page_number, page in enumerate(pdf.pages, start=1):
                    text = page.extract_text() or ""
                    fragments = tuple(
                        clean for clean in (line.strip() for line in text.splitlines()) if clean
                    )
                    if not fragments:
                        logger.debug(
                            "Page %d of %s has no extractable text", page_number, file_name
                        )
                    pages.append(fragments)
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}", file_name) from e
        return tuple(pages)

    def _csv_lines(self, data: bytes, file_name: str) -> Page:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ExtractionError(f"CSV is not valid UTF-8: {e}", file_name) from e

        return tuple(
            clean for clean in (line.strip() for line in text.strip().split("\n")) if clean
        )
