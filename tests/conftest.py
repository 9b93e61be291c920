from collections.abc import Callable, Sequence
from typing import Any

import pytest

from activity_importer.config import ImporterConfig
from activity_importer.factory import create_importer
from activity_importer.implementations.base import Implementation
from activity_importer.implementations.registry import ImplementationRegistry
from activity_importer.importer import ActivityImporter
from activity_importer.models import ParseResult


class FakeImplementation(Implementation):
    """Implementation double with a scripted detector and parse result."""

    def __init__(
        self,
        name: str,
        detects: bool | Callable[[Sequence, str], bool] = True,
        result: ParseResult | BaseException | None = None,
    ) -> None:
        self.name = name
        self._detects = detects
        self._result = result if result is not None else ParseResult(activities=[])
        self.parsed_pages: list[Sequence[Any]] = []

    def can_parse_document(self, pages: Sequence, extension: str) -> bool:
        if callable(self._detects):
            return self._detects(pages, extension)
        return self._detects

    def parse_pages(self, pages: Sequence) -> ParseResult:
        self.parsed_pages.append(pages)
        if isinstance(self._result, BaseException):
            raise self._result
        return self._result


@pytest.fixture
def make_impl() -> Callable[..., FakeImplementation]:
    return FakeImplementation


@pytest.fixture
def make_importer() -> Callable[..., ActivityImporter]:
    def _make(
        brokers: Sequence[Implementation] = (),
        apps: Sequence[Implementation] = (),
        config: ImporterConfig | None = None,
        **kwargs: Any,
    ) -> ActivityImporter:
        registry = ImplementationRegistry(brokers=brokers, apps=apps)
        return create_importer(config=config, registry=registry, **kwargs)

    return _make


@pytest.fixture
def select_all_samples() -> Callable[..., None]:
    """Assert that every sample is detected by `implementation` and that the
    selector resolves it to exactly that implementation."""

    def _check(
        importer: ActivityImporter,
        implementation: Implementation,
        samples: Sequence[Sequence[Sequence[str]]],
        file_prefix: str,
        extension: str = "pdf",
    ) -> None:
        for index, pages in enumerate(samples):
            assert implementation.can_parse_document(pages, extension)
            selected = importer.selector.select(
                pages, f"{file_prefix}_{index}.{extension}", extension
            )
            assert selected is implementation

    return _check
