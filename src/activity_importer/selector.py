# src/activity_importer/selector.py

import logging
from collections.abc import Iterable, Sequence

from activity_importer.observability import names
from activity_importer.observability.base import MetricsHook, NoOpMetricsHook

from .config import DEFAULT_ACCEPTED_EXTENSIONS, SUPPORTED_EXTENSIONS
from .errors import DocumentError, ImporterError, ParserError, Status
from .implementations.base import Implementation
from .implementations.registry import ImplementationRegistry, default_registry
from .models import Page

logger = logging.getLogger(__name__)


class ImplementationSelector:
    """Picks the single implementation that recognizes a document.

    Overlapping detectors are surfaced as an error, never resolved by
    picking one.
    """

    def __init__(
        self,
        registry: ImplementationRegistry,
        accepted_extensions: Iterable[str] = DEFAULT_ACCEPTED_EXTENSIONS,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.registry = registry
        self.accepted_extensions = frozenset(ext.lower() for ext in accepted_extensions)
        self.metrics_hook = metrics_hook

    def select(
        self, pages: Sequence[Page], file_name: str, extension: str
    ) -> Implementation:
        self.check_extension(file_name, extension)

        extension = extension.lower()
        matches = [impl for impl in self.registry if self._detects(impl, pages, extension)]
        self.metrics_hook.record_gauge(names.SELECTION_MATCHES, len(matches))

        if not matches:
            raise DocumentError(
                "Invalid document. Failed to find parser implementation for document.",
                file_name,
                Status.NO_IMPLEMENTATION,
            )

        if len(matches) > 1:
            raise DocumentError(
                "Invalid document. Found multiple parser implementations for "
                f"document: {', '.join(impl.name for impl in matches)}.",
                file_name,
                Status.AMBIGUOUS_IMPLEMENTATION,
            )

        logger.debug("Selected implementation %s for %s", matches[0].name, file_name)
        return matches[0]

    def check_extension(self, file_name: str, extension: str) -> None:
        # Only extensions the extractor can read pass, whatever the configuration
        ext = extension.lower()
        if ext not in self.accepted_extensions or ext not in SUPPORTED_EXTENSIONS:
            raise DocumentError(
                f"Invalid document. Unsupported file type '{extension}'. "
                f"Extension must be one of [{','.join(sorted(self.accepted_extensions))}].",
                file_name,
                Status.UNSUPPORTED_EXTENSION,
            )

    def _detects(
        self, impl: Implementation, pages: Sequence[Page], extension: str
    ) -> bool:
        try:
            return bool(impl.can_parse_document(pages, extension))
        except ImporterError:
            raise
        except Exception as e:
            logger.error("Detection failed in %s: %s", impl.name, e)
            raise ParserError(
                f"Implementation '{impl.name}' failed while detecting document",
                repr(e),
            ) from e


def find_implementation(
    pages: Sequence[Page],
    file_name: str,
    extension: str,
    registry: ImplementationRegistry | None = None,
) -> Implementation:
    if registry is None:
        registry = default_registry()
    selector = ImplementationSelector(registry)
    return selector.select(pages, file_name, extension)
