# src/activity_importer/factory.py

from functools import lru_cache, partial

from activity_importer.observability.base import MetricsHook, NoOpMetricsHook

from .config import ImporterConfig
from .csv_records import csv_lines_to_records
from .dispatcher import ParseDispatcher
from .extraction import PageExtractor
from .implementations.registry import ImplementationRegistry, default_registry
from .importer import ActivityImporter
from .selector import ImplementationSelector


def create_importer(
    config: ImporterConfig | None = None,
    registry: ImplementationRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ActivityImporter:
    """Create an importer from config.

    Args:
        config: Importer configuration. Defaults to `ImporterConfig()`.
        registry: Implementations to select from. Defaults to the built-in
            brokers and apps.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured ActivityImporter.

    Example:
        >>> importer = create_importer(registry=ImplementationRegistry(brokers=[MyBroker()]))
        >>> outcome = await importer.process("statement.pdf")
    """
    if config is None:
        config = ImporterConfig()
    if registry is None:
        registry = default_registry()

    converter = partial(csv_lines_to_records, delimiter=config.csv_delimiter)

    return ActivityImporter(
        selector=ImplementationSelector(
            registry,
            accepted_extensions=config.accepted_extensions,
            metrics_hook=metrics_hook,
        ),
        dispatcher=ParseDispatcher(csv_converter=converter),
        extractor=PageExtractor(
            max_file_size_mb=config.max_file_size_mb,
            metrics_hook=metrics_hook,
        ),
        config=config,
        metrics_hook=metrics_hook,
    )


@lru_cache(maxsize=1)
def default_importer() -> ActivityImporter:
    return create_importer()
