# Errors
from .errors import (
    ActivityValidationError,
    DocumentError,
    ExtractionError,
    ImporterError,
    ParserError,
    Status,
)

# Models
from .models import CsvRecords, Extension, Outcome, Page, ParsedFile, ParseResult

# Activities
from .activities import Activity, ActivityType, validate_activity

# Config
from .config import ImporterConfig

# Implementations
from .implementations import Implementation, ImplementationRegistry, default_registry

# Pipeline
from .csv_records import csv_lines_to_records
from .dispatcher import ParseDispatcher
from .extraction import PageExtractor
from .factory import create_importer, default_importer
from .importer import ActivityImporter, parse_activities_from_pages, parse_file, process
from .result_filter import filter_result
from .selector import ImplementationSelector, find_implementation

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Errors
    "ActivityValidationError",
    "DocumentError",
    "ExtractionError",
    "ImporterError",
    "ParserError",
    "Status",
    # Models
    "CsvRecords",
    "Extension",
    "Outcome",
    "Page",
    "ParsedFile",
    "ParseResult",
    # Activities
    "Activity",
    "ActivityType",
    "validate_activity",
    # Config
    "ImporterConfig",
    # Implementations
    "Implementation",
    "ImplementationRegistry",
    "default_registry",
    # Pipeline
    "ActivityImporter",
    "ImplementationSelector",
    "PageExtractor",
    "ParseDispatcher",
    "create_importer",
    "csv_lines_to_records",
    "default_importer",
    "filter_result",
    "find_implementation",
    "parse_activities_from_pages",
    "parse_file",
    "process",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
