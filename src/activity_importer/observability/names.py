# src/activity_importer/observability/names.py

"""Metric names emitted by activity-importer.

Durations are in milliseconds.
"""

# ============================================================================
# Import pipeline
# ============================================================================

# Duration of one file, extraction through outcome
IMPORT_DURATION = "import_duration"

# Counters, labelled with the terminal status
IMPORTS_TOTAL = "imports_total"
IMPORT_ERRORS_TOTAL = "import_errors_total"


# ============================================================================
# Page extraction
# ============================================================================

EXTRACTION_DURATION = "extraction_duration"

# Gauge
EXTRACTION_PAGES = "extraction_pages"


# ============================================================================
# Implementation selection
# ============================================================================

# Gauge: how many implementations accepted the last document
SELECTION_MATCHES = "selection_matches"
