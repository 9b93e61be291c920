# src/activity_importer/csv_records.py

import csv
import logging
from collections.abc import Sequence

from .models import CsvRecords

logger = logging.getLogger(__name__)

_CANDIDATE_DELIMITERS = ";,\t|"


def csv_lines_to_records(
    lines: Sequence[str], delimiter: str | None = None
) -> CsvRecords:
    """Turn raw CSV lines into one dict per data row, keyed by the header.

    The first line is the header. When `delimiter` is None it is sniffed from
    the header line. Cell values and header names are trimmed. Cells beyond
    the header width are dropped and missing cells become "".
    """
    if not lines:
        return []

    if delimiter is None:
        delimiter = _sniff_delimiter(lines[0])

    reader = csv.DictReader(lines, delimiter=delimiter, restval="")
    if not reader.fieldnames:
        return []
    reader.fieldnames = [name.strip() for name in reader.fieldnames]

    records: CsvRecords = []
    for row in reader:
        records.append(
            {key: (value or "").strip() for key, value in row.items() if key is not None}
        )

    logger.debug(
        "Normalized %d CSV rows with delimiter %r and %d columns",
        len(records),
        delimiter,
        len(reader.fieldnames),
    )
    return records


def _sniff_delimiter(header: str) -> str:
    try:
        return csv.Sniffer().sniff(header, delimiters=_CANDIDATE_DELIMITERS).delimiter
    except csv.Error:
        # Single-column files give the sniffer nothing to work with
        return ","
