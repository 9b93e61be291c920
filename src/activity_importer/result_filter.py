# src/activity_importer/result_filter.py

import logging

from .errors import Status
from .models import ParseResult

logger = logging.getLogger(__name__)


def filter_result(result: ParseResult) -> ParseResult:
    """Classify a raw parse result into its terminal state.

    Pure and total. A single hole in the activities poisons the whole
    document (status 6): partially imported statements are never returned.
    An empty activity list becomes status 5 unless the implementation
    already set a status of its own.
    """
    if result.activities is None:
        return result

    if any(activity is None for activity in result.activities):
        logger.warning(
            "Discarding %d activities: at least one could not be built",
            len(result.activities),
        )
        return result.with_changes(activities=None, status=Status.INVALID_ACTIVITIES)

    if len(result.activities) == 0:
        status = Status.NO_ACTIVITIES if result.status == Status.OK else result.status
        return result.with_changes(activities=None, status=status)

    return result
