"""Implementations for exports of portfolio and banking apps.

Same contract as `activity_importer.brokers`.
"""

from activity_importer.implementations.base import Implementation

IMPLEMENTATIONS: tuple[Implementation, ...] = ()
