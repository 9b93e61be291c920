"""Broker statement implementations.

Each broker module exposes one `Implementation` subclass; instances are
listed in `IMPLEMENTATIONS`, which the default registry reads once.
"""

from activity_importer.implementations.base import Implementation

IMPLEMENTATIONS: tuple[Implementation, ...] = ()
