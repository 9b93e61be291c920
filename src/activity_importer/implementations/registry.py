# implementations/registry.py

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from .base import Implementation

logger = logging.getLogger(__name__)


class ImplementationRegistry:
    """Fixed set of known implementations, brokers first, then apps.

    Built once. There is no register or remove: selection is purely
    predicate-based, so the registry only needs to be iterable.
    """

    def __init__(
        self,
        brokers: Iterable[Implementation] = (),
        apps: Iterable[Implementation] = (),
    ) -> None:
        self._brokers = tuple(brokers)
        self._apps = tuple(apps)
        self._all = self._brokers + self._apps

        seen: set[str] = set()
        for impl in self._all:
            if impl.name in seen:
                raise ValueError(f"Implementation '{impl.name}' already registered")
            seen.add(impl.name)

        logger.debug(
            "Built implementation registry: %d brokers, %d apps",
            len(self._brokers),
            len(self._apps),
        )

    @property
    def brokers(self) -> tuple[Implementation, ...]:
        return self._brokers

    @property
    def apps(self) -> tuple[Implementation, ...]:
        return self._apps

    def all(self) -> tuple[Implementation, ...]:
        return self._all

    def names(self) -> list[str]:
        return [impl.name for impl in self._all]

    def __iter__(self) -> Iterator[Implementation]:
        return iter(self._all)

    def __len__(self) -> int:
        return len(self._all)


@lru_cache(maxsize=1)
def default_registry() -> ImplementationRegistry:
    from activity_importer import apps, brokers

    return ImplementationRegistry(
        brokers=brokers.IMPLEMENTATIONS,
        apps=apps.IMPLEMENTATIONS,
    )
