"""
Repository Pattern -- keeps voyage storage out of the command handlers.

The registry lives in memory for the duration of a single run; nothing is
persisted.  Handlers only see domain-relevant operations.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from src.domain.entities import Voyage

logger = logging.getLogger(__name__)


class VoyageRepository:
    def __init__(self) -> None:
        self._voyages: dict[int, Voyage] = {}

    def __contains__(self, voyage_id: object) -> bool:
        return voyage_id in self._voyages

    def __len__(self) -> int:
        return len(self._voyages)

    def __iter__(self) -> Iterator[Voyage]:
        return iter(self.list_by_id())

    def add(self, voyage: Voyage) -> Voyage:
        if voyage.id in self._voyages:
            raise KeyError(f"Voyage {voyage.id} already registered")
        self._voyages[voyage.id] = voyage
        logger.debug("Registered %s voyage %d", voyage.voyage_type.value, voyage.id)
        return voyage

    def get_by_id(self, voyage_id: int) -> Optional[Voyage]:
        return self._voyages.get(voyage_id)

    def list_by_id(self) -> list[Voyage]:
        return [self._voyages[key] for key in sorted(self._voyages)]

    def remove(self, voyage_id: int) -> Voyage:
        return self._voyages.pop(voyage_id)

    def cancel(self, voyage_id: int) -> Voyage:
        """Refund every sold seat at full price, then drop the voyage.

        Returns the voyage in its final state so the caller can report it.
        """
        voyage = self._voyages[voyage_id]
        refunded = voyage.cancel_sales()
        self.remove(voyage_id)
        logger.debug("Cancelled voyage %d, refunded %.2f", voyage_id, refunded)
        return voyage
