from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subcontractor


class SubcontractorRepository(Protocol):
    """Repository interface for Subcontractor.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def add(self, subcontractor: Subcontractor) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Subcontractor]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class InMemorySubcontractorRepository:
    """Ordered, append-only store living for the duration of the process."""

    def __init__(self):
        self._items: list[Subcontractor] = []

    def add(self, subcontractor: Subcontractor) -> int:
        self._items.append(subcontractor)
        return len(self._items) - 1

    def list_all(self) -> Sequence[Subcontractor]:
        return tuple(self._items)

    def count(self) -> int:
        return len(self._items)
