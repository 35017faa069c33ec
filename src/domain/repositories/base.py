"""Generic data-access interface.

Dao is the one abstraction application code talks to for persistence.  Every
operation is parameterised by an entity type token (the entity class) rather
than being declared once per entity, so a single implementation serves every
type that satisfies the Identifiable contract.

Design notes:
  - All methods are async to accommodate async database drivers.
  - Example filters are parallel name/value sequences; only the first
    min(len(names), len(values)) pairs are applied.
  - get_by_example* match by exact equality; count_by_example matches
    case-insensitively (ILIKE).  The asymmetry is intentional.
  - count* return COUNT_UNAVAILABLE when the backend's row-count projection
    produced no integer, which is distinct from a successful 0.
  - Backend failures propagate unchanged; no wrapping, no retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from typing import Any, TypeVar

from src.domain.models.identifiable import Identifiable

I = TypeVar("I", bound=Identifiable)  # noqa: E741

COUNT_UNAVAILABLE = -1


class Dao(ABC):
    """Uniform CRUD and query operations over any Identifiable entity type."""

    @abstractmethod
    async def get_all(self, entity_type: type[I]) -> list[I]:
        """Return every persisted entity of the given type."""

    @abstractmethod
    async def get_by_id(self, entity_type: type[I], identifier: Hashable) -> I | None:
        """Return the entity with the given identifier, or None if not found."""

    @abstractmethod
    async def count(self, entity_type: type[I]) -> int:
        """Return the number of persisted entities of the given type."""

    @abstractmethod
    async def get_page(
        self, entity_type: type[I], first_result: int, max_results: int
    ) -> list[I]:
        """Return at most max_results entities starting at offset first_result."""

    @abstractmethod
    async def get_by_example(
        self, entity_type: type[I], names: Sequence[str], values: Sequence[Any]
    ) -> list[I]:
        """Return entities whose named fields equal the paired values."""

    @abstractmethod
    async def count_by_example(
        self, entity_type: type[I], names: Sequence[str], values: Sequence[Any]
    ) -> int:
        """Count entities whose named fields match the paired values, ignoring case."""

    @abstractmethod
    async def get_by_example_page(
        self,
        entity_type: type[I],
        names: Sequence[str],
        values: Sequence[Any],
        first_result: int,
        max_results: int,
    ) -> list[I]:
        """Paginated get_by_example."""

    @abstractmethod
    async def save(self, entity: Identifiable) -> Any:
        """Insert or update the entity and return its identifier.

        An entity without an identifier is inserted and the backend-assigned
        identifier is returned.  An entity with an identifier is upserted and
        that same identifier is returned.
        """

    @abstractmethod
    async def delete(self, entity: Identifiable) -> None:
        """Remove the persisted row corresponding to the entity."""
