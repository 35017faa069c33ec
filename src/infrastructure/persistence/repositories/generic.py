"""SQLAlchemy implementation of the generic Dao."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.criteria import Criteria
from src.domain.models.enums import PredicateKind
from src.domain.models.identifiable import Identifiable
from src.domain.repositories.base import COUNT_UNAVAILABLE, Dao, I
from src.infrastructure.persistence.criteria import count_statement, select_statement

logger = logging.getLogger(__name__)


def _require_identifiable(entity: object) -> None:
    if not isinstance(entity, Identifiable):
        raise TypeError(f"{type(entity).__name__} does not implement Identifiable")


def _clear_unset_columns(entity: object) -> None:
    """Set never-assigned column attributes of a transient entity to None.

    merge() copies only attributes present in the instance state; an upsert
    must write every column.
    """
    state = inspect(entity)
    if not state.transient:
        return
    primary_key = set(state.mapper.primary_key)
    for attribute in state.mapper.column_attrs:
        if attribute.key in state.dict:
            continue
        if any(column in primary_key for column in attribute.columns):
            continue
        setattr(entity, attribute.key, None)


class SqlDao(Dao):
    """Dao bound to a single AsyncSession.

    The session owns the transaction; this class never commits.  save() and
    delete() flush so generated identifiers and constraint violations surface
    at the call site.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _find(self, entity_type: type[I], criteria: Criteria) -> list[I]:
        result = await self._session.execute(select_statement(entity_type, criteria))
        return list(result.scalars())

    async def _count(self, entity_type: type[I], criteria: Criteria) -> int:
        result = await self._session.execute(count_statement(entity_type, criteria))
        for value in result.scalars():
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        logger.warning(
            "Row-count projection for %s returned no integer row", entity_type.__name__
        )
        return COUNT_UNAVAILABLE

    async def get_all(self, entity_type: type[I]) -> list[I]:
        logger.debug("Loading all %s", entity_type.__name__)
        return await self._find(entity_type, Criteria())

    async def get_by_id(self, entity_type: type[I], identifier: Hashable) -> I | None:
        logger.debug("Loading %s %r", entity_type.__name__, identifier)
        return await self._session.get(entity_type, identifier)

    async def count(self, entity_type: type[I]) -> int:
        return await self._count(entity_type, Criteria())

    async def get_page(
        self, entity_type: type[I], first_result: int, max_results: int
    ) -> list[I]:
        criteria = Criteria().paginate(first_result, max_results)
        logger.debug(
            "Loading %s page offset=%d limit=%d",
            entity_type.__name__,
            first_result,
            max_results,
        )
        return await self._find(entity_type, criteria)

    async def get_by_example(
        self, entity_type: type[I], names: Sequence[str], values: Sequence[Any]
    ) -> list[I]:
        criteria = Criteria.from_example(names, values)
        logger.debug("Finding %s by example %s", entity_type.__name__, criteria.predicates)
        return await self._find(entity_type, criteria)

    async def count_by_example(
        self, entity_type: type[I], names: Sequence[str], values: Sequence[Any]
    ) -> int:
        criteria = Criteria.from_example(
            names, values, PredicateKind.CASE_INSENSITIVE_MATCH
        )
        return await self._count(entity_type, criteria)

    async def get_by_example_page(
        self,
        entity_type: type[I],
        names: Sequence[str],
        values: Sequence[Any],
        first_result: int,
        max_results: int,
    ) -> list[I]:
        criteria = Criteria.from_example(names, values).paginate(first_result, max_results)
        logger.debug(
            "Finding %s page by example %s offset=%d limit=%d",
            entity_type.__name__,
            criteria.predicates,
            first_result,
            max_results,
        )
        return await self._find(entity_type, criteria)

    async def save(self, entity: Identifiable) -> Any:
        _require_identifiable(entity)
        identifier = entity.get_identifier()
        if identifier is None:
            self._session.add(entity)
            await self._session.flush()
            logger.debug("Inserted %s %r", type(entity).__name__, entity.get_identifier())
            return entity.get_identifier()

        _clear_unset_columns(entity)
        await self._session.merge(entity)
        await self._session.flush()
        logger.debug("Saved %s %r", type(entity).__name__, identifier)
        return identifier

    async def delete(self, entity: Identifiable) -> None:
        _require_identifiable(entity)
        if entity in self._session:
            persistent = entity
        elif entity.get_identifier() is None:
            # Never saved, so there is no row to resolve.
            persistent = None
        else:
            # Detached or transient copy: resolve the row by identity.
            persistent = await self._session.get(type(entity), entity.get_identifier())
        if persistent is None:
            logger.debug(
                "No persisted %s %r to delete", type(entity).__name__, entity.get_identifier()
            )
            return
        await self._session.delete(persistent)
        await self._session.flush()
        logger.debug("Deleted %s %r", type(entity).__name__, entity.get_identifier())
