"""Compile domain Criteria into SQLAlchemy statements.

Two shapes are produced from the same predicates:
  - select_statement: full entity rows, with offset/limit when paginated.
  - count_statement:  a row-count projection over the filtered extent.

Paginated selects are ordered by the mapper's primary key so consecutive
pages neither overlap nor skip rows.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, func, inspect, select
from sqlalchemy.exc import InvalidRequestError

from src.domain.models.criteria import Criteria, FieldPredicate
from src.domain.models.enums import PredicateKind


def _attribute(entity_type: type, name: str) -> Any:
    mapper = inspect(entity_type)
    if name not in mapper.all_orm_descriptors:
        raise InvalidRequestError(
            f'Entity namespace for "{mapper.class_.__name__}" has no property "{name}"'
        )
    return getattr(entity_type, name)


def _clause(entity_type: type, predicate: FieldPredicate) -> ColumnElement[bool]:
    attribute = _attribute(entity_type, predicate.name)
    if predicate.kind is PredicateKind.CASE_INSENSITIVE_MATCH:
        return attribute.ilike(predicate.value)
    return attribute == predicate.value


def _where(stmt: Select, entity_type: type, criteria: Criteria) -> Select:
    for predicate in criteria.predicates:
        stmt = stmt.where(_clause(entity_type, predicate))
    return stmt


def select_statement(entity_type: type, criteria: Criteria | None = None) -> Select:
    criteria = criteria or Criteria()
    stmt = _where(select(entity_type), entity_type, criteria)
    if criteria.is_paginated:
        stmt = stmt.order_by(*inspect(entity_type).primary_key)
    if criteria.first_result is not None:
        stmt = stmt.offset(criteria.first_result)
    if criteria.max_results:
        stmt = stmt.limit(criteria.max_results)
    return stmt


def count_statement(entity_type: type, criteria: Criteria | None = None) -> Select:
    criteria = criteria or Criteria()
    stmt = select(func.count()).select_from(entity_type)
    return _where(stmt, entity_type, criteria)
