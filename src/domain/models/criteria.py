"""Backend-agnostic query descriptor.

A Criteria is a conjunction of field predicates plus optional pagination.
The infrastructure layer compiles it into a native statement; nothing here
knows about SQL.

Example filters arrive as parallel name/value sequences.  Only
min(len(names), len(values)) pairs are used; the excess on the longer side
is ignored without error.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import PredicateKind


class FieldPredicate(BaseModel):
    """A single `<name> <kind> <value>` restriction."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: PredicateKind = PredicateKind.EQUAL
    value: Any = None


class Criteria(BaseModel):
    """AND-conjunction of predicates, optionally paginated.

    first_result is applied whenever it is set.  max_results is applied only
    when greater than zero; 0 means "no limit".
    """

    model_config = ConfigDict(frozen=True)

    predicates: tuple[FieldPredicate, ...] = ()
    first_result: int | None = Field(default=None, ge=0)
    max_results: int | None = Field(default=None, ge=0)

    @classmethod
    def from_example(
        cls,
        names: Sequence[str],
        values: Sequence[Any],
        kind: PredicateKind = PredicateKind.EQUAL,
    ) -> Criteria:
        """Pair names with values, stopping at the shorter sequence."""
        return cls(
            predicates=tuple(
                FieldPredicate(name=name, kind=kind, value=value)
                for name, value in zip(names, values)
            )
        )

    def paginate(self, first_result: int, max_results: int) -> Criteria:
        # model_copy() skips validation; rebuild so ge=0 is enforced.
        return Criteria(
            predicates=self.predicates,
            first_result=first_result,
            max_results=max_results,
        )

    @property
    def is_paginated(self) -> bool:
        return self.first_result is not None or bool(self.max_results)
