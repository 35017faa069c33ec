"""Domain model package.

Pure Python / Pydantic objects with no ORM or infrastructure dependencies:
the identity contract every entity satisfies and the criteria descriptor the
generic access layer translates into backend queries.
"""

from .criteria import Criteria, FieldPredicate
from .enums import PredicateKind
from .identifiable import Identifiable

__all__ = [
    "Criteria",
    "FieldPredicate",
    "Identifiable",
    "PredicateKind",
]
