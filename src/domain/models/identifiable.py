"""Identity contract shared by every persistable entity.

An entity is anything that can report and accept its own identifier.  The
identifier is None until the entity is first saved (or assigned by the
caller), after which it uniquely addresses the persisted row.

Declared as a runtime-checkable Protocol rather than an ABC: ORM classes
built on the declarative base satisfy it structurally, and ABCMeta cannot be
combined with SQLAlchemy's declarative metaclass.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol, TypeVar, runtime_checkable

S = TypeVar("S", bound=Hashable)


@runtime_checkable
class Identifiable(Protocol[S]):
    """An object carrying an identifier of type S."""

    def get_identifier(self) -> S | None:
        """Return the current identifier, or None if not yet assigned."""
        ...

    def set_identifier(self, identifier: S) -> None:
        """Assign (or reassign) the identifier."""
        ...
