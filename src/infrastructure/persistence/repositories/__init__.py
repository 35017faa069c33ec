"""Concrete SQLAlchemy repository implementation.

Exports SqlDao and the get_dao() factory for wiring at the application
boundary.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from .generic import SqlDao


def get_dao(session: AsyncSession) -> SqlDao:
    """Construct a Dao bound to the given session.

    Intended for use with the transactional session dependency:

        async for session in get_session():
            dao = get_dao(session)
            entity = await dao.get_by_id(SampleEntity, "item 5")
    """
    return SqlDao(session)


__all__ = [
    "SqlDao",
    "get_dao",
]
