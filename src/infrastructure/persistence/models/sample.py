"""Demonstration entity used to exercise the generic access layer."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


def _new_identifier() -> str:
    return str(uuid.uuid4())


class SampleEntity(Base):
    """A string-keyed row with one free-text payload column.

    id is normally assigned by the caller; when left unset the mapper
    generates a UUID string at flush time.
    """

    __tablename__ = "sample_entities"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_identifier)
    data: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def get_identifier(self) -> str | None:
        return self.id

    def set_identifier(self, identifier: str) -> None:
        self.id = identifier

    def __repr__(self) -> str:
        return f"SampleEntity(id={self.id!r}, data={self.data!r})"
