"""Questline ORM — persists the aggregate root of a quest graph.

Invariants:
    - id is an opaque string primary key, assigned by the repository (uuid4)
    - created is written once; updated is refreshed on every root-row UPDATE
    - Quests and dependencies reference this row with ON DELETE CASCADE

Design Decisions:
    - No ORM relationships: the repository reads and writes child tables with
      explicit statements, so cascades are left to the database
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from questlines.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Questline(Base):
    """Questline aggregate root — owns quests and dependencies."""
    __tablename__ = "questlines"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
