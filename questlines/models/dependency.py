"""Dependency ORM — directed edge between two quests of the same questline.

Invariants:
    - Both endpoints reference quests of the same questline (composite FKs)
    - No acyclicity check: edges are stored and returned verbatim
    - Surrogate integer key: duplicate edges are allowed

Design Decisions:
    - FKs on (questline_id, from_id) / (questline_id, to_id): cross-questline
      edges are rejected by the store as an integrity violation
"""

from sqlalchemy import String, Text, Integer, ForeignKey, ForeignKeyConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from questlines.db.base import Base


class Dependency(Base):
    """Dependency edge — from_id must be done before to_id."""
    __tablename__ = "dependencies"
    __table_args__ = (
        ForeignKeyConstraint(
            ["questline_id", "from_id"],
            ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
        ForeignKeyConstraint(
            ["questline_id", "to_id"],
            ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
        Index("ix_dependencies_questline_id", "questline_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    questline_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questlines.id", ondelete="CASCADE"),
        nullable=False,
    )
    from_id: Mapped[str] = mapped_column(Text, nullable=False)
    to_id: Mapped[str] = mapped_column(Text, nullable=False)
