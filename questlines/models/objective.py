"""Objective ORM — an ordered checklist entry inside a quest.

Invariants:
    - Keyed by (questline_id, quest_id, id)
    - (questline_id, quest_id) references quests with ON DELETE CASCADE,
      so replacing a questline's quests drops their objectives
    - Display order is sort_index, ties broken by id
"""

from sqlalchemy import (
    String, Text, Integer, Boolean, ForeignKeyConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from questlines.db.base import Base


class Objective(Base):
    """Objective entity — checklist item with explicit sort index."""
    __tablename__ = "objectives"
    __table_args__ = (
        ForeignKeyConstraint(
            ["questline_id", "quest_id"],
            ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
    )

    questline_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    quest_id: Mapped[str] = mapped_column(Text, primary_key=True)
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    sort_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
