"""Quest ORM — a node in a questline's dependency graph.

Invariants:
    - Keyed by (questline_id, id): quest ids are caller-supplied and only unique per questline
    - Caller-supplied ids are Text: no length limit on any backend
    - pos_x/pos_y are layout hints for the frontend, never interpreted here
    - Deleted with its questline (ON DELETE CASCADE)
"""

from sqlalchemy import String, Text, Float, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from questlines.db.base import Base


class Quest(Base):
    """Quest entity — titled node with a board position."""
    __tablename__ = "quests"

    questline_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questlines.id", ondelete="CASCADE"),
        primary_key=True,
    )
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    pos_x: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    pos_y: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
