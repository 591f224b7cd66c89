"""Initial schema — questlines, quests, objectives, dependencies.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Every child table cascades from its parent so deleting a questline (or
replacing its quests) removes all descendants in the store itself.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "questlines",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "quests",
        sa.Column("questline_id", sa.String(36), sa.ForeignKey("questlines.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("title", sa.Text, nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("pos_x", sa.Float, nullable=False, server_default="0"),
        sa.Column("pos_y", sa.Float, nullable=False, server_default="0"),
        sa.Column("color", sa.String(32), nullable=True),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "objectives",
        sa.Column("questline_id", sa.String(36), primary_key=True),
        sa.Column("quest_id", sa.Text, primary_key=True),
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("text", sa.Text, nullable=False, server_default=""),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("sort_index", sa.Integer, nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["questline_id", "quest_id"], ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
    )

    op.create_table(
        "dependencies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("questline_id", sa.String(36), sa.ForeignKey("questlines.id", ondelete="CASCADE"), nullable=False),
        sa.Column("from_id", sa.Text, nullable=False),
        sa.Column("to_id", sa.Text, nullable=False),
        sa.ForeignKeyConstraint(
            ["questline_id", "from_id"], ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["questline_id", "to_id"], ["quests.questline_id", "quests.id"],
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_dependencies_questline_id", "dependencies", ["questline_id"])


def downgrade() -> None:
    op.drop_index("ix_dependencies_questline_id", table_name="dependencies")
    op.drop_table("dependencies")
    op.drop_table("objectives")
    op.drop_table("quests")
    op.drop_table("questlines")
