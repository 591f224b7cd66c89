"""Questline Repository — atomic persistence and retrieval of the questline aggregate.

Invariants:
    - create/update run every write inside ONE transaction; any failure rolls back
      before the error propagates, so readers never see a partial aggregate
    - update replaces ALL quests (objectives cascade) and ALL dependencies; no diffing
    - Quest and objective ids must be non-empty, checked before the transaction opens
    - create ignores any caller id and assigns a uuid4; created == updated on insert
    - Every successful write returns a fresh re-read, never the input object
    - delete is idempotent: zero rows affected is not an error
    - Reads run without an explicit transaction (read skew under concurrent writes accepted)

Design Decisions:
    - Explicit INSERT/UPDATE/DELETE statements over ORM unit-of-work: the replace
      semantics are a handful of set-based statements, cascades are left to the store
    - update checks the root UPDATE rowcount and raises NotFoundError before touching
      children, so a missing id never reaches the child-table writes
    - Constructed with a DatabaseSessionManager and injected into routes
"""

import logging
import uuid
from collections import defaultdict
from datetime import datetime, timezone

from sqlalchemy import case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from questlines.core.domain_types import QuestlineId
from questlines.core.enforce_ids import find_missing_child_id
from questlines.core.errors import ErrorContext, NotFoundError, ValidationError
from questlines.infrastructure.database import DatabaseSessionManager
from questlines.models import Dependency, Objective, Quest, Questline
from questlines.schemas.questline import (
    DependencyEdge, ObjectiveData, Position, QuestData,
    QuestlineInfo, QuestlinePayload, QuestlineResponse,
)

logger = logging.getLogger(__name__)


class QuestlineRepository:
    """Reads and writes questline aggregates against the relational store."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_summaries(self) -> list[QuestlineInfo]:
        """All questlines with quest counts, most recently updated first."""
        completed = func.coalesce(
            func.sum(case((Quest.completed.is_(True), 1), else_=0)), 0,
        )
        stmt = (
            select(
                Questline.id,
                Questline.name,
                Questline.updated,
                func.count(Quest.id).label("total_quests"),
                completed.label("completed_quests"),
            )
            .outerjoin(Quest, Quest.questline_id == Questline.id)
            .group_by(Questline.id, Questline.name, Questline.updated)
            .order_by(Questline.updated.desc(), Questline.id)
        )
        async with self._db.session(ErrorContext(operation="list")) as db:
            rows = (await db.execute(stmt)).all()
        return [
            QuestlineInfo(
                id=row.id,
                name=row.name,
                updated=row.updated,
                total_quests=row.total_quests,
                completed_quests=int(row.completed_quests),
            )
            for row in rows
        ]

    async def get(self, questline_id: QuestlineId) -> QuestlineResponse:
        """Full aggregate, or NotFoundError."""
        ctx = ErrorContext(operation="get", questline_id=questline_id)
        async with self._db.session(ctx) as db:
            return await _read_aggregate(db, questline_id, ctx)

    async def create(self, payload: QuestlinePayload) -> QuestlineResponse:
        """Insert a new aggregate under a server-generated id."""
        questline_id = QuestlineId(str(uuid.uuid4()))
        ctx = ErrorContext(operation="create", questline_id=questline_id)
        _check_child_ids(payload, ctx)
        now = datetime.now(timezone.utc)

        async with self._db.session(ctx) as db:
            async with db.begin():
                await db.execute(
                    insert(Questline).values(
                        id=questline_id, name=payload.name,
                        created=now, updated=now,
                    ),
                )
                await _insert_children(db, questline_id, payload)
            logger.info(
                f"Questline created: {payload.name!r}",
                extra={
                    "questline_id": questline_id, "operation": "create",
                    "quest_count": len(payload.quests),
                },
            )
            return await _read_aggregate(db, questline_id, ctx)

    async def update(self, payload: QuestlinePayload) -> QuestlineResponse:
        """Rename, refresh updated, and replace every child row."""
        questline_id = QuestlineId(payload.id or "")
        ctx = ErrorContext(operation="update", questline_id=questline_id)
        if not questline_id:
            raise ValidationError("Questline id is required", "id", ctx)
        _check_child_ids(payload, ctx)
        now = datetime.now(timezone.utc)

        async with self._db.session(ctx) as db:
            async with db.begin():
                result = await db.execute(
                    update(Questline)
                    .where(Questline.id == questline_id)
                    .values(name=payload.name, updated=now),
                )
                if result.rowcount == 0:
                    raise NotFoundError("Questline", questline_id, ctx)
                await db.execute(
                    delete(Quest).where(Quest.questline_id == questline_id),
                )
                await db.execute(
                    delete(Dependency)
                    .where(Dependency.questline_id == questline_id),
                )
                await _insert_children(db, questline_id, payload)
            logger.info(
                f"Questline updated: {payload.name!r}",
                extra={
                    "questline_id": questline_id, "operation": "update",
                    "quest_count": len(payload.quests),
                },
            )
            return await _read_aggregate(db, questline_id, ctx)

    async def delete(self, questline_id: QuestlineId) -> None:
        """Delete the root row; the store cascades to every child table."""
        ctx = ErrorContext(operation="delete", questline_id=questline_id)
        async with self._db.session(ctx) as db:
            async with db.begin():
                result = await db.execute(
                    delete(Questline).where(Questline.id == questline_id),
                )
        logger.info(
            f"Questline delete affected {result.rowcount} row(s)",
            extra={"questline_id": questline_id, "operation": "delete"},
        )


def _check_child_ids(payload: QuestlinePayload, ctx: ErrorContext) -> None:
    missing = find_missing_child_id(payload.quests)
    if missing:
        raise ValidationError(f"Missing id at {missing}", missing, ctx)


async def _insert_children(
    db: AsyncSession, questline_id: QuestlineId, payload: QuestlinePayload,
) -> None:
    """Bulk-insert quests, objectives and dependencies of one questline."""
    quest_rows = []
    objective_rows = []
    for quest in payload.quests:
        quest_rows.append({
            "questline_id": questline_id,
            "id": quest.id,
            "title": quest.title,
            "description": quest.description,
            "pos_x": quest.position.x,
            "pos_y": quest.position.y,
            "color": quest.color,
            "completed": quest.completed,
        })
        objective_rows.extend(
            {
                "questline_id": questline_id,
                "quest_id": quest.id,
                "id": objective.id,
                "text": objective.text,
                "completed": objective.completed,
                "sort_index": objective.sort_index,
            }
            for objective in quest.objectives
        )
    dependency_rows = [
        {"questline_id": questline_id, "from_id": d.from_id, "to_id": d.to_id}
        for d in payload.dependencies
    ]

    # executemany rejects an empty parameter list
    if quest_rows:
        await db.execute(insert(Quest), quest_rows)
    if objective_rows:
        await db.execute(insert(Objective), objective_rows)
    if dependency_rows:
        await db.execute(insert(Dependency), dependency_rows)


async def _read_aggregate(
    db: AsyncSession, questline_id: QuestlineId, ctx: ErrorContext,
) -> QuestlineResponse:
    """Root, quests, objectives, dependencies; NotFoundError before any child read."""
    root = (await db.execute(
        select(Questline).where(Questline.id == questline_id),
    )).scalar_one_or_none()
    if root is None:
        raise NotFoundError("Questline", questline_id, ctx)

    quests = (await db.execute(
        select(Quest)
        .where(Quest.questline_id == questline_id)
        .order_by(Quest.id),
    )).scalars().all()

    objectives = (await db.execute(
        select(Objective)
        .where(Objective.questline_id == questline_id)
        .order_by(Objective.quest_id, Objective.sort_index, Objective.id),
    )).scalars().all()

    dependencies = (await db.execute(
        select(Dependency)
        .where(Dependency.questline_id == questline_id)
        .order_by(Dependency.id),
    )).scalars().all()

    objectives_by_quest: dict[str, list[ObjectiveData]] = defaultdict(list)
    for o in objectives:
        objectives_by_quest[o.quest_id].append(ObjectiveData(
            id=o.id, text=o.text, completed=o.completed, sort_index=o.sort_index,
        ))

    return QuestlineResponse(
        id=root.id,
        name=root.name,
        created=root.created,
        updated=root.updated,
        quests=[
            QuestData(
                id=q.id,
                title=q.title,
                description=q.description,
                position=Position(x=q.pos_x, y=q.pos_y),
                color=q.color,
                completed=q.completed,
                objectives=objectives_by_quest.get(q.id, []),
            )
            for q in quests
        ],
        dependencies=[
            DependencyEdge(from_id=d.from_id, to_id=d.to_id)
            for d in dependencies
        ],
    )
