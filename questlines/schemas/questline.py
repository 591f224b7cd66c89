"""Questline Schemas — Pydantic models for the questline API contract.

Invariants:
    - Wire field names are camelCase (sortIndex, totalQuests, from/to)
    - Every input field except name has a default, so partial frontend payloads decode
    - Timestamps are serialized as ISO-8601 with an explicit UTC offset
    - Unknown input fields are ignored

Design Decisions:
    - One schema set for request and response: the aggregate travels both ways
      unchanged, only id/created/updated are server-owned
    - alias_generator=to_camel + populate_by_name: Python code uses snake_case,
      the wire uses camelCase, FastAPI serializes by alias
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from questlines.core.domain_types import ObjectiveId, QuestId


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(_CamelModel):
    """Board coordinates used by the frontend layout only."""
    x: float = 0.0
    y: float = 0.0


class ObjectiveData(_CamelModel):
    """Checklist entry inside a quest."""
    id: ObjectiveId = ObjectiveId("")
    text: str = ""
    completed: bool = False
    sort_index: int = 0


class QuestData(_CamelModel):
    """Quest node with its ordered objectives."""
    id: QuestId = QuestId("")
    title: str = ""
    description: str = ""
    position: Position = Field(default_factory=Position)
    color: str | None = None
    completed: bool = False
    objectives: list[ObjectiveData] = Field(default_factory=list)


class DependencyEdge(_CamelModel):
    """Directed edge: `from` quest must precede `to` quest."""
    from_id: QuestId = Field(alias="from")
    to_id: QuestId = Field(alias="to")


class QuestlinePayload(_CamelModel):
    """Questline body accepted by POST and PUT."""
    id: str | None = None
    name: str
    quests: list[QuestData] = Field(default_factory=list)
    dependencies: list[DependencyEdge] = Field(default_factory=list)


class QuestlineResponse(QuestlinePayload):
    """Full questline aggregate as persisted."""
    id: str
    created: datetime
    updated: datetime

    @field_validator("created", "updated")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes for timezone-aware columns
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class QuestlineInfo(_CamelModel):
    """List-view summary; derived, never stored."""
    id: str
    name: str
    updated: datetime
    total_quests: int = 0
    completed_quests: int = 0

    @field_validator("updated")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""
    message: str


class HealthStatus(BaseModel):
    """Liveness of the API process and its database."""
    api: bool
    db: bool
