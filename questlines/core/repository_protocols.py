"""Boundary Protocols — contract between the HTTP layer and aggregate persistence.

Invariants:
    - Routes depend on QuestlineStore, never on the SQLAlchemy implementation
    - Every method either returns a full aggregate/summary or raises a QuestlinesError

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests inject fakes without inheritance
"""

from typing import Protocol

from questlines.core.domain_types import QuestlineId
from questlines.schemas.questline import (
    QuestlineInfo, QuestlinePayload, QuestlineResponse,
)


class QuestlineStore(Protocol):
    """Contract for questline aggregate persistence."""
    async def list_summaries(self) -> list[QuestlineInfo]: ...
    async def get(self, questline_id: QuestlineId) -> QuestlineResponse: ...
    async def create(self, payload: QuestlinePayload) -> QuestlineResponse: ...
    async def update(self, payload: QuestlinePayload) -> QuestlineResponse: ...
    async def delete(self, questline_id: QuestlineId) -> None: ...
