"""Domain Types — identity aliases and enums shared across layers.

Invariants:
    - QuestlineId is server-generated (uuid4 string); QuestId/ObjectiveId are caller-supplied
    - Supported export formats are encoded as an Enum, never raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, type-checker support
    - Opaque str ids (not UUID): quest/objective ids come from the frontend as-is
"""

from enum import Enum
from typing import NewType


QuestlineId = NewType("QuestlineId", str)
QuestId = NewType("QuestId", str)
ObjectiveId = NewType("ObjectiveId", str)


class ExportFormat(str, Enum):
    """Formats accepted by the export endpoint."""
    JSON = "json"

    @property
    def media_type(self) -> str:
        return {ExportFormat.JSON: "application/json"}[self]
