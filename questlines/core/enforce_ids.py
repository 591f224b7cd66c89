"""Child Id Enforcement — quests and objectives must carry ids before persistence.

Invariants:
    - find_missing_child_id is PURE: inspects the payload, never mutates it
    - Returns the first offending location, or None when every id is present
    - Whitespace-only ids count as missing

Design Decisions:
    - Checked before the transaction opens: an invalid payload never touches the store
"""

from typing import Iterable, Protocol


class _ObjectiveLike(Protocol):
    id: str


class _QuestLike(Protocol):
    id: str
    objectives: list[_ObjectiveLike]


def find_missing_child_id(quests: Iterable[_QuestLike]) -> str | None:
    """Return a description of the first quest/objective lacking an id."""
    for qi, quest in enumerate(quests):
        if not (quest.id or "").strip():
            return f"quests[{qi}].id"
        for oi, objective in enumerate(quest.objectives):
            if not (objective.id or "").strip():
                return f"quests[{qi}].objectives[{oi}].id"
    return None
