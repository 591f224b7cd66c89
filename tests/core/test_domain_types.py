"""Domain Types — verifies id aliases and the export format enum.

Tests:
    - NewType ids wrap plain strings and flow through the wire schemas unchanged
    - ExportFormat has exactly one member with its media type
"""

import pytest

from questlines.core.domain_types import (
    ExportFormat, ObjectiveId, QuestId, QuestlineId,
)
from questlines.schemas.questline import DependencyEdge, QuestData


def test_identity_types_wrap_str():
    assert QuestlineId("ql-1") == "ql-1"
    assert QuestId("q1") == "q1"
    assert ObjectiveId("o1") == "o1"


def test_schema_ids_accept_plain_strings():
    quest = QuestData.model_validate({"id": "q1", "objectives": [{"id": "o1"}]})
    edge = DependencyEdge.model_validate({"from": "q1", "to": "q2"})

    assert quest.id == QuestId("q1")
    assert quest.objectives[0].id == ObjectiveId("o1")
    assert (edge.from_id, edge.to_id) == ("q1", "q2")


def test_schema_ids_default_to_empty():
    assert QuestData().id == ""
    assert QuestData.model_validate({"objectives": [{}]}).objectives[0].id == ""


def test_export_format_has_only_json():
    assert list(ExportFormat) == [ExportFormat.JSON]
    assert ExportFormat("json").media_type == "application/json"
    with pytest.raises(ValueError):
        ExportFormat("xml")
