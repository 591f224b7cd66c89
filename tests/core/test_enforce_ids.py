"""Child Id Enforcement — find_missing_child_id reports the first id gap."""

from questlines.core.enforce_ids import find_missing_child_id
from questlines.schemas.questline import ObjectiveData, QuestData


def test_all_ids_present():
    quests = [
        QuestData(id="q1", objectives=[ObjectiveData(id="o1")]),
        QuestData(id="q2"),
    ]
    assert find_missing_child_id(quests) is None


def test_no_quests():
    assert find_missing_child_id([]) is None


def test_missing_quest_id():
    assert find_missing_child_id([QuestData(id="q1"), QuestData()]) == "quests[1].id"


def test_whitespace_objective_id():
    quests = [QuestData(id="q1", objectives=[ObjectiveData(id="o1"), ObjectiveData(id=" ")])]
    assert find_missing_child_id(quests) == "quests[0].objectives[1].id"


def test_quest_id_checked_before_its_objectives():
    quests = [QuestData(id="", objectives=[ObjectiveData(id="")])]
    assert find_missing_child_id(quests) == "quests[0].id"
