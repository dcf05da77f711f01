import pytest
from pydantic import ValidationError

from nhltracker.models import PlayerRecord


def _mcdavid(**overrides) -> PlayerRecord:
    values = dict(name="Connor McDavid", team="Edmonton Oilers", goals=35, assists=60, plus_minus=25)
    values.update(overrides)
    return PlayerRecord(**values)


def test_player_record_is_frozen():
    record = _mcdavid()

    assert record.name == "Connor McDavid"
    assert record.points == 95

    with pytest.raises((TypeError, ValidationError)):
        record.goals = 40  # type: ignore[misc]


def test_points_follow_goals_and_assists():
    record = _mcdavid().with_stats(team="Edmonton Oilers", goals=40, assists=55, plus_minus=10)

    assert record.name == "Connor McDavid"
    assert record.points == 95
    assert record.model_dump()["points"] == 95


def test_negative_values_are_not_rejected_by_the_model():
    record = _mcdavid(goals=-1, plus_minus=-10)

    assert record.plus_minus == -10
    assert record.points == 59


def test_name_matching_ignores_case():
    record = _mcdavid()

    assert record.name_key == "connor mcdavid"
    assert record.matches_name("CONNOR MCDAVID")
    assert not record.matches_name("Connor")


def test_equality_compares_every_field():
    assert _mcdavid() == _mcdavid()
    assert _mcdavid() != _mcdavid(team="Oilers")
