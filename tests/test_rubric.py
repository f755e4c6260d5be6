# tests/test_rubric.py

"""
Rubric Tests - total lookups and JSON override loading
"""

import json
from decimal import Decimal

import pytest

from ospa.core.exceptions import RubricConfigurationException
from ospa.models.candidate import AdviserCandidate, LeadershipEntry
from ospa.models.enumerations import (
    AcademicRank,
    Level,
    NominationType,
    Position,
    Rank,
)
from ospa.scoring.adviser_calculator import AdviserCalculator
from ospa.scoring.rubric import (
    DEFAULT_ADVISER_RUBRIC,
    DEFAULT_JOURNALIST_RUBRIC,
    AdviserRubric,
    JournalistRubric,
    achievement_points,
    flat_points,
    load_rubric,
    position_points,
    rank_points,
)


class TestLookups:

    def test_national_table_goes_to_seventh(self):
        individual = DEFAULT_ADVISER_RUBRIC.individual
        assert achievement_points(individual, Level.NATIONAL, Rank.FIRST) == 20
        assert achievement_points(individual, Level.NATIONAL, Rank.SEVENTH) == 14

    def test_regional_fourth_is_unmapped(self):
        assert achievement_points(DEFAULT_ADVISER_RUBRIC.group, Level.REGIONAL, Rank.FOURTH) == 0

    def test_unmapped_level_is_zero(self):
        assert achievement_points(DEFAULT_ADVISER_RUBRIC.individual, Level.SCHOOL, Rank.FIRST) == 0
        assert position_points(DEFAULT_ADVISER_RUBRIC.leadership.levels, Level.DISTRICT, Position.PRESIDENT) == 0
        assert rank_points(DEFAULT_JOURNALIST_RUBRIC.individual, Level.DISTRICT, Rank.FIRST) == 0

    def test_level_weights(self):
        publication = DEFAULT_ADVISER_RUBRIC.publication
        assert publication.levels[Level.NATIONAL].weight == Decimal("0.06")
        assert publication.levels[Level.REGIONAL].weight == Decimal("0.03")
        assert publication.levels[Level.DIVISION].weight == Decimal("0.02")

    def test_flat_points_none_key(self):
        assert flat_points(DEFAULT_JOURNALIST_RUBRIC.pub_position, None) == 0
        assert flat_points(DEFAULT_JOURNALIST_RUBRIC.academic_rank, AcademicRank.NONE) == 0
        assert flat_points(DEFAULT_JOURNALIST_RUBRIC.academic_rank, AcademicRank.HIGHEST) == 10

    def test_rubrics_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_ADVISER_RUBRIC.leadership.weight = Decimal("1")


class TestLoadRubric:

    def test_override_weight_is_used(self, tmp_path):
        raw = DEFAULT_ADVISER_RUBRIC.model_dump(mode="json")
        raw["leadership"]["weight"] = 0.2
        path = tmp_path / "adviser.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        rubric = load_rubric(path, NominationType.ADVISER)

        assert isinstance(rubric, AdviserRubric)
        assert rubric.leadership.weight == Decimal("0.2")
        record = AdviserCandidate(leadership=[
            LeadershipEntry(level=Level.DIVISION, position=Position.PRESIDENT)
        ])
        assert AdviserCalculator(rubric).calculate(record).leadership == Decimal("3.0")

    def test_floats_parse_exactly(self, tmp_path):
        path = tmp_path / "adviser.json"
        raw = DEFAULT_ADVISER_RUBRIC.model_dump(mode="json")
        raw["extension"]["weight"] = 0.13
        path.write_text(json.dumps(raw), encoding="utf-8")

        rubric = load_rubric(str(path), NominationType.ADVISER)
        assert rubric.extension.weight == Decimal("0.13")

    def test_journalist_rubric_round_trips(self, tmp_path):
        path = tmp_path / "journalist.json"
        path.write_text(DEFAULT_JOURNALIST_RUBRIC.model_dump_json(), encoding="utf-8")

        rubric = load_rubric(path, NominationType.JOURNALIST)
        assert isinstance(rubric, JournalistRubric)
        assert rubric == DEFAULT_JOURNALIST_RUBRIC

    def test_missing_file(self, tmp_path):
        with pytest.raises(RubricConfigurationException) as exc:
            load_rubric(tmp_path / "nope.json", NominationType.ADVISER)
        assert "nope.json" in exc.value.path

    def test_not_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ weights: ", encoding="utf-8")
        with pytest.raises(RubricConfigurationException) as exc:
            load_rubric(path, NominationType.JOURNALIST)
        assert "not valid JSON" in exc.value.reason

    def test_negative_points_are_rejected(self, tmp_path):
        raw = DEFAULT_ADVISER_RUBRIC.model_dump(mode="json")
        raw["extension"]["points"]["National"] = -10
        path = tmp_path / "adviser.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        with pytest.raises(RubricConfigurationException):
            load_rubric(path, NominationType.ADVISER)

    def test_negative_weight_is_rejected(self, tmp_path):
        raw = DEFAULT_ADVISER_RUBRIC.model_dump(mode="json")
        raw["leadership"]["weight"] = -0.13
        path = tmp_path / "adviser.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        with pytest.raises(RubricConfigurationException):
            load_rubric(path, NominationType.ADVISER)

    def test_negative_journalist_points_are_rejected(self, tmp_path):
        raw = DEFAULT_JOURNALIST_RUBRIC.model_dump(mode="json")
        raw["guild_leadership"]["Division"]["President"] = -15
        path = tmp_path / "journalist.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        with pytest.raises(RubricConfigurationException):
            load_rubric(path, NominationType.JOURNALIST)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"individual": 1}), encoding="utf-8")
        with pytest.raises(RubricConfigurationException):
            load_rubric(path, NominationType.ADVISER)
