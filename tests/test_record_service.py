# tests/test_record_service.py

"""
Record Service Tests - add/remove entries, scalar fields, ratings,
interview scores, reset, and mode exclusivity
"""

import pytest
from pydantic import ValidationError

from ospa.core.exceptions import CategoryNotApplicableException
from ospa.models.candidate import AdviserCandidate, JournalistCandidate
from ospa.models.commands import (
    AddEntry,
    RemoveEntry,
    ResetRecord,
    SetField,
    SetInterviewScore,
    UpdateRating,
)
from ospa.models.enumerations import AcademicRank, Category, InterviewCriterion, Level
from ospa.services.record_service import apply_command


class TestEntries:

    def test_add_entry_appends_with_fresh_id(self, adviser_record):
        command = AddEntry(
            category=Category.INDIVIDUAL_CONTESTS,
            entry={"id": "clientid", "level": "Regional", "rank": "2nd", "year": "2023"},
        )
        updated = apply_command(adviser_record, command)

        assert len(updated.individual_contests) == 2
        added = updated.individual_contests[-1]
        assert added.level == Level.REGIONAL
        assert added.id != "clientid"
        assert len(added.id) == 9

    def test_add_entry_leaves_input_untouched(self, adviser_record):
        apply_command(
            adviser_record,
            AddEntry(category=Category.INNOVATIONS, entry={"level": "District"}),
        )
        assert adviser_record.innovations == []

    def test_add_invalid_entry_is_rejected(self, adviser_record):
        command = AddEntry(
            category=Category.INDIVIDUAL_CONTESTS,
            entry={"level": "National", "rank": "9th"},
        )
        with pytest.raises(ValidationError):
            apply_command(adviser_record, command)

    def test_remove_entry_by_id(self, adviser_record):
        target = adviser_record.leadership[0]
        updated = apply_command(
            adviser_record,
            RemoveEntry(category=Category.LEADERSHIP, entry_id=target.id),
        )
        assert [e.id for e in updated.leadership] == [adviser_record.leadership[1].id]

    def test_remove_unknown_id_is_a_no_op(self, adviser_record):
        updated = apply_command(
            adviser_record,
            RemoveEntry(category=Category.LEADERSHIP, entry_id="missing"),
        )
        assert updated.model_dump() == adviser_record.model_dump()


class TestModeExclusivity:

    @pytest.mark.parametrize(
        "category",
        [Category.GUILD_LEADERSHIP, Category.PUBLISHED_WORKS, Category.TRAININGS_ATTENDED],
    )
    def test_journalist_categories_rejected_for_adviser(self, adviser_record, category):
        with pytest.raises(CategoryNotApplicableException):
            apply_command(adviser_record, AddEntry(category=category, entry={"level": "National"}))

    @pytest.mark.parametrize(
        "category",
        [Category.LEADERSHIP, Category.INNOVATIONS, Category.SPEAKERSHIP,
         Category.PUBLISHED_BOOKS, Category.PUBLISHED_ARTICLES],
    )
    def test_adviser_categories_rejected_for_journalist(self, journalist_record, category):
        with pytest.raises(CategoryNotApplicableException):
            apply_command(journalist_record, AddEntry(category=category, entry={"level": "National"}))

    def test_academic_rank_is_journalist_only(self, adviser_record):
        with pytest.raises(CategoryNotApplicableException):
            apply_command(adviser_record, SetField(field="academic_rank", value="With Honors"))

    def test_ratings_are_adviser_only(self, journalist_record):
        with pytest.raises(CategoryNotApplicableException):
            apply_command(journalist_record, UpdateRating(year="2024-2025", score=5.0))


class TestScalarFields:

    def test_set_division(self, journalist_record):
        updated = apply_command(journalist_record, SetField(field="division", value="Quezon City"))
        assert updated.division == "Quezon City"
        assert journalist_record.division == "Manila"

    def test_unknown_division_is_rejected(self, journalist_record):
        with pytest.raises(ValidationError):
            apply_command(journalist_record, SetField(field="division", value="Cebu"))

    def test_set_academic_rank(self, journalist_record):
        updated = apply_command(
            journalist_record, SetField(field="academic_rank", value="With High Honors")
        )
        assert updated.academic_rank == AcademicRank.HIGH

    def test_list_fields_are_not_scalar(self, adviser_record):
        with pytest.raises(CategoryNotApplicableException):
            apply_command(adviser_record, SetField(field="leadership", value=[]))

    def test_set_mov_file(self, journalist_record, sample_mov):
        updated = apply_command(
            journalist_record,
            SetField(field="mov_file", value=sample_mov.model_dump(by_alias=True)),
        )
        assert updated.mov_file == sample_mov


class TestRatingsAndInterview:

    def test_update_rating_by_year(self, adviser_record):
        updated = apply_command(adviser_record, UpdateRating(year="2022-2023", score=4.8))
        scores = {r.year: r.score for r in updated.performance_ratings}
        assert scores["2022-2023"] == 4.8
        assert scores["2024-2025"] == 4.0
        assert len(updated.performance_ratings) == 5

    def test_update_rating_out_of_range(self):
        with pytest.raises(ValidationError):
            UpdateRating(year="2022-2023", score=5.5)

    def test_set_interview_score(self, journalist_record):
        updated = apply_command(
            journalist_record,
            SetInterviewScore(criterion=InterviewCriterion.ENGAGEMENT, score=0.7),
        )
        assert updated.interview.engagement == 0.7
        assert updated.interview.principles == 0.0

    def test_interview_score_out_of_range(self):
        with pytest.raises(ValidationError):
            SetInterviewScore(criterion=InterviewCriterion.COMMITMENT, score=1.5)


class TestReset:

    def test_reset_keeps_mode_and_clears_everything(self, adviser_record):
        updated = apply_command(adviser_record, ResetRecord())
        assert isinstance(updated, AdviserCandidate)
        assert updated == AdviserCandidate()

    def test_reset_journalist(self, journalist_record):
        updated = apply_command(journalist_record, ResetRecord())
        assert updated == JournalistCandidate()
