"""
Tests for question sheet fan-out and storage.
"""

import logging
from datetime import datetime, timezone

import pytest

from core.domain.models import QuestionOrder, QuestionSet, RelationType


PUBLISHED_AT = datetime(2026, 10, 16, 21, 0, tzinfo=timezone.utc)
END_AT = datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc)

# interleaved on purpose: fan-out groups by type
SET_ORDER = ["a0", "f0", "f1", "a1", "f2", "f3", "a2", "f4", "a3", "f5", "f6", "a4"]


def make_set(question_ids=SET_ORDER):
    orders = [QuestionOrder(question_id=qid, order=i) for i, qid in enumerate(question_ids)]
    return QuestionSet.create(orders, PUBLISHED_AT, END_AT)


@pytest.fixture
async def related(members, member_relation_service):
    """m0 befriended m1, m2; knows m3, m4, m5"""
    for to_id in ("m1", "m2"):
        await member_relation_service.create_relation("m0", to_id, RelationType.FRIEND)
    for to_id in ("m3", "m4", "m5"):
        await member_relation_service.create_relation("m0", to_id)
    return members


class TestCreateQuestionSheetsForMember:

    async def test_one_sheet_per_question_friend_first(self, question_service):
        question_set = make_set()
        sheets = await question_service.create_question_sheets_for_member(
            question_set, ["m1", "m2"], ["m3", "m4"], "m0"
        )

        assert len(sheets) == 12
        assert [s.question_id for s in sheets] == [
            "f0", "f1", "f2", "f3", "f4", "f5", "f6",
            "a0", "a1", "a2", "a3", "a4",
        ]
        assert all(s.candidates == ["m1", "m2"] for s in sheets[:7])
        assert all(s.candidates == ["m3", "m4"] for s in sheets[7:])
        assert all(s.resolver_id == "m0" and s.question_set_id == question_set.id for s in sheets)

    async def test_resolver_removed_from_candidates(self, question_service):
        sheets = await question_service.create_question_sheets_for_member(
            make_set(), ["m0", "m1"], ["m3", "m0"], "m0"
        )
        assert all("m0" not in s.candidates for s in sheets)

    async def test_empty_pools_still_give_sheets(self, question_service):
        sheets = await question_service.create_question_sheets_for_member(make_set(), [], [], "m0")
        assert len(sheets) == 12
        assert all(s.candidates == [] for s in sheets)

    async def test_unknown_questions_are_skipped(self, question_service, caplog):
        question_set = make_set(["f0", "ghost", "a0"])
        with caplog.at_level(logging.WARNING):
            sheets = await question_service.create_question_sheets_for_member(
                question_set, ["m1"], ["m3"], "m0"
            )
        assert [s.question_id for s in sheets] == ["f0", "a0"]
        assert "not found in catalog" in caplog.text

    async def test_nothing_is_stored(self, question_service, question_sheet_repo):
        await question_service.create_question_sheets_for_member(make_set(), ["m1"], ["m3"], "m0")
        assert question_sheet_repo.sheets == {}


class TestSaveQuestionSheets:

    async def test_empty_input(self, question_service):
        assert await question_service.save_question_sheets([]) == []

    async def test_save_is_idempotent(self, question_service, question_sheet_repo):
        question_set = make_set()
        first = await question_service.create_question_sheets_for_member(question_set, ["m1"], ["m3"], "m0")
        await question_service.save_question_sheets(first)

        again = await question_service.create_question_sheets_for_member(question_set, ["m2"], ["m4"], "m0")
        stored = await question_service.save_question_sheets(again)

        assert len(question_sheet_repo.sheets) == 12
        assert {s.question_sheet_id for s in stored} == {s.question_sheet_id for s in first}

        read_back = await question_service.get_question_sheets("m0", question_set.id)
        assert len(read_back) == 12


class TestGenerateSheets:

    async def test_generate_for_member_uses_relations(self, question_sheet_service, related):
        sheets = await question_sheet_service.generate_sheets_for_member(make_set(), "m0")

        assert len(sheets) == 12
        friend_sheets = [s for s in sheets if s.question_id.startswith("f")]
        accompany_sheets = [s for s in sheets if s.question_id.startswith("a")]
        assert all(set(s.candidates) == {"m1", "m2"} for s in friend_sheets)
        assert all(set(s.candidates) == {"m3", "m4", "m5"} for s in accompany_sheets)

    async def test_generate_twice_returns_existing(self, question_sheet_service, question_sheet_repo, related):
        question_set = make_set()
        first = await question_sheet_service.generate_sheets_for_member(question_set, "m0")
        second = await question_sheet_service.generate_sheets_for_member(question_set, "m0")

        assert len(question_sheet_repo.sheets) == 12
        assert {s.question_sheet_id for s in first} == {s.question_sheet_id for s in second}

    async def test_candidate_limit(self, question_sheet_service, member_relation_service, members):
        question_sheet_service.accompany_candidate_limit = 2
        for to_id in ("m1", "m2", "m3", "m4", "m5"):
            await member_relation_service.create_relation("m0", to_id)

        sheets = await question_sheet_service.generate_sheets_for_member(make_set(), "m0")
        accompany_sheets = [s for s in sheets if s.question_id.startswith("a")]
        assert all(len(s.candidates) == 2 for s in accompany_sheets)

    async def test_generate_for_all_members(self, question_sheet_service, question_sheet_repo, related):
        question_set = make_set()
        await question_sheet_service.generate_sheets_for_member(question_set, "m0")

        created = await question_sheet_service.generate_sheets_for_all_members(question_set)

        # m0 already had sheets
        assert created == 5
        assert len(question_sheet_repo.sheets) == 6 * 12
        assert await question_sheet_service.generate_sheets_for_all_members(question_set) == 0

    async def test_storage_failure_for_one_member_does_not_stop_others(
        self, question_sheet_service, question_sheet_repo, related, monkeypatch, caplog
    ):
        save_all = question_sheet_repo.save_all
        calls = []

        async def flaky_save_all(sheets):
            calls.append(sheets[0].resolver_id)
            if len(calls) == 1:
                raise ConnectionError(f"storage unavailable for {sheets[0].resolver_id}")
            return await save_all(sheets)

        monkeypatch.setattr(question_sheet_repo, "save_all", flaky_save_all)
        question_set = make_set()

        with caplog.at_level(logging.ERROR):
            created = await question_sheet_service.generate_sheets_for_all_members(question_set)

        assert created == 5
        assert len(question_sheet_repo.sheets) == 5 * 12
        assert f"Failed to create sheets for {calls[0]}" in caplog.text
