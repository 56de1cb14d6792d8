"""
Supabase repositories against a mocked client: row mapping and query shape.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from core.domain.models import (
    MemberRelation, QuestionOrder, QuestionSet, QuestionSheet, QuestionType, RelationType,
)
from infrastructure.database import (
    SupabaseMemberRepository,
    SupabaseMemberRelationRepository,
    SupabaseQuestionRepository,
    SupabaseQuestionSetRepository,
    SupabaseQuestionSheetRepository,
)

BUILDER_METHODS = ("select", "eq", "in_", "lte", "gt", "order", "limit", "insert", "upsert")


def mock_client(data):
    """Client whose query builder chains back to itself and returns `data`."""
    query = MagicMock()
    for name in BUILDER_METHODS:
        getattr(query, name).return_value = query
    query.execute.return_value = MagicMock(data=data)

    client = MagicMock()
    client.table.return_value = query
    client.rpc.return_value = query
    return client, query


@pytest.fixture
def patch_client(monkeypatch):
    def _patch(module, data):
        client, query = mock_client(data)
        monkeypatch.setattr(f"infrastructure.database.{module}.get_supabase", lambda: client)
        return client, query
    return _patch


QUESTION_ROW = {
    "id": "q1",
    "content": "Who is the funniest?",
    "type": "FRIEND",
    "category": "HUMOR",
    "emoji_image_id": "joy",
}


class TestQuestionRepository:

    async def test_find_by_id_maps_row(self, patch_client):
        client, query = patch_client("question_repository", [QUESTION_ROW])

        question = await SupabaseQuestionRepository().find_by_id("q1")

        client.table.assert_called_with("questions")
        query.eq.assert_called_with("id", "q1")
        assert question.type == QuestionType.FRIEND
        assert question.emoji_image_id == "joy"

    async def test_find_by_id_missing(self, patch_client):
        patch_client("question_repository", [])
        assert await SupabaseQuestionRepository().find_by_id("q1") is None

    async def test_random_questions_use_rpc(self, patch_client):
        client, _ = patch_client("question_repository", [QUESTION_ROW])

        questions = await SupabaseQuestionRepository().find_random_questions(QuestionType.FRIEND, ["q9"], 7)

        client.rpc.assert_called_once_with("find_random_questions", {
            "p_type": "FRIEND",
            "p_excluded_ids": ["q9"],
            "p_limit": 7,
        })
        assert [q.id for q in questions] == ["q1"]

    async def test_random_questions_zero_limit_skips_query(self, patch_client):
        client, _ = patch_client("question_repository", [QUESTION_ROW])
        assert await SupabaseQuestionRepository().find_random_questions(QuestionType.FRIEND, [], 0) == []
        client.rpc.assert_not_called()

    async def test_ids_by_type_keep_input_order(self, patch_client):
        _, query = patch_client("question_repository", [{"id": "q1"}, {"id": "q3"}])

        ids = await SupabaseQuestionRepository().find_accompany_questions_by_ids(["q3", "q2", "q1"])

        query.eq.assert_called_with("type", "ACCOMPANY")
        assert ids == ["q3", "q1"]


class TestQuestionSetRepository:

    ROW = {
        "id": "s1",
        "question_ids": ["q2", "q1"],
        "published_at": "2026-10-16T21:00:00+00:00",
        "end_at": "2026-10-17T09:00:00+00:00",
    }

    async def test_array_index_is_order(self, patch_client):
        patch_client("question_set_repository", [self.ROW])

        question_set = await SupabaseQuestionSetRepository().find_by_id("s1")

        assert question_set.ordered_question_ids == ["q2", "q1"]
        assert question_set.published_at == datetime(2026, 10, 16, 21, 0, tzinfo=timezone.utc)

    async def test_save_stores_ordered_ids(self, patch_client):
        _, query = patch_client("question_set_repository", [self.ROW])
        question_set = QuestionSet(
            id="s1",
            question_ids=[QuestionOrder(question_id="q1", order=1), QuestionOrder(question_id="q2", order=0)],
            published_at=datetime(2026, 10, 16, 21, 0, tzinfo=timezone.utc),
            end_at=datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc),
        )

        await SupabaseQuestionSetRepository().save(question_set)

        row = query.insert.call_args.args[0]
        assert row["question_ids"] == ["q2", "q1"]

    async def test_operating_window_filters(self, patch_client):
        _, query = patch_client("question_set_repository", [self.ROW])
        now = datetime(2026, 10, 16, 22, 0, tzinfo=timezone.utc)

        assert (await SupabaseQuestionSetRepository().find_operating(now)).id == "s1"

        query.lte.assert_called_once_with("published_at", now.isoformat())
        query.gt.assert_called_once_with("end_at", now.isoformat())

    async def test_latest_published_orders_desc(self, patch_client):
        _, query = patch_client("question_set_repository", [])

        assert await SupabaseQuestionSetRepository().find_latest_published() is None
        query.order.assert_called_once_with("published_at", desc=True)


class TestQuestionSheetRepository:

    async def test_save_all_upserts_and_reads_back(self, patch_client):
        sheet = QuestionSheet.create("s1", "q1", "m0", ["m1"])
        stored_row = {
            "id": "existing-sheet",
            "question_set_id": "s1",
            "question_id": "q1",
            "resolver_id": "m0",
            "candidates": ["m2"],
        }
        other_row = dict(stored_row, id="other", question_id="q9")
        _, query = patch_client("question_sheet_repository", [stored_row, other_row])

        stored = await SupabaseQuestionSheetRepository().save_all([sheet])

        query.upsert.assert_called_once()
        assert query.upsert.call_args.kwargs == {
            "on_conflict": "question_set_id,question_id,resolver_id",
            "ignore_duplicates": True,
        }
        assert [s.question_sheet_id for s in stored] == ["existing-sheet"]
        assert stored[0].candidates == ["m2"]

    async def test_save_all_empty(self, patch_client):
        client, _ = patch_client("question_sheet_repository", [])
        assert await SupabaseQuestionSheetRepository().save_all([]) == []
        client.table.assert_not_called()


class TestMemberRelationRepository:

    ROW = {
        "id": "r1",
        "from_id": "m0",
        "to_id": "m1",
        "relation_type": "ACCOMPANY",
        "updated_at": "2026-10-16T10:00:00+00:00",
    }

    async def test_find_by_pair(self, patch_client):
        patch_client("member_relation_repository", [self.ROW])

        relation = await SupabaseMemberRelationRepository().find_by_from_id_and_to_id("m0", "m1")

        assert relation.relation == RelationType.ACCOMPANY
        assert not relation.is_friend

    async def test_save_upserts_on_pair(self, patch_client):
        _, query = patch_client("member_relation_repository", [dict(self.ROW, relation_type="FRIEND")])
        relation = MemberRelation.create("m0", "m1").update_to_friend()

        saved = await SupabaseMemberRelationRepository().save(relation)

        row = query.upsert.call_args.args[0]
        assert row["relation_type"] == "FRIEND"
        assert query.upsert.call_args.kwargs == {"on_conflict": "from_id,to_id"}
        assert saved.is_friend

    async def test_random_targets_use_rpc(self, patch_client):
        client, _ = patch_client("member_relation_repository", [{"to_id": "m3"}, {"to_id": "m4"}])

        targets = await SupabaseMemberRelationRepository().find_random_of_accompany("m0", 8)

        client.rpc.assert_called_once_with("find_random_relation_targets", {
            "p_from_id": "m0",
            "p_relation_type": "ACCOMPANY",
            "p_limit": 8,
        })
        assert targets == ["m3", "m4"]

    async def test_is_friend_false_without_rows(self, patch_client):
        patch_client("member_relation_repository", [])
        assert await SupabaseMemberRelationRepository().is_friend("m0", "m1") is False


class TestMemberRepository:

    async def test_get_all_ids(self, patch_client):
        client, _ = patch_client("member_repository", [{"id": "m0"}, {"id": "m1"}])

        assert await SupabaseMemberRepository().get_all_ids() == ["m0", "m1"]
        client.table.assert_called_with("members")
