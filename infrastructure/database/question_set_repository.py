"""
Supabase implementation of QuestionSet repository.
Question ids are stored as an ordered array; order is the array index.
"""

from datetime import datetime
from typing import Optional
from core.domain.models import QuestionOrder, QuestionSet, QuestionSetId
from core.interfaces.repositories import IQuestionSetRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseQuestionSetRepository(IQuestionSetRepository):
    """Supabase implementation of question set repository"""

    table = "question_sets"

    def _to_model(self, data: dict) -> QuestionSet:
        """Convert database row to QuestionSet model"""
        return QuestionSet(
            id=data["id"],
            question_ids=[
                QuestionOrder(question_id=question_id, order=index)
                for index, question_id in enumerate(data.get("question_ids") or [])
            ],
            published_at=data["published_at"],
            end_at=data["end_at"],
        )

    @run_sync
    def _save_sync(self, question_set: QuestionSet) -> dict:
        data = {
            "id": question_set.id,
            "question_ids": question_set.ordered_question_ids,
            "published_at": question_set.published_at.isoformat(),
            "end_at": question_set.end_at.isoformat(),
        }
        # published_at is unique: a second set for the same window fails here
        response = get_supabase().table(self.table).insert(data).execute()
        return response.data[0]

    async def save(self, question_set: QuestionSet) -> QuestionSet:
        data = await self._save_sync(question_set)
        return self._to_model(data)

    @run_sync
    def _find_by_id_sync(self, question_set_id: QuestionSetId) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*").eq("id", question_set_id).execute()
        return response.data[0] if response.data else None

    async def find_by_id(self, question_set_id: QuestionSetId) -> Optional[QuestionSet]:
        data = await self._find_by_id_sync(question_set_id)
        return self._to_model(data) if data else None

    @run_sync
    def _find_operating_sync(self, now_iso: str) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*")\
            .lte("published_at", now_iso)\
            .gt("end_at", now_iso)\
            .order("published_at")\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def find_operating(self, now: datetime) -> Optional[QuestionSet]:
        data = await self._find_operating_sync(now.isoformat())
        return self._to_model(data) if data else None

    @run_sync
    def _find_first_upcoming_sync(self, now_iso: str) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*")\
            .gt("published_at", now_iso)\
            .order("published_at")\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def find_first_upcoming(self, now: datetime) -> Optional[QuestionSet]:
        data = await self._find_first_upcoming_sync(now.isoformat())
        return self._to_model(data) if data else None

    @run_sync
    def _find_latest_published_sync(self) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*")\
            .order("published_at", desc=True)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def find_latest_published(self) -> Optional[QuestionSet]:
        data = await self._find_latest_published_sync()
        return self._to_model(data) if data else None
