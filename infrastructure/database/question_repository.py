"""
Supabase implementation of Question repository (the question catalog).
"""

from typing import Optional, List
from core.domain.models import Question, QuestionCategory, QuestionId, QuestionType
from core.interfaces.repositories import IQuestionRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseQuestionRepository(IQuestionRepository):
    """Supabase implementation of question repository"""

    table = "questions"

    def _to_model(self, data: dict) -> Question:
        """Convert database row to Question model"""
        return Question(
            id=data["id"],
            content=data["content"],
            type=QuestionType(data["type"]),
            category=QuestionCategory(data.get("category") or QuestionCategory.OTHER.value),
            emoji_image_id=data.get("emoji_image_id") or "",
        )

    @run_sync
    def _save_sync(self, question: Question) -> dict:
        data = {
            "id": question.id,
            "content": question.content,
            "type": question.type.value,
            "category": question.category.value,
            "emoji_image_id": question.emoji_image_id,
        }
        response = get_supabase().table(self.table).insert(data).execute()
        return response.data[0]

    async def save(self, question: Question) -> Question:
        data = await self._save_sync(question)
        return self._to_model(data)

    @run_sync
    def _find_by_id_sync(self, question_id: QuestionId) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*").eq("id", question_id).execute()
        return response.data[0] if response.data else None

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        data = await self._find_by_id_sync(question_id)
        return self._to_model(data) if data else None

    @run_sync
    def _find_random_sync(self, type: QuestionType, excluded_ids: List[QuestionId], limit: int) -> List[dict]:
        response = get_supabase().rpc("find_random_questions", {
            "p_type": type.value,
            "p_excluded_ids": list(excluded_ids),
            "p_limit": limit,
        }).execute()
        return response.data or []

    async def find_random_questions(
        self,
        type: QuestionType,
        excluded_ids: List[QuestionId],
        limit: int,
    ) -> List[Question]:
        if limit <= 0:
            return []
        data = await self._find_random_sync(type, excluded_ids, limit)
        return [self._to_model(d) for d in data]

    @run_sync
    def _find_ids_of_type_sync(self, ids: List[QuestionId], type: QuestionType) -> List[str]:
        response = get_supabase().table(self.table).select("id")\
            .in_("id", list(ids))\
            .eq("type", type.value)\
            .execute()
        return [row["id"] for row in (response.data or [])]

    async def _find_ids_of_type(self, ids: List[QuestionId], type: QuestionType) -> List[QuestionId]:
        if not ids:
            return []
        found = set(await self._find_ids_of_type_sync(ids, type))
        # Keep the caller's order
        return [question_id for question_id in ids if question_id in found]

    async def find_friend_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        return await self._find_ids_of_type(ids, QuestionType.FRIEND)

    async def find_accompany_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        return await self._find_ids_of_type(ids, QuestionType.ACCOMPANY)
