"""
Supabase implementation of QuestionSheet repository.
"""

from typing import List, Set, Tuple
from core.domain.models import MemberId, QuestionSetId, QuestionSheet
from core.interfaces.repositories import IQuestionSheetRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

NATURAL_KEY = "question_set_id,question_id,resolver_id"


class SupabaseQuestionSheetRepository(IQuestionSheetRepository):
    """Supabase implementation of question sheet repository"""

    table = "question_sheets"

    def _to_model(self, data: dict) -> QuestionSheet:
        """Convert database row to QuestionSheet model"""
        return QuestionSheet(
            question_sheet_id=data["id"],
            question_set_id=data["question_set_id"],
            question_id=data["question_id"],
            resolver_id=data["resolver_id"],
            candidates=data.get("candidates") or [],
        )

    @run_sync
    def _find_all_sync(self, question_set_id: QuestionSetId, resolver_id: MemberId) -> List[dict]:
        response = get_supabase().table(self.table).select("*")\
            .eq("question_set_id", question_set_id)\
            .eq("resolver_id", resolver_id)\
            .execute()
        return response.data or []

    async def find_all_by_question_set_id_and_resolver_id(
        self,
        question_set_id: QuestionSetId,
        resolver_id: MemberId,
    ) -> List[QuestionSheet]:
        data = await self._find_all_sync(question_set_id, resolver_id)
        return [self._to_model(d) for d in data]

    @run_sync
    def _upsert_sync(self, rows: List[dict]) -> None:
        # Rows whose natural key already exists are ignored, not overwritten
        get_supabase().table(self.table)\
            .upsert(rows, on_conflict=NATURAL_KEY, ignore_duplicates=True)\
            .execute()

    async def save_all(self, sheets: List[QuestionSheet]) -> List[QuestionSheet]:
        if not sheets:
            return []

        rows = [
            {
                "id": sheet.question_sheet_id,
                "question_set_id": sheet.question_set_id,
                "question_id": sheet.question_id,
                "resolver_id": sheet.resolver_id,
                "candidates": list(sheet.candidates),
            }
            for sheet in sheets
        ]
        await self._upsert_sync(rows)

        # Read back the stored rows so callers see the surviving ids
        pairs: Set[Tuple[str, str]] = {(s.question_set_id, s.resolver_id) for s in sheets}
        wanted = {sheet.natural_key for sheet in sheets}
        stored: List[QuestionSheet] = []
        for question_set_id, resolver_id in pairs:
            for sheet in await self.find_all_by_question_set_id_and_resolver_id(question_set_id, resolver_id):
                if sheet.natural_key in wanted:
                    stored.append(sheet)
        return stored
