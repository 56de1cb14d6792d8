from infrastructure.database.member_repository import SupabaseMemberRepository
from infrastructure.database.member_relation_repository import SupabaseMemberRelationRepository
from infrastructure.database.question_repository import SupabaseQuestionRepository
from infrastructure.database.question_set_repository import SupabaseQuestionSetRepository
from infrastructure.database.question_sheet_repository import SupabaseQuestionSheetRepository

__all__ = [
    "SupabaseMemberRepository",
    "SupabaseMemberRelationRepository",
    "SupabaseQuestionRepository",
    "SupabaseQuestionSetRepository",
    "SupabaseQuestionSheetRepository",
]
