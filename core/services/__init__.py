from core.services.question_service import QuestionService
from core.services.member_relation_service import MemberRelationService
from core.services.question_sheet_service import QuestionSheetService
from core.services.scheduler_service import SchedulerService

__all__ = [
    "QuestionService",
    "MemberRelationService",
    "QuestionSheetService",
    "SchedulerService",
]
