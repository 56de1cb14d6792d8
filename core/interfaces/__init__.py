from core.interfaces.repositories import (
    IMemberRepository,
    IMemberRelationRepository,
    IQuestionRepository,
    IQuestionSetRepository,
    IQuestionSheetRepository,
)

__all__ = [
    # Repositories
    "IMemberRepository",
    "IMemberRelationRepository",
    "IQuestionRepository",
    "IQuestionSetRepository",
    "IQuestionSheetRepository",
]
