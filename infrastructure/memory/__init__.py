from infrastructure.memory.repositories import (
    InMemoryMemberRepository,
    InMemoryMemberRelationRepository,
    InMemoryQuestionRepository,
    InMemoryQuestionSetRepository,
    InMemoryQuestionSheetRepository,
)

__all__ = [
    "InMemoryMemberRepository",
    "InMemoryMemberRelationRepository",
    "InMemoryQuestionRepository",
    "InMemoryQuestionSetRepository",
    "InMemoryQuestionSheetRepository",
]
