"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory, etc.)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from core.domain.models import (
    Member, MemberId,
    MemberRelation,
    Question, QuestionId, QuestionType,
    QuestionSet, QuestionSetId,
    QuestionSheet,
)


class IMemberRepository(ABC):
    """Interface for member lookups"""

    @abstractmethod
    async def get_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Get member by ID"""
        pass

    @abstractmethod
    async def get_all_ids(self) -> List[MemberId]:
        """Get ids of every registered member"""
        pass


class IMemberRelationRepository(ABC):
    """Interface for directed member relations. One row per (from_id, to_id)."""

    @abstractmethod
    async def find_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        """Targets of every outgoing relation, any type"""
        pass

    @abstractmethod
    async def find_friends_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        """Targets of outgoing FRIEND relations"""
        pass

    @abstractmethod
    async def find_accompany_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        """Targets of outgoing ACCOMPANY relations"""
        pass

    @abstractmethod
    async def is_friend(self, from_id: MemberId, to_id: MemberId) -> bool:
        """Check if from_id -> to_id is a FRIEND relation"""
        pass

    @abstractmethod
    async def find_random_of_friend(self, member_id: MemberId, limit: int) -> List[MemberId]:
        """Up to `limit` FRIEND targets chosen uniformly at random"""
        pass

    @abstractmethod
    async def find_random_of_accompany(self, member_id: MemberId, limit: int) -> List[MemberId]:
        """Up to `limit` ACCOMPANY targets chosen uniformly at random"""
        pass

    @abstractmethod
    async def find_by_from_id_and_to_id(self, from_id: MemberId, to_id: MemberId) -> Optional[MemberRelation]:
        """Get the relation for an ordered pair"""
        pass

    @abstractmethod
    async def save(self, relation: MemberRelation) -> MemberRelation:
        """Insert or update a relation"""
        pass


class IQuestionRepository(ABC):
    """Interface for the question catalog"""

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Store a new question"""
        pass

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Get question by ID"""
        pass

    @abstractmethod
    async def find_random_questions(
        self,
        type: QuestionType,
        excluded_ids: List[QuestionId],
        limit: int,
    ) -> List[Question]:
        """Up to `limit` random questions of a type, without the excluded ids"""
        pass

    @abstractmethod
    async def find_friend_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        """Subset of `ids` that are FRIEND questions, in input order"""
        pass

    @abstractmethod
    async def find_accompany_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        """Subset of `ids` that are ACCOMPANY questions, in input order"""
        pass


class IQuestionSetRepository(ABC):
    """Interface for question set data access"""

    @abstractmethod
    async def save(self, question_set: QuestionSet) -> QuestionSet:
        """Store a question set. published_at is unique."""
        pass

    @abstractmethod
    async def find_by_id(self, question_set_id: QuestionSetId) -> Optional[QuestionSet]:
        """Get question set by ID"""
        pass

    @abstractmethod
    async def find_operating(self, now: datetime) -> Optional[QuestionSet]:
        """Set with published_at <= now < end_at"""
        pass

    @abstractmethod
    async def find_first_upcoming(self, now: datetime) -> Optional[QuestionSet]:
        """Set with the earliest published_at > now"""
        pass

    @abstractmethod
    async def find_latest_published(self) -> Optional[QuestionSet]:
        """Set with the greatest published_at"""
        pass


class IQuestionSheetRepository(ABC):
    """Interface for question sheet data access"""

    @abstractmethod
    async def find_all_by_question_set_id_and_resolver_id(
        self,
        question_set_id: QuestionSetId,
        resolver_id: MemberId,
    ) -> List[QuestionSheet]:
        """Sheets of one resolver for one set"""
        pass

    @abstractmethod
    async def save_all(self, sheets: List[QuestionSheet]) -> List[QuestionSheet]:
        """
        Upsert on (question_set_id, question_id, resolver_id).
        An existing row for a key is kept, so repeated saves never duplicate.
        """
        pass
