"""
Domain models - the core of business logic.
These models are storage-agnostic (work with Supabase, in-memory, etc.)
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List, Tuple
from datetime import datetime, timezone
from uuid import uuid4
from enum import Enum


# === IDENTIFIERS ===
# Opaque string ids, compared by value

MemberId = str
QuestionId = str
QuestionSetId = str
QuestionSheetId = str
MemberRelationId = str
ImageId = str


def new_id() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# === ENUMS ===

class QuestionType(str, Enum):
    """Which relation pool answers a question"""
    FRIEND = "FRIEND"
    ACCOMPANY = "ACCOMPANY"


class RelationType(str, Enum):
    FRIEND = "FRIEND"
    ACCOMPANY = "ACCOMPANY"


class QuestionCategory(str, Enum):
    DATING = "DATING"
    FRIENDSHIP = "FRIENDSHIP"
    PERSONALITY = "PERSONALITY"
    ENTERTAINMENT = "ENTERTAINMENT"
    FITNESS = "FITNESS"
    APPEARANCE = "APPEARANCE"
    WORK = "WORK"
    HUMOR = "HUMOR"
    OTHER = "OTHER"


class PublishStatus(str, Enum):
    UPCOMING = "UPCOMING"
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"


# === MEMBER ===

class Member(BaseModel):
    """Minimal member record - profile data lives elsewhere"""
    model_config = ConfigDict(from_attributes=True)

    id: MemberId
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None


# === QUESTION ===

class Question(BaseModel):
    """Catalog question. Never mutated after creation."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: QuestionId
    content: str
    type: QuestionType
    category: QuestionCategory
    emoji_image_id: ImageId

    @classmethod
    def create(
        cls,
        content: str,
        type: QuestionType,
        category: QuestionCategory,
        emoji_image_id: ImageId,
    ) -> "Question":
        return cls(
            id=new_id(),
            content=content,
            type=type,
            category=category,
            emoji_image_id=emoji_image_id,
        )


# === QUESTION SET ===

class QuestionOrder(BaseModel):
    """Position of a question inside a set (0-based)"""
    model_config = ConfigDict(frozen=True)

    question_id: QuestionId
    order: int = Field(ge=0)


class QuestionSet(BaseModel):
    """
    One scheduled batch of questions published over [published_at, end_at).
    Status is derived from the clock, never stored.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: QuestionSetId
    question_ids: List[QuestionOrder]
    published_at: datetime
    end_at: datetime

    @model_validator(mode="after")
    def check_invariants(self):
        if self.end_at <= self.published_at:
            raise ValueError("end_at must be later than published_at")

        ids = [q.question_id for q in self.question_ids]
        if len(set(ids)) != len(ids):
            raise ValueError("question set contains duplicate question ids")

        orders = sorted(q.order for q in self.question_ids)
        if orders != list(range(len(orders))):
            raise ValueError("question orders must be contiguous and unique, starting at 0")
        return self

    @classmethod
    def create(
        cls,
        question_orders: List[QuestionOrder],
        published_at: datetime,
        end_at: datetime,
    ) -> "QuestionSet":
        return cls(
            id=new_id(),
            question_ids=question_orders,
            published_at=published_at,
            end_at=end_at,
        )

    @property
    def ordered_question_ids(self) -> List[QuestionId]:
        return [q.question_id for q in sorted(self.question_ids, key=lambda q: q.order)]

    def status_at(self, now: datetime) -> PublishStatus:
        if now < self.published_at:
            return PublishStatus.UPCOMING
        if now < self.end_at:
            return PublishStatus.ACTIVE
        return PublishStatus.TERMINATED

    @property
    def status(self) -> PublishStatus:
        return self.status_at(utc_now())


# === QUESTION SHEET ===

class QuestionSheet(BaseModel):
    """One question of a set assigned to one resolver, with its candidates"""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    question_sheet_id: QuestionSheetId
    question_set_id: QuestionSetId
    question_id: QuestionId
    resolver_id: MemberId
    candidates: List[MemberId] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_resolver_not_candidate(self):
        if self.resolver_id in self.candidates:
            raise ValueError("resolver cannot be one of the candidates")
        return self

    @classmethod
    def create(
        cls,
        question_set_id: QuestionSetId,
        question_id: QuestionId,
        resolver_id: MemberId,
        candidates: List[MemberId],
    ) -> "QuestionSheet":
        return cls(
            question_sheet_id=new_id(),
            question_set_id=question_set_id,
            question_id=question_id,
            resolver_id=resolver_id,
            candidates=list(candidates),
        )

    @property
    def natural_key(self) -> Tuple[QuestionSetId, QuestionId, MemberId]:
        return self.question_set_id, self.question_id, self.resolver_id


# === MEMBER RELATION ===

class MemberRelation(BaseModel):
    """Directed edge from_id -> to_id. FRIEND never demotes."""
    model_config = ConfigDict(from_attributes=True)

    id: MemberRelationId
    from_id: MemberId
    to_id: MemberId
    relation: RelationType
    last_updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        from_id: MemberId,
        to_id: MemberId,
        relation: RelationType = RelationType.ACCOMPANY,
    ) -> "MemberRelation":
        if from_id == to_id:
            raise ValueError("a member cannot relate to itself")
        return cls(
            id=new_id(),
            from_id=from_id,
            to_id=to_id,
            relation=relation,
            last_updated_at=utc_now(),
        )

    @property
    def is_friend(self) -> bool:
        return self.relation == RelationType.FRIEND

    def update_to_friend(self) -> "MemberRelation":
        return self.model_copy(update={
            "relation": RelationType.FRIEND,
            "last_updated_at": utc_now(),
        })
