"""
In-memory repositories - same contracts as the Supabase ones, kept in dicts.
Used for local runs and tests. Random sampling takes an injectable Random.
"""

import random
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from core.domain.models import (
    Member, MemberId,
    MemberRelation, RelationType,
    Question, QuestionId, QuestionType,
    QuestionSet, QuestionSetId,
    QuestionSheet,
)
from core.interfaces.repositories import (
    IMemberRepository,
    IMemberRelationRepository,
    IQuestionRepository,
    IQuestionSetRepository,
    IQuestionSheetRepository,
)


class InMemoryMemberRepository(IMemberRepository):

    def __init__(self, members: Optional[List[Member]] = None):
        self.members: Dict[MemberId, Member] = {m.id: m for m in members or []}

    def add(self, member: Member) -> Member:
        self.members[member.id] = member
        return member

    async def get_by_id(self, member_id: MemberId) -> Optional[Member]:
        return self.members.get(member_id)

    async def get_all_ids(self) -> List[MemberId]:
        return list(self.members)


class InMemoryMemberRelationRepository(IMemberRelationRepository):

    def __init__(self, rng: Optional[random.Random] = None):
        self.relations: Dict[Tuple[MemberId, MemberId], MemberRelation] = {}
        self.rng = rng or random.Random()

    def _targets(self, from_id: MemberId, relation: Optional[RelationType] = None) -> List[MemberId]:
        return [
            r.to_id for (src, _), r in self.relations.items()
            if src == from_id and (relation is None or r.relation == relation)
        ]

    async def find_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return self._targets(from_id)

    async def find_friends_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return self._targets(from_id, RelationType.FRIEND)

    async def find_accompany_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return self._targets(from_id, RelationType.ACCOMPANY)

    async def is_friend(self, from_id: MemberId, to_id: MemberId) -> bool:
        relation = self.relations.get((from_id, to_id))
        return relation is not None and relation.is_friend

    def _sample(self, pool: List[MemberId], limit: int) -> List[MemberId]:
        return self.rng.sample(pool, min(limit, len(pool)))

    async def find_random_of_friend(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return self._sample(self._targets(member_id, RelationType.FRIEND), limit)

    async def find_random_of_accompany(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return self._sample(self._targets(member_id, RelationType.ACCOMPANY), limit)

    async def find_by_from_id_and_to_id(self, from_id: MemberId, to_id: MemberId) -> Optional[MemberRelation]:
        return self.relations.get((from_id, to_id))

    async def save(self, relation: MemberRelation) -> MemberRelation:
        # (from_id, to_id) is the key: saving a pair again replaces its row
        self.relations[(relation.from_id, relation.to_id)] = relation
        return relation


class InMemoryQuestionRepository(IQuestionRepository):

    def __init__(self, rng: Optional[random.Random] = None):
        self.questions: Dict[QuestionId, Question] = {}
        self.rng = rng or random.Random()

    async def save(self, question: Question) -> Question:
        self.questions[question.id] = question
        return question

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self.questions.get(question_id)

    async def find_random_questions(
        self,
        type: QuestionType,
        excluded_ids: List[QuestionId],
        limit: int,
    ) -> List[Question]:
        excluded = set(excluded_ids)
        pool = [q for q in self.questions.values() if q.type == type and q.id not in excluded]
        return self.rng.sample(pool, min(max(limit, 0), len(pool)))

    def _ids_of_type(self, ids: List[QuestionId], type: QuestionType) -> List[QuestionId]:
        return [i for i in ids if i in self.questions and self.questions[i].type == type]

    async def find_friend_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        return self._ids_of_type(ids, QuestionType.FRIEND)

    async def find_accompany_questions_by_ids(self, ids: List[QuestionId]) -> List[QuestionId]:
        return self._ids_of_type(ids, QuestionType.ACCOMPANY)


class InMemoryQuestionSetRepository(IQuestionSetRepository):

    def __init__(self):
        self.question_sets: Dict[QuestionSetId, QuestionSet] = {}

    async def save(self, question_set: QuestionSet) -> QuestionSet:
        for existing in self.question_sets.values():
            if existing.id != question_set.id and existing.published_at == question_set.published_at:
                raise ValueError(f"question set already published at {question_set.published_at.isoformat()}")
        self.question_sets[question_set.id] = question_set
        return question_set

    async def find_by_id(self, question_set_id: QuestionSetId) -> Optional[QuestionSet]:
        return self.question_sets.get(question_set_id)

    def _sorted(self) -> List[QuestionSet]:
        return sorted(self.question_sets.values(), key=lambda s: s.published_at)

    async def find_operating(self, now: datetime) -> Optional[QuestionSet]:
        return next((s for s in self._sorted() if s.published_at <= now < s.end_at), None)

    async def find_first_upcoming(self, now: datetime) -> Optional[QuestionSet]:
        return next((s for s in self._sorted() if s.published_at > now), None)

    async def find_latest_published(self) -> Optional[QuestionSet]:
        ordered = self._sorted()
        return ordered[-1] if ordered else None


class InMemoryQuestionSheetRepository(IQuestionSheetRepository):

    def __init__(self):
        self.sheets: Dict[Tuple[QuestionSetId, QuestionId, MemberId], QuestionSheet] = {}

    async def find_all_by_question_set_id_and_resolver_id(
        self,
        question_set_id: QuestionSetId,
        resolver_id: MemberId,
    ) -> List[QuestionSheet]:
        return [
            s for s in self.sheets.values()
            if s.question_set_id == question_set_id and s.resolver_id == resolver_id
        ]

    async def save_all(self, sheets: List[QuestionSheet]) -> List[QuestionSheet]:
        stored = []
        for sheet in sheets:
            stored.append(self.sheets.setdefault(sheet.natural_key, sheet))
        return stored
