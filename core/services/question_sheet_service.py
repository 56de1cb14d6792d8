"""
Question sheet orchestration - ties relations and question sets together.

For each resolver: sample bounded candidate pools from the relation graph,
fan the set out into sheets and store them. Generation is idempotent per
(question set, resolver): existing sheets are returned untouched.
"""

import logging
from typing import List

from core.domain.exceptions import MemberNotFoundError, RelationAlreadyExistsError
from core.domain.models import MemberId, QuestionSet, QuestionSheet
from core.interfaces.repositories import IMemberRepository
from core.services.member_relation_service import MemberRelationService
from core.services.question_service import QuestionService

logger = logging.getLogger(__name__)


class QuestionSheetService:
    """Builds and stores question sheets for members"""

    def __init__(
        self,
        question_service: QuestionService,
        member_relation_service: MemberRelationService,
        member_repo: IMemberRepository,
        friend_candidate_limit: int,
        accompany_candidate_limit: int,
    ):
        self.question_service = question_service
        self.member_relation_service = member_relation_service
        self.member_repo = member_repo
        self.friend_candidate_limit = friend_candidate_limit
        self.accompany_candidate_limit = accompany_candidate_limit

    async def generate_sheets_for_member(
        self,
        question_set: QuestionSet,
        resolver_id: MemberId,
    ) -> List[QuestionSheet]:
        """Sheets of `resolver_id` for `question_set`, created on first call only"""
        existing = await self.question_service.get_question_sheets(resolver_id, question_set.id)
        if existing:
            logger.debug(f"[QSHEET] Sheets already exist for {resolver_id} in set {question_set.id}")
            return existing
        return await self._create_sheets(question_set, resolver_id)

    async def _create_sheets(self, question_set: QuestionSet, resolver_id: MemberId) -> List[QuestionSheet]:
        candidates_of_friend = await self.member_relation_service.find_random_of_friend(
            resolver_id, self.friend_candidate_limit
        )
        candidates_of_accompany = await self.member_relation_service.find_random_of_accompany(
            resolver_id, self.accompany_candidate_limit
        )

        sheets = await self.question_service.create_question_sheets_for_member(
            question_set=question_set,
            candidates_of_friend=candidates_of_friend,
            candidates_of_accompany=candidates_of_accompany,
            resolver=resolver_id,
        )
        saved = await self.question_service.save_question_sheets(sheets)
        logger.info(f"[QSHEET] Created {len(saved)} sheets for {resolver_id} in set {question_set.id}")
        return saved

    async def generate_sheets_for_all_members(self, question_set: QuestionSet) -> int:
        """
        Fan a set out to every member.
        Returns how many members received new sheets.
        """
        member_ids = await self.member_repo.get_all_ids()
        created = 0

        for member_id in member_ids:
            try:
                existing = await self.question_service.get_question_sheets(member_id, question_set.id)
                if existing:
                    continue
                sheets = await self._create_sheets(question_set, member_id)
                if sheets:
                    created += 1
            except Exception as e:
                logger.error(f"[QSHEET] Failed to create sheets for {member_id} in set {question_set.id}: {e}", exc_info=True)

        logger.info(f"[QSHEET] Set {question_set.id}: new sheets for {created}/{len(member_ids)} members")
        return created

    async def create_default_relations(self, member_id: MemberId) -> int:
        """
        Signup hook: relate a new member with every existing member as
        ACCOMPANY, in both directions. Existing pairs are left alone.
        """
        member = await self.member_repo.get_by_id(member_id)
        if not member:
            raise MemberNotFoundError(member_id=member_id)

        created = 0
        for other_id in await self.member_repo.get_all_ids():
            if other_id == member_id:
                continue
            for from_id, to_id in ((member_id, other_id), (other_id, member_id)):
                try:
                    await self.member_relation_service.create_relation(from_id, to_id)
                    created += 1
                except RelationAlreadyExistsError:
                    continue

        logger.info(f"[RELATION] Created {created} default relations for {member_id}")
        return created
