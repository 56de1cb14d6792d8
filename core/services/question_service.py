"""
Question service - question catalog, question set building and sheet fan-out.

A question set is a fixed-size batch of questions published for one shift of
the two-slot daily schedule. Building a set:
  1. split the set size into FRIEND / ACCOMPANY counts by friend_ratio
  2. sample both types at random, excluding the previous set's questions
  3. shuffle so question type does not follow position
  4. fail hard if the catalog could not fill the set
  5. publish right where the previous set ends (or at the next slot)

Fan-out turns a set into one sheet per question for a single resolver, using
the candidate pool that matches each question's type.
"""

import logging
import math
import random
from datetime import datetime
from typing import Callable, List, Optional

from config.settings import QuestionSetConfig
from core.domain.constants import MIN_QUESTION_LENGTH, MAX_QUESTION_LENGTH
from core.domain.exceptions import (
    QuestionLackError,
    QuestionSetValidationError,
    QuestionValidationError,
)
from core.domain.models import (
    ImageId, MemberId,
    Question, QuestionCategory, QuestionId, QuestionType,
    QuestionOrder, QuestionSet, QuestionSetId,
    QuestionSheet,
    utc_now,
)
from core.interfaces.repositories import (
    IQuestionRepository,
    IQuestionSetRepository,
    IQuestionSheetRepository,
)
from core.utils.schedule import publish_window

logger = logging.getLogger(__name__)


class QuestionService:
    """Service for questions, question sets and question sheets"""

    def __init__(
        self,
        question_repo: IQuestionRepository,
        question_set_repo: IQuestionSetRepository,
        question_sheet_repo: IQuestionSheetRepository,
        config: QuestionSetConfig,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.question_repo = question_repo
        self.question_set_repo = question_set_repo
        self.question_sheet_repo = question_sheet_repo
        self.config = config
        self.rng = rng or random.Random()
        self.clock = clock

    # -----------------------------------------------------------------
    # Questions
    # -----------------------------------------------------------------

    async def create_question(
        self,
        content: str,
        type: QuestionType,
        category: QuestionCategory,
        emoji_image_id: ImageId,
    ) -> QuestionId:
        """Add a question to the catalog"""
        content = content.strip()
        if not MIN_QUESTION_LENGTH <= len(content) <= MAX_QUESTION_LENGTH:
            raise QuestionValidationError(
                f"Question content must be {MIN_QUESTION_LENGTH}-{MAX_QUESTION_LENGTH} characters",
                length=len(content),
            )

        question = Question.create(
            content=content,
            type=type,
            category=category,
            emoji_image_id=emoji_image_id,
        )
        saved = await self.question_repo.save(question)
        logger.info(f"[QUESTION] Created {saved.type.value} question {saved.id} ({saved.category.value})")
        return saved.id

    async def get_question_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return await self.question_repo.find_by_id(question_id)

    # -----------------------------------------------------------------
    # Question set queries
    # -----------------------------------------------------------------

    async def get_operating_question_set(self) -> Optional[QuestionSet]:
        """Set currently ACTIVE (published_at <= now < end_at)"""
        question_set = await self.question_set_repo.find_operating(self.clock())
        if not question_set:
            logger.error("[QSET] Published and operating question set not found")
        return question_set

    async def get_next_operating_question_set(self) -> Optional[QuestionSet]:
        """Earliest UPCOMING set, prepared ahead of its window"""
        question_set = await self.question_set_repo.find_first_upcoming(self.clock())
        if not question_set:
            logger.error("[QSET] Upcoming question set ready for publishing not found")
        return question_set

    async def get_latest_published_question_set(self) -> Optional[QuestionSet]:
        return await self.question_set_repo.find_latest_published()

    async def get_question_set_by_id(self, question_set_id: QuestionSetId) -> Optional[QuestionSet]:
        return await self.question_set_repo.find_by_id(question_set_id)

    # -----------------------------------------------------------------
    # Question set building
    # -----------------------------------------------------------------

    def split_by_ratio(self) -> tuple[int, int]:
        """(friend_count, accompany_count) for one set"""
        friend_count = math.floor(self.config.size * self.config.friend_ratio)
        return friend_count, self.config.size - friend_count

    async def create_question_set(self, latest_question_set: Optional[QuestionSet]) -> QuestionSetId:
        """
        Build and store the set that follows `latest_question_set`.

        Raises QuestionLackError when the catalog cannot supply `size`
        questions outside the previous set. Never retried here.
        """
        friend_count, accompany_count = self.split_by_ratio()
        excluded_ids: List[QuestionId] = (
            [q.question_id for q in latest_question_set.question_ids] if latest_question_set else []
        )

        friend_questions = await self.question_repo.find_random_questions(
            QuestionType.FRIEND, excluded_ids, friend_count
        ) if friend_count > 0 else []
        accompany_questions = await self.question_repo.find_random_questions(
            QuestionType.ACCOMPANY, excluded_ids, accompany_count
        ) if accompany_count > 0 else []

        question_list = friend_questions + accompany_questions
        self.rng.shuffle(question_list)

        unique_ids = {q.id for q in question_list}
        if len(question_list) != self.config.size or len(unique_ids) != len(question_list):
            previous_id = latest_question_set.id if latest_question_set else None
            logger.error(
                f"[QSET] Not enough questions left to create a question set. "
                f"requested size: {self.config.size}, found: {len(question_list)}, "
                f"friend requested/found: {friend_count}/{len(friend_questions)}, "
                f"accompany requested/found: {accompany_count}/{len(accompany_questions)}, "
                f"previous set id: {previous_id}, excluded ids: {excluded_ids}"
            )
            raise QuestionLackError(
                requested_size=self.config.size,
                found=len(question_list),
                friend_found=len(friend_questions),
                accompany_found=len(accompany_questions),
                previous_question_set_id=previous_id,
            )

        question_orders = [
            QuestionOrder(question_id=question.id, order=index)
            for index, question in enumerate(question_list)
        ]

        published_at, end_at = publish_window(
            now=self.clock(),
            open_time_1=self.config.open_time_1,
            open_time_2=self.config.open_time_2,
            tz=self.config.tz,
            previous_end_at=latest_question_set.end_at if latest_question_set else None,
        )

        question_set = QuestionSet.create(
            question_orders=question_orders,
            published_at=published_at,
            end_at=end_at,
        )
        saved = await self.question_set_repo.save(question_set)
        logger.info(
            f"[QSET] Created question set {saved.id}: {friend_count} friend + {accompany_count} accompany, "
            f"window {saved.published_at.isoformat()} -> {saved.end_at.isoformat()}"
        )
        return saved.id

    async def create_question_set_with(
        self,
        question_ids: List[QuestionId],
        published_at: datetime,
        end_at: datetime,
    ) -> QuestionSet:
        """Store a set from explicit questions and window (admin use)"""
        if len(question_ids) != self.config.size:
            raise QuestionSetValidationError(
                f"Question set must contain {self.config.size} questions",
                size=len(question_ids),
            )
        if len(set(question_ids)) != len(question_ids):
            raise QuestionSetValidationError("Question set contains duplicate questions")
        if published_at.tzinfo is None or end_at.tzinfo is None:
            raise QuestionSetValidationError(
                "published_at must be timezone-aware",
                published_at=published_at.isoformat(),
                end_at=end_at.isoformat(),
            )
        if published_at <= self.clock():
            raise QuestionSetValidationError(
                "published_at must be in the future", published_at=published_at.isoformat()
            )
        if end_at <= published_at:
            raise QuestionSetValidationError(
                "end_at must be later than published_at",
                published_at=published_at.isoformat(),
                end_at=end_at.isoformat(),
            )

        question_orders = [
            QuestionOrder(question_id=question_id, order=index)
            for index, question_id in enumerate(question_ids)
        ]
        question_set = QuestionSet.create(question_orders, published_at, end_at)
        saved = await self.question_set_repo.save(question_set)
        logger.info(f"[QSET] Created question set {saved.id} with explicit questions")
        return saved

    # -----------------------------------------------------------------
    # Question sheets
    # -----------------------------------------------------------------

    async def get_question_sheets(
        self,
        resolver_id: MemberId,
        question_set_id: QuestionSetId,
    ) -> List[QuestionSheet]:
        return await self.question_sheet_repo.find_all_by_question_set_id_and_resolver_id(
            question_set_id, resolver_id
        )

    async def create_question_sheets_for_member(
        self,
        question_set: QuestionSet,
        candidates_of_friend: List[MemberId],
        candidates_of_accompany: List[MemberId],
        resolver: MemberId,
    ) -> List[QuestionSheet]:
        """
        One sheet per question of the set for `resolver`.
        FRIEND sheets come first, then ACCOMPANY; each group keeps set order.
        Questions missing from the catalog get no sheet. Nothing is stored.
        """
        question_ids = question_set.ordered_question_ids
        friend_question_ids = await self.question_repo.find_friend_questions_by_ids(question_ids)
        accompany_question_ids = await self.question_repo.find_accompany_questions_by_ids(question_ids)

        friend_pool = [m for m in candidates_of_friend if m != resolver]
        accompany_pool = [m for m in candidates_of_accompany if m != resolver]

        friend_sheets = [
            QuestionSheet.create(
                question_set_id=question_set.id,
                question_id=question_id,
                resolver_id=resolver,
                candidates=friend_pool,
            )
            for question_id in friend_question_ids
        ]
        accompany_sheets = [
            QuestionSheet.create(
                question_set_id=question_set.id,
                question_id=question_id,
                resolver_id=resolver,
                candidates=accompany_pool,
            )
            for question_id in accompany_question_ids
        ]

        unresolved = len(question_ids) - len(friend_sheets) - len(accompany_sheets)
        if unresolved:
            logger.warning(
                f"[QSHEET] {unresolved} question(s) of set {question_set.id} not found in catalog, "
                f"skipped for resolver {resolver}"
            )
        return friend_sheets + accompany_sheets

    async def save_question_sheets(self, all_member_question_sheets: List[QuestionSheet]) -> List[QuestionSheet]:
        """Bulk upsert; returns the stored sheets"""
        if not all_member_question_sheets:
            return []
        saved = await self.question_sheet_repo.save_all(all_member_question_sheets)
        logger.debug(f"[QSHEET] Saved {len(saved)} question sheets")
        return saved
