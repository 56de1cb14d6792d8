"""
Periodic scheduler - keeps the next question set prepared and fans the
active one out to members.
Runs as an asyncio background task.
"""

import asyncio
import logging

from config.features import Features
from core.domain.constants import MAX_CATCH_UP_QUESTION_SETS
from core.domain.exceptions import QuestionLackError
from core.services.question_service import QuestionService
from core.services.question_sheet_service import QuestionSheetService

logger = logging.getLogger(__name__)


class SchedulerService:
    """Manages periodic question set creation and sheet fan-out."""

    def __init__(
        self,
        question_service: QuestionService,
        question_sheet_service: QuestionSheetService,
        interval_seconds: int = 3600,
    ):
        self.question_service = question_service
        self.question_sheet_service = question_sheet_service
        self.interval_seconds = interval_seconds
        self._running = False
        self._tick_count = 0
        self._tick_lock = asyncio.Lock()

    async def run(self):
        """Main scheduler loop."""
        self._running = True
        logger.info(f"[SCHEDULER] Started, ticking every {self.interval_seconds}s")

        while self._running:
            if self._tick_lock.locked():
                logger.warning("[SCHEDULER] Previous tick still running, skipping")
            else:
                try:
                    async with self._tick_lock:
                        await self.tick()
                except Exception as e:
                    logger.error(f"[SCHEDULER] Tick failed: {e}", exc_info=True)

            await asyncio.sleep(self.interval_seconds)

    async def stop(self):
        self._running = False

    async def tick(self):
        """One scheduler cycle: prepare the next set, then fan out the active one."""
        self._tick_count += 1

        if Features.AUTO_CREATE_QUESTION_SET:
            await self._ensure_next_question_set()

        if Features.SHEET_FANOUT_ENABLED:
            await self._fan_out_operating_set()

    async def _ensure_next_question_set(self):
        now = self.question_service.clock()
        upcoming = await self.question_service.question_set_repo.find_first_upcoming(now)
        if upcoming:
            return

        # After downtime the latest set may have ended long ago: chain sets
        # until one starts after now, so the window covering now exists too.
        latest = await self.question_service.get_latest_published_question_set()
        for _ in range(MAX_CATCH_UP_QUESTION_SETS):
            try:
                question_set_id = await self.question_service.create_question_set(latest)
            except QuestionLackError as e:
                # Surfaced to operators; not retried with relaxed exclusion
                logger.error(f"[SCHEDULER] Could not prepare next question set: {e}")
                return

            latest = await self.question_service.get_question_set_by_id(question_set_id)
            logger.info(
                f"[SCHEDULER] Prepared question set {question_set_id} "
                f"({latest.published_at.isoformat()} -> {latest.end_at.isoformat()})"
            )
            if latest.published_at > now:
                return

        logger.warning(
            f"[SCHEDULER] Catch-up stopped after {MAX_CATCH_UP_QUESTION_SETS} sets, "
            f"latest ends {latest.end_at.isoformat()}"
        )

    async def _fan_out_operating_set(self):
        operating = await self.question_service.question_set_repo.find_operating(
            self.question_service.clock()
        )
        if not operating:
            return

        created = await self.question_sheet_service.generate_sheets_for_all_members(operating)
        if created:
            logger.info(f"[SCHEDULER] Fanned out set {operating.id} to {created} members")
