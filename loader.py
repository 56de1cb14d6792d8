"""
Loader - wires repositories and services together.
"""

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from config.settings import Settings, settings
from core.domain.models import utc_now
from core.interfaces.repositories import (
    IMemberRepository,
    IMemberRelationRepository,
    IQuestionRepository,
    IQuestionSetRepository,
    IQuestionSheetRepository,
)
from core.services import (
    QuestionService,
    MemberRelationService,
    QuestionSheetService,
    SchedulerService,
)


@dataclass
class Services:
    question_service: QuestionService
    member_relation_service: MemberRelationService
    question_sheet_service: QuestionSheetService
    scheduler: SchedulerService


def build_services(
    member_repo: IMemberRepository,
    member_relation_repo: IMemberRelationRepository,
    question_repo: IQuestionRepository,
    question_set_repo: IQuestionSetRepository,
    question_sheet_repo: IQuestionSheetRepository,
    app_settings: Settings = settings,
    rng: Optional[random.Random] = None,
    clock: Callable[[], datetime] = utc_now,
) -> Services:
    question_service = QuestionService(
        question_repo=question_repo,
        question_set_repo=question_set_repo,
        question_sheet_repo=question_sheet_repo,
        config=app_settings.question_set_config(),
        rng=rng,
        clock=clock,
    )
    member_relation_service = MemberRelationService(member_relation_repo=member_relation_repo)
    question_sheet_service = QuestionSheetService(
        question_service=question_service,
        member_relation_service=member_relation_service,
        member_repo=member_repo,
        friend_candidate_limit=app_settings.friend_candidate_limit,
        accompany_candidate_limit=app_settings.accompany_candidate_limit,
    )
    scheduler = SchedulerService(
        question_service=question_service,
        question_sheet_service=question_sheet_service,
        interval_seconds=app_settings.scheduler_interval_seconds,
    )
    return Services(
        question_service=question_service,
        member_relation_service=member_relation_service,
        question_sheet_service=question_sheet_service,
        scheduler=scheduler,
    )


def build_supabase_services(app_settings: Settings = settings) -> Services:
    """Services backed by Supabase"""
    from infrastructure.database import (
        SupabaseMemberRepository,
        SupabaseMemberRelationRepository,
        SupabaseQuestionRepository,
        SupabaseQuestionSetRepository,
        SupabaseQuestionSheetRepository,
    )
    return build_services(
        member_repo=SupabaseMemberRepository(),
        member_relation_repo=SupabaseMemberRelationRepository(),
        question_repo=SupabaseQuestionRepository(),
        question_set_repo=SupabaseQuestionSetRepository(),
        question_sheet_repo=SupabaseQuestionSheetRepository(),
        app_settings=app_settings,
    )
