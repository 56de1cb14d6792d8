import random
from datetime import datetime, time, timezone

import pytest

from config.settings import QuestionSetConfig, Settings
from core.domain.models import Member, Question, QuestionCategory, QuestionType
from infrastructure.memory import (
    InMemoryMemberRepository,
    InMemoryMemberRelationRepository,
    InMemoryQuestionRepository,
    InMemoryQuestionSetRepository,
    InMemoryQuestionSheetRepository,
)
from loader import build_services


class FixedClock:
    """Settable clock for services"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_question(question_id: str, type: QuestionType, category=QuestionCategory.OTHER) -> Question:
    return Question(
        id=question_id,
        content=f"Question {question_id}?",
        type=type,
        category=category,
        emoji_image_id=f"emoji-{question_id}",
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    """2026-10-16 10:00 UTC"""
    return FixedClock(datetime(2026, 10, 16, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def qset_config():
    return QuestionSetConfig(
        size=12,
        friend_ratio=0.6,
        open_time_1=time(9, 0),
        open_time_2=time(21, 0),
        timezone="UTC",
    )


@pytest.fixture
def app_settings():
    return Settings(
        question_set_size=12,
        question_set_friend_ratio=0.6,
        question_set_open_time_1=time(9, 0),
        question_set_open_time_2=time(21, 0),
        question_set_timezone="UTC",
        friend_candidate_limit=8,
        accompany_candidate_limit=8,
        scheduler_interval_seconds=1,
    )


@pytest.fixture
def member_repo():
    return InMemoryMemberRepository()


@pytest.fixture
def member_relation_repo(rng):
    return InMemoryMemberRelationRepository(rng=rng)


@pytest.fixture
def question_repo(rng):
    repo = InMemoryQuestionRepository(rng=rng)
    # 14 FRIEND + 12 ACCOMPANY: enough for two consecutive sets of 7 + 5
    for i in range(14):
        q = make_question(f"f{i}", QuestionType.FRIEND)
        repo.questions[q.id] = q
    for i in range(12):
        q = make_question(f"a{i}", QuestionType.ACCOMPANY)
        repo.questions[q.id] = q
    return repo


@pytest.fixture
def question_set_repo():
    return InMemoryQuestionSetRepository()


@pytest.fixture
def question_sheet_repo():
    return InMemoryQuestionSheetRepository()


@pytest.fixture
def services(member_repo, member_relation_repo, question_repo, question_set_repo,
             question_sheet_repo, app_settings, rng, clock):
    return build_services(
        member_repo=member_repo,
        member_relation_repo=member_relation_repo,
        question_repo=question_repo,
        question_set_repo=question_set_repo,
        question_sheet_repo=question_sheet_repo,
        app_settings=app_settings,
        rng=rng,
        clock=clock,
    )


@pytest.fixture
def question_service(services):
    return services.question_service


@pytest.fixture
def member_relation_service(services):
    return services.member_relation_service


@pytest.fixture
def question_sheet_service(services):
    return services.question_sheet_service


@pytest.fixture
def members(member_repo):
    return [member_repo.add(Member(id=f"m{i}", full_name=f"Member {i}")) for i in range(6)]
