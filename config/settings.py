from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from datetime import time, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo
from pathlib import Path

from core.domain.constants import (
    DEFAULT_QUESTION_SET_SIZE, DEFAULT_FRIEND_QUESTION_RATIO,
    DEFAULT_OPEN_TIME_1, DEFAULT_OPEN_TIME_2,
    DEFAULT_FRIEND_CANDIDATE_LIMIT, DEFAULT_ACCOMPANY_CANDIDATE_LIMIT,
)


class QuestionSetConfig(BaseModel):
    """Immutable question set parameters handed to QuestionService"""

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=DEFAULT_QUESTION_SET_SIZE, gt=0)
    friend_ratio: float = Field(default=DEFAULT_FRIEND_QUESTION_RATIO, ge=0.0, le=1.0)
    open_time_1: time = DEFAULT_OPEN_TIME_1
    open_time_2: time = DEFAULT_OPEN_TIME_2
    timezone: str = "UTC"

    @model_validator(mode="after")
    def check_open_times(self):
        if not self.open_time_1 < self.open_time_2:
            raise ValueError("open_time_1 must be earlier than open_time_2")
        return self

    @property
    def tz(self) -> tzinfo:
        if self.timezone.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.timezone)


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Question set
    question_set_size: int = DEFAULT_QUESTION_SET_SIZE
    question_set_friend_ratio: float = DEFAULT_FRIEND_QUESTION_RATIO
    question_set_open_time_1: time = DEFAULT_OPEN_TIME_1
    question_set_open_time_2: time = DEFAULT_OPEN_TIME_2
    question_set_timezone: str = "UTC"

    # Candidate pools per sheet
    friend_candidate_limit: int = DEFAULT_FRIEND_CANDIDATE_LIMIT
    accompany_candidate_limit: int = DEFAULT_ACCOMPANY_CANDIDATE_LIMIT

    # Scheduler
    scheduler_interval_seconds: int = 3600

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('question_set_open_time_1', 'question_set_open_time_2', mode='before')
    @classmethod
    def parse_open_time(cls, v):
        # "9" or 21 -> full hour
        if isinstance(v, int):
            return time(v, 0)
        if isinstance(v, str) and v.strip().isdigit():
            return time(int(v.strip()), 0)
        return v

    def question_set_config(self) -> QuestionSetConfig:
        return QuestionSetConfig(
            size=self.question_set_size,
            friend_ratio=self.question_set_friend_ratio,
            open_time_1=self.question_set_open_time_1,
            open_time_2=self.question_set_open_time_2,
            timezone=self.question_set_timezone,
        )

    @property
    def supabase_credentials(self) -> tuple[str, Optional[str]]:
        return self.supabase_url, (self.supabase_service_key or self.supabase_key or None)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # QUESTION_SET_SIZE == question_set_size
    )


# Create settings instance
settings = Settings()
