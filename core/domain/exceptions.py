"""
Domain errors raised by services to their immediate caller.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    QUESTION_LACK_FOR_CREATE_QUESTION_SET = "question_lack_for_create_question_set"
    INVALID_QUESTION_SET = "invalid_question_set"
    INVALID_QUESTION = "invalid_question"
    FRIEND_NOT_FOUND = "friend_not_found"
    ALREADY_FRIEND = "already_friend"
    MEMBER_NOT_FOUND = "member_not_found"
    SELF_RELATION = "self_relation"
    RELATION_ALREADY_EXISTS = "relation_already_exists"


class DomainError(Exception):
    """Base error. `context` carries structured details for logs."""

    error_type: ErrorType
    default_message: str = "Domain error"

    def __init__(self, message: Optional[str] = None, **context: Any):
        self.message = message or self.default_message
        self.context: Dict[str, Any] = context
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class QuestionLackError(DomainError):
    """Catalog cannot supply enough non-excluded questions for a set."""
    error_type = ErrorType.QUESTION_LACK_FOR_CREATE_QUESTION_SET
    default_message = "Not enough questions left to create a question set"


class QuestionSetValidationError(DomainError):
    error_type = ErrorType.INVALID_QUESTION_SET
    default_message = "Invalid question set"


class QuestionValidationError(DomainError):
    error_type = ErrorType.INVALID_QUESTION
    default_message = "Invalid question"


class FriendNotFoundError(DomainError):
    error_type = ErrorType.FRIEND_NOT_FOUND
    default_message = "Relation not found"


class AlreadyFriendError(DomainError):
    error_type = ErrorType.ALREADY_FRIEND
    default_message = "Members are already friends"


class MemberNotFoundError(DomainError):
    error_type = ErrorType.MEMBER_NOT_FOUND
    default_message = "Member not found"


class SelfRelationError(DomainError):
    error_type = ErrorType.SELF_RELATION
    default_message = "A member cannot relate to itself"


class RelationAlreadyExistsError(DomainError):
    error_type = ErrorType.RELATION_ALREADY_EXISTS
    default_message = "Relation already exists"
