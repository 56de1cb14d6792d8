"""
Question bank utilities for seeding the question catalog.
"""

import logging
from typing import List, Optional, Dict, Any

from core.domain.models import QuestionCategory, QuestionType
from questions.bank import QUESTION_BANK

logger = logging.getLogger(__name__)


def load_questions(
    type: Optional[QuestionType] = None,
    category: Optional[QuestionCategory] = None,
) -> List[Dict[str, Any]]:
    """Starter questions filtered by type and/or category, in bank order."""
    results = []
    for q in QUESTION_BANK:
        if type and q["type"] != type:
            continue
        if category and q["category"] != category:
            continue
        results.append(q)
    return results


async def seed_catalog(question_service, questions: Optional[List[Dict[str, Any]]] = None) -> int:
    """Create every bank question through QuestionService. Returns the count created."""
    questions = QUESTION_BANK if questions is None else questions
    created = 0
    for q in questions:
        await question_service.create_question(
            content=q["content"],
            type=q["type"],
            category=q["category"],
            emoji_image_id=q["emoji"],
        )
        created += 1
    logger.info(f"[QUESTION] Seeded {created} questions")
    return created
