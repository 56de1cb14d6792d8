#!/usr/bin/env python3
"""
Script to manually create the next question set.
Run: python scripts/create_question_set.py
"""

import asyncio
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load env
from dotenv import load_dotenv
load_dotenv()

from core.domain.exceptions import QuestionLackError
from loader import build_supabase_services


async def create_next_question_set():
    """Create the set that follows the latest published one"""
    services = build_supabase_services()
    question_service = services.question_service

    latest = await question_service.get_latest_published_question_set()
    if latest:
        print(f"✅ Latest set: {latest.id}")
        print(f"   Window: {latest.published_at.isoformat()} -> {latest.end_at.isoformat()}")
        print(f"   Status: {latest.status.value}")
    else:
        print("ℹ️  No question set yet, using the next schedule slot")

    try:
        question_set_id = await question_service.create_question_set(latest)
    except QuestionLackError as e:
        print(f"❌ Not enough questions: {e}")
        return

    question_set = await question_service.get_question_set_by_id(question_set_id)
    print(f"\n✅ Created set {question_set_id}")
    print(f"   Window: {question_set.published_at.isoformat()} -> {question_set.end_at.isoformat()}")
    for order in question_set.question_ids:
        question = await question_service.get_question_by_id(order.question_id)
        label = f"[{question.type.value}] {question.content}" if question else order.question_id
        print(f"   {order.order:2d}. {label}")


if __name__ == "__main__":
    asyncio.run(create_next_question_set())
