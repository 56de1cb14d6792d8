#!/usr/bin/env python3
"""
Seed the question catalog with the starter question bank.
Run: python scripts/seed_questions.py [--type FRIEND|ACCOMPANY]
"""

import argparse
import asyncio
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load env
from dotenv import load_dotenv
load_dotenv()

from core.domain.models import QuestionType
from loader import build_supabase_services
from questions import load_questions, seed_catalog
from questions.categories import get_category_display


async def seed(question_type):
    services = build_supabase_services()
    questions = load_questions(type=question_type)

    print(f"🌱 Seeding {len(questions)} questions...")
    for q in questions:
        print(f"   [{q['type'].value}] ({get_category_display(q['category'])}) {q['content']}")

    created = await seed_catalog(services.question_service, questions)
    print(f"\n✅ Created {created} questions")


def main():
    parser = argparse.ArgumentParser(description="Seed the question catalog")
    parser.add_argument("--type", choices=[t.value for t in QuestionType], default=None)
    args = parser.parse_args()
    asyncio.run(seed(QuestionType(args.type) if args.type else None))


if __name__ == "__main__":
    main()
