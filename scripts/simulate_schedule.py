#!/usr/bin/env python3
"""
Dry run of the question set pipeline against in-memory storage.
Creates members and relations, seeds the catalog, then walks a few
publish windows: build set -> fan out -> advance the clock.
Run: python scripts/simulate_schedule.py [--members 10] [--windows 4] [--seed 42]
"""

import argparse
import asyncio
import random
import sys
import os
from datetime import timedelta

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.domain.models import Member, utc_now
from infrastructure.memory import (
    InMemoryMemberRepository,
    InMemoryMemberRelationRepository,
    InMemoryQuestionRepository,
    InMemoryQuestionSetRepository,
    InMemoryQuestionSheetRepository,
)
from loader import build_services
from questions import seed_catalog


async def simulate(member_count: int, windows: int, seed: int):
    rng = random.Random(seed)
    clock_now = [utc_now()]

    member_repo = InMemoryMemberRepository()
    services = build_services(
        member_repo=member_repo,
        member_relation_repo=InMemoryMemberRelationRepository(rng=rng),
        question_repo=InMemoryQuestionRepository(rng=rng),
        question_set_repo=InMemoryQuestionSetRepository(),
        question_sheet_repo=InMemoryQuestionSheetRepository(),
        rng=rng,
        clock=lambda: clock_now[0],
    )

    await seed_catalog(services.question_service)

    print(f"👥 Registering {member_count} members...")
    for i in range(member_count):
        member = member_repo.add(Member(id=f"member-{i}", full_name=f"Member {i}"))
        await services.question_sheet_service.create_default_relations(member.id)

    # Promote a few random pairs to FRIEND
    for i in range(member_count):
        for j in rng.sample(range(member_count), k=min(3, member_count)):
            if i != j and not await services.member_relation_service.is_friend(f"member-{i}", f"member-{j}"):
                await services.member_relation_service.update_relation_to_friend(f"member-{i}", f"member-{j}")

    latest = None
    for window in range(windows):
        question_set_id = await services.question_service.create_question_set(latest)
        latest = await services.question_service.get_question_set_by_id(question_set_id)
        print(f"\n📅 Window {window + 1}: {latest.published_at.isoformat()} -> {latest.end_at.isoformat()}")

        clock_now[0] = latest.published_at
        created = await services.question_sheet_service.generate_sheets_for_all_members(latest)
        sheets = await services.question_service.get_question_sheets("member-0", latest.id)
        print(f"   Sheets created for {created} members; member-0 has {len(sheets)} sheets")
        for sheet in sheets[:3]:
            print(f"   - {sheet.question_id}: {len(sheet.candidates)} candidates")


def main():
    parser = argparse.ArgumentParser(description="Simulate question set windows in memory")
    parser.add_argument("--members", type=int, default=10)
    parser.add_argument("--windows", type=int, default=4)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()
    asyncio.run(simulate(args.members, args.windows, args.seed))


if __name__ == "__main__":
    main()
