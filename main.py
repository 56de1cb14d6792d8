"""
Friendpick backend - scheduler process entry point.

Keeps the next question set prepared on the two-slot daily schedule and
fans the active set out to every member as question sheets.
"""

import asyncio
import logging
import sys

from config.features import features
from config.settings import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("friendpick.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['core', 'infrastructure', 'questions', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - starts the scheduler and runs until stopped."""
    from loader import build_supabase_services
    from infrastructure.database.supabase_client import get_supabase

    logger.info("=== Friendpick Starting ===")
    logger.info(f"Environment: {settings.env}")
    features.log_status()

    qset_config = settings.question_set_config()
    logger.info(
        f"Question sets: size={qset_config.size}, friend_ratio={qset_config.friend_ratio}, "
        f"slots={qset_config.open_time_1.isoformat()}/{qset_config.open_time_2.isoformat()} {qset_config.timezone}"
    )

    try:
        get_supabase()
        services = build_supabase_services()
    except RuntimeError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    scheduler = services.scheduler
    scheduler_task = asyncio.create_task(scheduler.run())
    logger.info("Question set scheduler started")

    try:
        await scheduler_task
    finally:
        await scheduler.stop()
        scheduler_task.cancel()
        logger.info("Scheduler stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
