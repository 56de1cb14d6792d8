"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import logging
import os

logger = logging.getLogger(__name__)


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === QUESTION SETS ===
    # Scheduler prepares the next UPCOMING set when none exists
    AUTO_CREATE_QUESTION_SET: bool = os.getenv("AUTO_CREATE_QUESTION_SET", "true").lower() == "true"

    # === QUESTION SHEETS ===
    # Scheduler fans out the ACTIVE set to every member
    SHEET_FANOUT_ENABLED: bool = os.getenv("SHEET_FANOUT_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "auto_create_question_set": cls.AUTO_CREATE_QUESTION_SET,
            "sheet_fanout_enabled": cls.SHEET_FANOUT_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
        }

    @classmethod
    def log_status(cls):
        """Log current feature status"""
        logger.info("=== Feature Flags ===")
        for key, value in cls.to_dict().items():
            logger.info(f"  {key}: {'on' if value else 'off'}")


# Shortcut
features = Features()
