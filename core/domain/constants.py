"""
Domain constants - defaults and limits for question sets and candidate pools.
Runtime values come from config.settings; these are the fallbacks.
"""

from datetime import time

# === Question Set ===
DEFAULT_QUESTION_SET_SIZE = 12
DEFAULT_FRIEND_QUESTION_RATIO = 0.6
DEFAULT_OPEN_TIME_1 = time(9, 0)
DEFAULT_OPEN_TIME_2 = time(21, 0)

# === Candidate Pools ===
DEFAULT_FRIEND_CANDIDATE_LIMIT = 8
DEFAULT_ACCOMPANY_CANDIDATE_LIMIT = 8

# === Question Content ===
MIN_QUESTION_LENGTH = 5
MAX_QUESTION_LENGTH = 200

# === Scheduler ===
# Sets built in one tick while catching up after downtime (one week of windows)
MAX_CATCH_UP_QUESTION_SETS = 14
