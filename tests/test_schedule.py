"""
Tests for the two-slot daily publish window math.
"""

from datetime import datetime, time, timedelta, timezone

from core.utils.schedule import end_time_for, next_publish_time, publish_window

UTC = timezone.utc
KST = timezone(timedelta(hours=9))
OPEN_1 = time(9, 0)
OPEN_2 = time(21, 0)


def at(hour, minute=0, day=16, tz=UTC):
    return datetime(2026, 10, day, hour, minute, tzinfo=tz)


class TestNextPublishTime:

    def test_before_first_slot_publishes_at_first_slot(self):
        assert next_publish_time(at(7), OPEN_1, OPEN_2, UTC) == at(9)

    def test_between_slots_publishes_at_second_slot(self):
        assert next_publish_time(at(10), OPEN_1, OPEN_2, UTC) == at(21)

    def test_after_second_slot_publishes_tomorrow(self):
        assert next_publish_time(at(22, 30), OPEN_1, OPEN_2, UTC) == at(9, day=17)

    def test_exactly_on_slot_moves_to_next_slot(self):
        assert next_publish_time(at(9), OPEN_1, OPEN_2, UTC) == at(21)
        assert next_publish_time(at(21), OPEN_1, OPEN_2, UTC) == at(9, day=17)

    def test_uses_schedule_timezone(self):
        # 23:00 UTC on the 15th is 08:00 on the 16th in UTC+9
        now = datetime(2026, 10, 15, 23, 0, tzinfo=UTC)
        assert next_publish_time(now, OPEN_1, OPEN_2, KST) == at(9, tz=KST)


class TestEndTime:

    def test_first_shift_ends_same_day(self):
        assert end_time_for(at(9), OPEN_1, OPEN_2, UTC) == at(21)

    def test_second_shift_ends_next_morning(self):
        assert end_time_for(at(21), OPEN_1, OPEN_2, UTC) == at(9, day=17)

    def test_off_schedule_start_ends_next_morning(self):
        assert end_time_for(at(15), OPEN_1, OPEN_2, UTC) == at(9, day=17)


class TestPublishWindow:

    def test_morning_without_previous_set(self):
        assert publish_window(at(7), OPEN_1, OPEN_2, UTC) == (at(9), at(21))

    def test_late_morning_without_previous_set(self):
        assert publish_window(at(10), OPEN_1, OPEN_2, UTC) == (at(21), at(9, day=17))

    def test_previous_end_is_reused(self):
        published_at, end_at = publish_window(at(10), OPEN_1, OPEN_2, UTC, previous_end_at=at(9, day=20))
        assert published_at == at(9, day=20)
        assert end_at == at(21, day=20)

    def test_windows_chain_without_gaps(self):
        published_at, end_at = publish_window(at(7), OPEN_1, OPEN_2, UTC)
        for _ in range(6):
            next_published, next_end = publish_window(at(7), OPEN_1, OPEN_2, UTC, previous_end_at=end_at)
            assert next_published == end_at
            assert next_end > next_published
            published_at, end_at = next_published, next_end
