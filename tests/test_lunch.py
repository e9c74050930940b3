"""Tests for work_times/lunch.py"""

import unittest
from datetime import datetime, timedelta

from work_times.events import SessionAction, TimelineEvent
from work_times.lunch import find_longest_lunch

ACTIONS = {
    "login": SessionAction.LOGIN,
    "lock": SessionAction.LOCK,
    "unlock": SessionAction.UNLOCK,
    "logout": SessionAction.LOGOUT,
}


def _events(*pairs):
    """Build a timeline from ("HH:MM", "lock") pairs on 2025-05-15."""
    events = []
    for i, (clock, action) in enumerate(pairs):
        ts = datetime.strptime(f"2025-05-15 {clock}", "%Y-%m-%d %H:%M")
        events.append(TimelineEvent(ts, ACTIONS[action], i))
    return events


class TestFindLongestLunch(unittest.TestCase):
    def test_keeps_longest_pair(self):
        events = _events(("11:00", "lock"), ("11:10", "unlock"), ("11:20", "lock"), ("13:00", "unlock"))
        lunch = find_longest_lunch(events)
        self.assertEqual(lunch.start.index, 2)
        self.assertEqual(lunch.end.index, 3)
        self.assertEqual(lunch.duration, timedelta(hours=1, minutes=40))

    def test_longer_first_pair_kept(self):
        events = _events(("11:00", "lock"), ("12:00", "unlock"), ("12:30", "lock"), ("12:40", "unlock"))
        lunch = find_longest_lunch(events)
        self.assertEqual(lunch.duration, timedelta(hours=1))
        self.assertEqual(lunch.start.index, 0)

    def test_new_lock_overwrites_open_lock(self):
        events = _events(("11:00", "lock"), ("12:00", "lock"), ("12:30", "unlock"))
        lunch = find_longest_lunch(events)
        self.assertEqual(lunch.start.index, 1)
        self.assertEqual(lunch.duration, timedelta(minutes=30))

    def test_lock_before_window(self):
        events = _events(("10:55", "lock"), ("11:05", "unlock"))
        self.assertIsNone(find_longest_lunch(events))

    def test_unlock_after_window(self):
        events = _events(("13:59", "lock"), ("14:05", "unlock"))
        self.assertIsNone(find_longest_lunch(events))

    def test_window_end_excluded(self):
        events = _events(("12:00", "lock"), ("14:00", "unlock"))
        self.assertIsNone(find_longest_lunch(events))

    def test_unlock_without_lock_ignored(self):
        events = _events(("11:30", "unlock"), ("12:00", "lock"), ("12:20", "unlock"))
        lunch = find_longest_lunch(events)
        self.assertEqual(lunch.start.index, 1)

    def test_unlock_closes_lock(self):
        events = _events(("11:00", "lock"), ("11:30", "unlock"), ("13:00", "unlock"))
        lunch = find_longest_lunch(events)
        self.assertEqual(lunch.end.index, 1)
        self.assertEqual(lunch.duration, timedelta(minutes=30))

    def test_other_actions_do_not_disturb_open_lock(self):
        events = _events(("11:00", "lock"), ("11:30", "login"), ("12:00", "unlock"))
        self.assertEqual(find_longest_lunch(events).duration, timedelta(hours=1))

    def test_no_events(self):
        self.assertIsNone(find_longest_lunch([]))


if __name__ == "__main__":
    unittest.main()
