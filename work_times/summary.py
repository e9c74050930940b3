"""Work time for one day: first login to last logout (or now), minus lunch."""

from collections import namedtuple
from datetime import timedelta


class DaySummary(namedtuple("DaySummary", [
        "day", "first_event", "last_event", "lunch", "work_time", "is_past_day"])):
    __slots__ = ()

    @property
    def has_events(self):
        return self.first_event is not None

    @property
    def end_time(self):
        """Where the work span ends: last event for a past day, None while ongoing."""
        if self.is_past_day and self.last_event is not None:
            return self.last_event.timestamp
        return None


def summarize(events, lunch, now, is_past_day, day=None):
    if day is None:
        day = events[0].timestamp.date() if events else now.date()
    if not events:
        return DaySummary(day, None, None, lunch, timedelta(0), is_past_day)

    first, last = events[0], events[-1]
    end = last.timestamp if is_past_day else now
    work_time = end - first.timestamp
    if lunch is not None:
        work_time -= lunch.duration
    # a clock set back, or a range ending before the lunch break
    work_time = max(work_time, timedelta(0))
    return DaySummary(day, first, last, lunch, work_time, is_past_day)
