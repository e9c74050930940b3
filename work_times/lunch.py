"""Find the lunch break: the longest lock/unlock pair around midday."""

import logging
from collections import namedtuple
from datetime import time

from work_times.events import SessionAction

logger = logging.getLogger(__name__)

LUNCH_START = time(11, 0, 0)
LUNCH_END = time(14, 0, 0)


class LunchBreak(namedtuple("LunchBreak", ["start", "end"])):
    __slots__ = ()

    @property
    def duration(self):
        return self.end.timestamp - self.start.timestamp


def in_lunch_window(timestamp):
    return LUNCH_START <= timestamp.time() < LUNCH_END


def find_longest_lunch(events):
    """Return the longest Lock -> Unlock pair inside the lunch window, or None.

    Both ends must fall inside the window on their own. A Lock replaces any
    earlier Lock that was never unlocked, and an Unlock without an open Lock
    is ignored.
    """
    best = None
    open_lock = None
    for event in events:
        if not in_lunch_window(event.timestamp):
            continue
        if event.action is SessionAction.LOCK:
            open_lock = event
        elif event.action is SessionAction.UNLOCK and open_lock is not None:
            candidate = LunchBreak(open_lock, event)
            if best is None or candidate.duration > best.duration:
                best = candidate
            open_lock = None

    if best is None:
        logger.debug("No lock/unlock pair between %s and %s", LUNCH_START, LUNCH_END)
    else:
        logger.debug("Lunch break %s - %s", best.start.timestamp, best.end.timestamp)
    return best
