"""Session events: classification, day selection, and index ranges."""

import logging
import re
from collections import namedtuple
from datetime import datetime, time, timedelta
from enum import Enum

logger = logging.getLogger(__name__)

LOG_TYPE = "Application"
PROVIDER_NAME = "WorkTimeLogger"


RawEvent = namedtuple("RawEvent", ["timestamp", "provider", "message"])


class SessionAction(Enum):
    LOGIN = "Login"
    LOCK = "Lock"
    UNLOCK = "Unlock"
    LOGOUT = "Logout"
    UNKNOWN = "Unknown"


# Checked in order, first match wins. Whole-token patterns keep
# "SessionUnlock" from ever being read as a lock.
ACTION_RULES = (
    (re.compile(r"\bSessionLogon\b"), SessionAction.LOGIN),
    (re.compile(r"\bSessionLock\b"), SessionAction.LOCK),
    (re.compile(r"\bSessionUnlock\b"), SessionAction.UNLOCK),
    (re.compile(r"\bSessionLogoff\b"), SessionAction.LOGOUT),
)

KNOWN_ACTIONS = frozenset((
    SessionAction.LOGIN,
    SessionAction.LOCK,
    SessionAction.UNLOCK,
    SessionAction.LOGOUT,
))


# `index` is the position of the event in the full, unsliced day
TimelineEvent = namedtuple("TimelineEvent", ["timestamp", "action", "index"])


class RangeError(ValueError):
    pass


def classify(message):
    for pattern, action in ACTION_RULES:
        if pattern.search(message):
            return action
    return SessionAction.UNKNOWN


def day_bounds(day):
    start = datetime.combine(day, time(0, 0, 0))
    return start, start + timedelta(days=1)


def select_day_events(raw_events, day, provider=PROVIDER_NAME):
    """Return the recognized session events of `provider` on `day`, sorted.

    The sort is stable, so events with equal timestamps keep the order in
    which the log produced them.
    """
    start, end = day_bounds(day)
    kept = []
    for raw in raw_events:
        if raw.provider != provider or not start <= raw.timestamp < end:
            continue
        action = classify(raw.message)
        if action not in KNOWN_ACTIONS:
            logger.debug("Skipping unrecognized message at %s: %r", raw.timestamp, raw.message)
            continue
        kept.append((raw.timestamp, action))

    kept.sort(key=lambda item: item[0])
    events = [TimelineEvent(ts, action, i) for i, (ts, action) in enumerate(kept)]
    logger.debug("%d session events from %r on %s", len(events), provider, day)
    return events


def slice_events(events, start=None, end=None):
    """Restrict `events` to the inclusive index range [start, end].

    Either bound may be None. Raises RangeError when a bound is out of range.
    """
    count = len(events)
    if start is not None:
        if start < 0:
            raise RangeError("from must be >= 0")
        if start >= count:
            raise RangeError(f"from must be less than total event count ({count})")
    if end is not None:
        if end >= count:
            raise RangeError(f"to must be less than total event count ({count})")
        if end < 1:
            raise RangeError("to must be >= 1")
    if start is not None and end is not None and start > end:
        raise RangeError("from must be <= to")

    if start is None and end is None:
        return list(events)
    lo = 0 if start is None else start
    hi = count - 1 if end is None else end
    logger.debug("Showing events %d..%d of %d", lo, hi, count)
    return list(events[lo:hi + 1])
