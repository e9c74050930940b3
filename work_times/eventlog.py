"""
Read session events from the Windows event log.

The events are written by a small service that logs every session change
(SessionLogon, SessionLock, SessionUnlock, SessionLogoff) to the
Application log under its own event source. To check that it is running:
    run -> eventvwr.msc
    Windows Logs -> Application
and look for entries whose source is the configured provider name.
"""

import logging
from datetime import datetime

from work_times.events import LOG_TYPE, RawEvent

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class EventLogError(RuntimeError):
    pass


def to_datetime(time_generated):
    # str() of a pywintypes time may carry fractions or an offset after the seconds
    return datetime.strptime(str(time_generated)[:19], TIME_FORMAT)


def fetch_events(log_type=LOG_TYPE, since=None):
    """Return the records of `log_type` in log order, oldest first.

    When `since` (a date) is given, reading stops at the first record older
    than that day.
    """
    try:
        import pywintypes
        import win32evtlog
        import win32evtlogutil
    except ImportError as exc:
        raise EventLogError(f"error retrieving events: {exc}") from exc

    flags = win32evtlog.EVENTLOG_BACKWARDS_READ | win32evtlog.EVENTLOG_SEQUENTIAL_READ
    collected = []
    try:
        hand = win32evtlog.OpenEventLog(None, log_type)
    except (pywintypes.error, OSError) as exc:
        raise EventLogError(f"error retrieving events: {exc}") from exc

    try:
        events = win32evtlog.ReadEventLog(hand, flags, 0)
        while events:
            for event in events:
                dt = to_datetime(event.TimeGenerated)

                # Records come newest first, everything from here on is older
                if since is not None and dt.date() < since:
                    logger.debug("Stopped reading %s log at %s", log_type, dt)
                    events = None
                    break

                message = win32evtlogutil.SafeFormatMessage(event, log_type)
                collected.append(RawEvent(dt, str(event.SourceName), message or ""))
            else:
                events = win32evtlog.ReadEventLog(hand, flags, 0)
    except (pywintypes.error, OSError) as exc:
        raise EventLogError(f"error retrieving events: {exc}") from exc
    finally:
        win32evtlog.CloseEventLog(hand)

    logger.debug("Read %d records from the %s log", len(collected), log_type)
    collected.reverse()
    return collected
