"""
Print when the work day started, how long the lunch break was, and how
much time has been worked.

Session changes must be logged to the Windows event log for this to work:
a small service writes SessionLogon, SessionLock, SessionUnlock and
SessionLogoff entries to the Application log under its own event source
(see work_times.eventlog).

Examples:
    get_work_times.py               summary for today
    get_work_times.py -f -i         every event of today, with its index
    get_work_times.py -d 1 -f       yesterday, full listing
    get_work_times.py --from 3      today, starting at the 4th event
"""


import argparse
import logging
import sys
from datetime import datetime, timedelta

from work_times.events import LOG_TYPE, PROVIDER_NAME, RangeError, select_day_events, slice_events
from work_times.eventlog import EventLogError, fetch_events
from work_times.lunch import find_longest_lunch
from work_times.report import render_events, render_summary
from work_times.spinner import Spinner
from work_times.summary import summarize

logger = logging.getLogger("work_times")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="work-times",
        description="Report first login, lunch break and work time from session events.",
    )
    parser.add_argument("-f", "--full", action="store_true",
                        help="list every session event of the day before the summary")
    parser.add_argument("-i", "--index", action="store_true",
                        help="show the index of each listed event")
    parser.add_argument("-d", "--delta-days", type=non_negative_int, default=0,
                        help="report the day this many days before today (default: 0)")
    parser.add_argument("--from", dest="start", type=int, default=None,
                        help="first event index to include")
    parser.add_argument("--to", dest="end", type=int, default=None,
                        help="last event index to include")
    parser.add_argument("--source", default=PROVIDER_NAME,
                        help=f"event source writing the session events (default: {PROVIDER_NAME})")
    parser.add_argument("--log", default=LOG_TYPE,
                        help=f"event log to read (default: {LOG_TYPE})")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("-w", "--wait", action="store_true",
                        help="wait for Enter before exiting")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def run(args, now=None, out=None):
    """Build the report for the requested day and print it to `out`."""
    if now is None:
        now = datetime.now().replace(microsecond=0)
    if out is None:
        out = sys.stdout
    day = (now - timedelta(days=args.delta_days)).date()
    is_past_day = args.delta_days != 0

    with Spinner(f"Reading {args.log} log", quiet=args.verbose):
        raw_events = fetch_events(args.log, since=day)
        day_events = select_day_events(raw_events, day, args.source)
        events = slice_events(day_events, args.start, args.end)
        lunch = find_longest_lunch(events)
        summary = summarize(events, lunch, now, is_past_day, day=day)

    color = not args.no_color and out.isatty()
    lines = []
    if args.full:
        lines.extend(render_events(events, lunch, show_index=args.index, color=color))
        if lines:
            lines.append("")
    lines.extend(render_summary(summary, color=color))
    for line in lines:
        print(line, file=out)
    return summary


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    status = 0
    try:
        run(args)
    except (RangeError, EventLogError) as exc:
        logger.debug("Aborting", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        status = 1
    except KeyboardInterrupt:
        return 130

    if args.wait:
        try:
            input("Press Enter to exit...")
        except EOFError:
            pass
    return status


if __name__ == "__main__":
    sys.exit(main())
