"""Console rendering of the day report."""

from termcolor import colored

from work_times.events import SessionAction

ACTION_COLORS = {
    SessionAction.LOGIN: "green",
    SessionAction.LOCK: "yellow",
    SessionAction.UNLOCK: "cyan",
    SessionAction.LOGOUT: "red",
}

CLOCK_FORMAT = "%H:%M:%S"
LABEL_WIDTH = max(len(action.value) for action in ACTION_COLORS)


def paint(text, color=None, attrs=None, enabled=True):
    if not enabled or (color is None and not attrs):
        return text
    return colored(text, color, attrs=attrs)


def format_duration(td):
    """Format a timedelta as H:MM:SS."""
    seconds = int(td.total_seconds())
    sign = "-" if seconds < 0 else ""
    hours, remainder = divmod(abs(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"


def render_events(events, lunch=None, show_index=False, color=True):
    """One line per event, oldest first."""
    if not events:
        return []
    markers = {}
    if lunch is not None:
        markers[lunch.start.index] = "lunch start"
        markers[lunch.end.index] = "lunch end"

    index_width = len(str(max(event.index for event in events)))
    lines = []
    for event in events:
        parts = []
        if show_index:
            parts.append(paint(f"[{event.index:>{index_width}}]", attrs=["dark"], enabled=color))
        parts.append(event.timestamp.strftime(CLOCK_FORMAT))
        label = f"{event.action.value:<{LABEL_WIDTH}}"
        parts.append(paint(label, ACTION_COLORS.get(event.action), enabled=color))
        if event.index in markers:
            parts.append(paint(f"<- {markers[event.index]}", "magenta", enabled=color))
        lines.append("  ".join(parts).rstrip())
    return lines


def render_summary(summary, color=True):
    if not summary.has_events:
        if not summary.is_past_day:
            return ["No events found for today."]
        return [f"No events found for {summary.day.isoformat()}."]

    day = summary.day.strftime("%Y-%m-%d (%A)")
    first = summary.first_event.timestamp.strftime(CLOCK_FORMAT)
    lines = [
        f"Day:          {paint(day, attrs=['bold'], enabled=color)}",
        f"First login:  {paint(first, 'green', enabled=color)}",
    ]

    if summary.lunch is None:
        lines.append(f"Lunch break:  {paint('No lunch break found', 'yellow', enabled=color)}")
    else:
        start = summary.lunch.start.timestamp.strftime(CLOCK_FORMAT)
        end = summary.lunch.end.timestamp.strftime(CLOCK_FORMAT)
        duration = format_duration(summary.lunch.duration)
        lines.append(f"Lunch break:  {start} - {end} ({paint(duration, 'yellow', enabled=color)})")

    if summary.end_time is None:
        until = "until now"
    else:
        until = "until " + summary.end_time.strftime(CLOCK_FORMAT)
    work_time = paint(format_duration(summary.work_time), "cyan", attrs=["bold"], enabled=color)
    lines.append(f"Work time:    {work_time} ({until})")
    return lines
