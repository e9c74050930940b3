"""Daily work time report built from session events in the Windows event log."""

__version__ = "0.2.0"
