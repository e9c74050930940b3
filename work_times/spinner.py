"""Console progress indicator shown while the event log is read."""

import itertools
import sys
import threading


class Spinner:
    """Draw a spinning bar next to `message` until the block exits.

    Nothing is drawn when `quiet` is set or the stream is not a terminal.
    """

    FRAMES = "|/-\\"

    def __init__(self, message="Reading event log", stream=None, interval=0.1, quiet=False):
        self._message = message
        self._quiet = quiet
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def enabled(self):
        if self._quiet:
            return False
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def __enter__(self):
        if self.enabled:
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def stop(self):
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout=1)
        self._thread = None
        # Blank out the spinner line so the report starts on a clean line
        self._stream.write("\r" + " " * (len(self._message) + 2) + "\r")
        self._stream.flush()

    def _spin(self):
        for frame in itertools.cycle(self.FRAMES):
            self._stream.write(f"\r{self._message} {frame}")
            self._stream.flush()
            if self._stop_event.wait(self._interval):
                break
