"""Tests for work_times/spinner.py"""

import io
import unittest

from work_times.spinner import Spinner


class TtyStream(io.StringIO):
    def isatty(self):
        return True


class TestSpinner(unittest.TestCase):
    def test_silent_when_not_a_tty(self):
        stream = io.StringIO()
        with Spinner("Working", stream=stream):
            pass
        self.assertEqual(stream.getvalue(), "")

    def test_draws_and_clears_line(self):
        stream = TtyStream()
        with Spinner("Working", stream=stream, interval=0.01) as spinner:
            self.assertTrue(spinner.enabled)
        output = stream.getvalue()
        self.assertIn("Working", output)
        self.assertTrue(output.endswith("\r"))

    def test_quiet_draws_nothing(self):
        stream = TtyStream()
        with Spinner("Working", stream=stream, interval=0.01, quiet=True) as spinner:
            self.assertFalse(spinner.enabled)
        self.assertEqual(stream.getvalue(), "")

    def test_stopped_on_exception(self):
        stream = TtyStream()
        spinner = Spinner("Working", stream=stream, interval=0.01)
        with self.assertRaises(ValueError):
            with spinner:
                raise ValueError("boom")
        self.assertIsNone(spinner._thread)


if __name__ == "__main__":
    unittest.main()
