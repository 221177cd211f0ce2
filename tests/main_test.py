"""
Command line surface: argument validation, exit codes and a full mocked run.
"""

import io
import unittest
from unittest.mock import MagicMock, patch

from main import END_BANNER, CheckSessionManager, main


def not_found_response(*args, **kwargs):
    response = MagicMock()
    response.status_code = 404
    return response


class TestMainValidation(unittest.TestCase):
    def setUp(self):
        patcher = patch("catalog_probe.fetcher.requests.get", side_effect=not_found_response)
        self.mock_get = patcher.start()
        self.addCleanup(patcher.stop)

    def assert_rejected(self, argv, message):
        stream = io.StringIO()
        with self.assertLogs("catalog_probe", level="ERROR") as logs:
            self.assertEqual(main(argv, stream=stream), 1)
        self.assertIn(message, "\n".join(logs.output))
        self.assertEqual(stream.getvalue(), "")
        self.mock_get.assert_not_called()

    def test_wrong_argument_count(self):
        for argv in ([], ["ab00100"], ["ab00100", "2", "extra"]):
            with self.assertRaises(SystemExit) as cm, patch("sys.stderr", io.StringIO()):
                main(argv)
            self.assertNotEqual(cm.exception.code, 0)
        self.mock_get.assert_not_called()

    def test_non_positive_range(self):
        self.assert_rejected(["ab00100", "0"], "positive integer")
        self.assert_rejected(["ab00100", "ten"], "positive integer")

    def test_short_code(self):
        self.assert_rejected(["00100", "2"], "at least 6 characters")

    def test_non_numeric_suffix(self):
        self.assert_rejected(["abx0100", "2"], "numeric part")


class TestMainRun(unittest.TestCase):
    @patch("catalog_probe.fetcher.requests.get", side_effect=not_found_response)
    def test_two_codes(self, mock_get):
        stream = io.StringIO()
        with self.assertLogs("catalog_probe", level="INFO") as logs:
            code = main(["ab00100", "2", "--delay", "0"], stream=stream)

        self.assertEqual(code, 0)
        self.assertEqual(stream.getvalue().splitlines(), [
            "ab00100:404:404:404:",
            "ab00101:404:404:404:",
        ])
        self.assertEqual(mock_get.call_count, 6)
        output = "\n".join(logs.output)
        self.assertIn("ab00100 .. ab00101 (2 codes)", output)
        self.assertIn(END_BANNER, output)

    def test_interrupt_stops_the_session(self):
        manager = MagicMock(spec=CheckSessionManager)
        manager.return_value.run.side_effect = KeyboardInterrupt
        with patch("main.CheckSessionManager", manager), \
                self.assertLogs("catalog_probe", level="WARNING"):
            self.assertEqual(main(["ab00100", "2"], stream=io.StringIO()), 130)


if __name__ == "__main__":
    unittest.main()
