"""Unit tests for the command line entry point"""

import unittest
from pathlib import Path
from unittest.mock import patch

from dvsplit.__main__ import main, parse_args, build_options

class TestParseArgs(unittest.TestCase):
    def test_flags_map_to_options(self):
        args = parse_args(["-s", "-r", "-t", "-o", "/out", "-e", "mov", "-j", "3", "--retries", "2", "a.dv", "b.dv"])
        split_options, extraction_options = build_options(args)
        self.assertTrue(split_options.ignore_technical_changes)
        self.assertTrue(split_options.split_on_recording_start)
        self.assertFalse(split_options.split_on_recording_time_gap)
        self.assertTrue(split_options.split_on_timecode_gap)
        self.assertEqual(extraction_options.output_dir, Path("/out"))
        self.assertEqual(extraction_options.extension, "mov")
        self.assertEqual(extraction_options.max_workers, 3)
        self.assertEqual(extraction_options.max_attempts, 3)
        self.assertEqual(args.inputs, [Path("a.dv"), Path("b.dv")])

    def test_defaults(self):
        args = parse_args(["a.dv"])
        self.assertTrue(args.cache)
        self.assertFalse(args.report_only)

@patch("dvsplit.__main__.configure_logging")
@patch("dvsplit.__main__.check_dependencies", return_value=True)
class TestMain(unittest.TestCase):
    @patch("dvsplit.__main__.process_inputs", return_value=True)
    def test_success(self, mock_process, mock_deps, mock_logging):
        self.assertEqual(main(["-n", "--no-cache", "a.dv"]), 0)
        kwargs = mock_process.call_args[1]
        self.assertTrue(kwargs["report_only"])
        self.assertFalse(kwargs["cache"])

    @patch("dvsplit.__main__.process_inputs", return_value=False)
    def test_failure(self, mock_process, mock_deps, mock_logging):
        self.assertEqual(main(["a.dv"]), 1)

    @patch("dvsplit.__main__.process_inputs")
    def test_invalid_configuration(self, mock_process, mock_deps, mock_logging):
        self.assertEqual(main(["-e", "m.kv", "a.dv"]), 1)
        mock_process.assert_not_called()

    @patch("dvsplit.__main__.process_inputs", side_effect=KeyboardInterrupt)
    def test_interrupt(self, mock_process, mock_deps, mock_logging):
        self.assertEqual(main(["a.dv"]), 130)

    @patch("dvsplit.__main__.process_inputs")
    def test_missing_dependencies(self, mock_process, mock_deps, mock_logging):
        mock_deps.return_value = False
        self.assertEqual(main(["a.dv"]), 1)
        mock_process.assert_not_called()

if __name__ == "__main__":
    unittest.main()
