"""Unit tests for per-file orchestration"""

import unittest
from pathlib import Path
from unittest.mock import patch

from dvsplit.exceptions import AnalyzerError, MalformedInputError
from dvsplit.extraction import ExtractionResult
from dvsplit.options import ExtractionOptions, SplitOptions
from dvsplit.pipeline import process_file, process_inputs
from frame_factory import frame, run

class TestProcessFile(unittest.TestCase):
    def setUp(self):
        self.source = Path("/tapes/tape.dv")
        self.frames = run(0, 3) + run(1, 3, start=3, aspect_ratio="16/9")

    @patch("dvsplit.pipeline.run_extractions")
    @patch("dvsplit.pipeline.analyze")
    def test_report_only_skips_extraction(self, mock_analyze, mock_run):
        mock_analyze.return_value = self.frames
        summary = process_file(self.source, SplitOptions(), ExtractionOptions(), report_only=True)
        mock_run.assert_not_called()
        self.assertEqual(summary["segments"], 2)
        self.assertEqual(summary["failed"], 0)

    @patch("dvsplit.pipeline.run_extractions")
    @patch("dvsplit.pipeline.analyze")
    def test_extraction_summary(self, mock_analyze, mock_run):
        mock_analyze.return_value = self.frames
        mock_run.return_value = [
            ExtractionResult(1, Path("/tapes/tape_part01.mkv"), True, 1),
            ExtractionResult(2, Path("/tapes/tape_part02.mkv"), False, 1, "boom"),
        ]
        summary = process_file(self.source, SplitOptions(), ExtractionOptions(), cache=False)
        mock_analyze.assert_called_once_with(self.source, cache=False)
        segments = mock_run.call_args[0][1]
        self.assertEqual([s.ordinal for s in segments], [1, 2])
        self.assertEqual(summary["succeeded"], 1)
        self.assertEqual(summary["failed_ordinals"], [2])

    @patch("dvsplit.pipeline.run_extractions")
    @patch("dvsplit.pipeline.analyze")
    def test_malformed_frames_abort_before_extraction(self, mock_analyze, mock_run):
        mock_analyze.return_value = [frame(), frame(idx=1, pts=None)]
        with self.assertRaises(MalformedInputError):
            process_file(self.source, SplitOptions(), ExtractionOptions())
        mock_run.assert_not_called()

class TestProcessInputs(unittest.TestCase):
    @patch("dvsplit.pipeline.process_file")
    def test_continues_after_failed_input(self, mock_process):
        mock_process.side_effect = [
            AnalyzerError("dvrescue failed", module="analysis"),
            {"failed": 0},
        ]
        ok = process_inputs([Path("a.dv"), Path("b.dv")], SplitOptions(), ExtractionOptions())
        self.assertFalse(ok)
        self.assertEqual(mock_process.call_count, 2)

    @patch("dvsplit.pipeline.logger")
    @patch("dvsplit.pipeline.print_error")
    @patch("dvsplit.pipeline.analyze")
    def test_malformed_input_reported_once(self, mock_analyze, mock_print_error, mock_logger):
        mock_analyze.return_value = [frame(), frame(idx=1, pts=None)]
        ok = process_inputs([Path("a.dv")], SplitOptions(), ExtractionOptions())
        self.assertFalse(ok)
        mock_print_error.assert_called_once()
        self.assertIn("has no pts", mock_print_error.call_args[0][0])
        mock_logger.error.assert_not_called()

    @patch("dvsplit.pipeline.process_file")
    def test_failed_segments_fail_the_run(self, mock_process):
        mock_process.return_value = {"failed": 1}
        self.assertFalse(process_inputs([Path("a.dv")], SplitOptions(), ExtractionOptions()))

    @patch("dvsplit.pipeline.process_file")
    def test_all_good(self, mock_process):
        mock_process.return_value = {"failed": 0}
        self.assertTrue(process_inputs([Path("a.dv")], SplitOptions(), ExtractionOptions()))

if __name__ == "__main__":
    unittest.main()
