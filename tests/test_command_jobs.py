import subprocess
import unittest
from unittest.mock import patch

from dvsplit.command_jobs import CommandJob, AnalyzeJob, ExtractionJob
from dvsplit.exceptions import CommandExecutionError, AnalyzerError, ExtractionFailure

class TestCommandJobs(unittest.TestCase):
    @patch("dvsplit.command_jobs.run_cmd")
    def test_commandjob_success(self, mock_run_cmd):
        job = CommandJob(["ls", "-la"])
        job.execute()
        mock_run_cmd.assert_called_with(["ls", "-la"])

    @patch("dvsplit.command_jobs.run_cmd")
    def test_commandjob_failure_reports_last_stderr_line(self, mock_run_cmd):
        mock_run_cmd.side_effect = subprocess.CalledProcessError(
            1, ["ffmpeg"], stderr="warning\nInvalid data found\n"
        )
        with self.assertRaises(CommandExecutionError) as ctx:
            CommandJob(["ffmpeg", "-i", "x"]).execute()
        self.assertIn("Invalid data found", str(ctx.exception))

    @patch("dvsplit.command_jobs.run_cmd")
    def test_missing_executable(self, mock_run_cmd):
        mock_run_cmd.side_effect = FileNotFoundError("dvrescue")
        with self.assertRaises(AnalyzerError):
            AnalyzeJob(["dvrescue", "tape.dv"]).execute()

    @patch("dvsplit.command_jobs.run_cmd")
    def test_extraction_job_failure(self, mock_run_cmd):
        mock_run_cmd.side_effect = subprocess.CalledProcessError(1, ["ffmpeg"], stderr="")
        with self.assertRaises(ExtractionFailure) as ctx:
            ExtractionJob(["ffmpeg"], ordinal=4).execute()
        self.assertEqual(ctx.exception.ordinal, 4)
        self.assertIn("exit code 1", str(ctx.exception))

if __name__ == "__main__":
    unittest.main()
