"""
command_jobs.py

Defines a base class for command jobs and the specialized jobs used by
dvsplit (running the analyzer and extracting a segment).
"""

import logging
import subprocess
from typing import List

from .utils import run_cmd
from .exceptions import CommandExecutionError, AnalyzerError, ExtractionFailure

logger = logging.getLogger(__name__)

class CommandJob:
    """
    Base class representing a command job.

    Attributes:
        cmd (List[str]): The command to run
    """
    def __init__(self, cmd: List[str]):
        self.cmd = cmd

    def execute(self) -> None:
        """
        Execute the stored command.

        Raises:
            CommandExecutionError: If the command fails or cannot be started
        """
        try:
            run_cmd(self.cmd)
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip().splitlines()
            reason = detail[-1] if detail else f"exit code {e.returncode}"
            raise CommandExecutionError(
                f"{self.cmd[0]} failed: {reason}",
                module="command_jobs"
            ) from e
        except OSError as e:
            raise CommandExecutionError(
                f"Could not run {self.cmd[0]}: {e}",
                module="command_jobs"
            ) from e

class AnalyzeJob(CommandJob):
    """Job for running the dvrescue analyzer."""
    def execute(self) -> None:
        try:
            super().execute()
        except CommandExecutionError as e:
            raise AnalyzerError(
                f"Analysis failed: {e.message}",
                module="analysis"
            ) from e

class ExtractionJob(CommandJob):
    """Job for extracting one segment with ffmpeg."""
    def __init__(self, cmd: List[str], ordinal: int):
        super().__init__(cmd)
        self.ordinal = ordinal

    def execute(self) -> None:
        try:
            super().execute()
        except CommandExecutionError as e:
            raise ExtractionFailure(
                f"segment {self.ordinal}: {e.message}",
                module="extraction",
                ordinal=self.ordinal
            ) from e
