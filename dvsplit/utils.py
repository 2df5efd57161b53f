"""Utility functions for running external tools"""

import shutil
import subprocess
import logging
from typing import List

logger = logging.getLogger(__name__)

def run_cmd(cmd: List[str], capture_output: bool = True,
            check: bool = True) -> subprocess.CompletedProcess:
    """Run a command and log its output"""
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            check=check,
            text=True
        )
        if result.stdout:
            logger.debug("Command stdout: %s", result.stdout)
        if result.stderr:
            logger.debug("Command stderr: %s", result.stderr)
        return result
    except subprocess.CalledProcessError as e:
        logger.error("Command failed: %s", " ".join(cmd))
        logger.error("Error output: %s", e.stderr)
        raise

def check_dependencies(required: List[str]) -> bool:
    """Check that every required executable is on PATH"""
    missing = [cmd for cmd in required if shutil.which(cmd) is None]
    for cmd in missing:
        logger.error("Required dependency not found: %s", cmd)
    return not missing

def to_iso_datetime(recording_datetime: str) -> str:
    """Convert a dvrescue recording date time ("YYYY-MM-DD HH:MM:SS") to ISO 8601"""
    return recording_datetime.strip().replace(" ", "T", 1)
