"""Configuration settings for dvsplit

This module centralizes the settings that are not per-run options:
- Log file location and default level
- Names of the external executables
- Output naming and container defaults
- Analyzer report caching

User-configurable values are read from environment variables.
"""

import os
from pathlib import Path

# LOG_DIR: user definable with default of "$HOME/dvsplit_logs"
LOG_DIR = Path(os.environ.get("DVSPLIT_LOG_DIR", str(Path.home() / "dvsplit_logs")))

# Logging configuration
LOG_LEVEL = "INFO"  # valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# External tools
DVRESCUE_BIN = os.environ.get("DVSPLIT_DVRESCUE", "dvrescue")
FFMPEG_BIN = os.environ.get("DVSPLIT_FFMPEG", "ffmpeg")

# Analyzer report cached next to the source file
ANALYSIS_SUFFIX = ".dvrescue.xml"

# Output settings
DEFAULT_EXTENSION = "mkv"
OUTPUT_NAME_TEMPLATE = "{stem}_part{ordinal:02d}.{extension}"

# Extraction attempts per segment (1 means no retry)
MAX_ATTEMPTS = 1
