"""Centralized logging configuration for dvsplit"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config import LOG_DIR, LOG_LEVEL

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(
    log_level: Optional[str] = None,
    file_logging: bool = True,
    log_dir: Optional[Path] = None
) -> Optional[Path]:
    """
    Configure the dvsplit logger with a rich console handler and,
    optionally, a timestamped log file.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    level = (log_level or LOG_LEVEL).upper()
    logger = logging.getLogger("dvsplit")
    logger.setLevel(logging._nameToLevel.get(level, logging.INFO))

    # Remove existing handlers so repeated calls don't duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    log_file = None
    if file_logging:
        target_dir = Path(log_dir) if log_dir is not None else LOG_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        log_file = target_dir / f"dvsplit_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
