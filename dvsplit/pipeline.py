"""High-level orchestration of a dvsplit run

Responsibilities:
  - Analyze each input, plan its segments and print the plan
  - Extract the segments unless only a report was requested
  - Keep going after a failed input and report a final summary
"""

import logging
import time
from pathlib import Path
from typing import Iterable, Optional

from .analysis import analyze
from .exceptions import DvSplitError
from .extraction import run_extractions, summarize
from .formatting import print_check, print_error, print_header, print_plan, print_summary
from .options import ExtractionOptions, SplitOptions
from .segmentation import plan

logger = logging.getLogger(__name__)

def process_file(
    source: Path,
    split_options: SplitOptions,
    extraction_options: ExtractionOptions,
    report_only: bool = False,
    cache: bool = True
) -> dict:
    """
    Plan and, unless report_only, extract the segments of one DV file.

    Returns:
        A summary dict with the segment count and extraction counts.

    Raises:
        DvSplitError: If analysis or planning fails
    """
    source = Path(source)
    start_time = time.time()
    print_header(f"Splitting {source.name}")

    frames = analyze(source, cache=cache)
    segments = plan(frames, split_options)
    print_plan(source.name, segments)

    summary = {
        "source": source,
        "segments": len(segments),
        "total": 0,
        "succeeded": 0,
        "failed": 0,
        "failed_ordinals": [],
    }
    if not report_only:
        results = run_extractions(source, segments, extraction_options)
        summary.update(summarize(results))
        print_summary(source.name, summary)

    summary["elapsed"] = time.time() - start_time
    logger.info("Finished %s in %.1fs", source.name, summary["elapsed"])
    return summary

def process_inputs(
    sources: Iterable[Path],
    split_options: SplitOptions,
    extraction_options: ExtractionOptions,
    report_only: bool = False,
    cache: bool = True
) -> bool:
    """
    Process several DV files one after the other.

    Returns:
        True if every file was planned and every segment extracted.
    """
    success = True
    for source in sources:
        try:
            summary = process_file(source, split_options, extraction_options, report_only, cache)
        except DvSplitError as e:
            print_error(f"{Path(source).name}: {e.message}")
            logger.debug("Failure details for %s", source, exc_info=True)
            success = False
            continue
        if summary["failed"]:
            success = False

    if success:
        print_check("All inputs processed")
    return success
