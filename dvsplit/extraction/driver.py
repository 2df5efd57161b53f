"""Segment extraction driver

Responsibilities:
- Turn a finished plan into extraction requests
- Run the requests in parallel, one ffmpeg process per segment
- Retry failed segments and isolate failures per segment
- Summarize succeeded and failed segments
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import psutil

from ..command_jobs import ExtractionJob
from ..exceptions import ExtractionFailure
from ..models import SegmentDescriptor
from ..options import ExtractionOptions
from .commands import ExtractionRequest, build_extraction_command, build_request

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one segment's extraction."""
    ordinal: int
    output: Path
    succeeded: bool
    attempts: int
    error: Optional[str] = None

def extract_segment(request: ExtractionRequest, options: ExtractionOptions) -> ExtractionResult:
    """
    Extract one segment, retrying up to options.max_attempts times.

    Failures are returned in the result rather than raised.
    """
    cmd = build_extraction_command(request, overwrite=options.overwrite)
    error = None
    for attempt in range(1, options.max_attempts + 1):
        try:
            request.output.parent.mkdir(parents=True, exist_ok=True)
            ExtractionJob(cmd, request.ordinal).execute()
        except (ExtractionFailure, OSError) as e:
            error = str(e)
            logger.warning(
                "Segment %d attempt %d/%d failed: %s",
                request.ordinal, attempt, options.max_attempts, e
            )
            continue
        logger.info("Extracted segment %d to %s", request.ordinal, request.output.name)
        return ExtractionResult(request.ordinal, request.output, True, attempt)
    logger.error("Segment %d failed after %d attempt(s)", request.ordinal, options.max_attempts)
    return ExtractionResult(request.ordinal, request.output, False, options.max_attempts, error)

def _worker_count(options: ExtractionOptions, pending: int) -> int:
    workers = options.max_workers or psutil.cpu_count() or 1
    return max(1, min(workers, pending))

def run_extractions(
    source: Path,
    segments: Sequence[SegmentDescriptor],
    options: Optional[ExtractionOptions] = None
) -> List[ExtractionResult]:
    """
    Extract every planned segment of a source file.

    The plan must be complete before this is called, since a segment's end
    bound depends on the frames after it. Segments are independent, so they
    are extracted concurrently; results come back in ordinal order.

    Args:
        source: The DV file the plan was made from
        segments: The complete, ordered plan
        options: Output location, container, parallelism and retries

    Returns:
        One ExtractionResult per segment, ordered by ordinal.
    """
    options = options or ExtractionOptions()
    requests = [build_request(source, segment, options) for segment in segments]
    if not requests:
        logger.info("Nothing to extract from %s", Path(source).name)
        return []

    workers = _worker_count(options, len(requests))
    logger.info("Extracting %d segment(s) with %d worker(s)", len(requests), workers)

    results: Dict[int, ExtractionResult] = {}
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(extract_segment, request, options): request
            for request in requests
        }
        for future in as_completed(futures):
            request = futures[future]
            try:
                result = future.result()
            except Exception as e:
                logger.exception("Segment %d crashed: %s", request.ordinal, e)
                result = ExtractionResult(request.ordinal, request.output, False, 0, str(e))
            results[request.ordinal] = result

    return [results[ordinal] for ordinal in sorted(results)]

def summarize(results: Sequence[ExtractionResult]) -> dict:
    """Count succeeded and failed extractions"""
    failed = [r for r in results if not r.succeeded]
    return {
        "total": len(results),
        "succeeded": len(results) - len(failed),
        "failed": len(failed),
        "failed_ordinals": [r.ordinal for r in failed],
    }
