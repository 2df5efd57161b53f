"""Segment extraction

This package provides:
- Extraction requests derived from planned segments
- ffmpeg command construction for a request
- Concurrent execution of all requests with per-segment failure isolation
"""

from .commands import ExtractionRequest, build_request, build_extraction_command, output_path_for
from .driver import ExtractionResult, extract_segment, run_extractions, summarize

__all__ = [
    'ExtractionRequest',
    'build_request',
    'build_extraction_command',
    'output_path_for',
    'ExtractionResult',
    'extract_segment',
    'run_extractions',
    'summarize',
]
