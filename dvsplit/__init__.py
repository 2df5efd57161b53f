"""
dvsplit - Split DV captures into continuous parts

This package plans and performs the splitting of a DV stream:
- Reads per-frame metadata produced by the dvrescue analyzer
- Groups frames into segments whenever technical attributes change
- Optionally splits on recording starts, recording time and timecode jumps
- Prints a table of the planned segments
- Extracts every segment with ffmpeg stream copy, in parallel

Planning is a pure fold over the frame sequence, so the same analysis
always produces the same plan.
"""

from .models import FrameRecord, SegmentDescriptor, SplitReason
from .options import SplitOptions, ExtractionOptions
from .segmentation import plan, iter_segments, should_start_new_segment
from .report import format_table

__version__ = "0.1.0"

__all__ = [
    'FrameRecord',
    'SegmentDescriptor',
    'SplitReason',
    'SplitOptions',
    'ExtractionOptions',
    'plan',
    'iter_segments',
    'should_start_new_segment',
    'format_table',
]
