"""Segmentation of DV frame sequences

This package provides:
- The change predicate deciding where a segment begins
- The planner folding frames into ordered segment descriptors
"""

from .predicate import should_start_new_segment
from .planner import plan, iter_segments

__all__ = [
    'should_start_new_segment',
    'plan',
    'iter_segments',
]
