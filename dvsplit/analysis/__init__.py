"""DV analysis utilities

This package provides utilities for:
- Running the dvrescue analyzer and caching its XML report
- Parsing the report into ordered frame records
"""

from .exec import run_dvrescue, analyze, analysis_path_for
from .parser import parse_dvrescue_xml, iter_frame_records

__all__ = [
    'run_dvrescue',
    'analyze',
    'analysis_path_for',
    'parse_dvrescue_xml',
    'iter_frame_records',
]
