"""Tabular report of planned segments"""

import io
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .models import SegmentDescriptor

# (header, justification)
COLUMNS = (
    ("#", "right"),
    ("Seq", "right"),
    ("PTS range", "left"),
    ("Timecode", "left"),
    ("Recorded", "left"),
    ("Size", "left"),
    ("Video rate", "right"),
    ("Aspect", "left"),
    ("Chroma", "left"),
    ("Audio rate", "right"),
    ("Ch", "right"),
    ("RecStart", "center"),
    ("TC jump", "center"),
    ("Rec jump", "center"),
    ("First", "center"),
)

REPORT_WIDTH = 240

def _text(value) -> str:
    return "" if value is None else str(value)

def _flag(value: bool) -> str:
    return "Y" if value else ""

def _pts_range(segment: SegmentDescriptor) -> str:
    return f"{segment.start_pts}-{segment.end_pts or 'end'}"

def build_table(segments: Iterable[SegmentDescriptor], title: Optional[str] = None) -> Table:
    """Build the rich Table used by format_table and the CLI."""
    table = Table(title=title, box=box.SIMPLE_HEAD, show_edge=False)
    for header, justify in COLUMNS:
        table.add_column(header, justify=justify, no_wrap=True)
    for s in segments:
        table.add_row(
            str(s.ordinal),
            _text(s.sequence_index),
            _pts_range(s),
            _text(s.start_timecode),
            _text(s.start_recording_datetime),
            _text(s.frame_size),
            _text(s.video_rate),
            _text(s.aspect_ratio),
            _text(s.chroma_subsampling),
            _text(s.audio_rate),
            _text(s.channel_count),
            _flag(s.recording_start),
            _flag(s.timecode_jump),
            _flag(s.recording_time_jump),
            _flag(s.first_of_sequence),
        )
    return table

def format_table(segments: Iterable[SegmentDescriptor]) -> str:
    """
    Render segments as a plain text table, one row per segment.

    Nothing is printed; the rendered text is returned.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=REPORT_WIDTH,
        color_system=None,
        force_terminal=False,
        legacy_windows=False
    )
    console.print(build_table(segments))
    return buffer.getvalue()
