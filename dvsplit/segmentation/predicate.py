"""Change predicate deciding whether a frame starts a new segment"""

from typing import Optional, Tuple

from ..models import FrameRecord, SplitReason
from ..options import SplitOptions


def should_start_new_segment(
    previous: Optional[FrameRecord],
    current: FrameRecord,
    options: SplitOptions
) -> Tuple[bool, Optional[SplitReason]]:
    """
    Decide whether `current` begins a new segment.

    Triggers are checked in priority order: technical change, recording
    start, recording time gap, timecode gap. Only the first enabled trigger
    that fires is reported.

    Args:
        previous: The frame just before `current`, or None at stream start.
        current: The frame being classified.
        options: Active split options.

    Returns:
        (True, reason) when a segment starts here, else (False, None).
    """
    if previous is None:
        return True, SplitReason.STREAM_START

    if not options.ignore_technical_changes and \
            previous.technical_attributes() != current.technical_attributes():
        return True, SplitReason.TECHNICAL_CHANGE
    if options.split_on_recording_start and current.is_recording_start:
        return True, SplitReason.RECORDING_START
    if options.split_on_recording_time_gap and current.recording_time_discontinuous:
        return True, SplitReason.RECORDING_TIME_GAP
    if options.split_on_timecode_gap and current.timecode_discontinuous:
        return True, SplitReason.TIMECODE_GAP
    return False, None
