"""Segment planner

Responsibilities:
  - Validate each frame record as it is consumed
  - Fold the ordered frame sequence into segments using the change predicate
  - Resolve each segment's end bound when the segment is closed
  - Number segments in emission order

The fold never looks back: a segment is closed while the frame that
starts the next one is in hand, which is exactly what is needed to
resolve the closing segment's end bound.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..exceptions import MalformedInputError
from ..models import FrameRecord, SegmentDescriptor, SplitReason
from ..options import SplitOptions
from .predicate import should_start_new_segment

logger = logging.getLogger(__name__)


class _SegmentAccumulator:
    """Open segment owned by the planner fold."""

    def __init__(self, first: FrameRecord, position: int, reason: SplitReason):
        self.first = first
        self.position = position
        self.reason = reason
        self.last = first
        self.count = 1

    def extend(self, frame: FrameRecord) -> None:
        self.last = frame
        self.count += 1

    def close(self, ordinal: int, end_pts: str) -> SegmentDescriptor:
        first = self.first
        return SegmentDescriptor(
            ordinal=ordinal,
            sequence_index=first.sequence_index,
            start_pts=first.pts,
            end_pts=end_pts or "",
            start_timecode=first.timecode or "",
            start_recording_datetime=first.recording_datetime or "",
            frame_size=first.frame_size,
            video_rate=first.video_rate,
            chroma_subsampling=first.chroma_subsampling,
            aspect_ratio=first.aspect_ratio,
            audio_rate=first.audio_rate,
            channel_count=first.channel_count,
            triggered_by=self.reason,
            recording_start=first.is_recording_start,
            timecode_jump=first.timecode_discontinuous,
            recording_time_jump=first.recording_time_discontinuous,
            first_of_sequence=first.is_first_of_sequence,
            first_frame=self.position,
            frame_count=self.count,
        )


def _check_frame(frame: FrameRecord, position: int, previous: Optional[FrameRecord]) -> None:
    """Raise MalformedInputError if the frame cannot be planned exactly."""
    if frame.pts is None or frame.pts == "":
        raise MalformedInputError(
            f"frame {position} has no pts", module="planner", frame_position=position
        )
    if frame.sequence_index is None:
        raise MalformedInputError(
            f"frame {position} has no sequence_index", module="planner", frame_position=position
        )
    if previous is not None and frame.sequence_index < previous.sequence_index:
        raise MalformedInputError(
            f"frame {position} goes back from sequence {previous.sequence_index} "
            f"to {frame.sequence_index}",
            module="planner",
            frame_position=position
        )


def _starts_new_run(previous: FrameRecord, current: FrameRecord) -> bool:
    return current.sequence_index != previous.sequence_index or current.index_in_sequence == 0


def _resolve_end_pts(last: FrameRecord, following: FrameRecord) -> str:
    """
    End bound of a segment whose last frame is `last`, closed by `following`.

    At a physical run boundary the run's own end applies; inside a run the
    next segment's start is the bound so extraction ranges never overlap.
    """
    if _starts_new_run(last, following):
        return last.end_pts_of_run or following.pts
    return following.pts


def iter_segments(
    frames: Iterable[FrameRecord],
    options: Optional[SplitOptions] = None
) -> Iterator[SegmentDescriptor]:
    """
    Yield segment descriptors in order as they are closed.

    A segment is yielded only once its end bound is known. Closing the
    generator early drops the segment still being accumulated.

    Raises:
        MalformedInputError: If a frame lacks pts or sequence_index, or
            its sequence_index goes backwards.
    """
    options = options or SplitOptions()
    current: Optional[_SegmentAccumulator] = None
    previous: Optional[FrameRecord] = None
    ordinal = 0

    for position, frame in enumerate(frames):
        _check_frame(frame, position, previous)
        split, reason = should_start_new_segment(previous, frame, options)
        if split:
            if current is not None:
                ordinal += 1
                segment = current.close(ordinal, _resolve_end_pts(previous, frame))
                logger.debug(
                    "Closed segment %d: frames %d-%d, %s -> %s",
                    segment.ordinal, segment.first_frame,
                    segment.first_frame + segment.frame_count - 1,
                    segment.start_pts, segment.end_pts
                )
                yield segment
            logger.debug("Frame %d starts a new segment (%s)", position, reason)
            current = _SegmentAccumulator(frame, position, reason)
        else:
            current.extend(frame)
        previous = frame

    if current is not None:
        ordinal += 1
        segment = current.close(ordinal, previous.end_pts_of_run)
        if segment.is_open_ended:
            logger.debug("Segment %d is open ended", segment.ordinal)
        yield segment


def plan(
    frames: Iterable[FrameRecord],
    options: Optional[SplitOptions] = None
) -> List[SegmentDescriptor]:
    """
    Plan the complete list of segments for a frame sequence.

    Args:
        frames: Frame records in stream order.
        options: Split options, defaults to splitting on technical changes only.

    Returns:
        Segment descriptors ordered by ordinal. Empty for an empty input.
    """
    segments = list(iter_segments(frames, options))
    logger.info("Planned %d segment(s)", len(segments))
    return segments
