"""Frame and segment records shared by the analyzer, planner and reports"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SplitReason(str, Enum):
    """Why a segment begins at its first frame."""
    STREAM_START = "stream-start"
    TECHNICAL_CHANGE = "technical-change"
    RECORDING_START = "recording-start"
    RECORDING_TIME_GAP = "recording-time-gap"
    TIMECODE_GAP = "timecode-gap"

    def __str__(self) -> str:
        return self.value


TECHNICAL_FIELDS = (
    "frame_size",
    "video_rate",
    "chroma_subsampling",
    "aspect_ratio",
    "audio_rate",
    "channel_count",
)


@dataclass(frozen=True)
class FrameRecord:
    """
    Metadata of one decoded DV frame, as reported by the analyzer.

    Attributes:
        sequence_index: Physical capture run containing the frame
        index_in_sequence: Position inside that run, 0 for its first frame
        pts: Presentation time of the frame
        end_pts_of_run: End time of the physical run, shared by its frames
        timecode: Display timecode, may be empty
        recording_datetime: Recording date and time, may be empty
        is_recording_start: Camera record button was pressed at this frame
        recording_time_discontinuous: Recording time jumps at this frame
        timecode_discontinuous: Timecode jumps at this frame
    """
    sequence_index: Optional[int] = None
    index_in_sequence: int = 0
    pts: Optional[str] = None
    end_pts_of_run: str = ""
    timecode: str = ""
    recording_datetime: str = ""
    frame_size: Optional[str] = None
    video_rate: Optional[str] = None
    chroma_subsampling: Optional[str] = None
    aspect_ratio: Optional[str] = None
    audio_rate: Optional[int] = None
    channel_count: Optional[int] = None
    is_recording_start: bool = False
    recording_time_discontinuous: bool = False
    timecode_discontinuous: bool = False

    @property
    def is_first_of_sequence(self) -> bool:
        return self.index_in_sequence == 0

    def technical_attributes(self) -> Tuple:
        """Technical attributes in a fixed order, for equality checks."""
        return tuple(getattr(self, name) for name in TECHNICAL_FIELDS)


@dataclass(frozen=True)
class SegmentDescriptor:
    """
    One planned output segment.

    Representative attributes are copied from the first frame. An empty
    end_pts means the segment runs through the end of the source.
    """
    ordinal: int
    sequence_index: int
    start_pts: str
    end_pts: str
    start_timecode: str
    start_recording_datetime: str
    frame_size: Optional[str]
    video_rate: Optional[str]
    chroma_subsampling: Optional[str]
    aspect_ratio: Optional[str]
    audio_rate: Optional[int]
    channel_count: Optional[int]
    triggered_by: SplitReason
    recording_start: bool = False
    timecode_jump: bool = False
    recording_time_jump: bool = False
    first_of_sequence: bool = False
    first_frame: int = 0
    frame_count: int = 0

    @property
    def is_open_ended(self) -> bool:
        return not self.end_pts

    @property
    def frame_range(self) -> range:
        """Stream positions of the frames this segment covers."""
        return range(self.first_frame, self.first_frame + self.frame_count)

    def technical_metadata(self) -> dict:
        return {name: getattr(self, name) for name in TECHNICAL_FIELDS}
