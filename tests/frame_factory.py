"""Builders for synthetic frame records used across the test suite"""

from dvsplit.models import FrameRecord

NTSC = dict(
    frame_size="720x480",
    video_rate="30000/1001",
    chroma_subsampling="4:1:1",
    aspect_ratio="4/3",
    audio_rate=48000,
    channel_count=2,
)

def frame(seq=0, idx=0, pts="0", **overrides):
    """A single NTSC frame; keyword arguments override any field."""
    values = dict(NTSC, sequence_index=seq, index_in_sequence=idx, pts=pts)
    values.update(overrides)
    return FrameRecord(**values)

def run(seq, count, start=0, end_pts_of_run=None, **overrides):
    """`count` consecutive frames of one physical run, pts numbered from `start`."""
    if end_pts_of_run is None:
        end_pts_of_run = str(start + count)
    return [
        frame(seq, i, str(start + i), end_pts_of_run=end_pts_of_run, **overrides)
        for i in range(count)
    ]
