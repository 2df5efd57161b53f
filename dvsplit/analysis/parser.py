"""dvrescue XML report parsing

A dvrescue report groups frames into <frames> elements, one per physical
run. Technical attributes and the run's pts/end_pts live on <frames>;
per-frame timing, timecode, recording date time and discontinuity flags
live on each <frame>.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, Iterator, List, Optional, Union

from ..exceptions import AnalyzerError
from ..models import FrameRecord

logger = logging.getLogger(__name__)

# FrameRecord field -> attribute name in the report
RUN_ATTRIBUTES = {
    "frame_size": "size",
    "video_rate": "video_rate",
    "chroma_subsampling": "chroma_subsampling",
    "aspect_ratio": "aspect_ratio",
    "audio_rate": "audio_rate",
    "channel_count": "channels",
}
INTEGER_FIELDS = ("audio_rate", "channel_count")

def _local(tag: str) -> str:
    """Strip the XML namespace from a tag"""
    return tag.rsplit("}", 1)[-1]

def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in ("1", "true", "yes")

def _technical(name: str, value: Optional[str]):
    if value is None or value == "":
        return None
    if name in INTEGER_FIELDS:
        try:
            return int(value)
        except ValueError as e:
            raise AnalyzerError(f"Invalid {name} value: {value!r}", module="analysis") from e
    return value

def _frame_record(frame: ET.Element, run: Optional[ET.Element], sequence_index: Optional[int],
                  index_in_sequence: int) -> FrameRecord:
    run_attrs = run.attrib if run is not None else {}
    technical = {}
    for name, attr in RUN_ATTRIBUTES.items():
        # a frame level attribute overrides the run level one
        technical[name] = _technical(name, frame.get(attr, run_attrs.get(attr)))
    return FrameRecord(
        sequence_index=sequence_index,
        index_in_sequence=index_in_sequence,
        pts=frame.get("pts"),
        end_pts_of_run=run_attrs.get("end_pts", ""),
        timecode=frame.get("tc", ""),
        recording_datetime=frame.get("rdt", ""),
        is_recording_start=_flag(frame.get("rec_start")),
        recording_time_discontinuous=_flag(frame.get("rdt_nc")),
        timecode_discontinuous=_flag(frame.get("tc_nc")),
        **technical
    )

def iter_frame_records(source: Union[str, Path, IO]) -> Iterator[FrameRecord]:
    """
    Stream frame records out of a dvrescue XML report.

    The n-th <frames> element becomes sequence n. Frames outside any
    <frames> element get no sequence index and are rejected by the planner.

    Raises:
        AnalyzerError: If the report is not well-formed XML
    """
    run = None
    sequence_index = -1
    index_in_sequence = 0
    try:
        for event, elem in ET.iterparse(source, events=("start", "end")):
            tag = _local(elem.tag)
            if tag == "frames":
                if event == "start":
                    run = elem
                    sequence_index += 1
                    index_in_sequence = 0
                else:
                    run = None
                    elem.clear()
            elif tag == "frame" and event == "end":
                yield _frame_record(
                    elem, run,
                    sequence_index if run is not None else None,
                    index_in_sequence
                )
                index_in_sequence += 1
                elem.clear()
    except ET.ParseError as e:
        raise AnalyzerError(f"Invalid dvrescue report: {e}", module="analysis") from e

def parse_dvrescue_xml(source: Union[str, Path, IO]) -> List[FrameRecord]:
    """Read all frame records of a dvrescue XML report"""
    if isinstance(source, Path):
        source = str(source)
    return list(iter_frame_records(source))
