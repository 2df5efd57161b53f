"""Helper functions for building extraction requests and ffmpeg commands"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import ffmpeg

from ..config import FFMPEG_BIN, OUTPUT_NAME_TEMPLATE
from ..models import SegmentDescriptor
from ..options import ExtractionOptions
from ..utils import to_iso_datetime

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class ExtractionRequest:
    """Everything the transcoder needs to write one segment."""
    ordinal: int
    source: Path
    start_pts: str
    end_pts: Optional[str]
    output: Path
    timecode_metadata: Dict[str, str] = field(default_factory=dict)
    technical_metadata: Dict[str, object] = field(default_factory=dict)

    @property
    def is_unbounded(self) -> bool:
        return not self.end_pts

def output_path_for(source: Path, segment: SegmentDescriptor, options: ExtractionOptions) -> Path:
    """Output file for a segment, numbered by its ordinal"""
    source = Path(source)
    directory = options.output_dir if options.output_dir is not None else source.parent
    name = OUTPUT_NAME_TEMPLATE.format(
        stem=source.stem,
        ordinal=segment.ordinal,
        extension=options.extension
    )
    return Path(directory) / name

def build_request(source: Path, segment: SegmentDescriptor, options: ExtractionOptions) -> ExtractionRequest:
    """Derive the extraction request for a planned segment"""
    timecode_metadata = {}
    if segment.start_timecode:
        timecode_metadata["timecode"] = segment.start_timecode
    if segment.start_recording_datetime:
        timecode_metadata["creation_time"] = to_iso_datetime(segment.start_recording_datetime)
    return ExtractionRequest(
        ordinal=segment.ordinal,
        source=Path(source),
        start_pts=segment.start_pts,
        end_pts=segment.end_pts or None,
        output=output_path_for(source, segment, options),
        timecode_metadata=timecode_metadata,
        technical_metadata=segment.technical_metadata(),
    )

def build_extraction_command(request: ExtractionRequest, overwrite: bool = True) -> List[str]:
    """
    Build the ffmpeg command that stream-copies one segment.

    An unbounded request has no -to and runs through the end of the source.
    """
    input_kwargs = {"ss": request.start_pts}
    if not request.is_unbounded:
        input_kwargs["to"] = request.end_pts

    output_kwargs = {"map": "0", "c": "copy"}
    if "timecode" in request.timecode_metadata:
        output_kwargs["timecode"] = request.timecode_metadata["timecode"]
    if "creation_time" in request.timecode_metadata:
        output_kwargs["metadata"] = f"creation_time={request.timecode_metadata['creation_time']}"

    stream = (
        ffmpeg
        .input(str(request.source), **input_kwargs)
        .output(str(request.output), **output_kwargs)
        .global_args("-hide_banner", "-loglevel", "warning")
    )
    if overwrite:
        stream = stream.overwrite_output()
    cmd = stream.compile(cmd=FFMPEG_BIN)
    log.debug("Extraction command for segment %d: %s", request.ordinal, " ".join(cmd))
    return cmd
