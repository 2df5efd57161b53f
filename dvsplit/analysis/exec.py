"""dvrescue execution and report caching

Responsibilities:
- Run dvrescue to produce the XML frame report for a DV file
- Reuse an existing report when it is newer than the source
- Load the report into frame records
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..command_jobs import AnalyzeJob
from ..config import ANALYSIS_SUFFIX, DVRESCUE_BIN
from ..exceptions import AnalyzerError
from ..models import FrameRecord
from .parser import parse_dvrescue_xml

logger = logging.getLogger(__name__)

# dvrescue writes here first; renamed onto the report on success
PARTIAL_SUFFIX = ".part"

def analysis_path_for(source: Path) -> Path:
    """Location of the cached dvrescue report for a source file"""
    source = Path(source)
    return source.with_name(source.name + ANALYSIS_SUFFIX)

def build_dvrescue_command(source: Path, xml_path: Path) -> List[str]:
    """Build the dvrescue command writing an XML report"""
    return [DVRESCUE_BIN, str(source), "-x", str(xml_path)]

def run_dvrescue(source: Path, xml_path: Path) -> Path:
    """
    Run dvrescue on a DV file.

    The report is written to a partial file and moved onto `xml_path`
    only when dvrescue succeeds.

    Args:
        source: DV file to analyze
        xml_path: Where the XML report is written

    Returns:
        Path to the XML report.

    Raises:
        AnalyzerError: If dvrescue fails or writes no report
    """
    logger.info("Analyzing %s with dvrescue", source.name)
    partial_path = xml_path.with_name(xml_path.name + PARTIAL_SUFFIX)
    try:
        AnalyzeJob(build_dvrescue_command(source, partial_path)).execute()
        if not partial_path.exists():
            raise AnalyzerError(f"dvrescue produced no report at {partial_path}", module="analysis")
    except AnalyzerError:
        partial_path.unlink(missing_ok=True)
        raise
    partial_path.replace(xml_path)
    return xml_path

def _cache_is_fresh(source: Path, xml_path: Path) -> bool:
    if not xml_path.exists():
        return False
    return xml_path.stat().st_mtime >= source.stat().st_mtime

def analyze(source: Path, cache: bool = True, xml_path: Optional[Path] = None) -> List[FrameRecord]:
    """
    Get the frame records for a DV file.

    A cached report next to the source is reused when it is at least as
    recent as the source and caching is enabled.
    """
    source = Path(source)
    if not source.exists():
        raise AnalyzerError(f"Input {source} does not exist", module="analysis")
    xml_path = Path(xml_path) if xml_path is not None else analysis_path_for(source)

    if cache and _cache_is_fresh(source, xml_path):
        logger.info("Using cached analysis: %s", xml_path.name)
    else:
        run_dvrescue(source, xml_path)

    frames = parse_dvrescue_xml(xml_path)
    logger.info("Read %d frame(s) from %s", len(frames), xml_path.name)
    return frames
