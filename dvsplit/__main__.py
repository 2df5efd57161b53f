"""
Command-line interface for dvsplit
"""
import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import DEFAULT_EXTENSION, DVRESCUE_BIN, FFMPEG_BIN, MAX_ATTEMPTS
from .exceptions import ConfigurationError
from .formatting import print_error, print_info
from .logging import configure_logging
from .options import ExtractionOptions, SplitOptions
from .pipeline import process_inputs
from .utils import check_dependencies

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="dvsplit",
        description="Split DV captures into parts at technical and continuity changes"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default from config)"
    )
    parser.add_argument(
        "-s", "--ignore-technical-changes",
        dest="ignore_technical_changes",
        action="store_true",
        help="Do not split when frame size, rates, aspect ratio or channels change"
    )
    parser.add_argument(
        "-r", "--split-on-recording-start",
        dest="split_on_recording_start",
        action="store_true",
        help="Split where the camera started a new recording"
    )
    parser.add_argument(
        "-d", "--split-on-recording-time-gap",
        dest="split_on_recording_time_gap",
        action="store_true",
        help="Split where the recording date/time jumps"
    )
    parser.add_argument(
        "-t", "--split-on-timecode-gap",
        dest="split_on_timecode_gap",
        action="store_true",
        help="Split where the timecode jumps"
    )
    parser.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        type=Path,
        default=None,
        help="Directory for the parts (default: next to each input)"
    )
    parser.add_argument(
        "-e", "--extension",
        default=DEFAULT_EXTENSION,
        help="Output container extension (default: %(default)s)"
    )
    parser.add_argument(
        "-j", "--jobs",
        dest="max_workers",
        type=int,
        default=None,
        help="Number of parallel extractions (default: CPU count)"
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=MAX_ATTEMPTS - 1,
        help="Extra attempts for a failed extraction (default: %(default)s)"
    )
    parser.add_argument(
        "-n", "--report-only",
        dest="report_only",
        action="store_true",
        help="Only print the planned segments"
    )
    parser.add_argument(
        "--no-cache",
        dest="cache",
        action="store_false",
        help="Always rerun dvrescue instead of reusing an existing report"
    )
    parser.add_argument(
        "inputs",
        type=Path,
        nargs="+",
        help="DV files to split"
    )
    return parser.parse_args(argv)

def build_options(args) -> tuple:
    """Build split and extraction options from parsed arguments"""
    split_options = SplitOptions.from_mapping({
        "ignore_technical_changes": args.ignore_technical_changes,
        "split_on_recording_start": args.split_on_recording_start,
        "split_on_recording_time_gap": args.split_on_recording_time_gap,
        "split_on_timecode_gap": args.split_on_timecode_gap,
    })
    extraction_options = ExtractionOptions(
        output_dir=args.output_dir,
        extension=args.extension,
        max_workers=args.max_workers,
        max_attempts=args.retries + 1,
    )
    return split_options, extraction_options

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level)
    log = logging.getLogger("dvsplit")

    try:
        split_options, extraction_options = build_options(args)
    except ConfigurationError as e:
        print_error(e.message)
        return 1

    required = [DVRESCUE_BIN] if args.report_only else [DVRESCUE_BIN, FFMPEG_BIN]
    if not check_dependencies(required):
        log.error("Missing required dependencies")
        return 1

    print_info(f"dvsplit v{__version__}: {len(args.inputs)} input(s)")
    try:
        if process_inputs(args.inputs, split_options, extraction_options,
                          report_only=args.report_only, cache=args.cache):
            return 0
    except KeyboardInterrupt:
        log.warning("Interrupted by user")
        return 130
    return 1

if __name__ == "__main__":
    sys.exit(main())
