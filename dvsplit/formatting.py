"""Rich-based console output for dvsplit runs"""

from typing import Sequence

from rich.console import Console
from rich.text import Text

from .models import SegmentDescriptor
from .report import build_table

console = Console()

def _status(symbol: str, symbol_style: str, message: str, style: str = "bold") -> None:
    console.print(Text(f"{symbol} ", style=symbol_style) + Text(message, style=style))

def print_check(message: str) -> None:
    """Print a checkmark message in bold green."""
    _status("✓", "bold green", message)

def print_warning(message: str) -> None:
    """Print a warning message in bold yellow."""
    _status("⚠", "bold yellow", message)

def print_error(message: str) -> None:
    """Print an error message in bold red."""
    _status("✗", "bold red", message)

def print_info(message: str) -> None:
    _status("ℹ", "bold blue", message, style="blue")

def print_header(title: str, width: int = 80) -> None:
    """Print a title between two rules."""
    console.rule(style="bold blue")
    console.print(title.center(width).rstrip(), style="bold blue")
    console.rule(style="bold blue")

def print_plan(source_name: str, segments: Sequence[SegmentDescriptor]) -> None:
    """Print the segment table for one source file."""
    if not segments:
        print_warning(f"{source_name}: no frames, nothing to split")
        return
    console.print(build_table(segments, title=f"{source_name}: {len(segments)} segment(s)"))

def print_summary(source_name: str, summary: dict) -> None:
    """Print the extraction outcome for one source file."""
    if summary["failed"]:
        failed = ", ".join(str(o) for o in summary["failed_ordinals"])
        print_error(
            f"{source_name}: {summary['succeeded']}/{summary['total']} segment(s) extracted, "
            f"failed: {failed}"
        )
    else:
        print_check(f"{source_name}: {summary['succeeded']}/{summary['total']} segment(s) extracted")
