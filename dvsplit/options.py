"""Per-run options for planning and extraction

Options are plain dataclasses validated on construction. Invalid or
unknown values raise ConfigurationError before any planning starts.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import DEFAULT_EXTENSION, MAX_ATTEMPTS
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class SplitOptions:
    """Which conditions start a new segment."""
    ignore_technical_changes: bool = False
    split_on_recording_start: bool = False
    split_on_recording_time_gap: bool = False
    split_on_timecode_gap: bool = False

    def __post_init__(self) -> None:
        validate_split_options(self)

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "SplitOptions":
        """Build options from a mapping, rejecting unrecognized keys."""
        values = dict(values or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(
                f"Unrecognized split option(s): {', '.join(unknown)}",
                module="options"
            )
        return cls(**values)


@dataclass(frozen=True)
class ExtractionOptions:
    """Where and how segments are written."""
    output_dir: Optional[Path] = None
    extension: str = DEFAULT_EXTENSION
    max_workers: Optional[int] = None
    max_attempts: int = MAX_ATTEMPTS
    overwrite: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.output_dir, str):
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        validate_extraction_options(self)


def validate_split_options(options: SplitOptions) -> None:
    """Validate split options."""
    for f in fields(options):
        value = getattr(options, f.name)
        if not isinstance(value, bool):
            raise ConfigurationError(
                f"{f.name} must be a boolean, got {value!r}",
                module="options"
            )


def validate_extraction_options(options: ExtractionOptions) -> None:
    """Validate extraction options."""
    ext = options.extension
    if not isinstance(ext, str) or not ext:
        raise ConfigurationError(f"Invalid output extension: {ext!r}", module="options")
    if not ext.isalnum():
        raise ConfigurationError(f"Output extension '{ext}' must be alphanumeric", module="options")
    if options.max_workers is not None:
        if isinstance(options.max_workers, bool) or not isinstance(options.max_workers, int) \
                or options.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be a positive integer: {options.max_workers!r}",
                module="options"
            )
    if isinstance(options.max_attempts, bool) or not isinstance(options.max_attempts, int) \
            or options.max_attempts < 1:
        raise ConfigurationError(
            f"max_attempts must be a positive integer: {options.max_attempts!r}",
            module="options"
        )
    if not isinstance(options.overwrite, bool):
        raise ConfigurationError("overwrite must be a boolean", module="options")
