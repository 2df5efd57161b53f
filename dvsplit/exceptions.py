"""Custom exceptions for the dvsplit pipeline"""

class DvSplitError(Exception):
    """Base exception for all dvsplit errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class MalformedInputError(DvSplitError):
    """A frame record violates the required field contract"""
    def __init__(self, message: str, module: str = None, frame_position: int = None):
        self.frame_position = frame_position
        super().__init__(f"Malformed input: {message}", module)

class ConfigurationError(DvSplitError):
    """Unrecognized or contradictory configuration"""

class CommandExecutionError(DvSplitError):
    """An external command failed"""

class AnalyzerError(DvSplitError):
    """dvrescue could not be run or its report could not be read"""

class ExtractionFailure(DvSplitError):
    """Extraction of a single segment failed"""
    def __init__(self, message: str, module: str = None, ordinal: int = None):
        self.ordinal = ordinal
        super().__init__(f"Extraction error: {message}", module)
