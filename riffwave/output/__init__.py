"""Output handling package for riffwave."""
from riffwave.output.protocols import OutputHandler, ScanResult
from riffwave.output.console import ConsoleOutputHandler, format_duration

__all__ = [
    "OutputHandler",
    "ScanResult",
    "ConsoleOutputHandler",
    "format_duration",
]
