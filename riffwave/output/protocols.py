"""Output surface used by the riffwave commands."""

from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple, Protocol, runtime_checkable

from riffwave.container.models import WaveContainer


class ScanResult(NamedTuple):
    """Outcome of decoding one file during a directory scan.

    Exactly one of ``container`` and ``error`` is set.
    """

    path: Path
    container: WaveContainer | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.container is not None


@runtime_checkable
class OutputHandler(Protocol):
    """Where commands send messages, container summaries and scan reports."""

    def print(self, message: str, **kwargs) -> None:
        """Print a line as-is (markup allowed)."""
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def container_summary(self, container: WaveContainer, title: str | None = None) -> None:
        """Show the format, counts and metadata of one decoded file."""
        ...

    def scan_summary(self, results: Sequence[ScanResult]) -> None:
        """Show one row per scanned file."""
        ...
