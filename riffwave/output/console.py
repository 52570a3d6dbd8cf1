"""Console-based output handler for riffwave."""

from collections.abc import Sequence
from datetime import timedelta

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from riffwave.container.models import WaveContainer
from riffwave.output.protocols import ScanResult


def format_duration(duration: timedelta) -> str:
    """Render a duration as MM:SS (minutes are not wrapped at an hour)."""
    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    return f"{minutes:02d}:{seconds:02d}"


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {escape(message)}")

    def container_summary(self, container: WaveContainer, title: str | None = None) -> None:
        """Print the format, counts and metadata of a decoded container."""
        table = Table(title=title, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Codec", container.codec.label)
        table.add_row("Channels", str(container.channels))
        table.add_row("Sample rate", f"{container.sample_rate} Hz")
        table.add_row("Data rate", f"{container.data_rate} B/s")
        table.add_row("Block align", f"{container.frame_size} B")
        table.add_row("Bits per sample", str(container.bits_per_sample))
        table.add_row("Samples", str(container.num_of_samples))
        table.add_row("Duration", format_duration(container.duration))

        if container.is_extensible:
            table.add_row("Valid bits", str(container.valid_bits_per_sample))
            table.add_row("Channel mask", f"0x{container.channel_mask:08x}")
            table.add_row("Sub-format", container.sub_format.hex())

        for key, value in container.metadata.present().items():
            table.add_row(key.capitalize(), escape(value))

        self.console.print(table)

    def scan_summary(self, results: Sequence[ScanResult]) -> None:
        """Print one row per scanned file: its format, or the error it raised."""
        table = Table(title="Scan results")
        table.add_column("File", style="cyan")
        table.add_column("Codec")
        table.add_column("Channels", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Bits", justify="right")
        table.add_column("Duration", justify="right")
        table.add_column("Status")

        for result in results:
            container = result.container
            if container is None:
                table.add_row(result.path.name, "", "", "", "", "", f"[red]{escape(result.error or '')}[/red]")
                continue
            table.add_row(
                result.path.name,
                container.codec.label,
                str(container.channels),
                str(container.sample_rate),
                str(container.bits_per_sample),
                format_duration(container.duration),
                "[green]ok[/green]",
            )

        self.console.print(table)
