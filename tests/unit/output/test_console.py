"""Unit tests for console output handler."""

from datetime import timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.table import Table

from riffwave.config.enums import CodecTag
from riffwave.container.models import AudioMetadata
from riffwave.output import ConsoleOutputHandler, OutputHandler, ScanResult, format_duration


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (59, "00:59"),
        (61, "01:01"),
        (3725, "62:05"),
    ])
    def test_minutes_and_seconds(self, seconds: int, expected: str) -> None:
        """Test durations render as zero-padded MM:SS."""
        assert format_duration(timedelta(seconds=seconds)) == expected


class TestConsoleOutputHandler:
    """Tests for ConsoleOutputHandler."""

    @pytest.fixture
    def handler(self, mock_console: MagicMock) -> ConsoleOutputHandler:
        """Create a ConsoleOutputHandler with mocked console."""
        return ConsoleOutputHandler(mock_console)

    def test_implements_protocol(self, handler: ConsoleOutputHandler) -> None:
        """Test the handler satisfies the OutputHandler protocol."""
        assert isinstance(handler, OutputHandler)

    def test_message_levels(self, handler: ConsoleOutputHandler, mock_console: MagicMock) -> None:
        """Test info, warning and error formatting."""
        handler.info("hello")
        handler.warning("careful")
        handler.error("broken")

        assert [call.args[0] for call in mock_console.print.call_args_list] == [
            "hello",
            "[yellow]Warning:[/yellow] careful",
            "[red]Error:[/red] broken",
        ]

    def test_container_summary(self, handler: ConsoleOutputHandler, mock_console: MagicMock, container_factory) -> None:
        """Test the summary is printed as a single table with metadata rows."""
        container = container_factory(
            sample_data=b"\x00" * 8,
            channels=2,
            bits=16,
            metadata=AudioMetadata(name="Test", artist="Someone"),
        )

        handler.container_summary(container, title="tone.wav")

        mock_console.print.assert_called_once()
        table = mock_console.print.call_args.args[0]
        assert isinstance(table, Table)
        assert table.title == "tone.wav"
        assert table.row_count == 10

    def test_container_summary_extensible(
        self, handler: ConsoleOutputHandler, mock_console: MagicMock, container_factory
    ) -> None:
        """Test extensible fields add three rows."""
        container = container_factory(
            codec=CodecTag.WAVE_EXTENSIBLE,
            valid_bits_per_sample=24,
            channel_mask=0x3,
            sub_format=b"\x01" + b"\x00" * 15,
        )

        handler.container_summary(container)

        table = mock_console.print.call_args.args[0]
        assert table.row_count == 11

    def test_scan_summary(self, handler: ConsoleOutputHandler, mock_console: MagicMock, container_factory) -> None:
        """Test one row is printed per scanned file, failed or not."""
        results = [
            ScanResult(Path("a.wav"), container_factory(sample_data=b"\x00\x00")),
            ScanResult(Path("b.wav"), error="Source has invalid RIFF WAVE header"),
        ]

        handler.scan_summary(results)

        table = mock_console.print.call_args.args[0]
        assert isinstance(table, Table)
        assert table.row_count == 2
        assert [result.ok for result in results] == [True, False]
