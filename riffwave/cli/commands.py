"""CLI command implementations for riffwave."""

import logging
from itertools import islice
from pathlib import Path
from typing import Optional

import typer
from tqdm import tqdm

from riffwave.cli.utils import _configure_verbosity, _get_output, _load_settings, _sanitize_path
from riffwave.config import SampleType, SettingsLoader
from riffwave.config.generator import ConfigGenerator
from riffwave.config.loader import default_config_path
from riffwave.constants import VERSION
from riffwave.container import decode_file
from riffwave.discovery import WaveFileDiscovery
from riffwave.exceptions import ConfigError, WaveDecodeError
from riffwave.output import OutputHandler, ScanResult

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"riffwave v{VERSION}")
        raise typer.Exit()


def info(
        file: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="WAV file to inspect"
        ),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a riffwave.yaml file"),
        version: Optional[bool] = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Show the format, sample count, duration and metadata of a WAV file."""
    _configure_verbosity(verbose)
    output: OutputHandler = _get_output()

    try:
        settings = _load_settings(config)
        container = decode_file(file, settings)
    except (ConfigError, WaveDecodeError, OSError) as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.container_summary(container, title=file.name)


def samples(
        file: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="WAV file to decode"
        ),
        sample_type: Optional[SampleType] = typer.Option(
            None, "--as", "-t",
            case_sensitive=False,
            help="Destination sample type (defaults to the configured default_sample_type)"
        ),
        limit: int = typer.Option(16, "--limit", "-n", min=0, help="Number of samples to print"),
        offset: int = typer.Option(0, "--offset", min=0, help="Index of the first sample to print"),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a riffwave.yaml file"),
        version: Optional[bool] = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Print decoded samples (interleaved by channel)."""
    _configure_verbosity(verbose)
    output: OutputHandler = _get_output()

    try:
        settings = _load_settings(config)
        container = decode_file(file, settings)
        target = sample_type or settings.default_sample_type
        values = list(islice(container.iter_samples(target, settings), offset, offset + limit))
    except (ConfigError, WaveDecodeError, OSError) as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    logger.debug("Printing %d %s sample(s) from index %d", len(values), target, offset)
    for index, value in enumerate(values, start=offset):
        output.print(f"{index}\t{value}", highlight=False)


def scan(
        input_path: Path = typer.Argument(
            ..., exists=True, file_okay=False, dir_okay=True, readable=True, resolve_path=True,
            help="Directory containing WAV files"
        ),
        recursive: bool = typer.Option(False, "--recursive", "-r", help="Also scan subdirectories"),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a riffwave.yaml file"),
        version: Optional[bool] = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Decode every WAV file in a directory and summarise the results."""
    _configure_verbosity(verbose)
    output: OutputHandler = _get_output()

    try:
        settings = _load_settings(config)
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    files = WaveFileDiscovery(_sanitize_path(input_path)).discover_files(recursive=recursive)
    if not files:
        output.warning(f"No WAV files found in {input_path}")
        return

    results: list[ScanResult] = []
    for path in tqdm(files, desc="Decoding WAV files", unit="file"):
        try:
            results.append(ScanResult(path, container=decode_file(path, settings)))
        except (WaveDecodeError, OSError) as e:
            logger.debug("Failed to decode %s: %s", path, e)
            results.append(ScanResult(path, error=str(e)))

    output.scan_summary(results)

    failed = sum(1 for result in results if not result.ok)
    if failed:
        output.error(f"{failed} of {len(results)} file(s) could not be decoded")
        raise typer.Exit(code=1)


def init_config(
        output_path: Optional[Path] = typer.Argument(
            None, dir_okay=False, help="Where to write the config (default: ./riffwave.yaml)"
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
        minimal: bool = typer.Option(False, "--minimal", help="Omit the documentation header"),
) -> None:
    """Generate an example configuration file."""
    output: OutputHandler = _get_output()
    target = _sanitize_path(output_path) if output_path else default_config_path()

    if target.exists() and not force:
        output.error(f"{target} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target, include_header=not minimal)
    except OSError as e:
        output.error(f"Could not write {target}: {e}")
        raise typer.Exit(code=1)

    output.print(f"[green]Wrote configuration to[/green] {target}")


def validate_config(
        config_path: Path = typer.Argument(
            ..., exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True,
            help="Configuration file to validate"
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Validate a configuration file and print the resulting settings."""
    _configure_verbosity(verbose)
    output: OutputHandler = _get_output()

    try:
        settings = SettingsLoader.from_yaml(config_path).load()
    except ConfigError as e:
        output.error(str(e))
        raise typer.Exit(code=1)

    output.print(f"[green]Configuration is valid:[/green] {config_path}")
    for key, value in settings.model_dump(mode="json").items():
        output.print(f"  {key}: {value}", highlight=False)
