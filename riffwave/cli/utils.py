"""CLI utility functions for riffwave."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from riffwave.config import DecoderSettings, SettingsLoader
from riffwave.output import ConsoleOutputHandler, OutputHandler

logger = logging.getLogger(__name__)


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _configure_verbosity(verbose: bool) -> None:
    """Set the root logger level from the ``--verbose`` flag."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def _load_settings(config_path: Optional[Path]) -> DecoderSettings:
    """Resolve and load decoder settings for a command.

    Raises:
        ConfigValidationError: If the configuration is missing or invalid
    """

    override = _sanitize_path(config_path) if config_path else None
    return SettingsLoader.resolve(override).load()


def _get_output() -> OutputHandler:
    """Create the output handler a command reports through."""

    return ConsoleOutputHandler()
