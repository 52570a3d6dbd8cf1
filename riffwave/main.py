"""Entry point for the riffwave CLI.

This module exposes a Typer-powered command-line interface for inspecting
RIFF/WAVE files and dumping their decoded samples.
"""

from riffwave.cli.app import app


if __name__ == "__main__":
    app()
