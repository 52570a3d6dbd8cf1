"""CLI application definition for riffwave."""

import typer

from riffwave.cli.commands import info, init_config, samples, scan, validate_config

app = typer.Typer(
    add_completion=False,
    help="RIFF/WAVE inspector - decode WAV headers, metadata and samples.",
    no_args_is_help=True,
)

# Register commands
app.command(name="info", help="Show format and metadata of a WAV file")(info)
app.command(name="samples", help="Print decoded samples of a WAV file")(samples)
app.command(name="scan", help="Decode every WAV file in a directory")(scan)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
