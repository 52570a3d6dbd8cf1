"""Configuration file generator for riffwave."""

from pathlib import Path

import yaml

from riffwave.config.defaults import DECODER
from riffwave.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# riffwave Configuration File
# ===========================
#
# DECODER SECTION
# ---------------
#   text_encoding:          Encoding of LIST/INFO text fields (default utf-8).
#                           Undecodable bytes are replaced, never fatal.
#   strip_text_terminators: Strip trailing NUL bytes from INFO text (default true).
#   strict_frame_alignment: Reject sample data whose length is not a multiple
#                           of the frame size (default false: trailing bytes
#                           that do not form a whole sample are dropped).
#   default_sample_type:    One of u8, i16, i32, i64, f32, f64. Used by the
#                           `samples` command when --as is not given.

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(self, decoder: dict | None = None) -> None:
        """Initialize the config generator.

        Args:
            decoder: Decoder settings (uses defaults if None)
        """
        self.decoder = decoder if decoder is not None else dict(DECODER)

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'decoder': self.decoder,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
