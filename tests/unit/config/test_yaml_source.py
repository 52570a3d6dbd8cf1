"""Tests for YAML configuration source."""

import pytest
from pathlib import Path

from riffwave.config.protocols import ConfigSource
from riffwave.config.yaml_source import YAMLConfigSource
from riffwave.exceptions import ConfigError, YAMLConfigError


class TestYAMLConfigSource:
    """Tests for YAMLConfigSource class."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid YAML configuration."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("""
schema_version: 1
decoder:
  text_encoding: latin-1
  strict_frame_alignment: true
""")
        source = YAMLConfigSource(config_file)
        raw = source.load()

        assert raw.values == {"text_encoding": "latin-1", "strict_frame_alignment": True}
        assert raw.schema_version == 1
        assert raw.origin == f"YAML file: {config_file}"
        assert source.config_path == config_file

    def test_implements_protocol(self, tmp_path: Path) -> None:
        """Test the source satisfies the ConfigSource protocol."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("decoder: {}\n")
        source = YAMLConfigSource(config_file)
        assert isinstance(source, ConfigSource)

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test loading from non-existent file."""
        with pytest.raises(YAMLConfigError, match="not found"):
            YAMLConfigSource(tmp_path / "missing.yaml")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        """Test a directory path is refused."""
        with pytest.raises(YAMLConfigError, match="not a file"):
            YAMLConfigSource(tmp_path)

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test loading invalid YAML syntax."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("decoder:\n  text_encoding: [utf-8\n")

        source = YAMLConfigSource(config_file)
        with pytest.raises(YAMLConfigError, match="Failed to parse"):
            source.load()

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file is reported as such."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("")

        with pytest.raises(YAMLConfigError, match="empty"):
            YAMLConfigSource(config_file).load()

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test a top-level list is refused."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(YAMLConfigError, match="must be a YAML mapping"):
            YAMLConfigSource(config_file).load()

    def test_missing_decoder_section_uses_defaults(self, tmp_path: Path) -> None:
        """Test the decoder section is optional."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("schema_version: 1\n")

        assert YAMLConfigSource(config_file).load().values == {}

    def test_null_decoder_section(self, tmp_path: Path) -> None:
        """Test an empty decoder key is treated as no overrides."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("decoder:\n")

        assert YAMLConfigSource(config_file).load().values == {}

    def test_decoder_section_must_be_mapping(self, tmp_path: Path) -> None:
        """Test a non-mapping decoder section is refused."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("decoder: [1, 2]\n")

        with pytest.raises(YAMLConfigError, match="'decoder' must be a mapping"):
            YAMLConfigSource(config_file).load()

    @pytest.mark.parametrize("value", ["'1'", "true", "1.5"])
    def test_schema_version_must_be_integer(self, tmp_path: Path, value: str) -> None:
        """Test non-integer schema versions are refused."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text(f"schema_version: {value}\n")

        with pytest.raises(YAMLConfigError, match="must be an integer"):
            YAMLConfigSource(config_file).load()

    def test_future_schema_version(self, tmp_path: Path) -> None:
        """Test newer schema versions are refused."""
        config_file = tmp_path / "riffwave.yaml"
        config_file.write_text("schema_version: 2\n")

        with pytest.raises(YAMLConfigError, match="not supported"):
            YAMLConfigSource(config_file).load()

    def test_errors_are_config_errors(self, tmp_path: Path) -> None:
        """Test YAML errors can be caught as ConfigError."""
        with pytest.raises(ConfigError):
            YAMLConfigSource(tmp_path / "missing.yaml")
