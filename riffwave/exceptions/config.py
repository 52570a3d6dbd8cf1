"""Configuration-related exceptions for riffwave."""

from pydantic import ValidationError

from riffwave.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when user-provided decoder settings fail
    validation due to incorrect data types, unknown keys or constraint
    violations defined in the Pydantic models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing sections, wrong types)
    - Unsupported schema version
    """
    pass
