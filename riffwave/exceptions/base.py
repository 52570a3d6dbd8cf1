"""Base exception classes for riffwave."""


class WaveDecodeError(Exception):
    """Base class for every failure raised while decoding a WAVE container.

    A decode either returns a fully populated container or raises exactly one
    subclass of this error identifying the violated structural or format rule.
    There is no partial result.
    """


class ConfigError(Exception):
    """Base class for user-facing configuration errors.

    All configuration-related exceptions inherit from this class to ensure
    consistent error handling and user messaging throughout the application.
    """
