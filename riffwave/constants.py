"""Package-wide constants for riffwave."""

VERSION = "0.1.0"
