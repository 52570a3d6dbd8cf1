"""Command line interface for riffwave."""
