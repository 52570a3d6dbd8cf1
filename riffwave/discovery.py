"""WAV file discovery for riffwave."""

from pathlib import Path


class WaveFileDiscovery:
    """Discover WAV files in a directory.

    Matching is case-insensitive on the ``.wav`` extension and the result is
    sorted by file name so scans are reproducible.
    """

    def __init__(self, input_dir: Path) -> None:
        """Initialize the file discovery.

        Args:
            input_dir: Directory to search for WAV files
        """
        self.input_dir = input_dir

    def discover_files(self, *, recursive: bool = False) -> list[Path]:
        """Return WAV files in the input directory.

        Args:
            recursive: Also search subdirectories
        """
        pattern = "*.[wW][aA][vV]"
        found = self.input_dir.rglob(pattern) if recursive else self.input_dir.glob(pattern)
        return sorted((path for path in found if path.is_file()), key=self._sort_key)

    def _sort_key(self, path: Path) -> tuple[str, str]:
        relative = path.relative_to(self.input_dir)
        return (str(relative.parent), relative.name.lower())
