# Path: craft_notes/loaders/craft_data.py
"""
Craft Data Loader for craft_notes

BLIND doorkeeper for craft directories.
Discovers .craft files and provides their paths.
Does NOT load or parse files - CraftReader does that, and the
scanner decides which files to use.

DESIGN PRINCIPLES:
- Non-recursive: each craft directory is flat
- A missing or unreadable directory yields no entries, never an error
- Deterministic order (sorted by file name)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from ..constants import CRAFT_FILE_EXTENSION
from ..core.logger import get_input_logger


@dataclass(frozen=True)
class CraftFileEntry:
    """
    Entry for a discovered craft file.

    Contains only paths. Does NOT contain file contents.

    Attributes:
        directory: Craft directory the file was found in
        path: Full path to the craft file
        filename: File name including extension
    """
    directory: Path
    path: Path
    filename: str


class CraftDataLoader:
    """
    BLIND doorkeeper for craft directories.

    Example:
        loader = CraftDataLoader(config)
        for entry in loader.discover_craft_files(vab_dir):
            print(entry.filename)
    """

    def __init__(self, config: Optional[Any] = None):
        """
        Initialize craft data loader.

        Args:
            config: Optional ConfigLoader; supplies 'craft_extension'
        """
        self.config = config
        self.logger = get_input_logger('craft_data')

        extension = CRAFT_FILE_EXTENSION
        if config is not None:
            extension = config.get('craft_extension', CRAFT_FILE_EXTENSION) or extension
        self.extension = extension.lower()

    def discover_craft_files(self, directory: Path) -> list[CraftFileEntry]:
        """
        Discover craft files directly inside a directory.

        Args:
            directory: Craft directory to list

        Returns:
            List of CraftFileEntry sorted by file name; empty when the
            directory is missing, not a directory, or unreadable
        """
        directory = Path(directory)

        try:
            if not directory.exists():
                self.logger.warning(f"Craft directory not found: {directory}")
                return []

            if not directory.is_dir():
                self.logger.warning(f"Craft path is not a directory: {directory}")
                return []

            children = sorted(directory.iterdir(), key=lambda p: p.name)
            entries = [
                CraftFileEntry(directory=directory, path=child, filename=child.name)
                for child in children
                if child.suffix.lower() == self.extension and child.is_file()
            ]
        except OSError as e:
            self.logger.error(f"Cannot list craft directory {directory}: {e}")
            return []

        self.logger.info(f"Found {len(entries)} craft files in {directory}")
        return entries

    def discover_all(self, directories: Iterable[Path]) -> list[CraftFileEntry]:
        """
        Discover craft files across several directories, keeping
        directory order.
        """
        entries: list[CraftFileEntry] = []
        for directory in directories:
            entries.extend(self.discover_craft_files(directory))
        return entries


__all__ = ['CraftDataLoader', 'CraftFileEntry']
