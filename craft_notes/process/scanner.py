# Path: craft_notes/process/scanner.py
"""
Craft Scanner

Builds the design record table (craft ID -> description) from the
craft directories of a save profile.

Every scan starts from an empty table. Scan order is directory order,
then file name order within a directory; when two files share a craft
ID the first one scanned wins.

No failure is fatal: unreadable, malformed or incomplete files are
logged, recorded in `skipped`, and the scan moves on.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from ..constants import AUTOSAVE_CRAFT_FILE, SkipReason
from ..core.logger import get_process_logger
from ..loaders.craft_data import CraftDataLoader, CraftFileEntry
from ..loaders.craft_reader import CraftReader, CraftRecordError
from ..models import DesignRecord, SkippedCraft


class CraftScanner:
    """
    Scans craft directories into a design record table.

    Example:
        scanner = CraftScanner(config)
        table = scanner.scan([vab_dir, sph_dir])
        # {'4294724440': 'Heavy lifter¤Stage 1 is recoverable'}

        for skipped in scanner.skipped:
            print(skipped.path, skipped.reason.value)
    """

    def __init__(
        self,
        config: Optional[Any] = None,
        loader: Optional[CraftDataLoader] = None,
        reader: Optional[CraftReader] = None,
    ):
        """
        Initialize craft scanner.

        Args:
            config: Optional ConfigLoader; supplies 'autosave_file' and
                    'craft_extension'
            loader: Craft file discovery (defaults to CraftDataLoader)
            reader: Craft file reader (defaults to CraftReader)
        """
        self.logger = get_process_logger('scanner')
        self.loader = loader or CraftDataLoader(config)
        self.reader = reader or CraftReader()

        autosave_file = AUTOSAVE_CRAFT_FILE
        if config is not None:
            autosave_file = config.get('autosave_file', AUTOSAVE_CRAFT_FILE) or autosave_file
        self.autosave_file = autosave_file

        # Diagnostics of the most recent scan
        self.records: list[DesignRecord] = []
        self.skipped: list[SkippedCraft] = []

    def scan(self, directory_paths: Iterable[Path]) -> dict[str, str]:
        """
        Scan craft directories into a fresh design record table.

        Args:
            directory_paths: Craft directories in scan order; missing or
                             empty directories contribute nothing

        Returns:
            Dictionary mapping craft ID to description
        """
        self.records = []
        self.skipped = []
        table: dict[str, str] = {}

        self.logger.info("Scanning .craft files...")

        entries = self.loader.discover_all(Path(d) for d in directory_paths)

        for entry in entries:
            record = self._read_entry(entry)
            if record is None:
                continue

            if record.key in table:
                self._skip(
                    entry.path,
                    SkipReason.DUPLICATE_KEY,
                    f"craft ID {record.key} already read from an earlier file",
                )
                continue

            table[record.key] = record.description
            self.records.append(record)
            self.logger.debug(f"Added craft {record.key} from {entry.filename}")

        self.logger.info(
            f"Scan complete: {len(table)} crafts, {len(self.skipped)} skipped"
        )
        return table

    def _read_entry(self, entry: CraftFileEntry) -> Optional[DesignRecord]:
        """Read one discovered file, recording why it was skipped if it was."""
        if entry.filename == self.autosave_file:
            self._skip(entry.path, SkipReason.AUTOSAVE, "ignoring auto saved craft")
            return None

        try:
            return self.reader.read_craft(entry.path)
        except CraftRecordError as e:
            self._skip(e.path, e.reason, e.detail)
            return None

    def _skip(self, path: Path, reason: SkipReason, detail: str) -> None:
        self.skipped.append(SkippedCraft(path=path, reason=reason, detail=detail))

        message = f"Skipped {path.name} ({reason.value}): {detail}"
        if reason in (SkipReason.UNREADABLE, SkipReason.MALFORMED):
            self.logger.warning(message)
        else:
            self.logger.debug(message)


def scan(directory_paths: Iterable[Path], config: Optional[Any] = None) -> dict[str, str]:
    """Scan craft directories with a one-off CraftScanner."""
    return CraftScanner(config).scan(directory_paths)


__all__ = ['CraftScanner', 'scan']
