# Path: craft_notes/loaders/craft_reader.py
"""
Craft File Reader for craft_notes

Reads and interprets .craft files.
Works with paths provided by CraftDataLoader.

RESPONSIBILITY: Turn one .craft file into a DesignRecord:
    - key: craft ID of the root part (first PART node)
    - description: the document's 'description' value ('' if absent)

The root part's 'part' value is '<part name>_<craft id>'. The part
name is session-scoped and may itself contain '_', so only the text
after the LAST '_' is used as the key.
"""

from pathlib import Path
from typing import Optional

from ..constants import SkipReason
from ..core.logger import get_input_logger
from ..models import DesignRecord
from .config_node import ConfigNode, ConfigNodeParseError, load_config_node
from .constants import (
    PART_NODE,
    PART_ID_KEY,
    CRAFT_ID_SEPARATOR,
    DESCRIPTION_KEY,
    SHIP_NAME_KEY,
)


class CraftRecordError(Exception):
    """Raised when a craft file cannot produce a DesignRecord."""

    def __init__(self, reason: SkipReason, path: Path, detail: str):
        self.reason = reason
        self.path = path
        self.detail = detail
        super().__init__(f"[{reason.value}] {path}: {detail}")


def derive_craft_key(part_id: Optional[str]) -> str:
    """
    Derive the cross-reference key from a composite part identifier.

    Args:
        part_id: Raw 'part' value, e.g. 'mk1pod_4294724440'

    Returns:
        Text after the last '_' ('4294724440'); the whole value when
        there is no '_'; '' for a missing value
    """
    if not part_id:
        return ''
    return part_id.strip().rsplit(CRAFT_ID_SEPARATOR, 1)[-1].strip()


class CraftReader:
    """
    Reads .craft files into DesignRecord objects.

    Example:
        loader = CraftDataLoader(config)
        reader = CraftReader()

        for entry in loader.discover_craft_files(vab_dir):
            try:
                record = reader.read_craft(entry.path)
            except CraftRecordError as e:
                print(f"Skipped: {e}")
    """

    def __init__(self):
        """Initialize craft reader."""
        self.logger = get_input_logger('craft_reader')

    def read_craft(self, path: Path) -> DesignRecord:
        """
        Read a craft file into a DesignRecord.

        Args:
            path: Path to the .craft file

        Returns:
            DesignRecord with a non-empty key

        Raises:
            CraftRecordError: If the file is unreadable, malformed, has
                no root part, or its root part carries no craft ID
        """
        path = Path(path)
        self.logger.debug(f"Reading craft file {path.name}")

        try:
            document = load_config_node(path)
        except OSError as e:
            raise CraftRecordError(SkipReason.UNREADABLE, path, str(e)) from e
        except ConfigNodeParseError as e:
            raise CraftRecordError(SkipReason.MALFORMED, path, str(e)) from e

        return self.build_record(document, path)

    def build_record(self, document: ConfigNode, path: Path) -> DesignRecord:
        """
        Extract key and description from a parsed craft document.

        Args:
            document: Root ConfigNode of the craft file
            path: Origin of the document, kept for diagnostics

        Returns:
            DesignRecord

        Raises:
            CraftRecordError: If the root part or its craft ID is missing
        """
        root_part = document.get_node(PART_NODE)
        if root_part is None:
            raise CraftRecordError(
                SkipReason.NO_ROOT_PART, path, f"no {PART_NODE} node"
            )

        part_id = root_part.get_value(PART_ID_KEY)
        key = derive_craft_key(part_id)
        if not key:
            raise CraftRecordError(
                SkipReason.NO_CRAFT_ID,
                path,
                f"root part identifier {part_id!r} has no craft ID",
            )

        self.logger.debug(f"CID is {key}")

        description = document.get_value(DESCRIPTION_KEY) or ''
        if not description:
            self.logger.debug(f"Description is empty in {path.name}")

        return DesignRecord(
            key=key,
            description=description,
            ship_name=document.get_value(SHIP_NAME_KEY) or '',
            source_path=path,
        )


__all__ = ['CraftReader', 'CraftRecordError', 'derive_craft_key']
