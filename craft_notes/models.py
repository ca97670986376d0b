# Path: craft_notes/models.py
"""
Data Models for craft_notes

Records exchanged between the INPUT, PROCESS and OUTPUT layers.

Models:
    DesignRecord  - Key and description read from one .craft file
    LiveVessel    - Read-only view of a vessel active in the game
    SkippedCraft  - Diagnostic entry for a craft left out of a scan
    VesselNotes   - Description and name handed to the display layer

Tables themselves are plain dicts (key -> description) rebuilt on
every reconciliation cycle.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import SkipReason


class DesignRecord(BaseModel):
    """Design-time record parsed from a single .craft file."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        min_length=1,
        description="Root part craft ID, suffix of the composite part identifier"
    )
    description: str = Field(
        default='',
        description="Free-form craft description, may be empty"
    )
    ship_name: str = Field(
        default='',
        description="Craft name saved by the editor"
    )
    source_path: Path = Field(
        description="Craft file the record was read from (diagnostics only)"
    )


@dataclass(frozen=True)
class LiveVessel:
    """
    A vessel active in the running game.

    Owned by the host; craft_notes only reads it. Any object exposing
    `name` and `craft_id` attributes can stand in for it.

    Attributes:
        name: Human-readable vessel name
        craft_id: Craft ID of the vessel's root part, None when the
                  vessel has no root part
    """
    name: str
    craft_id: Optional[Union[int, str]] = None


@dataclass(frozen=True)
class SkippedCraft:
    """
    A craft file that did not make it into the design record table.

    Attributes:
        path: Craft file path
        reason: Why it was skipped
        detail: Human-readable detail for logs
    """
    path: Path
    reason: SkipReason
    detail: str = ''


class VesselNotes(NamedTuple):
    """Result of one reconciliation cycle for the active vessel."""
    description: str
    name: str


__all__ = [
    'DesignRecord',
    'LiveVessel',
    'SkippedCraft',
    'VesselNotes',
]
