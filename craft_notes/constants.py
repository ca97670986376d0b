# Path: craft_notes/constants.py
"""
System-Wide Constants for craft_notes

Central repository for constant values used across the system.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Editor Facilities
- Skip Reasons
- Display Fallback Messages
- Logging
"""

from enum import Enum
from typing import Final


# ==============================================================================
# EDITOR FACILITIES
# ==============================================================================

class EditorFacility(str, Enum):
    """
    Editor buildings that save .craft files for a save profile.

    Values are the sub-folder names under saves/<profile>/Ships/.
    Declaration order is the scan order.
    """
    VAB = 'VAB'
    SPH = 'SPH'


SAVES_DIR_NAME: Final[str] = 'saves'
SHIPS_DIR_NAME: Final[str] = 'Ships'
DEFAULT_SAVE_FOLDER: Final[str] = 'default'


# ==============================================================================
# FILE EXTENSIONS AND NAMES
# ==============================================================================

CRAFT_FILE_EXTENSION: Final[str] = '.craft'

# Written by the editor on every change; never an authoritative design.
AUTOSAVE_CRAFT_FILE: Final[str] = 'Auto-Saved Ship.craft'


# ==============================================================================
# SKIP REASONS
# ==============================================================================

class SkipReason(str, Enum):
    """
    Why a craft file or live vessel was left out of a table.

    None of these are fatal; each is logged and the scan continues.
    """
    AUTOSAVE = 'autosave'
    UNREADABLE = 'unreadable'
    MALFORMED = 'malformed'
    NO_ROOT_PART = 'no_root_part'
    NO_CRAFT_ID = 'no_craft_id'
    DUPLICATE_KEY = 'duplicate_key'


# ==============================================================================
# DISPLAY FALLBACK MESSAGES
# ==============================================================================

NO_CRAFT_ID_MESSAGE: Final[str] = (
    'No description can be displayed as the craft ID of this vessel '
    'could not be determined.'
)
NO_CRAFT_FILE_MESSAGE: Final[str] = (
    'No description can be displayed as the original .craft file '
    'could not be located for this vessel.'
)
NO_DESCRIPTION_MESSAGE: Final[str] = 'This vessel does not have a description.'

FALLBACK_MESSAGES: Final[tuple[str, ...]] = (
    NO_CRAFT_ID_MESSAGE,
    NO_CRAFT_FILE_MESSAGE,
    NO_DESCRIPTION_MESSAGE,
)

# Descriptions are single-line values in .craft files; this character
# stands in for a line break.
DESCRIPTION_NEWLINE_MARKER: Final[str] = '¤'
DISPLAY_NEWLINE: Final[str] = '\n'


# ==============================================================================
# LOGGING
# ==============================================================================

APP_NAME: Final[str] = 'craft_notes'

LOG_FORMAT: Final[str] = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT: Final[str] = '%Y-%m-%d %H:%M:%S'
CONSOLE_LOG_FORMAT: Final[str] = f'[{APP_NAME}] [%(levelname)s] %(name)s - %(message)s'


class LogLayer(str, Enum):
    """IPO layer prefixes used for logger names and log file filters."""
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


LOG_FILES: Final[dict[str, str]] = {
    'full': 'full_activity.log',
    LogLayer.INPUT.value: 'input_activity.log',
    LogLayer.PROCESS.value: 'process_activity.log',
    LogLayer.OUTPUT.value: 'output_activity.log',
}


__all__ = [
    'EditorFacility',
    'SAVES_DIR_NAME',
    'SHIPS_DIR_NAME',
    'DEFAULT_SAVE_FOLDER',
    'CRAFT_FILE_EXTENSION',
    'AUTOSAVE_CRAFT_FILE',
    'SkipReason',
    'NO_CRAFT_ID_MESSAGE',
    'NO_CRAFT_FILE_MESSAGE',
    'NO_DESCRIPTION_MESSAGE',
    'FALLBACK_MESSAGES',
    'DESCRIPTION_NEWLINE_MARKER',
    'DISPLAY_NEWLINE',
    'APP_NAME',
    'LOG_FORMAT',
    'LOG_DATE_FORMAT',
    'CONSOLE_LOG_FORMAT',
    'LogLayer',
    'LOG_FILES',
]
