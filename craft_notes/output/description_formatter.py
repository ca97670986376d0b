# Path: craft_notes/output/description_formatter.py
"""
Description Formatter

Prepares stored craft descriptions for display. The editor saves a
description as a single-line value, writing a marker character where
the author pressed enter; display turns each marker back into a line
break.

The transform returns a new string and never touches stored tables.
"""

from typing import Optional

from ..constants import DESCRIPTION_NEWLINE_MARKER, DISPLAY_NEWLINE
from ..core.logger import get_output_logger


def expand_paragraph_markers(
    text: str,
    marker: str = DESCRIPTION_NEWLINE_MARKER,
) -> str:
    """
    Replace every paragraph marker with a line break.

    Args:
        text: Stored description
        marker: Substitution character used in the save file

    Returns:
        Display text, e.g. 'line1¤line2' -> 'line1\\nline2'
    """
    if not marker:
        return text
    return text.replace(marker, DISPLAY_NEWLINE)


class DescriptionFormatter:
    """Renders stored descriptions for the display collaborator."""

    def __init__(self, marker: Optional[str] = None):
        """
        Args:
            marker: Paragraph marker; None uses DESCRIPTION_NEWLINE_MARKER,
                    '' leaves descriptions as stored
        """
        self.marker = marker if marker is not None else DESCRIPTION_NEWLINE_MARKER
        self.logger = get_output_logger('description_formatter')

    def format(self, description: str) -> str:
        """Return the display form of a stored description."""
        rendered = expand_paragraph_markers(description, self.marker)
        self.logger.debug(f"Description is {rendered!r}")
        return rendered


__all__ = ['DescriptionFormatter', 'expand_paragraph_markers']
