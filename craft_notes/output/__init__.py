# Path: craft_notes/output/__init__.py
"""
Output Module for craft_notes

Prepares reconciliation results for the display collaborator
(the in-game notes window, which lives outside this package).
"""

from .description_formatter import DescriptionFormatter, expand_paragraph_markers

__all__ = [
    'DescriptionFormatter',
    'expand_paragraph_markers',
]
