# Path: craft_notes/__init__.py
"""
craft_notes - Craft Description Reconciler

Shows the description written in the editor for the vessel currently
being flown. Craft files of the active save are matched to live
vessels by the craft ID of their root part.

Data Flow:
    INPUT:   saves/<profile>/Ships/{VAB,SPH}/*.craft
    PROCESS: scan -> reconcile -> describe
    OUTPUT:  display text for the notes window
"""

from .models import DesignRecord, LiveVessel, SkippedCraft, VesselNotes
from .process import (
    CraftScanner,
    VesselReconciler,
    NotesSession,
    scan,
    reconcile,
    describe,
)

__version__ = '0.1.0'

__all__ = [
    'DesignRecord',
    'LiveVessel',
    'SkippedCraft',
    'VesselNotes',
    'CraftScanner',
    'VesselReconciler',
    'NotesSession',
    'scan',
    'reconcile',
    'describe',
]
