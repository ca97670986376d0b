# Path: craft_notes/process/__init__.py
"""
Process Layer for craft_notes

The PROCESS layer runs reconciliation cycles:
- scanner.py    - craft directories -> design record table
- reconciler.py - design records + live vessels -> live description table
- session.py    - one full cycle per active vessel change

All components follow the IPO pattern:
- Read from INPUT layer (loaders)
- Match craft files to live vessels
- Hand display text to OUTPUT layer (description formatter)
"""

from .scanner import CraftScanner, scan
from .reconciler import VesselReconciler, vessel_key, reconcile, describe
from .session import NotesSession

__all__ = [
    'CraftScanner',
    'scan',
    'VesselReconciler',
    'vessel_key',
    'reconcile',
    'describe',
    'NotesSession',
]
