# Path: craft_notes/core/__init__.py
"""
craft_notes Core Package

Core utilities for the craft description reconciler.

Submodules:
    - logger: IPO-aware logging system
    - craft_paths: Craft directory resolution for a save profile
"""

from .craft_paths import CraftPathsManager

__all__ = [
    'CraftPathsManager',
]
