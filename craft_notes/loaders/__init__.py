# Path: craft_notes/loaders/__init__.py
"""
craft_notes Loaders Package

INPUT layer: readers for the game's .craft files.

Data Sources:
    - craft directories: saves/<profile>/Ships/VAB and Ships/SPH

Design Principles:
    - Separation: Discovery (craft_data.py) vs Interpretation (craft_reader.py)
    - Format knowledge lives in config_node.py and constants.py

Example:
    from craft_notes.loaders import CraftDataLoader, CraftReader

    loader = CraftDataLoader(config)
    reader = CraftReader()
    for entry in loader.discover_craft_files(vab_dir):
        record = reader.read_craft(entry.path)
"""

from .config_node import (
    ConfigNode,
    ConfigNodeParseError,
    parse_config_node,
    load_config_node,
)
from .craft_data import CraftDataLoader, CraftFileEntry
from .craft_reader import CraftReader, CraftRecordError, derive_craft_key


__all__ = [
    # ConfigNode format
    'ConfigNode',
    'ConfigNodeParseError',
    'parse_config_node',
    'load_config_node',

    # Craft files
    'CraftDataLoader',
    'CraftFileEntry',
    'CraftReader',
    'CraftRecordError',
    'derive_craft_key',
]
