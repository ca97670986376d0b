# Path: craft_notes/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for craft_notes

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from craft_notes.tests.fixtures.sample_crafts import write_craft


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'CRAFT_NOTES_DEBUG': 'true',

        # Game root (REQUIRED by ConfigLoader)
        'CRAFT_NOTES_KSP_ROOT': '/tmp/craft_notes_test/ksp',
        'CRAFT_NOTES_SAVE_FOLDER': 'career',

        # Logging
        'CRAFT_NOTES_LOG_DIR': '/tmp/craft_notes_test/logs',
        'CRAFT_NOTES_LOG_LEVEL': 'DEBUG',
        'CRAFT_NOTES_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ksp_tree(temp_dir):
    """Create a game install with one save profile and empty craft folders."""
    ships = temp_dir / 'ksp' / 'saves' / 'career' / 'Ships'
    dirs = {
        'root': temp_dir / 'ksp',
        'vab': ships / 'VAB',
        'sph': ships / 'SPH',
    }
    dirs['vab'].mkdir(parents=True)
    dirs['sph'].mkdir(parents=True)
    return dirs


# ==============================================================================
# FILE CREATION FIXTURES
# ==============================================================================

@pytest.fixture
def make_craft():
    """Return a helper that writes a craft file: make_craft(dir, name, **kwargs)."""
    return write_craft


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'debug': True,
        'ksp_root': Path('/tmp/test/ksp'),
        'save_folder': 'career',
        'craft_extension': '.craft',
        'autosave_file': 'Auto-Saved Ship.craft',
        'newline_marker': '¤',
    }.get(key, default)
    return config


@pytest.fixture
def make_config():
    """Return a helper that builds a mock ConfigLoader from a dict of values."""
    def _make(values: dict) -> MagicMock:
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: values.get(key, default)
        return config
    return _make


@pytest.fixture
def paths_config_values(ksp_tree):
    """Config values for a real temp game install, console logging off."""
    return {
        'debug': True,
        'ksp_root': ksp_tree['root'],
        'save_folder': 'career',
        'log_dir': None,
        'log_level': 'DEBUG',
        'log_console': False,
        'craft_extension': '.craft',
        'autosave_file': 'Auto-Saved Ship.craft',
        'newline_marker': '¤',
    }


@pytest.fixture
def mock_config_with_paths(make_config, paths_config_values):
    """Create a mock ConfigLoader pointing at a real temp game install."""
    return make_config(paths_config_values)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from craft_notes.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
