# Path: craft_notes/config_loader.py
"""
Configuration Loader for craft_notes

Loads configuration from .env file for the craft description reconciler.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths, NO magic numbers.
All configuration comes from environment variables.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import (
    DEFAULT_SAVE_FOLDER,
    DESCRIPTION_NEWLINE_MARKER,
    CRAFT_FILE_EXTENSION,
    AUTOSAVE_CRAFT_FILE,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'


class ConfigLoader:
    """
    Singleton configuration loader for craft_notes.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        ksp_root = config.get('ksp_root')  # Returns Path object
        marker = config.get('newline_marker')  # Returns str
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        and validates all configuration on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # craft_notes/config_loader.py -> .env is in same directory
        current_file = Path(__file__).resolve()
        env_path = current_file.parent / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values with proper types

        Raises:
            ValueError: If required configuration is missing
        """
        config = {
            # ================================================================
            # GAME INSTALL & SAVE PROFILE (READ-ONLY)
            # ================================================================
            'ksp_root': self._get_path('CRAFT_NOTES_KSP_ROOT', required=True),
            'save_folder': self._get_env('CRAFT_NOTES_SAVE_FOLDER', DEFAULT_SAVE_FOLDER),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'debug': self._get_bool('CRAFT_NOTES_DEBUG', False),
            'log_dir': self._get_path('CRAFT_NOTES_LOG_DIR'),
            'log_level': self._get_env('CRAFT_NOTES_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('CRAFT_NOTES_LOG_CONSOLE', True),

            # ================================================================
            # CRAFT FILE CONVENTIONS
            # ================================================================
            'craft_extension': self._get_env(
                'CRAFT_NOTES_CRAFT_EXTENSION', CRAFT_FILE_EXTENSION
            ),
            'autosave_file': self._get_env(
                'CRAFT_NOTES_AUTOSAVE_FILE', AUTOSAVE_CRAFT_FILE
            ),
            'newline_marker': self._get_env(
                'CRAFT_NOTES_NEWLINE_MARKER', DESCRIPTION_NEWLINE_MARKER
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key paths."""
        return (
            f"ConfigLoader("
            f"ksp_root={self._config.get('ksp_root')}, "
            f"save_folder={self._config.get('save_folder')})"
        )


__all__ = ['ConfigLoader']
