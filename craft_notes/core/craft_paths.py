# Path: craft_notes/core/craft_paths.py
"""
Craft Paths Manager for craft_notes

Resolves and validates the craft directories of the active save profile.

Directory layout under the game root:
    saves/<save_folder>/Ships/VAB/   (vertical assembly building crafts)
    saves/<save_folder>/Ships/SPH/   (space plane hangar crafts)

Note: Does NOT create any directory. Craft directories belong to the
game and are READ-ONLY for craft_notes; a missing one simply yields
no design records.
"""

from pathlib import Path
from typing import Optional

from ..config_loader import ConfigLoader
from ..constants import EditorFacility, SAVES_DIR_NAME, SHIPS_DIR_NAME


class CraftPathsManager:
    """
    Resolves craft directories for the configured save profile.

    Example:
        manager = CraftPathsManager()
        for directory in manager.get_craft_directories():
            print(directory)
        health = manager.health_check()
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize the craft paths manager.

        Args:
            config: ConfigLoader (or compatible) instance. Defaults to
                    the shared ConfigLoader singleton.
        """
        self.config = config if config is not None else ConfigLoader()

    def get_save_dir(self, save_folder: Optional[str] = None) -> Path:
        """
        Build the save profile directory.

        Args:
            save_folder: Profile folder name; defaults to the configured one

        Returns:
            Path to saves/<save_folder>

        Raises:
            ValueError: If the game root is not configured
        """
        ksp_root = self.config.get('ksp_root')
        if ksp_root is None:
            raise ValueError(
                "Game root directory not configured. "
                "Check CRAFT_NOTES_KSP_ROOT in .env"
            )

        folder = save_folder or self.config.get('save_folder')
        return Path(ksp_root) / SAVES_DIR_NAME / folder

    def get_craft_directories(self, save_folder: Optional[str] = None) -> list[Path]:
        """
        List craft directories of a save profile in scan order.

        Args:
            save_folder: Profile folder name; defaults to the configured one

        Returns:
            [.../Ships/VAB, .../Ships/SPH]
        """
        ships_dir = self.get_save_dir(save_folder) / SHIPS_DIR_NAME
        return [ships_dir / facility.value for facility in EditorFacility]

    def health_check(self, save_folder: Optional[str] = None) -> dict:
        """
        Check which craft directories exist.

        Returns:
            Dictionary with:
                - save_dir: Path of the save profile
                - directories: {path: exists} for each craft directory
                - missing: Craft directories that do not exist
                - status: 'healthy', 'degraded' or 'critical'
        """
        save_dir = self.get_save_dir(save_folder)
        directories = {
            directory: directory.is_dir()
            for directory in self.get_craft_directories(save_folder)
        }
        missing = [path for path, exists in directories.items() if not exists]

        if not missing:
            status = 'healthy'
        elif len(missing) < len(directories):
            status = 'degraded'
        else:
            status = 'critical'

        return {
            'save_dir': save_dir,
            'directories': directories,
            'missing': missing,
            'status': status,
        }


__all__ = ['CraftPathsManager']
