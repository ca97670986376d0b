# Path: craft_notes/process/session.py
"""
Notes Session

Short-lived owner of the reconciliation tables for one integration
layer (the in-game notes window). The host calls on_context_changed()
whenever the active vessel changes; each call is a full rebuild:

    1. scan craft directories        -> design_records
    2. reconcile live vessels        -> live_descriptions
    3. describe the active vessel    -> VesselNotes(description, name)

Tables from the previous call are replaced, never merged.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from ..config_loader import ConfigLoader
from ..core.craft_paths import CraftPathsManager
from ..core.logger import configure_logging, get_process_logger
from ..models import VesselNotes
from ..output.description_formatter import DescriptionFormatter
from .reconciler import VesselReconciler, vessel_name
from .scanner import CraftScanner


class NotesSession:
    """
    Runs reconciliation cycles for an integration layer.

    Example:
        session = NotesSession.from_config(ConfigLoader())

        # from the host's "active vessel changed" callback
        notes = session.on_context_changed(all_vessels, active_vessel)
        window.title = notes.name
        window.text = notes.description
    """

    def __init__(
        self,
        craft_directories: Iterable[Path],
        scanner: Optional[CraftScanner] = None,
        reconciler: Optional[VesselReconciler] = None,
    ):
        """
        Initialize a session.

        Args:
            craft_directories: Directories scanned on every cycle, in order
            scanner: Craft scanner (defaults to CraftScanner())
            reconciler: Vessel reconciler (defaults to VesselReconciler())
        """
        self.logger = get_process_logger('session')
        self.craft_directories = [Path(d) for d in craft_directories]
        self.scanner = scanner or CraftScanner()
        self.reconciler = reconciler or VesselReconciler()

        self.design_records: dict[str, str] = {}
        self.live_descriptions: dict[str, str] = {}

    @classmethod
    def from_config(cls, config: Optional[Any] = None) -> 'NotesSession':
        """
        Build a session for the configured save profile and set up
        IPO logging from the same configuration.

        Args:
            config: ConfigLoader (defaults to the shared singleton)

        Returns:
            NotesSession scanning the profile's VAB and SPH directories
        """
        config = config if config is not None else ConfigLoader()
        configure_logging(config)

        directories = CraftPathsManager(config).get_craft_directories()
        formatter = DescriptionFormatter(config.get('newline_marker'))

        return cls(
            directories,
            scanner=CraftScanner(config),
            reconciler=VesselReconciler(formatter),
        )

    def on_context_changed(
        self,
        live_vessels: Iterable[Any],
        active_vessel: Any,
    ) -> VesselNotes:
        """
        Run one full reconciliation cycle.

        Args:
            live_vessels: Every vessel currently known to the game
            active_vessel: Vessel whose notes should be displayed

        Returns:
            VesselNotes(description, name) for the active vessel
        """
        self.logger.info("Active vessel changed, rebuilding craft tables")

        self.design_records = self.scanner.scan(self.craft_directories)
        self.live_descriptions = self.reconciler.reconcile(
            self.design_records, live_vessels
        )

        description = self.reconciler.describe(active_vessel, self.live_descriptions)
        return VesselNotes(description=description, name=vessel_name(active_vessel))


__all__ = ['NotesSession']
