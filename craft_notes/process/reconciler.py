# Path: craft_notes/process/reconciler.py
"""
Vessel Reconciler

Matches live vessels against the design record table by craft ID.

Live vessels expose their root part's craft ID directly, so unlike
craft files no key derivation is needed. A vessel with no craft ID,
or whose craft ID matches no craft file, simply gets no entry in the
live description table; describe() turns each kind of absence into
its own display message.
"""

from typing import Any, Iterable, Mapping, Optional

from ..constants import (
    NO_CRAFT_ID_MESSAGE,
    NO_CRAFT_FILE_MESSAGE,
    NO_DESCRIPTION_MESSAGE,
)
from ..core.logger import get_process_logger
from ..output.description_formatter import DescriptionFormatter


def vessel_key(vessel: Any) -> str:
    """
    Read a live vessel's craft ID as a table key.

    Args:
        vessel: LiveVessel or any object with a `craft_id` attribute

    Returns:
        Craft ID as text, '' when the vessel or its craft ID is missing
    """
    if vessel is None:
        return ''
    craft_id = getattr(vessel, 'craft_id', None)
    if craft_id is None:
        return ''
    return str(craft_id).strip()


def vessel_name(vessel: Any) -> str:
    if vessel is None:
        return ''
    return getattr(vessel, 'name', None) or ''


class VesselReconciler:
    """
    Builds the live description table and answers per-vessel lookups.

    Example:
        reconciler = VesselReconciler()
        live = reconciler.reconcile(design_records, vessels)
        text = reconciler.describe(active_vessel, live)
    """

    def __init__(self, formatter: Optional[DescriptionFormatter] = None):
        """
        Args:
            formatter: Display transform for stored descriptions
        """
        self.logger = get_process_logger('reconciler')
        self.formatter = formatter or DescriptionFormatter()

    def reconcile(
        self,
        design_records: Mapping[str, str],
        live_vessels: Iterable[Any],
    ) -> dict[str, str]:
        """
        Build a fresh live description table.

        Args:
            design_records: Craft ID -> description from the latest scan
            live_vessels: Every vessel currently known to the game

        Returns:
            Craft ID -> description for live vessels with a craft file
        """
        self.logger.info("Scanning in-game vessels...")
        live_descriptions: dict[str, str] = {}

        for vessel in live_vessels:
            key = vessel_key(vessel)
            if not key:
                self.logger.debug(f"Vessel {vessel_name(vessel)!r}: CID is empty or missing")
                continue

            if key not in design_records:
                self.logger.debug(f"CID {key}: matching craft file not found")
                continue

            if key in live_descriptions:
                self.logger.debug(f"CID {key}: already in vessel table")
                continue

            live_descriptions[key] = design_records[key]
            self.logger.debug(f"CID {key}: added to vessel table")

        self.logger.info(f"Matched {len(live_descriptions)} live vessels to craft files")
        return live_descriptions

    def describe(self, vessel: Any, live_descriptions: Mapping[str, str]) -> str:
        """
        Get the display description for one vessel.

        Args:
            vessel: Vessel to describe
            live_descriptions: Table from reconcile(); never modified

        Returns:
            One of NO_CRAFT_ID_MESSAGE, NO_CRAFT_FILE_MESSAGE,
            NO_DESCRIPTION_MESSAGE, or the stored description with
            paragraph markers expanded to line breaks
        """
        key = vessel_key(vessel)
        if not key:
            self.logger.debug("CID is empty or cannot be parsed")
            return NO_CRAFT_ID_MESSAGE

        self.logger.debug(f"CID is {key}, name is {vessel_name(vessel)!r}")

        if key not in live_descriptions:
            self.logger.debug(f"CID {key}: matching entry in vessel table not found")
            return NO_CRAFT_FILE_MESSAGE

        description = live_descriptions[key]
        if not description:
            return NO_DESCRIPTION_MESSAGE

        return self.formatter.format(description)


def reconcile(design_records: Mapping[str, str], live_vessels: Iterable[Any]) -> dict[str, str]:
    """Reconcile with a one-off VesselReconciler."""
    return VesselReconciler().reconcile(design_records, live_vessels)


def describe(vessel: Any, live_descriptions: Mapping[str, str]) -> str:
    """Describe a vessel with a one-off VesselReconciler."""
    return VesselReconciler().describe(vessel, live_descriptions)


__all__ = [
    'VesselReconciler',
    'vessel_key',
    'vessel_name',
    'reconcile',
    'describe',
]
