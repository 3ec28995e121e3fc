"""
Vehicle catalog lookups.
Merges per-vehicle metadata with the configured fallbacks in one place.
"""

import logging
from typing import Dict, List, Optional

from .models import ResolvedVehicle, VehicleDisplayInfo
from .schemas import CatalogEntry, OfferDefaults
from .util.slug import slugify


logger = logging.getLogger(__name__)


class VehicleCatalog:
    """Read-only view over the vehicle catalog."""

    def __init__(self, entries: Dict[str, CatalogEntry], defaults: OfferDefaults):
        self._entries = dict(entries)
        self.defaults = defaults

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def names(self) -> List[str]:
        """Catalog vehicle names in configuration order."""
        return list(self._entries)

    def lookup(self, name: str) -> Optional[CatalogEntry]:
        """Catalog entry for a display name, or None when unknown."""
        return self._entries.get(name)

    def resolve(self, name: str) -> ResolvedVehicle:
        """
        Catalog entry merged over the defaults.

        The original price is never defaulted: vehicles without one
        simply have no "was" price.
        """
        entry = self.lookup(name)
        if entry is None:
            logger.debug(f"No catalog metadata for '{name}', using defaults")
            entry = CatalogEntry()

        d = self.defaults
        return ResolvedVehicle(
            name=name,
            icon=entry.icon if entry.icon is not None else d.icon,
            capacity=entry.capacity if entry.capacity is not None else d.capacity,
            description=entry.description if entry.description is not None else d.description,
            price=entry.price if entry.price is not None else d.price,
            original_price=entry.original_price,
        )

    def find_by_identifier(self, identifier: str) -> Optional[str]:
        """Display name whose slug equals the identifier."""
        for name in self._entries:
            if slugify(name) == identifier:
                return name
        return None

    def describe(self, identifier: str) -> VehicleDisplayInfo:
        """Name and icon for a vehicle id; a placeholder when nothing matches."""
        name = self.find_by_identifier(identifier)
        if name is None:
            logger.debug(f"Unknown vehicle identifier '{identifier}'")
            return VehicleDisplayInfo(
                name=self.defaults.vehicle_name,
                icon=self.defaults.icon
            )
        icon = self._entries[name].icon
        return VehicleDisplayInfo(name=name, icon=icon if icon is not None else self.defaults.icon)
