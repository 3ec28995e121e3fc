"""
Eligibility matrices: which vehicles serve a given selection, best first.
"""

import logging
from typing import List, Optional

from .models import ServiceType
from .schemas import EligibilityConfig


logger = logging.getLogger(__name__)


class EligibilityMatrices:
    """Per-service-type lookup of ranked vehicle names."""

    def __init__(self, config: EligibilityConfig):
        self.config = config

    def _matrix(self, service_type: ServiceType):
        if service_type is ServiceType.RIDE:
            return None  # rides use the passenger vehicle-class selector
        return getattr(self.config, service_type.value)

    def resolve(self, service_type: ServiceType, sub_option: Optional[str]) -> List[str]:
        """
        Ranked vehicle names for a selection.

        Rides, unconfigured keys and non-string keys all resolve to an
        empty list.
        """
        matrix = self._matrix(service_type)
        if matrix is None:
            return []
        if sub_option is not None and not isinstance(sub_option, str):
            logger.debug(f"Ignoring malformed sub-option {sub_option!r}")
            return []
        names = matrix.get(sub_option or "")
        if not names:
            logger.debug(f"No matrix entry for {service_type.value}/{sub_option!r}")
            return []
        return list(names)

    def sub_options(self, service_type: ServiceType) -> List[str]:
        """Configured sub-option keys in display order."""
        matrix = self._matrix(service_type)
        return list(matrix) if matrix else []
