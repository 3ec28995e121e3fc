"""
Category selection for the send screen.
Maps a tapped category to the screen it opens and the service type it carries.
"""

import logging
from typing import Dict, List, Optional

from .models import CategoryDestination, ServiceCategory


logger = logging.getLogger(__name__)


class CategoryDirectory:
    """Ordered list of send-screen categories."""

    def __init__(self, categories: List[ServiceCategory]):
        self._categories = list(categories)
        self._by_id: Dict[str, ServiceCategory] = {c.id: c for c in self._categories}

    def categories(self) -> List[ServiceCategory]:
        return list(self._categories)

    def get(self, category_id: str) -> Optional[ServiceCategory]:
        return self._by_id.get(category_id)

    def resolve(self, category_id: str) -> Optional[CategoryDestination]:
        """
        Destination for a category tap.

        Returns None for unknown ids and for categories that have no
        screen yet; the tap is then a no-op.
        """
        category = self.get(category_id)
        if category is None:
            logger.debug(f"Unknown category '{category_id}'")
            return None
        if not category.route:
            logger.debug(f"Category '{category_id}' has no destination")
            return None
        return CategoryDestination(
            category_id=category.id,
            route=category.route,
            service_type=category.service_type
        )
