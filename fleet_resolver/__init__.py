"""
Fleet Resolver package.
Ranked vehicle offers for truck freight, parcel courier and towing bookings.
"""

__version__ = "0.1.0"

from .service import FleetResolverService
from .models import *
from .util.slug import slugify

__all__ = [
    "FleetResolverService",
    "slugify"
]
