"""
Core data models for the Fleet Resolver.
Uses Pydantic for the offers and display records handed to the front end.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


class ServiceType(str, Enum):
    """Top-level delivery categories."""
    RIDE = "ride"
    PACKAGE = "package"
    TRUCK = "truck"
    TOWING = "towing"


class Badge(str, Enum):
    """Badge tags shown on an offer card."""
    RECOMMENDED = "RECOMMENDED"
    FASTER = "FASTER"
    CHEAPER = "CHEAPER"


class OfferCategory(str, Enum):
    """Offer grouping used by the selection screen."""
    RECOMMENDED = "recommended"
    FASTER = "faster"
    CHEAPER = "cheaper"


class ResolvedVehicle(BaseModel):
    """Catalog metadata for one vehicle after defaults are applied."""
    name: str
    icon: str
    capacity: Union[int, float, str]
    description: str
    price: Union[int, float]
    original_price: Optional[Union[int, float]] = None


class VehicleOffer(BaseModel):
    """One selectable vehicle option in a ranked fleet list."""
    id: str
    name: str
    description: str
    eta: str
    price: Union[int, float]
    original_price: Optional[Union[int, float]] = None
    capacity: Union[int, float, str]
    badge: Optional[Badge] = None
    icon: str
    category: OfferCategory


class VehicleDisplayInfo(BaseModel):
    """Name and icon for a previously chosen vehicle id."""
    name: str
    icon: str


class ServiceCategory(BaseModel):
    """Entry on the category selection screen."""
    id: str
    label: str
    icon: str
    description: str = Field(default="")
    service_type: Optional[ServiceType] = Field(default=None)
    route: Optional[str] = Field(default=None)

    model_config = {"frozen": True}


class CategoryDestination(BaseModel):
    """Where a category tap navigates to."""
    category_id: str
    route: str
    service_type: Optional[ServiceType] = None
