"""
Main service layer for fleet resolution.
Loads reference data once and turns a service selection into ranked vehicle offers.
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml

from .catalog import VehicleCatalog
from .categories import CategoryDirectory
from .eligibility import EligibilityMatrices
from .eta import EtaEstimator
from .models import (
    Badge, CategoryDestination, OfferCategory, ServiceCategory,
    ServiceType, VehicleDisplayInfo, VehicleOffer
)
from .schemas import AppConfig, Settings
from .util.slug import slugify

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "params.yaml"


def rank_labels(rank: int) -> Tuple[OfferCategory, Optional[Badge]]:
    """Category and badge for a position in a ranked list."""
    if rank == 0:
        return OfferCategory.RECOMMENDED, Badge.RECOMMENDED
    if rank == 1:
        return OfferCategory.CHEAPER, Badge.CHEAPER
    return OfferCategory.FASTER, None


def parse_service_type(value: Union[ServiceType, str, None]) -> Optional[ServiceType]:
    """ServiceType for a raw value, or None when it is not one."""
    if isinstance(value, ServiceType):
        return value
    try:
        return ServiceType(value)
    except ValueError:
        return None


class FleetResolverService:
    """Main service for fleet resolution."""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        latency_ms: Optional[int] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Initialize service with configuration.

        Precedence for every knob is: argument > FLEET_* environment > YAML.
        """
        self.settings = Settings()
        if config is None:
            path = config_path or self.settings.config_path or DEFAULT_CONFIG_PATH
            config = self._load_config(path)
        self.config = config

        if latency_ms is None:
            latency_ms = self.settings.simulated_latency_ms
        if latency_ms is None:
            latency_ms = config.resolver.simulated_latency_ms
        self.latency_ms = latency_ms

        # Initialize components
        self.catalog = VehicleCatalog(config.catalog, config.defaults)
        self.matrices = EligibilityMatrices(config.eligibility)
        self.eta = EtaEstimator(config.eta)
        self.categories = CategoryDirectory(config.categories)

        self._setup_logging()
        logger.debug(
            f"Loaded {len(self.catalog)} vehicles, "
            f"{len(config.categories)} categories, latency {self.latency_ms}ms"
        )

    def _load_config(self, config_path: Union[str, Path]) -> AppConfig:
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
            return AppConfig(**config_data)
        except Exception as e:
            logger.error(f"Failed to load configuration from {config_path}: {e}")
            raise

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        level = self.settings.log_level or self.config.logging.level
        logging.basicConfig(
            level=getattr(logging, level),
            format=self.config.logging.format
        )

    def build_fleet_options(
        self,
        service_type: Union[ServiceType, str, None],
        sub_option: Optional[str] = None
    ) -> List[VehicleOffer]:
        """
        Ranked vehicle offers for a selection, without simulated latency.

        Never raises: rides, unknown service types and unconfigured
        sub-options all give an empty list.
        """
        resolved_type = parse_service_type(service_type)
        if resolved_type is ServiceType.RIDE:
            return []  # handled by the passenger vehicle-class selector

        names = self.matrices.resolve(resolved_type, sub_option) if resolved_type is not None else []
        if not names:
            label = resolved_type.value if resolved_type is not None else service_type
            logger.warning(f"No vehicles found for {label} with option: {sub_option}")
            return []

        offers = []
        for rank, name in enumerate(names):
            vehicle = self.catalog.resolve(name)
            category, badge = rank_labels(rank)
            offers.append(VehicleOffer(
                id=slugify(name),
                name=name,
                description=vehicle.description,
                eta=self.eta.estimate(name, rank),
                price=vehicle.price,
                original_price=vehicle.original_price,
                capacity=vehicle.capacity,
                badge=badge,
                icon=vehicle.icon,
                category=category
            ))
        return offers

    async def get_fleet_options(
        self,
        service_type: Union[ServiceType, str, None],
        sub_option: Optional[str] = None
    ) -> List[VehicleOffer]:
        """
        Ranked vehicle offers for a selection.

        Waits for the configured latency first to mimic a backend call.
        """
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)
        return self.build_fleet_options(service_type, sub_option)

    def describe_vehicle(self, identifier: str) -> VehicleDisplayInfo:
        """Name and icon for a previously chosen vehicle id."""
        return self.catalog.describe(identifier)

    def list_sub_options(self, service_type: Union[ServiceType, str, None]) -> List[str]:
        """Sub-option keys configured for a service type."""
        resolved_type = parse_service_type(service_type)
        if resolved_type is None:
            logger.warning(f"Unknown service type: {service_type}")
            return []
        return self.matrices.sub_options(resolved_type)

    def list_categories(self) -> List[ServiceCategory]:
        """Send-screen categories in display order."""
        return self.categories.categories()

    def resolve_category(self, category_id: str) -> Optional[CategoryDestination]:
        """Destination for a category tap, or None when it goes nowhere."""
        return self.categories.resolve(category_id)

    def health_check(self) -> dict:
        """Check service health."""
        return {
            "status": "healthy",
            "version": self.config.project.version,
            "catalog_vehicles": len(self.catalog),
            "timestamp": datetime.now().isoformat()
        }
