"""
Shared fixtures for fleet resolver tests.
"""

import pytest

from fleet_resolver.schemas import AppConfig
from fleet_resolver.service import FleetResolverService


def create_test_config(**overrides):
    """Create a small test configuration."""
    data = dict(
        project={"name": "Test", "currency": "ZAR", "version": "0.1.0"},
        catalog={
            "Bicycle": {"icon": "🚴", "capacity": "5kg", "description": "Eco-friendly",
                        "price": 25, "original_price": 35},
            "Car": {"icon": "🚗", "capacity": 20, "description": "Standard delivery", "price": 60},
            "Mystery Van": {},
        },
        eligibility={
            "package": {
                "small": ["Bicycle", "Car", "Mystery Van", "Ghost Truck"],
            },
        },
        eta={"default_base_minutes": 15, "rank_step_minutes": 3,
             "base_minutes": {"Bicycle": 15, "Car": 8}},
        defaults={"description": "Available now", "price": 100, "capacity": "Standard",
                  "icon": "🚗", "vehicle_name": "Vehicle"},
        categories=[
            {"id": "package", "label": "Send My Package", "icon": "📦",
             "service_type": "package", "route": "/your-route"},
            {"id": "clothes", "label": "Clothes & Others", "icon": "👕"},
        ],
        resolver={"simulated_latency_ms": 0},
        logging={"level": "INFO", "format": "%(message)s"},
    )
    data.update(overrides)
    return AppConfig(**data)


@pytest.fixture
def service():
    """Resolver over the bundled configuration, without simulated latency."""
    return FleetResolverService(latency_ms=0)


@pytest.fixture
def test_service():
    """Resolver over the small test configuration."""
    return FleetResolverService(config=create_test_config(), latency_ms=0)
