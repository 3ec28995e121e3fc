"""
Pydantic schemas for configuration, settings, and API validation.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ServiceCategory
from .util.slug import slugify


class CatalogEntry(BaseModel):
    """Vehicle catalog entry from params.yaml. Every field may be omitted."""
    icon: Optional[str] = None
    capacity: Optional[Union[int, float, str]] = None
    description: Optional[str] = None
    price: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    original_price: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None

    model_config = {"frozen": True}


class EligibilityConfig(BaseModel):
    """One matrix per structured service type: sub-option key -> ranked vehicle names."""
    truck: Dict[str, List[str]] = Field(default_factory=dict)
    package: Dict[str, List[str]] = Field(default_factory=dict)
    towing: Dict[str, List[str]] = Field(default_factory=dict)


class EtaConfig(BaseModel):
    """ETA table and ranking step."""
    default_base_minutes: int = Field(default=15, ge=0)
    rank_step_minutes: int = Field(default=3, ge=0)
    base_minutes: Dict[str, int] = Field(default_factory=dict)


class OfferDefaults(BaseModel):
    """Fallbacks for vehicles with missing catalog metadata."""
    description: str = Field(default="Available now")
    price: Union[NonNegativeInt, NonNegativeFloat] = Field(default=100)
    capacity: Union[int, float, str] = Field(default="Standard")
    icon: str = Field(default="🚗")
    vehicle_name: str = Field(default="Vehicle")


class ResolverConfig(BaseModel):
    """Fleet resolver behaviour."""
    simulated_latency_ms: int = Field(default=300, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


class ProjectConfig(BaseModel):
    """Top-level project configuration."""
    name: str = Field(default="Fleet Resolver")
    currency: str = Field(default="ZAR")
    version: str = Field(default="0.1.0")


class AppConfig(BaseModel):
    """Complete application configuration loaded from params.yaml."""
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    catalog: Dict[str, CatalogEntry]
    eligibility: EligibilityConfig
    eta: EtaConfig = Field(default_factory=EtaConfig)
    defaults: OfferDefaults = Field(default_factory=OfferDefaults)
    categories: List[ServiceCategory] = Field(default_factory=list)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def unique_vehicle_slugs(self):
        """Two catalog names must never share an identifier."""
        seen: Dict[str, str] = {}
        for name in self.catalog:
            slug = slugify(name)
            if slug in seen:
                raise ValueError(
                    f"Catalog names '{seen[slug]}' and '{name}' share identifier '{slug}'"
                )
            seen[slug] = name
        return self

    @model_validator(mode="after")
    def unique_category_ids(self):
        ids = [c.id for c in self.categories]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate category ids: {', '.join(duplicates)}")
        return self


class Settings(BaseSettings):
    """Environment-based settings (FLEET_ prefix)."""
    config_path: Optional[str] = None
    simulated_latency_ms: Optional[int] = Field(default=None, ge=0)
    log_level: Optional[str] = Field(default=None, pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# API Response Schemas
class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    catalog_vehicles: int
    timestamp: str
