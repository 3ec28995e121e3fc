"""
FastAPI application for fleet resolution.
Exposes the category list, ranked fleet options and vehicle lookups to the booking UI.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .service import FleetResolverService
from .schemas import HealthResponse
from .models import (
    CategoryDestination, ServiceCategory, VehicleDisplayInfo, VehicleOffer
)


logger = logging.getLogger(__name__)

# Global service instance
service: Optional[FleetResolverService] = None


def get_service() -> FleetResolverService:
    """Dependency to get service instance."""
    global service
    if service is None:
        service = FleetResolverService()
    return service


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Fleet Resolver",
        description="Ranked vehicle options for freight, parcel and towing bookings",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000"
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check(svc: FleetResolverService = Depends(get_service)):
        """Health check endpoint."""
        return HealthResponse(**svc.health_check())

    @app.get("/categories", response_model=List[ServiceCategory])
    async def list_categories(svc: FleetResolverService = Depends(get_service)):
        """Send-screen categories in display order."""
        return svc.list_categories()

    @app.get("/categories/{category_id}", response_model=CategoryDestination)
    async def resolve_category(category_id: str, svc: FleetResolverService = Depends(get_service)):
        """Where tapping a category leads."""
        destination = svc.resolve_category(category_id)
        if destination is None:
            raise HTTPException(
                status_code=404,
                detail=f"Category '{category_id}' has no destination"
            )
        return destination

    @app.get("/fleet/{service_type}", response_model=List[VehicleOffer])
    async def get_fleet_options(
        service_type: str,
        option: Optional[str] = None,
        svc: FleetResolverService = Depends(get_service)
    ):
        """
        Ranked vehicle options for a service type and sub-option.
        Unknown selections return an empty list rather than an error.
        """
        return await svc.get_fleet_options(service_type, option)

    @app.get("/fleet/{service_type}/options", response_model=List[str])
    async def list_sub_options(service_type: str, svc: FleetResolverService = Depends(get_service)):
        """Sub-option keys configured for a service type."""
        return svc.list_sub_options(service_type)

    @app.get("/vehicles/{identifier}", response_model=VehicleDisplayInfo)
    async def describe_vehicle(identifier: str, svc: FleetResolverService = Depends(get_service)):
        """Display name and icon for a chosen vehicle id."""
        return svc.describe_vehicle(identifier)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
