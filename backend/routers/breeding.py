"""Breeding API endpoints.

Endpoints:
    POST /api/breeding/cross
    GET  /api/breeding/history
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.garden_registry import GardenRegistry
from backend.models import CrossingRecordData, CrossRequest, PlantView

logger = logging.getLogger(__name__)


def setup_router(garden_registry: GardenRegistry) -> APIRouter:
    """Create the breeding router bound to a garden registry."""
    router = APIRouter(prefix="/api/breeding", tags=["breeding"])

    @router.post("/cross", response_model=PlantView, status_code=201)
    async def cross_plants(request: CrossRequest):
        """Cross two plants of the garden and plant the offspring."""
        for plant_id in (request.parent_a, request.parent_b):
            if garden_registry.get_plant(plant_id) is None:
                return JSONResponse(
                    {"error": f"Plant not found: {plant_id}"},
                    status_code=404,
                )

        crossed = garden_registry.cross(request.parent_a, request.parent_b)
        if crossed is None:
            return JSONResponse({"error": "Cross failed"}, status_code=500)
        offspring_id, offspring = crossed
        return PlantView.from_plant(offspring_id, offspring)

    @router.get("/history", response_model=list[CrossingRecordData])
    async def get_crossing_history():
        return [
            CrossingRecordData(**record.to_dict())
            for record in garden_registry.breeder.get_crossing_history()
        ]

    return router
