"""Plant API endpoints.

Endpoints:
    GET  /api/plants
    POST /api/plants
    GET  /api/plants/{plant_id}
    POST /api/plants/{plant_id}/update
    POST /api/plants/{plant_id}/harvest
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.garden_registry import GardenRegistry
from backend.models import (
    CreatePlantRequest,
    HarvestResponse,
    PlantView,
    UpdatePlantRequest,
    UpdateResponse,
)

logger = logging.getLogger(__name__)


def _not_found(plant_id: str) -> JSONResponse:
    return JSONResponse({"error": f"Plant not found: {plant_id}"}, status_code=404)


def setup_router(garden_registry: GardenRegistry) -> APIRouter:
    """Create the plants router bound to a garden registry.

    Args:
        garden_registry: The registry holding the garden's plants

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/plants", tags=["plants"])

    @router.get("", response_model=list[PlantView])
    async def list_plants():
        """List every plant in the garden."""
        return [PlantView.from_plant(plant_id, plant) for plant_id, plant in garden_registry]

    @router.post("", response_model=PlantView, status_code=201)
    async def create_plant(request: CreatePlantRequest):
        """Plant a seed from a gene sequence, a starter preset, or at random."""
        plant_id, plant, issues = garden_registry.plant(
            sequence=request.sequence,
            starter=request.starter,
            random_genes=request.random,
        )
        return PlantView.from_plant(plant_id, plant, issues)

    @router.get("/{plant_id}", response_model=PlantView)
    async def get_plant(plant_id: str):
        plant = garden_registry.get_plant(plant_id)
        if plant is None:
            return _not_found(plant_id)
        return PlantView.from_plant(plant_id, plant)

    @router.post("/{plant_id}/update", response_model=UpdateResponse)
    async def update_plant(plant_id: str, request: UpdatePlantRequest):
        """Advance a plant by one tick."""
        plant = garden_registry.get_plant(plant_id)
        if plant is None:
            return _not_found(plant_id)

        result = plant.update(
            water_level=request.water_level,
            pest_present=request.pest_present,
            weather_event=request.weather_event,
        )
        event = result.event.value if result is not None else None
        if event == "died":
            logger.info("Plant %s died", plant_id[:8])
        return UpdateResponse(event=event, plant=PlantView.from_plant(plant_id, plant))

    @router.post("/{plant_id}/harvest", response_model=HarvestResponse)
    async def harvest_plant(plant_id: str):
        plant = garden_registry.get_plant(plant_id)
        if plant is None:
            return _not_found(plant_id)
        return HarvestResponse(**plant.harvest().to_dict())

    return router
