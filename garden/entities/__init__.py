"""Garden entities."""

from garden.entities.plant import (
    HarvestResult,
    HarvestRewards,
    Plant,
    PlantEvent,
    PlantInfo,
    PlantState,
    UpdateResult,
)

__all__ = [
    "Plant",
    "PlantState",
    "PlantEvent",
    "PlantInfo",
    "UpdateResult",
    "HarvestResult",
    "HarvestRewards",
]
