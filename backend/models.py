"""Data models for the Garden API."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from garden.entities.plant import Plant


class CreatePlantRequest(BaseModel):
    """Request to plant a new seed.

    ``sequence`` wins over ``starter``, which wins over ``random``.
    """

    sequence: Optional[str] = None
    starter: Optional[str] = None
    random: bool = False


class UpdatePlantRequest(BaseModel):
    """Environment signals for one growth tick."""

    water_level: float = Field(default=100.0, ge=0.0)
    pest_present: bool = False
    weather_event: Optional[Literal["drought", "storm"]] = None


class CrossRequest(BaseModel):
    parent_a: str
    parent_b: str


class PlantInfoData(BaseModel):
    """Display summary of a plant."""

    name: str
    flower_color: str
    leaf_shape: str
    size: float
    growth_days: int
    water_needs: int
    resistance: int
    sell_price: int
    emoji: str
    growth: float
    is_ready: bool


class PlantView(BaseModel):
    """A plant as seen by the client."""

    id: str
    sequence: str
    state: str
    health: float
    watered: bool
    info: PlantInfoData
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def from_plant(
        cls, plant_id: str, plant: Plant, warnings: Optional[List[str]] = None
    ) -> "PlantView":
        return cls(
            id=plant_id,
            sequence=plant.to_sequence(),
            state=plant.state.value,
            health=plant.health,
            watered=plant.watered,
            info=PlantInfoData(**plant.get_info().to_dict()),
            warnings=warnings or [],
        )


class UpdateResponse(BaseModel):
    event: Optional[str]
    plant: PlantView


class HarvestRewardsData(BaseModel):
    coins: int
    seeds: int
    gene_sequence: str


class HarvestResponse(BaseModel):
    success: bool
    message: str
    rewards: Optional[HarvestRewardsData] = None


class CrossingRecordData(BaseModel):
    parent_a: str
    parent_b: str
    offspring: str
    timestamp: str


class TraitData(BaseModel):
    key: str
    name: str
    kind: str
    default: str
    details: Dict[str, Any] = Field(default_factory=dict)
