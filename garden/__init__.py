"""Garden: plant genetics, growth and breeding for a gardening game."""

from garden.entities.plant import Plant, PlantEvent, PlantState
from garden.genetics.breeding import PlantBreeder
from garden.plant_factory import create_random_plant, create_starter_plant

__version__ = "1.0.0"

__all__ = [
    "Plant",
    "PlantEvent",
    "PlantState",
    "PlantBreeder",
    "create_random_plant",
    "create_starter_plant",
]
