"""Garden registry for the plants served by the API.

This module provides the GardenRegistry class which holds the plants of one
in-memory garden together with the breeder that crosses them. Each plant is
identified by a unique plant_id.
"""

import logging
import random
import uuid
from typing import Dict, Iterator, List, Optional, Tuple

from garden.entities.plant import Plant
from garden.genetics.breeding import PlantBreeder
from garden.genetics.validation import validate_genotype
from garden.plant_factory import create_random_plant, create_starter_plant

logger = logging.getLogger(__name__)


class GardenRegistry:
    """Registry for the plants of a garden.

    The registry supports:
    - Planting from a gene sequence, a starter preset or at random
    - Listing and accessing plants by ID
    - Crossing two registered plants into a new registered plant
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """Initialize the registry.

        Args:
            rng: Random source shared by every plant and the breeder
            seed: Seed for a fresh random source when ``rng`` is not given
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.breeder = PlantBreeder(rng=self.rng)
        self._plants: Dict[str, Plant] = {}

    def __iter__(self) -> Iterator[Tuple[str, Plant]]:
        return iter(self._plants.items())

    def __len__(self) -> int:
        return len(self._plants)

    @property
    def plant_count(self) -> int:
        return len(self._plants)

    def add_plant(self, plant: Plant) -> str:
        plant_id = str(uuid.uuid4())
        self._plants[plant_id] = plant
        logger.info("Planted %s as %s", plant.to_sequence(), plant_id[:8])
        return plant_id

    def plant(
        self,
        *,
        sequence: Optional[str] = None,
        starter: Optional[str] = None,
        random_genes: bool = False,
    ) -> Tuple[str, Plant, List[str]]:
        """Create and register a plant.

        A gene sequence takes precedence over a starter preset, which takes
        precedence over random genes. With none of them the plant gets the
        default genotype.

        Returns:
            (plant_id, plant, validation issues of the parsed genotype)
        """
        if sequence is not None:
            plant = Plant(sequence, rng=self.rng)
        elif starter is not None:
            plant = create_starter_plant(starter, rng=self.rng)
        elif random_genes:
            plant = create_random_plant(rng=self.rng)
        else:
            plant = Plant(rng=self.rng)

        issues = validate_genotype(plant.genes)
        if issues:
            logger.info("Plant genotype has %d issue(s): %s", len(issues), "; ".join(issues))
        return self.add_plant(plant), plant, issues

    def get_plant(self, plant_id: str) -> Optional[Plant]:
        return self._plants.get(plant_id)

    def cross(self, plant_id_a: str, plant_id_b: str) -> Optional[Tuple[str, Plant]]:
        """Cross two registered plants; None when either ID is unknown."""
        offspring = self.breeder.cross(self.get_plant(plant_id_a), self.get_plant(plant_id_b))
        if offspring is None:
            return None
        return self.add_plant(offspring), offspring
