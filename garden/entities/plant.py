"""Plant entity with diploid genetics.

A plant owns its genotype, the phenotype resolved from it, and the runtime
state a garden mutates each tick (growth progress, health, watering). The
caller drives it: one ``update`` per simulated day, ``harvest`` when the
player collects, ``get_info`` for display.
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from garden.config.plants import (
    BASE_COINS,
    BASE_GROWTH_INCREMENT,
    DEFAULT_COIN_MULTIPLIER,
    DEFAULT_DROUGHT_RESISTANCE,
    DEFAULT_FLOWER_COLOR,
    DEFAULT_GROWTH_DAYS,
    DEFAULT_LEAF_SHAPE,
    DEFAULT_PEST_DAMAGE_CHANCE,
    DEFAULT_SEED_CHANCE,
    DEFAULT_SIZE,
    DEFAULT_WATER_NEED,
    DEFAULT_WEATHER_DAMAGE_CHANCE,
    DROUGHT_GROWTH_FACTOR,
    DROUGHT_HEALTH_DAMAGE,
    DROUGHT_HEALTH_PENALTY,
    FLOWER_EMOJI,
    MAX_HEALTH,
    MAX_PROGRESS,
    PEST_GROWTH_FACTOR,
    PEST_HEALTH_DAMAGE,
    SEEDLING_EMOJI,
    SEVERE_DROUGHT_RATIO,
    STORM_HEALTH_DAMAGE,
    STORM_MAX_SIZE,
    WEATHER_DROUGHT,
    WEATHER_STORM,
)
from garden.genetics.expression import Phenotype, resolve_phenotype
from garden.genetics.gene import Gene, Genotype
from garden.genetics.genome_codec import parse_sequence, serialize_genotype
from garden.genetics.registry import (
    FLOWER_COLOR,
    GROWTH_RATE,
    LEAF_SHAPE,
    RESISTANCE,
    SIZE,
    WATER_NEEDS,
    YIELD,
)
from garden.util.math_utils import clamp, round_half_up
from garden.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class PlantState(Enum):
    GROWING = "growing"
    READY = "ready"
    DEAD = "dead"


class PlantEvent(str, Enum):
    """Outcome of a single growth tick."""

    GROWING = "growing"
    MATURED = "matured"
    DIED = "died"


@dataclass(frozen=True)
class UpdateResult:
    event: PlantEvent

    def to_dict(self) -> Dict[str, Any]:
        return {"event": self.event.value}


@dataclass(frozen=True)
class HarvestRewards:
    coins: int
    seeds: int
    gene_sequence: str


@dataclass(frozen=True)
class HarvestResult:
    """Result of a harvest attempt; ``rewards`` is None on failure."""

    success: bool
    message: str
    rewards: Optional[HarvestRewards] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.rewards is not None:
            data["rewards"] = asdict(self.rewards)
        return data


@dataclass(frozen=True)
class PlantInfo:
    """Display-ready summary of a plant."""

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

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Plant:
    """A garden plant.

    Attributes:
        genes: Structured genotype, one Gene per registry key
        phenotype: Traits resolved from ``genes`` at construction
        progress: Growth percentage (0-100)
        health: Plant health (0-100)
        ready: True once progress reaches 100; harvest-eligible
        watered: Whether the last tick met the plant's water needs
        rng: Random source for pest, weather and seed draws (required)
    """

    def __init__(self, sequence: Optional[str] = None, *, rng: Optional[random.Random] = None):
        self.genes: Genotype = parse_sequence(sequence)
        self.phenotype: Phenotype = resolve_phenotype(self.genes)
        self.progress: float = 0.0
        self.health: float = MAX_HEALTH
        self.ready = False
        self.watered = True
        self.rng = require_rng_param(rng, "Plant.__init__")

    @classmethod
    def from_genotype(
        cls, genotype: Mapping[str, Gene], *, rng: Optional[random.Random] = None
    ) -> "Plant":
        return cls(serialize_genotype(genotype), rng=rng)

    def __repr__(self) -> str:
        return f"Plant({self.to_sequence()!r}, progress={self.progress:.1f}, health={self.health:.1f})"

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> PlantState:
        if self.health <= 0:
            return PlantState.DEAD
        if self.ready:
            return PlantState.READY
        return PlantState.GROWING

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def to_sequence(self) -> str:
        return serialize_genotype(self.genes)

    def _trait(self, key: str) -> Mapping[str, Any]:
        return self.phenotype.get(key) or {}

    # =========================================================================
    # Simulation
    # =========================================================================

    def update(
        self,
        water_level: float = 100,
        pest_present: bool = False,
        weather_event: Optional[str] = None,
    ) -> Optional[UpdateResult]:
        """Advance the plant by one tick.

        Args:
            water_level: Water available this tick (0-100+)
            pest_present: Whether pests are attacking this tick
            weather_event: None, ``"drought"`` or ``"storm"``

        Returns:
            None if the plant was already ready, otherwise the tick's event.
        """
        if self.ready:
            return None
        if not self.is_alive:
            return UpdateResult(PlantEvent.DIED)

        growth = self._trait(GROWTH_RATE)
        increment = BASE_GROWTH_INCREMENT
        if growth:
            increment *= growth.get("effectiveValue") or growth["value"]

        # Under-watering slows growth and, when severe, hurts health
        water_need = self._trait(WATER_NEEDS).get("effectiveWaterPerDay") or DEFAULT_WATER_NEED
        if water_level < water_need:
            water_ratio = water_level / water_need
            increment *= water_ratio
            if water_ratio < SEVERE_DROUGHT_RATIO:
                self.health -= (1 - water_ratio) * DROUGHT_HEALTH_PENALTY
            self.watered = False
        else:
            self.watered = True

        resistance = self._trait(RESISTANCE)

        if pest_present:
            damage_chance = (
                resistance.get("effectivePestDamageChance") or DEFAULT_PEST_DAMAGE_CHANCE
            )
            if self.rng.random() < damage_chance:
                increment *= PEST_GROWTH_FACTOR
                self.health -= PEST_HEALTH_DAMAGE

        if weather_event == WEATHER_DROUGHT:
            drought_resistance = (
                self._trait(WATER_NEEDS).get("droughtResistance") or DEFAULT_DROUGHT_RESISTANCE
            )
            if self.rng.random() > drought_resistance:
                increment *= DROUGHT_GROWTH_FACTOR
                self.health -= DROUGHT_HEALTH_DAMAGE
        elif weather_event == WEATHER_STORM:
            weather_chance = (
                resistance.get("weatherDamageChance") or DEFAULT_WEATHER_DAMAGE_CHANCE
            )
            # Larger plants are more vulnerable to storms
            size = self._trait(SIZE).get("value") or DEFAULT_SIZE
            if self.rng.random() < weather_chance * (size / STORM_MAX_SIZE):
                increment = 0.0
                self.health -= STORM_HEALTH_DAMAGE
        elif weather_event:
            logger.debug("Ignoring unknown weather event %r", weather_event)

        self.progress += increment
        if self.progress >= MAX_PROGRESS:
            self.progress = MAX_PROGRESS
            self.ready = True

        self.health = clamp(self.health, 0.0, MAX_HEALTH)

        if self.health <= 0:
            self.health = 0.0
            logger.debug("Plant %s died at %.1f%% growth", self.to_sequence(), self.progress)
            return UpdateResult(PlantEvent.DIED)
        if self.ready:
            logger.debug("Plant %s matured", self.to_sequence())
            return UpdateResult(PlantEvent.MATURED)
        return UpdateResult(PlantEvent.GROWING)

    def harvest(self) -> HarvestResult:
        """Collect rewards from a ready plant.

        The plant's state is left as-is; clearing the plot is the caller's job.
        """
        if not self.ready:
            return HarvestResult(success=False, message="Plant not ready for harvest")

        yield_ = self._trait(YIELD)
        coins = self._sell_price()
        seed_chance = yield_.get("seedChance") or DEFAULT_SEED_CHANCE
        seeds = 1 if self.rng.random() < seed_chance else 0

        return HarvestResult(
            success=True,
            message=f"Harvested {self._display_name()} for {coins} coins and {seeds} seeds!",
            rewards=HarvestRewards(coins=coins, seeds=seeds, gene_sequence=self.to_sequence()),
        )

    # =========================================================================
    # Display
    # =========================================================================

    def _sell_price(self) -> int:
        multiplier = (
            self._trait(YIELD).get("effectiveCoinMultiplier") or DEFAULT_COIN_MULTIPLIER
        )
        return round_half_up(BASE_COINS * multiplier)

    def _display_name(self) -> str:
        flower = self._trait(FLOWER_COLOR).get("name", "Unknown")
        leaf = self._trait(LEAF_SHAPE).get("name", "Unknown")
        return f"{flower} {leaf} Plant"

    def get_emoji(self) -> str:
        flower = self.phenotype.get(FLOWER_COLOR)
        if not flower:
            return SEEDLING_EMOJI
        return FLOWER_EMOJI.get(flower["name"].lower(), SEEDLING_EMOJI)

    def get_info(self) -> PlantInfo:
        pest_chance = self._trait(RESISTANCE).get("effectivePestDamageChance")
        if not pest_chance:
            pest_chance = DEFAULT_PEST_DAMAGE_CHANCE

        return PlantInfo(
            name=self._display_name(),
            flower_color=self._trait(FLOWER_COLOR).get("value", DEFAULT_FLOWER_COLOR),
            leaf_shape=self._trait(LEAF_SHAPE).get("value") or DEFAULT_LEAF_SHAPE,
            size=self._trait(SIZE).get("value") or DEFAULT_SIZE,
            growth_days=self._trait(GROWTH_RATE).get("daysToMature") or DEFAULT_GROWTH_DAYS,
            water_needs=self._trait(WATER_NEEDS).get("effectiveWaterPerDay") or DEFAULT_WATER_NEED,
            resistance=round_half_up((1 - pest_chance) * 100),
            sell_price=self._sell_price(),
            emoji=self.get_emoji(),
            growth=self.progress,
            is_ready=self.ready,
        )
