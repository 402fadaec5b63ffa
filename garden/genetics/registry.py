"""The gene registry.

Declarative, read-only definitions for every gene a plant carries. The table
is built once at import time; lookups never mutate it. Iteration order is the
order genes appear in a serialized sequence.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from garden.genetics.gene import Gene, Genotype
from garden.genetics.trait import (
    Allele,
    Blend,
    TraitDefinition,
    qualitative_trait,
    quantitative_trait,
)

FLOWER_COLOR = "FC"
SIZE = "SZ"
LEAF_SHAPE = "LS"
BRANCHING_PATTERN = "BP"
GROWTH_RATE = "GR"
YIELD = "YD"
RESISTANCE = "RS"
WATER_NEEDS = "WN"

_PURPLE = Blend("Purple", "#9955FF")

_TRAITS = (
    # Visual traits
    qualitative_trait(
        FLOWER_COLOR,
        "Flower Color",
        [
            Allele("R", "Red", 2, "#FF5555"),
            Allele("B", "Blue", 2, "#5555FF"),
            Allele("Y", "Yellow", 2, "#FFFF55"),
            Allele("W", "White", 1, "#FFFFFF"),
            Allele("P", "Pink", 2, "#FF55FF"),
        ],
        default_value="WW",
        blends={
            "RB": _PURPLE,
            "RY": Blend("Orange", "#FF9955"),
            "BY": Blend("Green", "#55FF55"),
            "RW": Blend("Light Red", "#FF9999"),
            "BW": Blend("Light Blue", "#9999FF"),
            "YW": Blend("Light Yellow", "#FFFF99"),
            "RP": Blend("Deep Pink", "#FF5599"),
            "BP": _PURPLE,
            "YP": Blend("Peach", "#FFAA77"),
        },
    ),
    quantitative_trait(
        SIZE,
        "Size",
        min_value=1,
        max_value=5,
        default_level=3,
        value_map={
            1: {"scale": 0.7, "growthModifier": 1.2, "waterModifier": 0.8},
            2: {"scale": 0.85, "growthModifier": 1.1, "waterModifier": 0.9},
            3: {"scale": 1.0, "growthModifier": 1.0, "waterModifier": 1.0},
            4: {"scale": 1.15, "growthModifier": 0.9, "waterModifier": 1.1},
            5: {"scale": 1.3, "growthModifier": 0.8, "waterModifier": 1.2},
        },
    ),
    qualitative_trait(
        LEAF_SHAPE,
        "Leaf Shape",
        [
            Allele("1", "Oval", 2, "oval"),
            Allele("2", "Heart", 2, "heart"),
            Allele("3", "Pointed", 2, "pointed"),
        ],
        default_value="11",
    ),
    quantitative_trait(
        BRANCHING_PATTERN,
        "Branching Pattern",
        min_value=1,
        max_value=3,
        default_level=1,
        value_map={
            1: {"branches": 1, "angle": 0},
            2: {"branches": 2, "angle": 30},
            3: {"branches": 3, "angle": 25},
        },
    ),
    # Statistical traits
    quantitative_trait(
        GROWTH_RATE,
        "Growth Rate",
        min_value=0.5,
        max_value=1.5,
        default_level=1.0,
        value_map={
            0.5: {"daysToMature": 15},
            0.7: {"daysToMature": 12},
            1.0: {"daysToMature": 10},
            1.2: {"daysToMature": 8},
            1.5: {"daysToMature": 6},
        },
    ),
    quantitative_trait(
        YIELD,
        "Yield",
        min_value=1,
        max_value=5,
        default_level=3,
        value_map={
            1: {"coinMultiplier": 0.8, "seedChance": 0.3},
            2: {"coinMultiplier": 0.9, "seedChance": 0.4},
            3: {"coinMultiplier": 1.0, "seedChance": 0.5},
            4: {"coinMultiplier": 1.2, "seedChance": 0.6},
            5: {"coinMultiplier": 1.5, "seedChance": 0.7},
        },
    ),
    quantitative_trait(
        RESISTANCE,
        "Resistance",
        min_value=1,
        max_value=3,
        default_level=2,
        value_map={
            1: {"pestDamageChance": 0.5, "weatherDamageChance": 0.4},
            2: {"pestDamageChance": 0.2, "weatherDamageChance": 0.2},
            3: {"pestDamageChance": 0.05, "weatherDamageChance": 0.05},
        },
    ),
    quantitative_trait(
        WATER_NEEDS,
        "Water Needs",
        min_value=1,
        max_value=3,
        default_level=2,
        value_map={
            1: {"waterPerDay": 10, "droughtResistance": 0.7},
            2: {"waterPerDay": 20, "droughtResistance": 0.5},
            3: {"waterPerDay": 30, "droughtResistance": 0.3},
        },
    ),
)

GENE_TRAITS: Mapping[str, TraitDefinition] = MappingProxyType(
    {trait.key: trait for trait in _TRAITS}
)


def get_trait(key: str) -> Optional[TraitDefinition]:
    """Look up a trait; None means the key is not a known gene."""
    return GENE_TRAITS.get(key)


def trait_keys() -> Tuple[str, ...]:
    return tuple(GENE_TRAITS)


def default_gene(key: str) -> Optional[Gene]:
    trait = GENE_TRAITS.get(key)
    return trait.default_gene if trait is not None else None


def default_genotype() -> Genotype:
    """A fresh genotype holding every trait's default gene."""
    return {key: trait.default_gene for key, trait in GENE_TRAITS.items()}
