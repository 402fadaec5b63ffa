"""Factories for founding plants.

Random plants seed a fresh garden with genetic diversity; starter plants are
fixed, recognisable presets handed to new players.
"""

import logging
import random
from types import MappingProxyType
from typing import Mapping, Optional

from garden.entities.plant import Plant
from garden.genetics.gene import Gene, Genotype
from garden.genetics.registry import GENE_TRAITS
from garden.util.rng import require_rng_param

logger = logging.getLogger(__name__)

GENERIC_STARTER = "FC:RB-SZ:33-LS:11-BP:11-GR:10-YD:33-RS:22-WN:22"

STARTER_SEQUENCES: Mapping[str, str] = MappingProxyType(
    {
        # Orange, fast growing, high yield
        "carrot": "FC:RY-SZ:22-LS:33-BP:11-GR:12-YD:44-RS:22-WN:22",
        # Red, medium size, resistant
        "tomato": "FC:RR-SZ:33-LS:11-BP:22-GR:10-YD:33-RS:33-WN:22",
        # Yellow, tall, high yield, thirsty
        "corn": "FC:YY-SZ:55-LS:33-BP:33-GR:08-YD:55-RS:22-WN:33",
    }
)


def random_genotype(rng: random.Random) -> Genotype:
    """Draw uniformly random alleles and levels for every registered gene."""
    genotype: Genotype = {}
    for key, trait in GENE_TRAITS.items():
        if trait.is_qualitative:
            symbols = trait.allele_symbols
            genotype[key] = Gene.pair(rng.choice(symbols), rng.choice(symbols))
        else:
            genotype[key] = trait.encode_level(rng.choice(trait.reachable_levels()))
    return genotype


def create_random_plant(rng: Optional[random.Random] = None) -> Plant:
    rng = require_rng_param(rng, "create_random_plant")
    return Plant.from_genotype(random_genotype(rng), rng=rng)


def create_starter_plant(kind: Optional[str] = None, rng: Optional[random.Random] = None) -> Plant:
    """Create one of the preset plants; unknown kinds get the generic starter."""
    sequence = STARTER_SEQUENCES.get((kind or "").lower())
    if sequence is None:
        if kind:
            logger.debug("No starter preset named %r, using generic", kind)
        sequence = GENERIC_STARTER
    return Plant(sequence, rng=rng)
