"""Breeding: crossing two plants into an offspring.

Inheritance follows simple Mendelian rules:
- Qualitative genes: each parent passes one randomly chosen allele
- Quantitative genes: the parents' levels are averaged with a little noise
- Every offspring gene may then mutate

Each successful cross is appended to the breeder's history, which is never
truncated.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from garden.config.genetics import DEFAULT_BREEDING_CONFIG, MUTATION_STEP, BreedingConfig
from garden.genetics.gene import Gene, Genotype, gene_mean
from garden.genetics.genome_codec import serialize_genotype
from garden.genetics.registry import GENE_TRAITS
from garden.genetics.trait import TraitDefinition
from garden.util.math_utils import round_half_up
from garden.util.rng import require_rng_param

if TYPE_CHECKING:
    from garden.entities.plant import Plant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossingRecord:
    """One entry of the crossing history."""

    parent_a: str
    parent_b: str
    offspring: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parent_a": self.parent_a,
            "parent_b": self.parent_b,
            "offspring": self.offspring,
            "timestamp": self.timestamp.isoformat(),
        }


def _mean_or_default(trait: TraitDefinition, gene: Gene) -> float:
    mean = gene_mean(gene)
    return trait.default_level if mean is None else mean


def inherit_qualitative(gene_a: Gene, gene_b: Gene, rng: random.Random) -> Gene:
    """Each parent contributes one of its own alleles, parent A first."""
    return Gene.pair(rng.choice(gene_a.alleles), rng.choice(gene_b.alleles))


def inherit_quantitative(
    trait: TraitDefinition,
    gene_a: Gene,
    gene_b: Gene,
    *,
    variation: float,
    rng: random.Random,
) -> Gene:
    """Average both parents' levels, add uniform noise, clamp and re-encode."""
    average = (_mean_or_default(trait, gene_a) + _mean_or_default(trait, gene_b)) / 2
    level = round_half_up(average + rng.uniform(-variation, variation))
    return trait.encode_level(trait.clamp_level(level))


def mutate_gene(gene: Gene, trait: Optional[TraitDefinition], rng: random.Random) -> Gene:
    """Apply a single point mutation to a gene.

    Qualitative genes get one allele replaced by a random registry allele;
    quantitative genes move one step up or down.
    """
    if trait is None:
        return gene

    if trait.is_qualitative:
        symbols = trait.allele_symbols
        if not symbols:
            return gene
        index = rng.randrange(len(gene.alleles))
        return gene.with_allele(index, rng.choice(symbols))

    level = _mean_or_default(trait, gene)
    level += -MUTATION_STEP if rng.random() < 0.5 else MUTATION_STEP
    return trait.encode_level(trait.clamp_level(round_half_up(level)))


class PlantBreeder:
    """Crosses plants and keeps the history of every cross.

    Attributes:
        config: Mutation chance and quantitative variation
        rng: Random source shared with the offspring it creates
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        config: BreedingConfig = DEFAULT_BREEDING_CONFIG,
    ) -> None:
        self.rng = require_rng_param(rng, "PlantBreeder.__init__")
        self.config = config
        self._crossing_history: List[CrossingRecord] = []

    @property
    def history(self) -> Tuple[CrossingRecord, ...]:
        return tuple(self._crossing_history)

    def get_crossing_history(self) -> List[CrossingRecord]:
        return list(self._crossing_history)

    def cross_genotypes(self, genes_a: Genotype, genes_b: Genotype) -> Genotype:
        """Combine two parent genotypes into an offspring genotype."""
        rng = self.rng
        offspring: Genotype = {}

        for key, trait in GENE_TRAITS.items():
            gene_a = genes_a.get(key)
            gene_b = genes_b.get(key)
            if gene_a is None or gene_b is None:
                offspring[key] = trait.default_gene
                continue

            if trait.is_qualitative:
                gene = inherit_qualitative(gene_a, gene_b, rng)
            else:
                gene = inherit_quantitative(
                    trait, gene_a, gene_b, variation=self.config.variation, rng=rng
                )

            if rng.random() < self.config.mutation_chance:
                mutated = mutate_gene(gene, trait, rng)
                logger.debug("Mutation on %s: %s -> %s", key, gene, mutated)
                gene = mutated

            offspring[key] = gene

        return offspring

    def cross(self, parent_a: Optional["Plant"], parent_b: Optional["Plant"]) -> Optional["Plant"]:
        """Cross two plants; returns None when either parent is missing."""
        from garden.entities.plant import Plant

        if parent_a is None or parent_b is None:
            return None

        offspring_genes = self.cross_genotypes(parent_a.genes, parent_b.genes)
        offspring = Plant(serialize_genotype(offspring_genes), rng=self.rng)

        record = CrossingRecord(
            parent_a=parent_a.to_sequence(),
            parent_b=parent_b.to_sequence(),
            offspring=offspring.to_sequence(),
        )
        self._crossing_history.append(record)
        logger.debug("Crossed %s x %s -> %s", record.parent_a, record.parent_b, record.offspring)
        return offspring
