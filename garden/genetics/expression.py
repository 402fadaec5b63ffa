"""Gene expression logic for translating genotype to phenotype.

This module contains the functional logic that turns a plant's genes into
observable traits: dominance and blending for qualitative genes, diploid
averaging for quantitative genes, and the cross-trait interactions layered
on top. Keeping it apart from the Plant entity allows easier testing and
tuning.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from garden.config.genetics import (
    DEFAULT_DAYS_TO_MATURE,
    GROWTH_TRADEOFF_FACTOR,
    GROWTH_TRADEOFF_THRESHOLD,
    INBREEDING_PENALTY_PER_GENE,
    INBREEDING_THRESHOLD,
)
from garden.genetics.gene import Gene, digit_value, parse_number
from garden.genetics.registry import (
    GENE_TRAITS,
    GROWTH_RATE,
    RESISTANCE,
    SIZE,
    WATER_NEEDS,
    YIELD,
)
from garden.genetics.trait import TraitDefinition
from garden.util.math_utils import round_half_up

Phenotype = Dict[str, Dict[str, Any]]


def resolve_qualitative(trait: TraitDefinition, gene: Gene) -> Dict[str, Any]:
    """Resolve an allele pair to its display record.

    Homozygous pairs show the allele itself. Heterozygous pairs use the blend
    table first, then dominance; ties go to the first allele of the gene.
    Unrecognised symbols fall back to the trait's first allele.
    """
    if not gene.is_diploid:
        return trait.first_allele.to_record()

    first = trait.allele(gene.first)
    second = trait.allele(gene.second)

    if gene.is_homozygous:
        return (first or trait.first_allele).to_record()

    blend = trait.blend_for(gene.first, gene.second)
    if blend is not None:
        return blend.to_record()

    if first is None or second is None:
        return trait.first_allele.to_record()
    if second.dominance > first.dominance:
        return second.to_record()
    return first.to_record()


def quantitative_level(trait: TraitDefinition, gene: Gene) -> float:
    """Numeric level expressed by a quantitative gene, clamped to the trait range."""
    if gene.is_diploid:
        first = digit_value(gene.first)
        second = digit_value(gene.second)
        allele1 = first if first is not None else trait.min_value
        allele2 = second if second is not None else trait.min_value
        level = round_half_up((allele1 + allele2) / 2)
    else:
        parsed = parse_number(gene.first)
        level = round_half_up(parsed) if parsed is not None else trait.default_level
    return trait.clamp_level(level)


def resolve_quantitative(trait: TraitDefinition, gene: Gene) -> Dict[str, Any]:
    level = quantitative_level(trait, gene)
    return {"value": level, **trait.effects(level)}


def count_homozygous(genotype: Mapping[str, Gene]) -> int:
    return sum(1 for gene in genotype.values() if gene.is_homozygous)


def calculate_trait_interactions(phenotype: Phenotype, genotype: Mapping[str, Gene]) -> None:
    """Add the cross-trait ``effective*`` fields to a base phenotype in place.

    Each rule reads base fields only and is skipped when its trait is absent.
    """
    growth = phenotype.get(GROWTH_RATE)
    size = phenotype.get(SIZE)
    water = phenotype.get(WATER_NEEDS)
    resistance = phenotype.get(RESISTANCE)
    yield_ = phenotype.get(YIELD)

    # Size slows or speeds up growth
    if growth is not None:
        size_effect = (size or {}).get("growthModifier") or 1.0
        growth["effectiveValue"] = growth["value"] * size_effect
        base_days = (
            GENE_TRAITS[GROWTH_RATE].effects(growth["value"]).get("daysToMature")
            or DEFAULT_DAYS_TO_MATURE
        )
        growth["daysToMature"] = round_half_up(base_days / size_effect)

    # Bigger plants drink more
    if water is not None:
        size_effect = (size or {}).get("waterModifier") or 1.0
        base_water = water.get("waterPerDay") or 20
        water["effectiveWaterPerDay"] = round_half_up(base_water * size_effect)

    # Growth-resistance trade-off
    if resistance is not None:
        pest_chance = resistance.get("pestDamageChance", 0.0)
        if growth is not None and growth["value"] > GROWTH_TRADEOFF_THRESHOLD:
            boosted = pest_chance * (1 + (growth["value"] - 1.0) * GROWTH_TRADEOFF_FACTOR)
            resistance["effectivePestDamageChance"] = min(1.0, boosted)
        else:
            resistance["effectivePestDamageChance"] = pest_chance

    # Inbreeding depression counts every homozygous gene, qualitative included
    if yield_ is not None:
        coin_multiplier = yield_.get("coinMultiplier", 1.0)
        homozygous = count_homozygous(genotype)
        if homozygous > INBREEDING_THRESHOLD:
            factor = 1.0 - (homozygous - INBREEDING_THRESHOLD) * INBREEDING_PENALTY_PER_GENE
            yield_["effectiveCoinMultiplier"] = coin_multiplier * factor
        else:
            yield_["effectiveCoinMultiplier"] = coin_multiplier


def resolve_phenotype(genotype: Mapping[str, Gene]) -> Phenotype:
    """Convert a genotype into its observable traits."""
    phenotype: Phenotype = {}
    for key, gene in genotype.items():
        trait = GENE_TRAITS.get(key)
        if trait is None:
            continue
        if trait.is_qualitative:
            phenotype[key] = resolve_qualitative(trait, gene)
        else:
            phenotype[key] = resolve_quantitative(trait, gene)

    calculate_trait_interactions(phenotype, genotype)
    return phenotype
