"""Validation helpers for genotypes.

These functions are intended for debugging and safety checks, not hot-path
logic. The resolver tolerates every malformed gene by falling back to
defaults; validation reports what was tolerated so callers can surface it.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from garden.genetics.gene import Gene, digit_value, parse_number
from garden.genetics.registry import GENE_TRAITS
from garden.genetics.trait import TraitDefinition
from garden.util.math_utils import round_half_up


def _quantitative_issue(key: str, trait: TraitDefinition, gene: Gene) -> Optional[str]:
    if gene.is_diploid:
        digits = [digit_value(symbol) for symbol in gene.alleles]
        bad = [symbol for symbol, digit in zip(gene.alleles, digits) if digit is None]
        if bad:
            return f"{key}: non-numeric allele {bad[0]!r}"
        level = round_half_up(sum(digits) / 2)
    else:
        parsed = parse_number(gene.first)
        if parsed is None:
            return f"{key}: non-numeric value {gene.first!r}"
        level = round_half_up(parsed)

    # Fractional bounds sit half a step from the nearest digit, so only a
    # whole step of clamping counts as out of range.
    clamped = trait.clamp_level(level)
    if abs(level - clamped) >= 1:
        return f"{key}: level {level} not in [{trait.min_value}, {trait.max_value}]"
    if clamped not in trait.value_map:
        return f"{key}: level {clamped} has no effects"
    return None


def validate_genotype(genotype: Mapping[str, Gene]) -> List[str]:
    """Validate a genotype against the registry.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []

    for key in genotype:
        if key not in GENE_TRAITS:
            issues.append(f"{key}: unknown gene")

    for key, trait in GENE_TRAITS.items():
        gene = genotype.get(key)
        if gene is None:
            issues.append(f"{key}: missing gene")
            continue

        if trait.is_qualitative:
            if not gene.is_diploid:
                issues.append(f"{key}: expected two alleles, got {str(gene)!r}")
                continue
            for symbol in gene.alleles:
                if trait.allele(symbol) is None:
                    issues.append(f"{key}: unknown allele {symbol!r}")
            continue

        issue = _quantitative_issue(key, trait, gene)
        if issue is not None:
            issues.append(issue)

    return issues
