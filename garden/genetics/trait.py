"""Trait definitions for the gene registry.

This module provides:
- TraitKind: qualitative (allele symbols) vs quantitative (numeric levels)
- Allele / Blend: display records a qualitative gene can resolve to
- TraitDefinition: declarative, immutable description of one gene
- Builders that freeze the nested tables into read-only mappings
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from garden.exceptions import GeneticsError
from garden.genetics.gene import Gene
from garden.util.math_utils import clamp, round_half_up


class TraitKind(Enum):
    QUALITATIVE = "qualitative"
    QUANTITATIVE = "quantitative"


@dataclass(frozen=True)
class Allele:
    """A qualitative allele.

    Attributes:
        symbol: Single character used in the gene sequence
        name: Display name ("Red", "Heart")
        dominance: Rank used when two different alleles meet without a blend
        value: Display value (hex colour, shape id)
    """

    symbol: str
    name: str
    dominance: int
    value: str

    def to_record(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "dominance": self.dominance}


@dataclass(frozen=True)
class Blend:
    """Phenotype shown by a specific heterozygous allele pair."""

    name: str
    value: str

    def to_record(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


def blend_key(first: str, second: str) -> str:
    """Order-independent key for an allele pair."""
    return "".join(sorted((first, second)))


@dataclass(frozen=True)
class TraitDefinition:
    """Declarative specification for one gene of the registry.

    Qualitative traits use ``alleles`` and ``blends``; quantitative traits use
    the numeric range, ``default_level`` and ``value_map``. ``default_value``
    is always a valid wire value for the gene.
    """

    key: str
    name: str
    kind: TraitKind
    default_value: str
    alleles: Mapping[str, Allele] = field(default_factory=lambda: MappingProxyType({}))
    blends: Mapping[str, Blend] = field(default_factory=lambda: MappingProxyType({}))
    min_value: float = 0
    max_value: float = 0
    default_level: float = 0
    value_map: Mapping[float, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_qualitative(self) -> bool:
        return self.kind is TraitKind.QUALITATIVE

    @property
    def is_quantitative(self) -> bool:
        return self.kind is TraitKind.QUANTITATIVE

    @property
    def default_gene(self) -> Gene:
        return Gene.from_wire(self.default_value)

    @property
    def first_allele(self) -> Allele:
        return next(iter(self.alleles.values()))

    @property
    def allele_symbols(self) -> Tuple[str, ...]:
        return tuple(self.alleles)

    def allele(self, symbol: str) -> Optional[Allele]:
        return self.alleles.get(symbol)

    def blend_for(self, first: str, second: str) -> Optional[Blend]:
        return self.blends.get(blend_key(first, second))

    def clamp_level(self, level: float) -> float:
        return clamp(level, self.min_value, self.max_value)

    def effects(self, level: float) -> Dict[str, Any]:
        """Gameplay fields for a level; empty when the level is unmapped."""
        return dict(self.value_map.get(level, {}))

    def reachable_levels(self) -> Tuple[float, ...]:
        """Distinct levels a single-digit gene can express, ascending."""
        return tuple(sorted({self.clamp_level(digit) for digit in range(10)}))

    def encode_level(self, level: float) -> Gene:
        """Encode a clamped level as a doubled-digit gene.

        Ranges with fractional bounds (growth rate 0.5..1.5) cannot store the
        bound itself as a digit, so the digit chosen is the first candidate
        that resolves back to ``level``.
        """
        if not self.is_quantitative:
            raise GeneticsError(f"{self.key} is not a quantitative trait")
        level = self.clamp_level(level)
        for digit in (round_half_up(level), math.floor(level), math.ceil(level)):
            if 0 <= digit <= 9 and self.clamp_level(digit) == level:
                return Gene.doubled(digit)
        return Gene.doubled(int(clamp(round_half_up(level), 0, 9)))


def qualitative_trait(
    key: str,
    name: str,
    alleles: Iterable[Allele],
    *,
    default_value: str,
    blends: Optional[Mapping[str, Blend]] = None,
) -> TraitDefinition:
    """Build a frozen qualitative trait; blend keys are normalised to sorted order."""
    allele_table = MappingProxyType({allele.symbol: allele for allele in alleles})
    blend_table = MappingProxyType(
        {blend_key(pair[0], pair[1]): blend for pair, blend in (blends or {}).items()}
    )
    return TraitDefinition(
        key=key,
        name=name,
        kind=TraitKind.QUALITATIVE,
        default_value=default_value,
        alleles=allele_table,
        blends=blend_table,
    )


def quantitative_trait(
    key: str,
    name: str,
    *,
    min_value: float,
    max_value: float,
    default_level: float,
    value_map: Mapping[float, Mapping[str, Any]],
) -> TraitDefinition:
    """Build a frozen quantitative trait.

    The default wire value is the bare scalar (``"3"``, ``"1"``), which the
    resolver reads as a haploid token.
    """
    levels = MappingProxyType(
        {level: MappingProxyType(dict(effects)) for level, effects in value_map.items()}
    )
    return TraitDefinition(
        key=key,
        name=name,
        kind=TraitKind.QUANTITATIVE,
        default_value=f"{default_level:g}",
        min_value=min_value,
        max_value=max_value,
        default_level=default_level,
        value_map=levels,
    )
