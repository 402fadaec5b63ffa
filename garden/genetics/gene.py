"""In-memory genotype model.

The wire format carries each gene as a short string (``"RB"``, ``"33"``).
Inside the garden a gene is a tuple of allele symbols so dominance, averaging
and breeding work on typed pairs instead of string indexing. Conversion
happens only at the codec boundary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from garden.exceptions import GeneticsError

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Gene:
    """A gene as carried by one plant.

    Attributes:
        alleles: Two symbols for a diploid gene. Any wire value that is not
            exactly two characters is kept whole as a single haploid token.
    """

    alleles: Tuple[str, ...]

    @classmethod
    def from_wire(cls, text: str) -> "Gene":
        if len(text) == 2:
            return cls((text[0], text[1]))
        return cls((text,))

    @classmethod
    def pair(cls, first: str, second: str) -> "Gene":
        return cls((first, second))

    @classmethod
    def doubled(cls, digit: int) -> "Gene":
        """Encode a quantitative level as the same digit on both alleles."""
        if not 0 <= digit <= 9:
            raise GeneticsError(f"Cannot encode {digit!r} as a single digit")
        symbol = str(int(digit))
        return cls((symbol, symbol))

    @property
    def is_diploid(self) -> bool:
        return len(self.alleles) == 2

    @property
    def is_homozygous(self) -> bool:
        return self.is_diploid and self.alleles[0] == self.alleles[1]

    @property
    def first(self) -> str:
        return self.alleles[0]

    @property
    def second(self) -> str:
        return self.alleles[-1]

    def with_allele(self, index: int, symbol: str) -> "Gene":
        """Return a copy with the allele at ``index`` replaced."""
        alleles = list(self.alleles)
        alleles[index] = symbol
        return Gene(tuple(alleles))

    def __str__(self) -> str:
        return "".join(self.alleles)


Genotype = Dict[str, Gene]


def digit_value(symbol: str) -> Optional[int]:
    """Return the numeric value of a single decimal digit, or None."""
    if len(symbol) == 1 and symbol in _DIGITS:
        return int(symbol)
    return None


def parse_number(token: str) -> Optional[float]:
    """Parse a haploid token as a finite number, or None."""
    try:
        value = float(token)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def gene_mean(gene: Gene) -> Optional[float]:
    """Average allele value of a quantitative gene.

    Diploid genes average their two digits; haploid tokens are parsed whole.
    Returns None when any part is not numeric.
    """
    if gene.is_diploid:
        first = digit_value(gene.first)
        second = digit_value(gene.second)
        if first is None or second is None:
            return None
        return (first + second) / 2
    return parse_number(gene.first)
