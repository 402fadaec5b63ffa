"""Gene sequence serialization/deserialization.

This module is the persistence/transfer boundary for genotypes. A sequence is
a ``-`` separated list of ``KEY:VALUE`` segments, for example::

    FC:RB-SZ:33-LS:11-BP:11-GR:10-YD:33-RS:22-WN:22

Parsing is tolerant: unknown keys are logged and dropped, empty values and
missing genes fall back to registry defaults.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from garden.genetics.gene import Gene, Genotype
from garden.genetics.registry import GENE_TRAITS

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "-"
KEY_SEPARATOR = ":"


def parse_sequence(sequence: Optional[str]) -> Genotype:
    """Parse a gene sequence into a genotype covering every registry key.

    Segment order does not matter; when a key repeats, the last segment wins.
    """
    genotype: Genotype = {}

    for segment in (sequence or "").split(SEGMENT_SEPARATOR):
        if not segment:
            continue
        key, _, rest = segment.partition(KEY_SEPARATOR)
        value = rest.split(KEY_SEPARATOR, 1)[0]
        trait = GENE_TRAITS.get(key)
        if trait is None:
            logger.warning("Unknown gene key: %s, using default", key)
            continue
        if not value:
            logger.debug("Empty value for gene %s, using default %s", key, trait.default_value)
            genotype[key] = trait.default_gene
            continue
        genotype[key] = Gene.from_wire(value)

    # Fill in any missing genes with defaults
    for key, trait in GENE_TRAITS.items():
        if key not in genotype:
            genotype[key] = trait.default_gene

    return genotype


def serialize_genotype(genotype: Mapping[str, Gene]) -> str:
    """Format a genotype as a sequence in registry order."""
    segments = []
    for key, trait in GENE_TRAITS.items():
        gene = genotype.get(key, trait.default_gene)
        segments.append(f"{key}{KEY_SEPARATOR}{gene}")
    return SEGMENT_SEPARATOR.join(segments)


def generate_default_sequence() -> str:
    """Sequence holding the default value of every registered gene."""
    return SEGMENT_SEPARATOR.join(
        f"{key}{KEY_SEPARATOR}{trait.default_value}" for key, trait in GENE_TRAITS.items()
    )
