"""Plant genetics for the garden.

This package provides:

- A declarative, read-only gene registry (TraitDefinition, GENE_TRAITS)
- A structured genotype model (Gene) and the gene sequence codec
- Phenotype resolution with dominance, blending and trait interactions
- Breeding with allele segregation, quantitative blending and mutation
"""

# Re-export main classes for package convenience
from garden.genetics.breeding import CrossingRecord, PlantBreeder, mutate_gene
from garden.genetics.expression import Phenotype, resolve_phenotype
from garden.genetics.gene import Gene, Genotype
from garden.genetics.genome_codec import (
    generate_default_sequence,
    parse_sequence,
    serialize_genotype,
)
from garden.genetics.registry import GENE_TRAITS, default_genotype, get_trait, trait_keys
from garden.genetics.trait import Allele, Blend, TraitDefinition, TraitKind
from garden.genetics.validation import validate_genotype

__all__ = [
    # Registry
    "GENE_TRAITS",
    "TraitDefinition",
    "TraitKind",
    "Allele",
    "Blend",
    "get_trait",
    "trait_keys",
    "default_genotype",
    # Genotype model and codec
    "Gene",
    "Genotype",
    "parse_sequence",
    "serialize_genotype",
    "generate_default_sequence",
    # Expression
    "Phenotype",
    "resolve_phenotype",
    # Breeding
    "PlantBreeder",
    "CrossingRecord",
    "mutate_gene",
    # Validation
    "validate_genotype",
]
