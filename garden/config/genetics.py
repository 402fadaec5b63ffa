"""Breeding and trait-interaction tuning constants."""

from dataclasses import dataclass

from garden.exceptions import ConfigurationError

# Breeding
MUTATION_CHANCE = 0.05  # Per trait, per cross
QUANTITATIVE_VARIATION = 0.3  # Uniform noise added to the parental mean (+/-)
MUTATION_STEP = 1  # Quantitative mutations nudge the level by this much

# Growth x Resistance trade-off
GROWTH_TRADEOFF_THRESHOLD = 1.2  # Growth rate above which resistance suffers
GROWTH_TRADEOFF_FACTOR = 0.5

# Inbreeding depression
INBREEDING_THRESHOLD = 5  # Homozygous genes tolerated before yield drops
INBREEDING_PENALTY_PER_GENE = 0.1

# Fallback when the registry has no days-to-mature entry for a growth level
DEFAULT_DAYS_TO_MATURE = 10


@dataclass(frozen=True)
class BreedingConfig:
    """Inputs that control variation for a breeding event.

    Attributes:
        mutation_chance: Probability that each offspring gene mutates
        variation: Half-width of the uniform noise applied to quantitative means
    """

    mutation_chance: float = MUTATION_CHANCE
    variation: float = QUANTITATIVE_VARIATION

    def __post_init__(self) -> None:
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ConfigurationError(
                f"mutation_chance must be within [0, 1], got {self.mutation_chance}"
            )
        if self.variation < 0.0:
            raise ConfigurationError(f"variation must be >= 0, got {self.variation}")


DEFAULT_BREEDING_CONFIG = BreedingConfig()
