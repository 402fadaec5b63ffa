"""Shared utilities for the garden simulation."""

from garden.util.math_utils import clamp, round_half_up
from garden.util.rng import MissingRNGError, require_rng_param

__all__ = [
    "clamp",
    "round_half_up",
    "MissingRNGError",
    "require_rng_param",
]
