"""RNG utilities for reproducible breeding and growth.

Every random draw in the garden goes through an injected ``random.Random``.
These helpers fail loudly when one was not provided, rather than silently
creating an unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a setup bug: plants and breeders should be built
    with the RNG owned by the caller (game loop, backend context or test).
    """

    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def __init__(self, sequence=None, *, rng=None):
            rng = require_rng_param(rng, "Plant.__init__")
            self.rng = rng
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass a random.Random explicitly."
        )
    return rng
