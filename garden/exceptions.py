"""Garden exception hierarchy.

Centralised base classes so callers can catch garden failures without
resorting to bare ``except Exception`` blocks.
"""


class GardenError(Exception):
    """Root of all garden domain exceptions."""


class GeneticsError(GardenError):
    """Genotype encoding, decoding, or mutation failure."""


class ConfigurationError(GardenError):
    """Invalid or missing configuration."""
