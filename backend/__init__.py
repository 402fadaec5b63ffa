"""Backend package for the Garden API.

This package provides the FastAPI web server that exposes plants, growth
ticks, harvesting and breeding to a game client.
"""

__version__ = "1.0.0"
