"""API routers for the garden backend."""
