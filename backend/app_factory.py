"""Application factory and context for the Garden API.

This module provides a factory for creating the FastAPI app, avoiding
import-time side effects. All runtime state lives in an AppContext so each
app instance (and each test) gets its own garden.

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (custom configuration)
    app = create_app(seed=42)
"""

import logging
import os
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.garden_registry import GardenRegistry
from backend.logging_config import configure_logging
from backend.routers import breeding, plants, traits
from garden.exceptions import ConfigurationError


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("GARDEN_SEED")
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"GARDEN_SEED must be an integer, got {raw!r}") from e


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    # Configuration
    seed: Optional[int] = field(default_factory=_seed_from_env)
    server_version: str = "1.0.0"
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: list = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    # Runtime state
    garden_registry: Optional[GardenRegistry] = None

    # Timing
    server_start_time: float = field(default_factory=time.time)

    # Logging
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("backend"))

    def ensure_registry(self) -> GardenRegistry:
        if self.garden_registry is None:
            self.garden_registry = GardenRegistry(rng=random.Random(self.seed))
        return self.garden_registry


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    registry = ctx.ensure_registry()
    app.include_router(plants.setup_router(registry))
    app.include_router(breeding.setup_router(registry))
    app.include_router(traits.setup_router())


def create_app(
    *,
    seed: Optional[int] = None,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        seed: Override the garden RNG seed (default: from GARDEN_SEED env var)
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    # Configure logging (idempotent)
    logger = configure_logging(extra_loggers=("backend",))

    if context is None:
        context = AppContext()

    if seed is not None:
        context.seed = seed
    if production_mode is not None:
        context.production_mode = production_mode

    context.logger = logger

    app = FastAPI(
        title="Garden API",
        version=context.server_version,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "plants": context.ensure_registry().plant_count,
            "uptime_seconds": time.time() - context.server_start_time,
        }

    logger.info(
        "Garden API ready (seed=%s, production=%s)", context.seed, context.production_mode
    )
    return app
