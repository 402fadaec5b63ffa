"""Entry point for serving the Garden API with uvicorn.

``garden-api`` (or ``python -m backend.main``) serves ``backend.main:app``.
The port comes from ``GARDEN_API_PORT``; code reload is on outside
production.
"""

import os

import uvicorn

from backend.app_factory import create_app
from backend.logging_config import resolve_log_level
from garden.exceptions import ConfigurationError

DEFAULT_PORT = 8000

app = create_app()


def port_from_env() -> int:
    raw = os.getenv("GARDEN_API_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"GARDEN_API_PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigurationError(f"GARDEN_API_PORT out of range: {port}")
    return port


def main() -> None:
    context = app.state.context
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=port_from_env(),
        reload=not context.production_mode,
        log_level=resolve_log_level().lower(),
    )


if __name__ == "__main__":
    main()
