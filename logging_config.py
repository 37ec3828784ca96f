"""
Logging configuration for the MCP server.

stdout carries the JSON-RPC stream, so everything goes to stderr.
Pure modules (lib/, core/cell_extractor.py) do not log.
"""
import logging
import os
import sys

from config import DEBUG_ENV, LOG_LEVEL_ENV

logger = logging.getLogger("sheets_mcp")


def resolve_level(level: str | None = None) -> int:
    """Explicit level, else DEBUG=true, else LOG_LEVEL, else INFO."""
    if level is None:
        if os.environ.get(DEBUG_ENV, "").lower() == "true":
            return logging.DEBUG
        level = os.environ.get(LOG_LEVEL_ENV, "info")
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    """
    Configure the package logger.

    Args:
        level: Log level name (debug, info, warning, error). Defaults to env.
    """
    logger.setLevel(resolve_level(level))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False


def log_api_call(service: str, method: str, **params: object) -> None:
    """Log an API call with key parameters."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.debug(f"API: {service}.{method}({param_str})")


def log_api_result(service: str, method: str, result_count: int | None = None) -> None:
    """Log API result summary."""
    if result_count is not None:
        logger.debug(f"API: {service}.{method} returned {result_count} results")
    else:
        logger.debug(f"API: {service}.{method} completed")
