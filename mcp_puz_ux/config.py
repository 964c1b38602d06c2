"""
Configuration - Environment variables shared by the CLI and MCP server

- PUZ_LIBRARY_DIR: Puzzle library directory (default: ~/puzzles)
- PUZ_HTTP_HOST: Bind host for HTTP transport (default: 0.0.0.0)
- PUZ_HTTP_PORT: Bind port for HTTP transport (default: 6661)
- PUZ_LOG_LEVEL: Logging level (default: WARNING)
"""
import logging
import os

DEFAULT_LIBRARY_DIR = "~/puzzles"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6661
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


def get_library_dir() -> str:
    """Get puzzle library directory from env or use fallback"""
    return os.environ.get("PUZ_LIBRARY_DIR", DEFAULT_LIBRARY_DIR)


def get_host() -> str:
    return os.environ.get("PUZ_HTTP_HOST", DEFAULT_HOST)


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PUZ_HTTP_PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PUZ_HTTP_PORT value: {port_str}"
        raise ValueError(msg) from None


def get_log_level() -> str:
    """Get logging level from environment or use default"""
    level = os.environ.get("PUZ_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    if level.upper() not in LOG_LEVELS:
        msg = f"Invalid PUZ_LOG_LEVEL value: {level}"
        raise ValueError(msg)
    return level.upper()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for an entry point"""
    logging.basicConfig(
        level=level or get_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )
