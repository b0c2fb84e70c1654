# tmpdrive/shared/config.py

import os
import tempfile
from pathlib import Path
from dataclasses import dataclass
import logging

# Set up a logger for this module
logger = logging.getLogger(__name__)

DEFAULT_HTTP_PORT = 3000
DEFAULT_HTTP_HOST = "0.0.0.0"

@dataclass
class Settings:
    root_dir: Path
    http_port: int = DEFAULT_HTTP_PORT
    host: str = DEFAULT_HTTP_HOST
    static_dir: Path = Path("frontend")

def parse_port(value: str) -> int:
    """Parse a TCP port number from an environment string."""
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"HTTP_PORT must be an integer, got {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"HTTP_PORT out of range: {port}")
    return port

def load_settings(environ=None) -> Settings:
    """
    Build Settings from environment variables.

    DRIVE_ROOT defaults to the system temporary directory, HTTP_PORT to 3000.
    The root is resolved to an absolute path once, here.
    """
    if environ is None:
        environ = os.environ

    root_dir = Path(environ.get("DRIVE_ROOT") or tempfile.gettempdir()).resolve()
    http_port = parse_port(environ.get("HTTP_PORT", str(DEFAULT_HTTP_PORT)))
    host = environ.get("HTTP_HOST", DEFAULT_HTTP_HOST)
    static_dir = Path(environ.get("DRIVE_STATIC_DIR", Path.cwd() / "frontend"))

    settings = Settings(
        root_dir=root_dir,
        http_port=http_port,
        host=host,
        static_dir=static_dir,
    )
    logger.info(f"Drive root: {settings.root_dir}, port: {settings.http_port}")
    return settings
