"""
Server Configuration

Host, port, static directory and logging settings from the environment.
"""

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


@dataclass
class ServerConfig:
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: Path = Path("public")
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> 'ServerConfig':
        """Create config with environment overrides applied."""
        origins = os.environ.get("CORS_ORIGINS", "*")
        return cls(
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "3000")),
            public_dir=Path(os.environ.get("PUBLIC_DIR", "public")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


def configure_logging(level: str = "INFO"):
    """Install a single stream handler on the root logger."""
    if level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        logging.warning("Invalid LOG_LEVEL '%s'. Using INFO.", level)
        level = "INFO"
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
