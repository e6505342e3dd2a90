"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    log_dir: Path | None = None

    @staticmethod
    def from_env() -> Settings:
        log_dir = os.getenv("STOREFRONT_LOG_DIR")
        return Settings(
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(DEFAULT_DATA_DIR))),
            host=os.getenv("STOREFRONT_HOST", "0.0.0.0"),
            port=int(os.getenv("STOREFRONT_PORT", "8080")),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else None,
        )
