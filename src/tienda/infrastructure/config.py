"""Runtime settings read from the environment.

Every variable is optional and prefixed with ``TIENDA_``:

    TIENDA_HOST       interface the HTTP server binds to  (127.0.0.1)
    TIENDA_PORT       HTTP port                           (3000)
    TIENDA_DATA_DIR   directory of stored invoice requests (<repo>/data)
    TIENDA_LOG_LEVEL  logging level name                  (INFO)

Pricing rules are not configurable: the shop has one fixed policy.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TIENDA_"

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = Settings()

        raw_port = env.get(f"{ENV_PREFIX}PORT")
        if raw_port is None:
            port = defaults.port
        else:
            try:
                port = int(raw_port)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {raw_port!r}")
            if not 0 < port < 65536:
                raise ValueError(f"{ENV_PREFIX}PORT out of range: {port}")

        raw_data_dir = env.get(f"{ENV_PREFIX}DATA_DIR")
        return Settings(
            host=env.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=port,
            data_dir=Path(raw_data_dir) if raw_data_dir else defaults.data_dir,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )
