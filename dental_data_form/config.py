from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass

import dotenv

ENV_PREFIX = "DENTAL_FORM_"


@dataclass(frozen=True)
class AppConfig:
    server_name: str = "127.0.0.1"
    server_port: int = 7860
    export_dir: str = os.path.join(tempfile.gettempdir(), "dental-data-form")
    log_level: str = "INFO"


def load_config(load_env_file: bool = True) -> AppConfig:
    """Read settings from DENTAL_FORM_* environment variables (and a .env file)."""
    if load_env_file:
        dotenv.load_dotenv()

    defaults = AppConfig()
    port_raw = os.getenv(f"{ENV_PREFIX}SERVER_PORT", str(defaults.server_port))
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}SERVER_PORT must be an integer, got {port_raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{ENV_PREFIX}SERVER_PORT out of range: {port}")

    return AppConfig(
        server_name=os.getenv(f"{ENV_PREFIX}SERVER_NAME", defaults.server_name),
        server_port=port,
        export_dir=os.getenv(f"{ENV_PREFIX}EXPORT_DIR") or defaults.export_dir,
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
    )
