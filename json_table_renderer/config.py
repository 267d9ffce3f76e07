"""Service configuration, read from the environment (and a project-root .env)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.resolve()
load_dotenv(ROOT / ".env")

DEFAULT_PORT = 5001
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024  # 10mb JSON bodies
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    output_dir: Path
    max_body_bytes: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        output_dir=Path(os.getenv("TABLE_OUTPUT_DIR", str(ROOT / "output"))),
        max_body_bytes=int(os.getenv("MAX_BODY_BYTES", str(DEFAULT_MAX_BODY_BYTES))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
