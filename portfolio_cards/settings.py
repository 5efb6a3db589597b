"""Configuration via environment variables or a .env file, plus logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from portfolio_cards.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    github_username: str = ""
    github_token: str = ""  # optional, for higher rate limits
    output_dir: Path = Path("site")
    portfolio_config: Path = Path("portfolio.yaml")
    require_images: bool = False
    timeout: Optional[float] = None
    log_file: str = ""


def load_settings() -> Settings:
    """Read settings from the environment, loading .env first (cross-platform)."""
    load_dotenv()

    raw_timeout = os.getenv("GITHUB_TIMEOUT", "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else None
    except ValueError as e:
        raise ConfigError(f"GITHUB_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from e

    return Settings(
        github_username=os.getenv("GITHUB_USERNAME", "").strip(),
        github_token=os.getenv("GITHUB_TOKEN", ""),
        output_dir=Path(os.getenv("OUTPUT_DIR", "site")),
        portfolio_config=Path(os.getenv("PORTFOLIO_CONFIG", "portfolio.yaml")),
        require_images=os.getenv("REQUIRE_IMAGES", "false").lower() == "true",
        timeout=timeout,
        log_file=os.getenv("LOG_FILE", ""),
    )


def configure_logging(log_file: str = "", level=logging.INFO):
    handlers = [
        logging.StreamHandler(
            open(sys.stdout.fileno(), mode="w", encoding="utf-8", closefd=False)
        ),
    ]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )
