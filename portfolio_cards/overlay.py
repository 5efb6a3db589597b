"""Local metadata overlay and featured list, keyed by normalized repo name."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

from portfolio_cards.errors import ConfigError

log = logging.getLogger("portfolio")

NO_DESCRIPTION = "No description yet."

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(name) -> str:
    """Lowercase, trim and drop every character outside [a-z0-9]."""
    return _NON_ALNUM.sub("", str(name or "").strip().lower())


@dataclass(frozen=True)
class OverlayEntry:
    description: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class SiteConfig:
    overlay: Mapping[str, OverlayEntry] = field(default_factory=dict)
    featured: tuple = ()

    def __post_init__(self):
        overlay = {normalize(k): v for k, v in dict(self.overlay).items()}
        object.__setattr__(self, "overlay", MappingProxyType(overlay))
        object.__setattr__(self, "featured", tuple(normalize(k) for k in self.featured))

    def lookup(self, name: str) -> Optional[OverlayEntry]:
        return self.overlay.get(normalize(name))

    def description_for(self, record) -> str:
        entry = self.lookup(record.name)
        if entry and entry.description:
            return entry.description
        return record.description or NO_DESCRIPTION

    def image_for(self, name: str) -> Optional[str]:
        entry = self.lookup(name)
        return entry.image if entry and entry.image else None

    def has_image(self, name: str) -> bool:
        return self.image_for(name) is not None


# ---------------------------------------------------------------------------
# Compiled-in defaults
# ---------------------------------------------------------------------------

DEFAULT_OVERLAY = {
    "ragsummarizer": OverlayEntry(
        description="Retrieval-augmented summarizer for long PDFs and meeting notes.",
        image="assets/projects/rag-summarizer.webp",
    ),
    "salesdashboard": OverlayEntry(
        description="Interactive sales analytics dashboard built on SQL and Power BI exports.",
        image="assets/projects/sales-dashboard.webp",
    ),
    "churnprediction": OverlayEntry(image="assets/projects/churn-prediction.webp"),
    "portfoliosite": OverlayEntry(description="This site: static pages generated from the GitHub API."),
}

DEFAULT_FEATURED = (
    "ragsummarizer",
    "churnprediction",
    "salesdashboard",
    "portfoliosite",
)

DEFAULT_SITE_CONFIG = SiteConfig(overlay=DEFAULT_OVERLAY, featured=DEFAULT_FEATURED)


def load_site_config(path) -> SiteConfig:
    """Load featured/overlay tables from YAML, or the compiled-in defaults if absent.

    Expected shape:

        featured:
          - rag-summarizer
        overlay:
          rag-summarizer:
            description: ...
            image: assets/projects/rag.webp
    """
    path = Path(path) if path else None
    if path is None or not path.exists():
        log.info("Using built-in featured list and overlay")
        return DEFAULT_SITE_CONFIG

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid portfolio config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Portfolio config {path} must be a mapping")

    featured = data.get("featured") or []
    overlay_raw = data.get("overlay") or {}
    if not isinstance(featured, list) or not isinstance(overlay_raw, dict):
        raise ConfigError(f"Portfolio config {path}: 'featured' must be a list and 'overlay' a mapping")

    for name in featured:
        if not isinstance(name, str):
            raise ConfigError(f"Portfolio config {path}: featured entry {name!r} must be a string")

    overlay = {}
    for name, entry in overlay_raw.items():
        entry = entry or {}
        if not isinstance(entry, dict):
            raise ConfigError(f"Portfolio config {path}: overlay entry for {name!r} must be a mapping")
        for field_name in ("description", "image"):
            value = entry.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(
                    f"Portfolio config {path}: {field_name} for {name!r} must be a string, got {value!r}"
                )
        overlay[name] = OverlayEntry(
            description=entry.get("description") or None,
            image=entry.get("image") or None,
        )

    log.info(f"Loaded portfolio config from {path}: {len(featured)} featured, {len(overlay)} overlay entries")
    return SiteConfig(overlay=overlay, featured=tuple(featured))
