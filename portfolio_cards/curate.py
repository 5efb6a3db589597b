"""Filtering, ordering and featured selection of fetched repositories."""

import logging
from datetime import datetime, timezone

from portfolio_cards.github import RepositoryRecord
from portfolio_cards.overlay import SiteConfig, normalize

log = logging.getLogger("portfolio")

MODE_ALL = "all"
MODE_FEATURED = "featured"

EMPTY_MESSAGES = {
    MODE_ALL: "No public repos found.",
    MODE_FEATURED: "No featured projects found.",
}


def pushed_timestamp(value: str) -> float:
    """Seconds since the epoch for an ISO 8601 push time; 0 when missing or unparsable."""
    if not value:
        return 0.0
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def should_skip_repo(record: RepositoryRecord, user: str) -> tuple[bool, str]:
    """Determine if a repo never appears in the portfolio."""
    if record.archived:
        return True, "Archived"
    if record.fork:
        return True, "Fork"
    if normalize(record.name) == normalize(user):
        return True, "Profile README"
    return False, ""


def curate(records, mode: str, user: str, config: SiteConfig,
           require_images: bool = False) -> list[RepositoryRecord]:
    """Select and order the repos shown in one grid."""
    if mode not in EMPTY_MESSAGES:
        raise ValueError(f"Unknown mode: {mode!r}")

    survivors = []
    for record in records:
        skip, reason = should_skip_repo(record, user)
        if skip:
            log.debug(f"  Skipping {record.name}: {reason}")
            continue
        if require_images and not config.has_image(record.name):
            log.debug(f"  Skipping {record.name}: no local image")
            continue
        survivors.append(record)

    if mode == MODE_FEATURED:
        by_key = {}
        for record in survivors:
            by_key.setdefault(normalize(record.name), record)
        chosen = []
        for key in config.featured:
            if key in by_key:
                chosen.append(by_key[key])
            else:
                log.info(f"  Featured repo {key!r} not found")
        return chosen

    return sorted(survivors, key=lambda r: (-pushed_timestamp(r.pushed_at), -r.stars))


def empty_message(mode: str) -> str:
    return EMPTY_MESSAGES.get(mode, EMPTY_MESSAGES[MODE_ALL])
