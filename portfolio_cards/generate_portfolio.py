#!/usr/bin/env python3
"""Generate the portfolio pages from a GitHub account's public repos.

Usage:
    generate-portfolio

Configuration via environment variables or .env file:
    GITHUB_USERNAME   account whose repos are listed (required)
    GITHUB_TOKEN      optional, raises the API rate limit
    OUTPUT_DIR        where index.html and projects.html go (default: site)
    PORTFOLIO_CONFIG  YAML with featured list and overlay (default: portfolio.yaml)
    REQUIRE_IMAGES    "true" to list only repos with a local preview image
    GITHUB_TIMEOUT    request timeout in seconds (default: none)
    LOG_FILE          optional log file
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from portfolio_cards.cards import render_card
from portfolio_cards.curate import MODE_ALL, MODE_FEATURED, curate, empty_message
from portfolio_cards.errors import ConfigError, PortfolioError
from portfolio_cards.filters import FilterController
from portfolio_cards.github import fetch_repos, to_records
from portfolio_cards.html import FILTER_SCRIPT, filters_html, grid_html, page_html
from portfolio_cards.overlay import SiteConfig, load_site_config
from portfolio_cards.settings import Settings, configure_logging, load_settings

log = logging.getLogger("portfolio")

MISSING_USER_MESSAGE = "Missing GitHub username (GITHUB_USERNAME)."
LOAD_FAILED_PREFIX = "Couldn’t load GitHub projects."


@dataclass
class GridResult:
    mode: str
    cards: list = field(default_factory=list)
    status: str = ""


# ---------------------------------------------------------------------------
# Grid pipeline
# ---------------------------------------------------------------------------

def build_grid(user: str, mode: str, config: SiteConfig, token: str = "",
               require_images: bool = False, timeout=None) -> GridResult:
    """Fetch, curate and render one grid. Errors become the grid's status text."""
    result = GridResult(mode=mode)
    if not user:
        result.status = MISSING_USER_MESSAGE
        return result

    try:
        records = to_records(fetch_repos(user, token=token, timeout=timeout))
    except PortfolioError as e:
        log.error(f"❌ {mode} grid: {e}")
        result.status = f"{LOAD_FAILED_PREFIX} {e}".strip()
        return result

    chosen = curate(records, mode, user, config, require_images=require_images)
    result.cards = [render_card(r, config) for r in chosen]
    result.status = "" if result.cards else empty_message(mode)
    log.info(f"  {mode} grid: {len(result.cards)} cards from {len(records)} repos")
    return result


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def featured_page(user: str, grid: GridResult, generated_date: str) -> str:
    body = grid_html("featuredGrid", "featuredStatus", grid.status, grid.cards)
    return page_html("Featured projects", user, body, generated_date)


def projects_page(user: str, grid: GridResult, generated_date: str) -> str:
    controller = FilterController(grid.cards)
    body = filters_html(controller) + "\n" + grid_html(
        "projectGrid", "projectsStatus", grid.status, grid.cards, controller=controller,
    )
    return page_html("Projects", user, body, generated_date, script=FILTER_SCRIPT)


def generate_site(settings: Settings, config: SiteConfig) -> Path:
    """Write index.html (featured) and projects.html (all, filterable)."""
    user = settings.github_username
    generated_date = datetime.now(timezone.utc).strftime("%Y-%m-%d")

    # Each grid fetches on its own, as each page would in a browser.
    featured = build_grid(user, MODE_FEATURED, config, token=settings.github_token,
                          require_images=settings.require_images, timeout=settings.timeout)
    everything = build_grid(user, MODE_ALL, config, token=settings.github_token,
                            require_images=settings.require_images, timeout=settings.timeout)

    out = settings.output_dir
    out.mkdir(parents=True, exist_ok=True)
    (out / "index.html").write_text(featured_page(user, featured, generated_date), encoding="utf-8")
    (out / "projects.html").write_text(projects_page(user, everything, generated_date), encoding="utf-8")

    log.info(f"Portfolio generated: {out.absolute()}")
    log.info(f"  {len(featured.cards)} featured, {len(everything.cards)} projects")
    return out


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        log.error(str(e))
        return 2

    configure_logging(settings.log_file)
    log.info("=" * 60)
    log.info(f"PORTFOLIO GENERATOR | GitHub: {settings.github_username or '(missing)'}")
    log.info("=" * 60)

    try:
        config = load_site_config(settings.portfolio_config)
    except ConfigError as e:
        log.error(str(e))
        return 2

    if not settings.github_username:
        log.warning(MISSING_USER_MESSAGE)

    generate_site(settings, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
