"""Build portfolio project cards from a GitHub account's public repositories."""

from portfolio_cards.classify import classify, category_label
from portfolio_cards.curate import curate, empty_message
from portfolio_cards.cards import RenderedCard, render_card
from portfolio_cards.errors import PortfolioError, FetchError, ParseError, ConfigError
from portfolio_cards.filters import FilterController
from portfolio_cards.github import RepositoryRecord, fetch_repos, to_records
from portfolio_cards.overlay import OverlayEntry, SiteConfig, normalize, load_site_config

__version__ = "0.1.0"
