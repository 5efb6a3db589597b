"""GitHub repository listing: the one network call the portfolio makes."""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

from portfolio_cards.errors import ConfigError, FetchError, ParseError

log = logging.getLogger("portfolio")

API_ROOT = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RepositoryRecord:
    name: str
    html_url: str = ""
    description: str = ""
    homepage: str = ""
    language: str = ""
    topics: tuple = ()
    stars: int = 0
    fork: bool = False
    archived: bool = False
    pushed_at: str = ""

    @classmethod
    def from_api(cls, repo: dict) -> "RepositoryRecord":
        """Build a record from one object of the public listing response."""
        topics = repo.get("topics")
        if not isinstance(topics, list):
            topics = []
        try:
            stars = int(repo.get("stargazers_count") or 0)
        except (TypeError, ValueError):
            stars = 0
        return cls(
            name=str(repo.get("name") or ""),
            html_url=str(repo.get("html_url") or ""),
            description=str(repo.get("description") or ""),
            homepage=str(repo.get("homepage") or ""),
            language=str(repo.get("language") or ""),
            topics=tuple(str(t) for t in topics),
            stars=max(stars, 0),
            fork=bool(repo.get("fork", False)),
            archived=bool(repo.get("archived", False)),
            pushed_at=str(repo.get("pushed_at") or ""),
        )


# ---------------------------------------------------------------------------
# GitHub API
# ---------------------------------------------------------------------------

def repos_url(user: str) -> str:
    return f"{API_ROOT}/users/{quote(user, safe='')}/repos?per_page=100&sort=pushed"


def fetch_repos(user: str, token: str = "", timeout: Optional[float] = None) -> list:
    """Fetch up to 100 public repos for the user, most recently pushed first.

    A single attempt is made. Non-2xx responses raise FetchError; a body that
    is not a JSON list comes back as an empty list.
    """
    if not user or not user.strip():
        raise ConfigError("Missing GitHub username.")

    headers = {"Accept": GITHUB_API_ACCEPT}
    if token:
        headers["Authorization"] = f"token {token}"

    url = repos_url(user.strip())
    log.info(f"Fetching repos for {user}...")
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(None, detail=str(e)) from e

    if not resp.ok:
        rate_limited = resp.headers.get("x-ratelimit-remaining") == "0"
        log.warning(f"  GitHub API error {resp.status_code} (rate limited: {rate_limited})")
        raise FetchError(resp.status_code, rate_limited=rate_limited)

    try:
        data = parse_body(resp)
    except ParseError as e:
        log.warning(f"  {e}; treating as no repos")
        return []

    if not isinstance(data, list):
        log.warning(f"  Unexpected response shape ({type(data).__name__}); treating as no repos")
        return []

    log.info(f"Found {len(data)} repositories.")
    return data


def parse_body(resp: requests.Response):
    try:
        return resp.json()
    except ValueError as e:
        raise ParseError(f"Malformed response body from {resp.url or 'GitHub'}") from e


def to_records(raw: list) -> list[RepositoryRecord]:
    """Convert listing objects to records, dropping anything that is not an object."""
    return [RepositoryRecord.from_api(r) for r in raw if isinstance(r, dict)]
