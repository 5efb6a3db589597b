from typing import Optional


class PortfolioError(Exception):
    """Base class for errors surfaced as a grid status message."""


class ConfigError(PortfolioError):
    pass


class ParseError(PortfolioError):
    pass


RATE_LIMIT_HINT = " (rate limit hit, try again later)"


class FetchError(PortfolioError):
    """The repository listing request did not succeed."""

    def __init__(self, status: Optional[int], rate_limited: bool = False, detail: str = ""):
        self.status = status
        self.rate_limited = rate_limited
        message = "GitHub API request failed"
        if status is not None:
            message += f": {status}"
        elif detail:
            message += f": {detail}"
        if rate_limited:
            message += RATE_LIMIT_HINT
        super().__init__(message)
