import json

import pytest
import requests

from portfolio_cards.github import RepositoryRecord
from portfolio_cards.overlay import OverlayEntry, SiteConfig


def make_response(status=200, body=None, headers=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://api.github.com/users/alice/repos?per_page=100&sort=pushed"
    resp.encoding = "utf-8"
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    for key, value in (headers or {}).items():
        resp.headers[key] = value
    return resp


def make_record(name, **kwargs):
    kwargs.setdefault("html_url", f"https://github.com/alice/{name}")
    return RepositoryRecord(name=name, **kwargs)


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; returns the list of recorded calls."""
    calls = []

    def install(response):
        def _get(url, headers=None, timeout=None):
            calls.append({"url": url, "headers": headers, "timeout": timeout})
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr("portfolio_cards.github.requests.get", _get)
        return calls

    return install


@pytest.fixture
def site_config():
    return SiteConfig(
        overlay={
            "Toolkit": OverlayEntry(description="Curated toolkit blurb", image="img/toolkit.webp"),
            "sales-dashboard": OverlayEntry(image="img/sales.webp"),
            "notes": OverlayEntry(description="Notes app"),
        },
        featured=("sales-dashboard", "missing-repo", "toolkit"),
    )
