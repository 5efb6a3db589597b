from pathlib import Path

from portfolio_cards import generate_portfolio
from portfolio_cards.generate_portfolio import (
    MISSING_USER_MESSAGE,
    build_grid,
    generate_site,
)
from portfolio_cards.overlay import SiteConfig
from portfolio_cards.settings import Settings, load_settings

from conftest import make_response

REPOS = [
    {"name": "alice", "html_url": "https://github.com/alice/alice", "pushed_at": "2024-04-01"},
    {
        "name": "toolkit",
        "html_url": "https://github.com/alice/toolkit",
        "description": "a machine learning model",
        "language": "Python",
        "pushed_at": "2024-03-01",
        "stargazers_count": 3,
        "fork": False,
        "archived": False,
    },
    {
        "name": "rag-notes",
        "html_url": "https://github.com/alice/rag-notes",
        "description": "<b>LLM</b> notes",
        "pushed_at": "2024-02-01",
    },
    {"name": "forked", "html_url": "https://github.com/alice/forked", "fork": True},
]


def test_scenario_self_named_repo_excluded(fake_get):
    fake_get(make_response(body=REPOS[:2]))
    grid = build_grid("alice", "all", SiteConfig())
    assert [c.title for c in grid.cards] == ["toolkit"]
    assert grid.cards[0].category == "ml"
    assert grid.status == ""


def test_rate_limit_becomes_status_message(fake_get):
    fake_get(make_response(403, body={}, headers={"x-ratelimit-remaining": "0"}))
    grid = build_grid("alice", "all", SiteConfig())
    assert grid.cards == []
    assert grid.status.startswith("Couldn’t load GitHub projects.")
    assert "rate limit" in grid.status


def test_missing_user_makes_no_request(fake_get):
    calls = fake_get(make_response(body=REPOS))
    grid = build_grid("", "featured", SiteConfig())
    assert grid.status == MISSING_USER_MESSAGE
    assert calls == []


def test_empty_state_is_mode_specific(fake_get):
    fake_get(make_response(body=[]))
    assert build_grid("alice", "all", SiteConfig()).status == "No public repos found."
    assert build_grid("alice", "featured", SiteConfig()).status == "No featured projects found."


def test_placeholder_description(fake_get):
    fake_get(make_response(body=[{"name": "bare", "html_url": "https://github.com/alice/bare"}]))
    grid = build_grid("alice", "all", SiteConfig())
    assert grid.cards[0].description == "No description yet."


def test_generate_site_writes_both_pages(fake_get, tmp_path):
    calls = fake_get(make_response(body=REPOS))
    settings = Settings(github_username="alice", output_dir=tmp_path / "site")
    config = SiteConfig(featured=("rag-notes", "toolkit"))

    out = generate_site(settings, config)

    # one fetch per grid
    assert len(calls) == 2
    index = (out / "index.html").read_text(encoding="utf-8")
    projects = (out / "projects.html").read_text(encoding="utf-8")

    assert index.index("rag-notes") < index.index("toolkit")
    assert 'id="featuredGrid"' in index
    assert "&lt;b&gt;LLM&lt;/b&gt; notes" in projects
    assert "<b>LLM</b>" not in projects
    assert 'data-filter="ai"' in projects
    assert 'data-kind="ml"' in projects
    assert "forked" not in projects
    assert 'data-github-user="alice"' in projects


def test_generate_site_with_failed_fetch_still_writes_pages(fake_get, tmp_path):
    fake_get(make_response(500, body={}))
    out = generate_site(Settings(github_username="alice", output_dir=tmp_path), SiteConfig())
    index = (out / "index.html").read_text(encoding="utf-8")
    assert "GitHub API request failed: 500" in index


def test_load_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_USERNAME", " alice ")
    monkeypatch.setenv("OUTPUT_DIR", "public")
    monkeypatch.setenv("REQUIRE_IMAGES", "TRUE")
    monkeypatch.setenv("GITHUB_TIMEOUT", "7.5")
    settings = load_settings()
    assert settings.github_username == "alice"
    assert settings.output_dir == Path("public")
    assert settings.require_images is True
    assert settings.timeout == 7.5


def test_main_with_bad_timeout_returns_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TIMEOUT", "soon")
    monkeypatch.setattr(generate_portfolio, "configure_logging", lambda *a, **k: None)
    assert generate_portfolio.main() == 2


def test_main_without_username_writes_status_pages(monkeypatch, tmp_path, fake_get):
    calls = fake_get(make_response(body=REPOS))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_USERNAME", "")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setattr(generate_portfolio, "configure_logging", lambda *a, **k: None)

    assert generate_portfolio.main() == 0
    assert calls == []
    index = (tmp_path / "out" / "index.html").read_text(encoding="utf-8")
    assert MISSING_USER_MESSAGE in index


def test_main_with_non_string_overlay_value_returns_error(monkeypatch, tmp_path, fake_get):
    calls = fake_get(make_response(body=REPOS))
    config_path = tmp_path / "portfolio.yaml"
    config_path.write_text("overlay:\n  toolkit:\n    image: 2048\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_USERNAME", "alice")
    monkeypatch.setenv("PORTFOLIO_CONFIG", str(config_path))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.delenv("GITHUB_TIMEOUT", raising=False)
    monkeypatch.setattr(generate_portfolio, "configure_logging", lambda *a, **k: None)

    assert generate_portfolio.main() == 2
    assert calls == []
    assert not (tmp_path / "out").exists()
