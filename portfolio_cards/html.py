"""HTML adapter: turns card view models into static portfolio pages."""

from html import escape
from urllib.parse import quote

from portfolio_cards.filters import FilterController

FILTER_LABELS = {
    "all": "All",
    "ai": "AI",
    "ml": "ML",
    "data": "Data",
    "web": "Web",
    "other": "Other",
}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en" data-github-user="GITHUB_USER">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PAGE_TITLE</title>
    <style>
        :root {
            --bg: #0a0a0f;
            --surface: #12121a;
            --border: #2a2a3a;
            --text: #e8e8f0;
            --text-muted: #8888a0;
            --accent: #00e5a0;
            --accent-dim: #00e5a020;
        }

        * { margin: 0; padding: 0; box-sizing: border-box; }

        body {
            font-family: system-ui, sans-serif;
            background: var(--bg);
            color: var(--text);
            max-width: 1200px;
            margin: 0 auto;
            padding: 2rem;
        }

        h1 { margin-bottom: 1.5rem; }

        .filters { display: flex; gap: 0.5rem; flex-wrap: wrap; margin-bottom: 1.5rem; }

        .chip {
            background: var(--surface);
            border: 1px solid var(--border);
            color: var(--text-muted);
            padding: 0.4rem 0.9rem;
            cursor: pointer;
        }

        .chip[aria-pressed="true"] { border-color: var(--accent); color: var(--accent); background: var(--accent-dim); }

        .status { color: var(--text-muted); margin-bottom: 1rem; }
        .status:empty { display: none; }

        .grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(320px, 1fr));
            gap: 1rem;
        }

        .card { background: var(--surface); border: 1px solid var(--border); display: flex; flex-direction: column; }
        .card-media img { width: 100%; height: 180px; object-fit: cover; display: block; }
        .card-head { padding: 1rem 1.25rem 0.5rem; }
        .card-title { font-size: 1.1rem; }
        .card-dek { color: var(--text-muted); font-size: 0.85rem; margin-top: 0.4rem; line-height: 1.5; }
        .tag-row { list-style: none; display: flex; gap: 0.35rem; flex-wrap: wrap; padding: 0 1.25rem; }
        .tag { font-size: 0.7rem; border: 1px solid var(--border); padding: 0.1rem 0.45rem; color: var(--text-muted); }
        .card-links { display: flex; gap: 1rem; padding: 0.75rem 1.25rem 1rem; margin-top: auto; }
        .card-links a { color: var(--accent); text-decoration: none; font-size: 0.8rem; }

        footer { margin-top: 3rem; color: var(--text-muted); font-size: 0.75rem; text-align: center; }
    </style>
</head>
<body>
    <h1>PAGE_TITLE</h1>
PAGE_BODY
    <footer>
        <p>Built GENERATED_DATE from <a href="https://github.com/GITHUB_USER_PATH">github.com/GITHUB_USER</a></p>
    </footer>
PAGE_SCRIPT
</body>
</html>"""

FILTER_SCRIPT = """    <script>
    (() => {
        const grid = document.getElementById('projectGrid');
        const chips = Array.from(document.querySelectorAll('[data-filter]'));
        if (!grid || !chips.length) return;

        const applyFilter = (kind) => {
            for (const card of grid.querySelectorAll('[data-kind]')) {
                card.style.display = kind === 'all' || card.dataset.kind === kind ? '' : 'none';
            }
            for (const chip of chips) {
                chip.setAttribute('aria-pressed', chip.dataset.filter === kind ? 'true' : 'false');
            }
        };

        for (const chip of chips) {
            chip.addEventListener('click', () => applyFilter(chip.dataset.filter || 'all'));
        }
    })();
    </script>"""


def card_html(card, hidden: bool = False) -> str:
    """Render one card. A preview image that fails to load removes its own region."""
    style = ' style="display: none"' if hidden else ""
    parts = [f'<article class="card" data-kind="{escape(card.category)}"{style}>']

    if card.image:
        parts.append(
            '<div class="card-media">'
            f'<img src="{escape(card.image.src)}" alt="{escape(card.image.alt)}" '
            f'loading="{card.image.loading}" decoding="{card.image.decoding}" '
            "onerror=\"this.closest('.card-media').remove()\">"
            "</div>"
        )

    parts.append(
        '<div class="card-head">'
        f'<h2 class="card-title">{escape(card.title)}</h2>'
        f'<p class="card-dek">{escape(card.description)}</p>'
        "</div>"
    )

    tags = "".join(f'<li class="tag">{escape(t)}</li>' for t in card.tags)
    parts.append(f'<ul class="tag-row" aria-label="Tags">{tags}</ul>')

    links = "".join(
        f'<a href="{escape(link.href)}" target="{link.target}" rel="{link.rel}">{escape(link.text)}</a>'
        for link in card.links
    )
    parts.append(f'<div class="card-links">{links}</div>')
    parts.append("</article>")
    return "".join(parts)


def filters_html(controller: FilterController) -> str:
    chips = "".join(
        f'<button type="button" class="chip" data-filter="{escape(f)}" '
        f'aria-pressed="{"true" if controller.pressed.get(f) else "false"}">'
        f"{escape(FILTER_LABELS.get(f, f.title()))}</button>"
        for f in controller.filters
    )
    return f'    <div class="filters" role="group" aria-label="Filter projects">{chips}</div>'


def grid_html(grid_id: str, status_id: str, status: str, cards, controller: FilterController = None) -> str:
    if controller is not None:
        body = "".join(card_html(c, hidden=not controller.is_visible(c)) for c in controller.cards)
    else:
        body = "".join(card_html(c) for c in cards)
    return (
        f'    <p class="status" id="{status_id}" role="status">{escape(status)}</p>\n'
        f'    <div class="grid" id="{grid_id}">{body}</div>'
    )


def page_html(title: str, user: str, body: str, generated_date: str, script: str = "") -> str:
    # Body goes in last so repository text can never hit a placeholder.
    return (
        PAGE_TEMPLATE
        .replace("PAGE_TITLE", escape(title))
        .replace("GITHUB_USER_PATH", escape(quote(user or "", safe="")))
        .replace("GITHUB_USER", escape(user or ""))
        .replace("GENERATED_DATE", generated_date)
        .replace("PAGE_SCRIPT", script)
        .replace("PAGE_BODY", body)
    )
