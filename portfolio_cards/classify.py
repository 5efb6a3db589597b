"""Keyword classification of repositories into portfolio categories."""

import re

from portfolio_cards.github import RepositoryRecord

AI = "ai"
ML = "ml"
DATA = "data"
WEB = "web"
OTHER = "other"

CATEGORIES = (AI, ML, DATA, WEB, OTHER)

CATEGORY_LABELS = {
    DATA: "Data",
    ML: "ML",
    WEB: "Web",
    AI: "AI",
}

# Checked in order; first match wins. AI terms must come before the generic
# "model" rule.
CATEGORY_RULES = [
    (re.compile(r"\b(ai|llm|rag|gpt|openai|summari[sz]er|nlp|transformer)\b"), AI),
    (re.compile(r"\b(computer[- ]vision|opencv|yolo|cnn|deep[- ]learning|tensorflow|pytorch)\b"), ML),
    (re.compile(r"\b(machine[- ]learning|ml|classification|regression|clustering|model)\b"), ML),
    (re.compile(r"\b(eda|data[- ]analysis|analytics|dashboard|visuali[sz]ation|power\s?bi|sql)\b"), DATA),
    (re.compile(r"\b(django|fastapi|flask|api|frontend|react|next\.?js|vercel|html|css|javascript|typescript)\b"), WEB),
]

LANGUAGE_FALLBACK = {
    "typescript": WEB,
    "javascript": WEB,
    "html": WEB,
    "css": WEB,
    "python": DATA,
    "jupyter notebook": DATA,
}


def search_text(record: RepositoryRecord) -> str:
    parts = [record.name, record.description, record.homepage, record.language, *record.topics]
    return " ".join(str(p).lower() for p in parts)


def classify(record: RepositoryRecord) -> str:
    """Return the category for a repo. Unmatched repos default to web, never other."""
    haystack = search_text(record)
    for pattern, category in CATEGORY_RULES:
        if pattern.search(haystack):
            return category

    return LANGUAGE_FALLBACK.get(record.language.lower(), WEB)


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, "Other")
