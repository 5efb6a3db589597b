"""Card view models: everything a grid needs to show one repository."""

from dataclasses import dataclass
from typing import Optional

from portfolio_cards.classify import category_label, classify
from portfolio_cards.github import RepositoryRecord
from portfolio_cards.overlay import SiteConfig


@dataclass(frozen=True)
class CardLink:
    href: str
    text: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"


@dataclass(frozen=True)
class CardImage:
    src: str
    alt: str
    loading: str = "lazy"
    decoding: str = "async"


@dataclass(frozen=True)
class RenderedCard:
    title: str
    description: str
    category: str
    category_label: str
    tags: tuple = ()
    links: tuple = ()
    image: Optional[CardImage] = None


def render_card(record: RepositoryRecord, config: SiteConfig) -> RenderedCard:
    """Build the card for one repo, applying the overlay for description and image."""
    kind = classify(record)

    tags = [category_label(kind)]
    if record.language:
        tags.append(record.language)
    if record.fork:
        tags.append("Fork")
    if record.stars > 0:
        tags.append(f"★ {record.stars}")

    links = []
    if record.homepage:
        links.append(CardLink(href=record.homepage, text="Live"))
    links.append(CardLink(href=record.html_url, text="Code"))

    image = None
    src = config.image_for(record.name)
    if src:
        image = CardImage(src=src, alt=f"{record.name} preview")

    return RenderedCard(
        title=record.name,
        description=config.description_for(record),
        category=kind,
        category_label=category_label(kind),
        tags=tuple(tags),
        links=tuple(links),
        image=image,
    )
