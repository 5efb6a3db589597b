from portfolio_cards.classify import CATEGORIES, OTHER

ALL = "all"

# classify() never yields "other", so it gets no chip
FILTER_CHOICES = (ALL,) + tuple(c for c in CATEGORIES if c != OTHER)


class FilterController:
    """Show/hide already-rendered cards by category.

    Works only on the cards it was given; it never refetches or reclassifies.
    """

    def __init__(self, cards, filters=FILTER_CHOICES):
        self.cards = list(cards)
        self.filters = tuple(filters)
        self.selected = ALL
        self.pressed = {}
        self._visible = []
        self.apply_filter(ALL)

    def apply_filter(self, category: str):
        self.selected = category or ALL
        self._visible = [self.selected == ALL or card.category == self.selected for card in self.cards]
        self.pressed = {f: f == self.selected for f in self.filters}

    def is_visible(self, card) -> bool:
        for candidate, shown in zip(self.cards, self._visible):
            if candidate is card:
                return shown
        return False

    def visible_cards(self) -> list:
        return [card for card, shown in zip(self.cards, self._visible) if shown]
