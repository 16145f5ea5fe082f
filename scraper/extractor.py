"""
Menu extraction from the parsed menu page
"""
import logging
from typing import List, Optional

from scraper.errors import DateNotFound, MenuNotFound
from scraper.layouts import MarkupLayout, detect_layout
from scraper.models import MenuItem, MenuPage
from scraper.text_cleaning import (
    collapse_whitespace,
    drop_bare_currency,
    drop_boilerplate,
    drop_empty,
    normalize_whitespace,
    split_name_price,
    split_on_currency,
    strip_allergens,
)

logger = logging.getLogger(__name__)


class MenuExtractor:
    """Extracts the date and the dishes from a menu page document"""

    def __init__(self, document, layout: Optional[MarkupLayout] = None):
        """
        Initialize the extractor

        Args:
            document: BeautifulSoup document of the menu page
            layout: Markup layout to use (detected from the document if None)
        """
        self.document = document
        self._layout = layout
        self._menu = None
        self._date = None

    @property
    def layout(self) -> MarkupLayout:
        if self._layout is None:
            layout = detect_layout(self.document)
            if layout is None:
                raise MenuNotFound("any known layout", "page layout not recognized")
            logger.debug(f"Detected '{layout.name}' page layout")
            self._layout = layout
        return self._layout

    def extract(self) -> MenuPage:
        """
        Extract date and menu together

        Both are fully computed before anything is returned, so a failure in
        either one leaves nothing half-done.
        """
        return MenuPage(date=self.date(), items=self.menu())

    def date(self) -> str:
        """
        Returns:
            Date label, e.g. "Petek, 29.10.2021"
        """
        if self._date is None:
            path = self.layout.date_path
            nodes = self.document.select(path)
            text = normalize_whitespace("".join(node.get_text() for node in nodes))
            if not text:
                raise DateNotFound(path)
            self._date = text
        return self._date

    def menu(self) -> List[MenuItem]:
        """
        Returns:
            Dishes in display order,
            e.g. [MenuItem('dish name', '7,00€'), MenuItem('other dish', '6,00€')]
        """
        if self._menu is None:
            self._menu = self._extract_items(self.layout)
            logger.debug(f"Extracted {len(self._menu)} menu items")
        return list(self._menu)

    def _entry_texts(self, layout: MarkupLayout) -> List[str]:
        if not self.document.select(layout.menu_path):
            raise MenuNotFound(layout.menu_path, "menu container missing")
        return [node.get_text() for node in self.document.select(layout.item_selector)]

    def _extract_items(self, layout: MarkupLayout) -> List[MenuItem]:
        entries = drop_empty(collapse_whitespace(text) for text in self._entry_texts(layout))
        entries = drop_boilerplate(entries, leading=layout.leading_entries)

        fragments = []
        for entry in entries:
            if layout.split_concatenated:
                fragments.extend(split_on_currency(entry))
            else:
                fragments.append(entry.strip())
        fragments = drop_boilerplate(fragments, trailing=layout.trailing_fragments)
        # Whitespace after a price inside the menu leaves the same artifact
        fragments = drop_bare_currency(fragments)

        if not fragments:
            raise MenuNotFound(layout.item_selector)

        items = []
        for fragment in fragments:
            fragment = strip_allergens(
                fragment, layout.allergen_pattern, layout.allergen_replacement
            )
            name, price = split_name_price(fragment)
            items.append(MenuItem(name, price))
        return items
