"""
Known markup layouts of the menu page

The site has been redesigned once. Both versions keep the menu at a fixed
position in the document tree, so each layout is a set of structural paths
plus the cleanup parameters that differ between versions.
"""
import re
from dataclasses import dataclass
from typing import Optional

from scraper.text_cleaning import ALLERGEN_RE

# Equivalent of /html/body/main/div/div/div/div
CONTENT_PATH = "html > body > main > div > div > div > div"


@dataclass(frozen=True)
class MarkupLayout:
    """
    Structural paths and cleanup parameters for one version of the page

    Attributes:
        name: Short label used in logs
        menu_path: CSS child path to the menu container(s)
        item_tag: Tag of the menu entries below the container
        date_path: CSS child path to the date label
        leading_entries: Entries before the menu (repeated date etc.)
        trailing_fragments: Fragments after the last dish
        split_concatenated: Whether entries may hold several dishes joined
            by the currency symbol
        allergen_pattern: Regex matching allergen annotations
        allergen_replacement: Text replacing each annotation
    """
    name: str
    menu_path: str
    item_tag: str
    date_path: str
    leading_entries: int = 0
    trailing_fragments: int = 0
    split_concatenated: bool = False
    allergen_pattern: re.Pattern = ALLERGEN_RE
    allergen_replacement: str = " "

    @property
    def item_selector(self) -> str:
        return f"{self.menu_path} {self.item_tag}"


CURRENT = MarkupLayout(
    name="current",
    menu_path=CONTENT_PATH,
    item_tag="h6",
    date_path=f"{CONTENT_PATH} > h6:nth-of-type(2) > span",
    leading_entries=1,     # the date, repeated inside the menu container
    trailing_fragments=1,  # closing line below the last dish
    split_concatenated=True,
)

LEGACY = MarkupLayout(
    name="legacy",
    menu_path=CONTENT_PATH + " > span" * 8,
    item_tag="p",
    date_path=f"{CONTENT_PATH} > p:nth-of-type(3) > span",
    trailing_fragments=1,
    # Old pages put the annotation after the price, drop it and the rest
    allergen_pattern=re.compile(r"\([A-Z,\.]+\).*"),
    allergen_replacement="",
)

# Newest first, detection stops at the first match
LAYOUTS = (CURRENT, LEGACY)


def detect_layout(document) -> Optional[MarkupLayout]:
    """
    Pick the layout whose menu path has entries in this document

    Args:
        document: BeautifulSoup document

    Returns:
        Matching MarkupLayout, or None if no known layout matches
    """
    for layout in LAYOUTS:
        if document.select_one(layout.item_selector) is not None:
            return layout
    return None
