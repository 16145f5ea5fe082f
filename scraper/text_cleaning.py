"""
Text normalization helpers for menu entries

Each function does one step of the cleanup so the steps can be tested and
recombined per page layout.
"""
import re
from typing import Iterable, List, Sequence, Tuple

from config import CURRENCY_SYMBOL
from scraper.errors import MalformedEntry

WHITESPACE_RE = re.compile(r"\s+")

# Allergen codes such as "(A,C,G)" or "(A.,G)"
ALLERGEN_RE = re.compile(r"\([A-Za-z,\.]+\)")

# Whitespace directly before a digit separates dish name from price
NAME_PRICE_BOUNDARY_RE = re.compile(r"\s(?=\d)")


def collapse_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace (NBSP and other Unicode spaces
    included) into a single ASCII space. The ends are kept, so a
    whitespace-only entry becomes " " rather than "".
    """
    return WHITESPACE_RE.sub(" ", text)


def normalize_whitespace(text: str) -> str:
    """
    Collapse whitespace like collapse_whitespace and trim both ends.

    Idempotent: normalizing a normalized string returns it unchanged.
    """
    return collapse_whitespace(text).strip()


def drop_empty(entries: Iterable[str]) -> List[str]:
    return [entry for entry in entries if entry]


def drop_boilerplate(entries: Sequence, leading: int = 0, trailing: int = 0) -> list:
    """
    Remove page boilerplate surrounding the menu entries

    Args:
        entries: Entries in document order
        leading: Number of entries to drop from the front
        trailing: Number of entries to drop from the back

    Returns:
        The remaining entries, order preserved
    """
    end = len(entries) - trailing
    return list(entries[leading:max(end, 0)])


def split_on_currency(entry: str, symbol: str = CURRENCY_SYMBOL) -> List[str]:
    """
    Split an entry that may hold several dishes glued together by the
    currency symbol, e.g. "Soup 3,00€Bread 1,00€".

    Only empty pieces at the end are discarded. Every other piece is
    trimmed and gets the currency symbol back, so whitespace after the last
    price ("Kruh 1,00 € ") leaves a bare "€" fragment behind.
    """
    pieces = entry.split(symbol)
    while pieces and not pieces[-1]:
        pieces.pop()
    return [piece.strip() + symbol for piece in pieces]


def drop_bare_currency(fragments: Iterable[str], symbol: str = CURRENCY_SYMBOL) -> List[str]:
    """Remove fragments holding nothing but the currency symbol"""
    return [fragment for fragment in fragments if fragment != symbol]


def strip_allergens(text: str, pattern=ALLERGEN_RE, replacement: str = " ") -> str:
    """Replace allergen annotations like "(A,C,G)" with `replacement`"""
    return pattern.sub(replacement, text)


def compact_price(price: str) -> str:
    """Remove all whitespace from a price: "7,00 €" -> "7,00€" """
    return WHITESPACE_RE.sub("", price)


def split_name_price(fragment: str) -> Tuple[str, str]:
    """
    Split "Goulash  5,50 €" into ("Goulash", "5,50€")

    The split happens at the last whitespace that is directly followed by a
    digit, so numbers inside the dish name stay in the name.

    Raises:
        MalformedEntry: if the fragment has no such boundary or the name
            part is empty
    """
    boundaries = list(NAME_PRICE_BOUNDARY_RE.finditer(fragment))
    if not boundaries:
        raise MalformedEntry(fragment)

    last = boundaries[-1]
    name = fragment[:last.start()].strip()
    price = compact_price(fragment[last.end():])
    if not name:
        raise MalformedEntry(fragment)

    return name, price
