"""
Terminal presentation of the daily menu
"""
import sys
from enum import Enum
from typing import List, Sequence, Tuple

from config import PRICE_SPACE_PADDING


class DisplayMode(Enum):
    SHORT = "short"  # dish names only
    LONG = "long"    # dish names aligned with prices


def menu_entry_justification(items: Sequence[Tuple[str, str]]) -> int:
    """
    Width of the name column in LONG mode

    The longest string among all names and prices sets the width, plus
    PRICE_SPACE_PADDING spaces before the price.
    """
    longest = max(len(text) for item in items for text in item)
    return PRICE_SPACE_PADDING + longest


def render_date(date: str) -> List[str]:
    return [date, "=" * len(date)]


def render_short(items: Sequence[Tuple[str, str]]) -> List[str]:
    lines = []
    for name, _price in items:
        lines.append(f"- {name}")
        lines.append("")
    return lines


def render_long(items: Sequence[Tuple[str, str]]) -> List[str]:
    width = menu_entry_justification(items)
    lines = []
    for name, price in items:
        line = name.ljust(width) + price
        lines.append(line)
        lines.append("-" * len(line))
    return lines


def render(date: str, items: Sequence[Tuple[str, str]], mode: DisplayMode) -> List[str]:
    """
    Render the menu as terminal lines

    Args:
        date: Date label, e.g. "Petek, 29.10.2021"
        items: [('dish name', '7,00€'), ('other dish name', '6,00€')]
        mode: DisplayMode.SHORT or DisplayMode.LONG

    Returns:
        Lines to print, without line terminators
    """
    if mode is DisplayMode.LONG:
        body = render_long(items)
    else:
        body = render_short(items)
    return render_date(date) + body


def present(date, items, mode, out=None):
    """Print the rendered menu to `out` (stdout by default)"""
    out = out or sys.stdout
    for line in render(date, items, mode):
        print(line, file=out)
