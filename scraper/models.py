"""
Data types produced by the menu extractor
"""
from typing import List, NamedTuple


class MenuItem(NamedTuple):
    """One dish, e.g. MenuItem('Goveji golaž', '5,50€')"""
    name: str
    price: str


class MenuPage(NamedTuple):
    """Date label plus dishes in display order"""
    date: str
    items: List[MenuItem]
