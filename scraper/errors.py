"""
Errors raised while fetching and extracting the menu
"""


class MenuError(Exception):
    """Base class for every failure that ends a run"""


class DocumentUnavailable(MenuError):
    """The menu page could not be fetched or parsed"""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not load menu page {url}: {reason}")


class DateNotFound(MenuError):
    """The page has no menu date where the layout expects one"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Menu date not found (looked at '{path}')")


class MenuNotFound(MenuError):
    """The page has no menu entries where the layout expects them"""

    def __init__(self, path, detail="no menu entries"):
        self.path = path
        super().__init__(f"Menu not found: {detail} (looked at '{path}')")


class MalformedEntry(MenuError):
    """A menu entry cannot be split into dish name and price"""

    def __init__(self, entry):
        self.entry = entry
        super().__init__(f"Cannot separate dish name from price in entry: {entry!r}")
