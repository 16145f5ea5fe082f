"""Shared test fixtures and configuration."""
from unittest.mock import Mock

import pytest
from bs4 import BeautifulSoup

from scraper.scraper import MenuScraper

CURRENT_PAGE = """
<html>
<head><title>Malica</title></head>
<body>
<main>
  <div><div><div>
    <div>
      <h6></h6>
      <h6><span>Petek,&nbsp;&nbsp; 29.10.2021</span></h6>
      <h6><strong>Goveja juha z rezanci (A,C,G) 3,00 €</strong>Kruh 1,00 €</h6>
      <h6>Goveji golaž (A,C,G)   5,50&nbsp;€</h6>
      <h6>Pica 4 letni časi (A,G) 7,00 €&nbsp;</h6>
    </div>
  </div></div></div>
</main>
</body>
</html>
"""

LEGACY_PAGE = """
<html>
<body>
<main>
  <div><div><div>
    <div>
      <p>Malica</p>
      <p>Jedilnik</p>
      <p><span>Četrtek, 28.10.2021</span></p>
      <span><span><span><span><span><span><span><span>
        <p>Ričet s klobaso 4,50 € (A,G) dodatek</p>
        <p>Solata   2,00 €</p>
        <p>Dober tek</p>
      </span></span></span></span></span></span></span></span>
    </div>
  </div></div></div>
</main>
</body>
</html>
"""

MISSING_DATE_PAGE = """
<html>
<body>
<main>
  <div><div><div>
    <div>
      <h6>Petek</h6>
      <h6>Goveji golaž (A,C,G) 5,50 €&nbsp;</h6>
    </div>
  </div></div></div>
</main>
</body>
</html>
"""

UNKNOWN_PAGE = """
<html><body><p>Stran je v prenovi.</p></body></html>
"""


def make_document(html):
    return BeautifulSoup(html, "html.parser")


@pytest.fixture
def current_document():
    return make_document(CURRENT_PAGE)


@pytest.fixture
def legacy_document():
    return make_document(LEGACY_PAGE)


@pytest.fixture
def missing_date_document():
    return make_document(MISSING_DATE_PAGE)


@pytest.fixture
def unknown_document():
    return make_document(UNKNOWN_PAGE)


@pytest.fixture
def document_from():
    """Parse an inline HTML snippet."""
    return make_document


def make_session(html=None, status_error=None, get_error=None):
    """Mock requests.Session serving `html` for any GET."""
    session = Mock()
    session.headers = {}
    if get_error is not None:
        session.get.side_effect = get_error
        return session

    response = Mock()
    response.status_code = 200
    response.content = (html or "").encode("utf-8")
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session.get.return_value = response
    return session


@pytest.fixture
def scraper_for():
    """Build a MenuScraper whose session serves the given page."""
    def _build(html=None, **kwargs):
        return MenuScraper(url="https://menu.test/malica/", session=make_session(html, **kwargs))
    return _build


@pytest.fixture
def pages():
    """Raw HTML of the sample pages, by name."""
    return {
        "current": CURRENT_PAGE,
        "legacy": LEGACY_PAGE,
        "missing_date": MISSING_DATE_PAGE,
        "unknown": UNKNOWN_PAGE,
    }
