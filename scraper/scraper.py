"""
Web scraper for the daily cafeteria menu
Fetches the menu page with requests and parses it with BeautifulSoup
"""
import logging

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from config import FOOD_URL, REQUEST_TIMEOUT, USER_AGENT
from scraper.errors import DocumentUnavailable
from scraper.extractor import MenuExtractor
from scraper.models import MenuPage

logger = logging.getLogger(__name__)


class MenuScraper:
    """Fetches the menu page and hands it to the extractor"""

    def __init__(self, url=FOOD_URL, timeout=REQUEST_TIMEOUT, session=None):
        """
        Initialize the scraper

        Args:
            url: Menu page URL
            timeout: Seconds to wait for the server before giving up
            session: requests.Session to use (a new one if None)
        """
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': USER_AGENT
        })

    def fetch_document(self):
        """
        Download and parse the menu page

        Returns:
            BeautifulSoup document

        Raises:
            DocumentUnavailable: on network, HTTP or parser failure
        """
        logger.debug(f"GET {self.url} (timeout {self.timeout}s)")

        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise DocumentUnavailable(self.url, f"no response within {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise DocumentUnavailable(self.url, str(e)) from e

        logger.debug(f"Response: {response.status_code}, {len(response.content)} bytes")

        try:
            return BeautifulSoup(response.content, 'html.parser')
        except ParserRejectedMarkup as e:
            raise DocumentUnavailable(self.url, f"unparseable HTML ({e})") from e

    def scrape_menu(self, layout=None) -> MenuPage:
        """
        Fetch the page and extract today's menu

        Args:
            layout: MarkupLayout to use (detected if None)

        Returns:
            MenuPage with date and items
        """
        try:
            document = self.fetch_document()
        finally:
            self.session.close()

        return MenuExtractor(document, layout).extract()
