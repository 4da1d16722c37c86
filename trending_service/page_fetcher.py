"""
Page Fetcher Module

Blocking download of the trending source page.
"""

import logging
from typing import Union

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch the HTML of a single fixed source page."""

    def __init__(self, url: str, timeout: float = 10.0, user_agent: str = ""):
        """Initialize the page fetcher.

        Args:
            url: Source page URL
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
        """
        self.url = url
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}

    def fetch(self) -> Union[str, bytes]:
        """Download the source page.

        Returns:
            The response body, decoded when the server declared a charset

        Raises:
            FetchError: On network errors or a non-2xx status code
        """
        logger.debug(f"Fetching trending page from {self.url}")
        try:
            response = requests.get(self.url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"request to {self.url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"request to {self.url} returned status code {response.status_code}",
                status_code=response.status_code,
            )

        # No declared charset: the parser sniffs <meta charset> and defaults to UTF-8
        content_type = response.headers.get("Content-Type", "")
        if "charset=" in content_type.lower():
            return response.text
        return response.content
