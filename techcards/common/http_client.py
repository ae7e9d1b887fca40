"""
HTTP Fetcher

Single entry point for all requests to the retailer's site.
Handles browser-like headers, the minimum delay between requests,
and turns network errors into a None result.
"""

import logging
import time
from typing import Optional

import requests
import urllib3

from .constants import REQUEST_INTERVAL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

# The origin serves an incomplete certificate chain; verification is off
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class HttpFetcher:
    """
    GET/HEAD client for the retailer's site.

    Non-2xx responses still return their body: the site answers some
    product pages with error status codes and a usable body. Only
    image_exists() looks at the status code.

    Usage:
        with HttpFetcher() as fetcher:
            html = fetcher.fetch("https://www.bricoman.pl/produkt-123456.html")
            if html is None:
                ...  # unavailable
    """

    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "pl-PL,pl;q=0.9,en-US;q=0.8,en;q=0.7",
    }

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        min_interval: float = REQUEST_INTERVAL,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Per-request timeout in seconds
            min_interval: Minimum delay between consecutive requests in seconds
            session: Optional pre-built session (shared connection pool)
        """
        self.timeout = timeout
        self.min_interval = min_interval
        self.session = session or requests.Session()
        self.session.headers.update(self.HEADERS)
        self.session.verify = False

        self.requests_made = 0
        self.last_request_time = 0.0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _rate_limit(self):
        """Wait until min_interval has passed since the previous request."""
        now = time.time()
        elapsed = now - self.last_request_time

        if elapsed < self.min_interval:
            time.sleep(self.min_interval - elapsed)

        self.last_request_time = time.time()
        self.requests_made += 1

    def fetch(self, url: str) -> Optional[str]:
        """
        Fetch a URL and return its body text.

        Args:
            url: Absolute URL

        Returns:
            Response body, or None if the request failed or the body is empty
        """
        self._rate_limit()

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("HTTP request failed for %s: %s", url, e)
            return None

        if response.status_code >= 400:
            logger.debug("HTTP %d for %s (body kept)", response.status_code, url)

        if not response.text:
            logger.warning("Empty response body for %s", url)
            return None

        return response.text

    def image_exists(self, url: str) -> bool:
        """
        Check that an image URL answers with HTTP 200.

        Args:
            url: Absolute image URL

        Returns:
            True only for a 200 response
        """
        self._rate_limit()

        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            logger.debug("Image check failed for %s: %s", url, e)
            return False

        return response.status_code == 200
