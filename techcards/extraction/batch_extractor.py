"""
Batch Product Extractor

Processes a list of references (or product URLs) one at a time:
lookup -> fetch -> parse. A failed item is recorded and the batch
moves on to the next one.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Union

from ..common.text_utils import reference_from_url
from ..models import BatchFailure, BatchResult, ProductError, ProductRecord
from ..rendering.feature_filter import available_features
from .page_parser import ProductPageParser

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r'^https?://', re.IGNORECASE)


def parse_reference_input(text: str) -> List[str]:
    """
    Split free-form input into references.

    Args:
        text: References/URLs separated by whitespace, commas or newlines

    Returns:
        Unique tokens in first-seen order
    """
    tokens = [token.strip() for token in re.split(r'[\s,]+', text or "")]
    return list(dict.fromkeys(token for token in tokens if token))


class BatchExtractor:
    """
    Sequential batch extraction.

    Usage:
        extractor = BatchExtractor(locator, fetcher, ProductPageParser())
        result = extractor.process(["123456", "https://www.bricoman.pl/x-654321.html"])
        if result.success:
            ...
    """

    def __init__(self, locator, fetcher, parser: ProductPageParser):
        """
        Initialize the batch extractor.

        Args:
            locator: ProductLocator resolving references to URLs
            fetcher: Object with fetch(url) -> Optional[str]
            parser: Product page parser
        """
        self.locator = locator
        self.fetcher = fetcher
        self.parser = parser

    def fetch_record(self, url: str, reference: str) -> Union[ProductRecord, ProductError]:
        """
        Fetch and parse one product page.

        Returns:
            ProductRecord, or ProductError if the page couldn't be fetched
        """
        html = self.fetcher.fetch(url)
        if not html:
            return ProductError(reference=reference, url=url, message="Could not fetch product page")
        return self.parser.parse(html, url, reference)

    def process(self, references: Iterable[str]) -> BatchResult:
        """
        Process references in order.

        Args:
            references: Reference numbers or product URLs

        Returns:
            BatchResult with records, failures and the available feature labels
        """
        references = list(references)
        result = BatchResult()
        total = len(references)

        for i, token in enumerate(references, 1):
            logger.info("[%d/%d] %s", i, total, token[:60])

            if URL_PATTERN.match(token):
                url = token
                reference = reference_from_url(token)
            else:
                reference = token
                url = self.locator.locate(token)

            if not url:
                logger.warning("Not found: %s", token)
                result.failures.append(BatchFailure(reference=token, reason="not found"))
                continue

            outcome = self.fetch_record(url, reference)
            if isinstance(outcome, ProductError):
                logger.error("Error: %s (%s)", outcome.message, url)
                result.failures.append(BatchFailure(reference=token, reason=outcome.message))
                continue

            result.records.append(outcome)
            result.found_references.append(reference)
            logger.info("OK: %s... (%d attributes)", outcome.title[:50], len(outcome.attributes))

        result.available_features = available_features(result.records)
        logger.info("Batch finished: %d found, %d failed", len(result.records), len(result.failures))
        return result
