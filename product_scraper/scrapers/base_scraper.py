import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from product_scraper.errors import ExtractionFailure
from product_scraper.models.schemas import ProductRecord


class BaseScraper(ABC):
    """
    Turns a product page URL into a ProductRecord with one call to an
    extraction service.

    The client is shared between concurrent scrapes and only read from.
    Subclasses say how to ask the service and where the payload sits in its
    response; validation and logging live here.
    """

    service_name = "extraction"
    logger_name = 'scraper'

    def __init__(self, client: Any, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger if logger is not None else logging.getLogger(self.logger_name)

    @abstractmethod
    async def _request_extraction(self, url: str) -> Any:
        pass

    @abstractmethod
    def _extract_payload(self, response: Any) -> Optional[Mapping[str, Any]]:
        pass

    async def scrape(self, url: str) -> ProductRecord:
        """Main scraping method"""
        try:
            self.logger.debug(f"Scraping {url}")
            response = await self._request_extraction(url)

            self.logger.info(f"Raw {self.service_name} result: {response!r}")

            payload = self._extract_payload(response)
            if not isinstance(payload, Mapping) or not payload.get("productName"):
                raise ExtractionFailure()

            return ProductRecord(**payload)
        except Exception as e:
            self.logger.error(f"Scrape error for {url}: {e}")
            raise
