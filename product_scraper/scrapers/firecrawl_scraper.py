import logging
from typing import Any, Mapping, Optional

from product_scraper.models.schemas import EXTRACTION_PROMPT, EXTRACTION_SCHEMA, ProductRecord

from .base_scraper import BaseScraper


class ProductScraper(BaseScraper):

    service_name = "Firecrawl"
    logger_name = 'scraper.firecrawl'

    FORMATS = [
        {
            "type": "json",
            "schema": EXTRACTION_SCHEMA,
            "prompt": EXTRACTION_PROMPT,
        }
    ]

    async def _request_extraction(self, url: str) -> Any:
        return await self.client.scrape(url, formats=self.FORMATS)

    def _extract_payload(self, response: Any) -> Optional[Mapping[str, Any]]:
        # Firecrawl hands back a Document; plain dicts come from raw API responses
        if isinstance(response, Mapping):
            return response.get("json")
        return getattr(response, "json", None)


async def scrape_product(url: str, client: Any, logger: Optional[logging.Logger] = None) -> ProductRecord:
    """
    Scrape a single product page through Firecrawl

    Args:
        url: Product page URL, passed to Firecrawl unchecked
        client: Firecrawl async client (see config.create_firecrawl_client)
        logger: Optional logger for the raw-result and error echoes

    Returns:
        The extracted ProductRecord

    Raises:
        ExtractionFailure: Firecrawl returned no product name
        Exception: Whatever the Firecrawl call raised, unchanged
    """
    return await ProductScraper(client, logger).scrape(url)
