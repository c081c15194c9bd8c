import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from firecrawl import AsyncFirecrawl

from product_scraper.errors import ConfigurationError


logger = logging.getLogger('scraper.config')


@dataclass(frozen=True)
class Settings:
    firecrawl_api_key: str
    firecrawl_api_url: Optional[str] = None

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Read settings from the environment

        Args:
            load_env_file: If True, load a .env file first (existing variables win)

        Returns:
            Settings with the Firecrawl credential
        """
        if load_env_file:
            load_dotenv()

        api_key = os.getenv("FIRECRAWL_API_KEY")
        if not api_key:
            raise ConfigurationError("FIRECRAWL_API_KEY is not set")

        api_url = os.getenv("FIRECRAWL_API_URL") or None
        return cls(firecrawl_api_key=api_key, firecrawl_api_url=api_url)


def create_firecrawl_client(settings: Settings) -> AsyncFirecrawl:
    """Build the Firecrawl client once; it is shared read-only by every scrape."""
    if settings.firecrawl_api_url:
        logger.info(f"Using Firecrawl API at {settings.firecrawl_api_url}")
        return AsyncFirecrawl(api_key=settings.firecrawl_api_key, api_url=settings.firecrawl_api_url)
    return AsyncFirecrawl(api_key=settings.firecrawl_api_key)
