#!/usr/bin/env python
import sys
import json
import asyncio
import logging
import argparse
from typing import Any, Dict, List, Optional

from product_scraper.config import Settings, create_firecrawl_client
from product_scraper.errors import ConfigurationError, is_transport_failure
from product_scraper.scrapers.firecrawl_scraper import ProductScraper


logger = logging.getLogger('scrape_product')


async def scrape_all(urls: List[str], client: Any) -> List[Dict[str, Any]]:
    """
    Scrape every URL concurrently with one shared client

    Args:
        urls: Product page URLs
        client: Firecrawl async client

    Returns:
        One result dict per URL, in input order, holding either "product" or "error" and "kind"
    """
    scraper = ProductScraper(client)
    outcomes = await asyncio.gather(*(scraper.scrape(url) for url in urls), return_exceptions=True)

    results = []
    for url, outcome in zip(urls, outcomes):
        if isinstance(outcome, Exception):
            results.append({
                "url": url,
                "error": str(outcome) or type(outcome).__name__,
                "kind": "transport" if is_transport_failure(outcome) else "extraction",
            })
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.append({"url": url, "product": outcome.to_payload()})
    return results


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract product name, price, currency and image from product pages")
    parser.add_argument("urls", nargs="+", metavar="URL", help="Product page URL to scrape")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO)"
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    client = create_firecrawl_client(settings)
    results = asyncio.run(scrape_all(args.urls, client))

    failed = 0
    for result in results:
        print(json.dumps(result, indent=args.indent, ensure_ascii=False))
        if "error" in result:
            failed += 1

    logger.info(f"Completed scrapes: {len(results) - failed}/{len(results)} successful")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
