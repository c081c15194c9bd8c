"""Errors raised by the product scraper.

Only failures detected here get their own type. Errors coming out of the
Firecrawl client (network, auth, service-side, malformed responses) are
re-raised as-is and never wrapped.
"""


class ScraperError(Exception):
    """Base class for errors raised by this package."""


class ExtractionFailure(ScraperError):
    """The service answered, but the payload holds no product name."""

    MESSAGE = "No product data extracted."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class ConfigurationError(ScraperError):
    """Required settings are missing from the environment."""


def is_transport_failure(error: BaseException) -> bool:
    """True for errors that came from the service call rather than from validation."""
    return isinstance(error, Exception) and not isinstance(error, ScraperError)
