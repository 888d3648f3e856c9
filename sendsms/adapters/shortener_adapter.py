"""
URL Shortener Adapter.

Implements IURLShortener for shorteners that answer a plain GET with the
short URL as a text body, e.g. https://is.gd/create.php?format=simple&url=%s
"""

from typing import Optional

import requests
from loguru import logger

from sendsms.domain.interfaces import IURLShortener, ShorteningError
from sendsms.domain.models import SHORTENER_PLACEHOLDER


class TemplateShortenerAdapter(IURLShortener):
    """
    Adapter for template-based URL shortener endpoints.

    The long URL is substituted verbatim into the endpoint template and the
    trimmed response body is taken as the shortened URL.

    Attributes:
        endpoint_template: Endpoint URL containing one %s slot
        timeout: Request timeout in seconds (None = no timeout)
    """

    def __init__(
        self,
        endpoint_template: str,
        timeout: Optional[float] = None,
    ):
        """
        Initialize shortener adapter.

        Args:
            endpoint_template: Endpoint URL containing one %s slot
            timeout: Request timeout in seconds

        Raises:
            ValueError: If the template has no %s slot
        """
        if SHORTENER_PLACEHOLDER not in endpoint_template:
            raise ValueError(
                f"Shortener endpoint must contain '{SHORTENER_PLACEHOLDER}': {endpoint_template}"
            )
        self.endpoint_template = endpoint_template
        self.timeout = timeout

    def build_url(self, long_url: str) -> str:
        """Substitute the long URL into the endpoint template."""
        return self.endpoint_template.replace(SHORTENER_PLACEHOLDER, long_url, 1)

    def shorten(self, long_url: str) -> str:
        """
        Shorten a URL with a single GET request.

        Args:
            long_url: URL to shorten

        Returns:
            Shortened URL with surrounding whitespace removed

        Raises:
            ShorteningError: On transport failure or an empty response body
        """
        endpoint = self.build_url(long_url)

        try:
            logger.debug(f"Shortening {long_url}")
            response = requests.get(endpoint, timeout=self.timeout)
            text = response.text
        except requests.RequestException as e:
            raise ShorteningError(f"Shortener request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Shortener answered HTTP {response.status_code}")

        short_url = text.strip()
        if not short_url:
            raise ShorteningError(
                "Shortener returned an empty response body",
                status_code=response.status_code,
            )

        logger.info(f"Shortened {long_url} -> {short_url}")
        return short_url

    def __repr__(self) -> str:
        """String representation of adapter."""
        return f"TemplateShortenerAdapter(endpoint={self.endpoint_template})"
