"""
Message composition.

Fits the message body and an optional short URL into a single SMS segment.
The body is always sacrificed before the link: when the combined text is too
long, the body is cut and marked with an ellipsis, the URL is kept whole.

Lengths are counted in Python str code points.
"""

from typing import Optional

from loguru import logger

from sendsms.domain.interfaces import IURLShortener
from sendsms.domain.models import SEGMENT_LIMIT, ELLIPSIS


def compose_body(body: str, short_url: str = "") -> str:
    """
    Trim a message body (including URL) to one SMS segment.

    Args:
        body: Raw message text
        short_url: Shortened URL to append, may be empty

    Returns:
        body + "\\n" + short_url when it fits, otherwise the body cut to
        make room for the ellipsis and the URL.

    Examples:
        >>> compose_body("hello", "http://x.co/a")
        'hello\\nhttp://x.co/a'
        >>> len(compose_body("a" * 200))
        160
    """
    suffix = f"\n{short_url}" if short_url else ""

    if len(body) + len(suffix) <= SEGMENT_LIMIT:
        return body + suffix

    # A suffix longer than the budget leaves no room for the body at all
    keep = max(0, SEGMENT_LIMIT - len(ELLIPSIS) - len(suffix))
    return body[:keep] + ELLIPSIS + suffix


class MessageComposer:
    """
    Builds the final message text, shortening the URL first if one is given.

    Attributes:
        shortener: URL shortener client, required only when a URL is passed
    """

    def __init__(self, shortener: Optional[IURLShortener] = None):
        self._shortener = shortener

    def compose(self, body: str, long_url: Optional[str] = None) -> str:
        """
        Compose the message text.

        Args:
            body: Raw message text
            long_url: URL to shorten and append (optional)

        Returns:
            Message text of at most one segment (see compose_body)

        Raises:
            ShorteningError: If the URL cannot be shortened
            ValueError: If a URL is given but no shortener is configured
        """
        short_url = ""
        if long_url:
            if self._shortener is None:
                raise ValueError("A URL shortener is required to append a URL")
            short_url = self._shortener.shorten(long_url)

        composed = compose_body(body, short_url)
        if not composed.startswith(body):
            logger.info(f"Message body truncated from {len(body)} to fit {SEGMENT_LIMIT} characters")
        logger.debug(f"Composed message: {len(composed)} characters")
        return composed
