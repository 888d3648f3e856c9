"""
Domain models for the SMS sender.

All models are immutable (frozen dataclasses). They live for a single
invocation of the tool and are never persisted.
"""

from dataclasses import dataclass
from typing import Optional


SEGMENT_LIMIT = 160
"""Maximum characters of a single SMS segment."""

ELLIPSIS = "..."
"""Marker appended to a truncated message body."""

DEFAULT_API_URL = "https://api.twilio.com/2010-04-01/Accounts/{account_sid}/Messages.json"
"""Messaging endpoint template, formatted with the account SID."""

SHORTENER_PLACEHOLDER = "%s"
"""Substitution slot for the long URL in a shortener endpoint template."""


@dataclass(frozen=True)
class SMSConfig:
    """
    Resolved configuration for one run of the tool.

    Attributes:
        from_address: Sender phone number
        to_address: Recipient phone number
        account_sid: Provider account identifier (also basic-auth username)
        auth_token: Provider secret (also basic-auth password)
        shortener_template: Shortener endpoint containing one %s slot
        long_url: URL to shorten and append to the message
        api_url: Messaging endpoint template containing {account_sid}
        timeout: Request timeout in seconds (None = no timeout)
    """
    from_address: str
    to_address: str
    account_sid: str
    auth_token: str
    shortener_template: Optional[str] = None
    long_url: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None

    @property
    def wants_short_url(self) -> bool:
        """Check if a URL should be shortened and appended."""
        return bool(self.long_url)

    def __repr__(self) -> str:
        """String representation without the auth token."""
        return (
            f"SMSConfig(from={self.from_address}, to={self.to_address}, "
            f"sid={self.account_sid}, url={self.long_url})"
        )


@dataclass(frozen=True)
class OutboundMessage:
    """
    A message ready to be handed to the provider.

    Attributes:
        from_address: Sender phone number
        to_address: Recipient phone number
        body: Composed message text
    """
    from_address: str
    to_address: str
    body: str

    def __post_init__(self) -> None:
        """Validate model after initialization."""
        if not self.from_address:
            raise ValueError("from_address cannot be empty")
        if not self.to_address:
            raise ValueError("to_address cannot be empty")

    def to_form(self) -> dict:
        """Form fields expected by the messaging API."""
        return {
            "From": self.from_address,
            "To": self.to_address,
            "Body": self.body,
        }

    def __str__(self) -> str:
        return f"OutboundMessage(from={self.from_address}, to={self.to_address}, len={len(self.body)})"


@dataclass(frozen=True)
class SendResult:
    """
    Successful delivery hand-off to the provider.

    The response payload is not inspected, only the status is kept.

    Attributes:
        status_code: HTTP status returned by the provider (2xx)
        body_length: Length of the body actually transmitted
    """
    status_code: int
    body_length: int

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300

    def __str__(self) -> str:
        return f"SendResult(status={self.status_code}, chars={self.body_length})"
