"""
SMS Sender Domain Layer.

Models, interfaces and exceptions, independent of HTTP and CLI concerns.
"""

from sendsms.domain.models import (
    SMSConfig,
    OutboundMessage,
    SendResult,
    SEGMENT_LIMIT,
    ELLIPSIS,
)
from sendsms.domain.interfaces import (
    IURLShortener,
    ISMSClient,
    # Exceptions
    SMSError,
    ConfigurationError,
    InputError,
    APIError,
    ShorteningError,
    SendError,
    ProviderError,
    ResponseDecodeError,
)

__all__ = [
    # Models
    "SMSConfig",
    "OutboundMessage",
    "SendResult",
    "SEGMENT_LIMIT",
    "ELLIPSIS",
    # Interfaces
    "IURLShortener",
    "ISMSClient",
    # Exceptions
    "SMSError",
    "ConfigurationError",
    "InputError",
    "APIError",
    "ShorteningError",
    "SendError",
    "ProviderError",
    "ResponseDecodeError",
]
