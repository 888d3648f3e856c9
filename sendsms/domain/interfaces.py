"""
Domain interfaces for the SMS sender.

Defines the exception hierarchy and the abstractions the pipeline depends on.
Concrete HTTP implementations live in sendsms.adapters.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sendsms.domain.models import OutboundMessage, SendResult


# ============================================================================
# Custom Exceptions
# ============================================================================


class SMSError(Exception):
    """Base exception for SMS sender errors."""
    pass


class ConfigurationError(SMSError):
    """Exception raised when required configuration is missing or invalid."""
    pass


class InputError(SMSError):
    """Exception raised when the message body cannot be read."""
    pass


class APIError(SMSError):
    """
    Exception raised during external HTTP calls (shortener, provider).

    Attributes:
        status_code: HTTP status if a response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ShorteningError(APIError):
    """Exception raised when the shortener fails or returns an empty body."""
    pass


class SendError(APIError):
    """Exception raised when the messaging request cannot be completed."""
    pass


class ProviderError(APIError):
    """
    Exception raised when the provider rejects a message (non-2xx).

    Attributes:
        provider_message: 'message' field of the provider's JSON error
        more_info: 'more_info' field of the provider's JSON error
    """

    def __init__(
        self,
        status_code: int,
        provider_message: Optional[str] = None,
        more_info: Optional[str] = None,
    ):
        self.provider_message = provider_message
        self.more_info = more_info

        message = f"HTTP error {status_code}"
        if provider_message is not None:
            message += f", {provider_message}"
        if more_info is not None:
            message += f" {more_info}"

        super().__init__(message, status_code=status_code)


class ResponseDecodeError(APIError):
    """Exception raised when a provider error response is not a JSON object."""
    pass


# ============================================================================
# Client Interfaces
# ============================================================================


class IURLShortener(ABC):
    """
    Interface for URL shortening services.
    """

    @abstractmethod
    def shorten(self, long_url: str) -> str:
        """
        Shorten a URL.

        Args:
            long_url: URL to shorten

        Returns:
            Shortened URL, never empty

        Raises:
            ShorteningError: If the service fails or returns nothing
        """
        pass


class ISMSClient(ABC):
    """
    Interface for SMS provider clients.
    """

    @abstractmethod
    def send(self, message: OutboundMessage) -> SendResult:
        """
        Deliver a message to the provider.

        Args:
            message: Message to send

        Returns:
            SendResult for a 2xx response

        Raises:
            SendError: If the request cannot be completed
            ProviderError: If the provider rejects the message
            ResponseDecodeError: If the rejection body cannot be decoded
        """
        pass
