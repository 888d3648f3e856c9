"""
Twilio SMS API Adapter.

Implements ISMSClient for the Twilio REST Messages endpoint (or any endpoint
with the same contract: form-encoded POST, HTTP Basic Auth with the account
SID and auth token, JSON error bodies with 'message' and 'more_info').

API Endpoints used:
- POST /2010-04-01/Accounts/{AccountSid}/Messages.json
"""

from typing import Optional
from urllib.parse import quote

import requests
from loguru import logger
from requests.auth import HTTPBasicAuth

from sendsms.domain.interfaces import (
    ISMSClient,
    SendError,
    ProviderError,
    ResponseDecodeError,
)
from sendsms.domain.models import (
    DEFAULT_API_URL,
    SEGMENT_LIMIT,
    OutboundMessage,
    SendResult,
)


class TwilioSMSAdapter(ISMSClient):
    """
    Adapter for the Twilio Messages API.

    Each call to send() makes exactly one POST request. Nothing is retried.

    Attributes:
        account_sid: Twilio account SID
        api_url: Messages endpoint for this account
        timeout: Request timeout in seconds (None = no timeout)
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        api_url_template: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Twilio adapter.

        Args:
            account_sid: Twilio account SID
            auth_token: Twilio auth token
            api_url_template: Endpoint template containing {account_sid}
            timeout: Request timeout in seconds
        """
        self.account_sid = account_sid
        self.api_url = api_url_template.format(account_sid=quote(account_sid, safe=""))
        self.timeout = timeout
        self._auth = HTTPBasicAuth(account_sid, auth_token)
        self._headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
        }

    def send(self, message: OutboundMessage) -> SendResult:
        """
        Send an SMS.

        The body is cut to one segment even if the caller did not compose it.

        Args:
            message: Message to send

        Returns:
            SendResult for a 2xx response

        Raises:
            SendError: If the request cannot be completed
            ProviderError: If the provider answers with a non-2xx status
            ResponseDecodeError: If that answer is not a JSON object
        """
        body = message.body
        if len(body) > SEGMENT_LIMIT:
            logger.warning(f"Body has {len(body)} characters, cutting to {SEGMENT_LIMIT}")
            body = body[:SEGMENT_LIMIT]

        form = message.to_form()
        form["Body"] = body

        try:
            logger.debug(f"Sending SMS from {message.from_address} to {message.to_address}")
            response = requests.post(
                self.api_url,
                data=form,
                auth=self._auth,
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SendError(f"Unable to complete request: {str(e)}") from e

        if 200 <= response.status_code < 300:
            logger.info(f"SMS accepted by provider (HTTP {response.status_code})")
            return SendResult(status_code=response.status_code, body_length=len(body))

        raise self._error_from_response(response)

    def _error_from_response(self, response: requests.Response) -> Exception:
        """
        Build the exception for a rejected request.

        Args:
            response: Non-2xx response

        Returns:
            ProviderError with the decoded fields, or ResponseDecodeError
        """
        try:
            data = response.json()
        except ValueError as e:
            return ResponseDecodeError(
                f"Unable to decode response body (HTTP {response.status_code}): {str(e)}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            return ResponseDecodeError(
                f"Unable to decode response body (HTTP {response.status_code}): "
                f"expected a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
            )

        return ProviderError(
            status_code=response.status_code,
            provider_message=data.get("message"),
            more_info=data.get("more_info"),
        )

    def __repr__(self) -> str:
        """String representation of adapter."""
        return f"TwilioSMSAdapter(url={self.api_url})"
