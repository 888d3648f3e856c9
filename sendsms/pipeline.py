"""
SMS Send Pipeline.

Orchestrates one run: compose the message (shortening the URL if needed),
then hand it to the provider. All dependencies are injected through the
constructor so the pipeline can run against fakes.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from sendsms.adapters.shortener_adapter import TemplateShortenerAdapter
from sendsms.adapters.twilio_adapter import TwilioSMSAdapter
from sendsms.domain.interfaces import ISMSClient
from sendsms.domain.models import OutboundMessage, SendResult, SMSConfig
from sendsms.services.composer import MessageComposer


@dataclass
class PipelineResult:
    """
    Result of pipeline execution.

    Attributes:
        message: Message that was (or would have been) sent
        send_result: Provider result, None on a dry run
    """
    message: OutboundMessage
    send_result: Optional[SendResult] = None

    @property
    def dry_run(self) -> bool:
        return self.send_result is None

    def __str__(self) -> str:
        status = "dry run" if self.dry_run else f"HTTP {self.send_result.status_code}"
        return f"Pipeline Result: {self.message} ({status})"


class SendPipeline:
    """
    Main orchestrator: compose, then send.

    Each run makes at most two network calls, shortener then provider.
    A shortening failure aborts the run before anything is sent.
    """

    def __init__(self, composer: MessageComposer, sms_client: ISMSClient):
        """
        Initialize pipeline with all dependencies.

        Args:
            composer: Message composer (with its shortener)
            sms_client: Provider client
        """
        self._composer = composer
        self._sms_client = sms_client

    def run(
        self,
        body: str,
        from_address: str,
        to_address: str,
        long_url: Optional[str] = None,
        dry_run: bool = False,
    ) -> PipelineResult:
        """
        Compose and send one message.

        Args:
            body: Raw message text
            from_address: Sender phone number
            to_address: Recipient phone number
            long_url: URL to shorten and append (optional)
            dry_run: Compose only, do not call the provider

        Returns:
            PipelineResult

        Raises:
            SMSError: If shortening or sending fails
        """
        composed = self._composer.compose(body, long_url)
        message = OutboundMessage(
            from_address=from_address,
            to_address=to_address,
            body=composed,
        )

        if dry_run:
            logger.info(f"Dry run, not sending {message}")
            return PipelineResult(message=message)

        send_result = self._sms_client.send(message)
        return PipelineResult(message=message, send_result=send_result)

    def run_config(self, body: str, config: SMSConfig, dry_run: bool = False) -> PipelineResult:
        """Run with addresses and URL taken from a resolved config."""
        return self.run(
            body=body,
            from_address=config.from_address,
            to_address=config.to_address,
            long_url=config.long_url,
            dry_run=dry_run,
        )


class PipelineFactory:
    """Factory for building SendPipeline instances."""

    @staticmethod
    def create_default(config: SMSConfig) -> SendPipeline:
        """
        Create a pipeline with the HTTP adapters.

        Args:
            config: Resolved configuration

        Returns:
            Configured SendPipeline
        """
        shortener = None
        if config.wants_short_url:
            shortener = TemplateShortenerAdapter(
                endpoint_template=config.shortener_template,
                timeout=config.timeout,
            )

        sms_client = TwilioSMSAdapter(
            account_sid=config.account_sid,
            auth_token=config.auth_token,
            api_url_template=config.api_url,
            timeout=config.timeout,
        )

        return SendPipeline(
            composer=MessageComposer(shortener=shortener),
            sms_client=sms_client,
        )
