"""
SMS Sender.

Command-line tool that sends a text message through the Twilio Messages API,
optionally appending a shortened URL, trimmed to a single 160-character SMS
segment.

Main components:
- Domain: Models, interfaces and exceptions
- Adapters: HTTP integrations (URL shortener, Twilio)
- Services: Message composition
- Pipeline: Orchestration

Usage:
    from sendsms.config import resolve_config
    from sendsms.pipeline import PipelineFactory

    config = resolve_config({}, environ)
    pipeline = PipelineFactory.create_default(config)
    result = pipeline.run_config("Build finished", config)

    print(result)
"""

from sendsms.pipeline import SendPipeline, PipelineFactory, PipelineResult
from sendsms.services.composer import compose_body, MessageComposer
from sendsms.domain.models import SMSConfig, OutboundMessage, SendResult

__all__ = [
    "SendPipeline",
    "PipelineFactory",
    "PipelineResult",
    "compose_body",
    "MessageComposer",
    "SMSConfig",
    "OutboundMessage",
    "SendResult",
]

__version__ = "1.0.0"
