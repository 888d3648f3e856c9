"""
SMS Adapters Layer.

HTTP implementations of the domain interfaces.
"""

from sendsms.adapters.shortener_adapter import TemplateShortenerAdapter
from sendsms.adapters.twilio_adapter import TwilioSMSAdapter

__all__ = [
    "TemplateShortenerAdapter",
    "TwilioSMSAdapter",
]
