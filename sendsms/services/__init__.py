"""
SMS Services Layer.

Business logic independent of any particular HTTP provider.
"""

from sendsms.services.composer import compose_body, MessageComposer

__all__ = [
    "compose_body",
    "MessageComposer",
]
