"""Validation error formatting.

Submodules:
    request   - FormatRequest (what a validation rule asks to render)
    formatter - ErrorMessageFormatter, MessageFormatter protocol, factory

Python 3.12+.
"""

from validmsg.enums import MsgType
from validmsg.formatting.formatter import (
    ErrorMessageFormatter,
    MessageFormatter,
    create_message_formatter,
)
from validmsg.formatting.request import FormatRequest

__all__ = [
    "ErrorMessageFormatter",
    "FormatRequest",
    "MessageFormatter",
    "MsgType",
    "create_message_formatter",
]
