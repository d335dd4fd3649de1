"""Enumerations for validmsg type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum


class MsgType(StrEnum):
    """How the ``msg`` of a format request is interpreted.

    StrEnum provides automatic string conversion: str(MsgType.FIELD_NAME) == "fieldName"
    """

    FIELD_NAME = "fieldName"
    """msg is a field label embedded in a localized template: "Email" """

    MESSAGE = "message"
    """msg is the complete, final error string and bypasses localization"""


class PhoneFormat(StrEnum):
    """Canonical output shape for US phone numbers.

    StrEnum provides automatic string conversion: str(PhoneFormat.E164) == "e164"
    """

    E164 = "e164"
    """International form: +1 followed by 10 digits (+11234567890)"""

    NATIONAL = "national"
    """Bare 10-digit form without country code (1234567890)"""


class LoadStatus(StrEnum):
    """Outcome of a single locale load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Locale tree fetched and registered"""

    ALREADY_LOADED = "already_loaded"
    """Locale was registered before the request; nothing fetched"""

    NOT_FOUND = "not_found"
    """Loader has no data for the locale"""

    ERROR = "error"
    """Loader failed or returned an invalid message tree"""


__all__ = [
    "LoadStatus",
    "MsgType",
    "PhoneFormat",
]
