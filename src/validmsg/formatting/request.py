"""Format request passed from validation rules to the error formatter.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from validmsg.diagnostics import Diagnostic, DiagnosticCode, InvalidRequestError
from validmsg.enums import MsgType
from validmsg.localization.types import LocaleCode, MessageParams

__all__ = ["FormatRequest"]


@dataclass(frozen=True, slots=True)
class FormatRequest:
    """One request to render a validation error message.

    Attributes:
        group: Validation domain (e.g., 'string', 'phone')
        message_key: Key within the group (e.g., 'tooShort')
        msg: Field label (FIELD_NAME) or complete final message (MESSAGE)
        msg_type: How msg is interpreted; plain strings equal to a MsgType
                  value are accepted and converted
        params: Extra interpolation parameters (optional)
        locale: Target locale; None means the registry's current locale

    Example:
        >>> request = FormatRequest("string", "tooShort", "Password", MsgType.FIELD_NAME, {"min": 8})
        >>> request.key
        'string.tooShort'
    """

    group: str
    message_key: str
    msg: str
    msg_type: MsgType = MsgType.FIELD_NAME
    params: MessageParams | None = None
    locale: LocaleCode | None = None

    def __post_init__(self) -> None:
        """Coerce msg_type and check params.

        Raises:
            InvalidRequestError: If msg_type is not a MsgType value, or if a
                FIELD_NAME request has params that are neither None nor a
                mapping. MESSAGE requests never read params.
        """
        if not isinstance(self.msg_type, MsgType):
            try:
                coerced = MsgType(self.msg_type)
            except (TypeError, ValueError):
                raise InvalidRequestError(invalid_msg_type(self.msg_type)) from None
            object.__setattr__(self, "msg_type", coerced)

        if (
            self.msg_type is MsgType.FIELD_NAME
            and self.params is not None
            and not isinstance(self.params, Mapping)
        ):
            diagnostic = Diagnostic(
                code=DiagnosticCode.REQUEST_INVALID_PARAMS,
                message=(
                    "Invalid params type: expected Mapping or None, "
                    f"got {type(self.params).__name__}"
                ),
                key=f"{self.group}.{self.message_key}",
            )
            raise InvalidRequestError(diagnostic)

    @property
    def key(self) -> str:
        """Dotted lookup key: '<group>.<message_key>'."""
        return f"{self.group}.{self.message_key}"


def invalid_msg_type(msg_type: object) -> Diagnostic:
    """Build the diagnostic for an unknown msg_type."""
    allowed = ", ".join(repr(member.value) for member in MsgType)
    return Diagnostic(
        code=DiagnosticCode.REQUEST_INVALID_MSG_TYPE,
        message=f"Invalid msg_type {msg_type!r}",
        hint=f"Use MsgType.FIELD_NAME or MsgType.MESSAGE (values: {allowed})",
    )
