"""Error message formatter used by validation rules.

Turns a FormatRequest into the user-facing error string. Stateless apart
from the injected LocaleRegistry; the registry's current locale (or the
request's locale override) decides the language.

Python 3.12+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from validmsg.constants import FALLBACK_INVALID_FIELD, FIELD_NAME_PARAM
from validmsg.diagnostics import InvalidRequestError
from validmsg.enums import MsgType
from validmsg.formatting.request import FormatRequest, invalid_msg_type
from validmsg.localization.interpolation import interpolate

if TYPE_CHECKING:
    from validmsg.localization.registry import LocaleRegistry
    from validmsg.localization.types import LocaleCode

__all__ = [
    "ErrorMessageFormatter",
    "MessageFormatter",
    "create_message_formatter",
]

logger = logging.getLogger(__name__)


class MessageFormatter(Protocol):
    """Interface validation rules depend on for rendering errors.

    Lets schema code accept a stub in tests instead of a real registry.
    """

    def format_error_message(self, request: FormatRequest) -> str:
        """Render the error message for a request."""
        ...


class ErrorMessageFormatter:
    """Render validation errors from localized templates.

    Two modes, chosen by ``request.msg_type``:

    - MESSAGE: ``request.msg`` is the final text and is returned unchanged.
      Group, key and params are ignored and nothing is looked up.
    - FIELD_NAME: ``request.msg`` is a field label. The template
      ``<group>.<message_key>`` is resolved (target locale, then fallback)
      and interpolated with ``request.params`` plus ``fieldName=msg``.
      When no locale defines the template, the generic
      ``"{fieldName} is invalid"`` is rendered instead.

    Example:
        >>> formatter = ErrorMessageFormatter(registry)
        >>> formatter.format_error_message(
        ...     FormatRequest("string", "tooShort", "Password", MsgType.FIELD_NAME, {"min": 8})
        ... )
        'Password must be at least 8 characters'
        >>> formatter.format("string", "tooShort", "Custom text", MsgType.MESSAGE)
        'Custom text'
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: LocaleRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> LocaleRegistry:
        """Registry templates are resolved from."""
        return self._registry

    def format_error_message(self, request: FormatRequest) -> str:
        """Render the error message for a request.

        Args:
            request: What to render

        Returns:
            User-facing error message

        Raises:
            InvalidRequestError: If request.msg_type is not a MsgType
        """
        match request.msg_type:
            case MsgType.MESSAGE:
                return request.msg
            case MsgType.FIELD_NAME:
                return self._format_field(request)
            case _:
                raise InvalidRequestError(invalid_msg_type(request.msg_type))

    def _format_field(self, request: FormatRequest) -> str:
        key = f"{request.group}.{request.message_key}"
        # msg always wins over a caller-supplied fieldName param.
        params = {**(request.params or {}), FIELD_NAME_PARAM: request.msg}

        template = self._registry.find_template(key, request.locale)
        if template is None:
            logger.debug("No template for '%s'; using generic invalid-field message", key)
            return interpolate(FALLBACK_INVALID_FIELD, params)
        return template.render(params)

    def format(
        self,
        group: str,
        message_key: str,
        msg: str,
        msg_type: MsgType = MsgType.FIELD_NAME,
        *,
        locale: LocaleCode | None = None,
        **params: object,
    ) -> str:
        """Keyword shorthand for format_error_message().

        Example:
            >>> formatter.format("string", "tooShort", "Password", min=8)
            'Password must be at least 8 characters'
        """
        request = FormatRequest(
            group=group,
            message_key=message_key,
            msg=msg,
            msg_type=msg_type,
            params=params,
            locale=locale,
        )
        return self.format_error_message(request)

    def __repr__(self) -> str:
        return f"ErrorMessageFormatter(registry={self._registry!r})"


def create_message_formatter(registry: LocaleRegistry) -> MessageFormatter:
    """Create the formatter validation rules receive.

    Args:
        registry: Registry to resolve templates from

    Returns:
        MessageFormatter bound to the registry
    """
    return ErrorMessageFormatter(registry)
