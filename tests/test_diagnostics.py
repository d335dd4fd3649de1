"""Tests for diagnostics and the exception hierarchy."""

from __future__ import annotations

import pytest

from validmsg.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    InvalidMessageTreeError,
    InvalidRequestError,
    LocaleLoadError,
    LocaleNotFoundError,
    ValidMsgError,
)


class TestDiagnostic:
    """Test Diagnostic formatting."""

    def test_str_is_message(self) -> None:
        """str() returns the bare message."""
        diagnostic = Diagnostic(DiagnosticCode.LOCALE_NOT_FOUND, "Locale 'xx' not found")
        assert str(diagnostic) == "Locale 'xx' not found"

    def test_format_error_full(self) -> None:
        """All optional fields are rendered in order."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.MESSAGE_TREE_INVALID,
            message="Leaf must be a string",
            hint="Quote the value",
            locale="en",
            key="string.tooShort",
        )
        assert diagnostic.format_error() == (
            "error[MESSAGE_TREE_INVALID]: Leaf must be a string\n"
            "  = locale: en\n"
            "  = key: string.tooShort\n"
            "  = help: Quote the value"
        )

    def test_format_error_minimal(self) -> None:
        """Absent fields are omitted."""
        diagnostic = Diagnostic(
            DiagnosticCode.LOCALE_BATCH_LOAD_FAILED, "2 locales failed", severity="warning"
        )
        assert diagnostic.format_error() == "warning[LOCALE_BATCH_LOAD_FAILED]: 2 locales failed"

    def test_control_characters_escaped(self) -> None:
        """Newlines in untrusted values cannot add fake diagnostic lines."""
        diagnostic = Diagnostic(
            DiagnosticCode.LOCALE_NOT_FOUND, "Locale not found", locale="en\n  = help: lies"
        )
        assert diagnostic.format_error().count("\n") == 1
        assert "en\\n" in diagnostic.format_error()

    def test_codes_unique(self) -> None:
        """Every code has a distinct number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestExceptionHierarchy:
    """Test exception types and attributes."""

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = ValidMsgError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A Diagnostic message is formatted and kept."""
        diagnostic = Diagnostic(DiagnosticCode.LOADER_NOT_CONFIGURED, "No loader")
        error = ValidMsgError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == "error[LOADER_NOT_CONFIGURED]: No loader"

    def test_locale_not_found(self) -> None:
        """LocaleNotFoundError is a LookupError with a default diagnostic."""
        error = LocaleNotFoundError("xx")
        assert isinstance(error, LookupError)
        assert isinstance(error, ValidMsgError)
        assert error.locale == "xx"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.LOCALE_NOT_FOUND
        assert error.diagnostic.locale == "xx"

    def test_locale_load_error_attributes(self) -> None:
        """LocaleLoadError carries failure details."""
        error = LocaleLoadError("failed", failed_locales=("fr",), locale="fr")
        assert error.failed_locales == ("fr",)
        assert error.locale == "fr"
        assert error.summary is None
        assert not isinstance(error, LookupError)

    def test_invalid_tree(self) -> None:
        """InvalidMessageTreeError is a ValueError naming the path."""
        error = InvalidMessageTreeError("bad leaf", locale="en", path="a.b")
        assert isinstance(error, ValueError)
        assert error.path == "a.b"
        assert error.diagnostic is not None
        assert error.diagnostic.key == "a.b"

    def test_invalid_tree_root(self) -> None:
        """An empty path means the root."""
        error = InvalidMessageTreeError("not a mapping", locale="en")
        assert error.diagnostic is not None
        assert error.diagnostic.key is None

    def test_invalid_request(self) -> None:
        """InvalidRequestError is a TypeError."""
        with pytest.raises(TypeError):
            raise InvalidRequestError("bad request")
