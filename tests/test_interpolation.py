"""Tests for {name} placeholder interpolation."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import literal_text, param_names, templates
from validmsg.localization.interpolation import extract_variables, interpolate


class TestInterpolate:
    """Test placeholder substitution."""

    def test_replaces_all_supplied_params(self) -> None:
        """Every supplied placeholder is replaced with str(value)."""
        result = interpolate(
            "{fieldName} must be at least {min} characters",
            {"fieldName": "Password", "min": 5},
        )
        assert result == "Password must be at least 5 characters"

    def test_missing_param_stays_literal(self) -> None:
        """A placeholder without a supplied value remains verbatim."""
        assert interpolate("between {min} and {max}", {"min": 1}) == "between 1 and {max}"

    def test_none_params_returns_template(self) -> None:
        """No params leaves the template untouched."""
        assert interpolate("{fieldName} is required") == "{fieldName} is required"

    def test_empty_params_returns_template(self) -> None:
        """Empty params leaves the template untouched."""
        assert interpolate("{fieldName} is required", {}) == "{fieldName} is required"

    def test_repeated_placeholder_replaced_everywhere(self) -> None:
        """The same name appearing twice is replaced twice."""
        assert interpolate("{a}-{a}", {"a": "x"}) == "x-x"

    def test_values_are_not_reexpanded(self) -> None:
        """A value containing a placeholder is inserted literally."""
        result = interpolate("{first} {second}", {"first": "{second}", "second": "B"})
        assert result == "{second} B"

    def test_non_string_values_use_str(self) -> None:
        """Values are converted with str()."""
        assert interpolate("{n} {flag} {none}", {"n": 1.5, "flag": True, "none": None}) == (
            "1.5 True None"
        )

    def test_non_word_braces_untouched(self) -> None:
        """Braces around non-word text are not placeholders."""
        assert interpolate("{not a name} {}", {"not a name": "x"}) == "{not a name} {}"

    @given(text=literal_text())
    def test_text_without_placeholders_unchanged(self, text: str) -> None:
        """PROPERTY: templates without placeholders are returned unchanged."""
        assert interpolate(text, {"anything": "value"}) == text

    @given(template=templates())
    def test_all_variables_supplied_removes_placeholders(self, template: str) -> None:
        """PROPERTY: supplying every variable leaves no placeholders behind."""
        params = {name: "v" for name in extract_variables(template)}
        assert extract_variables(interpolate(template, params)) == frozenset()

    @given(name=param_names(), value=st.text(alphabet="abc xyz0123456789", max_size=10))
    def test_single_placeholder(self, name: str, value: str) -> None:
        """PROPERTY: a lone placeholder becomes exactly its value."""
        assert interpolate(f"{{{name}}}", {name: value}) == value


class TestExtractVariables:
    """Test placeholder name extraction."""

    def test_extracts_unique_names(self) -> None:
        """Names are returned once each."""
        assert extract_variables("{fieldName} must be {min}-{max} ({min})") == frozenset(
            {"fieldName", "min", "max"}
        )

    def test_no_placeholders(self) -> None:
        """Plain text has no variables."""
        assert extract_variables("plain text") == frozenset()
