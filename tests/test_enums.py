"""Tests for validmsg enums."""

from __future__ import annotations

import pytest

from validmsg.enums import LoadStatus, MsgType, PhoneFormat


class TestStrEnums:
    """Enum members are their wire strings."""

    @pytest.mark.parametrize(
        ("member", "value"),
        [
            (MsgType.FIELD_NAME, "fieldName"),
            (MsgType.MESSAGE, "message"),
            (PhoneFormat.E164, "e164"),
            (PhoneFormat.NATIONAL, "national"),
            (LoadStatus.ALREADY_LOADED, "already_loaded"),
        ],
    )
    def test_values(self, member: str, value: str) -> None:
        """str() and equality use the value."""
        assert str(member) == value
        assert member == value

    def test_lookup_by_value(self) -> None:
        """Members can be looked up from plain strings."""
        assert MsgType("message") is MsgType.MESSAGE
        with pytest.raises(ValueError):
            MsgType("MESSAGE")
