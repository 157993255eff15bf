"""Tests for dex_common.enums: all enum values must match DB CHECK constraints."""

import pytest

from src.dex_common.enums import MakerEventType, Side, parse_enum
from src.dex_common.errors import InvalidInputError


class TestAllEnumsAreStr:
    def test_side_is_str(self) -> None:
        assert isinstance(Side.BUY, str)
        assert Side.BUY == "BUY"

    def test_maker_event_type_is_str(self) -> None:
        assert isinstance(MakerEventType.PLACE, str)
        assert MakerEventType.PLACE == "PLACE"


class TestClosedSets:
    def test_side_values(self) -> None:
        assert {s.value for s in Side} == {"BUY", "SELL"}

    def test_maker_event_type_values(self) -> None:
        assert {t.value for t in MakerEventType} == {"PLACE", "FILL", "CANCEL", "EVICT"}


class TestParseEnum:
    def test_member_passes_through(self) -> None:
        assert parse_enum(Side, Side.SELL) is Side.SELL

    def test_exact_value(self) -> None:
        assert parse_enum(MakerEventType, "EVICT") is MakerEventType.EVICT

    @pytest.mark.parametrize("value", ["buy", "Buy", "", "HOLD", None, 0, True])
    def test_unknown_values_rejected(self, value: object) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_enum(Side, value)
        assert "BUY, SELL" in exc_info.value.message

    def test_member_of_other_enum_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_enum(Side, MakerEventType.FILL)
