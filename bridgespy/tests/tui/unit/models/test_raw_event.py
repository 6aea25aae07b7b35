"""Unit tests for RawEvent and EventArgs.

Marked with:
- @pytest.mark.unit
- @pytest.mark.fast
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bridgespy.constants.values import UNSERIALIZABLE_ARGS
from bridgespy.models.core import EventArgs, Filter, RawEvent


@pytest.mark.unit
@pytest.mark.fast
class TestEventArgs:
    """Tests for the lazily serialized args wrapper."""

    def test_absent_is_empty(self) -> None:
        """Test that missing args render as an empty string."""
        args = EventArgs.absent()
        assert not args.present
        assert args.text == ""

    def test_present_none_is_null(self) -> None:
        """Test that an explicit None serializes as null."""
        assert EventArgs(None).text == "null"

    def test_compact_text(self) -> None:
        """Test that args serialize without whitespace."""
        assert EventArgs({"a": [1, 2], "b": "x"}).text == '{"a":[1,2],"b":"x"}'

    def test_non_ascii_kept(self) -> None:
        """Test that non-ASCII text is not escaped."""
        assert EventArgs(["héllo"]).text == '["héllo"]'

    def test_unserializable(self) -> None:
        """Test that unserializable values use the sentinel."""
        assert EventArgs({1, 2}).text == UNSERIALIZABLE_ARGS

    def test_equality_by_text(self) -> None:
        """Test that equal JSON forms compare equal."""
        assert EventArgs([1]) == EventArgs([1])
        assert EventArgs([1]) != EventArgs([2])
        assert EventArgs(None) != EventArgs.absent()


@pytest.mark.unit
@pytest.mark.fast
class TestRawEvent:
    """Tests for RawEvent.from_payload."""

    def test_well_formed(self) -> None:
        """Test that a complete record maps field by field."""
        event = RawEvent.from_payload(
            {
                "id": "9",
                "time": 1_700_000_000_000,
                "type": "N->JS",
                "module": "JSTimers",
                "method": "callTimers",
                "args": [[1]],
            }
        )
        assert event.id == "9"
        assert event.time == 1_700_000_000_000
        assert event.type == "N->JS"
        assert event.args.text == "[[1]]"

    def test_empty_mapping_defaults(self) -> None:
        """Test that every field has a safe default."""
        event = RawEvent.from_payload({})
        assert (event.id, event.time, event.type, event.module, event.method) == (
            "",
            0,
            "",
            "",
            "",
        )
        assert not event.args.present

    @pytest.mark.parametrize("value", ["soon", None, float("nan"), float("inf"), [1]])
    def test_bad_time_is_zero(self, value: object) -> None:
        """Test that unusable timestamps become zero."""
        assert RawEvent.from_payload({"time": value}).time == 0

    def test_numeric_string_time(self) -> None:
        """Test that numeric strings are accepted as timestamps."""
        assert RawEvent.from_payload({"time": "1500.7"}).time == 1500

    def test_extras_kept(self) -> None:
        """Test that unknown keys survive as extras."""
        event = RawEvent.from_payload({"id": "1", "thread": "js"})
        assert event.model_extra == {"thread": "js"}

    def test_non_string_keys(self) -> None:
        """Test that non-string mapping keys are tolerated."""
        event = RawEvent.from_payload({1: "x", "id": "2"})
        assert event.id == "2"

    def test_non_mapping_payload(self) -> None:
        """Test that scalars and lists become the args of an empty event."""
        event = RawEvent.from_payload([1, 2])
        assert event.id == ""
        assert event.args.text == "[1,2]"

    def test_frozen(self) -> None:
        """Test that events cannot be modified after creation."""
        event = RawEvent.from_payload({"id": "1"})
        with pytest.raises(ValidationError):
            event.id = "2"

    def test_passthrough(self) -> None:
        """Test that an existing RawEvent is returned as is."""
        event = RawEvent.from_payload({"id": "1"})
        assert RawEvent.from_payload(event) is event


@pytest.mark.unit
@pytest.mark.fast
class TestFilter:
    """Tests for the Filter value object."""

    def test_str(self) -> None:
        """Test the display form of a filter."""
        assert str(Filter("module", "UIManager")) == "module:UIManager"

    def test_hashable(self) -> None:
        """Test that filters compare and hash by value."""
        assert len({Filter("a", "1"), Filter("a", "1")}) == 1
