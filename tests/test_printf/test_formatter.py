"""Tests for the printf-to-string formatter."""

import pytest

from corestr.config import StringsConfig
from corestr.errors import FormatEncodingError
from corestr.printf import (
    TextBuffer,
    append_into,
    append_printf,
    format_into,
    render_with_retry,
    sprintf,
    string_printf,
)


class TestFormatInto:
    def test_returns_length_of_output(self, buffer):
        length = format_into(buffer, "%s has %d items", ["cart", 3])
        assert str(buffer) == "cart has 3 items"
        assert length == len("cart has 3 items")
        assert len(buffer) == length

    def test_is_deterministic(self, buffer):
        other = TextBuffer()
        first = format_into(buffer, "%08.3f|%-4s|%x", [2.5, "ab", 3054])
        second = format_into(other, "%08.3f|%-4s|%x", [2.5, "ab", 3054])
        assert first == second
        assert buffer == other

    def test_discards_previous_content(self, prefilled_buffer):
        format_into(prefilled_buffer, "fresh")
        assert str(prefilled_buffer) == "fresh"

    def test_empty_result(self, prefilled_buffer):
        assert format_into(prefilled_buffer, "%s", [""]) == 0
        assert str(prefilled_buffer) == ""
        assert len(prefilled_buffer) == 0

    def test_empty_template(self, buffer):
        assert format_into(buffer, "") == 0
        assert str(buffer) == ""

    def test_output_longer_than_guess(self, buffer):
        payload = "x" * 10_000
        length = format_into(buffer, "%s!!", [payload])
        assert length == 10_002
        assert str(buffer) == payload + "!!"

    def test_guess_factor_from_config(self, buffer):
        config = StringsConfig(guess_factor=1)
        assert format_into(buffer, "%d", [123456], config=config) == 6
        assert str(buffer) == "123456"

    def test_encoding_error_is_fatal(self, buffer):
        with pytest.raises(FormatEncodingError) as excinfo:
            format_into(buffer, "%d and %d", [1])
        assert isinstance(excinfo.value, AssertionError)
        assert excinfo.value.template == "%d and %d"
        assert "missing" in excinfo.value.reason


class TestAppendInto:
    def test_append_twice(self, prefilled_buffer):
        assert append_into(prefilled_buffer, "a") == 1
        assert append_into(prefilled_buffer, "b") == 1
        assert str(prefilled_buffer) == "log: ab"

    def test_returns_appended_length_only(self, prefilled_buffer):
        length = append_into(prefilled_buffer, "%d%%", [75])
        assert length == 3
        assert len(prefilled_buffer) == len("log: 75%")

    def test_append_nothing(self, prefilled_buffer):
        assert append_into(prefilled_buffer, "") == 0
        assert str(prefilled_buffer) == "log: "

    def test_error_leaves_buffer_unchanged(self, prefilled_buffer):
        with pytest.raises(FormatEncodingError):
            append_into(prefilled_buffer, "%s", [object()])
        assert str(prefilled_buffer) == "log: "


class TestRetryLoop:
    def test_short_output_renders_once(self):
        outcome = render_with_retry("%d", [7])
        assert outcome.attempts == 1
        assert outcome.capacity == 4
        assert outcome.text == "7"

    def test_undershoot_grows_to_required_size(self):
        outcome = render_with_retry("%s!!", ["x" * 10_000])
        assert outcome.attempts == 2
        assert outcome.capacity == 10_002
        assert outcome.length == 10_002

    def test_growth_is_at_least_one(self):
        outcome = render_with_retry("%d", [123456], guess_factor=1)
        assert outcome.attempts == 2
        assert outcome.capacity == 6

    def test_empty_template_needs_no_room(self):
        outcome = render_with_retry("")
        assert outcome.attempts == 1
        assert outcome.capacity == 0
        assert outcome.length == 0

    def test_error_on_first_attempt(self):
        with pytest.raises(FormatEncodingError, match="expects an int"):
            render_with_retry("%d", ["seven"])


class TestConvenienceWrappers:
    def test_string_printf(self, buffer):
        assert string_printf(buffer, "%s=%d", "x", 1) == 3
        assert str(buffer) == "x=1"

    def test_append_printf(self, prefilled_buffer):
        assert append_printf(prefilled_buffer, "[%c]", "!") == 3
        assert str(prefilled_buffer) == "log: [!]"

    def test_sprintf(self):
        assert sprintf("%05.1f", 9.87) == "009.9"


class TestTextBuffer:
    def test_initial_content(self):
        buf = TextBuffer("abc")
        assert str(buf) == "abc"
        assert len(buf) == 3
        assert buf.capacity >= 3

    def test_capacity_grows_and_survives_clear(self):
        buf = TextBuffer(capacity=4)
        buf.append("abcdef")
        assert buf.capacity == 8
        buf.clear()
        assert len(buf) == 0
        assert buf.capacity == 8

    def test_large_append_jumps_to_needed_size(self):
        buf = TextBuffer(capacity=2)
        buf.append("x" * 100)
        assert buf.capacity == 100

    def test_assign_replaces(self):
        buf = TextBuffer("old")
        buf.assign("new")
        assert buf == "new"

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(TextBuffer())
