"""Unit tests for the format substitution engine."""

from __future__ import annotations

import pytest

from bufmt import fmt
from bufmt.convert import Ref
from bufmt.core.config import reset_settings
from bufmt.core.types import NPOS
from bufmt.engines import format_substitute, format_substitute_view, parse_formatted
from bufmt.exceptions import PreconditionError

TEMPLATE = "the {} drank {} {}"


class TestFormatSubstitute:
    def test_substitutes_in_order(self):
        buf = bytearray(64)
        size = format_substitute(buf, TEMPLATE, "partier", 5, "beers")
        assert size == 25
        assert buf[:size] == b"the partier drank 5 beers"

    def test_missing_argument_leaves_placeholder_literal(self):
        buf = bytearray(64)
        size = format_substitute(buf, TEMPLATE, "partier", 5)
        assert buf[:size] == b"the partier drank 5 {}"

    def test_extra_arguments_are_ignored(self):
        buf = bytearray(8)
        assert format_substitute(buf, "x={}", 1, 2, 3) == 3
        assert buf[:3] == b"x=1"

    def test_template_without_placeholders(self):
        buf = bytearray(8)
        assert format_substitute(buf, "plain", 1, 2) == 5
        assert buf[:5] == b"plain"

    def test_no_arguments_copies_template(self):
        buf = bytearray(8)
        assert format_substitute(buf, "{} {}") == 5
        assert buf[:5] == b"{} {}"

    def test_adjacent_placeholders(self):
        view = format_substitute_view(bytearray(16), "{}{}{}", 1, fmt.boolean(False), "z")
        assert view.tobytes() == b"1falsez"

    def test_exact_size_for_every_buffer_length(self, guarded):
        expected = b"the programmer drank 6 coffees"
        for length in range(len(expected) + 3):
            storage, buf = guarded(length)
            assert format_substitute(buf, TEMPLATE, "programmer", 6, "coffees") == len(expected)
            assert storage[length:] == b"####"
            assert storage[: min(length, len(expected))] == expected[:length]

    def test_custom_placeholder(self):
        buf = bytearray(8)
        size = format_substitute(buf, "a<>b{}", 1, placeholder="<>")
        assert buf[:size] == b"a1b{}"

    def test_placeholder_from_settings(self, monkeypatch):
        monkeypatch.setenv("BUFMT_FORMAT_PLACEHOLDER", "%%")
        reset_settings()
        buf = bytearray(8)
        size = format_substitute(buf, "a%%b", 7)
        assert buf[:size] == b"a7b"

    @pytest.mark.parametrize("token", ["{", "{{}", ""])
    def test_placeholder_must_be_two_characters(self, token):
        with pytest.raises(PreconditionError, match="two characters"):
            format_substitute(bytearray(8), "x", 1, placeholder=token)


class TestParseFormatted:
    def test_round_trip(self):
        who, count, what = Ref(str), Ref(int), Ref(str)
        consumed = parse_formatted(b"the partier drank 5 beers", TEMPLATE, who, count, what)
        assert consumed == 25
        assert (who.value, count.value, what.value) == ("partier", 5, "beers")

    def test_literal_spans_are_not_compared(self):
        value = Ref(int)
        assert parse_formatted(b"XXXX12", "abc {}", value) == 6
        assert value.value == 12

    def test_trailing_literal_is_not_counted(self):
        value = Ref(int)
        assert parse_formatted(b"v=5;", "v={};", value) == 3
        assert value.value == 5

    def test_failure_short_circuits(self):
        a, b, c = Ref(int), Ref(int, 0), Ref(int, 99)
        assert parse_formatted(b"a=1 b=x c=3", "a={} b={} c={}", a, b, c) == NPOS
        assert a.value == 1
        assert b.value == 0
        assert c.value == 99

    def test_more_targets_than_placeholders(self):
        first, second = Ref(int), Ref(int, -1)
        assert parse_formatted(b"v=5", "v={}", first, second) == 3
        assert first.value == 5
        assert second.value == -1

    def test_input_shorter_than_literal(self):
        assert parse_formatted(b"ab", "abcdef{}", Ref(int)) == NPOS

    def test_wrappers_as_targets(self):
        address, ratio = fmt.hex(), fmt.real()
        assert parse_formatted("at 0x1f ratio 0.5", "at {} ratio {}", address, ratio) == 17
        assert (address.value, ratio.value) == (31, 0.5)
