"""Unit tests for the Substr / CSubstr buffer views."""

from __future__ import annotations

from array import array

import pytest

from bufmt.buffers import CSubstr, Substr, to_csubstr, to_substr
from bufmt.core.types import NPOS
from bufmt.exceptions import PreconditionError


class TestSubstr:
    def test_wide_memoryview_storage_counts_bytes(self):
        words = array("H", [0, 0])
        buf = Substr(memoryview(words))
        assert len(buf) == 4
        assert buf.put(b"abcdef") == 6
        assert words.tobytes() == b"abcd"

    def test_put_clips_to_view(self):
        storage = bytearray(3)
        buf = Substr(storage)
        assert buf.put(b"hello") == 5
        assert storage == b"hel"

    def test_put_respects_view_end_inside_larger_storage(self):
        storage = bytearray(b"........")
        buf = Substr(storage, 2, 3)
        assert buf.put(b"abcdef") == 6
        assert storage == b"..abc..."

    def test_advance_within_view(self):
        buf = Substr(bytearray(10), 0, 10).advance(4)
        assert buf.start == 4
        assert len(buf) == 6

    def test_advance_past_end_is_anchored_and_empty(self):
        storage = bytearray(b"abcd")
        rest = Substr(storage).advance(6)
        assert len(rest) == 0
        assert rest.start == 6
        assert rest.put(b"xy") == 2
        assert storage == b"abcd"

    def test_first_and_sub(self):
        buf = Substr(bytearray(b"abcdef"))
        assert buf.first(2).tobytes() == b"ab"
        assert buf.sub(2, 3).tobytes() == b"cde"

    def test_sub_out_of_range(self):
        with pytest.raises(PreconditionError):
            Substr(bytearray(4)).sub(5)

    def test_view_beyond_storage_rejected(self):
        with pytest.raises(PreconditionError):
            Substr(bytearray(4), 2, 5)

    def test_readonly_memoryview_rejected(self):
        with pytest.raises(PreconditionError):
            Substr(memoryview(b"abc"))

    def test_writable_memoryview_accepted(self):
        storage = bytearray(4)
        Substr(memoryview(storage)).put(b"ab")
        assert storage == b"ab\x00\x00"


class TestCSubstr:
    def test_wide_memoryview_counts_bytes(self):
        words = array("H", [0x6261, 0x6463])
        view = CSubstr(memoryview(words))
        assert len(view) == 4
        assert view == words.tobytes()

    def test_str_is_utf8_encoded(self):
        view = CSubstr("héllo")
        assert len(view) == 6
        assert view.decode() == "héllo"

    def test_find(self):
        view = CSubstr(b"a {} b {}")
        assert view.find(b"{}") == 2
        assert view.advance(4).find(b"{}") == 3
        assert view.find(b"<>") == NPOS

    def test_find_in_empty_view(self):
        assert CSubstr(b"").find(b"{}") == NPOS

    def test_startswith_and_peek(self):
        view = CSubstr(b"true story")
        assert view.startswith(b"true")
        assert not view.startswith(b"true story and more")
        assert view.peek(4) == b"true"
        assert view.peek(100) == b"true story"

    def test_equality(self):
        assert CSubstr(b"abc") == "abc"
        assert CSubstr(b"xabc").advance(1) == b"abc"


class TestCoercion:
    def test_to_substr_from_bytearray(self):
        assert isinstance(to_substr(bytearray(2)), Substr)

    def test_to_substr_rejects_bytes(self):
        with pytest.raises(PreconditionError):
            to_substr(b"immutable")  # type: ignore[arg-type]

    def test_to_csubstr_from_substr(self):
        view = to_csubstr(Substr(bytearray(b"xy")))
        assert isinstance(view, CSubstr)
        assert view == b"xy"

    def test_to_csubstr_rejects_other_types(self):
        with pytest.raises(PreconditionError):
            to_csubstr(42)  # type: ignore[arg-type]
