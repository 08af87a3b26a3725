"""End-to-end: build a record log in a growing store, then parse it back."""

from __future__ import annotations

import ctypes

from bufmt import fmt
from bufmt.convert import Ref
from bufmt.core.types import NPOS
from bufmt.engines import (
    concatenate,
    concatenate_separated,
    format_substitute,
    parse_formatted,
    parse_separated,
)
from bufmt.growth import ByteStore, convert_append, convert_overwrite


class Header(ctypes.Structure):
    _fields_ = [("magic", ctypes.c_uint32), ("count", ctypes.c_uint16)]


def test_records_round_trip_through_store() -> None:
    rows = [("alpha", 1, 0.25), ("beta", 22, 1.5), ("gamma", 333, -2.0)]
    store = ByteStore()
    for name, count, ratio in rows:
        convert_append(store, format_substitute, "{} {} {};", name, count, ratio)
    assert bytes(store) == b"alpha 1 0.25;beta 22 1.5;gamma 333 -2.0;"

    data = bytes(store)
    offset = 0
    parsed = []
    for _ in rows:
        name, count, ratio = Ref(str), Ref(int), Ref(float)
        consumed = parse_formatted(data[offset:], "{} {} {}", name, count, ratio)
        assert consumed != NPOS
        parsed.append((name.value, count.value, ratio.value))
        offset += consumed + 1
    assert parsed == rows


def test_overwrite_then_append_mixed_engines() -> None:
    store = ByteStore(b"stale contents")
    convert_overwrite(store, concatenate_separated, ",", fmt.hex(255), fmt.bin(5), fmt.boolean(True))
    convert_append(store, concatenate, "|", fmt.real(1.0, 2, fmt.RealFormat.FIXED))
    assert bytes(store) == b"0xff,0b101,true|1.00"

    values = [fmt.hex(), fmt.bin(), fmt.boolean()]
    assert parse_separated(bytes(store), ",", *values) == 15
    assert [v.value for v in values] == [255, 5, True]


def test_binary_header_after_text_prefix() -> None:
    header = Header(0xCAFE, 7)
    alignment = ctypes.alignment(Header)
    store = ByteStore()
    convert_overwrite(store, concatenate, "HDR", fmt.raw(header))
    data = bytes(store)
    pad = -3 % alignment
    assert data[:3] == b"HDR"
    assert data[3 : 3 + pad] == bytes(pad)
    assert data[3 + pad :] == bytes(header)

    restored = Header()
    assert parse_formatted(data, "HDR{}", fmt.raw(restored)) == len(data)
    assert (restored.magic, restored.count) == (0xCAFE, 7)
