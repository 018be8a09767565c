import io

import pytest

from errors import HeaderOverflowError, MalformedHeaderError
from huff_canonical import build_length_table
from bitstream import write_table, read_table, write_container, read_container


def _roundtrip_table(table):
    buf = io.BytesIO()
    write_table(buf, table)
    buf.seek(0)
    out = read_table(buf)
    assert buf.read() == b""
    return out


def test_table_layout():
    buf = io.BytesIO()
    write_table(buf, [[65], [67, 66]])
    assert buf.getvalue() == bytes([2, 1, 2, 65, 67, 66])


@pytest.mark.parametrize("table", [
    [[65], [67, 66]],
    [[120]],
    [[1], [], [2, 3, 4, 5]],
    [[], [], [], [], [], [], [], list(range(255))],
])
def test_table_roundtrip(table):
    assert _roundtrip_table(table) == table


def test_table_roundtrip_from_text():
    text = b"the quick brown fox jumps over the lazy dog\n" * 20
    table = build_length_table(text)
    assert _roundtrip_table(table) == table


def test_container_layout():
    buf = io.BytesIO()
    write_container(buf, [[65], [67, 66]], b"\x07\xf4", 1)
    assert buf.getvalue() == bytes([2, 1, 2, 65, 67, 66, 0x07, 0xF4, 1])
    buf.seek(0)
    assert read_container(buf) == ([[65], [67, 66]], b"\x07\xf4", 1)


def test_container_trailer_only():
    table, payload, padding = read_container(io.BytesIO(bytes([1, 1, 65, 0])))
    assert (table, payload, padding) == ([[65]], b"", 0)


def test_write_table_overflow():
    with pytest.raises(HeaderOverflowError):
        write_table(io.BytesIO(), [[]] * 7 + [list(range(256))])
    with pytest.raises(HeaderOverflowError):
        write_table(io.BytesIO(), [[]] * 255 + [[0]])


@pytest.mark.parametrize("raw", [
    b"",                                    # no length count
    bytes([0, 0]),                          # zero length slots
    bytes([2, 1]),                          # counts truncated
    bytes([2, 1, 2, 65]),                   # symbols truncated
    bytes([1, 1, 65]),                      # trailer missing
    bytes([2, 1, 2, 65, 65, 66, 0, 0]),     # duplicate symbol
    bytes([1, 3, 1, 2, 3, 0, 0]),           # Kraft violated
])
def test_malformed_header(raw):
    with pytest.raises(MalformedHeaderError):
        read_container(io.BytesIO(raw))
