import struct
from typing import Tuple

from errors import HeaderOverflowError, MalformedHeaderError
from huff_canonical import LengthTable

# .omz container (all fields unsigned bytes):
# nlen(1)                      number of length slots = longest code length
# count[nlen]                  symbols per code length 1..nlen
# symbols[sum(count)]          grouped by length, in discovery order
# payload[...]                 packed codewords, MSB-first
# padding(1)                   zero bits appended to the last payload byte
SUFFIX = ".omz"
DEC_SUFFIX = ".dec"

def write_table(f, table: LengthTable):
    if not (1 <= len(table) <= 255):
        raise HeaderOverflowError(f"{len(table)} length slots do not fit in one byte")
    counts = [len(group) for group in table]
    for L, n in enumerate(counts, start=1):
        if n > 255:
            raise HeaderOverflowError(f"{n} symbols of length {L} do not fit in one byte")
    f.write(struct.pack("<B", len(table)))
    f.write(struct.pack(f"<{len(counts)}B", *counts))
    for group in table:
        f.write(bytes(group))

def _read_exact(f, n: int, what: str) -> bytes:
    data = f.read(n)
    if len(data) != n:
        raise MalformedHeaderError(f"Malformed stream: {what} truncated ({len(data)}/{n} bytes)")
    return data

def read_table(f) -> LengthTable:
    (nlen,) = struct.unpack("<B", _read_exact(f, 1, "length count"))
    if nlen == 0:
        raise MalformedHeaderError("Malformed stream: zero code lengths")
    counts = struct.unpack(f"<{nlen}B", _read_exact(f, nlen, "per-length counts"))
    syms = _read_exact(f, sum(counts), "symbol list")

    table: LengthTable = []
    pos = 0
    for n in counts:
        table.append(list(syms[pos:pos + n]))
        pos += n
    if len(set(syms)) != len(syms):
        raise MalformedHeaderError("Malformed stream: symbol listed twice")
    # Kraft: sum(count_L * 2^-L) <= 1, scaled by 2^nlen
    if sum(n << (nlen - L) for L, n in enumerate(counts, start=1)) > (1 << nlen):
        raise MalformedHeaderError("Malformed stream: code lengths violate Kraft's inequality")
    return table

def write_container(f, table: LengthTable, payload: bytes, padding: int):
    write_table(f, table)
    f.write(payload)
    f.write(struct.pack("<B", padding))

def read_container(f) -> Tuple[LengthTable, bytes, int]:
    table = read_table(f)
    rest = f.read()
    if len(rest) == 0:
        raise MalformedHeaderError("Malformed stream: padding byte missing")
    return table, rest[:-1], rest[-1]
