from typing import Tuple

import numpy as np

from errors import InvalidDataError
from huff_canonical import CodeMap

class BitReader:
    def __init__(self, data: bytes, padding: int = 0):
        # trailing padding bits are cut off here, never seen by the decoder
        self.bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8), count=-padding or None).tolist()
        self.pos = 0

    def remaining(self) -> int:
        return len(self.bits) - self.pos

    def read_bit(self) -> int:
        if self.pos >= len(self.bits):
            raise InvalidDataError("Unexpected end of bitstream")
        b = self.bits[self.pos]
        self.pos += 1
        return b

def pack_payload(data: bytes, codes: CodeMap) -> Tuple[bytes, int]:
    """
    Concatenate the codeword of every input byte and pack MSB-first.
    Returns (payload_bytes, padding) with padding in 0..7; an exact multiple
    of 8 bits gives padding 0 and no extra byte.
    """
    table = [codes.encode.get(s, "") for s in range(256)]
    bitstr = "".join([table[b] for b in data])
    bits = np.frombuffer(bitstr.encode("ascii"), dtype=np.uint8) - ord("0")
    padding = (-bits.size) % 8
    return np.packbits(bits).tobytes(), padding

def decode_one_symbol(codes: CodeMap, br: BitReader) -> int:
    """Grow a prefix bit by bit until it names a codeword (prefix-free: at most one can)."""
    prefix = ""
    for _ in range(codes.max_length):
        if br.remaining() == 0:
            raise InvalidDataError(f"Invalid data: bitstream ends mid-codeword after '{prefix}'")
        prefix += "1" if br.read_bit() else "0"
        sym = codes.decode.get(prefix)
        if sym is not None:
            return sym
    raise InvalidDataError(f"Invalid data: no codeword matches '{prefix}'")

def unpack_payload(payload: bytes, codes: CodeMap, padding: int) -> bytes:
    if not payload:
        raise InvalidDataError("Invalid data: empty payload")
    if not 0 <= padding <= 7:
        raise InvalidDataError(f"Invalid data: padding count {padding} out of range (0..7)")
    br = BitReader(payload, padding)
    out = bytearray()
    while br.remaining():
        out.append(decode_one_symbol(codes, br))
    return bytes(out)
