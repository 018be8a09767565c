import io
from dataclasses import dataclass
from typing import List

from errors import UncompressibleError
from huff_canonical import (
    MAX_CODE_LENGTH, LengthTable, CodeMap,
    byte_frequencies, build_tree, derive_length_table, assign_codes, code_lengths,
)
from bitpack import pack_payload, unpack_payload
from bitstream import write_container, read_container

POLICIES = ("equal-length", "no-savings", "off")

@dataclass
class CodecConfig:
    verbose: bool = False
    policy: str = "equal-length"
    min_savings: int = 1         # bytes, only for policy "no-savings"
    max_code_length: int = MAX_CODE_LENGTH

    def __post_init__(self):
        if self.policy not in POLICIES:
            raise ValueError(f"Unknown uncompressible policy: {self.policy!r} (expected one of {POLICIES})")
        if not (1 <= self.max_code_length <= MAX_CODE_LENGTH):
            raise ValueError(f"max_code_length must be in 1..{MAX_CODE_LENGTH}")

def _sym_name(sym: int) -> str:
    if sym == 0x20:
        return "SPACE"
    if sym == 0x0A:
        return "NEWLINE"
    if 0x21 <= sym <= 0x7E:
        return chr(sym)
    return f"0x{sym:02X}"

def format_listing(table: LengthTable, codes: CodeMap) -> List[str]:
    lines = []
    for L, group in enumerate(table, start=1):
        lines.append(f"LEN ({L}) : " + " ".join(_sym_name(s) for s in group))
    for sym in sorted(codes.encode):
        lines.append(f"{_sym_name(sym)} : {codes.encode[sym]}")
    return lines

def container_size(freqs, table: LengthTable) -> int:
    lengths = code_lengths(table)
    nbits = sum(freqs[s] * lengths[s] for s in freqs)
    return 1 + len(table) + len(lengths) + (nbits + 7) // 8 + 1

def check_compressible(freqs, table: LengthTable, config: CodecConfig):
    if config.policy == "equal-length":
        # every byte value would keep its 8-bit width
        if len(table) >= 8 and len(table[7]) == 256:
            raise UncompressibleError("Cannot compress further: all characters have same length codes")
    elif config.policy == "no-savings":
        n_in = sum(freqs.values())
        n_out = container_size(freqs, table)
        if n_in - n_out < config.min_savings:
            raise UncompressibleError(
                f"Cannot compress further: {n_in}B -> {n_out}B saves less than {config.min_savings}B")

def encode(data: bytes, config: CodecConfig = None):
    """
    Returns:
      container: bytes in .omz layout
      meta: dict with freqs, table, payload_bytes, padding, input_bytes,
            container_bytes, and listing (list of lines) when config.verbose
    """
    config = config or CodecConfig()
    data = bytes(data)
    freqs = byte_frequencies(data)
    tree = build_tree(freqs)
    table = derive_length_table(tree, config.max_code_length)
    check_compressible(freqs, table, config)

    codes = assign_codes(table)
    payload, padding = pack_payload(data, codes)

    buf = io.BytesIO()
    write_container(buf, table, payload, padding)
    container = buf.getvalue()

    meta = dict(freqs=freqs, table=table, payload_bytes=len(payload), padding=padding,
                input_bytes=len(data), container_bytes=len(container))
    if config.verbose:
        meta["listing"] = format_listing(table, codes)
    return container, meta

def decode(container: bytes, config: CodecConfig = None):
    config = config or CodecConfig()
    table, payload, padding = read_container(io.BytesIO(bytes(container)))
    codes = assign_codes(table)
    data = unpack_payload(payload, codes, padding)

    meta = dict(table=table, payload_bytes=len(payload), padding=padding,
                input_bytes=len(container), output_bytes=len(data))
    if config.verbose:
        meta["listing"] = format_listing(table, codes)
    return data, meta

def compress(data: bytes, config: CodecConfig = None) -> bytes:
    return encode(data, config)[0]

def decompress(container: bytes, config: CodecConfig = None) -> bytes:
    return decode(container, config)[0]
