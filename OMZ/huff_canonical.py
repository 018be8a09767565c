from __future__ import annotations
import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from errors import EmptyInputError, CodeTooLongError, MalformedHeaderError

MAX_CODE_LENGTH = 255  # one header byte per length slot

FrequencyTable = Dict[int, int]
LengthTable = List[List[int]]  # table[L-1] -> symbols of code length L

@dataclass
class _Node:
    freq: int
    sym: Optional[int] = None
    left: Optional[int] = None   # arena index
    right: Optional[int] = None  # arena index

@dataclass
class HuffmanTree:
    nodes: List[_Node]
    root: int

@dataclass
class CodeMap:
    encode: Dict[int, str] = field(default_factory=dict)  # symbol -> "0101"
    decode: Dict[str, int] = field(default_factory=dict)  # "0101" -> symbol
    max_length: int = 0

def byte_frequencies(data) -> FrequencyTable:
    buf = np.frombuffer(bytes(data), dtype=np.uint8)
    if buf.size == 0:
        raise EmptyInputError("Empty input: nothing to compress")
    counts = np.bincount(buf, minlength=256)
    return {int(s): int(counts[s]) for s in np.flatnonzero(counts)}

def build_tree(freqs: FrequencyTable) -> HuffmanTree:
    """
    Min-heap merge keyed by (freq, arena index).

    Leaves enter the arena in ascending symbol order and every merged node is
    appended after them, so among equal frequencies the node created first is
    popped first. The first node popped becomes the left child.
    """
    if not freqs:
        raise EmptyInputError("Empty frequency table")
    nodes = [_Node(freq=f, sym=s) for s, f in sorted(freqs.items())]
    pq = [(n.freq, i) for i, n in enumerate(nodes)]
    heapq.heapify(pq)
    while len(pq) > 1:
        fa, a = heapq.heappop(pq)
        fb, b = heapq.heappop(pq)
        nodes.append(_Node(freq=fa + fb, left=a, right=b))
        heapq.heappush(pq, (fa + fb, len(nodes) - 1))
    return HuffmanTree(nodes=nodes, root=pq[0][1])

def _walk_leaves(tree: HuffmanTree):
    # yields (symbol, depth), left subtree before right
    stack = [(tree.root, 0)]
    while stack:
        idx, depth = stack.pop()
        node = tree.nodes[idx]
        if node.sym is not None:
            yield node.sym, depth
            continue
        stack.append((node.right, depth + 1))
        stack.append((node.left, depth + 1))

def tree_height(tree: HuffmanTree) -> int:
    return max(depth for _, depth in _walk_leaves(tree))

def derive_length_table(tree: HuffmanTree, max_length: int = MAX_CODE_LENGTH) -> LengthTable:
    table: LengthTable = []
    for sym, depth in _walk_leaves(tree):
        depth = max(1, depth)  # lone leaf still needs a 1-bit code
        if depth > max_length:
            raise CodeTooLongError(f"Code length {depth} for symbol {sym} exceeds {max_length}")
        while len(table) < depth:
            table.append([])
        table[depth - 1].append(sym)
    return table

def build_length_table(data, max_length: int = MAX_CODE_LENGTH) -> LengthTable:
    return derive_length_table(build_tree(byte_frequencies(data)), max_length)

def assign_codes(table: LengthTable) -> CodeMap:
    """
    Canonical assignment: codewords of one length are consecutive integers,
    the first code of length L is the next free code of length L-1 shifted
    left by one bit per step.
    """
    out = CodeMap(max_length=len(table))
    code = 0
    prev_len = 0
    for L, group in enumerate(table, start=1):
        code <<= (L - prev_len)
        prev_len = L
        for sym in group:
            if code >> L:
                raise MalformedHeaderError(f"Length table over-subscribes {L}-bit codes")
            if sym in out.encode:
                raise MalformedHeaderError(f"Symbol {sym} listed twice in length table")
            word = format(code, f"0{L}b")
            out.encode[sym] = word
            out.decode[word] = sym
            code += 1
    return out

def code_lengths(table: LengthTable) -> Dict[int, int]:
    return {sym: L for L, group in enumerate(table, start=1) for sym in group}
