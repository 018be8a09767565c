from fractions import Fraction

import numpy as np

def kraft_sum(table) -> Fraction:
    """Exact sum of 2^-L over every symbol in a length table."""
    return sum((Fraction(len(group), 2 ** L) for L, group in enumerate(table, start=1)), Fraction(0))

def entropy_bits(freqs) -> float:
    f = np.array(list(freqs.values()), dtype=np.float64)
    p = f / f.sum()
    return max(0.0, float(-(p * np.log2(p)).sum()))  # no -0.0 for a single symbol

def average_code_length(freqs, lengths) -> float:
    total = sum(freqs.values())
    return float(sum(freqs[s] * lengths[s] for s in freqs) / total)

def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out == 0:
        return float("inf")
    return float(n_in / n_out)
