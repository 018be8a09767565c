import argparse
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from huff_canonical import byte_frequencies, build_length_table, code_lengths

def plot_lengths(data: bytes, output: str, title: str = ""):
    freqs = byte_frequencies(data)
    lengths = code_lengths(build_length_table(data))

    syms = np.arange(256)
    f = np.array([freqs.get(s, 0) for s in syms])
    L = np.array([lengths.get(s, 0) for s in syms])

    plt.figure(figsize=(10, 5))
    plt.subplot(2, 1, 1)
    plt.bar(syms, f, width=1.0)
    plt.ylabel("count")
    plt.title(title or "Byte frequencies", fontsize=9)

    plt.subplot(2, 1, 2)
    plt.bar(syms, L, width=1.0, color="tab:orange")
    plt.axhline(8, color="gray", linewidth=0.8, linestyle="--")  # raw byte width
    plt.xlabel("byte value")
    plt.ylabel("code length (bits)")

    plt.tight_layout()
    plt.savefig(output, dpi=150)
    plt.close()

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help="file to analyse")
    ap.add_argument("--output", required=True, help="path to .png")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as fh:
        data = fh.read()
    plot_lengths(data, args.output, title=args.input)
    print(f"[plot_lengths] wrote {args.output}")

if __name__ == "__main__":
    main()
