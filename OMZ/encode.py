import argparse, sys
from codec import CodecConfig, POLICIES, encode
from bitstream import SUFFIX
from errors import CodecError
from metrics import compression_ratio, entropy_bits, average_code_length
from huff_canonical import code_lengths

def main(argv=None):
    ap = argparse.ArgumentParser(description="Compress a file with static canonical Huffman coding")
    ap.add_argument("input", help="file to compress; output is written to INPUT.omz")
    ap.add_argument("-v", "-V", "--verbose", action="store_true", help="print length table and codewords")
    ap.add_argument("--policy", choices=POLICIES, default="equal-length",
                    help="when to refuse an input as uncompressible (default equal-length)")
    ap.add_argument("--min_savings", type=int, default=1, help="bytes that must be saved under --policy no-savings")
    args = ap.parse_args(argv)

    config = CodecConfig(verbose=args.verbose, policy=args.policy, min_savings=args.min_savings)
    out_path = args.input + SUFFIX

    with open(args.input, "rb") as f:
        data = f.read()
    try:
        container, meta = encode(data, config)
    except CodecError as e:
        print(f"[encode] {args.input}: {e}", file=sys.stderr)
        return 1

    for line in meta.get("listing", []):
        print(line)

    with open(out_path, "wb") as f:
        f.write(container)

    freqs = meta["freqs"]
    print(f"[encode] wrote {out_path}")
    print(f"[encode] {meta['input_bytes']}B -> {meta['container_bytes']}B "
          f"ratio={compression_ratio(meta['input_bytes'], meta['container_bytes']):.3f} "
          f"symbols={len(freqs)} max_len={len(meta['table'])} padding={meta['padding']}")
    print(f"[encode] entropy={entropy_bits(freqs):.3f} bits/B, "
          f"avg code={average_code_length(freqs, code_lengths(meta['table'])):.3f} bits/B")
    return 0

if __name__ == "__main__":
    sys.exit(main())
