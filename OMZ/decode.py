import argparse, sys
from codec import CodecConfig, decode
from bitstream import SUFFIX, DEC_SUFFIX
from errors import CodecError

def output_path_for(in_path: str) -> str:
    if len(in_path) <= len(SUFFIX) or not in_path.endswith(SUFFIX):
        raise ValueError(f"Invalid input file (expected *{SUFFIX}): {in_path}")
    return in_path[:-len(SUFFIX)] + DEC_SUFFIX

def main(argv=None):
    ap = argparse.ArgumentParser(description="Decompress a .omz file")
    ap.add_argument("input", help="path to .omz; output is written next to it as .dec")
    ap.add_argument("-v", "-V", "--verbose", action="store_true", help="print length table and codewords")
    args = ap.parse_args(argv)

    try:
        out_path = output_path_for(args.input)
    except ValueError as e:
        ap.error(str(e))

    with open(args.input, "rb") as f:
        container = f.read()
    try:
        data, meta = decode(container, CodecConfig(verbose=args.verbose))
    except CodecError as e:
        print(f"[decode] {args.input}: {e}", file=sys.stderr)
        return 1

    for line in meta.get("listing", []):
        print(line)

    with open(out_path, "wb") as f:
        f.write(data)
    print(f"[decode] wrote {out_path} {meta['input_bytes']}B -> {meta['output_bytes']}B "
          f"max_len={len(meta['table'])}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
