import argparse
import sys
from pathlib import Path
from typing import List, Optional

from huffcodec.coding.code_table import make_code_table
from huffcodec.coding.frequency import symbol_frequency
from huffcodec.coding.tree import END_OF_INPUT, build_coding_tree
from huffcodec.errors import HuffmanError
from huffcodec.pipeline.config import PipelineConfig
from huffcodec.pipeline.runner import decode_encoded_file, encode_file_bytes, write_encoded

SPECIAL_ASCII = {0: "NULL", 9: "TAB", 10: "LF", 13: "CR", 127: "DEL"}


def _disp_char(byte: int) -> str:
    if 32 <= byte < 127:
        return repr(chr(byte))
    return SPECIAL_ASCII.get(byte, "")


def format_code_table(data: bytes) -> List[str]:
    """Table of the Huffman code for `data`, most frequent symbols first."""
    frequencies = symbol_frequency(data)
    table = make_code_table(build_coding_tree(frequencies))

    lines = [" symbol   char     hex   frequency   code", 60 * "-"]
    for byte in sorted(frequencies, key=lambda b: (-frequencies[b], b)):
        lines.append(
            f"{byte:7d}   {_disp_char(byte):<6} 0x{byte:02x} {frequencies[byte]:11d}   "
            f"{table[byte].to01()}"
        )
    lines.append(f"{'<end>':>7}   {'':<6} {'':4} {0:11d}   {table[END_OF_INPUT].to01()}")
    return lines


def _cmd_encode(args: argparse.Namespace) -> int:
    cfg = PipelineConfig(verify_roundtrip=args.verify)
    in_path = Path(args.file)
    prefix = Path(args.output) if args.output else in_path
    payload_path = prefix.with_name(prefix.name + cfg.payload_extension)
    key_path = payload_path.with_name(payload_path.name + cfg.key_extension)

    result = encode_file_bytes(in_path.read_bytes(), cfg)
    write_encoded(result, payload_path, key_path)
    print(f"Size reduction: {result.original_size} => {result.encoded_size} ({result.ratio:.2f}%)")
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    cfg = PipelineConfig()
    payload_path = Path(args.payload)
    key_path = Path(args.key) if args.key else payload_path.with_name(
        payload_path.name + cfg.key_extension
    )
    if args.output:
        out_path = Path(args.output)
    else:
        stem = payload_path.name
        if stem.endswith(cfg.payload_extension):
            stem = stem[:-len(cfg.payload_extension)]
        out_path = payload_path.with_name(stem + ".out")

    decoded = decode_encoded_file(payload_path, key_path)
    out_path.write_bytes(decoded)
    print(f"Decoded {payload_path.stat().st_size} => {len(decoded)} bytes into {out_path}")
    return 0


def _cmd_codes(args: argparse.Namespace) -> int:
    print("\n".join(format_code_table(Path(args.file).read_bytes())))
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    from huffcodec.utils.batch import run_batch_on_folder

    rows = run_batch_on_folder(
        Path(args.input_root),
        Path(args.output_root),
        PipelineConfig(verify_roundtrip=args.verify),
    )
    done = sum(1 for row in rows if row["status"] == "ok")
    print(f"Encoded {done} of {len(rows)} files")
    return 0


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffcodec",
        description="Compress and decompress files with Huffman coding.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Encode FILE into FILE.huff and FILE.huff.key.json.")
    p_encode.add_argument("file")
    p_encode.add_argument("-o", "--output", default="", help="Output prefix (default: FILE).")
    p_encode.add_argument("--no-verify", dest="verify", action="store_false",
                          help="Skip the round-trip check.")
    p_encode.set_defaults(func=_cmd_encode)

    p_decode = sub.add_parser("decode", help="Decode a payload written by `encode`.")
    p_decode.add_argument("payload")
    p_decode.add_argument("--key", default="", help="Key file (default: PAYLOAD.key.json).")
    p_decode.add_argument("-o", "--output", default="", help="Output file.")
    p_decode.set_defaults(func=_cmd_decode)

    p_codes = sub.add_parser("codes", help="Print the Huffman code computed for FILE.")
    p_codes.add_argument("file")
    p_codes.set_defaults(func=_cmd_codes)

    p_batch = sub.add_parser("batch", help="Encode every file under INPUT_ROOT.")
    p_batch.add_argument("input_root")
    p_batch.add_argument("output_root")
    p_batch.add_argument("--no-verify", dest="verify", action="store_false",
                         help="Skip the round-trip check.")
    p_batch.set_defaults(func=_cmd_batch)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        return args.func(args)
    except (HuffmanError, OSError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
