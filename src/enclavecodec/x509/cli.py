from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from ..errors import UsageError
from ..utils.cli import UsageArgumentParser, fail
from .pem import der_hex_to_base64, der_hex_to_pem, pem_to_der_hex, split_bundle


def cmd_decode(args: argparse.Namespace) -> int:
    if not args.decode:
        raise UsageError("Missing PEM path")
    path = Path(args.decode)
    if not path.is_file():
        raise UsageError(f"file not found: {path}")
    blocks, count = split_bundle(path.read_text(encoding="utf-8"))
    for i, block in enumerate(blocks, start=1):
        print(f"=== Printing DER {i} of {count} ===")
        print(pem_to_der_hex(block))
        print()
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    count = len(args.encode)
    for i, der_hex in enumerate(args.encode, start=1):
        print(f"=== Printing Base64 {i} of {count} ===")
        if args.pem:
            print(der_hex_to_pem(der_hex, args.label))
        else:
            print(der_hex_to_base64(der_hex))
        print()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = UsageArgumentParser(
        "x509codec",
        description="Convert PEM certificates/CRLs to DER hex (--decode) and DER hex back to base64 (--encode)",
    )
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("-d", "--decode", nargs="?", const="", metavar="PEM_PATH", help="PEM file, single certificate or chain")
    g.add_argument("-e", "--encode", nargs="*", metavar="DER_HEX", help="one or more DER hex strings")
    p.add_argument("--pem", action="store_true", help="with --encode, wrap output in PEM armor")
    p.add_argument("--label", default="CERTIFICATE", help="PEM label for --pem (e.g. 'X509 CRL')")
    args = p.parse_args(argv)

    try:
        if args.encode is not None:
            return cmd_encode(args)
        return cmd_decode(args)
    except UsageError as e:
        return fail(str(e))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
