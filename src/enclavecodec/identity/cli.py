"""identity: build upsert call data and parse getEnclaveIdentity results.

    identity -u <id> <version> <path> [--calldata]
        print the upsertEnclaveIdentity call tuple for the identity JSON at
        <path>; --calldata also prints the ABI-encoded call data to broadcast.
    identity -p <data> [-s]
        decode getEnclaveIdentity return data and print it as JSON; -s saves
        a local copy as <timestamp>-identity.json.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from ..errors import UsageError
from ..utils.cli import UsageArgumentParser, fail
from ..utils.logging import get_logger
from .codec import (
    build_upsert_call,
    decode_identity_result,
    dump_identity,
    encode_upsert_calldata,
    json_compact,
    load_identity_file,
    parse_uint,
    save_identity,
)

log = get_logger("identity")


def cmd_upsert(args: argparse.Namespace) -> int:
    values = list(args.upsert) + [None] * 3
    id_, version, path = values[:3]
    parse_uint(id_, "ID")
    parse_uint(version, "version")
    if not path:
        raise UsageError("Missing Identity Path")
    if not Path(path).is_file():
        raise UsageError(f"file not found: {path}")

    doc = load_identity_file(path)
    call = build_upsert_call(id_, version, doc.enclave_identity, doc.signature)
    print(json_compact(list(call)))
    if args.calldata:
        data = encode_upsert_calldata(id_, version, doc.enclave_identity, doc.signature)
        print("0x" + data.hex())
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    if not args.parse:
        raise UsageError("Missing data")
    doc = decode_identity_result(args.parse)
    print(dump_identity(doc))
    if args.save:
        path = save_identity(doc)
        log.info("saved identity to %s", path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = UsageArgumentParser("identity", description="Encode/decode EnclaveIdentityDao call data")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("-u", "--upsert", nargs="*", metavar="ARG", help="<id> <version> <path>")
    g.add_argument("-p", "--parse", nargs="?", const="", metavar="DATA", help="getEnclaveIdentity return data (hex)")
    p.add_argument("-s", "--save", action="store_true", help="with --parse, write <timestamp>-identity.json")
    p.add_argument("--calldata", action="store_true", help="with --upsert, also print ABI-encoded call data")
    args = p.parse_args(argv)
    if args.upsert is not None and args.save:
        p.error("-s/--save only applies to --parse")
    if args.parse is not None and args.calldata:
        p.error("--calldata only applies to --upsert")

    try:
        if args.upsert is not None:
            return cmd_upsert(args)
        return cmd_parse(args)
    except UsageError as e:
        return fail(str(e))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
