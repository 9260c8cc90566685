from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError
from pydantic import ValidationError
from web3 import Web3

from ..config import IDENTITY_OUTPUT_DIR
from ..errors import DecodeError, ParseError, UsageError
from .interface import INTERFACE
from .model import EnclaveIdentityJsonObj, IdentityDocument

UPSERT_CALL_NAME = "upsertEnclaveIdentity()"
UPSERT_FUNCTION = "upsertEnclaveIdentity"
GET_FUNCTION = "getEnclaveIdentity"

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"0[xX][0-9a-fA-F]+")


def json_compact(obj: Any) -> str:
    # key order is kept as given; the signature covers these exact bytes
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def normalize_signature_prefix(challenge: str) -> str:
    if challenge[:2] != "0x":
        challenge = "0x" + challenge
    return challenge.lower()


def parse_uint(value: Any, field: str) -> int:
    """Parse a caller-supplied id/version into a non-negative int.

    Accepts ints and numeric strings (decimal or ``0x`` hex). Anything else,
    including fractions and negatives, is a usage error.
    """
    if isinstance(value, bool) or value is None:
        raise UsageError(f"Missing or invalid {field}")
    if isinstance(value, int):
        n = value
    else:
        text = str(value).strip()
        if _DECIMAL.fullmatch(text):
            n = int(text, 10)
        elif _HEX.fullmatch(text):
            n = int(text, 16)
        else:
            raise UsageError(f"Missing or invalid {field}")
    if n < 0:
        raise UsageError(f"Missing or invalid {field}")
    return n


def hex_to_bytes(text: str) -> bytes:
    body = text[2:] if text[:2] in ("0x", "0X") else text
    if len(body) % 2:
        raise DecodeError(f"odd-length hex string: {text[:32]!r}")
    try:
        return Web3.to_bytes(hexstr=text)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"invalid hex string: {text[:32]!r}") from e


def build_upsert_call(id: Any, version: Any, enclave_identity: Any, signature: str) -> Tuple[str, int, int, Dict[str, str]]:
    obj = EnclaveIdentityJsonObj(
        identity_str=json_compact(enclave_identity),
        signature=normalize_signature_prefix(signature),
    )
    return (
        UPSERT_CALL_NAME,
        parse_uint(id, "ID"),
        parse_uint(version, "version"),
        obj.model_dump(by_alias=True),
    )


def encode_upsert_calldata(id: Any, version: Any, enclave_identity: Any, signature: str) -> bytes:
    """Raw call data for ``upsertEnclaveIdentity``: selector + encoded args."""
    fn = INTERFACE.find_function(UPSERT_FUNCTION)
    _, id_, version_, obj = build_upsert_call(id, version, enclave_identity, signature)
    args = [id_, version_, (obj["identityStr"], hex_to_bytes(obj["signature"]))]
    return fn.selector + abi_encode(list(fn.inputs), args)


def decode_identity_result(data: bytes | str) -> IdentityDocument:
    fn = INTERFACE.find_function(GET_FUNCTION)
    raw = bytes(data) if isinstance(data, (bytes, bytearray)) else hex_to_bytes(data)
    try:
        values = abi_decode(list(fn.outputs), raw)
    except (DecodingError, UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"return data does not match {fn.name} outputs") from e

    # struct return comes back wrapped in a 1-tuple
    record = values[0] if len(values) == 1 and isinstance(values[0], tuple) else values
    if len(record) < 2:
        raise DecodeError(f"{fn.name} returned {len(record)} values, expected identity and signature")
    identity_str, signature = record[0], record[1]

    try:
        enclave_identity = json.loads(identity_str)
    except json.JSONDecodeError as e:
        raise ParseError("identityStr is not valid JSON") from e
    if isinstance(signature, (bytes, bytearray)):
        sig_hex = bytes(signature).hex()
    else:
        sig_hex = normalize_signature_prefix(signature)[2:]
    return IdentityDocument(enclave_identity=enclave_identity, signature=sig_hex)


def load_identity_file(path: str | Path) -> IdentityDocument:
    text = Path(path).read_text(encoding="utf-8")
    try:
        return IdentityDocument.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise ParseError(f"{path} is not valid JSON") from e
    except ValidationError as e:
        raise ParseError(f"{path} must contain enclaveIdentity and signature") from e


def dump_identity(doc: IdentityDocument) -> str:
    return json_compact(doc.model_dump(by_alias=True))


def save_identity(doc: IdentityDocument, directory: str | Path | None = None, now: Optional[datetime] = None) -> Path:
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    stamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    path = Path(directory or IDENTITY_OUTPUT_DIR) / f"{stamp}-identity.json"
    path.write_text(dump_identity(doc), encoding="utf-8")
    return path
