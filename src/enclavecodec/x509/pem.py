"""PEM bundle splitting and PEM/DER/base64 conversions.

Only the armor is handled here: nothing is parsed as ASN.1 and nothing is
verified.
"""
from __future__ import annotations

import base64
import binascii
from typing import List, Tuple

from ..config import PEM_WARN_TRAILING
from ..errors import DecodeError
from ..utils.logging import get_logger

X509_FOOTER = "-----END CERTIFICATE-----"
X509_CRL_FOOTER = "-----END X509 CRL-----"
FOOTERS = (X509_FOOTER, X509_CRL_FOOTER)

log = get_logger("x509")


def split_bundle(pem: str) -> Tuple[List[str], int]:
    """Split a certificate/CRL chain into PEM blocks, keeping chain order.

    A block ends at the first line equal to a certificate or CRL footer.
    Lines after the last footer never complete a block and are dropped.
    """
    blocks: List[str] = []
    current: List[str] = []
    for line in pem.split("\n"):
        if not current and not line.strip():
            continue
        current.append(line)
        if line.rstrip("\r") in FOOTERS:
            blocks.append("\n".join(current))
            current = []
    if current and PEM_WARN_TRAILING:
        log.warning("dropping %d trailing line(s) with no END CERTIFICATE/X509 CRL footer", len(current))
    return blocks, len(blocks)


def pem_to_der_hex(pem_block: str) -> str:
    lines = pem_block.split("\n")
    body = "".join(line.strip() for line in lines[1:-1])
    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise DecodeError("PEM body is not valid base64") from e
    return der.hex()


def der_hex_to_base64(der_hex: str) -> str:
    try:
        der = binascii.unhexlify(der_hex)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid DER hex string: {der_hex[:32]!r}") from e
    return base64.b64encode(der).decode("ascii")


def der_hex_to_pem(der_hex: str, label: str = "CERTIFICATE") -> str:
    b64 = der_hex_to_base64(der_hex)
    body = "\n".join(b64[i : i + 64] for i in range(0, len(b64), 64))
    return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----"
