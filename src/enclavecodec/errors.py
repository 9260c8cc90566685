"""Error taxonomy shared by the identity and certificate codecs.

``UsageError`` is the only one the command-line entry points catch; the
others propagate and end the process with a traceback.
"""
from __future__ import annotations


class CodecError(ValueError):
    pass


class UsageError(CodecError):
    """Missing or invalid command-line argument."""


class DecodeError(CodecError):
    """Malformed base64, malformed hex, or data not matching an ABI layout."""


class ParseError(CodecError):
    """Decoded content is not the JSON document it should be."""
