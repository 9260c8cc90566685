"""Read-only view of a contract ABI definition.

Only function entries are kept, each reduced to canonical type strings so the
tuples can be handed straight to ``eth_abi``. ``INTERFACE`` is built once on
import from ``config.ENCLAVE_IDENTITY_ABI``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

from web3 import Web3

from ..config import ENCLAVE_IDENTITY_ABI
from ..errors import DecodeError


def canonical_type(param: Dict[str, Any]) -> str:
    typ = param["type"]
    if not typ.startswith("tuple"):
        return typ
    # tuple, tuple[], tuple[2][] ...
    suffix = typ[len("tuple"):]
    inner = ",".join(canonical_type(c) for c in param.get("components", []))
    return f"({inner}){suffix}"


@dataclass(frozen=True)
class AbiFunction:
    name: str
    inputs: Tuple[str, ...]
    outputs: Tuple[str, ...]

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.inputs)})"

    @property
    def selector(self) -> bytes:
        return bytes(Web3.keccak(text=self.signature)[:4])


@dataclass(frozen=True)
class ContractInterface:
    functions: Tuple[AbiFunction, ...]

    def find_function(self, name: str) -> AbiFunction:
        # first declaration wins when a name is overloaded
        for fn in self.functions:
            if fn.name == name:
                return fn
        raise DecodeError(f"function {name!r} not found in ABI")


def parse_interface(abi: Any) -> ContractInterface:
    if isinstance(abi, dict):
        abi = abi.get("abi", [])
    if not isinstance(abi, list):
        raise ValueError("ABI must be a list of entries or an artifact with an 'abi' key")
    functions: List[AbiFunction] = []
    for entry in abi:
        if entry.get("type", "function") != "function":
            continue
        functions.append(
            AbiFunction(
                name=entry["name"],
                inputs=tuple(canonical_type(p) for p in entry.get("inputs", [])),
                outputs=tuple(canonical_type(p) for p in entry.get("outputs", [])),
            )
        )
    return ContractInterface(functions=tuple(functions))


def load_interface(path: str | Path) -> ContractInterface:
    with open(path, "r", encoding="utf-8") as f:
        return parse_interface(json.load(f))


INTERFACE = load_interface(ENCLAVE_IDENTITY_ABI)
