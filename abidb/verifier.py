"""
Verification of a single 4byte record.

A record is accepted only when its signature survives two independent paths:
the lexical parser plus the keccak hash of the exact text, and a minimal
function ABI built from that parse, run through the eth_abi type registry and
rendered back by eth_utils. Both must agree with the selector encoded in the
file name.
"""

import enum
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from eth_abi import is_encodable_type
from eth_abi.exceptions import ABITypeError, ParseError
from eth_abi.grammar import TYPE_ALIASES, normalize, parse
from eth_utils import abi_to_signature, function_abi_to_4byte_selector

from .errors import SelectorParseError
from .hasher import declaration_selector, selector_hex
from .parser import SelectorDeclaration, parse_selector


class RejectReason(str, enum.Enum):
    MALFORMED_SIGNATURE = "malformed-signature"
    INVALID_ABI_TYPE = "invalid-abi-type"
    ROUNDTRIP_MISMATCH = "signature-roundtrip-mismatch"
    HASH_MISMATCH = "hash-mismatch"


@dataclass(frozen=True)
class Accepted:
    signature: str

    ok = True


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    signature: str
    expected: bytes
    computed: Optional[bytes] = None
    detail: str = ""

    ok = False

    def describe(self) -> str:
        text = f"{self.reason.value}: {self.signature!r}"
        if self.computed is not None:
            text += f", have {selector_hex(self.expected)} want {selector_hex(self.computed)}"
        if self.detail:
            text += f" ({self.detail})"
        return text


VerificationResult = Union[Accepted, Rejected]

# function is a canonical type of its own; it is encoded as bytes24 but never
# rendered that way
RENDERED_ALIASES = {k: v for k, v in TYPE_ALIASES.items() if k != "function"}
RENDERED_ALIAS_RE = re.compile(
    r"\b({})\b".format("|".join(re.escape(alias) for alias in RENDERED_ALIASES))
)


def function_abi(declaration: SelectorDeclaration) -> Dict[str, Any]:
    """Minimal function ABI entry for ``declaration``."""
    return {
        "type": "function",
        "name": declaration.name,
        "inputs": [{"type": arg} for arg in declaration.arguments],
    }


def check_abi_type(type_str: str) -> None:
    """Raise ABITypeError unless ``type_str`` is a type eth_abi can encode."""
    try:
        parse(type_str).validate()
    except ParseError as err:
        raise ABITypeError(f"cannot parse type {type_str!r}: {err}") from err
    if not is_encodable_type(type_str):
        raise ABITypeError(f"unknown type {type_str!r}")


def rendered_type(type_str: str) -> str:
    """``type_str`` as an ABI encoder would print it, e.g. uint -> uint256."""
    return RENDERED_ALIAS_RE.sub(lambda match: RENDERED_ALIASES[match.group(0)], type_str)


def normalized_abi(declaration: SelectorDeclaration) -> Dict[str, Any]:
    abi = function_abi(declaration)
    for arg in abi["inputs"]:
        check_abi_type(normalize(arg["type"]))
        # aliases such as uint -> uint256 survive here and fail the round trip
        arg["type"] = rendered_type(arg["type"])
    return abi


def verify(expected: bytes, raw_signature: str) -> VerificationResult:
    """Check that ``raw_signature`` is well formed and hashes to ``expected``.

    Never raises for bad input; every failure comes back as a Rejected value.
    """
    signature = raw_signature.strip()

    def reject(reason, computed=None, detail=""):
        return Rejected(reason, signature, expected, computed, detail)

    try:
        declaration = parse_selector(signature)
    except SelectorParseError as err:
        return reject(RejectReason.MALFORMED_SIGNATURE, detail=str(err))

    try:
        abi = normalized_abi(declaration)
    except ABITypeError as err:
        return reject(RejectReason.INVALID_ABI_TYPE, detail=str(err))

    abi_signature = abi_to_signature(abi)
    if abi_signature != signature:
        return reject(
            RejectReason.ROUNDTRIP_MISMATCH,
            detail=f"expected equality: {abi_signature} != {signature}",
        )

    computed = declaration_selector(declaration)
    if computed != expected:
        return reject(RejectReason.HASH_MISMATCH, computed=computed)

    # guard only: unreachable while abi_to_signature matches the text above
    abi_selector = function_abi_to_4byte_selector(abi)
    if abi_selector != computed:
        return reject(
            RejectReason.HASH_MISMATCH,
            computed=abi_selector,
            detail="abi selector disagrees with signature hash",
        )
    return Accepted(signature)
