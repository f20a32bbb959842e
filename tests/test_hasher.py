import hashlib

import pytest

from abidb.hasher import declaration_selector, selector_hex, signature_selector
from abidb.parser import parse_selector

# verified against the canonical 4byte directory
KNOWN_SELECTORS = [
    ("transfer(address,uint256)", "a9059cbb"),
    ("transferFrom(address,address,uint256)", "23b872dd"),
    ("approve(address,uint256)", "095ea7b3"),
    ("balanceOf(address)", "70a08231"),
    ("allowance(address,address)", "dd62ed3e"),
    ("renounceOwnership()", "715018a6"),
    ("transferOwnership(address)", "f2fde38b"),
    ("name()", "06fdde03"),
    ("decimals()", "313ce567"),
    ("multicall(bytes[])", "ac9650d8"),
]


@pytest.mark.parametrize("signature,expected", KNOWN_SELECTORS)
def test_known_selectors(signature, expected):
    assert selector_hex(signature_selector(signature)) == expected


@pytest.mark.parametrize("signature", [signature for signature, _ in KNOWN_SELECTORS])
def test_declaration_hash_matches_text_hash(signature):
    selector = declaration_selector(parse_selector(signature))
    assert len(selector) == 4
    assert selector == signature_selector(signature)


def test_selector_is_keccak_not_sha3():
    signature = "transfer(address,uint256)"
    sha3 = hashlib.sha3_256(signature.encode()).digest()[:4]
    assert signature_selector(signature) != sha3


def test_casing_changes_the_selector():
    assert signature_selector("Transfer(address,uint256)") != signature_selector(
        "transfer(address,uint256)"
    )


def test_selector_hex_has_no_prefix():
    assert selector_hex(bytes.fromhex("A9059CBB")) == "a9059cbb"
