import pytest

from abidb.hasher import signature_selector
from abidb.verifier import Accepted, RejectReason, Rejected, function_abi, verify
from abidb.parser import parse_selector

TRANSFER = bytes.fromhex("a9059cbb")
ZERO = bytes(4)


def test_accepts_matching_signature():
    result = verify(TRANSFER, "transfer(address,uint256)")
    assert result == Accepted("transfer(address,uint256)")
    assert result.ok


def test_trims_surrounding_whitespace():
    result = verify(TRANSFER, "  transfer(address,uint256)\n")
    assert isinstance(result, Accepted)
    assert result.signature == "transfer(address,uint256)"


def test_accepts_zero_argument_function():
    assert isinstance(verify(bytes.fromhex("18160ddd"), "totalSupply()"), Accepted)


def test_hash_mismatch_reports_both_values():
    expected = bytes.fromhex("deadbeef")
    result = verify(expected, "frob(uint256)")
    assert isinstance(result, Rejected)
    assert not result.ok
    assert result.reason is RejectReason.HASH_MISMATCH
    assert result.expected == expected
    assert result.computed == signature_selector("frob(uint256)")
    assert "deadbeef" in result.describe()
    assert result.computed.hex() in result.describe()


@pytest.mark.parametrize(
    "signature",
    [
        "transfer(address,uint256)",
        "approve(address,uint256)",
        "balanceOf(address)",
        "name()",
        "multicall(bytes[])",
    ],
)
def test_never_accepts_wrong_hash(signature):
    real = signature_selector(signature)
    for expected in (ZERO, bytes.fromhex("ffffffff"), real[::-1]):
        if expected == real:
            continue
        result = verify(expected, signature)
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.HASH_MISMATCH


@pytest.mark.parametrize(
    "signature",
    ["foo(bar(uint256))", "transfer(address, uint256)", "nothing", ""],
)
def test_malformed_signature(signature):
    result = verify(ZERO, signature)
    assert isinstance(result, Rejected)
    assert result.reason is RejectReason.MALFORMED_SIGNATURE
    assert result.computed is None


@pytest.mark.parametrize(
    "signature",
    ["foo(uint7)", "foo(bytes33)", "foo(Uint256)", "foo(notatype)", "foo(uint256,)"],
)
def test_lexically_valid_but_not_an_abi_type(signature):
    result = verify(ZERO, signature)
    assert isinstance(result, Rejected)
    assert result.reason is RejectReason.INVALID_ABI_TYPE


def test_type_alias_fails_roundtrip():
    # uint is accepted by the type acceptor but renders as uint256
    signature = "transfer(address,uint)"
    result = verify(signature_selector(signature), signature)
    assert isinstance(result, Rejected)
    assert result.reason is RejectReason.ROUNDTRIP_MISMATCH
    assert "transfer(address,uint256)" in result.detail


@pytest.mark.parametrize(
    "signature", ["execute(function)", "schedule(address,function[])"]
)
def test_function_type_is_not_an_alias(signature):
    result = verify(signature_selector(signature), signature)
    assert result == Accepted(signature)


@pytest.mark.parametrize("signature", ["foo(int)", "foo(byte)", "foo(uint[])"])
def test_other_aliases_fail_roundtrip(signature):
    result = verify(signature_selector(signature), signature)
    assert isinstance(result, Rejected)
    assert result.reason is RejectReason.ROUNDTRIP_MISMATCH


def test_abi_selector_must_agree_with_text_hash(monkeypatch):
    monkeypatch.setattr(
        "abidb.verifier.function_abi_to_4byte_selector", lambda abi: bytes(4)
    )
    result = verify(TRANSFER, "transfer(address,uint256)")
    assert isinstance(result, Rejected)
    assert result.reason is RejectReason.HASH_MISMATCH
    assert result.computed == bytes(4)
    assert "abi selector disagrees" in result.detail


def test_reasons_use_stable_names():
    assert [reason.value for reason in RejectReason] == [
        "malformed-signature",
        "invalid-abi-type",
        "signature-roundtrip-mismatch",
        "hash-mismatch",
    ]


def test_function_abi_shape():
    abi = function_abi(parse_selector("approve(address,uint256)"))
    assert abi == {
        "type": "function",
        "name": "approve",
        "inputs": [{"type": "address"}, {"type": "uint256"}],
    }
