from eth_utils import function_signature_to_4byte_selector

from .parser import SelectorDeclaration


def signature_selector(signature: str) -> bytes:
    """First four bytes of keccak256 over the exact signature text."""
    return function_signature_to_4byte_selector(signature)


def declaration_selector(declaration: SelectorDeclaration) -> bytes:
    return signature_selector(declaration.signature)


def selector_hex(selector: bytes) -> str:
    # database keys carry no 0x prefix
    return selector.hex()
