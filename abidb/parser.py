"""
Lexical decomposition of 4byte signatures.

Only the outer shape is checked here: a name, an opening parenthesis, a flat
comma separated list of type tokens and a closing parenthesis. Whether the
tokens are real ABI types is decided later by the verifier.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from .errors import SelectorParseError

# Uppercase letters are not valid in ABI types but still pass here; the type
# acceptor in the verifier rejects them. Tuple types are rejected outright.
SELECTOR_RE = re.compile(r"([^\)]+)\(([A-Za-z0-9,\[\]]*)\)")


@dataclass(frozen=True)
class SelectorDeclaration:
    name: str
    arguments: Tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.arguments)})"


def parse_selector(signature: str) -> SelectorDeclaration:
    """Split ``signature`` into its function name and argument types.

    Raises SelectorParseError when the whole string is not of the form
    ``name(type,type,...)``. ``foo()`` yields an empty argument tuple.
    """
    match = SELECTOR_RE.fullmatch(signature)
    if match is None:
        raise SelectorParseError(signature)
    name, args = match.groups()
    arguments = tuple(args.split(",")) if args else ()
    return SelectorDeclaration(name=name, arguments=arguments)
