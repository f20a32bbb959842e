class AbiDbError(Exception):
    """Base class for every error raised by abidb."""


class SelectorParseError(AbiDbError, ValueError):
    """A signature string does not have the ``name(type,type,...)`` shape."""

    def __init__(self, signature: str, message: str = "") -> None:
        self.signature = signature
        super().__init__(message or f"invalid selector {signature!r}")


class InputDirectoryError(AbiDbError):
    """The signature directory could not be listed."""


class OutputWriteError(AbiDbError):
    """The database file could not be written."""


class DatabaseLoadError(AbiDbError):
    """An emitted database could not be read back."""


class StoreFinalizedError(AbiDbError):
    """A finalized store was mutated."""


class ArtifactError(AbiDbError):
    """A contract artifact does not contain a usable ABI."""
