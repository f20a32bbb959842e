from .config import BuildConfig
from .emitter import load_store, lookup, render_store, write_store
from .errors import (
    AbiDbError,
    ArtifactError,
    DatabaseLoadError,
    InputDirectoryError,
    OutputWriteError,
    SelectorParseError,
    StoreFinalizedError,
)
from .hasher import declaration_selector, selector_hex, signature_selector
from .parser import SelectorDeclaration, parse_selector
from .pipeline import BuildReport, build_database
from .store import CanonicalStore, StoreBuilder, StoreState, collect_directory
from .verifier import Accepted, RejectReason, Rejected, verify

__version__ = "0.1.0"

__all__ = [
    "AbiDbError",
    "Accepted",
    "ArtifactError",
    "BuildConfig",
    "BuildReport",
    "CanonicalStore",
    "DatabaseLoadError",
    "InputDirectoryError",
    "OutputWriteError",
    "RejectReason",
    "Rejected",
    "SelectorDeclaration",
    "SelectorParseError",
    "StoreBuilder",
    "StoreFinalizedError",
    "StoreState",
    "build_database",
    "collect_directory",
    "declaration_selector",
    "load_store",
    "lookup",
    "parse_selector",
    "render_store",
    "selector_hex",
    "signature_selector",
    "verify",
    "write_store",
]
