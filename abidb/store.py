"""
Collection of verified records into the canonical selector store.

Every input file is handled on its own: a file that cannot be read, does not
parse or does not hash to its name is logged and skipped, and the remaining
files are still processed.
"""

import enum
import logging
import os
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .errors import InputDirectoryError, StoreFinalizedError
from .hasher import selector_hex
from .verifier import Accepted, VerificationResult, verify

logger = logging.getLogger(__name__)

SELECTOR_FILENAME_RE = re.compile(r"[0-9a-fA-F]{8}")
CANDIDATE_SEPARATOR = ";"


class StoreState(enum.Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


class CanonicalStore:
    """Selector (lower-case hex, no 0x) to signature mapping."""

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self._finalized = False

    @property
    def state(self) -> StoreState:
        if self._finalized:
            return StoreState.FINALIZED
        return StoreState.ACCUMULATING if self._entries else StoreState.EMPTY

    def insert(self, key: str, signature: str) -> None:
        if self._finalized:
            raise StoreFinalizedError(f"cannot insert {key}: store is finalized")
        previous = self._entries.get(key)
        if previous is not None and previous != signature:
            logger.warning("sig `%s`: replacing %s with %s", key, previous, signature)
        self._entries[key] = signature

    def finalize(self) -> Dict[str, str]:
        """Freeze the store and return its entries sorted by key."""
        self._finalized = True
        return dict(sorted(self._entries.items()))

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def decode_selector_filename(name: str) -> Optional[bytes]:
    """The 4-byte selector a file name encodes, or None for other files."""
    if SELECTOR_FILENAME_RE.fullmatch(name) is None:
        return None
    return bytes.fromhex(name)


def split_candidates(content: str) -> List[str]:
    return content.split(CANDIDATE_SEPARATOR)


def read_record(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def list_directory(directory: Path) -> List[str]:
    try:
        return sorted(os.listdir(directory))
    except OSError as err:
        raise InputDirectoryError(f"cannot read directory {directory}: {err}") from err


@dataclass
class IngestStats:
    accepted: int = 0
    rejected: int = 0
    skipped: int = 0
    unreadable: int = 0
    multi_candidate: int = 0
    reasons: Counter = field(default_factory=Counter)


class StoreBuilder:
    """Feeds 4byte records through the verifier into a CanonicalStore."""

    def __init__(self, store: Optional[CanonicalStore] = None) -> None:
        self.store = store if store is not None else CanonicalStore()
        self.stats = IngestStats()

    def ingest(self, filename: str, content: str) -> Optional[VerificationResult]:
        """Verify one file's content and insert it if accepted.

        Returns None when ``filename`` is not a selector file at all.
        """
        expected = self._selector_for(filename)
        if expected is None:
            return None
        return self._ingest_selector(expected, filename, content)

    def collect(self, directory: Path) -> CanonicalStore:
        """Verify every selector file in ``directory``.

        Files are visited in sorted name order so the outcome does not depend
        on how the file system enumerates them.
        """
        for name in list_directory(directory):
            expected = self._selector_for(name)
            if expected is None:
                continue
            try:
                content = read_record(Path(directory) / name)
            except (OSError, UnicodeDecodeError) as err:
                logger.warning("err reading file %s: %s", name, err)
                self.stats.unreadable += 1
                continue
            self._ingest_selector(expected, name, content)
        return self.store

    def _selector_for(self, filename: str) -> Optional[bytes]:
        expected = decode_selector_filename(filename)
        if expected is None:
            logger.debug("skipping %s: not a selector file", filename)
            self.stats.skipped += 1
        return expected

    def _ingest_selector(
        self, expected: bytes, filename: str, content: str
    ) -> VerificationResult:
        candidates = split_candidates(content)
        if len(candidates) > 1:
            self.stats.multi_candidate += 1
            listing = "".join(f"\n - {candidate}" for candidate in candidates)
            logger.warning("sig `%s`%s\n -- using first one", selector_hex(expected), listing)

        result = verify(expected, candidates[0])
        if isinstance(result, Accepted):
            self.store.insert(selector_hex(expected), result.signature)
            self.stats.accepted += 1
        else:
            logger.warning("Bad selector in %s: %s", filename, result.describe())
            self.stats.rejected += 1
            self.stats.reasons[result.reason] += 1
        return result


def collect_directory(directory: Path) -> CanonicalStore:
    return StoreBuilder().collect(directory)
