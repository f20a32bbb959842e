"""
Seed a 4byte-style signature directory from compiled contract artifacts.

Accepts either a full artifact (``{"abi": [...], ...}``) or a bare ABI list.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from eth_utils import abi_to_signature, function_abi_to_4byte_selector

from .errors import ArtifactError
from .store import CANDIDATE_SEPARATOR, read_record, split_candidates

logger = logging.getLogger(__name__)


def load_abi(path: Path) -> list:
    try:
        with open(path, "r") as file:
            json_data = json.load(file)
    except (OSError, ValueError) as err:
        raise ArtifactError(f"cannot read artifact {path}: {err}") from err

    abi = json_data.get("abi") if isinstance(json_data, dict) else json_data
    if not isinstance(abi, list):
        raise ArtifactError(f"no abi found in {path}")
    return abi


def artifact_signatures(path: Path) -> List[Tuple[str, str]]:
    """(selector hex, signature) for every function in the artifact at ``path``.

    Raises ArtifactError for ABI entries that are not objects and for
    functions without a name.
    """
    signatures = []
    for index, function_abi in enumerate(load_abi(path)):
        if not isinstance(function_abi, dict):
            raise ArtifactError(f"abi entry {index} in {path} is not an object")
        if function_abi.get("type") != "function":
            continue
        if not function_abi.get("name"):
            raise ArtifactError(f"abi function {index} in {path} has no name")
        function_signature = abi_to_signature(function_abi)
        selector = function_abi_to_4byte_selector(function_abi).hex()
        signatures.append((selector, function_signature))
    return signatures


def seed_directory(artifacts: Iterable[Path], output_dir: Path) -> int:
    """Write one record per selector found in ``artifacts`` into ``output_dir``.

    A signature not yet listed in an existing record is appended as a further
    candidate. Returns the number of records written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for artifact in artifacts:
        for selector, signature in artifact_signatures(artifact):
            record = output_dir / selector
            candidates = []
            if record.exists():
                existing = split_candidates(read_record(record))
                candidates = [c.strip() for c in existing if c.strip()]
            if signature in candidates:
                continue
            if candidates:
                logger.warning("sig `%s`: adding %s next to %s", selector, signature, candidates)
            candidates.append(signature)
            record.write_text(CANDIDATE_SEPARATOR.join(candidates), encoding="utf-8")
            logger.debug("%s: %s", selector, signature)
            written += 1
    return written
