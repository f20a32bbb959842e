import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

from eth_utils import is_hex, remove_0x_prefix

from .errors import DatabaseLoadError, OutputWriteError

logger = logging.getLogger(__name__)


def render_store(entries: Mapping[str, str]) -> str:
    """Serialise ``entries`` as a JSON object, one key per line, sorted by key."""
    return json.dumps(
        dict(entries),
        indent="",
        separators=(",", ":"),
        ensure_ascii=False,
        sort_keys=True,
    )


def write_store(entries: Mapping[str, str], path: Path) -> None:
    logger.info("Marshalling data...")
    data = render_store(entries)
    logger.info("Saving data to %s...", path)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(data)
    except OSError as err:
        raise OutputWriteError(f"error writing data to {path}: {err}") from err


def load_store(path: Path) -> Dict[str, str]:
    """Read a database written by write_store."""
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as err:
        raise DatabaseLoadError(f"cannot load database {path}: {err}") from err
    if not isinstance(data, dict):
        raise DatabaseLoadError(f"cannot load database {path}: not a JSON object")
    return data


def lookup(entries: Mapping[str, str], selector: str) -> Optional[str]:
    """Signature for a selector or for the first four bytes of call data.

    Raises ValueError if ``selector`` is not hex or is shorter than 4 bytes.
    """
    text = selector.strip()
    if not is_hex(text):
        raise ValueError(f"not a hex string: {selector!r}")
    key = remove_0x_prefix(text).lower()[:8]
    if len(key) < 8:
        raise ValueError(f"selector too short: {selector!r}")
    return entries.get(key)
