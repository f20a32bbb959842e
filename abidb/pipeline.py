import logging
from dataclasses import dataclass, field
from typing import Dict

from .config import BuildConfig
from .emitter import write_store
from .store import IngestStats, StoreBuilder

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    entries: Dict[str, str] = field(default_factory=dict)
    stats: IngestStats = field(default_factory=IngestStats)

    @property
    def accepted(self) -> int:
        return self.stats.accepted

    @property
    def rejected(self) -> int:
        return self.stats.rejected


def build_database(config: BuildConfig) -> BuildReport:
    """Read, verify, sort and write the selector database described by ``config``.

    Raises InputDirectoryError or OutputWriteError; per-file problems are only
    logged.
    """
    logger.info("Reading signatures from %s...", config.input_dir)
    builder = StoreBuilder()
    store = builder.collect(config.input_dir)

    logger.info("Sorting data...")
    entries = store.finalize()
    write_store(entries, config.output_file)

    stats = builder.stats
    logger.info(
        "Wrote %d selectors (%d rejected, %d unreadable, %d with several candidates)",
        len(entries),
        stats.rejected,
        stats.unreadable,
        stats.multi_candidate,
    )
    return BuildReport(entries=entries, stats=stats)
