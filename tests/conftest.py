from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def signatures_dir(tmp_path: Path):
    """Factory writing 4byte records (file name -> content) into a fresh directory."""
    root = tmp_path / "signatures"
    root.mkdir()

    def _write(records: Dict[str, str]) -> Path:
        for name, content in records.items():
            (root / name).write_text(content, encoding="utf-8")
        return root

    return _write
