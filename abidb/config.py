from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class BuildConfig:
    """Where to read 4byte records from and where to write the database."""

    input_dir: Path
    output_file: Path

    @classmethod
    def from_strings(cls, input_dir: PathLike, output_file: PathLike) -> "BuildConfig":
        if not str(input_dir):
            raise ValueError("input directory not given")
        if not str(output_file):
            raise ValueError("output file not given")
        return cls(input_dir=Path(input_dir), output_file=Path(output_file))
