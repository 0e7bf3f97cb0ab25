"""Central configuration for the bill report package."""
from __future__ import annotations

import argparse
import codecs
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_DIR = Path("csv")
DEFAULT_OUTPUT_PATH = Path("tables.md")
DEFAULT_SEPARATOR = "_"
DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"

WRITE_MODE_APPEND = "append"
WRITE_MODE_TRUNCATE = "truncate"
WRITE_MODES = (WRITE_MODE_APPEND, WRITE_MODE_TRUNCATE)

REQUIRED_COLUMNS = ("name", "amount", "price")
TAX_RATE_COLUMN = "taxRate"


@dataclass(slots=True, frozen=True)
class Settings:
    input_dir: Path = DEFAULT_INPUT_DIR
    output_path: Path = DEFAULT_OUTPUT_PATH
    separator: str = DEFAULT_SEPARATOR
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    write_mode: str = WRITE_MODE_APPEND

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding {self.encoding!r}") from None
        if self.write_mode not in WRITE_MODES:
            raise ValueError(f"write_mode must be one of {WRITE_MODES}, got {self.write_mode!r}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        return cls(
            input_dir=Path(args.input_dir),
            output_path=Path(args.output),
            separator=args.separator,
            delimiter=args.delimiter,
            encoding=args.encoding,
            write_mode=WRITE_MODE_TRUNCATE if args.truncate else WRITE_MODE_APPEND,
        )

