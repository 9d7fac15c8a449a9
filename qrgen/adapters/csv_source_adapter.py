"""CSV tabular input adapters."""

import csv
import io
from pathlib import Path
from typing import Iterator, Sequence, Union


class CsvTextSource:
    """Rows from CSV text already in memory (e.g. an upload)."""

    def __init__(self, text: str, skip_header: bool = False):
        self.text = text
        self.skip_header = skip_header

    def rows(self) -> Iterator[Sequence[str]]:
        """Yield parsed rows, optionally dropping the first."""
        reader = csv.reader(io.StringIO(self.text))
        if self.skip_header:
            next(reader, None)
        yield from reader


class CsvFileSource:
    """Rows from a CSV file on disk."""

    def __init__(self, path: Union[str, Path], skip_header: bool = False):
        self.path = Path(path)
        self.skip_header = skip_header

    def rows(self) -> Iterator[Sequence[str]]:
        """Yield parsed rows; file is closed once exhausted."""
        with self.path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            if self.skip_header:
                next(reader, None)
            yield from reader
