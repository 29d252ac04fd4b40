from __future__ import annotations

from typing import IO, List, Optional, Sequence

import pandas as pd


class CsvSink:
    """Append-only CSV destination over an already-open text handle.

    Rows are buffered and written through pandas in blocks of `flush_every`.
    The caller owns the handle: it opens it (newline="") and closes it after
    the last flush().
    """

    def __init__(self, handle: IO[str], columns: Sequence[str], flush_every: int = 500):
        self.handle = handle
        self.columns = list(columns)
        self.flush_every = max(1, flush_every)
        self.rows_written = 0
        self._pending: List[List[Optional[str]]] = []

    def write_header(self) -> None:
        self._emit([list(self.columns)])

    def write(self, fields: Sequence[Optional[str]]) -> None:
        if len(fields) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} fields, got {len(fields)}")
        self._pending.append(list(fields))
        if len(self._pending) >= self.flush_every:
            self.flush()

    def flush(self) -> None:
        if self._pending:
            n = len(self._pending)
            self._emit(self._pending)
            self._pending = []
            self.rows_written += n
        self.handle.flush()

    def _emit(self, rows: List[List[Optional[str]]]) -> None:
        # None -> empty field; minimal quoting for commas, quotes, newlines
        block = pd.DataFrame(rows, dtype=object)
        block.to_csv(self.handle, header=False, index=False, na_rep="", lineterminator="\n")
