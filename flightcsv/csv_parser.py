from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, Union

import pandas as pd

from .csv_schema import INPUT_COLUMNS
from .logging_utils import get_logger
from .record_parser import InputRow

logger = get_logger(__name__)

CSVSource = Union[str, Path, IO[str]]


class MalformedCSVError(ValueError):
    """The input is not well-formed CSV; the run cannot continue."""


def _source_name(source: CSVSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


def iter_rows(source: CSVSource, encoding: str = "utf-8") -> Iterator[InputRow]:
    """Yield one InputRow per data line of a headed CSV, in file order.

    Every cell is read as text (no dtype inference, no NA parsing) so values
    reach validation exactly as written. Columns other than the recognized
    ones are ignored; recognized columns missing from the header read as None.

    The header line is read as an ordinary record, which makes pandas hold
    every later line to its width instead of guessing an index column. One
    record is tokenized per read, so each row is yielded before the next line
    is looked at. Raises MalformedCSVError on the first line pandas cannot
    tokenize.
    """
    name = _source_name(source)
    try:
        reader = pd.read_csv(
            source,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            chunksize=1,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"No header found in {name}; nothing to process.")
        return
    except pd.errors.ParserError as e:
        raise MalformedCSVError(f"Malformed CSV in {name}: {e}") from e

    with reader:
        records = iter(reader)
        header: list[str] | None = None
        line_no = 0
        while True:
            try:
                chunk = next(records)
            except StopIteration:
                break
            except pd.errors.ParserError as e:
                raise MalformedCSVError(f"Malformed CSV in {name}: {e}") from e

            values = chunk.iloc[0].tolist()
            if header is None:
                header = [str(v) for v in values]
                missing = [c for c in INPUT_COLUMNS if c not in header]
                if missing:
                    logger.warning(f"{name} has no column(s) {', '.join(missing)}; they read as empty.")
                continue

            line_no += 1
            if line_no % 10000 == 0:
                logger.debug(f"Read {line_no} rows from {name}")
            yield InputRow.from_mapping(dict(zip(header, values)))
