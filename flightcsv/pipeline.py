from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .config import Config
from .csv_parser import iter_rows
from .csv_schema import ERROR_OUTPUT_COLUMNS, VALID_OUTPUT_COLUMNS
from .csv_writer import CsvSink
from .logging_utils import get_logger
from .record_parser import InputRow, OutcomeKind, classify

logger = get_logger(__name__)


@dataclass
class RunSummary:
    total: int = 0
    valid: int = 0
    invalid: int = 0
    empty: int = 0


def run(rows: Iterable[InputRow], valid_sink, error_sink) -> RunSummary:
    """Classify `rows` in order and route each to its sink.

    Both sinks get their header first. Valid rows go to `valid_sink` with the
    carrier type added, invalid rows go to `error_sink` as read, empty rows are
    dropped. Sinks need `write_header()`, `write(fields)` and `flush()`.

    A MalformedCSVError from `rows` propagates; both sinks are flushed first so
    every row classified before it is already written.
    """
    summary = RunSummary()
    valid_sink.write_header()
    error_sink.write_header()
    try:
        for row in rows:
            summary.total += 1
            outcome = classify(row)
            if outcome.kind is OutcomeKind.VALID:
                valid_sink.write(outcome.record.as_fields())
                summary.valid += 1
            elif outcome.kind is OutcomeKind.INVALID:
                error_sink.write(outcome.raw.as_fields())
                summary.invalid += 1
            else:
                summary.empty += 1
    finally:
        valid_sink.flush()
        error_sink.flush()
    return summary


def process_file(
    input_path: Path,
    output_path: Path,
    error_path: Path,
    config: Optional[Config] = None,
) -> RunSummary:
    """Open the input and both outputs, run the pipeline, close everything."""
    cfg = config or Config()
    logger.info(f"Reading flights from: {input_path}")
    with open(input_path, "r", encoding=cfg.encoding, newline="") as src, \
            open(output_path, "w", encoding=cfg.encoding, newline="") as out, \
            open(error_path, "w", encoding=cfg.encoding, newline="") as err:
        summary = run(
            iter_rows(src, encoding=cfg.encoding),
            CsvSink(out, VALID_OUTPUT_COLUMNS, flush_every=cfg.flush_every),
            CsvSink(err, ERROR_OUTPUT_COLUMNS, flush_every=cfg.flush_every),
        )
    logger.info(f"Valid rows written to: {output_path}")
    logger.info(f"Invalid rows written to: {error_path}")
    logger.info(
        f"Processed {summary.total} rows: {summary.valid} valid, "
        f"{summary.invalid} invalid, {summary.empty} empty."
    )
    return summary
