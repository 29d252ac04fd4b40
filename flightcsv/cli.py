# Command-line front end: validate a flight record CSV and split it into valid/error files.
from __future__ import annotations

import argparse
import sys
from typing import Optional

import yaml

from .config import load_config_from_yaml, load_default_config
from .csv_parser import MalformedCSVError
from .io_utils import (
    SetupError,
    confirm_overwrite,
    prepare_output_paths,
    resolve_input_path,
)
from .logging_utils import get_logger, set_level
from .pipeline import process_file

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flightcsv",
        description=(
            "Validate flight records (id, carrier_code, flight_number, flight_date) "
            "and classify carrier codes as IATA or ICAO. Valid rows go to OUTPUT; "
            "invalid rows are copied unchanged to an error file next to OUTPUT."
        ),
    )
    parser.add_argument("input", help="Input CSV file with a header row.")
    parser.add_argument("output", help="Destination CSV for valid, classified rows.")
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Overwrite existing output files without asking.",
    )
    parser.add_argument(
        "--config",
        help="Optional YAML config (defaults to config.yaml in the working directory).",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)

    try:
        cfg = load_config_from_yaml(args.config) if args.config else load_default_config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config: {e}")
        return 1
    set_level(cfg.log_level)

    try:
        input_path = resolve_input_path(args.input)
        output_path, error_path = prepare_output_paths(input_path, args.output, cfg.error_file_name)
        if not args.yes and not confirm_overwrite([output_path, error_path]):
            raise SetupError("Existing output not overwritten. Nothing was written.")
    except SetupError as e:
        logger.error(str(e))
        return 1

    try:
        process_file(input_path, output_path, error_path, cfg)
    except MalformedCSVError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O failure: {e}")
        return 1

    logger.info("Processing complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
