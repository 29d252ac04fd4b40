"""
CSV schema for flight record files
----------------------------------
Canonical column names of the input file and of the two output files.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class CarrierType(str, Enum):
    IATA = "IATA"   # 2 letters/digits, optional trailing '*'
    ICAO = "ICAO"   # 3 letters


@dataclass(frozen=True)
class FlightSchema:
    id_col: str = "id"
    carrier_code_col: str = "carrier_code"
    flight_number_col: str = "flight_number"
    flight_date_col: str = "flight_date"

    # Valid output only
    carrier_type_col: str = "carrier_code_type"
    date_col: str = "date"


_SCHEMA = FlightSchema()

# Recognized input columns; anything else in the file is ignored
INPUT_COLUMNS: List[str] = [
    _SCHEMA.id_col,
    _SCHEMA.carrier_code_col,
    _SCHEMA.flight_number_col,
    _SCHEMA.flight_date_col,
]

VALID_OUTPUT_COLUMNS: List[str] = [
    _SCHEMA.id_col,
    _SCHEMA.carrier_type_col,
    _SCHEMA.carrier_code_col,
    _SCHEMA.flight_number_col,
    _SCHEMA.date_col,
]

# Rejected rows are echoed in input form
ERROR_OUTPUT_COLUMNS: List[str] = list(INPUT_COLUMNS)

# ISO 8601 calendar date, the only accepted flight_date form
FLIGHT_DATE_FORMAT: str = "%Y-%m-%d"
