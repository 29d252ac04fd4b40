from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional

from .csv_schema import CarrierType, FlightSchema, FLIGHT_DATE_FORMAT


_IATA_RE = re.compile(r"[A-Z0-9]{2}\*?")
_ICAO_RE = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True)
class InputRow:
    """One input line; absent or empty cells are None."""
    id: Optional[str] = None
    carrier_code: Optional[str] = None
    flight_number: Optional[str] = None
    flight_date: Optional[str] = None

    @classmethod
    def from_mapping(cls, fields: Mapping[str, object]) -> "InputRow":
        schema = FlightSchema()

        def get(key: str) -> Optional[str]:
            value = fields.get(key)
            # pandas fills short rows with NaN; only real text counts
            if isinstance(value, str) and value != "":
                return value
            return None

        return cls(
            id=get(schema.id_col),
            carrier_code=get(schema.carrier_code_col),
            flight_number=get(schema.flight_number_col),
            flight_date=get(schema.flight_date_col),
        )

    def is_empty(self) -> bool:
        return (
            self.id is None
            and self.carrier_code is None
            and self.flight_number is None
            and self.flight_date is None
        )


@dataclass(frozen=True)
class ClassifiedRecord:
    id: str
    carrier_type: CarrierType
    carrier_code: str
    flight_number: str
    date: str

    def as_fields(self) -> list[str]:
        return [self.id, self.carrier_type.value, self.carrier_code, self.flight_number, self.date]


@dataclass(frozen=True)
class RawRecord:
    id: Optional[str]
    carrier_code: Optional[str]
    flight_number: Optional[str]
    flight_date: Optional[str]

    def as_fields(self) -> list[Optional[str]]:
        return [self.id, self.carrier_code, self.flight_number, self.flight_date]


class OutcomeKind(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    EMPTY = "empty"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    record: Optional[ClassifiedRecord] = None   # set for VALID
    raw: Optional[RawRecord] = None             # set for INVALID

    @classmethod
    def valid(cls, record: ClassifiedRecord) -> "Outcome":
        return cls(OutcomeKind.VALID, record=record)

    @classmethod
    def invalid(cls, raw: RawRecord) -> "Outcome":
        return cls(OutcomeKind.INVALID, raw=raw)

    @classmethod
    def empty(cls) -> "Outcome":
        return cls(OutcomeKind.EMPTY)


def parse_flight_date(value: Optional[str]) -> Optional[str]:
    """Return `value` if it is a canonical YYYY-MM-DD calendar date, else None.

    strptime alone accepts unpadded parts such as 2016-1-5, so the parsed date
    must format back to exactly the input string.
    """
    if value is None:
        return None
    try:
        parsed = datetime.strptime(value, FLIGHT_DATE_FORMAT).date()
    except ValueError:
        return None
    if parsed.isoformat() != value:
        return None
    return value


def is_iata_code(code: str) -> bool:
    return _IATA_RE.fullmatch(code) is not None


def is_icao_code(code: str) -> bool:
    return _ICAO_RE.fullmatch(code) is not None


def classify_carrier(code: Optional[str]) -> Optional[CarrierType]:
    """IATA is checked first; the two shapes never overlap."""
    if code is None:
        return None
    if is_iata_code(code):
        return CarrierType.IATA
    if is_icao_code(code):
        return CarrierType.ICAO
    return None


def classify(row: InputRow | Mapping[str, object]) -> Outcome:
    """Classify one input row as valid, invalid or empty. Never raises for bad data."""
    if not isinstance(row, InputRow):
        row = InputRow.from_mapping(row)

    date = parse_flight_date(row.flight_date)
    carrier_type = classify_carrier(row.carrier_code)

    if (
        row.id is not None
        and carrier_type is not None
        and row.carrier_code is not None
        and row.flight_number is not None
        and date is not None
    ):
        return Outcome.valid(ClassifiedRecord(
            id=row.id,
            carrier_type=carrier_type,
            carrier_code=row.carrier_code,
            flight_number=row.flight_number,
            date=date,
        ))

    if row.is_empty():
        return Outcome.empty()

    return Outcome.invalid(RawRecord(
        id=row.id,
        carrier_code=row.carrier_code,
        flight_number=row.flight_number,
        flight_date=row.flight_date,
    ))
