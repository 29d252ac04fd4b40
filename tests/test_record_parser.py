import pytest

from flightcsv.csv_schema import CarrierType
from flightcsv.record_parser import (
    InputRow,
    OutcomeKind,
    classify,
    classify_carrier,
    parse_flight_date,
)


def _row(id="1", carrier_code="AA", flight_number="100", flight_date="2016-01-05"):
    return {
        "id": id,
        "carrier_code": carrier_code,
        "flight_number": flight_number,
        "flight_date": flight_date,
    }


def test_iata_code_is_valid():
    outcome = classify(_row())
    assert outcome.kind is OutcomeKind.VALID
    assert outcome.record.carrier_type is CarrierType.IATA
    assert outcome.record.as_fields() == ["1", "IATA", "AA", "100", "2016-01-05"]


def test_icao_code_is_valid():
    outcome = classify(_row(id="2", carrier_code="DLH", flight_number="200", flight_date="2016-01-06"))
    assert outcome.kind is OutcomeKind.VALID
    assert outcome.record.as_fields() == ["2", "ICAO", "DLH", "200", "2016-01-06"]


def test_iata_code_with_asterisk():
    outcome = classify(_row(id="5", carrier_code="A1*", flight_number="500", flight_date="2016-02-01"))
    assert outcome.kind is OutcomeKind.VALID
    assert outcome.record.carrier_type is CarrierType.IATA


def test_unknown_code_shape_is_invalid():
    outcome = classify(_row(id="3", carrier_code="1234", flight_number="300", flight_date="2016-01-07"))
    assert outcome.kind is OutcomeKind.INVALID
    assert outcome.raw.as_fields() == ["3", "1234", "300", "2016-01-07"]


def test_impossible_date_is_invalid():
    outcome = classify(_row(id="4", flight_number="400", flight_date="2016-13-40"))
    assert outcome.kind is OutcomeKind.INVALID
    assert outcome.raw.as_fields() == ["4", "AA", "400", "2016-13-40"]


@pytest.mark.parametrize("row", [{}, _row(None, None, None, None), _row("", "", "", "")])
def test_blank_rows_are_empty(row):
    outcome = classify(row)
    assert outcome.kind is OutcomeKind.EMPTY
    assert outcome.record is None and outcome.raw is None


@pytest.mark.parametrize("missing", ["id", "carrier_code", "flight_number", "flight_date"])
def test_any_missing_field_makes_row_invalid(missing):
    row = _row()
    row[missing] = None
    outcome = classify(row)
    assert outcome.kind is OutcomeKind.INVALID
    assert getattr(outcome.raw, missing) is None


def test_classify_is_idempotent():
    row = InputRow.from_mapping(_row(carrier_code="ZZZZ"))
    assert classify(row) == classify(row)


def test_valid_date_is_returned_verbatim():
    outcome = classify(_row(flight_date="2020-02-29"))
    assert outcome.record.date == "2020-02-29"


@pytest.mark.parametrize("value", ["2016-01-05", "2020-02-29", "0001-01-01", "9999-12-31"])
def test_canonical_dates_parse(value):
    assert parse_flight_date(value) == value


@pytest.mark.parametrize("value", [
    "2016-1-5",      # not zero padded
    "2016-01-5",
    "2019-02-29",    # not a leap year
    "2016-04-31",
    "2016/01/05",
    "20160105",
    "2016-01-05 ",
    "2016-01-05T00:00",
    "",
    None,
])
def test_non_canonical_dates_rejected(value):
    assert parse_flight_date(value) is None


@pytest.mark.parametrize("code", ["AA", "U2", "9W", "12", "A1*", "ZZ*"])
def test_iata_shapes(code):
    assert classify_carrier(code) is CarrierType.IATA


@pytest.mark.parametrize("code", ["DLH", "BAW", "AAL"])
def test_icao_shapes(code):
    assert classify_carrier(code) is CarrierType.ICAO


@pytest.mark.parametrize("code", ["A", "aa", "AA**", "*A", "DL1", "dlh", "ABC*", "ABCD", " AA", "ÄA", None])
def test_rejected_code_shapes(code):
    assert classify_carrier(code) is None


def test_unrecognized_fields_are_ignored():
    row = _row()
    row["tail_number"] = "N12345"
    assert classify(row).kind is OutcomeKind.VALID


def test_non_text_cells_count_as_missing():
    # pandas pads short rows with NaN
    row = InputRow.from_mapping({"id": "7", "carrier_code": "AA", "flight_number": float("nan")})
    assert row.flight_number is None
    assert row.flight_date is None
    assert classify(row).kind is OutcomeKind.INVALID
