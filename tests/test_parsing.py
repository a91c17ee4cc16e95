import pytest

from mrclam_toolkit.core_logic.errors import DatasetFileNotFoundError, RecordParseError
from mrclam_toolkit.core_logic.parsing import iter_records, parse_record
from mrclam_toolkit.core_logic.structures import LANDMARK_FIELDS, MEASUREMENT_FIELDS


def test_comment_line_is_discarded():
    assert parse_record("# Time [s]\tSubject #", MEASUREMENT_FIELDS) is None


def test_blank_line_is_discarded():
    assert parse_record("   \n", MEASUREMENT_FIELDS) is None


def test_fields_converted_in_schema_order():
    values = parse_record("10.5\t 36 \t3.25\t-0.5\n", MEASUREMENT_FIELDS)
    assert values == (10.5, 36, 3.25, -0.5)
    assert isinstance(values[1], int)
    assert isinstance(values[0], float)


def test_integer_field_accepts_integral_real():
    assert parse_record("1.0\t2\t3\t0.1\t0.1", LANDMARK_FIELDS)[0] == 1


def test_integer_field_rejects_fraction():
    with pytest.raises(RecordParseError):
        parse_record("1.5\t2\t3\t0.1\t0.1", LANDMARK_FIELDS)


def test_extra_fields_are_ignored():
    assert parse_record("1\t2\t3\t4\t5\t6\t7", LANDMARK_FIELDS) == (1, 2.0, 3.0, 4.0, 5.0)


def test_missing_field_raises():
    with pytest.raises(RecordParseError, match="bearing"):
        parse_record("10.0\t36\t3.2", MEASUREMENT_FIELDS)


def test_non_numeric_field_raises():
    with pytest.raises(RecordParseError, match="range"):
        parse_record("10.0\t36\tfar\t0.1", MEASUREMENT_FIELDS)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_record("abc\t36\t1\t0.1", MEASUREMENT_FIELDS)


def test_iter_records_reports_line_number(tmp_path):
    path = tmp_path / 'Robot1_Measurement.dat'
    path.write_text("# header\n10.0\t36\t3.2\t0.1\n10.1\t36\n")

    records = iter_records(path, MEASUREMENT_FIELDS)
    assert next(records) == (2, (10.0, 36, 3.2, 0.1))
    with pytest.raises(RecordParseError) as excinfo:
        next(records)
    assert excinfo.value.line_number == 3
    assert excinfo.value.path == str(path)


def test_iter_records_missing_file(tmp_path):
    with pytest.raises(DatasetFileNotFoundError):
        list(iter_records(tmp_path / 'missing.dat', MEASUREMENT_FIELDS))


def test_iter_records_rejects_invalid_utf8(tmp_path):
    path = tmp_path / 'Robot1_Measurement.dat'
    path.write_bytes(b"# header\n10.0\t36\t3.2\t0.1\n\xff\xfe\t1\t2\t3\n")

    with pytest.raises(RecordParseError) as excinfo:
        list(iter_records(path, MEASUREMENT_FIELDS))
    assert excinfo.value.line_number == 3
