"""
Tests for the enumerated catalogs and the header field registry.
"""
import pytest

from envi_reader import fields
from envi_reader.catalogs import ByteOrder, DataType, Interleave, UnknownCodeError, parse_enum
from envi_reader.fields import FieldDescriptor, ValueType, lookup_field


def test_data_type_catalog_sizes():
    """Every data type code maps to the published byte size."""
    expected = {1: 1, 2: 2, 3: 4, 4: 4, 5: 8, 6: 8, 9: 16, 12: 2, 13: 4, 14: 8, 15: 8}
    assert len(DataType) == 11
    for code, size in expected.items():
        assert DataType.from_code(code).size == size


def test_data_type_unknown_code():
    with pytest.raises(UnknownCodeError, match="Unknown data type"):
        DataType.from_code(7)


def test_byte_order_codes():
    assert ByteOrder.from_code(0) is ByteOrder.LITTLE_ENDIAN
    assert ByteOrder.from_code(1) is ByteOrder.BIG_ENDIAN
    with pytest.raises(UnknownCodeError):
        ByteOrder.from_code(2)


def test_interleave_codes_case_insensitive():
    assert Interleave.from_code("bsq") is Interleave.BAND_SEQUENTIAL
    assert Interleave.from_code("BIL") is Interleave.BAND_INTERLEAVED_BY_LINE
    assert Interleave.from_code(" Bip ") is Interleave.BAND_INTERLEAVED_BY_PIXEL
    with pytest.raises(UnknownCodeError, match="Unknown interleave"):
        Interleave.from_code("bsx")


def test_parse_enum_dispatch():
    assert parse_enum(DataType, "4") is DataType.FLOAT32
    assert parse_enum(ByteOrder, "1") is ByteOrder.BIG_ENDIAN
    assert parse_enum(Interleave, "bil") is Interleave.BAND_INTERLEAVED_BY_LINE


def test_parse_enum_rejects_non_numeric_code():
    with pytest.raises(ValueError):
        parse_enum(DataType, "float")


def test_lookup_field_case_insensitive():
    """Field names are matched ignoring case and surrounding blanks."""
    assert lookup_field("Data Type") is fields.DATA_TYPE
    assert lookup_field(" SAMPLES ") is fields.SAMPLES
    assert lookup_field("wavelength units").name == "wavelength units"
    assert lookup_field("not a field") is None


def test_registry_required_fields():
    names = {f.name for f in fields.REQUIRED_FIELDS}
    assert names == {
        "bands", "byte order", "data type", "file type",
        "header offset", "interleave", "lines", "samples",
    }
    assert len(fields.HEADER_FIELDS) == 49
    assert len({f.name for f in fields.HEADER_FIELDS}) == len(fields.HEADER_FIELDS)


@pytest.mark.parametrize(
    "value_type, raw, expected",
    [
        (ValueType.STRING, "ENVI Standard", "ENVI Standard"),
        (ValueType.BOOLEAN, "TRUE", True),
        (ValueType.BOOLEAN, "no", False),
        (ValueType.BYTE, "-12", -12),
        (ValueType.INTEGER, "512", 512),
        (ValueType.FLOAT, "0.5", 0.5),
        (ValueType.DOUBLE, "1e-3", 0.001),
    ],
)
def test_parse_value_by_type(value_type, raw, expected):
    descriptor = FieldDescriptor("x", False, value_type)
    assert descriptor.parse_value(raw) == expected


def test_parse_value_failures():
    with pytest.raises(ValueError):
        FieldDescriptor("x", False, ValueType.INTEGER).parse_value("12.5")
    with pytest.raises(ValueError, match="out of range"):
        FieldDescriptor("x", False, ValueType.BYTE).parse_value("300")
    with pytest.raises(ValueError, match="No enum domain"):
        FieldDescriptor("x", False, ValueType.ENUM).parse_value("1")


def test_parse_value_enum_field():
    assert fields.INTERLEAVE.parse_value("bip") is Interleave.BAND_INTERLEAVED_BY_PIXEL
    assert fields.DATA_TYPE.parse_value("12") is DataType.UINT16
