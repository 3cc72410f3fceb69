"""
Header field registry for ENVI .hdr files.

Each descriptor defines: the field name as written in the header, whether the
field is required, how its raw string is converted, and (for enumerated fields)
the domain it parses into.

To support a new field: add one entry to HEADER_FIELDS. The case-insensitive
name index is derived from the tuple.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Type

from .catalogs import ByteOrder, DataType, Interleave, parse_enum


class ValueType(Enum):
    """How a field's raw string value is converted."""

    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    ENUM = "enum"


@dataclass(frozen=True)
class FieldDescriptor:
    """A recognised header field."""

    name: str
    required: bool = False
    value_type: ValueType = ValueType.STRING
    enum_domain: Optional[Type[Enum]] = None

    def parse_value(self, value: str) -> Any:
        """Convert the raw header string; raises ValueError on malformed input."""
        if self.value_type is ValueType.STRING:
            return value
        if self.value_type is ValueType.BOOLEAN:
            return value.strip().lower() == "true"
        if self.value_type is ValueType.BYTE:
            number = int(value.strip(), 10)
            if not -128 <= number <= 127:
                raise ValueError(f"Value out of range for byte: {value}")
            return number
        if self.value_type is ValueType.INTEGER:
            return int(value.strip(), 10)
        if self.value_type in (ValueType.FLOAT, ValueType.DOUBLE):
            return float(value.strip())
        if self.value_type is ValueType.ENUM:
            if self.enum_domain is None:
                raise ValueError(f"No enum domain defined for: {self.name}")
            return parse_enum(self.enum_domain, value)
        raise ValueError(f"Unhandled header field value type: {self.value_type}")


def _required(name: str, value_type: ValueType, enum_domain: Optional[Type[Enum]] = None) -> FieldDescriptor:
    return FieldDescriptor(name, True, value_type, enum_domain)


# -----------------------------------------------------------------------------
# Fields used to decode the binary data
# -----------------------------------------------------------------------------
SAMPLES = _required("samples", ValueType.INTEGER)
LINES = _required("lines", ValueType.INTEGER)
BANDS = _required("bands", ValueType.INTEGER)
HEADER_OFFSET = _required("header offset", ValueType.INTEGER)
FILE_TYPE = _required("file type", ValueType.STRING)
DATA_TYPE = _required("data type", ValueType.ENUM, DataType)
BYTE_ORDER = _required("byte order", ValueType.ENUM, ByteOrder)
INTERLEAVE = _required("interleave", ValueType.ENUM, Interleave)

# -----------------------------------------------------------------------------
# Registry: every standard ENVI field, alphabetical. Optional fields keep
# their raw string value.
# -----------------------------------------------------------------------------
HEADER_FIELDS = (
    FieldDescriptor("acquisition time"),
    FieldDescriptor("band names"),
    BANDS,
    FieldDescriptor("bbl"),
    BYTE_ORDER,
    FieldDescriptor("class lookup"),
    FieldDescriptor("class names"),
    FieldDescriptor("classes"),
    FieldDescriptor("cloud cover"),
    FieldDescriptor("complex function"),
    FieldDescriptor("coordinate system string"),
    FieldDescriptor("data gain values"),
    FieldDescriptor("data ignore value"),
    FieldDescriptor("data offset values"),
    FieldDescriptor("data reflectance gain values"),
    FieldDescriptor("data reflectance offset values"),
    DATA_TYPE,
    FieldDescriptor("default bands"),
    FieldDescriptor("default stretch"),
    FieldDescriptor("dem band"),
    FieldDescriptor("dem file"),
    FieldDescriptor("description"),
    FILE_TYPE,
    FieldDescriptor("fwhm"),
    FieldDescriptor("geo points"),
    HEADER_OFFSET,
    INTERLEAVE,
    LINES,
    FieldDescriptor("map info"),
    FieldDescriptor("pixel size"),
    FieldDescriptor("projection info"),
    FieldDescriptor("read procedures"),
    FieldDescriptor("reflectance scale factor"),
    FieldDescriptor("rpc info"),
    SAMPLES,
    FieldDescriptor("security tag"),
    FieldDescriptor("sensor type"),
    FieldDescriptor("solar irradiance"),
    FieldDescriptor("spectra names"),
    FieldDescriptor("sun azimuth"),
    FieldDescriptor("sun elevation"),
    FieldDescriptor("timestamp"),
    FieldDescriptor("wavelength"),
    FieldDescriptor("wavelength units"),
    FieldDescriptor("x start"),
    FieldDescriptor("y start"),
    FieldDescriptor("z plot average"),
    FieldDescriptor("z plot range"),
    FieldDescriptor("z plot titles"),
)

REQUIRED_FIELDS = tuple(f for f in HEADER_FIELDS if f.required)

_FIELDS_BY_NAME: Dict[str, FieldDescriptor] = {f.name.lower(): f for f in HEADER_FIELDS}


def lookup_field(name: str) -> Optional[FieldDescriptor]:
    """Return the descriptor for name (case-insensitive), or None if not a standard field."""
    return _FIELDS_BY_NAME.get(name.strip().lower())
