"""
Enumerated value domains of the ENVI header: data type, byte order, interleave.

Each domain parses the raw header string through a plain function registered in
ENUM_PARSERS, so header fields can refer to a domain by its enum class.
"""
from enum import Enum
from typing import Callable, Dict, Type


class UnknownCodeError(ValueError):
    """Raised when a header value matches no member of an enumerated domain."""


class DataType(Enum):
    """ENVI numeric data types: (code, description, size in bytes)."""

    UINT8 = (1, "Byte: 8-bit unsigned integer", 1)
    UINT16 = (12, "Unsigned integer: 16-bit", 2)
    UINT32 = (13, "Unsigned long integer: 32-bit", 4)
    UINT64 = (15, "64-bit unsigned long integer (unsigned)", 8)
    INT16 = (2, "Integer: 16-bit signed integer", 2)
    INT32 = (3, "Long: 32-bit signed integer", 4)
    INT64 = (14, "64-bit long integer (signed)", 8)
    FLOAT32 = (4, "Floating-point: 32-bit single-precision", 4)
    FLOAT64 = (5, "Double-precision: 64-bit double-precision floating-point", 8)
    COMPLEX32 = (6, "Complex: Real-imaginary pair of single-precision floating-point", 8)
    COMPLEX64 = (9, "Double-precision complex: Real-imaginary pair of double precision floating-point", 16)

    def __init__(self, code: int, description: str, size: int):
        self.code = code
        self.description = description
        self.size = size

    @classmethod
    def from_code(cls, code: int) -> "DataType":
        for member in cls:
            if member.code == code:
                return member
        raise UnknownCodeError(f"Unknown data type: {code}")


class ByteOrder(Enum):
    """ENVI byte order: 0 = least significant byte first, 1 = most significant first."""

    LITTLE_ENDIAN = (0, "Intel: least significant byte first (LSF) data (DEC and MS-DOS systems)")
    BIG_ENDIAN = (1, "IEEE: most significant byte first (MSF) data (all other platforms)")

    def __init__(self, code: int, description: str):
        self.code = code
        self.description = description

    @property
    def prefix(self) -> str:
        """numpy byte-order character."""
        return "<" if self is ByteOrder.LITTLE_ENDIAN else ">"

    @classmethod
    def from_code(cls, code: int) -> "ByteOrder":
        for member in cls:
            if member.code == code:
                return member
        raise UnknownCodeError(f"Unknown byte order: {code}")


class Interleave(Enum):
    """Physical layout of the bands in the data file."""

    BAND_SEQUENTIAL = ("bsq", "Band Sequential")
    BAND_INTERLEAVED_BY_PIXEL = ("bip", "Band-interleaved-by-pixel")
    BAND_INTERLEAVED_BY_LINE = ("bil", "Band-interleaved-by-line")

    def __init__(self, code: str, description: str):
        self.code = code
        self.description = description

    @classmethod
    def from_code(cls, code: str) -> "Interleave":
        wanted = code.strip().lower()
        for member in cls:
            if member.code == wanted:
                return member
        raise UnknownCodeError(f"Unknown interleave: {code}")


def _parse_data_type(value: str) -> DataType:
    return DataType.from_code(int(value.strip(), 10))


def _parse_byte_order(value: str) -> ByteOrder:
    return ByteOrder.from_code(int(value.strip(), 10))


def _parse_interleave(value: str) -> Interleave:
    return Interleave.from_code(value)


# Domain -> parser. Add new enumerated header domains here.
ENUM_PARSERS: Dict[Type[Enum], Callable[[str], Enum]] = {
    DataType: _parse_data_type,
    ByteOrder: _parse_byte_order,
    Interleave: _parse_interleave,
}


def parse_enum(domain: Type[Enum], value: str) -> Enum:
    """Parse value into a member of domain; raise UnknownCodeError if nothing matches."""
    parser = ENUM_PARSERS.get(domain)
    if parser is None:
        raise UnknownCodeError(f"No parser registered for domain: {domain.__name__}")
    return parser(value)
