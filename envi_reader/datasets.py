"""Typed ENVI datasets: reorder the raw buffer to band-major order and decode bands to numpy arrays."""

import logging
import threading
from typing import Dict, Optional, Tuple, Type

import numpy as np

from . import layout
from .catalogs import ByteOrder, DataType
from .models import BandStatistics, Header
from .utilities import MAX_CHARS, array_to_string
from .visualization import gray_pixels, rgb_pixels

logger = logging.getLogger(__name__)


class DataTypeMismatchError(ValueError):
    """Raised when the header's data type differs from the one a dataset class decodes."""


class UnsupportedByteOrderError(ValueError):
    """Raised when a dataset class cannot decode the header's byte order."""


class UnsupportedDataTypeError(ValueError):
    """Raised for data types that are recognised but not decoded."""


class RasterDataset:
    """Header plus raw data buffer of one ENVI file pair.

    Subclasses set the data type they decode, the numpy element type read from
    the buffer and the type returned by get_band.
    """

    DATA_TYPE: Optional[DataType] = None
    ELEMENT: str = ""
    RESULT: type = np.float64
    BYTE_ORDERS: Tuple[ByteOrder, ...] = (ByteOrder.LITTLE_ENDIAN, ByteOrder.BIG_ENDIAN)

    def __init__(self, header: Header, raw: bytes, quiet: bool = True):
        if header is None:
            raise ValueError("Header cannot be None!")
        if raw is None:
            raise ValueError("Raw data cannot be None!")
        if header.data_type is not self.expected_data_type():
            raise DataTypeMismatchError(
                f"Expected data type {self.expected_data_type().name} "
                f"but found {header.data_type.name} in header!"
            )
        self.header = header
        self.raw = bytes(raw)
        self.quiet = quiet
        self.samples = header.samples
        self.lines = header.lines
        self.bands = header.bands
        self.data_type = header.data_type
        self.byte_order = header.byte_order
        self.interleave = header.interleave
        self.pixel_size = self.data_type.size
        self._sequential = None
        self._lock = threading.Lock()
        self.lookup = None
        self._check()
        self._init_lookup()

    @classmethod
    def expected_data_type(cls) -> DataType:
        if cls.DATA_TYPE is None:
            raise NotImplementedError(f"{cls.__name__} does not decode any data type")
        return cls.DATA_TYPE

    def _check(self):
        if self.quiet:
            return
        expected = layout.expected_size(self.samples, self.lines, self.bands, self.pixel_size)
        if expected != len(self.raw):
            logger.warning("Data size != expected size: %d != %d", len(self.raw), expected)

    def _init_lookup(self):
        if self.lookup is not None:
            return
        self.lookup = layout.build_lookup(
            self.samples, self.lines, self.bands, self.pixel_size, self.interleave
        )

    def to_raw(self) -> bytes:
        return self.raw

    def to_sequential(self) -> bytes:
        """Raw buffer reordered band by band (computed once)."""
        with self._lock:
            if self._sequential is None:
                self._init_lookup()
                self._sequential = layout.reorder(self.raw, self.lookup, self.pixel_size)
            return self._sequential

    def to_band(self, band: int) -> bytes:
        """Raw bytes of one band in line/sample order."""
        return layout.band_slice(
            self.to_sequential(), band, self.samples, self.lines, self.bands, self.pixel_size
        )

    def get_band(self, band: int) -> np.ndarray:
        """Decode one band into a (lines, samples) array."""
        data = self.to_band(band)
        if self.byte_order not in self.BYTE_ORDERS:
            raise UnsupportedByteOrderError(f"Not supported: {self.byte_order.name}")
        element = np.dtype(self.byte_order.prefix + self.ELEMENT)
        values = np.frombuffer(data, dtype=element)
        return values.astype(self.RESULT).reshape(self.lines, self.samples)

    def get_statistics(self, band: int) -> BandStatistics:
        return BandStatistics.from_array(band, self.get_band(band))

    def to_gray(self, band: int) -> np.ndarray:
        """Flat uint8 grayscale pixels of one band, row-major."""
        return gray_pixels(self.get_band(band))

    def to_rgb(self, r: int, g: int, b: int) -> np.ndarray:
        """Flat uint32 pixels (0xRRGGBB) from three bands, each channel scaled on its own."""
        return rgb_pixels(self.get_band(r), self.get_band(g), self.get_band(b))

    def band_to_string(self, band: int, max_chars: int = MAX_CHARS) -> str:
        return array_to_string(self.get_band(band), max_chars)

    def __str__(self):
        return str(self.header)


class UInt8Dataset(RasterDataset):
    """8-bit unsigned bytes; byte order does not apply."""

    DATA_TYPE = DataType.UINT8
    ELEMENT = "u1"
    RESULT = np.uint16


class Int16Dataset(RasterDataset):
    DATA_TYPE = DataType.INT16
    ELEMENT = "i2"
    RESULT = np.int16


class UInt16Dataset(RasterDataset):
    """16-bit unsigned integers; only little-endian data is decoded."""

    DATA_TYPE = DataType.UINT16
    ELEMENT = "u2"
    RESULT = np.int32
    BYTE_ORDERS = (ByteOrder.LITTLE_ENDIAN,)


class Int32Dataset(RasterDataset):
    DATA_TYPE = DataType.INT32
    ELEMENT = "i4"
    RESULT = np.int64


class Int64Dataset(RasterDataset):
    DATA_TYPE = DataType.INT64
    ELEMENT = "i8"
    RESULT = np.int64


class Float32Dataset(RasterDataset):
    DATA_TYPE = DataType.FLOAT32
    ELEMENT = "f4"
    RESULT = np.float32


class Float64Dataset(RasterDataset):
    DATA_TYPE = DataType.FLOAT64
    ELEMENT = "f8"
    RESULT = np.float64


DATASET_CLASSES: Dict[DataType, Type[RasterDataset]] = {
    cls.DATA_TYPE: cls
    for cls in (
        UInt8Dataset,
        Int16Dataset,
        UInt16Dataset,
        Int32Dataset,
        Int64Dataset,
        Float32Dataset,
        Float64Dataset,
    )
}


def create_dataset(header: Header, raw: bytes, quiet: bool = True) -> RasterDataset:
    """Instantiate the dataset class matching the header's data type."""
    cls = DATASET_CLASSES.get(header.data_type)
    if cls is None:
        raise UnsupportedDataTypeError(f"Unsupported data type: {header.data_type.name}")
    return cls(header, raw, quiet)
