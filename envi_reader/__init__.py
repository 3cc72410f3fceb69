"""
envi_reader - Python library for reading ENVI raster files (.hdr + binary data)

This library parses ENVI header files and decodes the accompanying raw
data file (BSQ, BIL or BIP interleave) into one numpy array per band.

Main usage:
    import envi_reader

    # Load a dataset through its header
    dataset = envi_reader.envi_load("scene.hdr")

    # Access the data
    band = dataset.get_band(0)
    print(f"Band mean: {band.mean():.2f}")
"""

__version__ = "0.1.0"

from .catalogs import ByteOrder, DataType, Interleave
from .datasets import (
    DataTypeMismatchError,
    Float32Dataset,
    Float64Dataset,
    Int16Dataset,
    Int32Dataset,
    Int64Dataset,
    RasterDataset,
    UInt8Dataset,
    UInt16Dataset,
    UnsupportedByteOrderError,
    UnsupportedDataTypeError,
    create_dataset,
)
from .models import BandStatistics, Header, InvalidDimensionError, MissingFieldError
from .parsers import HeaderParser, parse_header
from .reader import DEFAULT_EXTENSIONS, ENVIReader, envi_load, find_data_file, read_dataset, read_header
from .visualization import save_gray, save_rgb

__all__ = [
    "envi_load",  # Main entry point
    "ENVIReader",
    "read_header",
    "read_dataset",
    "find_data_file",
    "DEFAULT_EXTENSIONS",
    "parse_header",
    "HeaderParser",
    "Header",
    "BandStatistics",
    "DataType",
    "ByteOrder",
    "Interleave",
    "RasterDataset",
    "UInt8Dataset",
    "Int16Dataset",
    "UInt16Dataset",
    "Int32Dataset",
    "Int64Dataset",
    "Float32Dataset",
    "Float64Dataset",
    "create_dataset",
    "save_gray",
    "save_rgb",
    "InvalidDimensionError",
    "MissingFieldError",
    "DataTypeMismatchError",
    "UnsupportedByteOrderError",
    "UnsupportedDataTypeError",
]
