"""
Tests for the typed datasets: construction checks and band decoding.
"""
import logging
import threading

import numpy as np
import pytest

from envi_reader.catalogs import DataType
from envi_reader.datasets import (
    DATASET_CLASSES,
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
from envi_reader.layout import RasterSizeError


def test_uint8_end_to_end(make_header):
    """2x2x1 BSQ bytes decode row by row."""
    dataset = UInt8Dataset(make_header(2, 2, 1, data_type=1), bytes([10, 20, 30, 40]))
    band = dataset.get_band(0)
    assert band.tolist() == [[10, 20], [30, 40]]
    assert band.dtype == np.uint16


@pytest.mark.parametrize("byte_order", [0, 1])
def test_uint8_ignores_byte_order(make_header, byte_order):
    raw = bytes([0, 127, 128, 255])
    dataset = UInt8Dataset(make_header(4, 1, 1, data_type=1, byte_order=byte_order), raw)
    assert dataset.get_band(0).tolist() == [[0, 127, 128, 255]]


def test_int16_byte_order_swaps_bytes(make_header):
    raw = bytes([0x01, 0x02])
    little = Int16Dataset(make_header(1, 1, 1, data_type=2, byte_order=0), raw).get_band(0)
    big = Int16Dataset(make_header(1, 1, 1, data_type=2, byte_order=1), raw).get_band(0)
    assert little[0, 0] == 0x0201
    assert big[0, 0] == 0x0102
    assert int(little[0, 0]) == int(np.int16(big[0, 0]).byteswap())


def test_int16_negative_values(make_header):
    raw = np.array([-1, -32768, 32767], dtype=">i2").tobytes()
    dataset = Int16Dataset(make_header(3, 1, 1, data_type=2, byte_order=1), raw)
    assert dataset.get_band(0).tolist() == [[-1, -32768, 32767]]


def test_uint16_little_endian(make_header):
    raw = bytes([0x01, 0x02, 0xFF, 0xFF])
    band = UInt16Dataset(make_header(2, 1, 1, data_type=12, byte_order=0), raw).get_band(0)
    assert band.tolist() == [[513, 65535]]
    assert band.dtype == np.int32


def test_uint16_big_endian_not_supported(make_header):
    dataset = UInt16Dataset(make_header(1, 1, 1, data_type=12, byte_order=1), bytes(2))
    with pytest.raises(UnsupportedByteOrderError, match="Not supported: BIG_ENDIAN"):
        dataset.get_band(0)


@pytest.mark.parametrize(
    "cls, data_type, dtype",
    [
        (Int32Dataset, 3, "i4"),
        (Int64Dataset, 14, "i8"),
        (Float32Dataset, 4, "f4"),
        (Float64Dataset, 5, "f8"),
    ],
)
@pytest.mark.parametrize("byte_order, prefix", [(0, "<"), (1, ">")])
def test_wide_types_both_byte_orders(make_header, cls, data_type, dtype, byte_order, prefix):
    values = np.array([[-3, 0, 7], [1000000, -5, 2]], dtype=prefix + dtype)
    header = make_header(3, 2, 1, data_type=data_type, byte_order=byte_order)
    band = cls(header, values.tobytes()).get_band(0)
    assert band.shape == (2, 3)
    np.testing.assert_array_equal(band, values.astype(dtype))


def test_float32_result_type(make_header):
    raw = np.array([1.5, -2.25], dtype="<f4").tobytes()
    band = Float32Dataset(make_header(2, 1, 1, data_type=4), raw).get_band(0)
    assert band.dtype == np.float32
    assert band.tolist() == [[1.5, -2.25]]


@pytest.mark.parametrize("interleave, transpose", [("bsq", None), ("bil", (1, 0, 2)), ("bip", (1, 2, 0))])
def test_multiband_decoding_per_interleave(make_header, interleave, transpose):
    cube = np.arange(2 * 3 * 4, dtype="<i2").reshape(2, 3, 4) - 10
    physical = cube if transpose is None else cube.transpose(*transpose)
    header = make_header(4, 3, 2, data_type=2, interleave=interleave)
    dataset = Int16Dataset(header, physical.tobytes())
    for band in range(2):
        np.testing.assert_array_equal(dataset.get_band(band), cube[band])
    assert dataset.to_sequential() == cube.tobytes()


def test_band_out_of_range(make_header):
    dataset = UInt8Dataset(make_header(2, 1, 2, data_type=1), bytes(4))
    with pytest.raises(IndexError):
        dataset.get_band(2)
    with pytest.raises(IndexError):
        dataset.to_band(-1)


def test_data_type_mismatch(make_header):
    with pytest.raises(DataTypeMismatchError, match="Expected data type FLOAT32 but found UINT8"):
        Float32Dataset(make_header(1, 1, 1, data_type=1), bytes(1))


def test_missing_header_or_raw(make_header):
    with pytest.raises(ValueError, match="Header cannot be None"):
        UInt8Dataset(None, bytes(1))
    with pytest.raises(ValueError, match="Raw data cannot be None"):
        UInt8Dataset(make_header(1, 1, 1), None)


def test_size_mismatch_is_reported_not_fatal(make_header, caplog):
    caplog.set_level(logging.WARNING)
    dataset = UInt8Dataset(make_header(2, 2, 1), bytes([1, 2, 3, 4, 5]), quiet=False)
    assert "Data size != expected size: 5 != 4" in caplog.text
    assert dataset.get_band(0).tolist() == [[1, 2], [3, 4]]
    assert len(dataset.to_sequential()) == 5


def test_size_mismatch_quiet(make_header, caplog):
    caplog.set_level(logging.WARNING)
    UInt8Dataset(make_header(2, 2, 1), bytes(5), quiet=True)
    assert caplog.records == []


def test_short_buffer_fails_on_read(make_header):
    dataset = UInt8Dataset(make_header(2, 2, 1), bytes(3))
    with pytest.raises(RasterSizeError):
        dataset.get_band(0)


def test_lookup_eager_and_sequential_cached(make_header):
    dataset = UInt8Dataset(make_header(2, 1, 2, interleave="bip"), bytes([1, 3, 2, 4]))
    assert dataset.lookup.tolist() == [0, 2, 1, 3]
    lookup = dataset.lookup
    dataset._init_lookup()
    assert dataset.lookup is lookup
    first = dataset.to_sequential()
    assert first == bytes([1, 2, 3, 4])
    assert dataset.to_sequential() is first
    assert dataset.to_raw() == bytes([1, 3, 2, 4])


def test_sequential_shared_across_threads(make_header):
    dataset = UInt8Dataset(make_header(64, 64, 3, interleave="bil"), bytes(range(256)) * 48)
    results = []
    threads = [threading.Thread(target=lambda: results.append(dataset.to_sequential())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_create_dataset_dispatch(make_header):
    assert set(DATASET_CLASSES) == {
        DataType.UINT8, DataType.INT16, DataType.UINT16, DataType.INT32,
        DataType.INT64, DataType.FLOAT32, DataType.FLOAT64,
    }
    dataset = create_dataset(make_header(1, 1, 1, data_type=5), bytes(8))
    assert isinstance(dataset, Float64Dataset)
    assert dataset.pixel_size == 8


@pytest.mark.parametrize("code", [6, 9, 13, 15])
def test_create_dataset_unsupported(make_header, code):
    with pytest.raises(UnsupportedDataTypeError, match="Unsupported data type"):
        create_dataset(make_header(1, 1, 1, data_type=code), bytes(16))


def test_base_class_decodes_nothing(make_header):
    with pytest.raises(NotImplementedError):
        RasterDataset(make_header(1, 1, 1), bytes(1))


def test_band_to_string_and_str(make_header):
    dataset = UInt8Dataset(make_header(2, 2, 1), bytes([10, 20, 30, 40]))
    assert dataset.band_to_string(0) == "[[10,20],[30,40]]"
    assert dataset.band_to_string(0, max_chars=10) == "[[10,20..."
    assert str(dataset) == str(dataset.header)
    assert "samples = 2" in str(dataset)


def test_get_statistics(make_header):
    stats = UInt8Dataset(make_header(2, 2, 1), bytes([10, 20, 30, 40])).get_statistics(0)
    assert stats.get_range() == (10.0, 40.0)
    assert stats.mean == pytest.approx(25.0)
