"""
Band layout reordering: map BSQ/BIL/BIP byte buffers onto band-major order.

Canonical index i runs over band, line, sample (outer to inner):
b = i // (L*S), l = (i // S) % L, s = i % S. The lookup table holds, per
canonical index, the byte offset of that pixel in the physical buffer.
"""

import numpy as np

from .catalogs import Interleave


class UnsupportedInterleaveError(ValueError):
    """Raised for an interleave the layout engine cannot map."""


class RasterSizeError(ValueError):
    """Raised when a data buffer is too short for the header geometry."""


def expected_size(samples: int, lines: int, bands: int, pixel_size: int) -> int:
    """Number of bytes implied by the geometry."""
    return samples * lines * bands * pixel_size


def build_lookup(samples: int, lines: int, bands: int, pixel_size: int, interleave: Interleave) -> np.ndarray:
    """Return int64 array of physical byte offsets, one per canonical index."""
    i = np.arange(bands * lines * samples, dtype=np.int64)
    band = i // (lines * samples)
    line = (i // samples) % lines
    sample = i % samples

    if interleave is Interleave.BAND_SEQUENTIAL:
        physical = i
    elif interleave is Interleave.BAND_INTERLEAVED_BY_LINE:
        # per line: band 0 row, band 1 row, ...
        physical = (line * bands + band) * samples + sample
    elif interleave is Interleave.BAND_INTERLEAVED_BY_PIXEL:
        # per pixel: value of band 0, band 1, ...
        physical = (line * samples + sample) * bands + band
    else:
        raise UnsupportedInterleaveError(f"Unhandled interleave: {interleave}")

    return physical * pixel_size


def reorder(raw: bytes, lookup: np.ndarray, pixel_size: int) -> bytes:
    """Copy each pixel from raw[lookup[i]] to position i * pixel_size.

    The result has the length of raw; bytes beyond the geometry stay zero.
    """
    n_bytes = lookup.size * pixel_size
    if len(raw) < n_bytes:
        raise RasterSizeError(f"Data size smaller than expected size: {len(raw)} < {n_bytes}")
    src = np.frombuffer(raw, dtype=np.uint8)
    index = lookup[:, np.newaxis] + np.arange(pixel_size, dtype=np.int64)
    result = np.zeros(len(raw), dtype=np.uint8)
    result[:n_bytes] = src[index.ravel()]
    return result.tobytes()


def band_slice(sequential: bytes, band: int, samples: int, lines: int, bands: int, pixel_size: int) -> bytes:
    """Bytes of one band from a band-major buffer."""
    if not 0 <= band < bands:
        raise IndexError(f"Band index out of range: {band} (bands: {bands})")
    band_len = lines * samples * pixel_size
    offset = band * band_len
    return sequential[offset:offset + band_len]
