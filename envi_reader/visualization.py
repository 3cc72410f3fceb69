"""
Grayscale/RGB projection of decoded bands, image export and quick-look plots.
"""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .utilities import normalize_to_uint8

IMAGE_TYPES = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
}


class UnsupportedImageFormatError(ValueError):
    """Raised when the output file extension is not a supported image type."""


def gray_pixels(band: np.ndarray) -> np.ndarray:
    """Flat uint8 intensities of a 2D band, row-major."""
    return normalize_to_uint8(band).ravel()


def pack_rgb(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> np.ndarray:
    """Pack three uint8 channels into uint32 0xRRGGBB values."""
    return (
        (red.astype(np.uint32) << 16)
        | (green.astype(np.uint32) << 8)
        | blue.astype(np.uint32)
    )


def rgb_pixels(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> np.ndarray:
    """Flat packed RGB pixels; each band is min-max scaled on its own."""
    return pack_rgb(gray_pixels(red), gray_pixels(green), gray_pixels(blue))


def unpack_rgb(pixels: np.ndarray, lines: int, samples: int) -> np.ndarray:
    """(lines, samples, 3) uint8 array from packed pixels."""
    pixels = np.asarray(pixels, dtype=np.uint32).reshape(lines, samples)
    channels = [(pixels >> shift) & 0xFF for shift in (16, 8, 0)]
    return np.stack(channels, axis=-1).astype(np.uint8)


def to_gray_image(dataset, band: int) -> Image.Image:
    """8-bit grayscale image of one band."""
    pixels = dataset.to_gray(band).reshape(dataset.lines, dataset.samples)
    return Image.fromarray(pixels)


def to_rgb_image(dataset, r: int, g: int, b: int) -> Image.Image:
    """RGB image from three bands."""
    pixels = unpack_rgb(dataset.to_rgb(r, g, b), dataset.lines, dataset.samples)
    return Image.fromarray(pixels)


def determine_image_type(output: Union[str, Path]) -> str:
    """Pillow format name for the output file's extension."""
    suffix = Path(output).suffix.lower()
    if suffix not in IMAGE_TYPES:
        raise UnsupportedImageFormatError(
            "Only .jpg, .jpeg and .png supported as file extension!"
        )
    return IMAGE_TYPES[suffix]


def save_gray(dataset, band: int, output: Union[str, Path]):
    """Save one band as grayscale JPEG or PNG, chosen by extension."""
    image_type = determine_image_type(output)
    to_gray_image(dataset, band).save(output, format=image_type)


def save_rgb(dataset, r: int, g: int, b: int, output: Union[str, Path]):
    """Save three bands as RGB JPEG or PNG, chosen by extension."""
    image_type = determine_image_type(output)
    to_rgb_image(dataset, r, g, b).save(output, format=image_type)


def plot_band(dataset, band: int, ax=None, cmap: str = "gray"):
    """Draw one decoded band with a colorbar; returns the matplotlib axes."""
    import matplotlib.pyplot as plt

    data = dataset.get_band(band)
    if ax is None:
        _, ax = plt.subplots()
    im = ax.imshow(data, cmap=cmap, aspect="equal")
    ax.set_title(f"Band {band} ({dataset.data_type.name})")
    ax.set_xlabel("Sample")
    ax.set_ylabel("Line")
    ax.figure.colorbar(im, ax=ax, label="Value")
    return ax
