"""Value scaling, min/max scanning, printable arrays and file-name helpers."""

from pathlib import Path
from typing import Union

import numpy as np

MAX_CHARS = 80


def min_and_max(values) -> tuple:
    """Return (min, max) over all elements as floats."""
    values = np.asarray(values)
    return float(np.min(values)), float(np.max(values))


def normalize_to_uint8(values) -> np.ndarray:
    """Linear min-max rescale to [0, 255], rounding half up; constant or NaN-ranged input gives zeros."""
    values = np.asarray(values, dtype=np.float64)
    v_min, v_max = min_and_max(values)
    if not v_max > v_min:
        return np.zeros(values.shape, dtype=np.uint8)
    scaled = (values - v_min) / (v_max - v_min) * 255.0
    return np.clip(np.floor(scaled + 0.5), 0, 255).astype(np.uint8)


def array_to_string(values, max_chars: int = -1) -> str:
    """Nested-list rendering like [[1,2],[3,4]]; truncated with '...' when longer than max_chars (if > 0)."""
    if not isinstance(values, np.ndarray):
        return str(values)
    text = _render(values.tolist())
    if 0 < max_chars < len(text):
        text = text[:max_chars - 3] + "..."
    return text


def _render(obj) -> str:
    if isinstance(obj, list):
        return "[" + ",".join(_render(x) for x in obj) + "]"
    return str(obj)


def replace_extension(path: Union[str, Path], new_ext: str) -> Path:
    """Swap the last extension of path for new_ext (incl. dot); empty new_ext drops it.

    A path without an extension gets new_ext appended.
    """
    path = Path(path)
    if not path.suffix:
        return path.with_name(path.name + new_ext)
    return path.with_name(path.stem + new_ext)
