"""
Data models for ENVI headers and decoded bands.
"""

from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping, Union

import numpy as np

from . import fields as hf
from .catalogs import ByteOrder, DataType, Interleave
from .fields import FieldDescriptor, lookup_field


class MissingFieldError(KeyError):
    """Raised when a header field needed for decoding is absent."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing field: {field_name}")

    def __str__(self):
        return self.args[0]


class InvalidDimensionError(ValueError):
    """Raised when samples, lines or bands is not a positive integer."""


@dataclass(frozen=True, eq=False)
class Header:
    """Typed, read-only view of a parsed ENVI header.

    ``raw`` keeps the key/value strings as found in the file, ``values`` the
    converted values keyed by field descriptor. Geometry and encoding are
    resolved on first access and cached.
    """

    raw: Mapping[str, str]
    values: Mapping[FieldDescriptor, Any]
    quiet: bool = True

    def __post_init__(self):
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def _resolve(self, descriptor: FieldDescriptor) -> Any:
        if descriptor not in self.values:
            raise MissingFieldError(descriptor.name)
        return self.values[descriptor]

    def _dimension(self, descriptor: FieldDescriptor) -> int:
        value = int(self._resolve(descriptor))
        if value <= 0:
            raise InvalidDimensionError(f"Field '{descriptor.name}' must be positive: {value}")
        return value

    def get(self, key: Union[FieldDescriptor, str], default: Any = None) -> Any:
        """Typed value of a field given as descriptor or name; default if absent."""
        descriptor = lookup_field(key) if isinstance(key, str) else key
        if descriptor is None:
            return default
        return self.values.get(descriptor, default)

    def __contains__(self, key: Union[FieldDescriptor, str]) -> bool:
        descriptor = lookup_field(key) if isinstance(key, str) else key
        return descriptor is not None and descriptor in self.values

    @cached_property
    def samples(self) -> int:
        return self._dimension(hf.SAMPLES)

    @cached_property
    def lines(self) -> int:
        return self._dimension(hf.LINES)

    @cached_property
    def bands(self) -> int:
        return self._dimension(hf.BANDS)

    @cached_property
    def data_type(self) -> DataType:
        return self._resolve(hf.DATA_TYPE)

    @cached_property
    def byte_order(self) -> ByteOrder:
        return self._resolve(hf.BYTE_ORDER)

    @cached_property
    def interleave(self) -> Interleave:
        return self._resolve(hf.INTERLEAVE)

    def __str__(self):
        return "".join(f"{key} = {self.raw[key]}\n" for key in sorted(self.raw))


@dataclass
class BandStatistics:
    """Summary statistics of one decoded band."""

    band: int
    minimum: float
    maximum: float
    mean: float
    std: float

    @classmethod
    def from_array(cls, band: int, data: np.ndarray) -> "BandStatistics":
        values = np.asarray(data, dtype=np.float64)
        return cls(
            band=band,
            minimum=float(np.min(values)),
            maximum=float(np.max(values)),
            mean=float(np.mean(values)),
            std=float(np.std(values)),
        )

    def get_range(self) -> tuple:
        """Return the value range (min, max)."""
        return self.minimum, self.maximum
