from enum import Enum
from typing import List, Sequence, Union

import numpy as np

from spectracolor.core.exceptions import ReferenceTableException
from spectracolor.shared.utils.helpers import interpolate


class Illuminant(str, Enum):
    """CIE standard illuminants with a reference spectral power distribution."""
    A = "A"
    C = "C"
    D50 = "D50"
    D55 = "D55"
    D65 = "D65"
    D75 = "D75"
    E = "E"
    F2 = "F2"
    F11 = "F11"

    @classmethod
    def from_key(cls, key: Union[str, "Illuminant"]) -> "Illuminant":
        """Resolve a case-insensitive key. Raises ValueError for unknown keys."""
        if isinstance(key, cls):
            return key
        return cls(str(key).strip().upper())

    @classmethod
    def keys(cls) -> List[str]:
        return [member.value for member in cls]


class Observer(str, Enum):
    """CIE standard colorimetric observers, keyed by field of view in degrees."""
    TWO_DEGREE = "2"
    TEN_DEGREE = "10"

    @classmethod
    def from_key(cls, key: Union[str, int, "Observer"]) -> "Observer":
        """Resolve '2' / '10' (or the integers). Raises ValueError for unknown keys."""
        if isinstance(key, cls):
            return key
        return cls(str(key).strip())

    @classmethod
    def keys(cls) -> List[str]:
        return [member.value for member in cls]


class ReferenceTable:
    """
    Read-only lookup table sampled on an ascending wavelength grid.

    ``values`` holds one column (an illuminant SPD) or three columns
    (x-bar, y-bar, z-bar colour-matching functions), one row per wavelength.
    Both arrays are frozen after construction so a table can be shared by
    every conversion without copying.
    """

    def __init__(self, name: str, wavelengths: Sequence[float], values: Sequence):
        wavelengths = np.array(wavelengths, dtype=float)
        values = np.array(values, dtype=float)

        if wavelengths.ndim != 1 or len(wavelengths) < 2:
            raise ReferenceTableException(name, "at least two wavelengths are required")
        if np.any(np.diff(wavelengths) <= 0):
            raise ReferenceTableException(name, "wavelengths must be strictly increasing")
        if values.ndim not in (1, 2) or values.shape[0] != len(wavelengths):
            raise ReferenceTableException(
                name, f"expected {len(wavelengths)} rows of values, got shape {values.shape}"
            )
        if not np.all(np.isfinite(values)):
            raise ReferenceTableException(name, "values must be finite")

        wavelengths.setflags(write=False)
        values.setflags(write=False)
        self.name = name
        self.wavelengths = wavelengths
        self.values = values

    @property
    def channels(self) -> int:
        return 1 if self.values.ndim == 1 else self.values.shape[1]

    @property
    def min_wavelength(self) -> float:
        return float(self.wavelengths[0])

    @property
    def max_wavelength(self) -> float:
        return float(self.wavelengths[-1])

    def interpolate(self, wavelength):
        """Piecewise-linear lookup, clamped to the first and last rows."""
        return interpolate(wavelength, self.wavelengths, self.values)

    def __len__(self) -> int:
        return len(self.wavelengths)

    def __repr__(self):
        return (
            f"ReferenceTable(name={self.name}, range={self.min_wavelength:g}-{self.max_wavelength:g}nm, "
            f"rows={len(self)}, channels={self.channels})"
        )
