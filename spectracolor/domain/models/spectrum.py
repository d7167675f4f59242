from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class SpectralSample:
    """
    Domain model for one digitised point of a spectral curve.
    This model is independent of storage, API, or infrastructure concerns.
    """
    wavelength: float  # nm
    intensity: float
    group: Optional[int] = None

    @property
    def sort_key(self):
        # Ungrouped samples order as group 0
        return (self.group if self.group is not None else 0, self.wavelength)

    def to_dict(self) -> dict:
        return {
            "wavelength": self.wavelength,
            "intensity": self.intensity,
            "group": self.group,
        }
