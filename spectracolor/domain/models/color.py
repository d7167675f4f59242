from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class ColorResult:
    """
    Domain model representing the colour of one spectral group.
    This model is independent of storage, API, or infrastructure concerns.
    """
    rgb: Tuple[int, int, int]
    xyz: Tuple[float, float, float]
    chromaticity: Tuple[float, float]
    hex: str
    normalized_rgb: Tuple[int, int, int]
    normalized_hex: str
    illuminant: str
    observer: str
    group: Optional[int] = None

    def to_dict(self) -> dict:
        """Wire form consumed by the HTTP layer."""
        return {
            "rgb": list(self.rgb),
            "xyz": list(self.xyz),
            "chromaticity": list(self.chromaticity),
            "hex": self.hex,
            "normalizedRgb": list(self.normalized_rgb),
            "normalizedHex": self.normalized_hex,
            "illuminant": self.illuminant,
            "observer": self.observer,
            "group": self.group,
        }
