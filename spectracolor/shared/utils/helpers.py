import math
import numpy as np
from typing import Any, Sequence, Tuple

SRGB_LINEAR_THRESHOLD = 0.0031308

def interpolate(wavelength, wavelengths: np.ndarray, values: np.ndarray):
    """
    Piecewise-linear lookup of a wavelength-indexed table.

    Wavelengths below the first (or above the last) grid point return the
    first (or last) row unchanged; a wavelength that falls on a grid point
    returns that row exactly.

    Args:
        wavelength: Scalar or array of wavelengths in nm
        wavelengths: Ascending grid of the table
        values: 1-D column or 2-D array with one row per grid point

    Returns:
        float for a scalar lookup into a single column, otherwise an ndarray
        shaped ``wavelength.shape + (columns,)``
    """
    values = np.asarray(values)
    if values.ndim == 1:
        result = np.interp(wavelength, wavelengths, values)
        return float(result) if np.ndim(result) == 0 else result
    return np.stack(
        [np.interp(wavelength, wavelengths, values[:, i]) for i in range(values.shape[1])],
        axis=-1,
    )

def srgb_encode(linear: np.ndarray) -> np.ndarray:
    """Apply the piecewise sRGB transfer function channel by channel."""
    linear = np.asarray(linear, dtype=float)
    # Negative channels take the linear branch and are clamped afterwards
    safe = np.maximum(linear, SRGB_LINEAR_THRESHOLD)
    return np.where(
        linear <= SRGB_LINEAR_THRESHOLD,
        12.92 * linear,
        1.055 * np.power(safe, 1 / 2.4) - 0.055,
    )

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))

def quantize_channels(channels: Sequence[float]) -> Tuple[int, int, int]:
    """Clamp unit-range channels to [0, 1] and scale them to 8-bit integers."""
    clamped = np.clip(np.asarray(channels, dtype=float), 0.0, 1.0)
    r, g, b = (round_half_up(c * 255) for c in clamped)
    return r, g, b

def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format 8-bit channels as '#rrggbb'."""
    return '#' + ''.join(f"{int(round_half_up(c)):02x}" for c in rgb)

def normalize_rgb(rgb: Sequence[int]) -> Tuple[int, int, int]:
    """Rescale so the brightest channel reaches 255 while keeping channel ratios."""
    peak = max(rgb)
    scale = 255.0 / peak if peak > 0 else 1.0
    r, g, b = (min(255, round_half_up(c * scale)) for c in rgb)
    return r, g, b

def xyz_to_chromaticity(xyz: Sequence[float]) -> Tuple[float, float]:
    """Project tristimulus values to (x, y). Caller guarantees a positive sum."""
    total = float(sum(xyz))
    return float(xyz[0]) / total, float(xyz[1]) / total

def sanitize_for_json(obj: Any, _path: str = "root") -> Any:
    """Sanitizes for JSON format (deals with inf values, numpy types, etc.)"""
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    elif isinstance(obj, np.floating):
        if np.isnan(obj) or np.isinf(obj):
            return None
        return float(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, (np.bool_, bool)):
        return bool(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {k: sanitize_for_json(v, f"{_path}.{k}") for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v, f"{_path}[{i}]") for i, v in enumerate(obj)]
    else:
        return obj
