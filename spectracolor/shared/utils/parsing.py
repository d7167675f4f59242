"""
Text <-> spectral sample conversion.

Accepted line layouts (fields separated by whitespace, tabs or commas):

    wavelength intensity
    wavelength group [ignored ...] intensity

Blank lines and lines starting with '#' are skipped. Lines that cannot be
read are dropped without raising; callers decide what an empty result means.
"""
import math
import re
from typing import Iterable, List, Optional

from spectracolor.config.logging import get_logger
from spectracolor.domain.models.spectrum import SpectralSample

logger = get_logger(__name__)

_FIELD_SEPARATOR = re.compile(r'[\s,]+')

# Reflectance curve offered as sample input
EXAMPLE_SPECTRAL_DATA = """380 0.05
400 0.08
420 0.12
440 0.18
460 0.25
480 0.35
500 0.48
520 0.62
540 0.75
560 0.85
580 0.92
600 0.95
620 0.88
640 0.75
660 0.58
680 0.38
700 0.22
720 0.12
740 0.06
760 0.03"""


def _to_float(token: str) -> Optional[float]:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _to_group(token: str) -> Optional[int]:
    value = _to_float(token)
    if value is None:
        return None
    return int(value)


def parse_line(line: str) -> Optional[SpectralSample]:
    """Parse one line, returning None for comments, blanks and unreadable rows."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith('#'):
        return None

    tokens = [t for t in _FIELD_SEPARATOR.split(trimmed) if t]
    if len(tokens) < 2:
        return None

    wavelength = _to_float(tokens[0])
    intensity = _to_float(tokens[-1])
    if wavelength is None or intensity is None:
        return None

    group = _to_group(tokens[1]) if len(tokens) >= 3 else None
    return SpectralSample(wavelength=wavelength, intensity=intensity, group=group)


def parse_spectral_data(text: str) -> List[SpectralSample]:
    """
    Parse free-form text into samples ordered by (group, wavelength).

    Ungrouped samples sort as group 0 but keep ``group=None``. When a
    wavelength repeats inside one group only its first occurrence is kept.

    Args:
        text: Raw text, one sample per line

    Returns:
        Sorted list of SpectralSample; empty when no line is usable
    """
    if not text:
        return []

    samples: List[SpectralSample] = []
    seen = set()
    dropped = 0
    lines = text.splitlines()
    for line in lines:
        sample = parse_line(line)
        if sample is None:
            stripped = line.strip()
            if stripped and not stripped.startswith('#'):
                dropped += 1
            continue
        key = (sample.group, sample.wavelength)
        if key in seen:
            dropped += 1
            continue
        seen.add(key)
        samples.append(sample)

    samples.sort(key=lambda s: s.sort_key)
    logger.debug(f"Parsed {len(samples)} spectral samples from {len(lines)} lines ({dropped} dropped)")
    return samples


def get_groups(samples: Iterable[SpectralSample]) -> List[int]:
    """Return the distinct group numbers present, ascending."""
    return sorted({s.group for s in samples if s.group is not None})


def select_group(samples: Iterable[SpectralSample], group: Optional[int]) -> List[SpectralSample]:
    """Samples belonging to ``group``; every sample when ``group`` is None."""
    if group is None:
        return list(samples)
    return [s for s in samples if s.group == group]


def _format_number(value: float) -> str:
    return repr(float(value)) if not float(value).is_integer() else str(int(value))


def format_spectral_data(samples: Iterable[SpectralSample]) -> str:
    """
    Render samples back to text that ``parse_spectral_data`` reads unchanged.
    """
    lines = []
    for s in samples:
        fields = [_format_number(s.wavelength)]
        if s.group is not None:
            fields.append(str(s.group))
        fields.append(_format_number(s.intensity))
        lines.append(' '.join(fields))
    return '\n'.join(lines)
