from typing import Any, Sequence

from spectracolor.core.exceptions import (
    RequestTooLargeException,
    SpectrumValidationException,
    UnknownIlluminantException,
    UnknownObserverException,
)
from spectracolor.domain.models.reference import Illuminant, Observer
from spectracolor.domain.models.spectrum import SpectralSample

MIN_SPECTRAL_POINTS = 2


def validate_spectral_samples(samples: Sequence[SpectralSample]) -> None:
    """
    Raise SpectrumValidationException if the samples cannot be integrated.

    The messages are shown to end users as they are.
    """
    if not samples:
        raise SpectrumValidationException("No valid spectral data found")
    if len(samples) < MIN_SPECTRAL_POINTS:
        raise SpectrumValidationException(f"At least {MIN_SPECTRAL_POINTS} data points are required")


def validate_illuminant(illuminant: Any) -> Illuminant:
    """Resolve an illuminant key, failing fast on anything unsupported."""
    try:
        return Illuminant.from_key(illuminant)
    except ValueError:
        raise UnknownIlluminantException(str(illuminant), Illuminant.keys())


def validate_observer(observer: Any) -> Observer:
    """Resolve an observer key, failing fast on anything unsupported."""
    try:
        return Observer.from_key(observer)
    except ValueError:
        raise UnknownObserverException(str(observer), Observer.keys())


def validate_request_size(size: int, limit: int) -> None:
    """Raise RequestTooLargeException when a body is above ``limit`` bytes."""
    if size > limit:
        raise RequestTooLargeException(size, limit)

