from typing import Optional, Sequence, Tuple

import numpy as np

from spectracolor.config.logging import get_logger
from spectracolor.config.settings import Settings, get_settings
from spectracolor.core.exceptions import WhitePointException
from spectracolor.domain.models.reference import Illuminant, Observer
from spectracolor.domain.models.spectrum import SpectralSample
from spectracolor.domain.repositories.reference_repository import ReferenceRepository

logger = get_logger(__name__)

XYZ = Tuple[float, float, float]


class TristimulusService:
    """
    Domain service integrating spectra against the CIE colour-matching
    functions under a given illuminant.

    Integration uses the midpoint rule over consecutive sample pairs. A pair
    only contributes when it lies inside the visible window
    ``[visible_min_nm, visible_max_nm]``; the CMF and illuminant are read at
    the pair midpoint.
    """

    def __init__(self, reference_repository: ReferenceRepository, settings: Optional[Settings] = None):
        self.reference_repository = reference_repository
        self.settings = settings or get_settings()
        logger.debug(
            f"TristimulusService initialized for {self.settings.visible_min_nm:g}-"
            f"{self.settings.visible_max_nm:g}nm"
        )

    def integrate(
        self,
        samples: Sequence[SpectralSample],
        observer: Observer,
        illuminant: Illuminant,
    ) -> Optional[XYZ]:
        """
        Compute unnormalised tristimulus values for a sorted spectrum.

        Args:
            samples: Samples ordered by ascending wavelength
            observer: Standard observer selecting the CMF table
            illuminant: Illuminant weighting the spectrum

        Returns:
            (X, Y, Z), or None when fewer than two samples are given, no
            pair lies in the visible window, the total is not positive or
            any component is negative
        """
        if len(samples) < 2:
            return None

        wavelengths = np.array([s.wavelength for s in samples], dtype=float)
        intensities = np.array([s.intensity for s in samples], dtype=float)
        return self._integrate_arrays(wavelengths, intensities, observer, illuminant)

    def white_point(self, illuminant: Illuminant, observer: Observer) -> XYZ:
        """
        Tristimulus values of a perfect reflector under ``illuminant``.

        Evaluated with the same integral as ``integrate`` on a unit spectrum
        sampled every ``white_point_step_nm`` over the visible window.

        Raises:
            WhitePointException: If any component is not positive
        """
        start = self.settings.visible_min_nm
        stop = self.settings.visible_max_nm
        step = self.settings.white_point_step_nm
        count = int(np.floor((stop - start) / step + 1e-9)) + 1
        wavelengths = start + step * np.arange(count)
        if wavelengths[-1] < stop:
            wavelengths = np.append(wavelengths, stop)

        xyz = self._sum_pairs(wavelengths, np.ones_like(wavelengths), observer, illuminant)
        if xyz is None or min(xyz) <= 0:
            raise WhitePointException(illuminant.value, observer.value)
        return xyz

    def _integrate_arrays(self, wavelengths, intensities, observer, illuminant) -> Optional[XYZ]:
        xyz = self._sum_pairs(wavelengths, intensities, observer, illuminant)
        if xyz is None:
            logger.debug("No sample pair inside the visible window")
            return None

        total = sum(xyz)
        logger.debug(f"Integrated {len(wavelengths)} samples: XYZ={xyz}, sum={total:.6g}")
        if total <= 0 or min(xyz) < 0:
            return None
        return xyz

    def _sum_pairs(self, wavelengths: np.ndarray, intensities: np.ndarray, observer, illuminant) -> Optional[XYZ]:
        cmf = self.reference_repository.get_cmf(observer)
        spd = self.reference_repository.get_illuminant(illuminant)

        lower, upper = wavelengths[:-1], wavelengths[1:]
        inside = (lower >= self.settings.visible_min_nm) & (upper <= self.settings.visible_max_nm)
        if not inside.any():
            return None

        lower, upper = lower[inside], upper[inside]
        mean_intensity = ((intensities[:-1] + intensities[1:]) / 2)[inside]
        midpoints = (lower + upper) / 2

        weights = mean_intensity * spd.interpolate(midpoints) * (upper - lower)
        x, y, z = (weights[:, np.newaxis] * cmf.interpolate(midpoints)).sum(axis=0)
        return float(x), float(y), float(z)
