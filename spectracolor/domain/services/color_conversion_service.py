from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from spectracolor.config.logging import get_logger
from spectracolor.config.settings import Settings, get_settings
from spectracolor.core.exceptions import ConversionException, GroupNotFoundException
from spectracolor.domain.models.color import ColorResult
from spectracolor.domain.models.reference import Illuminant, Observer
from spectracolor.domain.models.spectrum import SpectralSample
from spectracolor.domain.services.tristimulus_service import TristimulusService
from spectracolor.shared.utils.helpers import (
    normalize_rgb,
    quantize_channels,
    rgb_to_hex,
    srgb_encode,
    xyz_to_chromaticity,
)
from spectracolor.shared.utils.parsing import get_groups, parse_spectral_data, select_group
from spectracolor.shared.utils.validators import (
    validate_illuminant,
    validate_observer,
    validate_spectral_samples,
)

logger = get_logger(__name__)

# Linear sRGB from white-normalised XYZ (IEC 61966-2-1)
XYZ_TO_LINEAR_SRGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])


class ColorConversionService:
    """
    Domain service turning spectra into display colours.

    Illuminant, observer and gamma arguments default to the configured
    values when left as None; illuminant and observer accept enum members
    or their string keys.
    """

    def __init__(self, tristimulus_service: TristimulusService, settings: Optional[Settings] = None):
        self.tristimulus_service = tristimulus_service
        self.settings = settings or get_settings()
        logger.debug("ColorConversionService initialized")

    def xyz_to_rgb(
        self,
        xyz: Sequence[float],
        illuminant: Union[Illuminant, str, None] = None,
        observer: Union[Observer, str, None] = None,
        apply_gamma: Optional[bool] = None,
    ) -> Tuple[int, int, int]:
        """
        Map raw tristimulus values to 8-bit sRGB.

        XYZ is divided component-wise by the white point of the
        illuminant/observer pair, so a perfect reflector maps to the
        reference white before the matrix is applied.
        """
        illuminant, observer, apply_gamma = self._resolve(illuminant, observer, apply_gamma)
        white = np.array(self.tristimulus_service.white_point(illuminant, observer))
        linear = XYZ_TO_LINEAR_SRGB @ (np.asarray(xyz, dtype=float) / white)
        encoded = srgb_encode(linear) if apply_gamma else linear
        return quantize_channels(encoded)

    def assemble_result(
        self,
        xyz: Sequence[float],
        rgb: Sequence[int],
        illuminant: Illuminant,
        observer: Observer,
        group: Optional[int] = None,
    ) -> ColorResult:
        normalized = normalize_rgb(rgb)
        return ColorResult(
            rgb=tuple(rgb),
            xyz=tuple(float(c) for c in xyz),
            chromaticity=xyz_to_chromaticity(xyz),
            hex=rgb_to_hex(rgb),
            normalized_rgb=normalized,
            normalized_hex=rgb_to_hex(normalized),
            illuminant=illuminant.value,
            observer=observer.value,
            group=group,
        )

    def convert_spectrum_to_color(
        self,
        samples: Sequence[SpectralSample],
        group: Optional[int] = None,
        illuminant: Union[Illuminant, str, None] = None,
        observer: Union[Observer, str, None] = None,
        apply_gamma: Optional[bool] = None,
    ) -> Optional[ColorResult]:
        """
        Convert the samples belonging to ``group``.

        ``group=None`` selects the ungrouped samples only, so grouped curves
        are never interleaved into one spectrum.

        Returns:
            ColorResult, or None when the spectrum cannot be integrated
        """
        illuminant, observer, apply_gamma = self._resolve(illuminant, observer, apply_gamma)
        selected = sorted((s for s in samples if s.group == group), key=lambda s: s.wavelength)

        xyz = self.tristimulus_service.integrate(selected, observer, illuminant)
        if xyz is None:
            return None

        rgb = self.xyz_to_rgb(xyz, illuminant, observer, apply_gamma)
        result = self.assemble_result(xyz, rgb, illuminant, observer, group)
        logger.debug(f"Group {group}: {len(selected)} samples -> {result.hex}")
        return result

    def convert_groups(
        self,
        samples: Sequence[SpectralSample],
        illuminant: Union[Illuminant, str, None] = None,
        observer: Union[Observer, str, None] = None,
        apply_gamma: Optional[bool] = None,
    ) -> List[ColorResult]:
        """
        One result per group present in ``samples``. Ungrouped samples form
        their own curve, converted first with ``group=None``; numbered groups
        follow in ascending order. Curves that cannot be converted are left
        out with a warning.
        """
        illuminant, observer, apply_gamma = self._resolve(illuminant, observer, apply_gamma)
        groups = get_groups(samples)
        if any(s.group is None for s in samples):
            groups = [None] + groups

        results = []
        for group in groups:
            result = self.convert_spectrum_to_color(samples, group, illuminant, observer, apply_gamma)
            if result is None:
                if group is None:
                    logger.warning("Ungrouped samples could not be converted to a color")
                else:
                    logger.warning(f"Group {group} could not be converted to a color")
                continue
            results.append(result)
        return results

    def convert_samples(
        self,
        samples: Sequence[SpectralSample],
        group: Optional[int] = None,
        illuminant: Union[Illuminant, str, None] = None,
        observer: Union[Observer, str, None] = None,
        apply_gamma: Optional[bool] = None,
    ) -> List[ColorResult]:
        """
        Convert already parsed samples, raising user-facing errors.

        Args:
            samples: Output of ``parse_spectral_data``
            group: Convert only this group; None converts every curve

        Returns:
            Non-empty list of ColorResult

        Raises:
            SpectrumValidationException: No data, too few points, or the
                requested group is missing
            ConversionException: Valid data produced no colour
        """
        illuminant, observer, apply_gamma = self._resolve(illuminant, observer, apply_gamma)
        validate_spectral_samples(samples)

        if group is not None:
            selected = select_group(samples, group)
            if not selected:
                raise GroupNotFoundException(group, get_groups(samples))
            validate_spectral_samples(selected)
            result = self.convert_spectrum_to_color(selected, group, illuminant, observer, apply_gamma)
            results = [result] if result is not None else []
        else:
            results = self.convert_groups(samples, illuminant, observer, apply_gamma)

        if not results:
            raise ConversionException()
        logger.info(
            f"Converted {len(samples)} samples into {len(results)} color(s) "
            f"under {illuminant.value}/{observer.value}"
        )
        return results

    def convert_text(
        self,
        text: str,
        group: Optional[int] = None,
        illuminant: Union[Illuminant, str, None] = None,
        observer: Union[Observer, str, None] = None,
        apply_gamma: Optional[bool] = None,
    ) -> List[ColorResult]:
        """Parse ``text`` and hand it to ``convert_samples``."""
        return self.convert_samples(parse_spectral_data(text), group, illuminant, observer, apply_gamma)

    def _resolve(self, illuminant, observer, apply_gamma) -> Tuple[Illuminant, Observer, bool]:
        if illuminant is None:
            illuminant = self.settings.default_illuminant
        if observer is None:
            observer = self.settings.default_observer
        if apply_gamma is None:
            apply_gamma = self.settings.apply_gamma_correction
        return validate_illuminant(illuminant), validate_observer(observer), bool(apply_gamma)
