import numpy as np
from django.test import SimpleTestCase

from ..config.settings import Settings
from ..core.exceptions import WhitePointException
from ..domain.models.reference import Illuminant, Observer, ReferenceTable
from ..domain.models.spectrum import SpectralSample
from ..domain.services.tristimulus_service import TristimulusService
from ..infrastructure.reference.static_reference_repository import CMF_TABLES, StaticReferenceRepository
from ..shared.utils.helpers import xyz_to_chromaticity


def flat_samples(start, stop, step=1, intensity=1.0):
    return [SpectralSample(float(wl), intensity) for wl in range(start, stop + 1, step)]


class WhitePointTest(SimpleTestCase):

    def setUp(self):
        self.service = TristimulusService(StaticReferenceRepository(), Settings())

    def assertChromaticity(self, illuminant, observer, expected, tolerance=2e-3):
        x, y = xyz_to_chromaticity(self.service.white_point(illuminant, observer))
        self.assertAlmostEqual(x, expected[0], delta=tolerance)
        self.assertAlmostEqual(y, expected[1], delta=tolerance)

    def test_d65(self):
        self.assertChromaticity(Illuminant.D65, Observer.TWO_DEGREE, (0.3127, 0.3290))

    def test_d65_ten_degree(self):
        self.assertChromaticity(Illuminant.D65, Observer.TEN_DEGREE, (0.3138, 0.3310), tolerance=3e-3)

    def test_a(self):
        self.assertChromaticity(Illuminant.A, Observer.TWO_DEGREE, (0.4476, 0.4074))

    def test_d50(self):
        self.assertChromaticity(Illuminant.D50, Observer.TWO_DEGREE, (0.3457, 0.3585), tolerance=3e-3)

    def test_c(self):
        self.assertChromaticity(Illuminant.C, Observer.TWO_DEGREE, (0.3101, 0.3162))

    def test_every_white_point_is_positive(self):
        for illuminant in Illuminant:
            for observer in Observer:
                assert min(self.service.white_point(illuminant, observer)) > 0

    def test_non_positive_white_point_raises(self):
        dark = ReferenceTable("dark", [300.0, 830.0], [0.0, 0.0])
        repository = StaticReferenceRepository(illuminant_tables={Illuminant.E: dark})
        service = TristimulusService(repository, Settings())
        with self.assertRaises(WhitePointException) as ctx:
            service.white_point(Illuminant.E, Observer.TWO_DEGREE)
        assert ctx.exception.status_code == 500


class IntegrateTest(SimpleTestCase):

    def setUp(self):
        self.service = TristimulusService(StaticReferenceRepository(), Settings())

    def integrate(self, samples, illuminant=Illuminant.D65, observer=Observer.TWO_DEGREE):
        return self.service.integrate(samples, observer, illuminant)

    def test_unit_spectrum_matches_white_point(self):
        xyz = self.integrate(flat_samples(380, 780))
        np.testing.assert_allclose(xyz, self.service.white_point(Illuminant.D65, Observer.TWO_DEGREE))

    def test_pairs_outside_visible_range_are_ignored(self):
        samples = (
            flat_samples(300, 379, intensity=1000.0)
            + flat_samples(380, 780)
            + flat_samples(781, 900, intensity=1000.0)
        )
        np.testing.assert_allclose(
            self.integrate(samples),
            self.service.white_point(Illuminant.D65, Observer.TWO_DEGREE),
        )

    def test_straddling_pair_is_excluded(self):
        assert self.integrate([SpectralSample(370.0, 1.0), SpectralSample(400.0, 1.0)]) is None
        assert self.integrate([SpectralSample(770.0, 1.0), SpectralSample(790.0, 1.0)]) is None
        assert self.integrate([SpectralSample(380.0, 1.0), SpectralSample(780.0, 1.0)]) is not None

    def test_too_few_samples(self):
        assert self.integrate([]) is None
        assert self.integrate([SpectralSample(500.0, 1.0)]) is None

    def test_negative_or_zero_spectra(self):
        assert self.integrate(flat_samples(380, 780, step=10, intensity=-1.0)) is None
        assert self.integrate(flat_samples(380, 780, step=10, intensity=0.0)) is None

    def test_scales_linearly(self):
        single = np.array(self.integrate(flat_samples(400, 700, step=10, intensity=0.5)))
        double = np.array(self.integrate(flat_samples(400, 700, step=10, intensity=1.0)))
        np.testing.assert_allclose(double, 2 * single)

    def test_midpoint_rule(self):
        samples = [SpectralSample(500.0, 1.0), SpectralSample(510.0, 3.0)]
        cmf = CMF_TABLES[Observer.TWO_DEGREE].interpolate(505.0)
        expected = 2.0 * 100.0 * 10.0 * cmf
        np.testing.assert_allclose(self.integrate(samples, illuminant=Illuminant.E), expected)

    def test_narrower_visible_window(self):
        service = TristimulusService(StaticReferenceRepository(), Settings(visible_min_nm=500, visible_max_nm=600))
        assert service.integrate(flat_samples(400, 490, step=10), Observer.TWO_DEGREE, Illuminant.D65) is None
        assert service.integrate(flat_samples(500, 600, step=10), Observer.TWO_DEGREE, Illuminant.D65) is not None
