import numpy as np
from django.test import SimpleTestCase

from ..core.exceptions import (
    ConfigurationException,
    ReferenceTableException,
    UnknownIlluminantException,
    UnknownObserverException,
)
from ..domain.models.reference import Illuminant, Observer, ReferenceTable
from ..infrastructure.reference.illuminants import (
    compute_m_coefficients,
    daylight_locus_chromaticity,
    daylight_spd,
    planckian_a_spd,
)
from ..infrastructure.reference.static_reference_repository import (
    CMF_TABLES,
    ILLUMINANT_TABLES,
    StaticReferenceRepository,
)
from ..shared.utils.helpers import interpolate


class InterpolateTest(SimpleTestCase):

    def test_scalar_lookup_returns_float(self):
        value = interpolate(405.0, np.array([400.0, 410.0]), np.array([1.0, 3.0]))
        assert isinstance(value, float)
        assert value == 2.0

    def test_clamps_outside_grid(self):
        grid = np.array([400.0, 410.0])
        values = np.array([1.0, 3.0])
        assert interpolate(100.0, grid, values) == 1.0
        assert interpolate(900.0, grid, values) == 3.0

    def test_multi_column(self):
        grid = np.array([400.0, 410.0])
        values = np.array([[0.0, 1.0, 2.0], [10.0, 11.0, 12.0]])
        np.testing.assert_allclose(interpolate(402.5, grid, values), [2.5, 3.5, 4.5])
        assert interpolate(np.array([400.0, 405.0, 410.0]), grid, values).shape == (3, 3)


class ReferenceTableTest(SimpleTestCase):

    def test_every_table_is_exact_on_its_grid(self):
        for table in list(CMF_TABLES.values()) + list(ILLUMINANT_TABLES.values()):
            np.testing.assert_allclose(
                table.interpolate(table.wavelengths), table.values, err_msg=table.name
            )

    def test_every_table_clamps(self):
        for table in list(CMF_TABLES.values()) + list(ILLUMINANT_TABLES.values()):
            np.testing.assert_allclose(table.interpolate(100.0), table.values[0], err_msg=table.name)
            np.testing.assert_allclose(table.interpolate(2000.0), table.values[-1], err_msg=table.name)

    def test_tables_cover_visible_range(self):
        for table in list(CMF_TABLES.values()) + list(ILLUMINANT_TABLES.values()):
            assert table.min_wavelength <= 380.0, table.name
            assert table.max_wavelength >= 780.0, table.name
            assert np.all(np.diff(table.wavelengths) > 0), table.name

    def test_cmf_midpoint(self):
        table = CMF_TABLES[Observer.TWO_DEGREE]
        assert table.channels == 3
        expected = (table.interpolate(380.0) + table.interpolate(385.0)) / 2
        np.testing.assert_allclose(table.interpolate(382.5), expected)

    def test_tables_are_read_only(self):
        table = ILLUMINANT_TABLES[Illuminant.D65]
        with self.assertRaises(ValueError):
            table.values[0] = 1.0
        with self.assertRaises(ValueError):
            table.wavelengths[0] = 1.0

    def test_invalid_tables_are_rejected(self):
        with self.assertRaises(ReferenceTableException):
            ReferenceTable("short", [400.0], [1.0])
        with self.assertRaises(ReferenceTableException):
            ReferenceTable("unsorted", [410.0, 400.0], [1.0, 2.0])
        with self.assertRaises(ReferenceTableException):
            ReferenceTable("ragged", [400.0, 410.0, 420.0], [1.0, 2.0])
        with self.assertRaises(ReferenceTableException):
            ReferenceTable("nan", [400.0, 410.0], [1.0, float("nan")])

    def test_normalised_illuminants(self):
        self.assertAlmostEqual(ILLUMINANT_TABLES[Illuminant.D65].interpolate(560.0), 100.0)
        self.assertAlmostEqual(ILLUMINANT_TABLES[Illuminant.A].interpolate(560.0), 100.0)
        assert ILLUMINANT_TABLES[Illuminant.E].interpolate(450.0) == 100.0


class DerivedIlluminantTest(SimpleTestCase):

    def test_illuminant_a_shape(self):
        spd = planckian_a_spd()
        assert spd[300] < spd[560] < spd[780]
        self.assertAlmostEqual(spd[780], 241.675, delta=0.05)

    def test_daylight_locus(self):
        x, y = daylight_locus_chromaticity(6500.0 * 0.014388 / 0.01438)
        self.assertAlmostEqual(x, 0.3127, places=3)
        self.assertAlmostEqual(y, 0.3291, places=3)
        with self.assertRaises(ValueError):
            daylight_locus_chromaticity(2000.0)

    def test_d50_coefficients(self):
        x, y = daylight_locus_chromaticity(5000.0 * 0.014388 / 0.01438)
        m1, m2 = compute_m_coefficients(x, y)
        self.assertAlmostEqual(m1, -1.040, delta=0.002)
        self.assertAlmostEqual(m2, 0.367, delta=0.002)

    def test_daylight_560_is_100(self):
        # S1 and S2 are zero at 560nm
        for cct in (5000.0, 5500.0, 7500.0):
            assert daylight_spd(cct)[560] == 100.0


class StaticReferenceRepositoryTest(SimpleTestCase):

    def setUp(self):
        self.repository = StaticReferenceRepository()

    def test_lists(self):
        assert [i.value for i in self.repository.list_illuminants()] == \
            ["A", "C", "D50", "D55", "D65", "D75", "E", "F2", "F11"]
        assert [o.value for o in self.repository.list_observers()] == ["2", "10"]

    def test_lookup(self):
        assert self.repository.get_cmf(Observer.TEN_DEGREE).channels == 3
        assert self.repository.get_illuminant(Illuminant.F11).channels == 1

    def test_missing_tables(self):
        repository = StaticReferenceRepository(cmf_tables={}, illuminant_tables={})
        with self.assertRaises(UnknownObserverException):
            repository.get_cmf(Observer.TWO_DEGREE)
        with self.assertRaises(UnknownIlluminantException) as ctx:
            repository.get_illuminant(Illuminant.D65)
        assert isinstance(ctx.exception, ConfigurationException)
        assert ctx.exception.status_code == 500

    def test_key_resolution(self):
        assert Illuminant.from_key(" d65 ") is Illuminant.D65
        assert Observer.from_key(10) is Observer.TEN_DEGREE
        with self.assertRaises(ValueError):
            Illuminant.from_key("D93")
        with self.assertRaises(ValueError):
            Observer.from_key("2°")
