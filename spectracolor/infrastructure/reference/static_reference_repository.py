from typing import Dict, List, Mapping

from spectracolor.config.logging import get_logger
from spectracolor.core.exceptions import UnknownIlluminantException, UnknownObserverException
from spectracolor.domain.models.reference import Illuminant, Observer, ReferenceTable
from spectracolor.domain.repositories.reference_repository import ReferenceRepository
from spectracolor.infrastructure.reference.cie_tables import (
    C_SPD_5NM,
    CIE_1931_2DEG_CMF,
    CIE_1964_10DEG_CMF,
    D65_SPD_5NM,
    F2_SPD_5NM,
    F11_SPD_5NM,
)
from spectracolor.infrastructure.reference.illuminants import (
    DAYLIGHT_NOMINAL_CCT,
    daylight_spd,
    equal_energy_spd,
    planckian_a_spd,
)

logger = get_logger(__name__)


def table_from_mapping(name: str, data: Mapping) -> ReferenceTable:
    """Build a ReferenceTable from a {wavelength: value(s)} mapping."""
    wavelengths = sorted(data)
    return ReferenceTable(name, wavelengths, [data[wl] for wl in wavelengths])


def _build_cmf_tables() -> Dict[Observer, ReferenceTable]:
    return {
        Observer.TWO_DEGREE: table_from_mapping("CIE 1931 2°", CIE_1931_2DEG_CMF),
        Observer.TEN_DEGREE: table_from_mapping("CIE 1964 10°", CIE_1964_10DEG_CMF),
    }


def _build_illuminant_tables() -> Dict[Illuminant, ReferenceTable]:
    spds = {
        Illuminant.A: planckian_a_spd(),
        Illuminant.C: C_SPD_5NM,
        Illuminant.D50: daylight_spd(DAYLIGHT_NOMINAL_CCT["D50"]),
        Illuminant.D55: daylight_spd(DAYLIGHT_NOMINAL_CCT["D55"]),
        Illuminant.D65: D65_SPD_5NM,
        Illuminant.D75: daylight_spd(DAYLIGHT_NOMINAL_CCT["D75"]),
        Illuminant.E: equal_energy_spd(),
        Illuminant.F2: F2_SPD_5NM,
        Illuminant.F11: F11_SPD_5NM,
    }
    return {key: table_from_mapping(key.value, spd) for key, spd in spds.items()}


# Built once at import; tables are immutable and shared by every request
CMF_TABLES = _build_cmf_tables()
ILLUMINANT_TABLES = _build_illuminant_tables()


class StaticReferenceRepository(ReferenceRepository):
    """
    Reference repository backed by the in-process CIE tables.
    """

    def __init__(
        self,
        cmf_tables: Mapping[Observer, ReferenceTable] = None,
        illuminant_tables: Mapping[Illuminant, ReferenceTable] = None,
    ):
        self._cmf_tables = dict(cmf_tables if cmf_tables is not None else CMF_TABLES)
        self._illuminant_tables = dict(
            illuminant_tables if illuminant_tables is not None else ILLUMINANT_TABLES
        )
        logger.debug(
            f"StaticReferenceRepository initialized with {len(self._cmf_tables)} observers "
            f"and {len(self._illuminant_tables)} illuminants"
        )

    def get_cmf(self, observer: Observer) -> ReferenceTable:
        try:
            return self._cmf_tables[observer]
        except KeyError:
            raise UnknownObserverException(str(getattr(observer, "value", observer)), self._observer_keys())

    def get_illuminant(self, illuminant: Illuminant) -> ReferenceTable:
        try:
            return self._illuminant_tables[illuminant]
        except KeyError:
            raise UnknownIlluminantException(
                str(getattr(illuminant, "value", illuminant)), self._illuminant_keys()
            )

    def list_illuminants(self) -> List[Illuminant]:
        return [i for i in Illuminant if i in self._illuminant_tables]

    def list_observers(self) -> List[Observer]:
        return [o for o in Observer if o in self._cmf_tables]

    def _illuminant_keys(self) -> List[str]:
        return [i.value for i in self.list_illuminants()]

    def _observer_keys(self) -> List[str]:
        return [o.value for o in self.list_observers()]
