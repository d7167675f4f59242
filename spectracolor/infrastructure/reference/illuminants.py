"""
Derived illuminant spectra.

Illuminant A is a Planckian radiator, the D-series members other than D65
are rebuilt from the daylight basis functions, and E is equi-energy.
Everything here returns ``{wavelength_nm: relative_power}`` dicts so it can
sit next to the tabulated SPDs in cie_tables.
"""
import math

from spectracolor.infrastructure.reference.cie_tables import DAYLIGHT_BASIS_5NM, BasisValues

# Second radiation constant
C2_OLD = 0.01438     # m·K (1931)
C2_ITS90 = 0.014388  # m·K (ITS-90, CIE 15:2004 standard)

# Illuminant A is defined with the 1931 constant, expressed in nm·K
ILLUMINANT_A_C2 = 1.435e7
ILLUMINANT_A_TEMPERATURE = 2848.0

# Nominal CCTs, scaled to ITS-90 before use
DAYLIGHT_NOMINAL_CCT = {
    "D50": 5000.0,
    "D55": 5500.0,
    "D65": 6500.0,
    "D75": 7500.0,
}


def planckian_a_spd(start: int = 300, stop: int = 780, step: int = 5) -> dict[int, float]:
    """
    CIE illuminant A, normalised to 100 at 560nm.

    CIE 15:2004 Equation 3.1.
    """
    def relative(wl: float) -> float:
        return (
            100.0
            * (560.0 / wl) ** 5
            * (math.exp(ILLUMINANT_A_C2 / (ILLUMINANT_A_TEMPERATURE * 560.0)) - 1.0)
            / (math.exp(ILLUMINANT_A_C2 / (ILLUMINANT_A_TEMPERATURE * wl)) - 1.0)
        )

    return {wl: relative(float(wl)) for wl in range(start, stop + 1, step)}


def daylight_locus_chromaticity(temp_k: float) -> tuple[float, float]:
    """
    Calculate chromaticity on the CIE daylight locus.

    CIE 15:2004 Equations 3.3, 3.4, and 3.2.
    Expects ITS-90 CCT as input.
    """
    if temp_k < 4000 or temp_k > 25000:
        raise ValueError(f"Temperature {temp_k}K out of range [4000, 25000]")

    if temp_k <= 7000:
        x = (-4.6070e9 / temp_k**3 +
              2.9678e6 / temp_k**2 +
              0.09911e3 / temp_k +
              0.244063)
    else:
        x = (-2.0064e9 / temp_k**3 +
              1.9018e6 / temp_k**2 +
              0.24748e3 / temp_k +
              0.237040)

    y = -3.000 * x**2 + 2.870 * x - 0.275
    return x, y


def compute_m_coefficients(x_d: float, y_d: float) -> tuple[float, float]:
    """
    M₁ and M₂ weights of the S₁ and S₂ basis functions.

    CIE 15:2004 Equation 3.6. Rounded to three decimals as in the
    published D-series tables.
    """
    denominator = 0.0241 + 0.2562 * x_d - 0.7341 * y_d

    M1 = (-1.3515 - 1.7703 * x_d + 5.9114 * y_d) / denominator
    M2 = (0.0300 - 31.4424 * x_d + 30.0717 * y_d) / denominator
    return round(M1, 3), round(M2, 3)


def reconstruct_spd_from_basis(
    M1: float,
    M2: float,
    basis: dict[int, BasisValues] = DAYLIGHT_BASIS_5NM,
) -> dict[int, float]:
    """S(λ) = S₀(λ) + M₁·S₁(λ) + M₂·S₂(λ)"""
    return {
        wl: b.S0 + M1 * b.S1 + M2 * b.S2
        for wl, b in basis.items()
    }


def daylight_spd(nominal_cct: float) -> dict[int, float]:
    """
    Daylight illuminant for a nominal CCT (5000 for D50, 7500 for D75, ...).

    The nominal temperature is the pre-1968 value; it is scaled by
    C2_ITS90 / C2_OLD before evaluating the locus.
    """
    temp_k = nominal_cct * (C2_ITS90 / C2_OLD)
    x_d, y_d = daylight_locus_chromaticity(temp_k)
    M1, M2 = compute_m_coefficients(x_d, y_d)
    return reconstruct_spd_from_basis(M1, M2)


def equal_energy_spd(start: int = 380, stop: int = 780, step: int = 5) -> dict[int, float]:
    """CIE illuminant E: constant power across the range."""
    return {wl: 100.0 for wl in range(start, stop + 1, step)}
