"""
CIE reference data: colour-matching functions and illuminant spectral
power distributions.

Values are relative and tabulated at 5 nm intervals. Sources:
- CIE 15:2004, Colorimetry, 3rd Edition (Tables T.1, T.2, T.4, T.5, T.6)
- CIE S 014-1 / ISO 11664-1, CIE standard colorimetric observers
- CIE 15:2004 Appendix B, daylight basis functions
"""
from typing import NamedTuple


class CMFValues(NamedTuple):
    x_bar: float
    y_bar: float
    z_bar: float


class BasisValues(NamedTuple):
    S0: float
    S1: float
    S2: float


# =============================================================================
# CIE 1931 2° Standard Observer (380-780nm)
# =============================================================================

CIE_1931_2DEG_CMF: dict[int, CMFValues] = {
    380: CMFValues(0.001368, 0.000039, 0.006450),
    385: CMFValues(0.002236, 0.000064, 0.010550),
    390: CMFValues(0.004243, 0.000120, 0.020050),
    395: CMFValues(0.007650, 0.000217, 0.036210),
    400: CMFValues(0.014310, 0.000396, 0.067850),
    405: CMFValues(0.023190, 0.000640, 0.110200),
    410: CMFValues(0.043510, 0.001210, 0.207400),
    415: CMFValues(0.077630, 0.002180, 0.371300),
    420: CMFValues(0.134380, 0.004000, 0.645600),
    425: CMFValues(0.214770, 0.007300, 1.039050),
    430: CMFValues(0.283900, 0.011600, 1.385600),
    435: CMFValues(0.328500, 0.016840, 1.622960),
    440: CMFValues(0.348280, 0.023000, 1.747060),
    445: CMFValues(0.348060, 0.029800, 1.782600),
    450: CMFValues(0.336200, 0.038000, 1.772110),
    455: CMFValues(0.318700, 0.048000, 1.744100),
    460: CMFValues(0.290800, 0.060000, 1.669200),
    465: CMFValues(0.251100, 0.073900, 1.528100),
    470: CMFValues(0.195360, 0.090980, 1.287640),
    475: CMFValues(0.142100, 0.112600, 1.041900),
    480: CMFValues(0.095640, 0.139020, 0.812950),
    485: CMFValues(0.058010, 0.169300, 0.616200),
    490: CMFValues(0.032010, 0.208020, 0.465180),
    495: CMFValues(0.014700, 0.258600, 0.353300),
    500: CMFValues(0.004900, 0.323000, 0.272000),
    505: CMFValues(0.002400, 0.407300, 0.212300),
    510: CMFValues(0.009300, 0.503000, 0.158200),
    515: CMFValues(0.029100, 0.608200, 0.111700),
    520: CMFValues(0.063270, 0.710000, 0.078250),
    525: CMFValues(0.109600, 0.793200, 0.057250),
    530: CMFValues(0.165500, 0.862000, 0.042160),
    535: CMFValues(0.225750, 0.914850, 0.029840),
    540: CMFValues(0.290400, 0.954000, 0.020300),
    545: CMFValues(0.359700, 0.980300, 0.013400),
    550: CMFValues(0.433450, 0.994950, 0.008750),
    555: CMFValues(0.512050, 1.000000, 0.005750),
    560: CMFValues(0.594500, 0.995000, 0.003900),
    565: CMFValues(0.678400, 0.978600, 0.002750),
    570: CMFValues(0.762100, 0.952000, 0.002100),
    575: CMFValues(0.842500, 0.915400, 0.001800),
    580: CMFValues(0.916300, 0.870000, 0.001650),
    585: CMFValues(0.978600, 0.816300, 0.001400),
    590: CMFValues(1.026300, 0.757000, 0.001100),
    595: CMFValues(1.056700, 0.694900, 0.001000),
    600: CMFValues(1.062200, 0.631000, 0.000800),
    605: CMFValues(1.045600, 0.566800, 0.000600),
    610: CMFValues(1.002600, 0.503000, 0.000340),
    615: CMFValues(0.938400, 0.441200, 0.000240),
    620: CMFValues(0.854450, 0.381000, 0.000190),
    625: CMFValues(0.751400, 0.321000, 0.000100),
    630: CMFValues(0.642400, 0.265000, 0.000050),
    635: CMFValues(0.541900, 0.217000, 0.000030),
    640: CMFValues(0.447900, 0.175000, 0.000020),
    645: CMFValues(0.360800, 0.138200, 0.000010),
    650: CMFValues(0.283500, 0.107000, 0.000000),
    655: CMFValues(0.218700, 0.081600, 0.000000),
    660: CMFValues(0.164900, 0.061000, 0.000000),
    665: CMFValues(0.121200, 0.044580, 0.000000),
    670: CMFValues(0.087400, 0.032000, 0.000000),
    675: CMFValues(0.063600, 0.023200, 0.000000),
    680: CMFValues(0.046770, 0.017000, 0.000000),
    685: CMFValues(0.032900, 0.011920, 0.000000),
    690: CMFValues(0.022700, 0.008210, 0.000000),
    695: CMFValues(0.015840, 0.005723, 0.000000),
    700: CMFValues(0.011359, 0.004102, 0.000000),
    705: CMFValues(0.008111, 0.002929, 0.000000),
    710: CMFValues(0.005790, 0.002091, 0.000000),
    715: CMFValues(0.004109, 0.001484, 0.000000),
    720: CMFValues(0.002899, 0.001047, 0.000000),
    725: CMFValues(0.002049, 0.000740, 0.000000),
    730: CMFValues(0.001440, 0.000520, 0.000000),
    735: CMFValues(0.001000, 0.000361, 0.000000),
    740: CMFValues(0.000690, 0.000249, 0.000000),
    745: CMFValues(0.000476, 0.000172, 0.000000),
    750: CMFValues(0.000332, 0.000120, 0.000000),
    755: CMFValues(0.000235, 0.000085, 0.000000),
    760: CMFValues(0.000166, 0.000060, 0.000000),
    765: CMFValues(0.000117, 0.000042, 0.000000),
    770: CMFValues(0.000083, 0.000030, 0.000000),
    775: CMFValues(0.000059, 0.000021, 0.000000),
    780: CMFValues(0.000042, 0.000015, 0.000000),
}


# =============================================================================
# CIE 1964 10° Supplementary Standard Observer (380-780nm)
# =============================================================================

CIE_1964_10DEG_CMF: dict[int, CMFValues] = {
    380: CMFValues(0.000160, 0.000017, 0.000705),
    385: CMFValues(0.000662, 0.000072, 0.002928),
    390: CMFValues(0.002362, 0.000253, 0.010482),
    395: CMFValues(0.007242, 0.000769, 0.032344),
    400: CMFValues(0.019110, 0.002004, 0.086011),
    405: CMFValues(0.043400, 0.004509, 0.197120),
    410: CMFValues(0.084736, 0.008756, 0.389366),
    415: CMFValues(0.140638, 0.014456, 0.656760),
    420: CMFValues(0.204492, 0.021391, 0.972542),
    425: CMFValues(0.264737, 0.029497, 1.282500),
    430: CMFValues(0.314679, 0.038676, 1.553480),
    435: CMFValues(0.357719, 0.049602, 1.798500),
    440: CMFValues(0.383734, 0.062077, 1.967280),
    445: CMFValues(0.386726, 0.074704, 2.027300),
    450: CMFValues(0.370702, 0.089456, 1.994800),
    455: CMFValues(0.342957, 0.106256, 1.900700),
    460: CMFValues(0.302273, 0.128201, 1.745370),
    465: CMFValues(0.254085, 0.152761, 1.554900),
    470: CMFValues(0.195618, 0.185190, 1.317560),
    475: CMFValues(0.132349, 0.219940, 1.030200),
    480: CMFValues(0.080507, 0.253589, 0.772125),
    485: CMFValues(0.041072, 0.297665, 0.570060),
    490: CMFValues(0.016172, 0.339133, 0.415254),
    495: CMFValues(0.005132, 0.395379, 0.302356),
    500: CMFValues(0.003816, 0.460777, 0.218502),
    505: CMFValues(0.015444, 0.531360, 0.159249),
    510: CMFValues(0.037465, 0.606741, 0.112044),
    515: CMFValues(0.071358, 0.685660, 0.082248),
    520: CMFValues(0.117749, 0.761757, 0.060709),
    525: CMFValues(0.172953, 0.823330, 0.043050),
    530: CMFValues(0.236491, 0.875211, 0.030451),
    535: CMFValues(0.304213, 0.923810, 0.020584),
    540: CMFValues(0.376772, 0.961988, 0.013676),
    545: CMFValues(0.451584, 0.982200, 0.007918),
    550: CMFValues(0.529826, 0.991761, 0.003988),
    555: CMFValues(0.616053, 0.999110, 0.001091),
    560: CMFValues(0.705224, 0.997340, 0.000000),
    565: CMFValues(0.793832, 0.982380, 0.000000),
    570: CMFValues(0.878655, 0.955552, 0.000000),
    575: CMFValues(0.951162, 0.915175, 0.000000),
    580: CMFValues(1.014160, 0.868934, 0.000000),
    585: CMFValues(1.074300, 0.825623, 0.000000),
    590: CMFValues(1.118520, 0.777405, 0.000000),
    595: CMFValues(1.134300, 0.720353, 0.000000),
    600: CMFValues(1.123990, 0.658341, 0.000000),
    605: CMFValues(1.089100, 0.593878, 0.000000),
    610: CMFValues(1.030480, 0.527963, 0.000000),
    615: CMFValues(0.950740, 0.461834, 0.000000),
    620: CMFValues(0.856297, 0.398057, 0.000000),
    625: CMFValues(0.754930, 0.339554, 0.000000),
    630: CMFValues(0.647467, 0.283493, 0.000000),
    635: CMFValues(0.535110, 0.228254, 0.000000),
    640: CMFValues(0.431567, 0.179828, 0.000000),
    645: CMFValues(0.343690, 0.140211, 0.000000),
    650: CMFValues(0.268329, 0.107633, 0.000000),
    655: CMFValues(0.204300, 0.081187, 0.000000),
    660: CMFValues(0.152568, 0.060281, 0.000000),
    665: CMFValues(0.112210, 0.044096, 0.000000),
    670: CMFValues(0.081261, 0.031800, 0.000000),
    675: CMFValues(0.057930, 0.022602, 0.000000),
    680: CMFValues(0.040851, 0.015905, 0.000000),
    685: CMFValues(0.028623, 0.011130, 0.000000),
    690: CMFValues(0.019941, 0.007749, 0.000000),
    695: CMFValues(0.013842, 0.005375, 0.000000),
    700: CMFValues(0.009577, 0.003718, 0.000000),
    705: CMFValues(0.006605, 0.002565, 0.000000),
    710: CMFValues(0.004553, 0.001768, 0.000000),
    715: CMFValues(0.003145, 0.001222, 0.000000),
    720: CMFValues(0.002175, 0.000846, 0.000000),
    725: CMFValues(0.001506, 0.000586, 0.000000),
    730: CMFValues(0.001045, 0.000407, 0.000000),
    735: CMFValues(0.000727, 0.000284, 0.000000),
    740: CMFValues(0.000508, 0.000199, 0.000000),
    745: CMFValues(0.000356, 0.000140, 0.000000),
    750: CMFValues(0.000251, 0.000098, 0.000000),
    755: CMFValues(0.000178, 0.000070, 0.000000),
    760: CMFValues(0.000126, 0.000050, 0.000000),
    765: CMFValues(0.000090, 0.000036, 0.000000),
    770: CMFValues(0.000065, 0.000025, 0.000000),
    775: CMFValues(0.000046, 0.000018, 0.000000),
    780: CMFValues(0.000033, 0.000013, 0.000000),
}


# =============================================================================
# Illuminant D65 (CIE 15:2004 Table T.1, 300-780nm, 100.0 at 560nm)
# =============================================================================

D65_SPD_5NM: dict[int, float] = {
    300: 0.034100,
    305: 1.6643,
    310: 3.2945,
    315: 11.7652,
    320: 20.236,
    325: 28.6447,
    330: 37.0535,
    335: 38.5011,
    340: 39.9488,
    345: 42.4302,
    350: 44.9117,
    355: 45.775,
    360: 46.6383,
    365: 49.3637,
    370: 52.0891,
    375: 51.0323,
    380: 49.9755,
    385: 52.3118,
    390: 54.6482,
    395: 68.7015,
    400: 82.7549,
    405: 87.1204,
    410: 91.486,
    415: 92.4589,
    420: 93.4318,
    425: 90.057,
    430: 86.6823,
    435: 95.7736,
    440: 104.865,
    445: 110.936,
    450: 117.008,
    455: 117.410,
    460: 117.812,
    465: 116.336,
    470: 114.861,
    475: 115.392,
    480: 115.923,
    485: 112.367,
    490: 108.811,
    495: 109.082,
    500: 109.354,
    505: 108.578,
    510: 107.802,
    515: 106.296,
    520: 104.790,
    525: 106.239,
    530: 107.689,
    535: 106.047,
    540: 104.405,
    545: 104.225,
    550: 104.046,
    555: 102.023,
    560: 100.000,
    565: 98.1671,
    570: 96.3342,
    575: 96.0611,
    580: 95.788,
    585: 92.2368,
    590: 88.6856,
    595: 89.3459,
    600: 90.0062,
    605: 89.8026,
    610: 89.5991,
    615: 88.6489,
    620: 87.6987,
    625: 85.4936,
    630: 83.2886,
    635: 83.4939,
    640: 83.6992,
    645: 81.8630,
    650: 80.0268,
    655: 80.1207,
    660: 80.2146,
    665: 81.2462,
    670: 82.2778,
    675: 80.2810,
    680: 78.2842,
    685: 74.0027,
    690: 69.7213,
    695: 70.6652,
    700: 71.6091,
    705: 72.979,
    710: 74.349,
    715: 67.9765,
    720: 61.604,
    725: 65.7448,
    730: 69.8856,
    735: 72.4863,
    740: 75.087,
    745: 69.3398,
    750: 63.5927,
    755: 55.0054,
    760: 46.4182,
    765: 56.6118,
    770: 66.8054,
    775: 65.0941,
    780: 63.3828,
}


# =============================================================================
# Illuminant C (CIE 15:2004 Table T.1, 380-780nm)
# =============================================================================

C_SPD_5NM: dict[int, float] = {
    380: 33.00, 385: 39.92, 390: 47.40, 395: 55.17, 400: 63.30,
    405: 71.81, 410: 80.60, 415: 89.53, 420: 98.10, 425: 105.80,
    430: 112.40, 435: 117.75, 440: 121.50, 445: 123.45, 450: 124.00,
    455: 123.60, 460: 123.10, 465: 123.30, 470: 123.80, 475: 124.09,
    480: 123.90, 485: 122.92, 490: 120.70, 495: 116.90, 500: 112.10,
    505: 106.98, 510: 102.30, 515: 98.81, 520: 96.90, 525: 96.78,
    530: 98.00, 535: 99.94, 540: 102.10, 545: 103.95, 550: 105.20,
    555: 105.67, 560: 105.30, 565: 104.11, 570: 102.30, 575: 100.15,
    580: 97.80, 585: 95.43, 590: 93.20, 595: 91.22, 600: 89.70,
    605: 88.83, 610: 88.40, 615: 88.19, 620: 88.10, 625: 88.06,
    630: 88.00, 635: 87.86, 640: 87.80, 645: 87.99, 650: 88.20,
    655: 88.20, 660: 87.90, 665: 87.22, 670: 86.30, 675: 85.30,
    680: 84.00, 685: 82.21, 690: 80.20, 695: 78.24, 700: 76.30,
    705: 74.36, 710: 72.40, 715: 70.40, 720: 68.30, 725: 66.30,
    730: 64.40, 735: 62.80, 740: 61.50, 745: 60.20, 750: 59.20,
    755: 58.50, 760: 58.10, 765: 58.00, 770: 58.20, 775: 58.50,
    780: 59.10,
}


# =============================================================================
# Fluorescent illuminants F2 (cool white) and F11 (narrow tri-band)
# CIE 15:2004 Table T.6, 380-780nm
# =============================================================================

F2_SPD_5NM: dict[int, float] = {
    380: 1.18, 385: 1.48, 390: 1.84, 395: 2.15, 400: 3.44,
    405: 15.69, 410: 3.85, 415: 3.74, 420: 4.19, 425: 4.62,
    430: 5.06, 435: 34.98, 440: 11.81, 445: 6.27, 450: 6.63,
    455: 6.93, 460: 7.19, 465: 7.40, 470: 7.54, 475: 7.62,
    480: 7.65, 485: 7.62, 490: 7.62, 495: 7.45, 500: 7.28,
    505: 7.15, 510: 7.05, 515: 7.04, 520: 7.16, 525: 7.47,
    530: 8.04, 535: 8.88, 540: 10.01, 545: 24.88, 550: 16.64,
    555: 14.59, 560: 16.16, 565: 17.56, 570: 18.62, 575: 21.47,
    580: 22.79, 585: 19.29, 590: 18.66, 595: 17.73, 600: 16.54,
    605: 15.21, 610: 13.80, 615: 12.36, 620: 10.95, 625: 9.65,
    630: 8.40, 635: 7.32, 640: 6.31, 645: 5.43, 650: 4.68,
    655: 4.02, 660: 3.45, 665: 2.96, 670: 2.55, 675: 2.19,
    680: 1.89, 685: 1.64, 690: 1.53, 695: 1.27, 700: 1.10,
    705: 0.99, 710: 0.88, 715: 0.76, 720: 0.68, 725: 0.61,
    730: 0.56, 735: 0.54, 740: 0.51, 745: 0.47, 750: 0.47,
    755: 0.43, 760: 0.46, 765: 0.47, 770: 0.40, 775: 0.33,
    780: 0.27,
}

F11_SPD_5NM: dict[int, float] = {
    380: 0.91, 385: 0.63, 390: 0.46, 395: 0.37, 400: 1.29,
    405: 12.68, 410: 1.59, 415: 1.79, 420: 2.46, 425: 3.33,
    430: 4.49, 435: 33.94, 440: 12.13, 445: 6.95, 450: 7.19,
    455: 7.12, 460: 6.72, 465: 6.13, 470: 5.46, 475: 4.79,
    480: 5.66, 485: 14.29, 490: 14.96, 495: 8.97, 500: 4.72,
    505: 2.33, 510: 1.47, 515: 1.10, 520: 0.89, 525: 0.83,
    530: 1.18, 535: 4.90, 540: 39.59, 545: 72.84, 550: 32.61,
    555: 7.52, 560: 2.83, 565: 1.96, 570: 1.67, 575: 4.43,
    580: 11.28, 585: 14.76, 590: 12.73, 595: 9.74, 600: 7.33,
    605: 9.72, 610: 55.27, 615: 42.58, 620: 13.18, 625: 13.16,
    630: 12.26, 635: 5.11, 640: 2.07, 645: 2.34, 650: 3.58,
    655: 3.01, 660: 2.48, 665: 2.14, 670: 1.54, 675: 1.33,
    680: 1.46, 685: 1.94, 690: 2.00, 695: 1.20, 700: 1.35,
    705: 4.10, 710: 5.58, 715: 2.51, 720: 0.57, 725: 0.27,
    730: 0.23, 735: 0.21, 740: 0.24, 745: 0.24, 750: 0.20,
    755: 0.24, 760: 0.32, 765: 0.26, 770: 0.16, 775: 0.12,
    780: 0.09,
}


# =============================================================================
# Daylight Basis Functions S₀, S₁, S₂ (CIE 15:2004 Appendix B, 300-780nm)
# =============================================================================
# S(λ) = S₀(λ) + M₁·S₁(λ) + M₂·S₂(λ) reconstructs a daylight illuminant
# from its chromaticity.

DAYLIGHT_BASIS_5NM: dict[int, BasisValues] = {
    300: BasisValues(0.04, 0.02, 0.00),
    305: BasisValues(3.02, 2.26, 1.00),
    310: BasisValues(6.00, 4.50, 2.00),
    315: BasisValues(17.80, 13.45, 3.00),
    320: BasisValues(29.60, 22.40, 4.00),
    325: BasisValues(42.45, 32.20, 6.25),
    330: BasisValues(55.30, 42.00, 8.50),
    335: BasisValues(56.30, 41.30, 8.15),
    340: BasisValues(57.30, 40.60, 7.80),
    345: BasisValues(59.55, 41.10, 7.25),
    350: BasisValues(61.80, 41.60, 6.70),
    355: BasisValues(61.65, 39.80, 6.00),
    360: BasisValues(61.50, 38.00, 5.30),
    365: BasisValues(65.15, 40.20, 5.70),
    370: BasisValues(68.80, 42.40, 6.10),
    375: BasisValues(66.10, 40.45, 4.55),
    380: BasisValues(63.40, 38.50, 3.00),
    385: BasisValues(64.60, 36.75, 2.10),
    390: BasisValues(65.80, 35.00, 1.20),
    395: BasisValues(80.30, 39.20, 0.05),
    400: BasisValues(94.80, 43.40, -1.10),
    405: BasisValues(99.80, 44.85, -0.80),
    410: BasisValues(104.80, 46.30, -0.50),
    415: BasisValues(105.35, 45.10, -0.60),
    420: BasisValues(105.90, 43.90, -0.70),
    425: BasisValues(101.35, 40.50, -0.95),
    430: BasisValues(96.80, 37.10, -1.20),
    435: BasisValues(105.35, 36.90, -1.90),
    440: BasisValues(113.90, 36.70, -2.60),
    445: BasisValues(119.75, 36.30, -2.75),
    450: BasisValues(125.60, 35.90, -2.90),
    455: BasisValues(125.55, 34.25, -2.85),
    460: BasisValues(125.50, 32.60, -2.80),
    465: BasisValues(123.40, 30.25, -2.70),
    470: BasisValues(121.30, 27.90, -2.60),
    475: BasisValues(121.30, 26.10, -2.60),
    480: BasisValues(121.30, 24.30, -2.60),
    485: BasisValues(117.40, 22.20, -2.20),
    490: BasisValues(113.50, 20.10, -1.80),
    495: BasisValues(113.30, 18.15, -1.65),
    500: BasisValues(113.10, 16.20, -1.50),
    505: BasisValues(111.95, 14.70, -1.40),
    510: BasisValues(110.80, 13.20, -1.30),
    515: BasisValues(108.65, 10.90, -1.25),
    520: BasisValues(106.50, 8.60, -1.20),
    525: BasisValues(107.65, 7.35, -1.10),
    530: BasisValues(108.80, 6.10, -1.00),
    535: BasisValues(107.05, 5.15, -0.75),
    540: BasisValues(105.30, 4.20, -0.50),
    545: BasisValues(104.85, 3.05, -0.40),
    550: BasisValues(104.40, 1.90, -0.30),
    555: BasisValues(102.20, 0.95, -0.15),
    560: BasisValues(100.00, 0.00, 0.00),
    565: BasisValues(98.00, -0.80, 0.10),
    570: BasisValues(96.00, -1.60, 0.20),
    575: BasisValues(95.55, -2.55, 0.35),
    580: BasisValues(95.10, -3.50, 0.50),
    585: BasisValues(92.10, -3.50, 1.30),
    590: BasisValues(89.10, -3.50, 2.10),
    595: BasisValues(89.80, -4.65, 2.65),
    600: BasisValues(90.50, -5.80, 3.20),
    605: BasisValues(90.40, -6.50, 3.65),
    610: BasisValues(90.30, -7.20, 4.10),
    615: BasisValues(89.35, -7.90, 4.40),
    620: BasisValues(88.40, -8.60, 4.70),
    625: BasisValues(86.20, -9.05, 4.90),
    630: BasisValues(84.00, -9.50, 5.10),
    635: BasisValues(84.55, -10.20, 5.90),
    640: BasisValues(85.10, -10.90, 6.70),
    645: BasisValues(83.50, -10.80, 7.00),
    650: BasisValues(81.90, -10.70, 7.30),
    655: BasisValues(82.25, -11.35, 7.95),
    660: BasisValues(82.60, -12.00, 8.60),
    665: BasisValues(83.75, -13.00, 9.20),
    670: BasisValues(84.90, -14.00, 9.80),
    675: BasisValues(83.10, -13.80, 10.00),
    680: BasisValues(81.30, -13.60, 10.20),
    685: BasisValues(76.60, -12.80, 9.25),
    690: BasisValues(71.90, -12.00, 8.30),
    695: BasisValues(73.10, -12.65, 8.95),
    700: BasisValues(74.30, -13.30, 9.60),
    705: BasisValues(75.35, -13.10, 9.05),
    710: BasisValues(76.40, -12.90, 8.50),
    715: BasisValues(69.85, -11.75, 7.75),
    720: BasisValues(63.30, -10.60, 7.00),
    725: BasisValues(67.50, -11.10, 7.30),
    730: BasisValues(71.70, -11.60, 7.60),
    735: BasisValues(74.35, -11.90, 7.80),
    740: BasisValues(77.00, -12.20, 8.00),
    745: BasisValues(71.10, -11.20, 7.35),
    750: BasisValues(65.20, -10.20, 6.70),
    755: BasisValues(56.45, -9.00, 5.95),
    760: BasisValues(47.70, -7.80, 5.20),
    765: BasisValues(58.15, -9.50, 6.30),
    770: BasisValues(68.60, -11.20, 7.40),
    775: BasisValues(66.80, -10.80, 7.10),
    780: BasisValues(65.00, -10.40, 6.80),
}
