"""Tristimulus values of the CIE standard illuminants."""

from typing import Dict

from .white_point import WhitePoint

A = WhitePoint(
    "A", 1.09850, 1.0, 0.35585,
    description="Typical domestic tungsten-filament lighting, a Planckian radiator at about 2856 K.",
)
B = WhitePoint(
    "B", 0.99072, 1.0, 0.85223,
    description="Noon sunlight, CCT 4874 K.",
)
C = WhitePoint(
    "C", 0.98074, 1.0, 1.18232,
    description="Average daylight, CCT 6774 K.",
)
D50 = WhitePoint("D50", 0.96422, 1.0, 0.82521, description="Daylight, around 5000 K.")
D55 = WhitePoint("D55", 0.95682, 1.0, 0.92149, description="Daylight, around 5500 K.")
D65 = WhitePoint("D65", 0.95047, 1.0, 1.08883, description="Daylight, 6500 K.")
D75 = WhitePoint("D75", 0.94972, 1.0, 1.22638, description="Daylight, around 7500 K.")
E = WhitePoint("E", 1.0, 1.0, 1.0, description="Equal energy radiator.")
F2 = WhitePoint("F2", 0.99186, 1.0, 0.67393, description="Semi-broadband fluorescent lamp.")
F7 = WhitePoint("F7", 0.95041, 1.0, 1.08747, description="Broadband fluorescent lamp.")
F11 = WhitePoint("F11", 1.00962, 1.0, 0.64350, description="Narrowband fluorescent lamp.")

# 10 degree standard observer
D50Degree10 = WhitePoint("D50Degree10", 0.9672, 1.0, 0.8143, observer=10, description="Daylight, around 5000 K.")
D55Degree10 = WhitePoint("D55Degree10", 0.958, 1.0, 0.9093, observer=10, description="Daylight, around 5500 K.")
D65Degree10 = WhitePoint("D65Degree10", 0.9481, 1.0, 1.073, observer=10, description="Daylight, 6500 K.")
D75Degree10 = WhitePoint("D75Degree10", 0.94416, 1.0, 1.2064, observer=10, description="Daylight, around 7500 K.")

STANDARD_ILLUMINANTS: Dict[str, WhitePoint] = {
    wp.name.upper(): wp
    for wp in (
        A, B, C, D50, D55, D65, D75, E, F2, F7, F11,
        D50Degree10, D55Degree10, D65Degree10, D75Degree10,
    )
}

DEFAULT_WHITE_POINT = D65


def get_white_point(name: str) -> WhitePoint:
    """Look up a standard illuminant by name, case-insensitively."""
    try:
        return STANDARD_ILLUMINANTS[name.upper()]
    except KeyError:
        raise KeyError(f"unknown illuminant {name!r}; known: {', '.join(STANDARD_ILLUMINANTS)}") from None
