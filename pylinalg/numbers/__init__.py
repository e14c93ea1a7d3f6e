"""
Scalar layer: complex numbers, real-number helpers and the polar form.
"""

from pylinalg.numbers.complex_number import C, ComplexNumber
from pylinalg.numbers.polar import P, Polar, normalize_phase, to_cartesian, to_polar
from pylinalg.numbers.real_number import R, pi, round_array, round_real

__all__ = [
    "C",
    "ComplexNumber",
    "P",
    "Polar",
    "normalize_phase",
    "to_cartesian",
    "to_polar",
    "R",
    "pi",
    "round_array",
    "round_real",
]
