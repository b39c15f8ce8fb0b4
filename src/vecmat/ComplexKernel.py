from dataclasses import dataclass
from typing import Tuple

import numpy as np

from vecmat.LinAlg import LinAlg

_QUIET = dict(divide="ignore", invalid="ignore", over="ignore")


@dataclass(frozen=True)
class ComplexKernel:
    """Complex arithmetic over (re, im) pairs.

    Runs on numpy complex128 so zero divisors and log(0) give inf/nan
    instead of raising.
    """

    @staticmethod
    def of(re: float, im: float) -> np.complex128:
        return np.complex128(complex(re, im))

    @staticmethod
    def pair(z) -> Tuple[float, float]:
        return float(z.real), float(z.imag)

    @staticmethod
    def multiply(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
        with np.errstate(**_QUIET):
            return ComplexKernel.pair(ComplexKernel.of(*a) * ComplexKernel.of(*b))

    @staticmethod
    def divide(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
        with np.errstate(**_QUIET):
            return ComplexKernel.pair(np.true_divide(ComplexKernel.of(*a), ComplexKernel.of(*b)))

    @staticmethod
    def power(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
        with np.errstate(**_QUIET):
            return ComplexKernel.pair(np.power(ComplexKernel.of(*a), ComplexKernel.of(*b)))

    @staticmethod
    def log(a: Tuple[float, float]) -> Tuple[float, float]:
        """Principal natural logarithm."""
        with np.errstate(**_QUIET):
            return ComplexKernel.pair(np.log(ComplexKernel.of(*a)))

    @staticmethod
    def conj(a: Tuple[float, float]) -> Tuple[float, float]:
        return a[0], -a[1]

    @staticmethod
    def to_string(a: Tuple[float, float]) -> str:
        """Formats as "a + bi", dropping zero parts ("3", "2i", "-i", "0")."""
        re, im = a
        if np.isnan(re) or np.isnan(im):
            return "NaN"
        if im == 0:
            return LinAlg.format_number(re)
        if im == 1:
            im_str = "i"
        elif im == -1:
            im_str = "-i"
        else:
            im_str = f"{LinAlg.format_number(im)}i"
        if re == 0:
            return im_str
        sign = "-" if im < 0 else "+"
        return f"{LinAlg.format_number(re)} {sign} {im_str.lstrip('-')}"

