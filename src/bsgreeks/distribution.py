# distribution.py
# Gaussian density and cumulative distribution.
# Both methods accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
from dataclasses import dataclass
from math import pi, sqrt

import numpy as np
from scipy.special import erf

_SQRT_2 = sqrt(2.0)
_SQRT_2PI = sqrt(2.0 * pi)


@dataclass(frozen=True)
class NormalDistribution:
    """Normal distribution N(mean, std_dev**2).

    ``std_dev`` must be positive; this is left to the caller and is not
    checked (zero gives inf / nan, never an exception).
    """
    mean: float = 0.0
    std_dev: float = 1.0

    @classmethod
    def standard(cls) -> "NormalDistribution":
        """N(0, 1)."""
        return cls(mean=0.0, std_dev=1.0)

    def pdf(self, x):
        """Probability density at ``x``."""
        z = np.subtract(x, self.mean)
        return np.exp(-(z * z) / (2.0 * self.std_dev * self.std_dev)) / (self.std_dev * _SQRT_2PI)

    def cdf(self, x):
        """P(X <= x), via the error function."""
        return 0.5 * (1.0 + erf(np.subtract(x, self.mean) / (self.std_dev * _SQRT_2)))


def std_norm_dist() -> NormalDistribution:
    return NormalDistribution.standard()
