from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .config import GREEK_NAMES


class OptionType(Enum):
    """Call or put.  Drives the sign conventions of delta and rho."""
    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, kind) -> "OptionType":
        """Accept an ``OptionType`` or ``"call"``/``"c"``/``"put"``/``"p"``."""
        if isinstance(kind, cls):
            return kind
        s = str(kind).strip().lower()
        if s in {"call", "c"}:
            return cls.CALL
        if s in {"put", "p"}:
            return cls.PUT
        raise ValueError(f"kind must be 'call' or 'put', got {kind!r}")


CALL = OptionType.CALL
PUT = OptionType.PUT


# ---------------------------------------------------------------------------
# Model inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BlackScholesModelParams:
    """Contract + market inputs for a single Black-Scholes evaluation.

    Fields may be floats or NumPy arrays; array fields broadcast.

    Parameters
    ----------
    k : float
        Strike (exercise) price.
    s : float
        Current underlying price.
    t : float
        Time to expiry in years.
    r : float
        Continuously-compounded risk-free rate.
    v : float
        Annualised volatility of the underlying.

    Nothing is checked on construction: non-positive ``k``, ``s``, ``t``
    or ``v`` flow through the formulas as inf / nan.  Call
    :meth:`validate` where bad input should be rejected instead.
    """
    k: float
    s: float
    t: float
    r: float
    v: float

    def d1(self):
        return (np.log(np.divide(self.s, self.k)) + (self.r + 0.5 * self.v * self.v) * self.t) / (
            self.v * np.sqrt(self.t)
        )

    def d2(self):
        return (np.log(np.divide(self.s, self.k)) + (self.r - 0.5 * self.v * self.v) * self.t) / (
            self.v * np.sqrt(self.t)
        )

    def validate(self) -> "BlackScholesModelParams":
        """Raise ``ValueError`` if k, s, t or v is not strictly positive."""
        for name in ("k", "s", "t", "v"):
            value = np.asarray(getattr(self, name), dtype=float)
            if not np.all(value > 0):
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        return self


# ---------------------------------------------------------------------------
# Model outputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BlackScholesModelResults:
    price: float
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        """Fields in ``GREEK_NAMES`` order; scalars come back as plain floats."""
        out = {}
        for name in GREEK_NAMES:
            value = getattr(self, name)
            out[name] = float(value) if np.ndim(value) == 0 else np.asarray(value)
        return out
