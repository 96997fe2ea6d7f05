# black_scholes.py
# Closed-form Black-Scholes price and Greeks for European options.
# Params fields may be scalars or NumPy arrays; results broadcast.

from __future__ import annotations
import numpy as np

from .core import BlackScholesModelParams, BlackScholesModelResults, OptionType
from .distribution import NormalDistribution


class BlackScholesModel:
    """Black-Scholes engine bound to one distribution.

    The model keeps no state besides ``dist``; every method is a pure
    function of its arguments, so one instance can be shared freely.

    Greeks are in absolute units: vega is dPrice/dSigma (not per 1%),
    theta is per year, rho is dPrice/dr.
    """

    def __init__(self, dist: NormalDistribution | None = None):
        self.dist = dist if dist is not None else NormalDistribution.standard()

    def __repr__(self):
        return f"{type(self).__name__}(dist={self.dist!r})"

    def calc(self, params: BlackScholesModelParams, option_type: OptionType) -> BlackScholesModelResults:
        """Price and all five Greeks in one bundle."""
        option_type = OptionType.parse(option_type)
        return BlackScholesModelResults(
            price=self.price(params, option_type),
            delta=self.delta(params, option_type),
            gamma=self.gamma(params, option_type),
            theta=self.theta(params, option_type),
            vega=self.vega(params, option_type),
            rho=self.rho(params, option_type),
        )

    def price(self, params: BlackScholesModelParams, option_type: OptionType):
        """Option value, recombined as ``s * delta - rho / t``."""
        return params.s * self.delta(params, option_type) - self.rho(params, option_type) / params.t

    def delta(self, params: BlackScholesModelParams, option_type: OptionType):
        """dPrice/dS: ``N(d1)`` for calls, ``-N(-d1)`` for puts."""
        if OptionType.parse(option_type) is OptionType.CALL:
            return self.dist.cdf(params.d1())
        return -self.dist.cdf(-params.d1())

    def gamma(self, params: BlackScholesModelParams, option_type: OptionType):
        """d2Price/dS2: ``n(d1) / (s v sqrt(t))``, same for calls and puts."""
        return self.dist.pdf(params.d1()) / (params.s * params.v * np.sqrt(params.t))

    def theta(self, params: BlackScholesModelParams, option_type: OptionType):
        """Time decay per year: ``-v vega / (2t) - r rho / t``."""
        return (-params.v * 0.5 * self.vega(params, option_type) / params.t
                - params.r * self.rho(params, option_type) / params.t)

    def vega(self, params: BlackScholesModelParams, option_type: OptionType):
        """dPrice/dSigma (absolute, not per 1%): ``s n(d1) sqrt(t)``, same for calls and puts."""
        return params.s * self.dist.pdf(params.d1()) * np.sqrt(params.t)

    def rho(self, params: BlackScholesModelParams, option_type: OptionType):
        """dPrice/dr: ``k t e^{-rt} N(d2)`` for calls, ``-k t e^{-rt} N(-d2)`` for puts."""
        disc = params.k * params.t * np.exp(-params.r * params.t)
        if OptionType.parse(option_type) is OptionType.CALL:
            return disc * self.dist.cdf(params.d2())
        return -disc * self.dist.cdf(-params.d2())

    def closed_form_price(self, params: BlackScholesModelParams, option_type: OptionType):
        """Textbook price ``s N(d1) - k e^{-rt} N(d2)`` (and the put mirror).

        Independent of :meth:`price`; the two agree to rounding.
        """
        disc_k = params.k * np.exp(-params.r * params.t)
        d1, d2 = params.d1(), params.d2()
        if OptionType.parse(option_type) is OptionType.CALL:
            return params.s * self.dist.cdf(d1) - disc_k * self.dist.cdf(d2)
        return -params.s * self.dist.cdf(-d1) + disc_k * self.dist.cdf(-d2)
