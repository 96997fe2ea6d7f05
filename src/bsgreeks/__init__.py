# bsgreeks: closed-form Black-Scholes pricing and Greeks
# Public API

# Data model
from .core import (
    OptionType, CALL, PUT,
    BlackScholesModelParams, BlackScholesModelResults,
)

# Distribution
from .distribution import NormalDistribution, std_norm_dist

# Model
from .black_scholes import BlackScholesModel

# Risk utilities
from .risk import put_call_parity_residual, scenario_grid, portfolio_risk

__all__ = [
    # Data model
    "OptionType", "CALL", "PUT",
    "BlackScholesModelParams", "BlackScholesModelResults",
    # Distribution
    "NormalDistribution", "std_norm_dist",
    # Model
    "BlackScholesModel",
    # Risk
    "put_call_parity_residual", "scenario_grid", "portfolio_risk",
]

__version__ = "0.1.0"
