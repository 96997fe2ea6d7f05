"""
Configuration constants for bsgreeks.

Single source of truth for the reference contract, output field order,
and CLI formatting.
"""

# ---------------------------------------------------------------------------
# Reference contract (at-the-money, one year)
# ---------------------------------------------------------------------------
DEFAULTS = dict(
    k=100.0,   # strike
    s=100.0,   # spot
    t=1.0,     # years
    r=0.05,    # cont. risk-free
    v=0.2,     # annualised vol
)

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
GREEK_NAMES = ("price", "delta", "gamma", "theta", "vega", "rho")

PRECISION = 10  # digits after the decimal point in CLI tables

# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------
PARITY_RTOL = 1e-9  # relative tolerance for put-call parity checks
