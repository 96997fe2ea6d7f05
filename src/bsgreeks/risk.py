"""Analytic risk utilities on top of :class:`BlackScholesModel`.

Scenario-grid evaluation, put-call parity checks, and portfolio-level
aggregation of closed-form Greeks.  Nothing here bumps or reprices
numerically; every number comes straight from the model's formulas.
"""

from __future__ import annotations

import numpy as np
from dataclasses import replace
from typing import Iterable

from .black_scholes import BlackScholesModel
from .config import GREEK_NAMES
from .core import BlackScholesModelParams, OptionType, CALL, PUT

__all__ = [
    "put_call_parity_residual",
    "scenario_grid",
    "portfolio_risk",
]


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def put_call_parity_residual(
    model: BlackScholesModel,
    params: BlackScholesModelParams,
):
    """``(call - put) - (s - k e^{-rt})``; zero up to rounding."""
    call_px = model.price(params, CALL)
    put_px = model.price(params, PUT)
    forward_gap = params.s - params.k * np.exp(-params.r * params.t)
    return (call_px - put_px) - forward_gap


# ---------------------------------------------------------------------------
# Scenario grid
# ---------------------------------------------------------------------------

def scenario_grid(
    model: BlackScholesModel,
    params: BlackScholesModelParams,
    option_type: OptionType,
    spot_range: np.ndarray,
    vol_range: np.ndarray,
) -> dict:
    """Evaluate the model price across a 2-D (spot × vol) grid.

    Parameters
    ----------
    model : BlackScholesModel
    params : BlackScholesModelParams
        Base contract; ``s`` and ``v`` are replaced by the grid values.
    spot_range : array, shape (n_spot,)
        Spot values to evaluate.
    vol_range : array, shape (n_vol,)
        Volatility values to evaluate.

    Returns
    -------
    dict
        ``"spot_values"``, ``"vol_values"``, ``"prices"`` (shape n_spot×n_vol).
    """
    spot_range = np.asarray(spot_range, dtype=float)
    vol_range = np.asarray(vol_range, dtype=float)

    shocked = replace(
        params,
        s=spot_range[:, np.newaxis],
        v=vol_range[np.newaxis, :],
    )
    prices = np.broadcast_to(
        model.price(shocked, option_type), (len(spot_range), len(vol_range))
    ).copy()

    return {
        "spot_values": spot_range.copy(),
        "vol_values": vol_range.copy(),
        "prices": prices,
    }


# ---------------------------------------------------------------------------
# Portfolio risk
# ---------------------------------------------------------------------------

def portfolio_risk(
    model: BlackScholesModel,
    positions: Iterable[tuple[BlackScholesModelParams, OptionType, float]],
) -> dict:
    """Aggregate value and Greeks for a book of options.

    Parameters
    ----------
    model : BlackScholesModel
    positions : iterable of (params, option_type, quantity)
        ``quantity`` is signed: +1 long one contract, -1 short one.

    Returns
    -------
    dict
        ``"total_price"``, ``"total_delta"``, ``"total_gamma"``,
        ``"total_theta"``, ``"total_vega"``, ``"total_rho"``, and
        ``"positions"`` (list of quantity-scaled per-position dicts).
    """
    totals = {name: 0.0 for name in GREEK_NAMES}
    per_position = []

    for params, option_type, quantity in positions:
        res = model.calc(params, OptionType.parse(option_type)).as_dict()
        scaled = {name: quantity * res[name] for name in GREEK_NAMES}
        for name in GREEK_NAMES:
            totals[name] += scaled[name]
        per_position.append(scaled)

    out = {f"total_{name}": totals[name] for name in GREEK_NAMES}
    out["positions"] = per_position
    return out
