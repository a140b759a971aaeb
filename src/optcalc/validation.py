"""Model validation.

Benchmarks the Monte Carlo engine against the closed-form model, measures
its convergence rate, and checks put-call parity of the closed form.
"""

from __future__ import annotations

import logging
import math
import numpy as np
from dataclasses import replace
from typing import Optional, Sequence

from .core import BlackScholesParams, MonteCarloParams, CALL, PUT

__all__ = [
    "cross_validate",
    "convergence_analysis",
    "put_call_parity_gap",
]

logger = logging.getLogger(__name__)


def _bs_params(params: MonteCarloParams) -> BlackScholesParams:
    return BlackScholesParams(
        interest_rate=params.interest_rate,
        underlying_price=params.underlying_price,
        strike_price=params.strike_price,
        time_to_expiry=params.time_to_expiry,
        volatility=params.volatility,
        option_type=params.option_type,
        paid_price=params.paid_price,
    )


# ---------------------------------------------------------------------------
# Cross-model benchmarking
# ---------------------------------------------------------------------------

def cross_validate(
    params: MonteCarloParams,
    *,
    seed: Optional[int] = 42,
    **mc_kwargs,
) -> dict:
    """Price ``params`` with both models and compare.

    Extra keyword arguments go to ``euro_price_mc``.

    Returns
    -------
    dict
        ``"bs"``, ``"mc"`` (price, stderr), ``"abs_error"``, ``"z_score"``
        (error in units of the MC standard error).
    """
    from .black_scholes import price as bs_price
    from .monte_carlo import euro_price_mc

    ref = bs_price(_bs_params(params))
    p, se = euro_price_mc(params, seed=seed, return_stderr=True, **mc_kwargs)
    err = abs(p - ref)
    z = err / se if se > 0 else float("inf")
    logger.debug("cross_validate: bs=%.6f mc=%.6f se=%.6f z=%.2f", ref, p, se, z)
    return {"bs": ref, "mc": (p, se), "abs_error": err, "z_score": z}


# ---------------------------------------------------------------------------
# Convergence analysis
# ---------------------------------------------------------------------------

def convergence_analysis(
    params: MonteCarloParams,
    simulation_counts: Sequence[int],
    *,
    seed: Optional[int] = 42,
    reference: Optional[float] = None,
) -> dict:
    """Analyse Monte Carlo convergence as the number of simulations grows.

    Parameters
    ----------
    simulation_counts : sequence of int
        Values of ``number_of_simulations`` to test.
    reference : float, optional
        True price for error computation.  Default: BS analytical.

    Returns
    -------
    dict
        ``"counts"``, ``"prices"``, ``"stderrs"``, ``"errors"``,
        ``"order"`` (estimated; 0.5 for plain Monte Carlo).
    """
    from .black_scholes import price as bs_price
    from .monte_carlo import euro_price_mc

    counts = [int(n) for n in simulation_counts]
    if reference is None:
        reference = bs_price(_bs_params(params))

    prices, stderrs = [], []
    for n in counts:
        p, se = euro_price_mc(replace(params, number_of_simulations=n),
                              seed=seed, return_stderr=True)
        prices.append(p)
        stderrs.append(se)

    errors = [abs(p - reference) for p in prices]

    # log-log fit on the standard errors: stderr ~ C / n^order
    order = float("nan")
    valid = [(n, s) for n, s in zip(counts, stderrs) if s > 0]
    if len(valid) >= 2:
        log_n = np.log([n for n, _ in valid])
        log_s = np.log([s for _, s in valid])
        coeffs = np.polyfit(log_n, log_s, 1)
        order = -float(coeffs[0])

    return {
        "counts": counts,
        "prices": prices,
        "stderrs": stderrs,
        "errors": errors,
        "order": order,
    }


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def put_call_parity_gap(params: BlackScholesParams) -> float:
    """(C - P) - (S - K e^{-rT}); zero up to rounding for a consistent model."""
    from .black_scholes import price as bs_price

    call = bs_price(replace(params, option_type=CALL))
    put = bs_price(replace(params, option_type=PUT))
    forward_gap = params.underlying_price - params.strike_price * math.exp(
        -params.interest_rate * params.time_to_expiry)
    return (call - put) - forward_gap
