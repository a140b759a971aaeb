import math
from math import log, sqrt, exp
from typing import Dict, Union

from .core import (
    BlackScholesParams, GreeksParams, Greek, CALL, check_market,
)
from .distributions import normal_cdf as _N, normal_pdf as _n


def _d1_d2(params):
    check_market(params)
    S0, K, T = params.underlying_price, params.strike_price, params.time_to_expiry
    r, sigma = params.interest_rate, params.volatility
    rt = sigma * sqrt(T)
    d1 = (log(S0 / K) + (r + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def price(params: BlackScholesParams) -> float:
    """Closed-form European price (no dividend yield)."""
    d1, d2 = _d1_d2(params)
    S0, K = params.underlying_price, params.strike_price
    disc_r = exp(-params.interest_rate * params.time_to_expiry)
    if params.option_type is CALL:
        return S0 * _N(d1) - K * disc_r * _N(d2)
    return K * disc_r * _N(-d2) - S0 * _N(-d1)


def greeks(params: GreeksParams) -> Dict[str, float]:
    """All five sensitivities.

    Vega is dPrice/dSigma (not per 1%), theta is per year and rho is per unit
    of rate.  The dividend yield discounts spot exposure but is not folded
    into d1.
    """
    d1, d2 = _d1_d2(params)
    S0, K, T = params.underlying_price, params.strike_price, params.time_to_expiry
    r, q, sigma = params.interest_rate, params.dividend_yield, params.volatility

    n_d1   = _n(d1)
    disc_r = math.exp(-r * T)
    disc_q = math.exp(-q * T)
    sqrt_T = math.sqrt(T)

    # Common
    gamma = disc_q * n_d1 / (S0 * sigma * sqrt_T)
    vega  = S0 * disc_q * n_d1 * sqrt_T
    decay = -(S0 * sigma * disc_q * n_d1) / (2 * sqrt_T)

    if params.option_type is CALL:
        delta = disc_q * _N(d1)
        theta = (decay
                 - r * K * disc_r * _N(d2)
                 + q * S0 * disc_q * _N(d1))
        rho   = K * T * disc_r * _N(d2)
    else:
        delta = disc_q * (_N(d1) - 1.0)
        theta = (decay
                 + r * K * disc_r * _N(-d2)
                 - q * S0 * disc_q * _N(-d1))
        rho   = -K * T * disc_r * _N(-d2)

    return {"delta": delta, "gamma": gamma, "theta": theta, "vega": vega, "rho": rho}


def greek(params: GreeksParams, which: Union[Greek, str]) -> float:
    """Single sensitivity selected by ``Greek`` member or name."""
    which = Greek.coerce(which)
    return greeks(params)[which.value]
