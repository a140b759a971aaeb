"""Multi-leg option strategies at expiry.

Every combinator takes ``Option`` legs and a spot (float or array) and returns
the strategy's net payoff, premiums included.  Spots given as arrays give a
payoff profile in one call.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass

from .core import OptionType, StrategyError, CALL, _coerce_kind

__all__ = [
    "Option",
    "put_spread",
    "call_spread",
    "butterfly",
    "strangle",
    "straddle",
]


def _out(x):
    return float(x) if np.ndim(x) == 0 else x


@dataclass(frozen=True)
class Option:
    """One strategy leg: strike, premium paid and call/put."""
    strike: float
    premium: float
    option_type: OptionType = CALL

    def __post_init__(self):
        _coerce_kind(self)

    def payoff(self, spot):
        """Intrinsic value at ``spot`` minus the premium."""
        spot = np.asarray(spot, dtype=float)
        if self.option_type is CALL:
            intrinsic = np.maximum(spot - self.strike, 0.0)
        else:
            intrinsic = np.maximum(self.strike - spot, 0.0)
        return _out(intrinsic - self.premium)


# ---------------------------------------------------------------------------
# Vertical spreads
# ---------------------------------------------------------------------------

def put_spread(long_put: Option, short_put: Option, spot):
    """Long the higher-strike put, short the lower-strike put."""
    if long_put.strike <= short_put.strike:
        raise StrategyError("Long put strike should be higher than short put strike")
    return _out(long_put.payoff(spot) - short_put.payoff(spot))


def call_spread(long_call: Option, short_call: Option, spot):
    """Long the lower-strike call, short the higher-strike call."""
    if long_call.strike >= short_call.strike:
        raise StrategyError("Long call strike should be lower than short call strike")
    return _out(long_call.payoff(spot) - short_call.payoff(spot))


# ---------------------------------------------------------------------------
# Butterfly
# ---------------------------------------------------------------------------

def butterfly(wing1: Option, body: Option, wing2: Option, spot):
    """Long ``wing1``, short two ``body``, long ``wing2``; strikes strictly ascending."""
    if not (wing1.strike < body.strike < wing2.strike):
        raise StrategyError("Strikes should be in ascending order")
    return _out(wing1.payoff(spot) - 2.0 * body.payoff(spot) + wing2.payoff(spot))


# ---------------------------------------------------------------------------
# Volatility plays
# ---------------------------------------------------------------------------

def strangle(put: Option, call: Option, spot):
    if put.strike >= call.strike:
        raise StrategyError("Put strike should be lower than Call strike")
    return _out(put.payoff(spot) + call.payoff(spot))


def straddle(put: Option, call: Option, spot):
    if put.strike != call.strike:
        raise StrategyError("For Straddle, Put and Call strikes should be the same")
    return _out(put.payoff(spot) + call.payoff(spot))
