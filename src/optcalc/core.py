from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class PricingError(Exception):
    """Base class for every failure raised by optcalc."""


class InvalidParameterError(PricingError, ValueError):
    """Market or simulation input outside the model's domain."""


class UnknownGreekError(PricingError, ValueError):
    """Greek selector that does not name a supported sensitivity."""


class StrategyError(PricingError, ValueError):
    """Strategy legs supplied with strikes in the wrong order."""


class SimulationCancelled(PricingError):
    """A Monte Carlo run was stopped through its cancel event."""


# ---------------------------------------------------------------------------
# Discriminants
# ---------------------------------------------------------------------------
class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


class Greek(str, Enum):
    """Sensitivities served by ``black_scholes.greek``."""
    DELTA = "delta"
    GAMMA = "gamma"
    THETA = "theta"
    VEGA = "vega"
    RHO = "rho"

    @classmethod
    def coerce(cls, which: Greek | str) -> Greek:
        if isinstance(which, cls):
            return which
        if isinstance(which, str):
            key = which.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownGreekError(f"Invalid Greek specified: {which!r}")


CALL = OptionType.CALL
PUT  = OptionType.PUT


def _coerce_kind(record) -> None:
    # frozen dataclass: bypass __setattr__ once, at construction
    object.__setattr__(record, "option_type", OptionType(record.option_type))


# ---------------------------------------------------------------------------
# Parameter records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BlackScholesParams:
    """Inputs of the closed-form model.

    ``paid_price`` is the premium the caller actually paid; it is carried
    for reporting and never enters a pricing formula.
    """
    interest_rate: float      # continuous risk-free
    underlying_price: float
    strike_price: float
    time_to_expiry: float     # years
    volatility: float
    option_type: OptionType = CALL
    paid_price: float = 0.0

    def __post_init__(self):
        _coerce_kind(self)


@dataclass(frozen=True)
class GreeksParams:
    interest_rate: float
    underlying_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    option_type: OptionType = CALL
    paid_price: float = 0.0
    dividend_yield: float = 0.0   # continuous, e.g. 0.01 for 1 %

    def __post_init__(self):
        _coerce_kind(self)


@dataclass(frozen=True)
class MonteCarloParams:
    number_of_simulations: int
    interest_rate: float
    underlying_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    option_type: OptionType = CALL
    paid_price: float = 0.0

    def __post_init__(self):
        _coerce_kind(self)


@dataclass(frozen=True)
class FuturesParams:
    present_value: float
    interest_rate: float          # annual, compounded once a year
    time_to_expiry: float         # years


# ---------------------------------------------------------------------------
# Preconditions shared by the pricers
# ---------------------------------------------------------------------------
def check_market(params) -> None:
    """Reject inputs for which the lognormal model is undefined.

    Applies to every record exposing ``underlying_price``, ``strike_price``,
    ``time_to_expiry`` and ``volatility``.
    """
    _positive("Time", params.time_to_expiry)
    _positive("Volatility", params.volatility)
    _positive("Underlying price", params.underlying_price)
    _positive("Strike price", params.strike_price)
    _finite("Interest rate", params.interest_rate)
    _finite("Dividend yield", getattr(params, "dividend_yield", 0.0))


def _positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be positive and finite, got {value}")


def _finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
