# optcalc: European option and strategy calculator
# Public API

# Data model & errors
from .core import (
    OptionType, Greek, CALL, PUT,
    BlackScholesParams, GreeksParams, MonteCarloParams, FuturesParams,
    PricingError, InvalidParameterError, UnknownGreekError,
    StrategyError, SimulationCancelled,
)

# Standard-normal primitives
from .distributions import normal_cdf, normal_pdf

# Pricers
from .black_scholes import (
    price as calculate_black_scholes,
    greek as calculate_greeks,
    greeks as calculate_all_greeks,
)
from .monte_carlo import euro_price_mc as calculate_monte_carlo
from .futures import future_value as calculate_futures

# Random sources & config
from .random_source import UniformSource, UniformGenerator
from .config import SimulationConfig, DEFAULT_SIMULATION

# Strategies
from .strategies import Option, put_spread, call_spread, butterfly, strangle, straddle

__all__ = [
    # Data model
    "OptionType", "Greek", "CALL", "PUT",
    "BlackScholesParams", "GreeksParams", "MonteCarloParams", "FuturesParams",
    # Errors
    "PricingError", "InvalidParameterError", "UnknownGreekError",
    "StrategyError", "SimulationCancelled",
    # Primitives
    "normal_cdf", "normal_pdf",
    # Pricers
    "calculate_black_scholes", "calculate_greeks", "calculate_all_greeks",
    "calculate_monte_carlo", "calculate_futures",
    # Sources & config
    "UniformSource", "UniformGenerator", "SimulationConfig", "DEFAULT_SIMULATION",
    # Strategies
    "Option", "put_spread", "call_spread", "butterfly", "strangle", "straddle",
]

__version__ = "0.1.0"
