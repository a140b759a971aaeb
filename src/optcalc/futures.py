from .core import FuturesParams


def future_value(params: FuturesParams) -> float:
    """Worth of ``present_value`` after ``time_to_expiry`` years of annual compounding."""
    return params.present_value * (1.0 + params.interest_rate) ** params.time_to_expiry
