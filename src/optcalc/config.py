"""
Runtime defaults for optcalc.

The library has no configuration files; callers override these defaults
per call, or build their own ``SimulationConfig``.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for Monte Carlo simulation."""

    # Time discretization
    days_per_year: float = 365.0  # one GBM step per calendar day

    # Execution
    chunk_size: int = 10_000  # trials vectorised together
    max_draws: int = 1_000_000  # uniform draws held by one chunk
    n_workers: int = 1  # >1 runs chunks in a process pool

    def __post_init__(self):
        if self.days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {self.days_per_year}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_draws < 2:
            raise ValueError(f"max_draws must be at least 2, got {self.max_draws}")
        if self.n_workers <= 0:
            raise ValueError(f"n_workers must be positive, got {self.n_workers}")


DEFAULT_SIMULATION = SimulationConfig()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the root logger (applications only)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
