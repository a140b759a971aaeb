# optcalc/monte_carlo.py

from __future__ import annotations
import logging
import math
import numpy as np
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional

from .config import DEFAULT_SIMULATION, SimulationConfig
from .core import (
    MonteCarloParams, CALL, InvalidParameterError, SimulationCancelled,
    check_market,
)
from .random_source import UniformGenerator, UniformSource

logger = logging.getLogger(__name__)


# ---- helper: one simulation chunk (daily GBM steps, only terminal S_T kept) ----

def _mc_chunk_sums(
    n: int,
    *,
    S0: float, K: float, T: float, r: float, sigma: float,
    kind: str, total_days: int, source: UniformSource,
):
    """
    Simulate `n` trials of `total_days` daily GBM steps each and return the
    sufficient statistics of the undiscounted payoff:
        n, sum(payoff), sum(payoff^2)

    Per trial and day the source is read as u1 then u2, so the stream
    consumed is the same whatever the chunk size.  The exception is a zero
    u1: its replacement is drawn after the whole chunk, so a run that hits
    one depends on where the chunk boundaries fall.
    """
    if n <= 0:
        return (0, 0.0, 0.0)

    dt = T / total_days
    drift = (r - 0.5 * sigma * sigma) * dt
    vol = sigma * math.sqrt(dt)

    u = np.asarray(source.fill((n, total_days, 2)), dtype=float)
    u1 = _resample_zeros(u[..., 0], source)
    u2 = u[..., 1]

    # Box-Muller
    Z = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * math.pi * u2)

    # price *= exp(drift + diffusion) each day, accumulated in log space
    ST = S0 * np.exp(np.sum(drift + vol * Z, axis=1))

    if kind == CALL:
        payoff = np.maximum(ST - K, 0.0)
    else:
        payoff = np.maximum(K - ST, 0.0)

    return (payoff.size, float(payoff.sum()), float((payoff * payoff).sum()))


def _resample_zeros(u1: np.ndarray, source: UniformSource) -> np.ndarray:
    """ln(0) is undefined: redraw any zero u1 from the same source."""
    zero = u1 <= 0.0
    if not zero.any():
        return u1
    u1 = u1.copy()
    while zero.any():
        u1[zero] = source.fill(int(zero.sum()))
        zero = u1 <= 0.0
    return u1


def _aggregate_sums(stats_list):
    n    = sum(s[0] for s in stats_list)
    sumX = sum(s[1] for s in stats_list)
    sumX2 = sum(s[2] for s in stats_list)
    return n, sumX, sumX2


def trading_days(T: float, days_per_year: float = DEFAULT_SIMULATION.days_per_year) -> int:
    """Number of whole daily steps in ``T`` years."""
    return int(math.floor(T * days_per_year))


def _check(params: MonteCarloParams, days_per_year: float) -> int:
    check_market(params)
    if params.number_of_simulations < 1:
        raise InvalidParameterError(
            f"number_of_simulations must be at least 1, got {params.number_of_simulations}")
    total_days = trading_days(params.time_to_expiry, days_per_year)
    if total_days < 1:
        raise InvalidParameterError(
            f"Time to expiry {params.time_to_expiry} is shorter than one daily step")
    return total_days


def _raise_if_cancelled(cancel, done: int, total: int) -> None:
    if cancel is not None and cancel.is_set():
        logger.debug("Monte Carlo cancelled after %d of %d trials", done, total)
        raise SimulationCancelled(f"Simulation cancelled after {done} of {total} trials")


def euro_price_mc(
    params: MonteCarloParams,
    *,
    source: Optional[UniformSource] = None,
    seed: Optional[int] = None,
    config: SimulationConfig = DEFAULT_SIMULATION,
    chunk_size: Optional[int] = None,
    n_workers: Optional[int] = None,
    cancel=None,
    return_stderr: bool = False,
):
    """
    European option Monte-Carlo pricer on a daily-stepped risk-neutral GBM.
    Returns the discounted average payoff, or (price, stderr) when
    `return_stderr` is set.

    - `source` supplies uniform(0, 1) draws; default is a fresh
      `UniformGenerator(seed=seed)`.
    - Trials are streamed in chunks of at most `chunk_size` trials and at
      most `config.max_draws` uniform draws, so memory stays bounded
      however long the expiry.
    - `n_workers > 1` prices chunks in a process pool; each chunk gets its
      own child stream from `source.spawn`.
    - `cancel` is any object with `is_set()` (e.g. `threading.Event`),
      checked between chunks; raises `SimulationCancelled` once set.
    """
    chunk_size = config.chunk_size if chunk_size is None else int(chunk_size)
    n_workers = config.n_workers if n_workers is None else int(n_workers)
    if chunk_size <= 0:
        raise InvalidParameterError(f"chunk_size must be positive, got {chunk_size}")

    total_days = _check(params, config.days_per_year)
    # 2 draws per trial per day
    chunk_size = min(chunk_size, max(1, config.max_draws // (2 * total_days)))
    S0, K, T = params.underlying_price, params.strike_price, params.time_to_expiry
    r, sigma = params.interest_rate, params.volatility
    kind = params.option_type

    if source is None:
        source = UniformGenerator(0.0, 1.0, seed=seed)

    # plan chunks
    chunks = []
    remaining = int(params.number_of_simulations)
    while remaining > 0:
        m = min(chunk_size, remaining)
        chunks.append(m)
        remaining -= m

    logger.debug(
        "Monte Carlo %s: %d trials x %d days in %d chunks (%d workers)",
        kind.value, params.number_of_simulations, total_days, len(chunks), n_workers,
    )

    common = dict(S0=S0, K=K, T=T, r=r, sigma=sigma, kind=kind, total_days=total_days)
    total = int(params.number_of_simulations)

    # serial or parallel execution
    stats_list = []
    if n_workers <= 1:
        done = 0
        for m in chunks:
            _raise_if_cancelled(cancel, done, total)
            stats_list.append(_mc_chunk_sums(m, source=source, **common))
            done += m
    else:
        child_sources = source.spawn(len(chunks))
        with ProcessPoolExecutor(max_workers=n_workers) as ex:
            futs = [
                ex.submit(_mc_chunk_sums, m, source=child, **common)
                for m, child in zip(chunks, child_sources)
            ]
            done = 0
            for f in as_completed(futs):
                if cancel is not None and cancel.is_set():
                    for pending in futs:
                        pending.cancel()
                    _raise_if_cancelled(cancel, done, total)
                stats = f.result()
                stats_list.append(stats)
                done += stats[0]

    # aggregate
    n, sumX, sumX2 = _aggregate_sums(stats_list)
    df = math.exp(-r * T)
    meanX = sumX / n
    price = meanX * df
    logger.debug("Monte Carlo %s price %.6f from %d trials", kind.value, price, n)

    if not return_stderr:
        return float(price)
    varX = max(0.0, sumX2 / n - meanX * meanX)
    se = df * math.sqrt(varX / n)
    return float(price), float(se)
