import argparse
import logging
import sys

from .config import configure_logging
from .core import (
    BlackScholesParams, GreeksParams, MonteCarloParams, FuturesParams,
    OptionType, Greek, PricingError, CALL, PUT,
)
from .black_scholes import price as bs_price, greek as bs_greek, greeks as bs_greeks
from .monte_carlo import euro_price_mc
from .futures import future_value
from .strategies import Option, put_spread, call_spread, butterfly, strangle, straddle

logger = logging.getLogger(__name__)


def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")


def _greek(s: str):
    if s.lower() == "all":
        return None
    try:
        return Greek.coerce(s)
    except PricingError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _leg(s: str):
    """STRIKE:PREMIUM[:KIND]"""
    parts = s.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"leg must be STRIKE:PREMIUM[:KIND], got {s!r}")
    try:
        strike, premium = float(parts[0]), float(parts[1])
        kind = OptionType(parts[2]) if len(parts) == 3 else CALL
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))
    return Option(strike, premium, kind)


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S0", type=float, required=True)
    parser.add_argument("--K", type=float, required=True)
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--sigma", type=float, required=True)
    parser.add_argument("--kind", type=_kind, default=CALL, help="call|put")
    parser.add_argument("--paid", type=float, default=0.0, help="premium paid")


def cmd_bs(args):
    params = BlackScholesParams(args.r, args.S0, args.K, args.T, args.sigma,
                                args.kind, args.paid)
    print(f"{bs_price(params):.10f}")


def cmd_greeks(args):
    params = GreeksParams(args.r, args.S0, args.K, args.T, args.sigma,
                          args.kind, args.paid, args.q)
    if args.greek is None:
        for name, value in bs_greeks(params).items():
            print(f"{name:<6}{value:.10f}")
    else:
        print(f"{bs_greek(params, args.greek):.10f}")


def cmd_mc(args):
    params = MonteCarloParams(args.n_sims, args.r, args.S0, args.K, args.T,
                              args.sigma, args.kind, args.paid)
    px, se = euro_price_mc(
        params,
        seed=args.seed,
        n_workers=args.workers,
        return_stderr=True,
    )
    print(f"{px:.10f}  (stderr {se:.10f})")


def cmd_futures(args):
    print(f"{future_value(FuturesParams(args.pv, args.r, args.T)):.10f}")


_STRATEGIES = {
    "put-spread":  (put_spread, 2),
    "call-spread": (call_spread, 2),
    "butterfly":   (butterfly, 3),
    "strangle":    (strangle, 2),
    "straddle":    (straddle, 2),
}


def cmd_strategy(args):
    func, n_legs = _STRATEGIES[args.name]
    if len(args.legs) != n_legs:
        raise PricingError(f"{args.name} takes {n_legs} legs, got {len(args.legs)}")
    print(f"{func(*args.legs, args.spot):.10f}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="optcalc", description="Options pricing CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # BS
    p_bs = sub.add_parser("bs", help="Black-Scholes price")
    add_common(p_bs)
    p_bs.set_defaults(func=cmd_bs)

    # Greeks
    p_gr = sub.add_parser("greeks", help="Black-Scholes Greeks")
    add_common(p_gr)
    p_gr.add_argument("--q", type=float, default=0.0, help="cont. dividend yield")
    p_gr.add_argument("--greek", type=_greek, default=None,
                      help="delta|gamma|theta|vega|rho|all")
    p_gr.set_defaults(func=cmd_greeks)

    # Monte Carlo (daily GBM)
    p_mc = sub.add_parser("mc", help="Monte Carlo price (daily GBM)")
    add_common(p_mc)
    p_mc.add_argument("--n-sims", dest="n_sims", type=int, default=100_000)
    p_mc.add_argument("--seed", type=int, default=None)
    p_mc.add_argument("--workers", type=int, default=1)
    p_mc.set_defaults(func=cmd_mc)

    # Futures
    p_fut = sub.add_parser("futures", help="compounded future value")
    p_fut.add_argument("--pv", type=float, required=True, help="present value")
    p_fut.add_argument("--r", type=float, required=True, help="annual rate")
    p_fut.add_argument("--T", type=float, required=True, help="years")
    p_fut.set_defaults(func=cmd_futures)

    # Strategies
    p_st = sub.add_parser("strategy", help="multi-leg payoff at expiry")
    p_st.add_argument("name", choices=sorted(_STRATEGIES))
    p_st.add_argument("--spot", type=float, required=True)
    p_st.add_argument("--leg", dest="legs", type=_leg, action="append", required=True,
                      help="STRIKE:PREMIUM[:KIND], repeat in strategy order")
    p_st.set_defaults(func=cmd_strategy)

    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.func(args)
    except PricingError as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        p.exit(2, f"optcalc: error: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
