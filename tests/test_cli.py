"""Smoke tests for the command line front end."""

import pytest

from optcalc.cli import main

MARKET = ["--S0", "100", "--K", "100", "--T", "1", "--r", "0.05", "--sigma", "0.2"]


def _run(capsys, argv):
    assert main(argv) == 0
    return capsys.readouterr().out


def test_bs(capsys):
    out = _run(capsys, ["bs", *MARKET])
    assert abs(float(out) - 10.4506) < 1e-3


def test_bs_put(capsys):
    out = _run(capsys, ["bs", *MARKET, "--kind", "p"])
    assert abs(float(out) - 5.5735) < 1e-3


def test_single_greek(capsys):
    out = _run(capsys, ["greeks", *MARKET, "--greek", "delta"])
    assert abs(float(out) - 0.636831) < 1e-5


def test_all_greeks(capsys):
    out = _run(capsys, ["greeks", *MARKET])
    names = [line.split()[0] for line in out.splitlines()]
    assert names == ["delta", "gamma", "theta", "vega", "rho"]


def test_mc(capsys):
    out = _run(capsys, ["mc", *MARKET, "--n-sims", "2000", "--seed", "1"])
    px = float(out.split()[0])
    assert 8.0 < px < 13.0
    assert "stderr" in out


def test_futures(capsys):
    out = _run(capsys, ["futures", "--pv", "100", "--r", "0.05", "--T", "2"])
    assert float(out) == pytest.approx(110.25)


def test_strategy(capsys):
    out = _run(capsys, ["strategy", "call-spread", "--spot", "120",
                        "--leg", "100:5:call", "--leg", "110:2:call"])
    assert float(out) == pytest.approx(7.0)


def test_invalid_time_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["greeks", "--S0", "100", "--K", "100", "--T", "0", "--r", "0.05",
              "--sigma", "0.2"])
    assert exc.value.code == 2
    assert "Time must be positive" in capsys.readouterr().err


def test_misordered_strategy_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["strategy", "butterfly", "--spot", "100",
              "--leg", "110:1", "--leg", "100:1", "--leg", "90:1"])
    assert exc.value.code == 2
    assert "ascending" in capsys.readouterr().err


def test_unknown_greek_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["greeks", *MARKET, "--greek", "vanna"])
    assert exc.value.code == 2
