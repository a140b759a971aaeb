"""Tests for the standard-normal primitives."""

import math
import numpy as np
import pytest
from statistics import NormalDist

from optcalc.distributions import normal_cdf, normal_pdf

_nd = NormalDist()
XS = [-8.0, -3.1, -1.0, -0.25, 0.0, 0.4, 1.96, 5.0]


class TestNormalCdf:
    def test_median(self):
        assert normal_cdf(0.0) == 0.5

    @pytest.mark.parametrize("x", XS)
    def test_symmetry(self, x):
        assert abs(normal_cdf(x) + normal_cdf(-x) - 1.0) < 1e-15

    @pytest.mark.parametrize("x", XS)
    def test_matches_reference(self, x):
        assert abs(normal_cdf(x) - _nd.cdf(x)) < 1e-12

    def test_saturates(self):
        assert normal_cdf(-40.0) == 0.0
        assert normal_cdf(40.0) == 1.0

    def test_scalar_returns_float(self):
        assert isinstance(normal_cdf(1), float)

    def test_array_in_array_out(self):
        out = normal_cdf(np.array(XS))
        assert out.shape == (len(XS),)
        assert np.all(np.diff(out) >= 0)


class TestNormalPdf:
    def test_peak(self):
        assert abs(normal_pdf(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-15

    @pytest.mark.parametrize("x", XS)
    def test_symmetry(self, x):
        assert normal_pdf(x) == normal_pdf(-x)

    @pytest.mark.parametrize("x", XS)
    def test_matches_reference(self, x):
        assert abs(normal_pdf(x) - _nd.pdf(x)) < 1e-15

    def test_array_in_array_out(self):
        out = normal_pdf([0.0, 1.0])
        assert isinstance(out, np.ndarray)
        assert out[0] > out[1]
