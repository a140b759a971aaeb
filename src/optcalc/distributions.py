# distributions.py
# Standard-normal CDF / PDF.  Scalars in, floats out; arrays in, arrays out.

from __future__ import annotations
import math
import numpy as np
from scipy.special import erfc

_INV_SQRT_2    = 1.0 / math.sqrt(2.0)
_INV_SQRT_2PI  = 1.0 / math.sqrt(2.0 * math.pi)


def normal_cdf(x):
    """P(Z <= x) for standard normal Z, via the complementary error function."""
    out = 0.5 * erfc(-np.asarray(x, dtype=float) * _INV_SQRT_2)
    return float(out) if np.ndim(out) == 0 else out


def normal_pdf(x):
    x = np.asarray(x, dtype=float)
    out = _INV_SQRT_2PI * np.exp(-0.5 * x * x)
    return float(out) if np.ndim(out) == 0 else out
