import numbers

import numpy as np
from scipy.stats import chi2


def _check_dimensions(d):
    if not isinstance(d, numbers.Integral) or d < 1:
        raise ValueError('d must be a positive integer, got {}'.format(d))


def conf2mahal(c, d):
    """
    Translate a confidence interval into a Mahalanobis radius.

    If X is a d dimensional Gaussian vector, its squared Mahalanobis
    distance from the mean follows a chi-squared distribution with d
    degrees of freedom, so the ellipsoid enclosing the fraction c of
    the probability mass is found by evaluating the inverse CDF of that
    distribution at c.

    Args:
        c: the confidence interval, in [0, 1].
        d: the number of dimensions of the Gaussian distribution.

    Returns:
        The squared Mahalanobis distance m whose ellipsoid
        (x - mu)^T C^-1 (x - mu) <= m encloses the fraction c of the
        mass. Scaling the unit ellipse by m itself, as the plotting code
        does, encloses mahal2conf(m ** 2, d) instead, more than c.
    """
    _check_dimensions(d)
    if not 0.0 <= c <= 1.0:
        raise ValueError('c must be a confidence between 0 and 1, got {}'.format(c))

    return chi2.ppf(c, d)


def mahal2conf(m, d):
    """Probability mass enclosed by the ellipsoid of Mahalanobis radius m."""
    _check_dimensions(d)
    if m < 0:
        raise ValueError('m must be non-negative, got {}'.format(m))

    return chi2.cdf(m, d)


def mahalanobis(x, mean, cov):
    """
    Squared Mahalanobis distance (x - m)^T C^-1 (x - m).

    x can be a single point of shape (d,) or a batch of shape (n, d).
    """
    x = np.asarray(x, dtype=float)
    diff = np.atleast_2d(x - np.asarray(mean, dtype=float))
    sol = np.linalg.solve(np.asarray(cov, dtype=float), diff.T)
    dist = np.sum(diff.T * sol, axis=0)

    if x.ndim == 1:
        return dist[0]
    return dist
