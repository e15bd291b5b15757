import collections
import logging

import numpy as np
import scipy.sparse
import matplotlib as mpl
import matplotlib.lines
import matplotlib.patches
import matplotlib.pyplot as plt

from plotcov.ellipse.options import EllipseOptions
from plotcov.utils.stats import conf2mahal

logger = logging.getLogger(__name__)

EllipseGeometry = collections.namedtuple(
    'EllipseGeometry', ['boundary', 'axes', 'radius']
)


def _check_inputs(mean, cov):
    if scipy.sparse.issparse(cov):
        cov = cov.toarray()
    cov = np.asarray(cov, dtype=float)
    if cov.shape != (2, 2):
        raise ValueError('cov must be a 2 by 2 matrix, got shape {}'.format(cov.shape))

    mean = np.asarray(mean, dtype=float)
    if mean.size != 2:
        raise ValueError('mean must be a 2 by 1 vector, got {} elements'.format(mean.size))

    return mean.ravel(), cov


def _eig(cov, rtol=1e-10):
    v, w = np.linalg.eigh(cov)
    # round-off can leave slightly negative eigenvalues on singular matrices
    if np.any(v < -rtol * max(np.abs(v).max(), 1.0)):
        raise ValueError(
            'cov must be positive semi-definite, got eigenvalues {}'.format(v)
        )
    return np.clip(v, 0.0, None), w


def covariance_ellipse(mean, cov, conf=0.9, num_pts=100):
    """
    Compute the confidence ellipse of a bivariate Gaussian.

    The boundary is the unit circle mapped through k * V * sqrt(D) and
    shifted to the mean, where V, D are the eigenvectors and eigenvalues
    of cov and k = conf2mahal(conf, 2). It has num_pts points and is
    closed, its first and last points coincide. Every boundary point is
    at squared Mahalanobis distance k ** 2 from the mean, so the enclosed
    mass is mahal2conf(k ** 2, 2), not conf.

    Raises ValueError when cov has a clearly negative eigenvalue.

    Returns:
        EllipseGeometry(boundary, axes, radius): boundary is a (num_pts, 2)
        array, axes holds one (2, 2) segment [mean, end] per eigenvector.
        For the zero covariance the boundary is the mean alone and there
        are no axes.
    """
    mean, cov = _check_inputs(mean, cov)

    if not np.any(cov):
        return EllipseGeometry(mean[None, :], [], 0.0)

    k = conf2mahal(conf, 2)
    v, w = _eig(cov)

    t = np.linspace(0, 2 * np.pi, num_pts)
    u = np.stack([np.cos(t), np.sin(t)])
    z = mean[:, None] + (k * w * np.sqrt(v)) @ u

    L = k * np.sqrt(v)
    axes = [np.stack([mean, mean + L[i] * w[:, i]]) for i in range(2)]

    return EllipseGeometry(z.T, axes, k)


def draw_covariance_ellipse(mean, cov, ax=None, hold=True, **kwargs):
    """
    Plot a covariance ellipse with its major and minor axes.

    Args:
        mean: the mean of the distribution, 2 elements.
        cov: a 2 x 2 symmetric positive semi-definite covariance, dense or
            scipy.sparse, or the zero matrix.
        ax: the matplotlib axes to draw on, the current axes by default.
        hold: overlay on the existing content of ax. When False the axes
            are cleared before drawing.
        conf: confidence passed to conf2mahal, default 0.9. The boundary is
            scaled by that squared-distance quantile itself, so the ellipse
            encloses mahal2conf(conf2mahal(conf, 2) ** 2, 2) of the mass,
            more than conf.
        num_pts: the number of points on the ellipse, default 100.
        **kwargs: any other keyword goes unchanged to every ax.plot call.

    Returns:
        List of Line2D handles: both axes and then the ellipse, or only the
        mean point for the zero covariance.
    """
    mean, cov = _check_inputs(mean, cov)
    opts = EllipseOptions.from_kwargs(kwargs)

    if ax is None:
        ax = plt.gca()

    geometry = covariance_ellipse(mean, cov, opts.conf, opts.num_pts)

    # unknown style keywords raise here, before the axes are touched
    mpl.lines.Line2D([], [], **opts.style)

    if not hold:
        ax.cla()

    handles = []
    style = opts.style

    if not geometry.axes:
        logger.debug('Zero covariance, plotting the mean only')
        style = dict(style)
        style.setdefault('marker', '.')

    for axis in geometry.axes:
        handles += ax.plot(axis[:, 0], axis[:, 1], **style)

    z = geometry.boundary
    handles += ax.plot(z[:, 0], z[:, 1], **style)

    return handles


def plot_covariance(mean, cov, ax, conf=0.9, alpha=0.5, color=None):
    """
    Plot a filled Gaussian covariance ellipse on a Matplotlib axis.

    Adapted from https://scikit-learn.org/stable/auto_examples/
    mixture/plot_gmm_covariances.html
    """
    mean, cov = _check_inputs(mean, cov)
    if not np.any(cov):
        raise ValueError('cov is zero, there is no region to fill')

    k = conf2mahal(conf, 2)
    v, w = _eig(cov)
    angle = np.degrees(np.arctan2(w[1, 0], w[0, 0]))
    v = 2. * k * np.sqrt(v)

    ell = mpl.patches.Ellipse(
        mean,
        v[0],
        v[1],
        angle=angle,
        color=color
    )
    ell.set_clip_box(ax.bbox)
    ell.set_alpha(alpha)
    ax.add_patch(ell)

    return ell
