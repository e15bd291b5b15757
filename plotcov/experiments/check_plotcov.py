import argparse
import os

import numpy as np

import matplotlib
matplotlib.use('agg')
import matplotlib.pyplot as plt
import seaborn as sns

import corner

from plotcov.ellipse.plotting import draw_covariance_ellipse, plot_covariance
from plotcov.utils.make_2d_toy_covar import covar_gen
from plotcov.utils.misc import get_logger
from plotcov.utils.stats import conf2mahal, mahal2conf, mahalanobis


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Plot the confidence ellipse of a 2-D Gaussian over samples from it.'
    )
    parser.add_argument('--mean', type=float, nargs=2, default=[0.0, 0.0])
    parser.add_argument('--covar', type=str, default='correlated_covar1')
    parser.add_argument('--conf', type=float, default=0.9)
    parser.add_argument('--num_pts', type=int, default=100)
    parser.add_argument('--n_samples', type=int, default=1000)
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--color', type=str, default='r')
    parser.add_argument('--hist2d', action='store_true',
                        help='show the samples as a 2-D histogram instead of a scatter')
    parser.add_argument('--filled', action='store_true',
                        help='also shade the region inside the ellipse')
    parser.add_argument('--dir', type=str, default='results/')
    parser.add_argument('--name', type=str, default=None)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    name = args.name
    if name is None:
        name = args.covar + '_seed_' + str(args.seed)

    logger = get_logger(
        logpath=os.path.join(args.dir, 'logs', name + '.log'),
        filepath=os.path.abspath(__file__),
        name='plotcov'
    )
    logger.info(args)

    rng = np.random.RandomState(args.seed)
    mean = np.array(args.mean)
    cov = covar_gen(args.covar, rng=rng)

    X = rng.multivariate_normal(mean=mean, cov=cov, size=args.n_samples)

    sns.set()
    fig, ax = plt.subplots()

    if args.hist2d and np.any(cov):
        corner.hist2d(X[:, 0], X[:, 1], ax=ax)
    else:
        ax.scatter(X[:, 0], X[:, 1], alpha=0.2, marker='x')

    handles = draw_covariance_ellipse(
        mean,
        cov,
        ax,
        conf=args.conf,
        num_pts=args.num_pts,
        color=args.color
    )
    logger.info('Drew {} elements'.format(len(handles)))

    if np.any(cov):
        if args.filled:
            plot_covariance(mean, cov, ax, conf=args.conf, alpha=0.3,
                            color=args.color)

        radius = conf2mahal(args.conf, 2)
        inside = np.mean(mahalanobis(X, mean, cov) <= radius ** 2)
        message = 'Radius: {:.4f}, nominal mass: {:.4f}, empirical mass: {:.4f}'.format(
            radius, mahal2conf(radius ** 2, 2), inside
        )
        logger.info(message)
    else:
        logger.info('Point mass, no ellipse to check')

    ax.set_aspect('equal')

    figpath = os.path.join(args.dir, name + '.pdf')
    fig.savefig(figpath)
    plt.close(fig)
    logger.info('Saved figure to {}'.format(figpath))

    return figpath


if __name__ == '__main__':
    main()
