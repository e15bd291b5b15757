import numpy as np

FIXED_COVARS = {
    'gmm': [[0.1, 0.0],
            [0.0, 1.0]],
    'fixed_diagonal_covar1': [[0.1, 0.0],
                              [0.0, 3.0]],
    'fixed_diagonal_covar2': [[0.3, 0.0],
                              [0.0, 0.3]],
    'fixed_diagonal_covar3': [[0.2, 0.0],
                              [0.0, 0.2]],
    'fixed_diagonal_covar4': [[0.05, 0.0],
                              [0.0, 1.0]],
    'fixed_diagonal_covar5': [[0.05, 0.0],
                              [0.0, 0.8]],
    'fixed_diagonal_covar6': [[0.5, 0.0],
                              [0.0, 0.01]],
    'correlated_covar1': [[1.0, 0.8],
                          [0.8, 1.0]],
    'correlated_covar2': [[2.0, -0.75 * np.sqrt(8.0)],
                          [-0.75 * np.sqrt(8.0), 4.0]],
    'point_mass': [[0.0, 0.0],
                   [0.0, 0.0]],
}


def covar_gen(covar, rng=np.random):
    if covar in FIXED_COVARS:
        return np.array(FIXED_COVARS[covar])

    elif covar == 'random_covar':
        q = 2 * rng.randn(2, 2)
        return q.T @ q

    elif covar == 'random_diagonal_covar1':
        sigma_x = rng.normal(0.0, 0.1)**2
        sigma_y = rng.normal(0.0, 1.0)**2

        return np.array([[sigma_x, 0.0],
                         [0.0, sigma_y]])

    else:
        raise ValueError('Choose one of the available covariance options.')
