#!/usr/bin/env python
# -*- coding: utf-8 -*-
r"""
Gibbs sampler for VAR and VEC models with an independent normal / Wishart
prior

Each iteration draws the coefficients conditional on the error covariance
from their normal posterior and then the error precision conditional on
the coefficients from its Wishart posterior.

References
----------
Koop, G. and Korobilis, D. (2010) Bayesian Multivariate Time Series
Methods for Empirical Macroeconomics
"""
import numpy as np
from joblib import Parallel, delayed
from scipy import stats
import scipy.linalg

from bvartools.tools.linalg import cholesky_factor, inv_symm, symmetrize
from bvartools.tools.sm_exceptions import (InvalidArgument, NumericalFailure,
                                           ShapeMismatch,
                                           singular_scale_doc,
                                           singular_precision_doc)
from bvartools.tsa.tsatools import vec, unvec
from bvartools.tsa.vector_ar import util
from bvartools.tsa.vector_ar.priors import NormalWishartPrior

SIGMA_INIT_SCALE = 1e-5


def post_normal(y, x, sigma_i, a_prior, v_i_prior, random_state=None):
    r"""
    Draw the coefficients of a multivariate regression from their normal
    posterior

    For :math:`Y = A X + U` with :math:`vec(A) \sim N(a_0, V_0^{-1})` the
    posterior precision and mean are

    .. math::

        \bar{V}^{-1} = V_0^{-1} + X X' \otimes \Sigma^{-1}, \qquad
        \bar{a} = \bar{V} (V_0^{-1} a_0 + vec(\Sigma^{-1} Y X'))

    Parameters
    ----------
    y : ndarray (K x T)
    x : ndarray (n x T)
    sigma_i : ndarray (K x K)
        Inverse of the error covariance.
    a_prior : ndarray (K n,)
    v_i_prior : ndarray (K n x K n)
        Prior precision.  Zeros give the flat prior.
    random_state : int, SeedSequence or Generator, optional

    Returns
    -------
    draw : ndarray (K n,)
        vec of the K x n coefficient matrix.

    Raises
    ------
    NumericalFailure
        If the posterior precision is not positive definite.
    """
    rng = util.check_random_state(random_state)
    v_post = v_i_prior + np.kron(np.dot(x, x.T), sigma_i)
    L = cholesky_factor(v_post, msg=singular_precision_doc.strip())
    rhs = np.dot(v_i_prior, a_prior) + vec(np.dot(np.dot(sigma_i, y), x.T))
    mean = scipy.linalg.cho_solve((L, True), rhs)
    z = rng.standard_normal(len(mean))
    # L' d = z gives d ~ N(0, (L L')^{-1})
    return mean + scipy.linalg.solve_triangular(L.T, z, lower=False)


def post_wishart(u, df_prior, scale_prior, random_state=None):
    """
    Draw the error covariance from its inverse-Wishart posterior

    Parameters
    ----------
    u : ndarray (K x T)
        Residuals.
    df_prior : float
    scale_prior : ndarray (K x K)
    random_state : int, SeedSequence or Generator, optional

    Returns
    -------
    sigma : ndarray (K x K)
        Error covariance.
    sigma_i : ndarray (K x K)
        Its inverse, the Wishart draw.

    Raises
    ------
    NumericalFailure
        If ``scale_prior + u u'`` or the precision draw is singular.
    """
    rng = util.check_random_state(random_state)
    k, nobs = u.shape
    scale_post = scale_prior + np.dot(u, u.T)
    scale_post_i = inv_symm(scale_post, msg=singular_scale_doc.strip())
    sigma_i = stats.wishart.rvs(df=df_prior + nobs,
                                scale=symmetrize(scale_post_i),
                                random_state=rng)
    sigma_i = symmetrize(np.atleast_2d(sigma_i))
    sigma = symmetrize(inv_symm(sigma_i, msg=singular_scale_doc.strip()))
    return sigma, sigma_i


def _check_sampler_args(iterations, burnin, thin):
    for name, value, minimum in [('iterations', iterations, 1),
                                 ('burnin', burnin, 0),
                                 ('thin', thin, 1)]:
        if isinstance(value, bool) or int(value) != value or value < minimum:
            raise InvalidArgument("%s must be an integer of at least %d, "
                                  "got %r" % (name, minimum, value))
    if burnin >= iterations:
        raise InvalidArgument("burnin (%d) must be smaller than iterations "
                              "(%d)" % (burnin, iterations))
    return int(iterations), int(burnin), int(thin)


def n_stored(iterations, burnin, thin):
    """Number of draws kept by `gibbs_sampler`"""
    return -(-(iterations - burnin) // thin)


def gibbs_sampler(data, iterations=10000, burnin=5000, thin=1, prior=None,
                  sigma_init=None, random_state=None, verbose=False):
    """
    Run a single Gibbs chain

    Parameters
    ----------
    data : RegressionMatrices
        Output of `gen_var` or `gen_vec`.  VEC models are sampled with the
        stacked regressors ``[W; X]``, i.e. an unrestricted ``Pi``.
    iterations : int, default 10000
        Total number of iterations, including the burn-in.
    burnin : int, default 5000
        Number of leading iterations that are discarded.
    thin : int, default 1
        Keep every `thin`-th draw after the burn-in.
    prior : NormalWishartPrior, optional
        Defaults to `NormalWishartPrior.flat`.
    sigma_init : ndarray (K x K), optional
        Starting value of the error covariance.  Defaults to
        ``1e-5 * I_K``.
    random_state : int, SeedSequence or Generator, optional
        Source of all randomness of the chain.
    verbose : bool, default False
        Print progress every 10 percent of the iterations.

    Returns
    -------
    coef_draws : ndarray (K n x n_store)
        vec of the K x n coefficient matrix for each stored draw.
    sigma_draws : ndarray (K^2 x n_store)
        vec of the error covariance for each stored draw.

    Notes
    -----
    Iteration ``i`` (zero-based) is stored when ``i >= burnin`` and
    ``(i - burnin) % thin == 0``.  A NumericalFailure aborts the chain and
    propagates; no partial results are returned.
    """
    iterations, burnin, thin = _check_sampler_args(iterations, burnin, thin)
    rng = util.check_random_state(random_state)

    y = data.Y
    x = data.regressors
    k, nobs = y.shape
    n_reg = len(x)

    if prior is None:
        prior = NormalWishartPrior.flat(k, n_reg)
    prior.check_dimensions(k, n_reg)
    if prior.df + nobs <= k - 1:
        # u u' has rank at most T, so the posterior scale is singular
        if nobs < k and np.linalg.matrix_rank(prior.scale) < k:
            raise NumericalFailure(singular_scale_doc.strip())
        raise InvalidArgument("posterior degrees of freedom (%g) must "
                              "exceed K - 1 = %d" % (prior.df + nobs, k - 1))

    if sigma_init is None:
        sigma_init = SIGMA_INIT_SCALE * np.eye(k)
    sigma_init = np.atleast_2d(np.asarray(sigma_init, dtype=float))
    if sigma_init.shape != (k, k):
        raise ShapeMismatch("sigma_init has shape %s, expected %s"
                            % (sigma_init.shape, (k, k)))
    sigma_i = inv_symm(sigma_init, msg=singular_scale_doc.strip())

    n_store = n_stored(iterations, burnin, thin)
    coef_draws = np.empty((k * n_reg, n_store))
    sigma_draws = np.empty((k * k, n_store))

    report = max(iterations // 10, 1)
    pos = 0
    for i in range(iterations):
        a = post_normal(y, x, sigma_i, prior.a_prior, prior.v_i_prior, rng)
        u = y - np.dot(unvec(a, k), x)
        sigma, sigma_i = post_wishart(u, prior.df, prior.scale, rng)

        if i >= burnin and (i - burnin) % thin == 0:
            coef_draws[:, pos] = a
            sigma_draws[:, pos] = vec(sigma)
            pos += 1

        if verbose and (i + 1) % report == 0:
            print("Iteration %d of %d" % (i + 1, iterations))

    return coef_draws, sigma_draws


def sample_chains(data, n_chains=2, iterations=10000, burnin=5000, thin=1,
                  prior=None, sigma_init=None, seed=None, n_jobs=-1,
                  prefer='threads'):
    """
    Run independent Gibbs chains in parallel

    Every chain gets its own Generator spawned from `seed`, so the output
    does not depend on `n_jobs`.

    Parameters
    ----------
    data : RegressionMatrices
    n_chains : int, default 2
    iterations, burnin, thin, prior, sigma_init
        See `gibbs_sampler`.
    seed : int, SeedSequence or Generator, optional
    n_jobs : int, default -1
        Number of joblib workers.
    prefer : {'threads', 'processes'}

    Returns
    -------
    chains : list of (coef_draws, sigma_draws) tuples
    """
    if isinstance(n_chains, bool) or int(n_chains) != n_chains or \
            n_chains < 1:
        raise InvalidArgument("n_chains must be a positive integer")
    _check_sampler_args(iterations, burnin, thin)
    rngs = util.spawn_generators(seed, int(n_chains))
    return Parallel(n_jobs=n_jobs, prefer=prefer)(
        delayed(gibbs_sampler)(data, iterations=iterations, burnin=burnin,
                               thin=thin, prior=prior,
                               sigma_init=sigma_init, random_state=rng)
        for rng in rngs)
