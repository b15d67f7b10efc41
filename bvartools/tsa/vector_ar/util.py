#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Miscellaneous utility code for Bayesian VAR estimation
"""
import numbers

import numpy as np
import pandas as pd
from joblib import Parallel, delayed, effective_n_jobs

from bvartools.tools.sm_exceptions import InvalidArgument

VAR_KIND = 'VAR'
VEC_KIND = 'VEC'
MODEL_KINDS = (VAR_KIND, VEC_KIND)


def ma_rep(coefs, maxn=10):
    r"""
    MA(\infty) representation of VAR(p) process

    .. math:: y_t = \mu + \sum_{i=0}^\infty \Phi_i u_{t-i}

    computed recursively with \Phi_0 = I_k and
    \Phi_i = \sum_{j=1}^{i} \Phi_{i-j} A_j

    Parameters
    ----------
    coefs : ndarray (p x k x k)
    maxn : int
        Number of MA matrices to compute

    Returns
    -------
    phis : ndarray (maxn + 1 x k x k)
    """
    p, k, k = coefs.shape
    phis = np.zeros((maxn + 1, k, k))
    phis[0] = np.eye(k)

    # recursively compute Phi matrices
    for i in range(1, maxn + 1):
        for j in range(1, i + 1):
            if j > p:
                break

            phis[i] += np.dot(phis[i - j], coefs[j - 1])

    return phis


def varsim(coefs, intercept, sig_u, steps=100, initvalues=None,
           random_state=None):
    """
    Simulate simple VAR(p) process with known coefficients, intercept, white
    noise covariance, etc.

    Parameters
    ----------
    coefs : ndarray (p x k x k)
    intercept : ndarray (k,) or None
    sig_u : ndarray (k x k)
    steps : int
    initvalues : ndarray (p x k), optional
        Values of the first p observations.  Defaults to zeros.
    random_state : int, SeedSequence or Generator, optional

    Returns
    -------
    result : ndarray (steps x k)
    """
    rng = check_random_state(random_state)
    p, k, k = coefs.shape
    ugen = rng.multivariate_normal(np.zeros(len(sig_u)), sig_u, steps)
    result = np.zeros((steps, k))
    if initvalues is not None:
        result[:p] = initvalues
    if intercept is not None:
        result[p:] = intercept + ugen[p:]
    else:
        result[p:] = ugen[p:]

    # add in AR terms
    for t in range(p, steps):
        ygen = result[t]
        for j in range(p):
            ygen += np.dot(coefs[j], result[t - j - 1])

    return result


def get_index(lst, name):
    """Position of `name` in `lst`; integer positions pass through"""
    try:
        result = lst.index(name)
    except ValueError:
        if not isinstance(name, numbers.Integral):
            raise InvalidArgument("%s is not among the variables %s"
                                  % (name, lst))
        result = name
    if not 0 <= result < len(lst):
        raise InvalidArgument("variable index %s out of range" % result)
    return result


def validate_kind(kind):
    if kind not in MODEL_KINDS:
        raise InvalidArgument("kind must be one of %s, got %r"
                              % (MODEL_KINDS, kind))
    return kind


# ---------------------------------------------------------------
# Random number generation

def check_random_state(random_state=None):
    """
    Turn `random_state` into a `numpy.random.Generator`.

    Parameters
    ----------
    random_state : {None, int, SeedSequence, Generator}
        A Generator is returned unchanged, anything else seeds a new one.
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def spawn_generators(seed, n):
    """
    `n` independent Generators derived from a single seed.

    The i-th stream depends only on `seed` and `i`, so per-draw results do
    not depend on how draws are distributed across workers.
    """
    if isinstance(seed, np.random.Generator):
        seed = np.random.SeedSequence(int(seed.integers(2 ** 32)))
    elif not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in seed.spawn(n)]


# ---------------------------------------------------------------
# Per-draw worker pool

def _chunks(n_items, n_chunks):
    bounds = np.linspace(0, n_items, n_chunks + 1).astype(int)
    return [np.arange(bounds[i], bounds[i + 1]) for i in range(n_chunks)
            if bounds[i + 1] > bounds[i]]


def map_draws(func, n_draws, n_jobs=-1, prefer='threads'):
    """
    Evaluate ``func(i)`` for every draw index ``i`` on a joblib pool.

    Draw indices are split into one contiguous chunk per worker; each
    worker returns the results for its own chunk only, and the results
    are put back together in draw order.

    Parameters
    ----------
    func : callable
        Takes a draw index, returns an ndarray.  Must not mutate shared
        state.
    n_draws : int
    n_jobs : int, default -1
        As in `joblib.Parallel`; -1 uses all processors.
    prefer : {'threads', 'processes'}

    Returns
    -------
    out : ndarray (n_draws x ...)
    """
    n_workers = max(1, min(effective_n_jobs(n_jobs), n_draws))

    def work(indices):
        return np.array([func(i) for i in indices])

    chunks = _chunks(n_draws, n_workers)
    if n_workers == 1:
        pieces = [work(idx) for idx in chunks]
    else:
        pieces = Parallel(n_jobs=n_workers, prefer=prefer)(
            delayed(work)(idx) for idx in chunks)
    return np.concatenate(pieces, axis=0)


# ---------------------------------------------------------------
# Summaries of empirical distributions

def validate_quantiles(quantiles):
    quantiles = np.atleast_1d(np.asarray(quantiles, dtype=float))
    if quantiles.ndim != 1 or quantiles.size == 0:
        raise InvalidArgument("quantiles must be a non-empty sequence")
    if np.any(quantiles < 0) or np.any(quantiles > 1):
        raise InvalidArgument("quantiles must lie in [0, 1]")
    return quantiles


def quantile_labels(quantiles):
    """
    Examples
    --------
    >>> quantile_labels([0.05, 0.5, 0.95])
    ['5%', '50%', '95%']
    """
    return ['%g%%' % (100 * q) for q in quantiles]


def summarize_draws(draws, quantiles, index=None):
    """
    Quantiles of an empirical distribution along its last axis

    Parameters
    ----------
    draws : ndarray (nobs x n_draws)
    quantiles : sequence of float
    index : array-like, optional

    Returns
    -------
    summary : pd.DataFrame (nobs x len(quantiles))
    """
    quantiles = validate_quantiles(quantiles)
    values = np.quantile(draws, quantiles, axis=-1).T
    return pd.DataFrame(values, index=index,
                        columns=quantile_labels(quantiles))
