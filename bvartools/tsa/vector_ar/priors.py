#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hyperparameters of the independent normal / Wishart prior
"""
import numpy as np

from bvartools.tools.sm_exceptions import InvalidArgument, ShapeMismatch


class NormalWishartPrior(object):
    r"""
    Independent normal prior on the coefficients and Wishart prior on the
    error precision

    .. math::

        vec(A) \sim N(a_0, V_0^{-1}), \qquad
        \Sigma^{-1} \sim W(\nu_0, S_0^{-1})

    Parameters
    ----------
    a_prior : array-like (K n,)
        Prior mean of the vectorized K x n coefficient matrix.
    v_i_prior : array-like (K n x K n) or (K n,)
        Prior precision matrix; a vector is taken as its diagonal.  Zeros
        give the flat (improper) prior.
    df : float
        Prior degrees of freedom of the error precision.
    scale : array-like (K x K)
        Prior scale matrix :math:`S_0` of the error covariance.

    Notes
    -----
    The prior is fixed; hyperparameters are not updated during sampling.
    """
    def __init__(self, a_prior, v_i_prior, df, scale):
        a_prior = np.asarray(a_prior, dtype=float).ravel()
        v_i_prior = np.asarray(v_i_prior, dtype=float)
        if v_i_prior.ndim == 1:
            v_i_prior = np.diag(v_i_prior)
        scale = np.atleast_2d(np.asarray(scale, dtype=float))

        n_coef = len(a_prior)
        if v_i_prior.shape != (n_coef, n_coef):
            raise ShapeMismatch("v_i_prior has shape %s, expected %s"
                                % (v_i_prior.shape, (n_coef, n_coef)))
        if scale.ndim != 2 or scale.shape[0] != scale.shape[1]:
            raise ShapeMismatch("scale must be a square matrix")
        if df < 0:
            raise InvalidArgument("df must be non-negative, got %r" % df)
        k = len(scale)
        if n_coef % k:
            raise ShapeMismatch("a_prior has %d elements, which is not a "
                                "multiple of the %d equations"
                                % (n_coef, k))

        self.a_prior = a_prior
        self.v_i_prior = v_i_prior
        self.df = float(df)
        self.scale = scale

    @classmethod
    def flat(cls, k, n_regressors):
        """
        Flat prior: zero mean and precision, zero degrees of freedom and
        zero scale.

        Parameters
        ----------
        k : int
            Number of equations.
        n_regressors : int
            Number of regressors per equation.
        """
        n_coef = k * n_regressors
        return cls(np.zeros(n_coef), np.zeros((n_coef, n_coef)), 0.,
                   np.zeros((k, k)))

    @property
    def neqs(self):
        return len(self.scale)

    @property
    def n_regressors(self):
        return len(self.a_prior) // self.neqs

    def check_dimensions(self, k, n_regressors):
        """
        Raise ShapeMismatch unless the prior fits a model with `k`
        equations and `n_regressors` regressors per equation.
        """
        if (self.neqs, self.n_regressors) != (k, n_regressors):
            raise ShapeMismatch("prior is for %d equations with %d "
                                "regressors, model has %d and %d"
                                % (self.neqs, self.n_regressors,
                                   k, n_regressors))

    def __repr__(self):
        return '%s(neqs=%d, n_regressors=%d, df=%g)' % (
            self.__class__.__name__, self.neqs, self.n_regressors, self.df)
