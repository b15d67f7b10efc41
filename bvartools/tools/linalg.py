#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Linear algebra helpers shared by the sampler and the downstream engines.
"""
import numpy as np
import scipy.linalg

from bvartools.tools.sm_exceptions import NumericalFailure

eps = np.finfo(float).eps


def cholesky_factor(m, msg=None):
    """
    Lower Cholesky factor of a symmetric positive-definite matrix.

    Parameters
    ----------
    m : ndarray (k x k)
    msg : str, optional
        Message for the NumericalFailure raised when `m` is not positive
        definite or is numerically singular.

    Returns
    -------
    L : ndarray (k x k)
        Lower triangular with L L' = m
    """
    msg = msg or "matrix is not positive definite"
    try:
        L = scipy.linalg.cholesky(m, lower=True)
    except np.linalg.LinAlgError as err:
        raise NumericalFailure(msg) from err
    # cholesky succeeds on some rank-deficient inputs because of rounding
    diag = np.abs(np.diag(L))
    if not np.all(np.isfinite(diag)) or diag.min() <= diag.max() * eps ** .5:
        raise NumericalFailure(msg)
    return L


def inv_symm(m, msg=None):
    """
    Invert a symmetric positive-definite matrix via its Cholesky factor.

    Raises
    ------
    NumericalFailure
        If `m` is singular or not positive definite.

    Returns
    -------
    minv : ndarray (k x k), symmetric
    """
    L = cholesky_factor(m, msg=msg)
    k = len(L)
    Linv = scipy.linalg.solve_triangular(L, np.eye(k), lower=True)
    return np.dot(Linv.T, Linv)


def symmetrize(m):
    """Average a square matrix with its transpose to remove rounding error"""
    return (m + m.T) / 2.

