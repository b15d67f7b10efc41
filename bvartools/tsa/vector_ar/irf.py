# -*- coding: utf-8 -*-
"""
Impulse response analysis over posterior draws
"""
import numpy as np
import pandas as pd

from bvartools.tools.linalg import cholesky_factor
from bvartools.tools.sm_exceptions import InvalidArgument
from bvartools.tsa.vector_ar import util

IR_TYPES = ('feir', 'oir', 'gir')


def _check_ir_type(ir_type):
    if ir_type not in IR_TYPES:
        raise InvalidArgument("ir_type must be one of %s, got %r"
                              % (IR_TYPES, ir_type))
    return ir_type


def shock_matrix(sig_u, ir_type):
    """
    Impact matrix P such that the responses are ``Phi_h P``

    Parameters
    ----------
    sig_u : ndarray (K x K)
    ir_type : {'feir', 'oir', 'gir'}
        Forecast error (identity), orthogonalized (lower Cholesky factor)
        or generalized (``Sigma[:, j] / sqrt(Sigma[j, j])``) responses.
    """
    if ir_type == 'feir':
        return np.eye(len(sig_u))
    elif ir_type == 'oir':
        return cholesky_factor(sig_u)
    return sig_u / np.sqrt(np.diag(sig_u))[None, :]


def ma_reps(draws, n_ahead=5, ir_type='feir', n_jobs=-1):
    """
    Impulse response matrices of every draw

    Parameters
    ----------
    draws : PosteriorDraws
    n_ahead : int, default 5
    ir_type : {'feir', 'oir', 'gir'}
    n_jobs : int, default -1

    Returns
    -------
    irfs : ndarray (n_draws, n_ahead + 1, K, K)
        ``irfs[d, h, i, j]`` is the response of variable i to shock j
        after h periods in draw d.
    """
    _check_ir_type(ir_type)
    if isinstance(n_ahead, bool) or int(n_ahead) != n_ahead or n_ahead < 0:
        raise InvalidArgument("n_ahead must be a non-negative integer")
    rep = draws.var_rep

    def one_draw(i):
        phis = util.ma_rep(rep.coefs[i], int(n_ahead))
        if ir_type == 'feir':
            return phis
        return np.dot(phis, shock_matrix(rep.sigma_u[i], ir_type))

    return util.map_draws(one_draw, rep.n_draws, n_jobs=n_jobs)


class ImpulseResponseResult(object):
    """
    Empirical distribution of one impulse response function

    Attributes
    ----------
    irf : DataFrame or None
        Quantiles (columns) of the response for periods ``0..n_ahead``.
        None with ``keep_draws=True``.
    draws : ndarray ((n_ahead + 1) x n_draws)
        Response in every draw.
    """
    def __init__(self, draws, impulse, response, ir_type, cumulative,
                 quantiles=None):
        self.draws = draws
        self.impulse = impulse
        self.response = response
        self.ir_type = ir_type
        self.cumulative = cumulative
        self.index = pd.RangeIndex(draws.shape[0], name='period')
        if quantiles is None:
            self.irf = None
        else:
            self.irf = util.summarize_draws(draws, quantiles, self.index)

    @property
    def mean(self):
        return pd.Series(self.draws.mean(axis=1), index=self.index,
                         name='mean')

    def __repr__(self):
        return ('<%s %s response of %s to %s>'
                % (self.__class__.__name__, self.ir_type.upper(),
                   self.response, self.impulse))


def irf(draws, impulse, response, n_ahead=5, ir_type='feir',
        cumulative=False, keep_draws=False, quantiles=(0.05, 0.5, 0.95),
        n_jobs=-1):
    """
    Impulse response of `response` to a shock in `impulse`

    Parameters
    ----------
    draws : PosteriorDraws
        VEC draws are analysed in their levels VAR representation.
    impulse, response : str or int
        Names or positions of the endogenous variables.
    n_ahead : int, default 5
        Last period; period 0 is the contemporaneous effect.
    ir_type : {'feir', 'oir', 'gir'}, default 'feir'
        Forecast error, orthogonalized or generalized impulse responses.
    cumulative : bool, default False
        Accumulate the responses over periods.
    keep_draws : bool, default False
        Keep only the per-draw responses and skip the quantile summary.
    quantiles : sequence of float
    n_jobs : int, default -1

    Returns
    -------
    result : ImpulseResponseResult
    """
    names = list(draws.var_rep.names)
    i_imp = util.get_index(names, impulse)
    i_resp = util.get_index(names, response)
    if not keep_draws:
        quantiles = util.validate_quantiles(quantiles)

    irfs = ma_reps(draws, n_ahead, ir_type=ir_type, n_jobs=n_jobs)
    resp = irfs[:, :, i_resp, i_imp].T
    if cumulative:
        resp = resp.cumsum(axis=0)
    return ImpulseResponseResult(resp, names[i_imp], names[i_resp], ir_type,
                                 cumulative,
                                 None if keep_draws else quantiles)
