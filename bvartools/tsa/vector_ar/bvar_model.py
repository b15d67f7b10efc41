#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Bayesian vector autoregressions and vector error correction models

References
----------
Lütkepohl (2005) New Introduction to Multiple Time Series Analysis

Koop, G. and Korobilis, D. (2010) Bayesian Multivariate Time Series
Methods for Empirical Macroeconomics
"""
import numpy as np
import pandas as pd

from bvartools.tools.decorators import cache_readonly, copy_doc
from bvartools.tools.linalg import cholesky_factor
from bvartools.tools.sm_exceptions import InvalidArgument, ShapeMismatch
from bvartools.tsa.vector_ar import gibbs, util
from bvartools.tsa.vector_ar.design import RegressionMatrices, gen_var, gen_vec
from bvartools.tsa.vector_ar.irf import irf, ma_reps


def _stack_matrices(draws, nrows):
    """
    Turn vec'ed draws (nrows * ncols x n_draws) into (n_draws, nrows, ncols)
    """
    n_draws = draws.shape[1]
    if draws.shape[0] == 0:
        return np.zeros((n_draws, nrows, 0))
    ncols = draws.shape[0] // nrows
    return draws.T.reshape((n_draws, ncols, nrows)).transpose(0, 2, 1)


def _split_blocks(mats, nblocks, width):
    """(n, K, nblocks * width) -> (n, nblocks, K, width)"""
    n, k = mats.shape[:2]
    blocks = mats[:, :, :nblocks * width].reshape((n, k, nblocks, width))
    return blocks.transpose(0, 2, 1, 3)


def _readonly(arr):
    arr = np.array(arr, dtype=float)
    arr.setflags(write=False)
    return arr


# -------------------------------------------------------------------
# Posterior draws

class PosteriorDraws(object):
    """
    Container of the draws of a Bayesian VAR or VEC model

    Parameters
    ----------
    data : RegressionMatrices
        The matrices the draws were generated from.
    A : ndarray (K n_x x n_draws)
        Each column is the vec (column-major) of the K x n_x coefficient
        matrix of ``X``.  May have zero rows for a VEC model without
        non-cointegration regressors.
    Sigma : ndarray (K^2 x n_draws)
        Each column is the vec of the K x K error covariance.
    Pi : ndarray (K n_w x n_draws), optional
        VEC only: vec of the K x n_w coefficient matrix of ``W``.

    Notes
    -----
    The container is read-only; `thin` and `combine_chains` return new
    containers.
    """
    def __init__(self, data, A, Sigma, Pi=None):
        if not isinstance(data, RegressionMatrices):
            raise InvalidArgument("data must be a RegressionMatrices "
                                  "instance, got %s" % type(data).__name__)
        self.data = data
        self.kind = data.kind
        k = data.neqs

        Sigma = np.asarray(Sigma, dtype=float)
        if Sigma.ndim != 2 or Sigma.shape[0] != k * k:
            raise ShapeMismatch("Sigma must have K^2 = %d rows" % (k * k))
        n_draws = Sigma.shape[1]
        if n_draws < 1:
            raise ShapeMismatch("no draws")

        if A is None:
            A = np.zeros((0, n_draws))
        A = np.asarray(A, dtype=float)
        if A.ndim != 2 or A.shape[0] != k * data.n_x:
            raise ShapeMismatch("A must have K * n_x = %d rows"
                                % (k * data.n_x))

        if self.kind == util.VEC_KIND:
            if Pi is None:
                raise ShapeMismatch("VEC draws require Pi")
            Pi = np.asarray(Pi, dtype=float)
            if Pi.ndim != 2 or Pi.shape[0] != k * data.n_w:
                raise ShapeMismatch("Pi must have K * n_w = %d rows"
                                    % (k * data.n_w))
        elif Pi is not None:
            raise InvalidArgument("Pi is only defined for VEC models")

        counts = {A.shape[1], Sigma.shape[1]}
        if Pi is not None:
            counts.add(Pi.shape[1])
        if len(counts) != 1:
            raise ShapeMismatch("A, Sigma and Pi must have the same number "
                                "of draws (columns)")

        self.A = _readonly(A)
        self.Sigma = _readonly(Sigma)
        self.Pi = None if Pi is None else _readonly(Pi)

    @property
    def n_draws(self):
        return self.Sigma.shape[1]

    @property
    def neqs(self):
        return self.data.neqs

    @property
    def names(self):
        return self.data.endog_names

    def thin(self, step):
        """
        Keep every `step`-th draw, starting with the first

        Parameters
        ----------
        step : int
            At least 1.  ``thin(1)`` returns identical draws.

        Returns
        -------
        draws : PosteriorDraws
            With ``ceil(n_draws / step)`` draws.
        """
        if isinstance(step, bool) or int(step) != step or step < 1:
            raise InvalidArgument("step must be a positive integer, got %r"
                                  % (step,))
        step = int(step)
        Pi = None if self.Pi is None else self.Pi[:, ::step]
        return PosteriorDraws(self.data, self.A[:, ::step],
                              self.Sigma[:, ::step], Pi)

    # -------------------------------------------------------------
    # Draws as matrices

    @cache_readonly
    def coef_matrices(self):
        """ndarray (n_draws, K, n_x): coefficients of ``X``"""
        return _stack_matrices(self.A, self.neqs)

    @cache_readonly
    def pi_matrices(self):
        """ndarray (n_draws, K, n_w): coefficients of ``W`` (VEC only)"""
        if self.Pi is None:
            return None
        return _stack_matrices(self.Pi, self.neqs)

    @cache_readonly
    def sigma_u(self):
        """ndarray (n_draws, K, K): error covariance draws"""
        return _stack_matrices(self.Sigma, self.neqs)

    @cache_readonly
    def coefs(self):
        """
        Lagged endogenous coefficients: ``A_1..A_p`` for VAR models,
        ``Gamma_1..Gamma_{p-1}`` for VEC models

        Returns
        -------
        coefs : ndarray (n_draws, n_lags, K, K)
        """
        sl = self.data.x_slices['endog']
        k = self.neqs
        return _split_blocks(self.coef_matrices[:, :, sl],
                             (sl.stop - sl.start) // k, k)

    @cache_readonly
    def coefs_exog(self):
        """
        Exogenous coefficients: ``B_0..B_s`` for VAR models,
        ``Upsilon_0..Upsilon_{s-1}`` for VEC models

        Returns
        -------
        coefs_exog : ndarray (n_draws, n_lags, K, M)
        """
        sl = self.data.x_slices['exog']
        m = self.data.k_exog
        if not m:
            return np.zeros((self.n_draws, 0, self.neqs, 0))
        return _split_blocks(self.coef_matrices[:, :, sl],
                             (sl.stop - sl.start) // m, m)

    @cache_readonly
    def coefs_det(self):
        """ndarray (n_draws, K, N^UR): unrestricted deterministic terms"""
        return self.coef_matrices[:, :, self.data.x_slices['det']]

    def _labelled_mean(self, mats, columns):
        return pd.DataFrame(mats.mean(axis=0), index=self.names,
                            columns=columns)

    @cache_readonly
    def mean_coefs(self):
        """Posterior mean of the coefficients of ``X`` (K x n_x)"""
        return self._labelled_mean(self.coef_matrices, self.data.x_names)

    @cache_readonly
    def mean_pi(self):
        """Posterior mean of ``Pi`` (K x n_w), VEC only"""
        if self.Pi is None:
            return None
        return self._labelled_mean(self.pi_matrices, self.data.w_names)

    @cache_readonly
    def mean_sigma(self):
        """Posterior mean of the error covariance (K x K)"""
        return self._labelled_mean(self.sigma_u, self.names)

    # -------------------------------------------------------------
    # Downstream analysis

    @cache_readonly
    def var_rep(self):
        """
        Levels VAR representation of every draw

        For VEC models this is `bvec_to_bvar` of the draws.
        """
        if self.kind == util.VEC_KIND:
            return bvec_to_bvar(self)
        return VARRepresentation(
            self.data, self.coefs, self.coefs_exog, self.coefs_det,
            self.sigma_u)

    @copy_doc("See `bvartools.tsa.vector_ar.bvar_model.forecast`")
    def forecast(self, steps, new_x=None, new_d=None,
                 quantiles=(0.05, 0.5, 0.95), seed=None, n_jobs=-1):
        return forecast(self, steps, new_x=new_x, new_d=new_d,
                        quantiles=quantiles, seed=seed, n_jobs=n_jobs)

    @copy_doc("See `bvartools.tsa.vector_ar.irf.irf`")
    def irf(self, impulse, response, n_ahead=5, ir_type='feir',
            cumulative=False, keep_draws=False,
            quantiles=(0.05, 0.5, 0.95), n_jobs=-1):
        return irf(self, impulse, response, n_ahead=n_ahead,
                   ir_type=ir_type, cumulative=cumulative,
                   keep_draws=keep_draws, quantiles=quantiles,
                   n_jobs=n_jobs)

    @copy_doc("See `bvartools.tsa.vector_ar.bvar_model.fevd`")
    def fevd(self, response, n_ahead=5, fevd_type='oir', n_jobs=-1):
        return fevd(self, response, n_ahead=n_ahead, fevd_type=fevd_type,
                    n_jobs=n_jobs)

    def __repr__(self):
        return ('<%s kind=%s neqs=%d n_draws=%d>'
                % (self.__class__.__name__, self.kind, self.neqs,
                   self.n_draws))


def combine_chains(chains):
    """
    Concatenate the draws of several chains run on the same data

    Parameters
    ----------
    chains : list of PosteriorDraws

    Returns
    -------
    draws : PosteriorDraws
    """
    chains = list(chains)
    if not chains:
        raise InvalidArgument("no chains to combine")
    data = chains[0].data
    for chain in chains[1:]:
        if chain.data is not data and not (
                chain.kind == data.kind and
                chain.data.Y.shape == data.Y.shape and
                chain.data.x_names == data.x_names and
                chain.data.w_names == data.w_names and
                np.array_equal(chain.data.Y, data.Y)):
            raise ShapeMismatch("chains were generated from different data")
    Pi = None
    if data.kind == util.VEC_KIND:
        Pi = np.hstack([chain.Pi for chain in chains])
    return PosteriorDraws(data, np.hstack([chain.A for chain in chains]),
                          np.hstack([chain.Sigma for chain in chains]), Pi)


# -------------------------------------------------------------------
# Levels VAR representation

class VARRepresentation(object):
    """
    Levels VAR form of every posterior draw

    .. math::

        y_t = \\sum_{i=1}^p A_i y_{t-i} + \\sum_{i=0}^s B_i x_{t-i}
              + C d_t + u_t

    Attributes
    ----------
    coefs : ndarray (n_draws, p, K, K)
    coefs_exog : ndarray (n_draws, s + 1, K, M)
        Empty along the second axis without exogenous variables.
    coefs_det : ndarray (n_draws, K, N)
        Columns ordered as ``data.det_names``.
    sigma_u : ndarray (n_draws, K, K)
    y_init : ndarray (p x K)
        Last `p` observed levels, oldest first.
    x_init : ndarray (s x M)
        Last `s` observed exogenous levels, oldest first.
    """
    def __init__(self, data, coefs, coefs_exog, coefs_det, sigma_u):
        self.data = data
        self.coefs = coefs
        self.coefs_exog = coefs_exog
        self.coefs_det = coefs_det
        self.sigma_u = sigma_u
        self.names = data.endog_names
        self.exog_names = data.exog_names
        self.det_names = data.det_names
        self.n_draws, self.k_ar, self.neqs = coefs.shape[:3]
        self.y_init = data.initial_levels()[::-1]
        self.x_init = data.initial_exog_levels()[::-1]


def bvec_to_bvar(draws):
    r"""
    Transform VEC draws into the levels VAR representation

    .. math::

        A_1 = I_K + \Pi_y + \Gamma_1, \quad
        A_i = \Gamma_i - \Gamma_{i-1}, \quad
        A_p = -\Gamma_{p-1}

        B_0 = \Upsilon_0, \quad
        B_1 = \Pi_x + \Upsilon_1 - \Upsilon_0, \quad
        B_i = \Upsilon_i - \Upsilon_{i-1}, \quad
        B_s = -\Upsilon_{s-1}

    The deterministic coefficients are the unrestricted ones followed by
    the restricted ones from ``Pi``.

    Parameters
    ----------
    draws : PosteriorDraws
        Must be of kind 'VEC'.

    Returns
    -------
    var_rep : VARRepresentation
    """
    if draws.kind != util.VEC_KIND:
        raise InvalidArgument("bvec_to_bvar requires VEC draws, got %s"
                              % draws.kind)
    data = draws.data
    k, m, p, s = data.neqs, data.k_exog, data.p, data.s
    n = draws.n_draws
    pi = draws.pi_matrices
    w_sl = data.w_slices
    pi_y = pi[:, :, w_sl['endog']]
    pi_x = pi[:, :, w_sl['exog']]
    pi_d = pi[:, :, w_sl['det']]

    # pad with the zero matrices Gamma_0 and Gamma_p
    gamma = np.zeros((n, p + 1, k, k))
    gamma[:, 1:p] = draws.coefs
    coefs = gamma[:, 1:] - gamma[:, :-1]
    coefs[:, 0] += np.eye(k) + pi_y

    if m:
        ups = np.zeros((n, s + 2, k, m))
        ups[:, 1:s + 1] = draws.coefs_exog
        coefs_exog = ups[:, 1:] - ups[:, :-1]
        coefs_exog[:, 1] += pi_x
    else:
        coefs_exog = np.zeros((n, 0, k, 0))

    coefs_det = np.concatenate([draws.coefs_det, pi_d], axis=2)
    return VARRepresentation(data, coefs, coefs_exog, coefs_det,
                             draws.sigma_u)


# -------------------------------------------------------------------
# Forecasting

def _future_matrix(value, steps, ncols, name):
    if value is None:
        return np.zeros((steps, ncols))
    value = np.asarray(value, dtype=float)
    if value.ndim == 1 and ncols == 1:
        value = value[:, None]
    if value.ndim != 2 or value.shape[0] != steps:
        raise InvalidArgument("%s must have one row per forecast step "
                              "(%d), got shape %s"
                              % (name, steps, value.shape))
    if value.shape[1] != ncols:
        raise InvalidArgument("%s must have %d columns, got %d"
                              % (name, ncols, value.shape[1]))
    return value


def simulate_path(coefs, coefs_exog, coefs_det, sig_u, y_init, x_init,
                  new_x, new_d, steps, random_state=None):
    """
    Simulate the levels VAR forward from the last observations

    Parameters
    ----------
    coefs : ndarray (p x K x K)
    coefs_exog : ndarray (s + 1 x K x M)
    coefs_det : ndarray (K x N)
    sig_u : ndarray (K x K)
    y_init : ndarray (p x K)
        Last observed levels, oldest first.
    x_init : ndarray (s x M)
        Last observed exogenous levels, oldest first.
    new_x : ndarray (steps x M)
    new_d : ndarray (steps x N)
    steps : int
    random_state : Generator, optional

    Returns
    -------
    path : ndarray (steps x K)
    """
    rng = util.check_random_state(random_state)
    p, k = coefs.shape[:2]
    n_xlags = len(coefs_exog)
    chol = cholesky_factor(sig_u)
    shocks = np.dot(rng.standard_normal((steps, k)), chol.T)

    y = np.vstack([y_init, np.zeros((steps, k))])
    x = np.vstack([x_init, new_x])
    offset = len(x_init)
    for h in range(steps):
        val = np.dot(coefs_det, new_d[h]) + shocks[h]
        for i in range(1, p + 1):
            val = val + np.dot(coefs[i - 1], y[p + h - i])
        for i in range(n_xlags):
            val = val + np.dot(coefs_exog[i], x[offset + h - i])
        y[p + h] = val
    return y[p:]


class ForecastResult(object):
    """
    Empirical distribution of the forecasts

    Attributes
    ----------
    fcst : dict of DataFrame
        For every endogenous variable, the quantiles (columns) of the
        forecasts for periods ``1..steps`` (index).
    draws : ndarray (steps, K, n_draws)
    """
    def __init__(self, draws, names, quantiles):
        self.draws = draws
        self.names = names
        self.quantiles = quantiles
        index = pd.RangeIndex(1, draws.shape[0] + 1, name='period')
        self.fcst = {name: util.summarize_draws(draws[:, i], quantiles,
                                                index)
                     for i, name in enumerate(names)}

    def __getitem__(self, name):
        return self.fcst[name]

    @property
    def mean(self):
        """Posterior mean forecast (steps x K)"""
        return pd.DataFrame(self.draws.mean(axis=2), columns=self.names,
                            index=pd.RangeIndex(1, len(self.draws) + 1,
                                                name='period'))


def forecast(draws, steps, new_x=None, new_d=None,
             quantiles=(0.05, 0.5, 0.95), seed=None, n_jobs=-1):
    """
    Forecast by simulating every posterior draw forward

    Parameters
    ----------
    draws : PosteriorDraws
    steps : int
        Forecast horizon, at least 1.
    new_x : array-like (steps x M), optional
        Future values of the exogenous variables in levels.  Defaults to
        zeros.
    new_d : array-like (steps x N), optional
        Future values of the deterministic terms, columns ordered as
        ``draws.data.det_names``.  Defaults to zeros; use
        ``draws.data.future_deterministic(steps)`` to continue constant,
        trend and seasonal terms.
    quantiles : sequence of float
    seed : int, SeedSequence or Generator, optional
        Every draw gets its own stream spawned from `seed`, so the result
        does not depend on `n_jobs`.
    n_jobs : int, default -1

    Returns
    -------
    result : ForecastResult
    """
    if isinstance(steps, bool) or int(steps) != steps or steps < 1:
        raise InvalidArgument("steps must be a positive integer, got %r"
                              % (steps,))
    steps = int(steps)
    quantiles = util.validate_quantiles(quantiles)
    rep = draws.var_rep
    new_x = _future_matrix(new_x, steps, len(rep.exog_names), 'new_x')
    new_d = _future_matrix(new_d, steps, len(rep.det_names), 'new_d')
    rngs = util.spawn_generators(seed, rep.n_draws)

    def one_draw(i):
        return simulate_path(rep.coefs[i], rep.coefs_exog[i],
                             rep.coefs_det[i], rep.sigma_u[i], rep.y_init,
                             rep.x_init, new_x, new_d, steps, rngs[i])

    paths = util.map_draws(one_draw, rep.n_draws, n_jobs=n_jobs)
    return ForecastResult(paths.transpose(1, 2, 0), rep.names, quantiles)


# -------------------------------------------------------------------
# Forecast error variance decomposition

class FEVDResult(object):
    """
    Forecast error variance decomposition of one response variable

    Attributes
    ----------
    decomp : DataFrame ((n_ahead + 1) x K)
        Posterior mean share of each shock (columns) at each horizon
        (index).
    draws : ndarray (n_draws, n_ahead + 1, K)
    """
    def __init__(self, draws, response, names, fevd_type):
        self.draws = draws
        self.response = response
        self.names = names
        self.fevd_type = fevd_type
        self.decomp = pd.DataFrame(
            draws.mean(axis=0), columns=names,
            index=pd.RangeIndex(draws.shape[1], name='period'))


def fevd(draws, response, n_ahead=5, fevd_type='oir', n_jobs=-1):
    r"""
    Forecast error variance decomposition

    For every draw the share of shock j in the h-step forecast error
    variance of variable i is

    .. math::

        \omega_{ij}(h) = \frac{\sum_{l=0}^{h} \theta_{l, ij}^2}
                              {\sum_{l=0}^{h} (\Phi_l \Sigma \Phi_l')_{ii}}

    where :math:`\theta_l` are the orthogonalized or generalized impulse
    responses.

    Parameters
    ----------
    draws : PosteriorDraws
    response : str or int
        Name or position of the response variable.
    n_ahead : int, default 5
    fevd_type : {'oir', 'gir'}
    n_jobs : int, default -1

    Returns
    -------
    result : FEVDResult

    Notes
    -----
    Orthogonalized shares sum to one at every horizon.  Generalized
    shares are not rescaled and in general do not.
    """
    if fevd_type not in ('oir', 'gir'):
        raise InvalidArgument("fevd_type must be 'oir' or 'gir', got %r"
                              % (fevd_type,))
    rep = draws.var_rep
    idx = util.get_index(list(rep.names), response)
    phis = ma_reps(draws, n_ahead, ir_type='feir', n_jobs=n_jobs)
    theta = ma_reps(draws, n_ahead, ir_type=fevd_type, n_jobs=n_jobs)

    # (n_draws, H + 1, K)
    num = np.cumsum(theta[:, :, idx, :] ** 2, axis=1)
    rows = phis[:, :, idx, :]
    mse = np.einsum('nhk,nkl,nhl->nh', rows, rep.sigma_u, rows)
    shares = num / np.cumsum(mse, axis=1)[:, :, None]
    return FEVDResult(shares, rep.names[idx], list(rep.names), fevd_type)


# -------------------------------------------------------------------
# Models

class _BayesianModel(object):
    _kind = None
    _builder = None

    def __init__(self, data):
        if not isinstance(data, RegressionMatrices):
            raise InvalidArgument("data must be a RegressionMatrices "
                                  "instance; use %s.from_series to build "
                                  "one" % self.__class__.__name__)
        if data.kind != self._kind:
            raise InvalidArgument("%s requires %s matrices, got %s"
                                  % (self.__class__.__name__, self._kind,
                                     data.kind))
        self.data = data

    @classmethod
    def from_series(cls, endog, exog=None, **kwargs):
        """
        Build the model matrices from raw series

        Keyword arguments are passed to the matrix builder.
        """
        return cls(cls._builder(endog, exog=exog, **kwargs))

    @property
    def neqs(self):
        return self.data.neqs

    @property
    def endog_names(self):
        return self.data.endog_names

    def _wrap(self, coef_draws, sigma_draws):
        return PosteriorDraws(self.data, coef_draws, sigma_draws)

    def fit(self, iterations=10000, burnin=5000, thin=1, prior=None,
            sigma_init=None, random_state=None, verbose=False):
        """
        Sample from the posterior with a single Gibbs chain

        Parameters
        ----------
        iterations : int, default 10000
        burnin : int, default 5000
        thin : int, default 1
        prior : NormalWishartPrior, optional
            Flat prior if omitted.
        sigma_init : ndarray (K x K), optional
        random_state : int, SeedSequence or Generator, optional
        verbose : bool, default False

        Returns
        -------
        draws : PosteriorDraws
        """
        coef_draws, sigma_draws = gibbs.gibbs_sampler(
            self.data, iterations=iterations, burnin=burnin, thin=thin,
            prior=prior, sigma_init=sigma_init, random_state=random_state,
            verbose=verbose)
        return self._wrap(coef_draws, sigma_draws)

    def fit_chains(self, n_chains=2, iterations=10000, burnin=5000, thin=1,
                   prior=None, sigma_init=None, seed=None, n_jobs=-1):
        """
        Sample several independent chains and combine their draws

        See `fit` for the sampler arguments and `gibbs.sample_chains` for
        `seed` and `n_jobs`.

        Returns
        -------
        draws : PosteriorDraws
        """
        chains = gibbs.sample_chains(
            self.data, n_chains=n_chains, iterations=iterations,
            burnin=burnin, thin=thin, prior=prior, sigma_init=sigma_init,
            seed=seed, n_jobs=n_jobs)
        return combine_chains(self._wrap(coef, sig) for coef, sig in chains)


class BVAR(_BayesianModel):
    r"""
    Bayesian vector autoregression

    .. math::

        y_t = \sum_{i=1}^p A_i y_{t-i} + \sum_{i=0}^s B_i x_{t-i}
              + C d_t + u_t

    Parameters
    ----------
    data : RegressionMatrices
        Output of `gen_var`.

    Examples
    --------
    >>> model = BVAR.from_series(endog, p=2, const='unrestricted')
    >>> draws = model.fit(iterations=2000, burnin=1000, random_state=1)
    >>> draws.mean_coefs
    """
    _kind = util.VAR_KIND
    _builder = staticmethod(gen_var)


class BVEC(_BayesianModel):
    r"""
    Bayesian vector error correction model with unrestricted ``Pi``

    .. math::

        \Delta y_t = \Pi w_t + \sum_{i=1}^{p-1} \Gamma_i \Delta y_{t-i}
                     + \sum_{i=0}^{s-1} \Upsilon_i \Delta x_{t-i}
                     + C^{UR} d^{UR}_t + u_t

    Parameters
    ----------
    data : RegressionMatrices
        Output of `gen_vec`.
    """
    _kind = util.VEC_KIND
    _builder = staticmethod(gen_vec)

    def _wrap(self, coef_draws, sigma_draws):
        n_pi = self.neqs * self.data.n_w
        return PosteriorDraws(self.data, coef_draws[n_pi:], sigma_draws,
                              Pi=coef_draws[:n_pi])


__all__ = ['BVAR', 'BVEC', 'PosteriorDraws', 'VARRepresentation',
           'ForecastResult', 'FEVDResult', 'combine_chains', 'bvec_to_bvar',
           'forecast', 'fevd', 'simulate_path']
