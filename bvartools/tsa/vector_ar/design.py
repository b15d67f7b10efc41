#!/usr/bin/env python
# -*- coding: utf-8 -*-
r"""
Construction of the data matrices of Bayesian VAR and VEC models

A VAR(p) model with exogenous variables and deterministic terms

.. math::

    y_t = \sum_{i=1}^p A_i y_{t-i} + \sum_{i=0}^s B_i x_{t-i} + C d_t + u_t

and a VEC model (p and s refer to the levels VAR)

.. math::

    \Delta y_t = \Pi w_t + \sum_{i=1}^{p-1} \Gamma_i \Delta y_{t-i}
                 + \sum_{i=0}^{s-1} \Upsilon_i \Delta x_{t-i}
                 + C^{UR} d^{UR}_t + u_t

are written in matrix notation as :math:`Y = A X + U` and
:math:`Y = \Pi W + \Gamma X + U`, with one column per observation.

References
----------
Lütkepohl (2005) New Introduction to Multiple Time Series Analysis
"""
import warnings

import numpy as np
import pandas as pd

from bvartools.tools.decorators import cache_readonly
from bvartools.tools.sm_exceptions import (InvalidArgument, ShapeMismatch,
                                           DataWarning, seasonal_skipped_doc)
from bvartools.tsa import tsatools
from bvartools.tsa.vector_ar import util

_RESTRICTED = 'restricted'
_UNRESTRICTED = 'unrestricted'


# ---------------------------------------------------------------
# Input validation

def _as_frame(data, prefix, argname):
    """
    Coerce a two-dimensional array-like to a float DataFrame.

    One-dimensional input is rejected instead of being reshaped into a
    single column.
    """
    if isinstance(data, pd.DataFrame):
        frame = data.astype(float)
        frame.columns = [str(c) for c in frame.columns]
    else:
        if isinstance(data, pd.Series):
            raise ShapeMismatch("%s must be two-dimensional; pass a "
                                "DataFrame with a single column instead of "
                                "a Series" % argname)
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise ShapeMismatch("%s must be a two-dimensional array "
                                "(nobs x nvars), got ndim=%d"
                                % (argname, arr.ndim))
        frame = pd.DataFrame(arr, columns=['%s%d' % (prefix, i + 1)
                                           for i in range(arr.shape[1])])
    if frame.shape[0] == 0 or frame.shape[1] == 0:
        raise ShapeMismatch("%s is empty" % argname)
    if frame.isnull().values.any():
        raise InvalidArgument("%s contains missing values" % argname)
    return frame


def _check_lag_order(value, name, minimum):
    if isinstance(value, bool) or int(value) != value or value < minimum:
        raise InvalidArgument("Argument '%s' must be an integer of at least "
                              "%d, got %r" % (name, minimum, value))
    return int(value)


def _check_deterministic(value, name, kind):
    if value is None:
        return None
    if value not in (_RESTRICTED, _UNRESTRICTED):
        raise InvalidArgument("Specified value for argument '%s' is not "
                              "valid: %r" % (name, value))
    if value == _RESTRICTED and kind == util.VAR_KIND:
        raise InvalidArgument("'%s' can only be restricted in a VEC model"
                              % name)
    return value


def _seasonal_frequency(frame, freq, season_start):
    """
    Frequency and zero-based seasonal position of the first observation.
    """
    index = frame.index
    is_dated = isinstance(index, (pd.DatetimeIndex, pd.PeriodIndex))
    if freq is None:
        offset = getattr(index, 'freq', None) if is_dated else None
        if offset is None and isinstance(index, pd.DatetimeIndex) and \
                len(index) > 2:
            offset = pd.infer_freq(index)
        try:
            freq = (tsatools.freq_to_period(offset)
                    if offset is not None else 1)
        except ValueError:
            # no seasonal pattern for e.g. minute data
            freq = 1
    freq = _check_lag_order(freq, 'freq', 1)

    if season_start is not None:
        first_period = (_check_lag_order(season_start, 'season_start', 1)
                        - 1) % freq
    elif is_dated and freq > 1:
        try:
            first_period = tsatools.season_position(index, freq) % freq
        except (ValueError, AttributeError):
            first_period = 0
    else:
        first_period = 0
    return freq, first_period


def _deterministic_frame(nobs, freq, first_period, const, trend, seasonal):
    """
    Deterministic columns split by restriction status.

    Returns a dict mapping 'restricted' and 'unrestricted' to DataFrames
    with `nobs` rows.
    """
    frames = {_RESTRICTED: [], _UNRESTRICTED: []}
    if const is not None:
        frames[const].append(pd.DataFrame({'const': np.ones(nobs)}))
    if trend is not None:
        frames[trend].append(
            pd.DataFrame({'trend': np.arange(1, nobs + 1, dtype=float)}))
    if seasonal is not None and freq > 1:
        dummies = tsatools.seasonal_dummies(freq, nobs,
                                            first_period=first_period)
        names = ['season.%d' % (i + 1) for i in range(freq - 1)]
        frames[seasonal].append(pd.DataFrame(dummies, columns=names))

    out = {}
    for key, pieces in frames.items():
        if pieces:
            out[key] = pd.concat(pieces, axis=1)
        else:
            out[key] = pd.DataFrame(index=range(nobs))
    return out


def _prepare_endog(data, freq, season_start):
    endog = _as_frame(data, 'y', 'data')
    freq, first_period = _seasonal_frequency(endog, freq, season_start)
    if not isinstance(endog.index, (pd.DatetimeIndex, pd.PeriodIndex)):
        endog.index = pd.RangeIndex(len(endog))
    return endog, freq, first_period


def _align_exog(exog, endog):
    exog = _as_frame(exog, 'x', 'exog')
    if len(exog) != len(endog):
        raise InvalidArgument("exog has %d observations but endog has %d; "
                              "both must share the same time base"
                              % (len(exog), len(endog)))
    exog.index = endog.index
    dupes = set(exog.columns) & set(endog.columns)
    if dupes:
        raise InvalidArgument("exog and endog share variable names: %s"
                              % sorted(dupes))
    return exog


def _rows(frame):
    if frame.shape[1] == 0:
        return None
    return np.ascontiguousarray(frame.values.T)


# ---------------------------------------------------------------
# Builders

def gen_var(data, p=2, exog=None, s=0, const=None, trend=None,
            seasonal=None, freq=None, season_start=None):
    r"""
    Produce the input matrices for the estimation of a VAR model

    .. math::

        y_t = \sum_{i=1}^p A_i y_{t-i} + \sum_{i=0}^s B_i x_{t-i}
              + C d_t + u_t

    Parameters
    ----------
    data : DataFrame or ndarray (nobs x K)
        Endogenous variables.  Must be two-dimensional.
    p : int, default 2
        Lag order of the endogenous variables, at least 1.
    exog : DataFrame or ndarray (nobs x M), optional
        Exogenous variables on the same time base as `data`.
    s : int, default 0
        Lag order of the exogenous variables.  The current value and lags
        1, ..., s enter the regressors.  This gives M (s + 1) rows
        ``L0.x, L1.x, ..., Ls.x``; with ``s = 0`` only the current value
        enters.  For `gen_vec`, `s` instead counts the current value plus
        ``s - 1`` lagged differences.
    const, trend, seasonal : {None, 'unrestricted'}
        Deterministic terms.  'restricted' is only valid for VEC models.
    freq : int, optional
        Number of seasons per year.  Inferred from a date index of `data`
        if omitted, else 1.
    season_start : int, optional
        Seasonal position (1-based) of the first row of `data`.  Inferred
        from a date index if omitted, else 1.

    Returns
    -------
    matrices : RegressionMatrices
        ``Y`` is K x T, ``X`` is (K p + M (s + 1) + N) x T.

    Examples
    --------
    >>> mats = gen_var(endog, p=2, const='unrestricted')
    >>> mats.x_names[:2]
    ['L1.y1', 'L1.y2']
    """
    kind = util.VAR_KIND
    p = _check_lag_order(p, 'p', 1)
    const = _check_deterministic(const, 'const', kind)
    trend = _check_deterministic(trend, 'trend', kind)
    seasonal = _check_deterministic(seasonal, 'seasonal', kind)

    endog, freq, first_period = _prepare_endog(data, freq, season_start)

    pieces = [endog, tsatools.lag_frame(endog, range(1, p + 1))]
    exog_names = []
    if exog is not None:
        s = _check_lag_order(s, 's', 0)
        exog = _align_exog(exog, endog)
        exog_names = list(exog.columns)
        pieces.append(tsatools.lag_frame(exog, range(0, s + 1)))
    else:
        s = 0

    return _finalize(kind, pieces, endog, exog_names, p, s, const, trend,
                     seasonal, freq, first_period)


def gen_vec(data, p=2, exog=None, s=2, const=None, trend=None,
            seasonal=None, freq=None, season_start=None):
    r"""
    Produce the input matrices for the estimation of a VEC model

    .. math::

        \Delta y_t = \Pi w_t + \sum_{i=1}^{p-1} \Gamma_i \Delta y_{t-i}
                     + \sum_{i=0}^{s-1} \Upsilon_i \Delta x_{t-i}
                     + C^{UR} d^{UR}_t + u_t

    where :math:`w_t` stacks :math:`y_{t-1}`, :math:`x_{t-1}` and the
    restricted deterministic terms.

    Parameters
    ----------
    data : DataFrame or ndarray (nobs x K)
        Endogenous variables in levels.  Must be two-dimensional.
    p : int, default 2
        Lag order of the endogenous variables in the levels VAR, at
        least 1.  ``p - 1`` lagged differences enter ``X``.
    exog : DataFrame or ndarray (nobs x M), optional
        Exogenous variables in levels on the same time base as `data`.
    s : int, default 2
        Lag order of the exogenous variables in the levels VAR, at least 1
        when `exog` is given.  The current and ``s - 1`` lagged
        differences enter ``X``.
    const, trend, seasonal : {None, 'restricted', 'unrestricted'}
        Restricted terms enter the cointegration term ``W``, unrestricted
        terms the non-cointegration regressors ``X``.
    freq, season_start : int, optional
        See `gen_var`.

    Returns
    -------
    matrices : RegressionMatrices
        ``Y`` is K x T, ``W`` is (K + M + N^R) x T and ``X`` is
        (K (p - 1) + M s + N^UR) x T, or None if empty.

    References
    ----------
    Lütkepohl (2005) New Introduction to Multiple Time Series Analysis
    """
    kind = util.VEC_KIND
    p = _check_lag_order(p, 'p', 1)
    const = _check_deterministic(const, 'const', kind)
    trend = _check_deterministic(trend, 'trend', kind)
    seasonal = _check_deterministic(seasonal, 'seasonal', kind)

    endog, freq, first_period = _prepare_endog(data, freq, season_start)

    d_endog = endog.diff()
    response = d_endog.copy()
    response.columns = ['D.' + name for name in endog.columns]

    pieces = [response, tsatools.lag_frame(endog, [1])]
    exog_names = []
    if exog is not None:
        s = _check_lag_order(s, 's', 1)
        exog = _align_exog(exog, endog)
        exog_names = list(exog.columns)
        pieces.append(tsatools.lag_frame(exog, [1]))
    pieces.append(tsatools.lag_frame(d_endog, range(1, p), prefix='LD'))
    if exog is not None:
        pieces.append(tsatools.lag_frame(exog.diff(), range(0, s),
                                         prefix='LD'))
    else:
        s = 0

    return _finalize(kind, pieces, endog, exog_names, p, s, const, trend,
                     seasonal, freq, first_period)


def _finalize(kind, pieces, endog, exog_names, p, s, const, trend, seasonal,
              freq, first_period):
    k = endog.shape[1]
    m = len(exog_names)
    table = pd.concat(pieces, axis=1).dropna()
    nobs = len(table)
    if nobs == 0:
        raise InvalidArgument("Not enough observations (%d) for the "
                              "requested lag orders" % len(endog))
    n_dropped = len(endog) - nobs

    if seasonal is not None and freq == 1:
        warnings.warn(seasonal_skipped_doc.strip(), DataWarning)
        seasonal = None

    det = _deterministic_frame(nobs, freq, first_period + n_dropped,
                               const, trend, seasonal)

    y = table.iloc[:, :k]
    if kind == util.VAR_KIND:
        w = None
        x = table.iloc[:, k:]
    else:
        n_w = k + m
        w = pd.concat([table.iloc[:, k:k + n_w].reset_index(drop=True),
                       det[_RESTRICTED]], axis=1)
        x = table.iloc[:, k + n_w:]
    x = pd.concat([x.reset_index(drop=True), det[_UNRESTRICTED]], axis=1)

    return RegressionMatrices(
        _rows(y), _rows(x), None if w is None else _rows(w),
        kind=kind, p=p, s=s,
        y_names=list(y.columns), x_names=list(x.columns),
        w_names=None if w is None else list(w.columns),
        endog_names=list(endog.columns), exog_names=exog_names,
        det_unrestricted=list(det[_UNRESTRICTED].columns),
        det_restricted=list(det[_RESTRICTED].columns),
        freq=freq, first_period=(first_period + n_dropped) % freq,
        index=table.index)


# ---------------------------------------------------------------
# Container

class RegressionMatrices(object):
    """
    Response, regressor and cointegration matrices of a VAR or VEC model

    Usually produced by `gen_var` or `gen_vec`.  All matrices have one
    column per observation, in time order.

    Parameters
    ----------
    Y : ndarray (K x T)
        Dependent variables (differenced for VEC models).
    X : ndarray (n_x x T) or None
        Non-cointegration regressors: lagged endogenous (differences),
        exogenous (differences) and unrestricted deterministic terms, in
        this order.
    W : ndarray (n_w x T) or None
        VEC only: lagged endogenous and exogenous levels followed by the
        restricted deterministic terms.
    kind : {'VAR', 'VEC'}
    p : int
        Lag order of the endogenous variables (levels VAR).
    s : int
        Lag order of the exogenous variables (levels VAR).
    y_names, x_names, w_names : list of str, optional
    endog_names, exog_names : list of str, optional
    det_unrestricted, det_restricted : list of str, optional
        Names of the deterministic rows at the end of X and W.
    freq : int, default 1
    first_period : int, default 0
        Zero-based seasonal position of the first column.
    index : pd.Index, optional
        Time labels of the columns.
    """
    def __init__(self, Y, X, W=None, kind='VAR', p=1, s=0,
                 y_names=None, x_names=None, w_names=None,
                 endog_names=None, exog_names=None,
                 det_unrestricted=None, det_restricted=None,
                 freq=1, first_period=0, index=None):
        self.kind = util.validate_kind(kind)
        Y = np.asarray(Y, dtype=float)
        if Y.ndim != 2:
            raise ShapeMismatch("Y must be two-dimensional (K x T)")
        k, nobs = Y.shape
        X = None if X is None else np.asarray(X, dtype=float)
        W = None if W is None else np.asarray(W, dtype=float)
        for name, mat in [('X', X), ('W', W)]:
            if mat is None:
                continue
            if mat.ndim != 2:
                raise ShapeMismatch("%s must be two-dimensional" % name)
            if mat.shape[1] != nobs:
                raise ShapeMismatch("%s has %d columns but Y has %d; all "
                                    "matrices must share the same "
                                    "observations" % (name, mat.shape[1],
                                                      nobs))
        if self.kind == util.VEC_KIND and W is None:
            raise ShapeMismatch("VEC models require a W matrix")
        if self.kind == util.VAR_KIND and W is not None:
            raise InvalidArgument("W is only defined for VEC models")
        if self.kind == util.VAR_KIND and X is None:
            raise ShapeMismatch("VAR models require an X matrix")

        self.Y = Y
        self.X = X
        self.W = W
        self.p = _check_lag_order(p, 'p', 1)
        self.s = _check_lag_order(s, 's', 0)
        self.neqs = k
        self.nobs = nobs
        self.freq = freq
        self.first_period = first_period

        self.endog_names = endog_names or ['y%d' % (i + 1) for i in range(k)]
        self.exog_names = exog_names or []
        self.det_unrestricted = det_unrestricted or []
        self.det_restricted = det_restricted or []
        self.y_names = y_names or list(self.endog_names)
        self.x_names = x_names or (['x%d' % (i + 1) for i in range(len(X))]
                                   if X is not None else [])
        self.w_names = w_names or (['w%d' % (i + 1) for i in range(len(W))]
                                   if W is not None else None)
        self.index = index if index is not None else pd.RangeIndex(nobs)

        if len(self.endog_names) != k:
            raise ShapeMismatch("endog_names has %d entries for %d "
                                "equations" % (len(self.endog_names), k))
        if self.n_x != self._expected_n_x:
            raise ShapeMismatch("X has %d rows, but the lag structure "
                                "implies %d" % (self.n_x,
                                                self._expected_n_x))
        if W is not None and len(W) != self._expected_n_w:
            raise ShapeMismatch("W has %d rows, but the lag structure "
                                "implies %d" % (len(W), self._expected_n_w))

    # -------------------------------------------------------------
    # Dimensions and row layout

    @property
    def k_exog(self):
        return len(self.exog_names)

    @property
    def n_x(self):
        """Number of rows of X"""
        return 0 if self.X is None else len(self.X)

    @property
    def n_w(self):
        """Number of rows of W"""
        return 0 if self.W is None else len(self.W)

    @property
    def det_names(self):
        """Unrestricted followed by restricted deterministic terms"""
        return self.det_unrestricted + self.det_restricted

    @property
    def _n_endog_lags(self):
        # lagged endogenous blocks in X
        return self.p if self.kind == util.VAR_KIND else self.p - 1

    @property
    def _n_exog_lags(self):
        # exogenous blocks in X
        if not self.k_exog:
            return 0
        return self.s + 1 if self.kind == util.VAR_KIND else self.s

    @property
    def _expected_n_x(self):
        return (self.neqs * self._n_endog_lags +
                self.k_exog * self._n_exog_lags +
                len(self.det_unrestricted))

    @property
    def _expected_n_w(self):
        return self.neqs + self.k_exog + len(self.det_restricted)

    @cache_readonly
    def x_slices(self):
        """
        dict of slices into the rows of X: 'endog', 'exog', 'det'
        """
        n_endog = self.neqs * self._n_endog_lags
        n_exog = self.k_exog * self._n_exog_lags
        return {'endog': slice(0, n_endog),
                'exog': slice(n_endog, n_endog + n_exog),
                'det': slice(n_endog + n_exog, self.n_x)}

    @cache_readonly
    def w_slices(self):
        """
        dict of slices into the rows of W: 'endog', 'exog', 'det'
        """
        if self.W is None:
            return None
        k, m = self.neqs, self.k_exog
        return {'endog': slice(0, k),
                'exog': slice(k, k + m),
                'det': slice(k + m, self.n_w)}

    @cache_readonly
    def regressors(self):
        """Stacked regressor matrix used by the sampler: X or [W; X]"""
        if self.kind == util.VAR_KIND:
            return self.X
        if self.X is None:
            return self.W
        return np.vstack([self.W, self.X])

    # -------------------------------------------------------------
    # Values needed to continue the series out of sample

    def initial_levels(self):
        """
        Most recent `p` levels of the endogenous variables.

        Returns
        -------
        levels : ndarray (p x K)
            Row 0 holds the last observation, row 1 the one before, etc.
        """
        k, p = self.neqs, self.p
        x_last = None if self.X is None else self.X[:, -1]
        if self.kind == util.VAR_KIND:
            lags = x_last[:k * (p - 1)].reshape((p - 1, k))
            return np.vstack([self.Y[:, -1], lags])

        levels = np.zeros((p, k))
        previous = self.W[:k, -1]
        levels[0] = previous + self.Y[:, -1]
        if p > 1:
            levels[1] = previous
            diffs = x_last[:k * (p - 1)].reshape((p - 1, k))
            for j in range(2, p):
                levels[j] = levels[j - 1] - diffs[j - 2]
        return levels

    def initial_exog_levels(self):
        """
        Most recent `s` levels of the exogenous variables.

        Returns
        -------
        levels : ndarray (s x M)
            Row 0 holds the last observation.  Empty without exogenous
            variables.
        """
        m, s = self.k_exog, self.s
        if not m or not s:
            return np.zeros((0, m))
        x_last = self.X[self.x_slices['exog'], -1]
        if self.kind == util.VAR_KIND:
            # lags 0, ..., s-1 of the last column are x_T, ..., x_{T-s+1}
            return x_last[:m * s].reshape((s, m))

        diffs = x_last.reshape((s, m))
        levels = np.zeros((s + 1, m))
        previous = self.W[self.w_slices['exog'], -1]
        levels[0] = previous + diffs[0]
        levels[1] = previous
        for j in range(2, s + 1):
            levels[j] = levels[j - 1] - diffs[j - 1]
        return levels[:s]

    def future_deterministic(self, steps):
        """
        Continuation of the deterministic terms for out-of-sample periods

        Parameters
        ----------
        steps : int

        Returns
        -------
        new_d : pd.DataFrame (steps x N)
            Columns ordered as `det_names`.  The constant is 1, the trend
            continues from T + 1 and the seasonal dummies keep cycling.
        """
        steps = _check_lag_order(steps, 'steps', 1)
        names = self.det_names
        out = pd.DataFrame(np.zeros((steps, len(names))), columns=names,
                           index=pd.RangeIndex(1, steps + 1))
        for name in names:
            if name == 'const':
                out[name] = 1.
            elif name == 'trend':
                out[name] = np.arange(self.nobs + 1, self.nobs + steps + 1,
                                      dtype=float)
            elif name.startswith('season.'):
                season = int(name.split('.')[1]) - 1
                position = (self.first_period + self.nobs +
                            np.arange(steps)) % self.freq
                out[name] = (position == season).astype(float)
        return out

    def __repr__(self):
        return ('<%s.%s kind=%s neqs=%d nobs=%d n_x=%d n_w=%d>'
                % (self.__module__, self.__class__.__name__, self.kind,
                   self.neqs, self.nobs, self.n_x, self.n_w))
