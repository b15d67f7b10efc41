#!/usr/bin/env python
# -*- coding: utf-8 -*-
__all__ = ['vec', 'unvec', 'lag_frame', 'seasonal_dummies',
           'freq_to_period', 'season_position']

import numpy as np
import pandas as pd
from pandas.tseries.frequencies import to_offset

from bvartools.tools.sm_exceptions import ShapeMismatch


def vec(mat):
    return mat.ravel('F')


def unvec(v, nrows=None):
    """
    Inverse of `vec`.  With `nrows` omitted the result is square.
    """
    if nrows is None:
        k = int(np.sqrt(len(v)))
        if k * k != len(v):
            raise ShapeMismatch("cannot unvec %d elements into a square "
                                "matrix" % len(v))
        nrows = k
    return v.reshape((nrows, -1), order='F')


def lag_frame(frame, lags, prefix='L'):
    """
    Stack lagged copies of the columns of a DataFrame side by side.

    Parameters
    ----------
    frame : pd.DataFrame
    lags : iterable of int
        Lags to include, e.g. ``range(1, p + 1)``.  Lag 0 is the
        contemporaneous value.
    prefix : str
        Column names are ``prefix + str(lag) + '.' + name``.

    Returns
    -------
    lagged : pd.DataFrame
        Same index as `frame`; the leading rows that have no lagged value
        are NaN.

    Examples
    --------
    >>> df = pd.DataFrame({'y': [1., 2., 3.]})
    >>> lag_frame(df, [1, 2]).columns.tolist()
    ['L1.y', 'L2.y']
    """
    pieces = []
    for lag in lags:
        shifted = frame.shift(lag)
        shifted.columns = ['%s%d.%s' % (prefix, lag, name)
                           for name in frame.columns]
        pieces.append(shifted)
    if not pieces:
        return pd.DataFrame(index=frame.index)
    return pd.concat(pieces, axis=1)


def seasonal_dummies(n_seasons, len_endog, first_period=0):
    """
    Seasonal dummy variables for all but the last season.

    Parameters
    ----------
    n_seasons : int
        Number of seasons (the frequency of the data).
    len_endog : int
        Number of observations.
    first_period : int, default 0
        Zero-based seasonal position of the first observation.

    Returns
    -------
    seasonal_dummies : ndarray (len_endog x n_seasons - 1)
        Column ``i`` is 1 in periods whose (zero-based) seasonal position
        is ``i``; the last season is the omitted base.
    """
    if n_seasons < 2:
        return np.zeros((len_endog, 0))
    position = (first_period + np.arange(len_endog)) % n_seasons
    season_exog = (position[:, None] ==
                   np.arange(n_seasons - 1)[None, :]).astype(float)
    return season_exog


def freq_to_period(freq):
    """
    Convert a pandas frequency to a periodicity

    Parameters
    ----------
    freq : str or offset
        Frequency to convert

    Returns
    -------
    period : int
        Periodicity of freq

    Notes
    -----
    Annual maps to 1, quarterly maps to 4, monthly to 12, weekly to 52,
    daily to 7, business daily to 5 and hourly to 24.
    """
    freq = to_offset(freq).rule_code.upper()
    if freq.startswith(('A', 'Y', 'BA', 'BY')):
        return 1
    elif freq.startswith(('Q', 'BQ')):
        return 4
    elif freq in ('M', 'ME', 'MS', 'BM', 'BME', 'BMS'):
        return 12
    elif freq == 'W' or freq.startswith('W-'):
        return 52
    elif freq == 'D':
        return 7
    elif freq == 'B':
        return 5
    elif freq == 'H':
        return 24
    else:
        raise ValueError("freq {} not understood. Please report if you "
                         "think this is in error.".format(freq))


def season_position(index, period):
    """
    Zero-based seasonal position of the first element of a date index

    Parameters
    ----------
    index : pd.DatetimeIndex or pd.PeriodIndex
    period : int
        As returned by `freq_to_period`.

    Returns
    -------
    position : int
    """
    first = index[0]
    if period == 1:
        return 0
    elif period == 4:
        return first.quarter - 1
    elif period == 12:
        return first.month - 1
    elif period == 52:
        week = pd.Timestamp(first.start_time if hasattr(first, 'start_time')
                            else first).isocalendar()[1]
        return (week - 1) % 52
    elif period in (5, 7):
        return first.dayofweek % period
    elif period == 24:
        return first.hour
    raise ValueError("period %s not supported" % period)
