#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Tests for the construction of VAR and VEC data matrices
"""
import warnings

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal, assert_equal
import pandas as pd
import pytest

from bvartools.tools.sm_exceptions import (DataWarning, InvalidArgument,
                                           ShapeMismatch)
from bvartools.tsa.vector_ar.design import (gen_var, gen_vec,
                                            RegressionMatrices)
from bvartools.tsa.vector_ar.tests.simulated import (random_walks,
                                                     quarterly_frame)


class TestGenVar(object):
    @classmethod
    def setup_class(cls):
        cls.endog = random_walks(20, 2, seed=0)
        cls.exog = random_walks(20, 1, seed=1)
        cls.data = gen_var(cls.endog, p=2)
        cls.full = gen_var(cls.endog, p=2, exog=cls.exog, s=1,
                           const='unrestricted', trend='unrestricted')

    def test_shapes(self):
        data = self.data
        assert data.kind == 'VAR'
        assert data.Y.shape == (2, 18)
        assert data.X.shape == (4, 18)
        assert data.W is None
        assert_equal(data.x_names, ['L1.y1', 'L1.y2', 'L2.y1', 'L2.y2'])
        assert_equal(data.y_names, ['y1', 'y2'])

    def test_values(self):
        data = self.data
        assert_array_equal(data.Y[:, 0], self.endog[2])
        assert_array_equal(data.X[:, 0],
                           np.r_[self.endog[1], self.endog[0]])
        assert_array_equal(data.Y[:, -1], self.endog[-1])

    def test_exog_and_deterministic(self):
        full = self.full
        assert_equal(full.x_names,
                     ['L1.y1', 'L1.y2', 'L2.y1', 'L2.y2',
                      'L0.x1', 'L1.x1', 'const', 'trend'])
        assert full.X.shape == (8, 18)
        assert_array_equal(full.X[4, :2], self.exog[2:4, 0])
        assert_array_equal(full.X[5, :2], self.exog[1:3, 0])
        assert_array_equal(full.X[6], 1)
        assert_array_equal(full.X[7], np.arange(1, 19))
        assert_equal(full.det_names, ['const', 'trend'])
        assert full.x_slices['exog'] == slice(4, 6)

    def test_idempotent(self):
        again = gen_var(self.endog, p=2, exog=self.exog, s=1,
                        const='unrestricted', trend='unrestricted')
        assert_array_equal(again.Y, self.full.Y)
        assert_array_equal(again.X, self.full.X)
        assert_equal(again.x_names, self.full.x_names)

    def test_column_counts_agree(self):
        assert self.full.Y.shape[1] == self.full.X.shape[1] == \
            self.full.nobs

    def test_initial_levels(self):
        assert_array_equal(self.data.initial_levels(),
                           self.endog[[-1, -2]])
        data = gen_var(self.endog, p=3, exog=self.exog, s=2)
        assert_array_equal(data.initial_levels(), self.endog[[-1, -2, -3]])
        assert_array_equal(data.initial_exog_levels(), self.exog[[-1, -2]])


class TestGenVarSeasonal(object):
    @classmethod
    def setup_class(cls):
        cls.frame = quarterly_frame(40)

    def test_inferred_from_index(self):
        data = gen_var(self.frame, p=2, seasonal='unrestricted')
        assert data.freq == 4
        assert data.first_period == 2
        assert_equal(data.x_names[-3:], ['season.1', 'season.2', 'season.3'])
        assert_equal(data.y_names, ['gdp', 'infl'])
        assert isinstance(data.index, pd.PeriodIndex)
        assert data.index[0] == pd.Period('2000Q3', freq='Q')

        season = pd.DataFrame(data.X[-3:].T, columns=data.x_names[-3:])
        # first retained observation is a third quarter
        assert_array_equal(season.iloc[0], [0, 0, 1])
        assert_array_equal(season.iloc[1], [0, 0, 0])
        assert_array_equal(season.iloc[2], [1, 0, 0])

    def test_explicit_matches_index(self):
        inferred = gen_var(self.frame, p=2, seasonal='unrestricted')
        explicit = gen_var(self.frame.values, p=2, seasonal='unrestricted',
                           freq=4, season_start=1)
        assert_array_equal(inferred.X, explicit.X)

    def test_freq_one_warns(self):
        with pytest.warns(DataWarning):
            data = gen_var(self.frame.values, p=1, seasonal='unrestricted')
        assert data.det_names == []
        assert data.X.shape[0] == 2

    def test_future_deterministic(self):
        data = gen_var(self.frame.values, p=2, const='unrestricted',
                       seasonal='unrestricted', freq=4, season_start=1)
        future = data.future_deterministic(4)
        assert_equal(future.columns.tolist(),
                     ['const', 'season.1', 'season.2', 'season.3'])
        assert_array_equal(future['const'], 1)
        # 40 raw observations: the next one is a first quarter
        assert_array_equal(future.iloc[:, 1:].values,
                           np.vstack([np.eye(3), np.zeros(3)]))


class TestGenVec(object):
    @classmethod
    def setup_class(cls):
        cls.endog = random_walks(20, 2, seed=2)
        cls.exog = random_walks(20, 1, seed=3)
        cls.data = gen_vec(cls.endog, p=3, exog=cls.exog, s=2,
                           const='restricted', trend='unrestricted')

    def test_shapes(self):
        data = self.data
        assert data.kind == 'VEC'
        assert data.nobs == 17
        assert data.Y.shape == (2, 17)
        assert data.W.shape == (4, 17)
        assert data.X.shape == (7, 17)
        assert_equal(data.y_names, ['D.y1', 'D.y2'])
        assert_equal(data.w_names, ['L1.y1', 'L1.y2', 'L1.x1', 'const'])
        assert_equal(data.x_names, ['LD1.y1', 'LD1.y2', 'LD2.y1', 'LD2.y2',
                                    'LD0.x1', 'LD1.x1', 'trend'])
        assert_equal(data.det_names, ['trend', 'const'])

    def test_values(self):
        y, x = self.endog, self.exog[:, 0]
        data = self.data
        assert_allclose(data.Y[:, 0], y[3] - y[2])
        assert_allclose(data.W[:, 0], np.r_[y[2], x[2], 1.])
        assert_allclose(data.X[:, 0],
                        np.r_[y[2] - y[1], y[1] - y[0],
                              x[3] - x[2], x[2] - x[1], 1.])
        assert_array_equal(data.X[-1], np.arange(1, 18))

    def test_regressors_stacked(self):
        assert_array_equal(self.data.regressors,
                           np.vstack([self.data.W, self.data.X]))

    def test_initial_levels(self):
        assert_allclose(self.data.initial_levels(), self.endog[[-1, -2, -3]])
        assert_allclose(self.data.initial_exog_levels(),
                        self.exog[[-1, -2]])

    def test_future_deterministic(self):
        future = self.data.future_deterministic(3)
        assert_array_equal(future['trend'], [18, 19, 20])
        assert_array_equal(future['const'], 1)

    def test_empty_x(self):
        data = gen_vec(self.endog, p=1, const='restricted')
        assert data.X is None
        assert data.n_x == 0
        assert_equal(data.w_names, ['L1.y1', 'L1.y2', 'const'])
        assert_array_equal(data.regressors, data.W)


class TestInvalidInput(object):
    @classmethod
    def setup_class(cls):
        cls.endog = random_walks(20, 2, seed=4)

    def test_one_dimensional(self):
        with pytest.raises(ShapeMismatch):
            gen_var(self.endog[:, 0], p=1)
        with pytest.raises(ShapeMismatch):
            gen_var(pd.Series(self.endog[:, 0]), p=1)

    def test_lag_order(self):
        with pytest.raises(InvalidArgument):
            gen_var(self.endog, p=0)
        with pytest.raises(InvalidArgument):
            gen_vec(self.endog, p=1.5)
        with pytest.raises(InvalidArgument):
            gen_var(self.endog, p=1, exog=self.endog[:, :1], s=-1)

    def test_restricted_in_var(self):
        with pytest.raises(InvalidArgument):
            gen_var(self.endog, p=1, const='restricted')

    def test_unknown_deterministic(self):
        with pytest.raises(InvalidArgument):
            gen_vec(self.endog, p=1, trend='both')

    def test_exog_length(self):
        with pytest.raises(InvalidArgument):
            gen_var(self.endog, p=1, exog=self.endog[:-1, :1])

    def test_missing_values(self):
        endog = self.endog.copy()
        endog[3, 1] = np.nan
        with pytest.raises(InvalidArgument):
            gen_var(endog, p=1)

    def test_too_short(self):
        with pytest.raises(InvalidArgument):
            gen_var(self.endog[:3], p=3)

    def test_matrices_column_mismatch(self):
        with pytest.raises(ShapeMismatch):
            RegressionMatrices(np.zeros((2, 10)), np.zeros((2, 9)), p=1)
        with pytest.raises(ShapeMismatch):
            RegressionMatrices(np.zeros((2, 10)), np.zeros((3, 10)), p=1)

    def test_no_warning_without_seasonal(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            gen_var(self.endog, p=1, const='unrestricted')
