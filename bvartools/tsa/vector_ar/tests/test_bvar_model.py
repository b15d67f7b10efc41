#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Tests for BVAR / BVEC estimation, the draw container and forecasting
"""
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal, assert_equal
import pytest

from bvartools.tools.sm_exceptions import InvalidArgument, ShapeMismatch
from bvartools.tsa.tsatools import vec
from bvartools.tsa.vector_ar.bvar_model import (BVAR, BVEC, PosteriorDraws,
                                                bvec_to_bvar, combine_chains,
                                                forecast)
from bvartools.tsa.vector_ar.design import gen_var, gen_vec
from bvartools.tsa.vector_ar.tests.simulated import (coefs2, sigma2,
                                                     quarterly_frame,
                                                     random_walks, simulate)


class TestPosteriorDraws(object):
    @classmethod
    def setup_class(cls):
        cls.data = gen_var(simulate(coefs2, sigma2, 100), p=2,
                           const='unrestricted')
        cls.draws = BVAR(cls.data).fit(iterations=300, burnin=100,
                                       random_state=1)

    def test_shapes(self):
        draws = self.draws
        assert draws.kind == 'VAR'
        assert draws.n_draws == 200
        assert draws.A.shape == (10, 200)
        assert draws.Sigma.shape == (4, 200)
        assert draws.Pi is None

    def test_thin_identity(self):
        thinned = self.draws.thin(1)
        assert_array_equal(thinned.A, self.draws.A)
        assert_array_equal(thinned.Sigma, self.draws.Sigma)

    @pytest.mark.parametrize('step', [2, 3, 7, 200, 500])
    def test_thin_count(self, step):
        thinned = self.draws.thin(step)
        assert thinned.n_draws == -(-200 // step)
        assert_array_equal(thinned.A, self.draws.A[:, ::step])
        assert_array_equal(thinned.Sigma, self.draws.Sigma[:, ::step])

    @pytest.mark.parametrize('step', [0, -1, 1.5])
    def test_thin_invalid(self, step):
        with pytest.raises(InvalidArgument):
            self.draws.thin(step)

    def test_readonly(self):
        with pytest.raises(ValueError):
            self.draws.A[0, 0] = 1.

    def test_mismatched_draw_counts(self):
        with pytest.raises(ShapeMismatch):
            PosteriorDraws(self.data, self.draws.A[:, :10], self.draws.Sigma)
        with pytest.raises(ShapeMismatch):
            PosteriorDraws(self.data, self.draws.A[:4], self.draws.Sigma)
        with pytest.raises(ShapeMismatch):
            PosteriorDraws(self.data, self.draws.A, self.draws.Sigma[:3])

    def test_pi_only_for_vec(self):
        with pytest.raises(InvalidArgument):
            PosteriorDraws(self.data, self.draws.A, self.draws.Sigma,
                           Pi=self.draws.A)

    def test_coefficient_views(self):
        draws = self.draws
        assert draws.coefs.shape == (200, 2, 2, 2)
        assert draws.coefs_det.shape == (200, 2, 1)
        assert draws.coefs_exog.shape == (200, 0, 2, 0)
        first = draws.A[:, 0].reshape((5, 2)).T
        assert_array_equal(draws.coef_matrices[0], first)
        assert_array_equal(draws.coefs[0, 1], first[:, 2:4])
        assert_array_equal(draws.sigma_u[0],
                           draws.Sigma[:, 0].reshape((2, 2)).T)

    def test_labelled_means(self):
        mean = self.draws.mean_coefs
        assert_equal(mean.columns.tolist(), self.data.x_names)
        assert_equal(mean.index.tolist(), ['y1', 'y2'])
        assert_allclose(mean.values, self.draws.coef_matrices.mean(axis=0))
        assert self.draws.mean_pi is None
        assert_allclose(self.draws.mean_sigma.values,
                        self.draws.mean_sigma.values.T)

    def test_combine_chains(self):
        other = BVAR(self.data).fit(iterations=30, burnin=10,
                                    random_state=2)
        combined = combine_chains([self.draws, other])
        assert combined.n_draws == 220
        assert_array_equal(combined.A[:, 200:], other.A)

    def test_combine_chains_other_data(self):
        data = gen_var(simulate(coefs2, sigma2, 90), p=2,
                       const='unrestricted')
        other = BVAR(data).fit(iterations=30, burnin=10, random_state=2)
        with pytest.raises(ShapeMismatch):
            combine_chains([self.draws, other])


class TestModels(object):
    def test_from_series(self):
        model = BVAR.from_series(quarterly_frame(60), p=2,
                                 const='unrestricted')
        assert_equal(model.endog_names, ['gdp', 'infl'])
        draws = model.fit(iterations=40, burnin=20, random_state=0)
        assert_equal(draws.mean_coefs.index.tolist(), ['gdp', 'infl'])

    def test_wrong_kind(self):
        endog = random_walks(30)
        with pytest.raises(InvalidArgument):
            BVAR(gen_vec(endog, p=2))
        with pytest.raises(InvalidArgument):
            BVEC(gen_var(endog, p=2))
        with pytest.raises(InvalidArgument):
            BVAR(endog)

    def test_fit_chains(self):
        data = gen_var(simulate(coefs2, sigma2, 60), p=1)
        model = BVAR(data)
        draws = model.fit_chains(n_chains=2, iterations=30, burnin=10,
                                 seed=5, n_jobs=1)
        assert draws.n_draws == 40
        again = model.fit_chains(n_chains=2, iterations=30, burnin=10,
                                 seed=5, n_jobs=2)
        assert_array_equal(draws.A, again.A)

    def test_bvec_fit(self):
        endog = random_walks(60, 2, seed=8)
        data = gen_vec(endog, p=2, const='restricted')
        draws = BVEC(data).fit(iterations=40, burnin=20, random_state=0)
        assert draws.kind == 'VEC'
        assert draws.Pi.shape == (2 * 3, 20)
        assert draws.A.shape == (2 * 2, 20)
        assert_equal(draws.mean_pi.columns.tolist(),
                     ['L1.y1', 'L1.y2', 'const'])
        assert draws.var_rep.coefs.shape == (20, 2, 2, 2)

    def test_bvec_without_x(self):
        endog = random_walks(60, 2, seed=8)
        data = gen_vec(endog, p=1)
        draws = BVEC(data).fit(iterations=20, burnin=10, random_state=0)
        assert draws.A.shape == (0, 10)
        assert draws.var_rep.coefs.shape == (10, 1, 2, 2)


class TestBvecToBvar(object):
    @classmethod
    def setup_class(cls):
        cls.endog = random_walks(20, 2, seed=2)
        cls.exog = random_walks(20, 1, seed=3)
        cls.data = gen_vec(cls.endog, p=3, exog=cls.exog, s=2,
                           const='restricted', trend='unrestricted')
        rng = np.random.default_rng(12)
        cls.gamma = rng.normal(scale=0.1, size=(2, 7))
        cls.pi = rng.normal(scale=0.1, size=(2, 4))
        cls.draws = PosteriorDraws(cls.data, vec(cls.gamma)[:, None],
                                   vec(1e-20 * np.eye(2))[:, None],
                                   Pi=vec(cls.pi)[:, None])

    def test_blocks(self):
        g, pi = self.gamma, self.pi
        rep = bvec_to_bvar(self.draws)
        gamma1, gamma2 = g[:, 0:2], g[:, 2:4]
        ups0, ups1 = g[:, 4:5], g[:, 5:6]
        assert_allclose(rep.coefs[0, 0], np.eye(2) + pi[:, :2] + gamma1)
        assert_allclose(rep.coefs[0, 1], gamma2 - gamma1)
        assert_allclose(rep.coefs[0, 2], -gamma2)
        assert_allclose(rep.coefs_exog[0, 0], ups0)
        assert_allclose(rep.coefs_exog[0, 1], pi[:, 2:3] + ups1 - ups0)
        assert_allclose(rep.coefs_exog[0, 2], -ups1)
        assert_allclose(rep.coefs_det[0], np.c_[g[:, 6], pi[:, 3]])
        assert_equal(rep.det_names, ['trend', 'const'])

    def test_one_step_matches_vec_form(self):
        y, x = self.endog, self.exog[:, 0]
        x_new = 0.7
        w_next = np.r_[y[-1], x[-1], 1.]
        x_next = np.r_[y[-1] - y[-2], y[-2] - y[-3],
                       x_new - x[-1], x[-1] - x[-2], self.data.nobs + 1]
        expected = (y[-1] + np.dot(self.pi, w_next) +
                    np.dot(self.gamma, x_next))

        res = self.draws.forecast(1, new_x=[[x_new]],
                                  new_d=self.data.future_deterministic(1),
                                  seed=0, n_jobs=1)
        assert_allclose(res.draws[0, :, 0], expected, atol=1e-8)

    def test_requires_vec(self):
        data = gen_var(self.endog, p=1)
        draws = PosteriorDraws(data, np.zeros((4, 2)), np.ones((4, 2)))
        with pytest.raises(InvalidArgument):
            bvec_to_bvar(draws)

    def test_missing_pi(self):
        with pytest.raises(ShapeMismatch):
            PosteriorDraws(self.data, self.draws.A, self.draws.Sigma)


class TestForecast(object):
    @classmethod
    def setup_class(cls):
        cls.endog = simulate(coefs2, sigma2, 100)
        cls.data = gen_var(cls.endog, p=2)
        cls.draws = BVAR(cls.data).fit(iterations=150, burnin=50,
                                       random_state=0)
        cls.res = forecast(cls.draws, 4, seed=1, n_jobs=1)

    def test_result(self):
        res = self.res
        assert res.draws.shape == (4, 2, 100)
        frame = res['y1']
        assert_equal(frame.columns.tolist(), ['5%', '50%', '95%'])
        assert_equal(frame.index.tolist(), [1, 2, 3, 4])
        assert np.all(frame['5%'] <= frame['50%'])
        assert np.all(frame['50%'] <= frame['95%'])
        assert_allclose(res.mean.values, res.draws.mean(axis=2))

    def test_independent_of_n_jobs(self):
        threaded = forecast(self.draws, 4, seed=1, n_jobs=2)
        assert_array_equal(threaded.draws, self.res.draws)

    def test_seed_changes_draws(self):
        other = forecast(self.draws, 4, seed=2, n_jobs=1)
        assert not np.allclose(other.draws, self.res.draws)

    def test_default_new_d_is_zero(self):
        explicit = forecast(self.draws, 4, new_d=np.zeros((4, 0)), seed=1,
                            n_jobs=1)
        assert_array_equal(explicit.draws, self.res.draws)

        data = gen_var(self.endog, p=2, const='unrestricted')
        draws = BVAR(data).fit(iterations=40, burnin=20, random_state=0)
        implicit = draws.forecast(3, seed=4, n_jobs=1)
        explicit = draws.forecast(3, new_d=np.zeros((3, 1)), seed=4,
                                  n_jobs=1)
        assert_array_equal(implicit.draws, explicit.draws)

    def test_one_step_mean(self):
        # with a negligible error covariance the path is the
        # conditional mean
        A = self.draws.A[:, :1]
        sigma = vec(1e-20 * np.eye(2))[:, None]
        draws = PosteriorDraws(self.data, A, sigma)
        res = forecast(draws, 1, seed=0, n_jobs=1)
        coefs = draws.coefs[0]
        expected = (np.dot(coefs[0], self.endog[-1]) +
                    np.dot(coefs[1], self.endog[-2]))
        assert_allclose(res.draws[0, :, 0], expected, atol=1e-8)

    def test_invalid_inputs(self):
        with pytest.raises(InvalidArgument):
            forecast(self.draws, 0)
        with pytest.raises(InvalidArgument):
            forecast(self.draws, 4, new_d=np.zeros((3, 0)))
        with pytest.raises(InvalidArgument):
            forecast(self.draws, 4, new_x=np.zeros((4, 1)))
        with pytest.raises(InvalidArgument):
            forecast(self.draws, 4, quantiles=[0.5, 1.5])


class TestForecastExog(object):
    def test_exog_enters_levels(self):
        endog = simulate(coefs2, sigma2, 80)
        exog = random_walks(80, 1, seed=6)
        data = gen_var(endog, p=1, exog=exog, s=1, const='unrestricted')
        rng = np.random.default_rng(0)
        coef = rng.normal(scale=0.2, size=(2, 5))
        draws = PosteriorDraws(data, vec(coef)[:, None],
                               vec(1e-20 * np.eye(2))[:, None])
        new_x = np.array([[0.3], [-0.2]])
        new_d = data.future_deterministic(2)
        res = draws.forecast(2, new_x=new_x, new_d=new_d, seed=0, n_jobs=1)

        y1 = (np.dot(coef[:, :2], endog[-1]) + coef[:, 2] * new_x[0, 0] +
              coef[:, 3] * exog[-1, 0] + coef[:, 4])
        y2 = (np.dot(coef[:, :2], y1) + coef[:, 2] * new_x[1, 0] +
              coef[:, 3] * new_x[0, 0] + coef[:, 4])
        assert_allclose(res.draws[:, :, 0], np.vstack([y1, y2]), atol=1e-8)
