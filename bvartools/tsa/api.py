__all__ = ['BVAR', 'BVEC', 'PosteriorDraws', 'NormalWishartPrior',
           'gen_var', 'gen_vec', 'RegressionMatrices',
           'gibbs_sampler', 'sample_chains', 'post_normal', 'post_wishart',
           'combine_chains', 'bvec_to_bvar', 'forecast', 'irf', 'fevd',
           'ma_reps']

from .vector_ar.bvar_model import (BVAR, BVEC, PosteriorDraws,
                                   combine_chains, bvec_to_bvar,
                                   forecast, fevd)
from .vector_ar.design import gen_var, gen_vec, RegressionMatrices
from .vector_ar.gibbs import (gibbs_sampler, sample_chains,
                              post_normal, post_wishart)
from .vector_ar.irf import irf, ma_reps
from .vector_ar.priors import NormalWishartPrior
