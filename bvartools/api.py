__all__ = ['BVAR', 'BVEC', 'PosteriorDraws', 'NormalWishartPrior',
           'gen_var', 'gen_vec', 'tsa']

from .tsa.vector_ar.bvar_model import BVAR, BVEC, PosteriorDraws
from .tsa.vector_ar.design import gen_var, gen_vec
from .tsa.vector_ar.priors import NormalWishartPrior
from .tsa import api as tsa
