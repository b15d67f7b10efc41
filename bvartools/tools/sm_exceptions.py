#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Contains custom errors and warnings.

Errors subclass the builtin error that best describes them (ValueError for
malformed input, LinAlgError for numerical breakdowns) so that callers can
catch either the specific or the generic class.

Warnings should derive from either an existing warning or another custom
warning, and should usually be accompanied by a string using the format
warning_name_doc that serves as a generic message to use when the warning is
raised.
"""
import warnings

import numpy as np

# ------------------------------------------------------------------
# Error/Warning Message Templates

seasonal_skipped_doc = """
The frequency of the provided data is 1. No seasonal dummies are generated.
"""

singular_scale_doc = """
The posterior scale matrix of the error covariance is not invertible.
This usually means the model is not identified, e.g. fewer observations
than endogenous variables.
"""

singular_precision_doc = """
The posterior precision matrix of the coefficients is not positive definite.
"""


# ------------------------------------------------------------------
# Errors

class InvalidArgument(ValueError):
    """Malformed model specification or sampler/engine argument"""
    pass


class ShapeMismatch(ValueError):
    """Arrays whose dimensions are inconsistent with each other"""
    pass


class NumericalFailure(np.linalg.LinAlgError):
    """A matrix that has to be inverted is singular; the chain is aborted"""
    pass


# ------------------------------------------------------------------
# Warnings

class ModelWarning(UserWarning):
    pass


class CacheWriteWarning(ModelWarning):
    pass


class DataWarning(ModelWarning):
    pass


warnings.simplefilter('always', category=ModelWarning)
