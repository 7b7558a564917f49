"""
.. This module acts as the top-level API documentation.

.. module: pyquad

Accurate roots of quadratic equations :math:`ax^2 + bx + c = 0` in IEEE
half, single and double precision.

Root Finding
------------

.. autosummary::
    :toctree: generated/

    compute_roots
    half_roots
    single_roots
    double_roots
    quadratic_roots
    RootResult
    RootType

Floating Point Formats
----------------------

.. autosummary::
    :toctree: generated/

    FloatTraits
    traits_for

Building Blocks
---------------

.. autosummary::
    :toctree: generated/

    normalize
    div_root
    det2x2
    discriminant_info
    handle_special_cases
"""

__version__ = "0.1.0"

import sys

from .decompose import NormalizedForm, det2x2, div_root, normalize
from .discriminant import DiscriminantInfo, discriminant_info
from .results import RootResult, RootType
from .roots import (compute_roots, double_roots, half_roots,
                    quadratic_roots, single_roots)
from .special_cases import handle_special_cases
from .traits import DOUBLE, HALF, SINGLE, FloatTraits, traits_for

# ======================================================================

assert sys.version_info >= (3, 10)
