"""quasigroup — generic quasigroup algebra: contracts, combinators, and folds."""

import logging

from quasigroup.domain.combinators import endo, filter_first, filter_second, reverse
from quasigroup.domain.folds import concat_all, left_inv_all, right_inv_all
from quasigroup.domain.instances import NUMBER_QUASIGROUP, XOR_QUASIGROUP
from quasigroup.domain.magma import Magma, MagmaInstance, magma
from quasigroup.domain.quasigroup import Quasigroup, QuasigroupInstance, quasigroup
from quasigroup.domain.types import BinaryOperation, Endomorphism, Predicate

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NUMBER_QUASIGROUP",
    "XOR_QUASIGROUP",
    "BinaryOperation",
    "Endomorphism",
    "Magma",
    "MagmaInstance",
    "Predicate",
    "Quasigroup",
    "QuasigroupInstance",
    "__version__",
    "concat_all",
    "endo",
    "filter_first",
    "filter_second",
    "left_inv_all",
    "magma",
    "quasigroup",
    "reverse",
    "right_inv_all",
]
