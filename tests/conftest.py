"""Shared pytest fixtures and sample instances for quasigroup tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from fractions import Fraction
from typing import Any

import pytest

from quasigroup.domain.instances import NUMBER_QUASIGROUP, XOR_QUASIGROUP
from quasigroup.domain.magma import MagmaInstance
from quasigroup.domain.quasigroup import QuasigroupInstance


@pytest.fixture
def number_q() -> QuasigroupInstance[Any]:
    """Integers under ``+`` with subtraction as both inverses."""
    return NUMBER_QUASIGROUP


@pytest.fixture
def xor_q() -> QuasigroupInstance[int]:
    return XOR_QUASIGROUP


@pytest.fixture
def affine_q() -> QuasigroupInstance[Fraction]:
    """Lawful but non-commutative: ``combine(x, y) = 2x - y`` over rationals.

    Folding ``[a, b]`` from 0 gives ``-2a - b``, so swapping elements
    changes the result whenever ``a != b``.
    """
    return QuasigroupInstance(
        combine=lambda x, y: 2 * x - y,
        left_inv=lambda x, y: 2 * x - y,
        right_inv=lambda x, y: (x + y) / 2,
    )


@pytest.fixture
def concat_magma() -> MagmaInstance[str]:
    """String concatenation, a non-commutative magma."""
    return MagmaInstance(combine=lambda x, y: x + y)


@pytest.fixture
def fraction_samples() -> list[Fraction]:
    return [Fraction(n, d) for n in (-3, 0, 1, 5) for d in (1, 2, 3)]


@pytest.fixture
def _isolated_package_logger() -> Generator[None]:
    """Restore the ``quasigroup`` and root loggers after a test reconfigures them.

    Use via ``pytestmark = pytest.mark.usefixtures("_isolated_package_logger")``.
    """
    root = logging.getLogger()
    pkg = logging.getLogger("quasigroup")
    root_handlers, root_level = root.handlers[:], root.level
    pkg_handlers, pkg_level, pkg_propagate = pkg.handlers[:], pkg.level, pkg.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    pkg.handlers = pkg_handlers
    pkg.setLevel(pkg_level)
    pkg.propagate = pkg_propagate
