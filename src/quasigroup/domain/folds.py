"""Fold utilities — reduce a sequence with one quasigroup operation.

All folds are strict left folds with the accumulator as the first
argument::

    acc = start_with
    for e in as_:
        acc = op(acc, e)

The operations are not assumed associative or commutative, so elements
are never reordered. An empty sequence returns ``start_with`` unchanged.
*as_* may be any finite iterable and is consumed exactly once.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable

from quasigroup.domain.quasigroup import Quasigroup
from quasigroup.domain.types import BinaryOperation

type Fold[A] = Callable[[A], Callable[[Iterable[A]], A]]


def _fold_with[A](op: BinaryOperation[A]) -> Fold[A]:
    def starting(start_with: A) -> Callable[[Iterable[A]], A]:
        def run(as_: Iterable[A]) -> A:
            return functools.reduce(op, as_, start_with)

        return run

    return starting


def concat_all[A](q: Quasigroup[A]) -> Fold[A]:
    """Fold with ``combine``.

    Examples:
        >>> from quasigroup.domain.instances import NUMBER_QUASIGROUP
        >>> concat_all(NUMBER_QUASIGROUP)(0)([1, 2, 3])
        6
    """
    return _fold_with(q.combine)


def left_inv_all[A](q: Quasigroup[A]) -> Fold[A]:
    """Fold with ``left_inv``.

    Examples:
        >>> from quasigroup.domain.instances import NUMBER_QUASIGROUP
        >>> left_inv_all(NUMBER_QUASIGROUP)(0)([1, 2, 3, 4])
        2
    """
    return _fold_with(q.left_inv)


def right_inv_all[A](q: Quasigroup[A]) -> Fold[A]:
    """Fold with ``right_inv``.

    Examples:
        >>> from quasigroup.domain.instances import NUMBER_QUASIGROUP
        >>> right_inv_all(NUMBER_QUASIGROUP)(0)([1, 2, 3])
        -6
    """
    return _fold_with(q.right_inv)
