"""Quasigroup — a magma with left and right inverse operations.

For all ``x`` and ``y`` of ``A`` an implementation must satisfy::

    combine(x, left_inv(x, y))
      = left_inv(x, combine(x, y))
      = combine(right_inv(y, x), x)
      = right_inv(combine(y, x), x)
      = y

INVARIANT: the law is a caller contract. Nothing in this package checks it
when an instance is built or transformed; see ``quasigroup.laws`` for an
opt-in checker meant for test suites.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from quasigroup.domain.magma import Magma
from quasigroup.domain.types import BinaryOperation


@runtime_checkable
class Quasigroup[A](Magma[A], Protocol):
    """Structural contract for ``combine`` plus its two inverses."""

    def left_inv(self, x: A, y: A, /) -> A: ...

    def right_inv(self, x: A, y: A, /) -> A: ...


@dataclass(frozen=True)
class QuasigroupInstance[A]:
    """A quasigroup given as a record of functions.

    Any object with ``combine``, ``left_inv`` and ``right_inv`` satisfies
    :class:`Quasigroup`; this dataclass is the value the combinators return.
    """

    combine: BinaryOperation[A]
    left_inv: BinaryOperation[A]
    right_inv: BinaryOperation[A]


def quasigroup[A](
    combine: BinaryOperation[A],
    left_inv: BinaryOperation[A],
    right_inv: BinaryOperation[A],
) -> QuasigroupInstance[A]:
    """Build a quasigroup value from its three operations.

    Examples:
        >>> q = quasigroup(lambda x, y: x + y, lambda x, y: y - x, lambda x, y: x - y)
        >>> q.combine(1, 2), q.left_inv(1, 2), q.right_inv(1, 2)
        (3, 1, -1)
    """
    return QuasigroupInstance(combine=combine, left_inv=left_inv, right_inv=right_inv)
