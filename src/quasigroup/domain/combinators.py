"""Structural combinators — derive new instances from existing ones.

Pure functions. A combinator only rewires which operation is called with
which argument order, or pipes arguments through a function first; it
never inspects elements of ``A`` and never mutates its input.
"""

from __future__ import annotations

from collections.abc import Callable

from quasigroup.domain.magma import Magma, MagmaInstance
from quasigroup.domain.quasigroup import Quasigroup, QuasigroupInstance
from quasigroup.domain.types import Endomorphism, Predicate


def reverse[A](q: Quasigroup[A]) -> QuasigroupInstance[A]:
    """The dual of *q*: ``combine`` swaps its arguments and the inverses trade places.

    ``reverse(q).left_inv`` is ``q.right_inv`` and vice versa, called with
    the arguments as given. ``reverse(reverse(q))`` behaves exactly like *q*.

    Examples:
        >>> from quasigroup.domain.instances import NUMBER_QUASIGROUP
        >>> r = reverse(NUMBER_QUASIGROUP)
        >>> r.combine(1, 2), r.left_inv(1, 2), r.right_inv(1, 2)
        (3, -1, 1)
    """
    return QuasigroupInstance(
        combine=lambda x, y: q.combine(y, x),
        left_inv=lambda x, y: q.right_inv(x, y),
        right_inv=lambda x, y: q.left_inv(x, y),
    )


def endo[A](f: Endomorphism[A]) -> Callable[[Quasigroup[A]], QuasigroupInstance[A]]:
    """Pre-apply *f* to both arguments of every operation.

    ``endo(f)(q).op(x, y) == q.op(f(x), f(y))``. Whether the result is still
    lawful depends on *f*; that is left to the caller.
    """

    def apply(q: Quasigroup[A]) -> QuasigroupInstance[A]:
        return QuasigroupInstance(
            combine=lambda x, y: q.combine(f(x), f(y)),
            left_inv=lambda x, y: q.left_inv(f(x), f(y)),
            right_inv=lambda x, y: q.right_inv(f(x), f(y)),
        )

    return apply


def filter_first[A](predicate: Predicate[A]) -> Callable[[Magma[A]], MagmaInstance[A]]:
    """Combine only when the first argument passes *predicate*; otherwise return the second."""

    def apply(m: Magma[A]) -> MagmaInstance[A]:
        return MagmaInstance(combine=lambda x, y: m.combine(x, y) if predicate(x) else y)

    return apply


def filter_second[A](predicate: Predicate[A]) -> Callable[[Magma[A]], MagmaInstance[A]]:
    """Combine only when the second argument passes *predicate*; otherwise return the first."""

    def apply(m: Magma[A]) -> MagmaInstance[A]:
        return MagmaInstance(combine=lambda x, y: m.combine(x, y) if predicate(y) else x)

    return apply
