"""Magma — a set with a single closed binary operation.

No structural invariant beyond closure: ``combine(x, y)`` is always an
element of the same set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from quasigroup.domain.types import BinaryOperation


@runtime_checkable
class Magma[A](Protocol):
    """Structural contract for a combine-only algebra over ``A``."""

    def combine(self, x: A, y: A, /) -> A: ...


@dataclass(frozen=True)
class MagmaInstance[A]:
    """A magma given as a record of functions."""

    combine: BinaryOperation[A]


def magma[A](combine: BinaryOperation[A]) -> MagmaInstance[A]:
    """Build a magma value from a combine function."""
    return MagmaInstance(combine=combine)
