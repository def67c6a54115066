"""Function type aliases shared by the combinators."""

from __future__ import annotations

from collections.abc import Callable

type BinaryOperation[A] = Callable[[A, A], A]
type Endomorphism[A] = Callable[[A], A]
type Predicate[A] = Callable[[A], bool]
