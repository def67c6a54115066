"""Ready-made quasigroup instances for built-in numeric types."""

from __future__ import annotations

from typing import Any

from quasigroup.domain.quasigroup import QuasigroupInstance

# Lawful over int, Fraction and Decimal; over float only up to rounding.
NUMBER_QUASIGROUP: QuasigroupInstance[Any] = QuasigroupInstance(
    combine=lambda x, y: x + y,
    left_inv=lambda x, y: y - x,
    right_inv=lambda x, y: x - y,
)

# Every element is its own inverse, so all three operations coincide.
XOR_QUASIGROUP: QuasigroupInstance[int] = QuasigroupInstance(
    combine=lambda x, y: x ^ y,
    left_inv=lambda x, y: x ^ y,
    right_inv=lambda x, y: x ^ y,
)
