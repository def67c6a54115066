"""LawReport and LawViolation — law-check outcomes reported as data.

A failed check is a value, not an exception; ``assert_lawful`` is the
only place that turns a failed report into :class:`LawViolationError`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field


class Law(StrEnum):
    """The four equations of the quasigroup law, each expected to equal ``y``."""

    COMBINE_LEFT_INV = "combine_left_inv"  # combine(x, left_inv(x, y))
    LEFT_INV_COMBINE = "left_inv_combine"  # left_inv(x, combine(x, y))
    COMBINE_RIGHT_INV = "combine_right_inv"  # combine(right_inv(y, x), x)
    RIGHT_INV_COMBINE = "right_inv_combine"  # right_inv(combine(y, x), x)


class LawViolation(BaseModel):
    """One failing equation for one ``(x, y)`` pair.

    Elements are stored as ``repr`` strings so reports stay serializable
    whatever ``A`` is.
    """

    model_config = {"frozen": True}

    law: Law
    x: str
    y: str
    expected: str
    actual: str


class LawReport(BaseModel):
    """Outcome of checking an instance against sample elements.

    Attributes:
        ok: True when no violation was found; derived, never passed in.
        checked: Number of ``(x, y)`` pairs evaluated.
        violations: Every failing equation, in evaluation order.
    """

    model_config = {"frozen": True}

    checked: int = 0
    violations: list[LawViolation] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.violations


class LawViolationError(Exception):
    """Raised by ``assert_lawful`` when a report is not ok."""

    def __init__(self, report: LawReport) -> None:
        self.report = report
        first = report.violations[0] if report.violations else None
        detail = f"; first: {first.law} at x={first.x}, y={first.y}" if first else ""
        super().__init__(f"{len(report.violations)} law violation(s){detail}")
