"""Check the quasigroup law on sample elements.

Evaluates the four equations for every ordered pair drawn from the
samples. Sampling can only find counterexamples, never prove lawfulness.
"""

from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable

from quasigroup.config.logging import get_logger
from quasigroup.domain.quasigroup import Quasigroup
from quasigroup.laws.config import LawsConfig
from quasigroup.laws.result import Law, LawReport, LawViolation, LawViolationError

log = get_logger(__name__)

type Equality[A] = Callable[[A, A], bool]


def _equations[A](q: Quasigroup[A], x: A, y: A) -> list[tuple[Law, A]]:
    return [
        (Law.COMBINE_LEFT_INV, q.combine(x, q.left_inv(x, y))),
        (Law.LEFT_INV_COMBINE, q.left_inv(x, q.combine(x, y))),
        (Law.COMBINE_RIGHT_INV, q.combine(q.right_inv(y, x), x)),
        (Law.RIGHT_INV_COMBINE, q.right_inv(q.combine(y, x), x)),
    ]


def check_quasigroup_laws[A](
    q: Quasigroup[A],
    samples: Iterable[A],
    *,
    eq: Equality[A] = operator.eq,
    config: LawsConfig | None = None,
) -> LawReport:
    """Evaluate the quasigroup law for all pairs of *samples*.

    Only the first ``config.max_samples`` samples are used. With
    ``config.fail_fast`` the check stops at the first violation.
    Exceptions raised by the instance's operations propagate.
    """
    cfg = config or LawsConfig()
    pool = list(itertools.islice(samples, cfg.max_samples))

    violations: list[LawViolation] = []
    checked = 0
    for x, y in itertools.product(pool, repeat=2):
        checked += 1
        for law, actual in _equations(q, x, y):
            if eq(actual, y):
                continue
            violations.append(
                LawViolation(law=law, x=repr(x), y=repr(y), expected=repr(y), actual=repr(actual))
            )
            if cfg.fail_fast:
                break
        if violations and cfg.fail_fast:
            break

    report = LawReport(checked=checked, violations=violations)
    log.debug("laws.checked", samples=len(pool), pairs=checked, ok=report.ok)
    if violations:
        log.warning(
            "laws.violated",
            count=len(violations),
            laws=sorted({str(v.law) for v in violations}),
        )
    return report


def assert_lawful[A](
    q: Quasigroup[A],
    samples: Iterable[A],
    *,
    eq: Equality[A] = operator.eq,
    config: LawsConfig | None = None,
) -> LawReport:
    """Like :func:`check_quasigroup_laws`, but raise if any equation fails."""
    report = check_quasigroup_laws(q, samples, eq=eq, config=config)
    if not report.ok:
        raise LawViolationError(report)
    return report
