"""Law checking — opt-in verification of the quasigroup law for test suites.

May import from domain and config.logging. Nothing in the domain layer calls it.
"""

from quasigroup.laws.check import assert_lawful, check_quasigroup_laws
from quasigroup.laws.config import LawsConfig
from quasigroup.laws.result import Law, LawReport, LawViolation, LawViolationError

__all__ = [
    "Law",
    "LawReport",
    "LawsConfig",
    "LawViolation",
    "LawViolationError",
    "assert_lawful",
    "check_quasigroup_laws",
]
