# Author: Bradley R. Kinnard
# law verification - enumeration, symbolic branches and smt discharge

from verification.laws import (
    Law,
    Property,
    Program,
    SourceLocation,
    Universal,
    Existential,
    FormalParam,
    QuantifiedVar,
)
from verification.enumerator import (
    enumerate_environments,
    universally_quantified_variables,
    peel_quantifiers,
)
from verification.gensym import FreshNameGenerator
from verification.errors import (
    VerifierError,
    UnknownVerdict,
    InternalVerifierError,
    UnsupportedConstructError,
    to_verifier_error,
)
from verification.smt_checker import (
    SolverContext,
    SMTResult,
    SatStatus,
    check_path_condition,
)
from verification.report import (
    PropertyResult,
    ResultStatus,
    VerificationReport,
    format_verbose_report,
)
from verification.verifier import (
    VerifierOptions,
    verify,
    verify_property,
)

__all__ = [
    "Law",
    "Property",
    "Program",
    "SourceLocation",
    "Universal",
    "Existential",
    "FormalParam",
    "QuantifiedVar",
    "enumerate_environments",
    "universally_quantified_variables",
    "peel_quantifiers",
    "FreshNameGenerator",
    "VerifierError",
    "UnknownVerdict",
    "InternalVerifierError",
    "UnsupportedConstructError",
    "to_verifier_error",
    "SolverContext",
    "SMTResult",
    "SatStatus",
    "check_path_condition",
    "PropertyResult",
    "ResultStatus",
    "VerificationReport",
    "format_verbose_report",
    "VerifierOptions",
    "verify",
    "verify_property",
]
