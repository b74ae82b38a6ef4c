# Author: Bradley R. Kinnard
# z3-based satisfiability checks of path conditions
# every query runs in its own solver context, released on every exit path

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import z3

from verification.errors import InternalVerifierError
from verification.query_builder import QueryBuilder
from verification.smt_expr import ConstraintExpr
from utils.helpers import get_logger

logger = get_logger(__name__)


class SatStatus(Enum):
    """verdict of one satisfiability check."""
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


@dataclass
class SolverModel:
    """
    snapshot of a z3 model taken before its context is released.

    bit-vectors are read back as signed integers, booleans as true/false.
    """
    constants: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_z3(cls, model: z3.ModelRef) -> "SolverModel":
        constants = {}
        for decl in model.decls():
            constants[decl.name()] = _interpret(model[decl])
        return cls(constants)

    def lookup(self, name: str) -> str | None:
        return self.constants.get(name)


def _interpret(value: Any) -> str:
    if isinstance(value, z3.BitVecNumRef):
        return str(value.as_signed_long())
    if z3.is_true(value):
        return "true"
    if z3.is_false(value):
        return "false"
    return str(value)


@dataclass
class SMTResult:
    """result of an smt check."""
    status: SatStatus
    model: SolverModel | None
    message: str

    @property
    def satisfiable(self) -> bool:
        return self.status is SatStatus.SAT

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "model": self.model.constants if self.model else None,
            "message": self.message,
        }


class SolverContext:
    """
    single-use solving context.

    leaving the scope drops the solver and then the context, so z3 frees them
    once no formula built in the context is still referenced.

    usage:
        with SolverContext(timeout_ms=1000) as sc:
            formula = QueryBuilder(sc.ctx).visit_path_condition(pc)
            result = sc.check_sat(formula)
    """

    def __init__(self, timeout_ms: int | None = None):
        self._timeout_ms = timeout_ms
        self._ctx: z3.Context | None = None
        self._solver: z3.Solver | None = None

    def __enter__(self) -> "SolverContext":
        self._ctx = z3.Context()
        self._solver = z3.Solver(ctx=self._ctx)
        if self._timeout_ms is not None:
            self._solver.set("timeout", self._timeout_ms)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # solver first, it holds a reference into the context
        del self._solver
        del self._ctx
        self._solver = None
        self._ctx = None
        return False

    @property
    def ctx(self) -> z3.Context:
        if self._ctx is None:
            raise InternalVerifierError("solver context used outside of its scope")
        return self._ctx

    def check_sat(self, formula: z3.BoolRef) -> SMTResult:
        if self._solver is None:
            raise InternalVerifierError("solver context used outside of its scope")

        self._solver.add(formula)
        result = self._solver.check()

        if result == z3.unsat:
            return SMTResult(SatStatus.UNSAT, None, "unsat: path condition is infeasible")
        if result == z3.sat:
            model = SolverModel.from_z3(self._solver.model())
            return SMTResult(SatStatus.SAT, model, f"sat: counterexample found {model.constants}")

        reason = self._solver.reason_unknown()
        logger.warning(f"z3 returned unknown: {reason}")
        return SMTResult(SatStatus.UNKNOWN, None, f"z3 returned unknown: {reason}")


def check_path_condition(pc: tuple[ConstraintExpr, ...] | list[ConstraintExpr], timeout_ms: int | None = None) -> SMTResult:
    """decide whether pc is satisfiable, in a fresh solver context."""
    with SolverContext(timeout_ms) as sc:
        formula = QueryBuilder(sc.ctx).visit_path_condition(pc)
        logger.debug(f"checking path condition: {formula}")
        return sc.check_sat(formula)
