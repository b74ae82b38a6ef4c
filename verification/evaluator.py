# Author: Bradley R. Kinnard
# contract of the symbolic evaluator the verifier drives

from typing import Any, Iterable, Protocol

from verification.laws import Program
from verification.smt_expr import PathCondition
from verification.values import SymbolicEnvironment, SymbolicValue

# one execution branch: the guards collected on the way, and the value reached
Branch = tuple[PathCondition, SymbolicValue]


class SymbolicEvaluator(Protocol):
    """
    explores an expression under a symbolic environment.

    implementations must yield every reachable branch, report boolean
    results as TRUE / FALSE, and use an empty path condition for branches
    that hold unconditionally.
    """

    def evaluate(self, expression: Any, environment: SymbolicEnvironment, program: Program) -> Iterable[Branch]:
        ...
