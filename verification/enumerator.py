# Author: Bradley R. Kinnard
# expands quantified variables into finite sets of representative environments

import itertools
from typing import Any

from verification.errors import InternalVerifierError, UnsupportedConstructError
from verification.gensym import FreshNameGenerator
from verification.laws import Existential, QuantifiedVar, SourceLocation, Universal
from verification.types import ATOMIC_TYPES, EnumType, Prim, TupleType, Type, TypeRef
from verification.values import FALSE, TRUE, UNIT, Atomic, SymbolicEnvironment, SymbolicValue, Tag
from utils.helpers import get_logger

logger = get_logger(__name__)


def universally_quantified_variables(exp: Any) -> list[QuantifiedVar]:
    """return the variables bound by the outermost universal quantifier of exp."""
    if isinstance(exp, Universal):
        return [QuantifiedVar(p.name, -1, p.tpe, SourceLocation.UNKNOWN) for p in exp.params]
    return []


def peel_quantifiers(exp: Any) -> Any:
    """strip every leading universal and existential quantifier from exp."""
    while isinstance(exp, (Universal, Existential)):
        exp = exp.body
    return exp


class _TypeExpander:
    """turns a type into its list of representative symbolic values."""

    def __init__(self, gensym: FreshNameGenerator, enums: dict[str, EnumType]):
        self._gensym = gensym
        self._enums = enums
        self._resolving: list[str] = []

    def visit(self, tpe: Type) -> list[SymbolicValue]:
        if tpe is Prim.UNIT:
            return [UNIT]
        if tpe is Prim.BOOL:
            return [TRUE, FALSE]
        if tpe in ATOMIC_TYPES:
            return [Atomic(self._gensym.fresh(), tpe)]
        if isinstance(tpe, EnumType):
            return [
                Tag(tag, payload)
                for tag, payload_type in tpe.cases
                for payload in self.visit(payload_type)
            ]
        if isinstance(tpe, TypeRef):
            return self._visit_ref(tpe)
        if isinstance(tpe, TupleType):
            raise UnsupportedConstructError("tuple-typed quantifier", str(tpe))
        raise InternalVerifierError(f"unexpected type in quantifier: {tpe!r}")

    def _visit_ref(self, ref: TypeRef) -> list[SymbolicValue]:
        if ref.name not in self._enums:
            raise UnsupportedConstructError("unknown enum reference", ref.name)
        if ref.name in self._resolving:
            # a recursive enum has no finite set of representatives
            raise UnsupportedConstructError("recursive enum quantifier", ref.name)
        self._resolving.append(ref.name)
        try:
            return self.visit(self._enums[ref.name])
        finally:
            self._resolving.pop()


def enumerate_environments(
    variables: list[QuantifiedVar],
    gensym: FreshNameGenerator,
    enums: dict[str, EnumType] | None = None,
) -> list[SymbolicEnvironment]:
    """
    enumerate every environment the quantified variables can take.

    finite types are split exhaustively; primitive domains get one fresh
    placeholder per occurrence. zero variables yield one empty environment.
    """
    if not variables:
        return [{}]

    names = [v.name for v in variables]
    if len(set(names)) != len(names):
        raise InternalVerifierError(f"duplicate quantified variable names: {names}")

    expander = _TypeExpander(gensym, enums or {})
    domains = [expander.visit(v.tpe) for v in variables]

    envs = [dict(zip(names, combo)) for combo in itertools.product(*domains)]
    logger.debug(f"enumerated {len(envs)} environments over {names}")
    return envs
