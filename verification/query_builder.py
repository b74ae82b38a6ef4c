# Author: Bradley R. Kinnard
# lowers path conditions to z3 formulas over booleans and signed bit-vectors

import operator
from typing import Callable

import z3

from verification.errors import InternalVerifierError, UnsupportedConstructError
from verification.smt_expr import (
    BinaryExpr,
    BoolLit,
    ConstraintExpr,
    IntLit,
    Op,
    UnaryExpr,
    Var,
)
from verification.types import Prim, Type, bit_width


_CONNECTIVES: dict[Op, Callable[[z3.BoolRef, z3.BoolRef], z3.BoolRef]] = {
    Op.AND: z3.And,
    Op.OR: z3.Or,
    Op.IMPLIES: z3.Implies,
    Op.IFF: operator.eq,
}

# z3's python operators on bit-vectors are the signed variants
_BV_COMPARISONS: dict[Op, Callable[[z3.BitVecRef, z3.BitVecRef], z3.BoolRef]] = {
    Op.LT: operator.lt,
    Op.LE: operator.le,
    Op.GT: operator.gt,
    Op.GE: operator.ge,
}

_BV_ARITHMETIC: dict[Op, Callable[[z3.BitVecRef, z3.BitVecRef], z3.BitVecRef]] = {
    Op.ADD: operator.add,
    Op.SUB: operator.sub,
    Op.MUL: operator.mul,
    Op.DIV: operator.truediv,  # bvsdiv
    Op.MOD: operator.mod,      # bvsmod
    Op.BAND: operator.and_,
    Op.BOR: operator.or_,
    Op.BXOR: operator.xor,
    Op.SHL: operator.lshift,
    Op.SHR: z3.LShR,
}


class QueryBuilder:
    """
    translates constraint expressions into z3 terms inside one solver context.

    a builder is single-use: it remembers the sort of every constant it
    declares so the same name always denotes the same constant in a query.
    """

    def __init__(self, ctx: z3.Context):
        self._ctx = ctx
        self._declared: dict[str, z3.SortRef] = {}

    def visit_path_condition(self, pc: tuple[ConstraintExpr, ...] | list[ConstraintExpr]) -> z3.BoolRef:
        """conjoin every constraint of pc, starting from true."""
        formula = z3.BoolVal(True, self._ctx)
        for e in pc:
            formula = z3.And(formula, self.visit_bool_expr(e))
        return formula

    def visit_bool_expr(self, exp: ConstraintExpr) -> z3.BoolRef:
        if isinstance(exp, Var):
            if exp.tpe is not Prim.BOOL:
                raise InternalVerifierError(f"unexpected non-bool variable in boolean position: '{exp.name}: {exp.tpe}'")
            return self._constant(exp.name, z3.BoolSort(self._ctx))
        if isinstance(exp, BoolLit):
            return z3.BoolVal(exp.value, self._ctx)
        if isinstance(exp, UnaryExpr) and exp.op is Op.NOT:
            return z3.Not(self.visit_bool_expr(exp.operand))
        if isinstance(exp, BinaryExpr):
            if exp.op in _CONNECTIVES:
                return _CONNECTIVES[exp.op](self.visit_bool_expr(exp.left), self.visit_bool_expr(exp.right))
            if exp.op in _BV_COMPARISONS:
                return _BV_COMPARISONS[exp.op](*self._bv_operands(exp))
            if exp.op in (Op.EQ, Op.NE):
                return self._visit_equality(exp)
        raise InternalVerifierError(f"unexpected SMT expression in boolean position: '{exp}'")

    def _visit_equality(self, exp: BinaryExpr) -> z3.BoolRef:
        # the left operand decides between logical and bit-vector equality
        tpe = exp.left.tpe
        if tpe is None:
            raise InternalVerifierError(f"undetermined operand type in '{exp}'")
        if tpe is Prim.BOOL:
            left, right = self.visit_bool_expr(exp.left), self.visit_bool_expr(exp.right)
            if exp.op is Op.EQ:
                return left == right
            return z3.Xor(left, right)
        left, right = self._bv_operands(exp)
        if exp.op is Op.EQ:
            return left == right
        return z3.Not(left == right)

    def visit_bitvec_expr(self, exp: ConstraintExpr) -> z3.BitVecRef:
        if isinstance(exp, IntLit):
            return z3.BitVecVal(exp.value, self._width(exp.tpe, exp), self._ctx)
        if isinstance(exp, Var):
            return self._constant(exp.name, z3.BitVecSort(self._width(exp.tpe, exp), self._ctx))
        if isinstance(exp, UnaryExpr) and exp.op is Op.NEG:
            return -self.visit_bitvec_expr(exp.operand)
        if isinstance(exp, BinaryExpr):
            if exp.op is Op.POW:
                raise UnsupportedConstructError("exponentiation in path condition", str(exp))
            if exp.op in _BV_ARITHMETIC:
                return _BV_ARITHMETIC[exp.op](*self._bv_operands(exp))
        raise InternalVerifierError(f"unexpected SMT expression: '{exp}'")

    def _bv_operands(self, exp: BinaryExpr) -> tuple[z3.BitVecRef, z3.BitVecRef]:
        left = self.visit_bitvec_expr(exp.left)
        right = self.visit_bitvec_expr(exp.right)
        if left.size() != right.size():
            raise InternalVerifierError(
                f"bit-width mismatch in '{exp}': {left.size()} vs {right.size()}"
            )
        return left, right

    def _width(self, tpe: Type | None, exp: ConstraintExpr) -> int:
        width = bit_width(tpe)
        if width is None:
            raise InternalVerifierError(f"unexpected non-int type: '{tpe}' in '{exp}'")
        return width

    def _constant(self, name: str, sort: z3.SortRef) -> z3.ExprRef:
        known = self._declared.setdefault(name, sort)
        if known != sort:
            raise InternalVerifierError(f"constant '{name}' used as both {known} and {sort}")
        return z3.Const(name, sort)
