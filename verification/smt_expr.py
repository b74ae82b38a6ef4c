# Author: Bradley R. Kinnard
# constraint expressions accumulated along an execution branch

from dataclasses import dataclass
from enum import Enum

from verification.types import Prim, Type


class Op(Enum):
    """operators of the constraint language."""
    # connectives
    NOT = "not"
    AND = "and"
    OR = "or"
    IMPLIES = "=>"
    IFF = "<=>"
    # comparisons
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NE = "!="
    # arithmetic and bitwise
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "**"
    NEG = "neg"
    BAND = "&"
    BOR = "|"
    BXOR = "^"
    SHL = "<<"
    SHR = ">>"


CONNECTIVES = frozenset({Op.NOT, Op.AND, Op.OR, Op.IMPLIES, Op.IFF})
COMPARISONS = frozenset({Op.LT, Op.LE, Op.GT, Op.GE, Op.EQ, Op.NE})


@dataclass(frozen=True)
class Var:
    """free variable bound to an atomic placeholder name."""
    name: str
    tpe: Type | None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IntLit:
    value: int
    tpe: Prim = Prim.INT32

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolLit:
    value: bool

    @property
    def tpe(self) -> Type:
        return Prim.BOOL

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class UnaryExpr:
    op: Op
    operand: "ConstraintExpr"

    @property
    def tpe(self) -> Type | None:
        if self.op is Op.NOT:
            return Prim.BOOL
        return self.operand.tpe

    def __str__(self) -> str:
        return f"({self.op.value} {self.operand})"


@dataclass(frozen=True)
class BinaryExpr:
    op: Op
    left: "ConstraintExpr"
    right: "ConstraintExpr"

    @property
    def tpe(self) -> Type | None:
        # arithmetic takes the type of its left operand
        if self.op in CONNECTIVES or self.op in COMPARISONS:
            return Prim.BOOL
        return self.left.tpe

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


ConstraintExpr = Var | IntLit | BoolLit | UnaryExpr | BinaryExpr

# conjunction of branch guards, in the order they were collected
PathCondition = tuple[ConstraintExpr, ...]


def not_(e: ConstraintExpr) -> UnaryExpr:
    return UnaryExpr(Op.NOT, e)


def binary(op: Op, left: ConstraintExpr, right: ConstraintExpr) -> BinaryExpr:
    return BinaryExpr(op, left, right)
