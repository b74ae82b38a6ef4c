# Author: Bradley R. Kinnard
# semantic types of quantified variables and constraint operands

from dataclasses import dataclass, field
from enum import Enum


class Prim(Enum):
    """primitive types known to the verifier."""
    UNIT = "Unit"
    BOOL = "Bool"
    CHAR = "Char"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    STR = "Str"

    def __str__(self) -> str:
        return self.value


# bit widths used when lowering integers to bit-vectors
INT_WIDTHS: dict[Prim, int] = {
    Prim.INT8: 8,
    Prim.INT16: 16,
    Prim.INT32: 32,
    Prim.INT64: 64,
}

# primitive domains too large to enumerate, left to the solver
ATOMIC_TYPES = frozenset({
    Prim.CHAR,
    Prim.FLOAT32,
    Prim.FLOAT64,
    Prim.INT8,
    Prim.INT16,
    Prim.INT32,
    Prim.INT64,
    Prim.STR,
})


@dataclass(frozen=True)
class EnumType:
    """
    a sum type.

    cases maps each constructor tag to its payload type, in declaration order.
    a nullary constructor carries a Unit payload.
    """
    name: str
    cases: tuple[tuple[str, "Type"], ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, name: str, **cases: "Type") -> "EnumType":
        return cls(name, tuple(cases.items()))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TupleType:
    """a product type."""
    elements: tuple["Type", ...]

    def __str__(self) -> str:
        return "(" + ", ".join(str(e) for e in self.elements) + ")"


@dataclass(frozen=True)
class TypeRef:
    """reference to an enum in the program's definition table."""
    name: str

    def __str__(self) -> str:
        return self.name


Type = Prim | EnumType | TupleType | TypeRef


def bit_width(tpe: "Type | None") -> int | None:
    """return the bit-vector width for an integer type, None otherwise."""
    if isinstance(tpe, Prim):
        return INT_WIDTHS.get(tpe)
    return None
