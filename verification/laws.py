# Author: Bradley R. Kinnard
# laws, properties and the program table handed over by upstream analysis

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from verification.types import EnumType, Type


class Law(Enum):
    """closed set of laws the verifier knows how to check."""
    ASSOCIATIVITY = "Associativity"
    COMMUTATIVITY = "Commutativity"
    REFLEXIVITY = "Reflexivity"
    ANTI_SYMMETRY = "AntiSymmetry"
    TRANSITIVITY = "Transitivity"
    LEAST_ELEMENT = "LeastElement"
    UPPER_BOUND = "UpperBound"
    LEAST_UPPER_BOUND = "LeastUpperBound"
    GREATEST_ELEMENT = "GreatestElement"
    LOWER_BOUND = "LowerBound"
    GREATEST_LOWER_BOUND = "GreatestLowerBound"
    STRICT = "Strict"
    MONOTONE = "Monotone"
    HEIGHT_NON_NEGATIVE = "HeightNonNegative"
    HEIGHT_STRICTLY_DECREASING = "HeightStrictlyDecreasing"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """position of a definition in a source file."""
    source: str
    line: int = 0
    column: int = 0

    def format(self) -> str:
        return f"{self.source}:{self.line}:{self.column}"

    def __str__(self) -> str:
        return self.format()


SourceLocation.UNKNOWN = SourceLocation("<unknown>")


@dataclass(frozen=True)
class FormalParam:
    """a typed binder of a quantifier."""
    name: str
    tpe: Type


@dataclass(frozen=True)
class Universal:
    """for all params, body."""
    params: tuple[FormalParam, ...]
    body: Any
    loc: SourceLocation = SourceLocation.UNKNOWN


@dataclass(frozen=True)
class Existential:
    """exists params, body. witnesses are left to the solver."""
    params: tuple[FormalParam, ...]
    body: Any
    loc: SourceLocation = SourceLocation.UNKNOWN


@dataclass(frozen=True)
class QuantifiedVar:
    """a universally quantified variable to be enumerated."""
    name: str
    index: int
    tpe: Type
    loc: SourceLocation = SourceLocation.UNKNOWN


@dataclass(frozen=True)
class Property:
    """a law instance produced upstream: the law, its quantified expression and where it came from."""
    law: Law
    exp: Any
    loc: SourceLocation = SourceLocation.UNKNOWN


@dataclass(frozen=True)
class Program:
    """
    the compilation unit as seen by the verifier.

    enums is the definition table used to resolve TypeRef payloads.
    timings records elapsed nanoseconds per compiler phase.
    """
    properties: tuple[Property, ...] = ()
    enums: dict[str, EnumType] = field(default_factory=dict)
    timings: dict[str, int] = field(default_factory=dict)
