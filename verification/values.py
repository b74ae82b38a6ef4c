# Author: Bradley R. Kinnard
# symbolic values produced by enumeration and by the symbolic evaluator

from dataclasses import dataclass
from typing import Any

from verification.laws import SourceLocation
from verification.types import Prim, Type


@dataclass(frozen=True)
class UnitValue:
    pass


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class Atomic:
    """opaque free variable of primitive type, only ever resolved by the solver."""
    name: str
    tpe: Type | None = None


@dataclass(frozen=True)
class Literal:
    """concrete char, float, int or string value."""
    value: Any
    tpe: Prim


@dataclass(frozen=True)
class Tag:
    """sum-type constructor applied to a payload."""
    tag: str
    payload: "SymbolicValue"


@dataclass(frozen=True)
class TupleValue:
    elements: tuple["SymbolicValue", ...]


@dataclass(frozen=True, eq=False)
class Closure:
    # never introspected
    payload: Any = None


@dataclass(frozen=True, eq=False)
class EnvironmentSnapshot:
    payload: Any = None


@dataclass(frozen=True)
class UserError:
    loc: SourceLocation


@dataclass(frozen=True)
class MatchError:
    loc: SourceLocation


@dataclass(frozen=True)
class SwitchError:
    loc: SourceLocation


SymbolicValue = (
    UnitValue | BoolValue | Atomic | Literal | Tag | TupleValue
    | Closure | EnvironmentSnapshot | UserError | MatchError | SwitchError
)

# an environment binds each quantified variable name to one value
SymbolicEnvironment = dict[str, SymbolicValue]

UNIT = UnitValue()
TRUE = BoolValue(True)
FALSE = BoolValue(False)
