# Author: Bradley R. Kinnard
# renders symbolic environments, optionally resolved by a solver model, as counterexamples

from typing import Protocol

from verification.errors import InternalVerifierError
from verification.types import Prim
from verification.values import (
    Atomic,
    BoolValue,
    Closure,
    EnvironmentSnapshot,
    Literal,
    MatchError,
    SwitchError,
    SymbolicEnvironment,
    SymbolicValue,
    Tag,
    TupleValue,
    UnitValue,
    UserError,
)

UNRESOLVED = "???"


class Model(Protocol):
    """anything that can interpret a solver constant by name."""

    def lookup(self, name: str) -> str | None:
        ...


def render_value(value: SymbolicValue, model: Model | None = None) -> str:
    """render a single symbolic value."""
    if isinstance(value, Atomic):
        if model is None:
            return f"{UNRESOLVED}({value.name})"
        resolved = model.lookup(value.name)
        return UNRESOLVED if resolved is None else resolved
    if isinstance(value, UnitValue):
        return "#U"
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, Literal):
        if value.tpe is Prim.BOOL:
            return "true" if value.value else "false"
        return str(value.value)
    if isinstance(value, Tag):
        if isinstance(value.payload, UnitValue):
            return value.tag
        return f"{value.tag}({render_value(value.payload, model)})"
    if isinstance(value, TupleValue):
        return "(" + ", ".join(render_value(e, model) for e in value.elements) + ")"
    if isinstance(value, Closure):
        return "<<closure>>"
    if isinstance(value, EnvironmentSnapshot):
        return "<<environment>>"
    if isinstance(value, UserError):
        return f"UserError({value.loc.format()})"
    if isinstance(value, MatchError):
        return f"MatchError({value.loc.format()})"
    if isinstance(value, SwitchError):
        return f"SwitchError({value.loc.format()})"
    raise InternalVerifierError(f"unexpected symbolic value: {value!r}")


def render_environment(env: SymbolicEnvironment, model: Model | None = None) -> dict[str, str]:
    """render every binding of env, keeping the binding order."""
    return {name: render_value(value, model) for name, value in env.items()}
