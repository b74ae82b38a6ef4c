# Author: Bradley R. Kinnard
# verifier diagnostics and internal defects

from dataclasses import dataclass, field

from verification.laws import Law, Property, SourceLocation


class InternalVerifierError(Exception):
    """raised on a defect in the verifier or its collaborators. aborts the run."""


class UnsupportedConstructError(InternalVerifierError):
    """raised when a law expression uses something the checker cannot handle yet."""

    def __init__(self, construct: str, detail: str = ""):
        self.construct = construct
        msg = f"unsupported construct: {construct}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


@dataclass(frozen=True)
class LawInfo:
    """how a violation of a law is reported."""
    error_name: str
    summary: str
    subject: str
    carries_counterexample: bool = True


# law -> diagnostic. must stay total over Law, checked below.
LAW_ERRORS: dict[Law, LawInfo] = {
    Law.ASSOCIATIVITY: LawInfo("AssociativityError", "The function is not associative.", "function"),
    Law.COMMUTATIVITY: LawInfo("CommutativityError", "The function is not commutative.", "function"),
    Law.REFLEXIVITY: LawInfo("ReflexivityError", "The partial order is not reflexive.", "partial order"),
    Law.ANTI_SYMMETRY: LawInfo("AntiSymmetryError", "The partial order is not anti-symmetric.", "partial order"),
    Law.TRANSITIVITY: LawInfo("TransitivityError", "The partial order is not transitive.", "partial order"),
    Law.LEAST_ELEMENT: LawInfo(
        "LeastElementError", "The least element is not the smallest.", "partial order",
        carries_counterexample=False,
    ),
    Law.UPPER_BOUND: LawInfo("UpperBoundError", "The lub is not an upper bound.", "lub"),
    Law.LEAST_UPPER_BOUND: LawInfo("LeastUpperBoundError", "The lub is not a least upper bound.", "lub"),
    Law.GREATEST_ELEMENT: LawInfo(
        "GreatestElementError", "The greatest element is not the largest.", "partial order",
        carries_counterexample=False,
    ),
    Law.LOWER_BOUND: LawInfo("LowerBoundError", "The glb is not a lower bound.", "glb"),
    Law.GREATEST_LOWER_BOUND: LawInfo("GreatestLowerBoundError", "The glb is not a greatest lower bound.", "glb"),
    Law.STRICT: LawInfo(
        "StrictError", "The function is not strict.", "function",
        carries_counterexample=False,
    ),
    Law.MONOTONE: LawInfo("MonotoneError", "The function is not monotone.", "function"),
    Law.HEIGHT_NON_NEGATIVE: LawInfo(
        "HeightNonNegativeError", "The height function is not non-negative.", "height function",
    ),
    Law.HEIGHT_STRICTLY_DECREASING: LawInfo(
        "HeightStrictlyDecreasingError", "The height function is not strictly decreasing.", "height function",
    ),
}

_missing = set(Law) - set(LAW_ERRORS)
if _missing:
    raise InternalVerifierError(f"no diagnostic registered for laws: {sorted(str(m) for m in _missing)}")


def _header(loc: SourceLocation) -> str:
    return f"-- VERIFIER ERROR -------------------------------------------------- {loc.source}"


@dataclass(frozen=True)
class VerifierError:
    """
    a law violation, tagged by the law it violates.

    counterexample is None for laws whose diagnostic only carries the location.
    """
    law: Law
    loc: SourceLocation
    counterexample: dict[str, str] | None = None

    @property
    def kind(self) -> str:
        return LAW_ERRORS[self.law].error_name

    @property
    def message(self) -> str:
        info = LAW_ERRORS[self.law]
        lines = [_header(self.loc), "", f">> {info.summary}", ""]
        if self.counterexample is not None:
            rendered = ", ".join(f"{k} -> {v}" for k, v in self.counterexample.items())
            lines += [f"Counter-example: {rendered}", ""]
        lines += [f"The {info.subject} was defined here:", self.loc.format()]
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "law": self.law.value,
            "location": self.loc.format(),
            "counterexample": self.counterexample,
        }


@dataclass(frozen=True)
class UnknownVerdict:
    """a property the verifier could neither prove nor refute."""
    law: Law
    loc: SourceLocation
    reasons: tuple[str, ...] = field(default_factory=tuple)

    @property
    def kind(self) -> str:
        return "UnknownVerdict"

    @property
    def message(self) -> str:
        lines = [
            _header(self.loc),
            "",
            f">> Unable to decide whether the {self.law.value} law holds.",
            "",
        ]
        lines += [f"Reason: {r}" for r in self.reasons]
        lines += ["", "The property was defined here:", self.loc.format()]
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "law": self.law.value,
            "location": self.loc.format(),
            "reasons": list(self.reasons),
        }


Diagnostic = VerifierError | UnknownVerdict


def to_verifier_error(prop: Property, counterexample: dict[str, str]) -> VerifierError:
    """return the law-tagged error for prop under the rendered counterexample."""
    info = LAW_ERRORS[prop.law]
    if not info.carries_counterexample:
        return VerifierError(prop.law, prop.loc)
    return VerifierError(prop.law, prop.loc, dict(counterexample))
