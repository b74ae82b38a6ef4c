# Author: Bradley R. Kinnard
# per-property results, run-level aggregation and the verbose report

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from verification.errors import Diagnostic
from verification.laws import Program, Property


class ResultStatus(Enum):
    """terminal verdict of one property."""
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN = "unknown"


_MARKERS = {
    ResultStatus.SUCCESS: "✓",
    ResultStatus.FAILURE: "✗",
    ResultStatus.UNKNOWN: "?",
}


@dataclass
class PropertyResult:
    """result of verifying a single property."""
    property: Property
    status: ResultStatus
    paths: int
    queries: int
    elapsed_ns: int
    error: Diagnostic | None = None

    @property
    def passed(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "law": self.property.law.value,
            "location": self.property.loc.format(),
            "status": self.status.value,
            "paths": self.paths,
            "queries": self.queries,
            "elapsed_ns": self.elapsed_ns,
            "error": self.error.to_dict() if self.error else None,
        }


def is_success(results: list[PropertyResult]) -> bool:
    return all(r.passed for r in results)


def number_of_success(results: list[PropertyResult]) -> int:
    return sum(1 for r in results if r.passed)


def total_paths(results: list[PropertyResult]) -> int:
    return sum(r.paths for r in results)


def total_queries(results: list[PropertyResult]) -> int:
    return sum(r.queries for r in results)


def total_elapsed(results: list[PropertyResult]) -> int:
    """total elapsed nanoseconds."""
    return sum(r.elapsed_ns for r in results)


def format_verbose_report(results: list[PropertyResult]) -> str:
    """one line per property followed by the summary line."""
    lines = ["-- VERIFIER RESULTS --------------------------------------------------"]
    for r in results:
        lines.append(
            f"{_MARKERS[r.status]} {r.property.law} ({r.property.loc.format()}) ({r.queries} queries)"
        )
    seconds = total_elapsed(results) / 1_000_000_000
    lines.append("")
    lines.append(
        f"Result: {number_of_success(results)} / {len(results)} properties proven in {seconds:3.1f} second. "
        f"({total_paths(results)} paths, {total_queries(results)} queries)"
    )
    lines.append("")
    return "\n".join(lines)


@dataclass
class VerificationReport:
    """
    outcome of a verification run.

    program is the verified program (with verifier time attached) when every
    property was proven, None otherwise. errors holds one diagnostic per
    property that was not proven.
    """
    program: Program | None
    results: list[PropertyResult] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.program is not None and not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "all_passed": self.all_passed,
            "total": len(self.results),
            "proven": number_of_success(self.results),
            "paths": total_paths(self.results),
            "queries": total_queries(self.results),
            "elapsed_ns": total_elapsed(self.results),
            "results": [r.to_dict() for r in self.results],
            "errors": [e.to_dict() for e in self.errors],
        }
