# Author: Bradley R. Kinnard
# verification driver - proves each law over all environments or finds a counterexample

import time
from dataclasses import dataclass, replace
from typing import Any, Iterator

from verification.counterexample import render_environment
from verification.enumerator import (
    enumerate_environments,
    peel_quantifiers,
    universally_quantified_variables,
)
from verification.errors import (
    InternalVerifierError,
    UnknownVerdict,
    VerifierError,
    to_verifier_error,
)
from verification.evaluator import SymbolicEvaluator
from verification.gensym import FreshNameGenerator
from verification.laws import Program, Property
from verification.report import (
    PropertyResult,
    ResultStatus,
    VerificationReport,
    format_verbose_report,
    is_success,
    number_of_success,
    total_elapsed,
)
from verification.smt_checker import SatStatus, check_path_condition
from verification.smt_expr import PathCondition
from verification.values import BoolValue, SymbolicEnvironment, SymbolicValue
from utils.helpers import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class VerifierOptions:
    """settings consumed by the verifier."""
    enabled: bool = False
    verbose: bool = False
    query_timeout_ms: int | None = None
    property_timeout_s: float | None = None

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "VerifierOptions":
        """build options from a validated verifier config."""
        section = config["verifier"]
        return cls(
            enabled=section["enabled"],
            verbose=section.get("verbose", False),
            query_timeout_ms=section.get("query_timeout_ms"),
            property_timeout_s=section.get("property_timeout_s"),
        )


def _holds(value: SymbolicValue) -> bool:
    if not isinstance(value, BoolValue):
        raise InternalVerifierError(f"evaluator returned a non-boolean property result: {value!r}")
    return value.value


def _branches(
    evaluator: SymbolicEvaluator,
    body: Any,
    envs: list[SymbolicEnvironment],
    program: Program,
) -> Iterator[tuple[SymbolicEnvironment, PathCondition, SymbolicValue]]:
    # environments in enumeration order, branches in the order the evaluator yields them
    for env in envs:
        for pc, value in evaluator.evaluate(body, env, program):
            yield env, tuple(pc), value


def verify_property(
    prop: Property,
    program: Program,
    evaluator: SymbolicEvaluator,
    gensym: FreshNameGenerator,
    options: VerifierOptions | None = None,
) -> PropertyResult:
    """
    attempt to verify a single property.

    every branch of every environment is classified:
    - no guard, true: proven on this branch
    - no guard, false: counterexample straight from the environment
    - guarded, true: holds whether or not the guard is satisfiable
    - guarded, false: holds only if the guard is unsatisfiable, ask the solver
    only the first counterexample is kept but all branches are drained.
    """
    options = options or VerifierOptions()
    start = time.perf_counter_ns()
    deadline = None
    if options.property_timeout_s is not None:
        deadline = start + int(options.property_timeout_s * 1_000_000_000)

    envs = enumerate_environments(universally_quantified_variables(prop.exp), gensym, program.enums)
    body = peel_quantifiers(prop.exp)

    paths = 0
    queries = 0
    violation: VerifierError | None = None
    undecided: list[str] = []

    for env, pc, value in _branches(evaluator, body, envs, program):
        # only stop when there is a branch left undone
        if paths and deadline is not None and time.perf_counter_ns() > deadline:
            undecided.append(f"property timeout of {options.property_timeout_s}s exceeded after {paths} paths")
            logger.warning(f"{prop.law} ({prop.loc.format()}): timed out after {paths} paths")
            break

        paths += 1

        if _holds(value):
            logger.debug(f"{prop.law}: branch proven ({len(pc)} guards)")
        elif not pc:
            logger.debug(f"{prop.law}: branch disproven without guards")
            if violation is None:
                violation = to_verifier_error(prop, render_environment(env))
        else:
            queries += 1
            result = check_path_condition(pc, options.query_timeout_ms)
            if result.status is SatStatus.SAT:
                if violation is None:
                    violation = to_verifier_error(prop, render_environment(env, result.model))
            elif result.status is SatStatus.UNKNOWN:
                undecided.append(result.message)
            else:
                logger.debug(f"{prop.law}: infeasible failing branch discarded")

    elapsed = time.perf_counter_ns() - start

    if violation is not None:
        status, error = ResultStatus.FAILURE, violation
    elif undecided:
        status, error = ResultStatus.UNKNOWN, UnknownVerdict(prop.law, prop.loc, tuple(undecided))
    else:
        status, error = ResultStatus.SUCCESS, None

    logger.info(
        f"{prop.law} ({prop.loc.format()}): {status.value} "
        f"({len(envs)} environments, {paths} paths, {queries} queries)"
    )
    return PropertyResult(prop, status, paths, queries, elapsed, error)


def verify(
    program: Program,
    evaluator: SymbolicEvaluator,
    options: VerifierOptions,
    gensym: FreshNameGenerator | None = None,
) -> VerificationReport:
    """
    verify every property of program.

    returns the program with the verifier time attached when all properties
    are proven, otherwise the diagnostics of every property that was not.
    """
    if not options.enabled:
        return VerificationReport(program=program)

    gensym = gensym or FreshNameGenerator()
    results = [verify_property(p, program, evaluator, gensym, options) for p in program.properties]

    if options.verbose:
        print(format_verbose_report(results))

    if is_success(results):
        timings = {**program.timings, "verifier": total_elapsed(results)}
        logger.info(f"all {len(results)} properties proven")
        return VerificationReport(program=replace(program, timings=timings), results=results)

    errors = [r.error for r in results if r.error is not None]
    logger.error(
        f"verification failed: {number_of_success(results)}/{len(results)} properties proven"
    )
    return VerificationReport(program=None, results=results, errors=errors)
