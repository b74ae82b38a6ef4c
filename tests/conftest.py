# Author: Bradley R. Kinnard
# pytest configuration and fixtures

"""
Test Configuration

Hypothesis Settings:
- Reproducibility: run with --hypothesis-seed=<seed> to reproduce
- Database: .hypothesis/ stores examples for shrinking

To reproduce a failing test:
  pytest tests/test_enumerator.py --hypothesis-seed=12345

To see Hypothesis statistics:
  pytest tests/ --hypothesis-show-statistics
"""

import os
from typing import Any, Callable, Iterable

import pytest
from hypothesis import settings, Phase

from verification.gensym import FreshNameGenerator
from verification.laws import Program
from verification.values import SymbolicEnvironment

# configure hypothesis defaults
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,  # disable deadline in CI (slower machines)
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    print_blob=True,  # print blob for reproduction
)

settings.register_profile(
    "dev",
    max_examples=20,
    deadline=2000,  # 2s deadline for dev
)

settings.register_profile(
    "extensive",
    max_examples=500,
    deadline=None,
)

# load profile from environment or default to dev
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


class ScriptedEvaluator:
    """
    stand-in for the symbolic evaluator.

    branches_for maps an environment to the branches to yield for it.
    every call is recorded so tests can inspect what the verifier asked for.
    """

    def __init__(self, branches_for: Callable[[SymbolicEnvironment], Iterable]):
        self._branches_for = branches_for
        self.calls: list[tuple[Any, SymbolicEnvironment]] = []

    def evaluate(self, expression: Any, environment: SymbolicEnvironment, program: Program):
        self.calls.append((expression, dict(environment)))
        yield from self._branches_for(environment)


@pytest.fixture
def gensym():
    """fresh name generator starting from zero."""
    return FreshNameGenerator()


@pytest.fixture
def make_evaluator():
    """factory for scripted evaluators."""
    return ScriptedEvaluator


def pytest_configure(config):
    """add custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
