# Author: Bradley R. Kinnard
# tests for quantifier enumeration

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from verification.enumerator import (
    enumerate_environments,
    peel_quantifiers,
    universally_quantified_variables,
)
from verification.errors import InternalVerifierError, UnsupportedConstructError
from verification.gensym import FreshNameGenerator
from verification.laws import Existential, FormalParam, QuantifiedVar, Universal
from verification.types import EnumType, Prim, TupleType, TypeRef
from verification.values import FALSE, TRUE, UNIT, Atomic, Tag


def qvars(*pairs):
    return [QuantifiedVar(name, -1, tpe) for name, tpe in pairs]


COLOR = EnumType.of("Color", Red=Prim.UNIT, Green=Prim.UNIT, Blue=Prim.UNIT)


class TestQuantifierHelpers:
    """tests for quantifier inspection and stripping."""

    def test_non_quantified_expression_has_no_variables(self):
        assert universally_quantified_variables("x == x") == []

    def test_universal_parameters_become_variables(self):
        exp = Universal((FormalParam("x", Prim.INT32), FormalParam("b", Prim.BOOL)), "body")
        vs = universally_quantified_variables(exp)

        assert [v.name for v in vs] == ["x", "b"]
        assert [v.tpe for v in vs] == [Prim.INT32, Prim.BOOL]
        assert all(v.index == -1 for v in vs)

    def test_existential_witnesses_not_enumerated(self):
        exp = Universal(
            (FormalParam("x", Prim.BOOL),),
            Existential((FormalParam("y", Prim.INT32),), "body"),
        )
        vs = universally_quantified_variables(exp)
        assert [v.name for v in vs] == ["x"]

    def test_peel_nested_quantifiers(self):
        exp = Universal(
            (FormalParam("x", Prim.BOOL),),
            Existential((FormalParam("y", Prim.BOOL),), Universal((), "core")),
        )
        assert peel_quantifiers(exp) == "core"

    def test_peel_leaves_plain_expression(self):
        assert peel_quantifiers("core") == "core"


class TestEnumeration:
    """tests for per-type expansion and the cartesian product."""

    def test_zero_variables_single_empty_environment(self, gensym):
        assert enumerate_environments([], gensym) == [{}]

    def test_single_bool(self, gensym):
        envs = enumerate_environments(qvars(("b", Prim.BOOL)), gensym)
        assert envs == [{"b": TRUE}, {"b": FALSE}]

    def test_unit(self, gensym):
        envs = enumerate_environments(qvars(("u", Prim.UNIT)), gensym)
        assert envs == [{"u": UNIT}]

    def test_three_constructor_enum(self, gensym):
        envs = enumerate_environments(qvars(("c", COLOR)), gensym)
        assert envs == [
            {"c": Tag("Red", UNIT)},
            {"c": Tag("Green", UNIT)},
            {"c": Tag("Blue", UNIT)},
        ]

    def test_enum_payloads_expanded_recursively(self, gensym):
        opt = EnumType.of("OptBool", Nothing=Prim.UNIT, Just=Prim.BOOL)
        envs = enumerate_environments(qvars(("o", opt)), gensym)
        assert [e["o"] for e in envs] == [
            Tag("Nothing", UNIT),
            Tag("Just", TRUE),
            Tag("Just", FALSE),
        ]

    def test_enum_with_numeric_payload_gets_placeholder(self, gensym):
        boxed = EnumType.of("Boxed", Box=Prim.INT64)
        envs = enumerate_environments(qvars(("v", boxed)), gensym)
        assert envs == [{"v": Tag("Box", Atomic("sym$0", Prim.INT64))}]

    def test_primitives_become_fresh_placeholders(self, gensym):
        envs = enumerate_environments(qvars(("x", Prim.INT32), ("y", Prim.INT32)), gensym)

        assert len(envs) == 1
        x, y = envs[0]["x"], envs[0]["y"]
        assert isinstance(x, Atomic) and isinstance(y, Atomic)
        assert x.name != y.name
        assert x.tpe is Prim.INT32

    @pytest.mark.parametrize("tpe", [Prim.CHAR, Prim.FLOAT32, Prim.FLOAT64, Prim.INT8, Prim.STR])
    def test_other_primitives_are_atomic(self, gensym, tpe):
        envs = enumerate_environments(qvars(("v", tpe)), gensym)
        assert len(envs) == 1
        assert isinstance(envs[0]["v"], Atomic)

    def test_product_order_first_variable_slowest(self, gensym):
        envs = enumerate_environments(qvars(("a", Prim.BOOL), ("b", Prim.BOOL)), gensym)
        assert [(e["a"], e["b"]) for e in envs] == [
            (TRUE, TRUE),
            (TRUE, FALSE),
            (FALSE, TRUE),
            (FALSE, FALSE),
        ]

    def test_placeholder_shared_across_environments(self, gensym):
        envs = enumerate_environments(qvars(("b", Prim.BOOL), ("x", Prim.INT32)), gensym)
        assert len(envs) == 2
        assert envs[0]["x"] == envs[1]["x"]

    def test_type_reference_resolved_through_table(self, gensym):
        envs = enumerate_environments(qvars(("c", TypeRef("Color"))), gensym, {"Color": COLOR})
        assert len(envs) == 3

    def test_unknown_type_reference(self, gensym):
        with pytest.raises(UnsupportedConstructError):
            enumerate_environments(qvars(("c", TypeRef("Missing"))), gensym, {})

    def test_recursive_enum_rejected(self, gensym):
        nat = EnumType.of("Nat", Zero=Prim.UNIT, Succ=TypeRef("Nat"))
        with pytest.raises(UnsupportedConstructError):
            enumerate_environments(qvars(("n", TypeRef("Nat"))), gensym, {"Nat": nat})

    def test_tuple_quantifier_unsupported(self, gensym):
        with pytest.raises(UnsupportedConstructError) as info:
            enumerate_environments(qvars(("p", TupleType((Prim.BOOL, Prim.BOOL)))), gensym)
        assert "tuple" in str(info.value)

    def test_duplicate_variable_names_rejected(self, gensym):
        with pytest.raises(InternalVerifierError):
            enumerate_environments(qvars(("x", Prim.BOOL), ("x", Prim.BOOL)), gensym)


finite_or_atomic = st.sampled_from([Prim.BOOL, Prim.UNIT, Prim.INT32, COLOR])


class TestEnumerationProperties:
    """property-based tests for enumeration."""

    @given(st.lists(finite_or_atomic, max_size=6))
    def test_environment_count_is_product_of_domains(self, types):
        sizes = {Prim.BOOL: 2, Prim.UNIT: 1, Prim.INT32: 1, COLOR: 3}
        variables = qvars(*[(f"v{i}", t) for i, t in enumerate(types)])

        envs = enumerate_environments(variables, FreshNameGenerator())

        assert len(envs) == math.prod(sizes[t] for t in types)
        for env in envs:
            assert list(env.keys()) == [v.name for v in variables]

    @given(st.lists(finite_or_atomic, max_size=6), st.integers(min_value=0, max_value=1000))
    def test_deterministic_for_fixed_generator_state(self, types, start):
        variables = qvars(*[(f"v{i}", t) for i, t in enumerate(types)])

        first = enumerate_environments(variables, FreshNameGenerator(counter=start))
        second = enumerate_environments(variables, FreshNameGenerator(counter=start))

        assert first == second

    @given(st.integers(min_value=1, max_value=8))
    def test_placeholders_unique_within_environment(self, n):
        variables = qvars(*[(f"x{i}", Prim.INT64) for i in range(n)])
        (env,) = enumerate_environments(variables, FreshNameGenerator())
        names = [v.name for v in env.values()]
        assert len(set(names)) == n
