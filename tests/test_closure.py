import pytest
from hypothesis import given, strategies as st

from conftest import call, define, get, run, val
from typedcalc import create_environment
from typedcalc.compiler import (
    BracketContainerNode,
    Code,
    RawCodeExprNode,
    SymbolCall,
    Value,
    ValueNode,
)
from typedcalc.errors import CalcArityError, CalcRecursionError, CalcSyntaxError, CalcTypeError
from typedcalc.evaluation.callable import Callable
from typedcalc.evaluation.closure import Closure
from typedcalc.types import Cons, Symbol


def lam(env, params, body):
    return env.lambda_compiler.create(params, body)


def params(*names):
    return BracketContainerNode([get(n) for n in names])


@pytest.mark.parametrize("body, expected", [("x", 3), ("y", 4)])
def test_arguments_bind_in_declaration_order(env, body, expected):
    define(env, "f", lam(env, params("x", "y"), get(body)))
    assert run(env, call("f", val(env, 3), val(env, 4))) == [expected]


def test_parameter_list_keeps_source_order(env):
    node = lam(env, params("a", "b", "c"), get("a"))
    names = [v.unwrap(Symbol).value for v in node.arg_list.unwrap(Cons)]
    assert names == ["a", "b", "c"]
    assert node.arg_list.unwrap(Cons).terminator() is env.null_value


identifier_strat = st.from_regex(r"[a-z][a-z0-9_]{0,7}", fullmatch=True)


@given(st.lists(identifier_strat, max_size=8, unique=True))
def test_parameter_cons_follows_source_order(names):
    env = create_environment()
    node = lam(env, params(*names), val(env, 0))
    if not names:
        assert node.arg_list is env.null_value
        return
    assert [v.unwrap(Symbol).value for v in node.arg_list.unwrap(Cons)] == names
    assert node.arg_list.unwrap(Cons).terminator() is env.null_value


@given(st.lists(identifier_strat, min_size=1, max_size=6, unique=True), st.data())
def test_each_parameter_binds_its_positional_argument(names, data):
    env = create_environment()
    index = data.draw(st.integers(min_value=0, max_value=len(names) - 1))
    define(env, "f", lam(env, params(*names), get(names[index])))
    args = [val(env, 100 + i) for i in range(len(names))]
    assert run(env, call("f", *args)) == [100 + index]


def test_single_parameter_without_brackets(env):
    define(env, "inc", lam(env, get("n"), call("add", get("n"), val(env, 1))))
    assert run(env, call("inc", val(env, 41))) == [42]


def test_symbol_and_string_literals_name_parameters(env):
    spec = BracketContainerNode([
        ValueNode(env.domain.create(Symbol, Symbol.get("a"))),
        val(env, "b"),
    ])
    define(env, "second", lam(env, spec, get("b")))
    assert run(env, call("second", val(env, 1), val(env, 2))) == [2]


def test_zero_parameter_lambda(env):
    define(env, "k", lam(env, ValueNode(env.null_value), val(env, 9)))
    assert run(env, call("k")) == [9]
    define(env, "k2", lam(env, BracketContainerNode([]), val(env, 10)))
    assert run(env, call("k2")) == [10]


def test_lambda_compiles_to_closure_call(env):
    code = env.compile(lam(env, params("x"), get("x")))
    steps = list(code)
    assert len(steps) == 3
    assert isinstance(steps[0], Value) and steps[0].value.is_(Cons)
    assert isinstance(steps[1], Value) and steps[1].value.is_(Code)
    assert isinstance(steps[2], SymbolCall)
    assert (steps[2].name, steps[2].args, steps[2].returns) == ("closure", 2, 1)


def test_raw_code_body_is_not_wrapped_twice(env):
    node = lam(env, params("x"), RawCodeExprNode(env.domain, get("x")))
    steps = list(env.compile(node))
    body = steps[1].value.unwrap(Code)
    assert [type(s).__name__ for s in body] == ["SymbolGet"]
    define(env, "ident", node)
    assert run(env, call("ident", val(env, "same"))) == ["same"]


def test_non_identifier_parameter_fails_at_compile_time(env):
    with pytest.raises(CalcSyntaxError):
        lam(env, BracketContainerNode([get("x"), val(env, 1)]), get("x"))
    with pytest.raises(CalcSyntaxError):
        lam(env, val(env, 5), get("x"))
    with pytest.raises(CalcSyntaxError):
        lam(env, call("add", get("a"), get("b")), get("a"))


def test_duplicate_parameter_is_a_syntax_error(env):
    with pytest.raises(CalcSyntaxError):
        lam(env, params("x", "x"), get("x"))


@pytest.mark.parametrize("body_nodes", [[], ["x", "x"]])
def test_body_must_leave_exactly_one_result(env, body_nodes):
    define(env, "f", lam(env, params("x"), BracketContainerNode([get(n) for n in body_nodes])))
    with pytest.raises(CalcArityError):
        run(env, call("f", val(env, 1)))


def test_wrong_argument_count(env):
    define(env, "f", lam(env, params("x", "y"), get("x")))
    with pytest.raises(CalcArityError):
        run(env, call("f", val(env, 1)))


def test_free_names_resolve_in_defining_scope(env):
    # make = (a) -> ((b) -> a)
    define(env, "make", lam(env, params("a"), lam(env, params("b"), get("a"))))
    [inner] = env.evaluate(call("make", val(env, 1)))
    env.set_global_symbol("g", inner)
    env.set_global_symbol("a", env.value(99))

    assert run(env, call("g", val(env, 0))) == [1]

    # a different binding of `a` at the call site is not seen
    define(env, "caller", lam(env, params("a"), call("g", val(env, 5))))
    assert run(env, call("caller", val(env, 77))) == [1]


def test_closure_sees_later_global_definitions(env):
    define(env, "f", lam(env, params("x"), call("add", get("x"), get("late"))))
    env.set_global_symbol("late", env.value(10))
    assert run(env, call("f", val(env, 1))) == [11]


def test_each_call_gets_its_own_scope(env):
    define(env, "make", lam(env, params("a"), lam(env, params("b"), call("add", get("a"), get("b")))))
    [add1] = env.evaluate(call("make", val(env, 1)))
    [add2] = env.evaluate(call("make", val(env, 2)))
    env.set_global_symbol("add1", add1)
    env.set_global_symbol("add2", add2)
    assert run(env, BracketContainerNode([call("add1", val(env, 10)), call("add2", val(env, 10))])) == [11, 12]


def test_closure_value_is_callable_typed(env):
    [f] = env.evaluate(lam(env, params("x"), get("x")))
    assert f.is_(Callable)
    assert isinstance(f.value, Closure)
    assert f.value.params == ("x",)
    assert f.value.args == 1 and f.value.returns == 1


def test_closure_builtin_checks_its_arguments(env):
    names = Cons.from_values(env.domain, [env.domain.create(Symbol, Symbol.get("x"))])
    code = env.quote(get("x"))

    with pytest.raises(CalcTypeError):
        run(env, call("closure", ValueNode(names), val(env, 1)))

    with pytest.raises(CalcTypeError):
        run(env, call("closure", val(env, "x"), ValueNode(code)))

    bad_list = Cons.from_values(env.domain, [env.value(1)])
    with pytest.raises(CalcTypeError):
        run(env, call("closure", ValueNode(bad_list), ValueNode(code)))

    [f] = env.evaluate(call("closure", ValueNode(names), ValueNode(code)))
    assert f.value.params == ("x",)

    [g] = env.evaluate(call("closure", ValueNode(env.null_value), ValueNode(code)))
    assert g.value.params == ()


def test_call_depth_is_limited(env, monkeypatch):
    monkeypatch.setenv("TYPEDCALC_MAX_CALL_DEPTH", "3")
    define(env, "loop", lam(env, params("n"), call("loop", get("n"))))
    with pytest.raises(CalcRecursionError):
        run(env, call("loop", val(env, 0)))


def test_runaway_recursion_stops_at_default_depth(env, monkeypatch):
    monkeypatch.delenv("TYPEDCALC_MAX_CALL_DEPTH", raising=False)
    define(env, "loop", lam(env, params("n"), call("loop", get("n"))))
    with pytest.raises(CalcRecursionError):
        run(env, call("loop", val(env, 0)))
