import pytest

from easel.errors import EaselLookupError, EaselTypeError, UnknownNodeError
from easel.evaluation.executor import execute, run
from easel.types import NORMAL, ReturnSignal, StructType, UserFunction

from ast_nodes import (
    array, binary, call, cond, for_, func, instance, lit, num, ref, ret,
    set_prop, set_var, struct, var, while_,
)


# ------------------ Var / Set ------------------

def test_var_declares_and_overwrites(scope):
    assert execute(var("rows", binary(num(1), "+", num(2))), scope) is NORMAL
    assert scope.lookup("rows") == 3
    execute(var("rows", lit("again")), scope)
    assert scope.lookup("rows") == "again"


def test_set_requires_existing_name(scope, recorder):
    with pytest.raises(EaselLookupError):
        execute(set_var("ghost", call("echo", num(1))), scope)
    # the right-hand side never ran
    assert recorder.calls == []
    assert "ghost" not in scope


def test_set_overwrites(scope):
    execute(set_var("answer", num(43)), scope)
    assert scope.lookup("answer") == 43


def test_set_var_node_kind(scope):
    execute({"type": "SetVar", "name": "answer", "value": num(0)}, scope)
    assert scope.lookup("answer") == 0


# ------------------ property assignment ------------------

def test_set_property_on_instance(scope):
    run(
        [
            struct("Point", "x", "y"),
            var("p", instance("Point", x=num(1))),
            var("alias", ref("p")),
            set_prop(ref("p"), "y", num(5)),
            set_prop("alias", "x", num(9)),
        ],
        scope,
    )
    point = scope.lookup("p")
    assert point is scope.lookup("alias")
    assert point.fields == {"x": 9, "y": 5}


def test_set_property_rejects_undeclared_field(scope):
    run([struct("Point", "x"), var("p", instance("Point", x=num(1)))], scope)
    with pytest.raises(EaselTypeError):
        execute(set_prop("p", "z", num(1)), scope)


def test_set_property_on_array(scope):
    run([var("xs", array(num(1), num(2))), var("i", num(1))], scope)
    execute(set_prop("xs", ref("i"), lit("b"), is_expr=True), scope)
    execute(set_prop("xs", num(0), lit("a")), scope)
    assert scope.lookup("xs") == ["a", "b"]
    with pytest.raises(EaselLookupError):
        execute(set_prop("xs", num(2), lit("c")), scope)


def test_set_node_with_caller_is_a_property_assignment(scope):
    run([struct("Box", "content"), var("b", instance("Box"))], scope)
    execute({"type": "Set", "caller": "b", "property": "content", "value": lit("toy")}, scope)
    assert scope.lookup("b").fields == {"content": "toy"}


def test_set_property_on_plain_value(scope):
    with pytest.raises(EaselTypeError):
        execute(set_prop("answer", "x", num(1)), scope)


def test_malformed_set(scope):
    with pytest.raises(UnknownNodeError):
        execute({"type": "Set", "value": num(1)}, scope)


# ------------------ declarations ------------------

def test_struct_registers_constructor(scope):
    execute(struct("Point", "x", "y"), scope)
    constructor = scope.lookup("Point")
    assert isinstance(constructor, StructType)
    assert constructor.members == ("x", "y")


def test_func_registers_callable(scope):
    execute(func("id", ["x"], ret(ref("x"))), scope)
    fn = scope.lookup("id")
    assert isinstance(fn, UserFunction)
    assert fn([7]) == 7


def test_func_accepts_args_field(scope):
    execute({"type": "Func", "name": "twice", "args": ["x"], "body": [ret(binary(ref("x"), "*", num(2)))]}, scope)
    assert scope.lookup("twice")([4]) == 8


def test_return_produces_signal(scope):
    completion = execute(ret(binary(num(2), "+", num(2))), scope)
    assert isinstance(completion, ReturnSignal)
    assert completion.is_return
    assert completion.value == 4


def test_run_stops_at_return(scope, recorder):
    completion = run([call("record", num(1)), ret(lit("done")), call("record", num(2))], scope)
    assert completion.value == "done"
    assert recorder.values == [1]


# ------------------ control flow ------------------

def test_while_loop_runs_in_same_scope(scope):
    run(
        [
            var("i", num(0)),
            while_(binary(ref("i"), "<", num(3)), set_var("i", binary(ref("i"), "+", num(1))), var("inside", lit(True))),
        ],
        scope,
    )
    assert scope.lookup("i") == 3
    assert scope.lookup("inside") is True


def test_while_condition_must_be_boolean(scope):
    with pytest.raises(EaselTypeError):
        execute(while_(num(1)), scope)


def test_while_false_never_runs_body(scope, recorder):
    execute(while_(lit(False), call("record", num(1))), scope)
    assert recorder.calls == []


def test_for_loop_half_open_range(scope, recorder):
    execute(for_("i", num(2), num(5), call("record", ref("i"))), scope)
    assert recorder.values == [2, 3, 4]


def test_for_loop_steps_from_the_current_value(scope, recorder):
    body = [call("record", ref("i")), set_var("i", binary(ref("i"), "+", num(10)))]
    execute(for_("i", num(2), num(5), *body), scope)
    assert recorder.values == [2, 13, 24]


def test_for_loop_pass_count_is_fixed_by_the_bounds(scope, recorder):
    execute(for_("i", num(0), num(3), call("record", ref("i")), set_var("i", num(-50))), scope)
    assert recorder.values == [0, -49, -49]


def test_for_loop_leaves_non_numeric_variable_alone(scope, recorder):
    execute(for_("i", num(0), num(2), set_var("i", lit("x")), call("record", ref("i"))), scope)
    assert recorder.values == ["x", "x"]


def test_for_loop_scope_is_local(scope):
    run(
        [
            var("total", num(0)),
            for_(
                "i", num(0), num(3),
                set_var("total", binary(ref("total"), "+", ref("i"))),
                var("temp", ref("i")),
            ),
        ],
        scope,
    )
    # plain bindings changed in the loop's copy stay there
    assert scope.lookup("total") == 0
    assert "i" not in scope
    assert "temp" not in scope


def test_for_loop_shares_reference_values(interp):
    result = interp.run(
        [
            var("seen", array()),
            for_("i", num(0), num(3), call("STDLIB_ARRAY_PUSH", ref("seen"), ref("i"))),
        ]
    )
    assert result.lookup("seen") == [0, 1, 2]


def test_for_bounds_evaluated_once(scope, recorder):
    execute(for_("i", call("echo", num(0)), call("echo", num(2)), call("record", ref("i"))), scope)
    assert recorder.calls == [[0], [2], [0], [1]]


def test_for_empty_range(scope, recorder):
    execute(for_("i", num(5), num(2), call("record", ref("i"))), scope)
    assert recorder.calls == []


def test_for_bounds_must_be_numbers(scope):
    with pytest.raises(EaselTypeError):
        execute(for_("i", lit("a"), num(2)), scope)
    with pytest.raises(EaselTypeError):
        execute(for_("i", num(0), lit(True)), scope)
    with pytest.raises(UnknownNodeError):
        execute({"type": "For", "id": "i", "range": [num(0)], "body": []}, scope)


def test_conditional_branches_share_scope(scope):
    run([cond(lit(True), [var("seen", lit("yes"))], [var("other", lit("no"))])], scope)
    assert scope.lookup("seen") == "yes"
    assert "other" not in scope

    run([cond(binary(ref("answer"), "<", num(0)), [var("neg", lit(True))], [var("pos", lit(True))])], scope)
    assert scope.lookup("pos") is True
    assert "neg" not in scope


def test_conditional_condition_must_be_boolean(scope):
    with pytest.raises(EaselTypeError):
        execute(cond(lit("yes"), []), scope)


def test_conditional_without_otherwise(scope):
    node = {"type": "Conditional", "condition": lit(False), "body": [var("x", num(1))], "otherwise": None}
    assert execute(node, scope) is NORMAL
    assert "x" not in scope


# ------------------ expression statements ------------------

def test_bare_expression_statement(scope, recorder):
    assert execute(call("record", lit("effect")), scope) is NORMAL
    assert recorder.values == ["effect"]


def test_var_reference_as_statement(scope):
    assert execute(ref("answer"), scope) is NORMAL
    with pytest.raises(EaselLookupError):
        execute(ref("unknown"), scope)


def test_unknown_statement_type(scope):
    with pytest.raises(UnknownNodeError):
        execute({"type": "Import", "name": "os"}, scope)


def test_missing_field_is_unknown_shape(scope):
    with pytest.raises(UnknownNodeError):
        execute({"type": "Struct", "name": "P"}, scope)
    with pytest.raises(UnknownNodeError):
        execute({"type": "Func", "name": "f", "params": [1], "body": []}, scope)
