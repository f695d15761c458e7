"""Small constructors for the JSON-style AST nodes the parser produces."""


def lit(value):
    return {"type": "Literal", "value": value}


def num(n):
    # Numbers carry their display text alongside the numeric value
    return {"type": "Literal", "value": str(n), "content": n}


def ref(name):
    return {"type": "Var", "name": name, "value": None}


def var(name, value):
    return {"type": "Var", "name": name, "value": value}


def set_var(name, value):
    return {"type": "Set", "name": name, "value": value}


def set_prop(caller, prop, value, is_expr=False):
    return {"type": "SetProperty", "caller": caller, "property": prop, "value": value, "isExpr": is_expr}


def unary(op, value):
    return {"type": "Unary", "operator": op, "value": value}


def binary(left, op, right):
    return {"type": "Binary", "left": left, "operator": op, "right": right}


def array(*elements):
    return {"type": "Array", "value": list(elements)}


def instance(name, **members):
    return {"type": "Instance", "name": name, "members": members}


def call(caller, *args):
    if isinstance(caller, str):
        caller = ref(caller)
    return {"type": "Call", "caller": caller, "args": list(args)}


def get(caller, prop, is_expr=False):
    return {"type": "Get", "caller": caller, "property": prop, "isExpr": is_expr}


def struct(name, *members):
    return {"type": "Struct", "name": name, "members": list(members)}


def func(name, params, *body):
    return {"type": "Func", "name": name, "params": list(params), "body": list(body)}


def ret(value):
    return {"type": "Return", "value": value}


def while_(condition, *body):
    return {"type": "While", "condition": condition, "body": list(body)}


def for_(loop_var, start, end, *body):
    return {"type": "For", "id": loop_var, "range": [start, end], "body": list(body)}


def cond(condition, body, otherwise=()):
    return {"type": "Conditional", "condition": condition, "body": list(body), "otherwise": list(otherwise)}
