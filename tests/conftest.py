import io

import pytest

from easel.interpreter import Interpreter
from easel.types import Scope

from natives import Recorder, echo_into


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def scope(recorder):
    """
    A fresh root scope holding a few injected bindings:
    `record` stores its arguments, `echo` stores and returns its first one.
    """
    s = Scope({"answer": 42, "greeting": "hello"})
    s.define("record", recorder)
    s.define("echo", echo_into(recorder))
    return s


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def interp(recorder, stdout):
    """Interpreter with the standard library, printing into `stdout`."""
    return Interpreter({"record": recorder, "echo": echo_into(recorder)}, stdout=stdout)
