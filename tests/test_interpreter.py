import pytest

from rlisp.builtin.env_builtin import default_env
from rlisp.errors import RlispIllegalCall, RlispSyntaxError, RlispUnboundSymbol
from rlisp.interpreter import Interpreter
from rlisp.types.symbol import Symbol


def test_definitions_persist_across_calls(interp):
    assert interp.eval("(defun sq (n) (* n n))") == Symbol("sq")
    assert interp.eval("(sq 5)") == 25


def test_defparameter_then_if(interp):
    interp.eval("(defparameter x 5)")
    assert interp.eval("(if x 1 2)") == 1


def test_unbound_symbol(interp):
    with pytest.raises(RlispUnboundSymbol, match="foo"):
        interp.eval("foo")


def test_illegal_call(interp):
    with pytest.raises(RlispIllegalCall):
        interp.eval("(1 2 3)")


def test_parse_error(interp):
    with pytest.raises(RlispSyntaxError):
        interp.eval("(+ 1")


def test_only_first_expression_is_evaluated(interp):
    assert interp.eval("(defparameter a 1) (defparameter b 2)") == Symbol("a")
    assert interp.env.get("b") is None


def test_interpreters_are_isolated():
    first, second = Interpreter(), Interpreter()
    first.eval("(defparameter x 1)")
    assert second.env.get("x") is None


def test_interpreter_accepts_existing_env():
    env = default_env()
    env.set("preset", 3.0)
    assert Interpreter(env).eval("(+ preset 1)") == 4
