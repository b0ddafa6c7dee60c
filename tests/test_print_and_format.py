import io

import pytest

from lispoo.builtin.env_builtin import make_message
from lispoo.interpreter import Interpreter
from lispoo.printer import to_lisp_string
from lispoo.types.environment import Environment
from lispoo.types.lambda_fn import Lambda
from lispoo.types.nil import Nil
from lispoo.types.symbol import Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (Nil, "nil"),
        (42, "42"),
        (-7, "-7"),
        (5.5, "5.5"),
        (4.0, "4.0"),
        (1e-05, "0.00001"),
        (1e22, "10000000000000000000000.0"),
        (-2.5e-7, "-0.00000025"),
        (-0.0, "-0.0"),
        (float("inf"), "inf"),
        (Symbol("set!"), "set!"),
        ([], "()"),
        ([1, 2.5, Symbol("x")], "(1 2.5 x)"),
        ([[1], [Nil, [Symbol("a")]]], "((1) (nil (a)))"),
    ]
)
def test_to_lisp_string(value, expected):
    assert to_lisp_string(value) == expected


def test_callables_render_as_opaque_marker():
    fn = Lambda([Symbol("x")], Symbol("x"), Environment())
    assert to_lisp_string(fn) == f"<fn>: {id(fn):#x}"
    assert to_lisp_string(len).startswith("<fn>: 0x")


def test_message_writes_each_argument_on_its_own_line(interp, out):
    assert interp.eval("(message 1 2.5 (quote x) (quote (a (1 2))) unbound)") is Nil
    assert out.getvalue() == "1\n2.5\nx\n(a (1 2))\nnil\n"


def test_message_of_lambda(interp, out):
    interp.eval("(message (lambda (x) x))")
    assert out.getvalue().startswith("<fn>: 0x")
    assert out.getvalue().endswith("\n")


def test_message_defaults_to_stdout(capsys):
    Interpreter().eval("(message (add 2 3))")
    assert capsys.readouterr().out == "5\n"


def test_message_requires_an_argument(interp):
    from lispoo.errors import LispooArityError
    with pytest.raises(LispooArityError):
        interp.eval("(message)")


def test_make_message_writes_to_given_sink():
    sink = io.StringIO()
    message = make_message(sink)
    assert message(Environment(), [Symbol("hello")]) is Nil
    assert sink.getvalue() == "hello\n"
