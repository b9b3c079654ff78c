import math

from pytest import approx, raises

from shunt.engine import eval_postfix
from shunt.errors import LexicalError, ResultArityError, StackUnderflowError
from shunt.evaluator import PostfixEvaluator, parse_number

from utils import N, V, O, F, L, R


class TestPostfixEvaluator(object):
    def test_simple(self):
        assert eval_postfix([N("2"), N("3"), O("+")], 0) == 5.0

    def test_operand_order(self):
        assert eval_postfix([N("8"), N("2"), O("-")], 0) == 6.0
        assert eval_postfix([N("8"), N("2"), O("/")], 0) == 4.0
        assert eval_postfix([N("2"), N("3"), O("^")], 0) == 8.0

    def test_variable_binding(self):
        assert eval_postfix([V("x")], 7) == 7.0
        assert eval_postfix([V("t"), V("abc"), O("*")], 3) == 9.0

    def test_functions(self):
        assert eval_postfix([N("0"), F("sin")], 0) == 0.0
        assert eval_postfix([N("0"), F("cos")], 0) == 1.0
        assert eval_postfix([V(), F("sin")], math.pi / 2) == approx(1.0)

    def test_returns_float(self):
        result = eval_postfix([N("1"), N("2"), O("+")], 0)
        assert type(result) is float

    def test_parentheses_are_skipped(self):
        assert eval_postfix([L(), N("1"), R()], 0) == 1.0

    def test_division_by_zero(self):
        assert eval_postfix([N("1"), V(), O("/")], 0) == math.inf
        assert eval_postfix([N("0"), N("1"), O("-"), V(), O("/")], 0) == -math.inf
        assert math.isnan(eval_postfix([V(), V(), O("/")], 0))

    def test_power_degenerate(self):
        assert math.isnan(eval_postfix([V(), N("0.5"), O("^")], -8))
        assert eval_postfix([N("10"), N("400"), O("^")], 0) == math.inf

    def test_underflow(self):
        with raises(StackUnderflowError):
            eval_postfix([O("+")], 0)
        with raises(StackUnderflowError):
            eval_postfix([N("1"), O("*")], 0)
        with raises(StackUnderflowError) as excinfo:
            eval_postfix([F("sin")], 0)
        assert "'sin'" in excinfo.value.message

    def test_result_arity(self):
        with raises(ResultArityError):
            eval_postfix([], 0)
        with raises(ResultArityError) as excinfo:
            eval_postfix([N("1"), N("2")], 0)
        assert "2 values" in excinfo.value.message

    def test_unknown_symbols(self):
        with raises(LexicalError):
            eval_postfix([N("1"), N("2"), O("%")], 0)
        with raises(LexicalError):
            eval_postfix([N("1"), F("tan")], 0)

    def test_custom_functions(self):
        evaluator = PostfixEvaluator(functions={"sin": abs})
        assert evaluator.evaluate([N("3"), V(), O("-"), F("sin")], 5) == 2.0


class TestParseNumber(object):
    def test_plain(self):
        assert parse_number(N("42")) == 42.0
        assert parse_number(N("3.25")) == 3.25

    def test_partial_forms(self):
        assert parse_number(N("5.")) == 5.0
        assert parse_number(N(".5")) == 0.5

    def test_longest_prefix(self):
        assert parse_number(N("1.2.3")) == 1.2
        assert parse_number(N("1..2")) == 1.0

    def test_no_digits(self):
        with raises(LexicalError):
            parse_number(N("."))
        with raises(LexicalError):
            parse_number(N(".."))
