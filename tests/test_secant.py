import logging
import math
import warnings

from pytest import approx, raises, warns

from shunt import ConvergenceWarning, Expression, LexicalError, secant, secant_next
from shunt.secant import IterationRow, SecantSolver, relative_error

EXPRESSION = "x^2-4*x-10"


class TestSecantNext(object):
    def test_first_step(self):
        assert secant_next(EXPRESSION, 0, 1) == approx(-10 / 3)

    def test_accepts_callables(self):
        assert secant_next(lambda x: x - 2, 0, 1) == 2.0
        assert secant_next(Expression("x-2"), 0, 1) == 2.0

    def test_equal_values_give_nan(self):
        assert math.isnan(secant_next("5", 0, 1))
        assert math.isnan(secant_next("x^2", -1, 1))


class TestSecantSolver(object):
    def test_first_iteration(self):
        result = SecantSolver(EXPRESSION, 0, 1, iterations=1).run()
        assert result.iterations == 1
        row = result.rows[0]
        assert row.as_tuple()[:5] == (0, 0.0, -10.0, 1.0, -13.0)
        assert row.x3 == approx(-10 / 3)
        assert row.fx3 == approx(130 / 9)
        assert row.error == approx(1.3)

    def test_fixed_iterations(self):
        result = secant(EXPRESSION, 0, 1, iterations=5)
        assert result.iterations == 5
        assert [row.n for row in result.rows] == [0, 1, 2, 3, 4]
        for prev, row in zip(result.rows, result.rows[1:]):
            assert row.x1 == prev.x2
            assert row.x2 == prev.x3
        assert not result.failed

    def test_tolerance_converges(self):
        result = secant(EXPRESSION, 0, 1, eps=1e-5)
        assert not result.failed
        assert result.error <= 1e-5
        assert result.root == approx(2 - math.sqrt(14), abs=1e-6)
        assert Expression(EXPRESSION)(result.root) == approx(0, abs=1e-6)
        assert result.iterations < 100

    def test_linear_function(self):
        result = secant(lambda x: x - 2, 0, 1, eps=1e-5)
        assert result.iterations == 2
        assert result.root == 2.0
        assert result.error == 0.0

    def test_failure_stops_the_loop(self):
        result = secant("5", 0, 1, iterations=10)
        assert result.failed
        assert result.failed_at == 0
        assert result.rows == []
        assert math.isnan(result.root)
        assert result.error is None

    def test_failure_after_progress(self):
        # f(x) = x - 2 hits the root exactly, then f(x1) == f(x2) == 0
        result = secant(lambda x: x - 2, 0, 1, iterations=5)
        assert result.failed
        assert result.failed_at == 2
        assert result.iterations == 2
        assert result.root == 2.0

    def test_zero_iterations(self):
        result = secant(EXPRESSION, 0, 1, iterations=0)
        assert result.iterations == 0
        assert not result.failed

    def test_convergence_warning(self):
        with warns(ConvergenceWarning):
            result = secant(EXPRESSION, 0, 1, eps=1e-12, max_iterations=2)
        assert result.iterations == 2

    def test_no_warning_when_converged(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            secant(EXPRESSION, 0, 1, eps=1e-5)

    def test_engine_errors_propagate(self):
        with raises(LexicalError):
            SecantSolver("2#x", 0, 1).run()

    def test_error_while_evaluating_new_estimate(self):
        def f(x):
            if x not in (0.0, 1.0):
                raise LexicalError("Invalid character '#' in expression")
            return x - 2

        with raises(LexicalError) as excinfo:
            SecantSolver(f, 0, 1).run()
        assert excinfo.value.context == "f(x3)"

    def test_initial_errors_have_no_context(self):
        with raises(LexicalError) as excinfo:
            SecantSolver("2#x", 0, 1).run()
        assert excinfo.value.context is None

    def test_debug_log_per_iteration(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shunt.secant")
        result = secant(EXPRESSION, 0, 1, iterations=3)
        records = [r for r in caplog.records if r.name == "shunt.secant"]
        assert len(records) == result.iterations == 3
        assert all(r.levelno == logging.DEBUG for r in records)
        assert records[0].getMessage().startswith("secant step 0: x3=")

    def test_debug_log_on_failure(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shunt.secant")
        secant("5", 0, 1, iterations=3)
        records = [r for r in caplog.records if r.name == "shunt.secant"]
        assert len(records) == 1
        assert "failed" in records[0].getMessage()

    def test_limit(self):
        assert SecantSolver(EXPRESSION, 0, 1, iterations=7).limit == 7
        assert SecantSolver(EXPRESSION, 0, 1, eps=1e-3, max_iterations=50).limit == 50


class TestHelpers(object):
    def test_relative_error(self):
        assert relative_error(2.0, 1.0) == 0.5
        assert relative_error(-2.0, 1.0) == 1.5
        assert relative_error(0.0, 1.0) == math.inf
        assert math.isnan(relative_error(0.0, 0.0))

    def test_row(self):
        row = IterationRow(0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 0.5)
        assert row == IterationRow(0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 0.5)
        assert row.as_tuple() == (0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 0.5)
        assert repr(row).startswith("IterationRow(n=0, x1=1.0")
