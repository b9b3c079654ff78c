from pytest import raises

from shunt import horner, to_subscript


class TestHorner(object):
    def test_steps(self):
        trace = horner([1, -6, 11, -6], 4)
        assert trace.steps == [(3, 1.0), (2, -2.0), (1, 3.0), (0, 6.0)]
        assert trace.result == 6.0
        assert trace.degree == 3
        assert len(trace) == 4

    def test_root(self):
        assert horner([1, -6, 11, -6], 2).result == 0.0

    def test_constant(self):
        trace = horner([5], 100)
        assert list(trace) == [(0, 5.0)]
        assert trace.result == 5.0

    def test_fractional(self):
        assert horner([2, 0, -1], 0.5).result == -0.5

    def test_empty(self):
        with raises(ValueError):
            horner([], 1)


class TestSubscript(object):
    def test_digits(self):
        assert to_subscript(0) == "₀"
        assert to_subscript(10) == "₁₀"
        assert to_subscript(123) == "₁₂₃"

    def test_negative(self):
        assert to_subscript(-3) == "-₃"
