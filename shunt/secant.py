"""割线法求根，f(x) 以字符串表达式给出"""
import logging
import math
import sys
import warnings

import numpy as np

from .engine import Expression
from .errors import ConvergenceWarning, ExpressionError

logger = logging.getLogger(__name__)

SAFETY_LIMIT = 100


def _as_function(f):
    if isinstance(f, str):
        return Expression(f)
    return f


def _step(x1, fx1, x2, fx2):
    # f(x2) == f(x1) 时公式的分母为零，方法失败
    if fx2 == fx1:
        return math.nan
    return x2 - (fx2 * (x2 - x1)) / (fx2 - fx1)


def secant_next(f, x1, x2):
    """
    割线法的一步：x3 = x2 - f(x2) * (x2 - x1) / (f(x2) - f(x1))
    :return: 新的近似值；f(x2) == f(x1) 时返回 nan。
    """
    f = _as_function(f)
    return _step(x1, f(x1), x2, f(x2))


def relative_error(new, old):
    """|(new - old) / new|，new 为 0 时按 IEEE 得到 inf 或 nan"""
    with np.errstate(all="ignore"):
        return float(np.abs(np.divide(np.float64(new) - np.float64(old), np.float64(new))))


class IterationRow:
    __slots__ = ["n", "x1", "fx1", "x2", "fx2", "x3", "fx3", "error"]

    def __init__(self, n, x1, fx1, x2, fx2, x3, fx3, error):
        self.n = n
        self.x1 = x1
        self.fx1 = fx1
        self.x2 = x2
        self.fx2 = fx2
        self.x3 = x3
        self.fx3 = fx3
        self.error = error

    def as_tuple(self):
        return (self.n, self.x1, self.fx1, self.x2, self.fx2, self.x3, self.fx3, self.error)

    def __eq__(self, other):
        if not isinstance(other, IterationRow):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return "IterationRow(n={}, x1={}, fx1={}, x2={}, fx2={}, x3={}, fx3={}, error={})".format(
            *self.as_tuple())


class SecantResult:
    def __init__(self, rows, failed=False, failed_at=None):
        self.rows = rows
        self.failed = failed
        self.failed_at = failed_at  # 失败发生的迭代序号

    @property
    def iterations(self):
        return len(self.rows)

    @property
    def root(self):
        return self.rows[-1].x3 if self.rows else math.nan

    @property
    def error(self):
        return self.rows[-1].error if self.rows else None

    def __repr__(self):
        return (f"SecantResult(iterations={self.iterations}, root={self.root!r}, "
                f"error={self.error!r}, failed={self.failed})")


class SecantSolver:
    """
    :param f: 字符串表达式、Expression 或任意一元可调用对象。
    :param x1: 第一个初始估计值。
    :param x2: 第二个初始估计值。
    :param eps: 相对误差容限；为 None 时按固定次数迭代。
    :param iterations: 固定次数模式下的迭代次数。
    :param max_iterations: 容限模式下的安全上限。
    """

    def __init__(self, f, x1, x2, eps=None, iterations=5, max_iterations=SAFETY_LIMIT):
        self.f = _as_function(f)
        self.x1 = float(x1)
        self.x2 = float(x2)
        self.eps = eps
        self.iterations = iterations
        self.max_iterations = max_iterations

    @property
    def limit(self):
        return self.iterations if self.eps is None else self.max_iterations

    def _keep_going(self, iteration, error):
        if iteration >= self.limit:
            return False
        return self.eps is None or error > self.eps

    def run(self):
        f = self.f
        x1, x2 = self.x1, self.x2
        rows = []
        iteration = 0
        error = sys.float_info.max

        while self._keep_going(iteration, error):
            fx1 = f(x1)
            fx2 = f(x2)
            x3 = _step(x1, fx1, x2, fx2)
            if math.isnan(x3):
                logger.debug("secant step %d failed: f(x1)=%r, f(x2)=%r", iteration, fx1, fx2)
                return SecantResult(rows, failed=True, failed_at=iteration)

            try:
                fx3 = f(x3)
            except ExpressionError as e:
                e.context = "f(x3)"
                raise
            error = relative_error(x3, x2)
            rows.append(IterationRow(iteration, x1, fx1, x2, fx2, x3, fx3, error))
            logger.debug("secant step %d: x3=%r f(x3)=%r error=%r", iteration, x3, fx3, error)

            x1, x2 = x2, x3
            iteration += 1

        if self.eps is not None and error > self.eps:
            warnings.warn(
                f"Tolerance {self.eps!r} not reached after {iteration} iterations "
                f"(relative error {error!r})",
                ConvergenceWarning, stacklevel=2)
        return SecantResult(rows)


def secant(f, x1, x2, eps=None, iterations=5, max_iterations=SAFETY_LIMIT):
    return SecantSolver(f, x1, x2, eps=eps, iterations=iterations,
                        max_iterations=max_iterations).run()
