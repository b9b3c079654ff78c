"""霍纳法则求多项式的值，并记录每一步的部分结果"""

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


def to_subscript(num):
    """把整数渲染为 Unicode 下标数字，负号原样保留"""
    return str(num).translate(_SUBSCRIPTS)


class HornerTrace:
    """
    steps 为 (次数, 部分结果) 列表，次数从多项式的次数递减到 0；
    result 是最后一步的值，即 p(x)。
    """

    def __init__(self, steps):
        self.steps = steps

    @property
    def degree(self):
        return self.steps[0][0]

    @property
    def result(self):
        return self.steps[-1][1]

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def __repr__(self):
        return f"HornerTrace(degree={self.degree}, result={self.result!r})"


def horner(coefficients, x):
    """
    :param coefficients: 系数，最高次在前，[a_n, a_{n-1}, ..., a_0]。
    :param x: 自变量。
    """
    coefficients = [float(a) for a in coefficients]
    if not coefficients:
        raise ValueError("At least one coefficient is required")

    n = len(coefficients) - 1
    result = coefficients[0]
    steps = [(n, result)]
    power = n - 1
    for a in coefficients[1:]:
        result = result * x + a
        steps.append((power, result))
        power -= 1
    return HornerTrace(steps)
