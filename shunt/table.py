"""迭代表格与霍纳步骤的控制台渲染"""
from .horner import to_subscript

W_ITER = 3
W_VAL = 10
W_ERR = 12

COLUMNS = ["X1", "F(X1)", "X2", "F(X2)", "X3", "F(X3)"]
ERROR_COLUMN = "|(X3-X2)/X3|"


def _fixed(value, width, precision):
    return f"{value:>{width}.{precision}f}"


def header():
    cells = [f"|{'N':>{W_ITER}}"]
    cells.extend(f" |{name:>{W_VAL}}" for name in COLUMNS)
    cells.append(f" |{ERROR_COLUMN:>{W_ERR}} |")
    return "".join(cells)


def separator():
    parts = ["-" * (W_ITER + 2)]
    parts.extend("-" * (W_VAL + 2) for _ in COLUMNS)
    parts.append("-" * (W_ERR + 2))
    return "+".join(parts) + "+"


def closing_rule():
    return "-" * (W_ITER + 2 + (W_VAL + 2) * len(COLUMNS) + W_ERR + 2 + 7)


def format_row(row, precision=6):
    cells = [f"|{row.n:>{W_ITER}}"]
    for value in (row.x1, row.fx1, row.x2, row.fx2, row.x3, row.fx3):
        cells.append(" |" + _fixed(value, W_VAL, precision))
    cells.append(" |" + _fixed(row.error, W_ERR, precision) + " |")
    return "".join(cells)


def format_secant(result, eps=None, precision=6):
    """
    渲染完整的割线法输出：表头、每次迭代一行、以及结论。
    :param result: SecantResult。
    :param eps: 容限模式下的目标容限，用于结论行。
    """
    lines = ["--- Iteration Table ---", header(), separator()]
    lines.extend(format_row(row, precision) for row in result.rows)

    if result.failed:
        lines.append("")
        lines.append("--- Secant Method Failed ---")
        lines.append(f"Cannot continue due to f(x2) == f(x1) in iteration {result.failed_at}.")
        return lines

    lines.append(closing_rule())
    lines.append("")
    if result.iterations > 0:
        lines.append(f"The Root found after {result.iterations} iterations.")
        lines.append(f"The approximate root is: {result.root:.{precision}f}")
        if eps is not None:
            lines.append(f"Final relative approximate error is: {result.error:.{precision}f} "
                         f"(Target EPS: {eps:.{precision}f}).")
        else:
            lines.append(f"Final relative approximate error is: {result.error:.{precision}f}.")
    else:
        lines.append("The Convergence not achieved or no iterations were performed.")
    return lines


def coefficient_label(power, unicode=True):
    return f"a{to_subscript(power)}" if unicode else f"a{power}"


def format_horner(trace, unicode=True):
    lines = ["--- Horner's Method Steps ---"]
    for power, value in trace:
        label = f"p{to_subscript(power)}" if unicode else f"p{power}_"
        lines.append(f"{label}: {value:g}")
    lines.append("")
    lines.append(f"Final Result = {trace.result:g}")
    return lines
