"""命令行前端：shunt secant / shunt horner"""
import argparse
import logging
import sys

from . import __version__
from .config import load_settings, save_settings
from .engine import Expression
from .errors import ConfigError, ExpressionError
from .horner import horner
from .secant import SecantSolver
from .table import coefficient_label, format_horner, format_secant

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="shunt", description="Numerical methods over f(x) expressions")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every iteration")
    parser.add_argument("--config-dir", default=None, help="directory holding settings.json")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("secant", help="find a root of f(x) with the secant method")
    p.add_argument("expression", nargs="?", default=None,
                   help="f(x), e.g. '3*x^2 - 2*x + 5' or 'sin(x) - 0.5'")
    p.add_argument("--x1", type=float, default=None, help="first initial estimate")
    p.add_argument("--x2", type=float, default=None, help="second initial estimate")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--eps", type=float, default=None, help="relative error tolerance")
    mode.add_argument("-n", "--iterations", type=int, default=None, help="fixed number of iterations")
    p.add_argument("--precision", type=int, default=None, help="digits after the decimal point")
    p.add_argument("--save-defaults", action="store_true",
                   help="remember these values for later runs")
    p.set_defaults(func=run_secant)

    p = sub.add_parser("horner", help="evaluate a polynomial with Horner's method")
    p.add_argument("coefficients", nargs="*", type=float,
                   help="coefficients, highest degree first (prompted when omitted)")
    p.add_argument("--x", type=float, default=None, help="point to evaluate at (prompted when omitted)")
    p.add_argument("--ascii", action="store_true", help="plain ASCII labels instead of subscripts")
    p.set_defaults(func=run_horner)
    return parser


def _prompt(text, convert=str):
    return convert(input(text))


def _emit(lines):
    for line in lines:
        print(line)


def run_secant(args, settings):
    expression = args.expression
    if expression is None:
        print("Enter your function f(x) using 'x' as the variable")
        print("Allowed: + - * / ^, parentheses, sin(), cos()")
        expression = _prompt("f(x) = ").strip() or settings.expression
    x1 = args.x1 if args.x1 is not None else settings.x1
    x2 = args.x2 if args.x2 is not None else settings.x2
    precision = args.precision if args.precision is not None else settings.precision

    if args.eps is not None:
        use_eps, eps = True, args.eps
    elif args.iterations is not None:
        use_eps, eps = False, None
    else:
        use_eps = settings.use_eps
        eps = settings.eps if use_eps else None
    iterations = args.iterations if args.iterations is not None else settings.iterations

    print(f"Your function is: f(x) = {expression}")
    solver = SecantSolver(Expression(expression), x1, x2, eps=eps, iterations=iterations,
                          max_iterations=settings.max_iterations)
    try:
        result = solver.run()
    except ExpressionError as e:
        print(f"Error while evaluating {e.context or 'f(x)'}: {e.message}", file=sys.stderr)
        return 1
    _emit(format_secant(result, eps=eps, precision=precision))

    if args.save_defaults:
        settings.expression = expression
        settings.x1, settings.x2 = x1, x2
        settings.use_eps = use_eps
        if eps is not None:
            settings.eps = eps
        settings.iterations = iterations
        settings.precision = precision
        save_settings(settings, args.config_dir)
    return 1 if result.failed else 0


def run_horner(args, settings):
    unicode = settings.unicode and not args.ascii
    coefficients = args.coefficients
    try:
        if not coefficients:
            n = _prompt("Please Enter polynomial degree: ", int)
            if n < 0:
                raise ValueError(f"Polynomial degree must not be negative, got {n}")
            print("Enter coefficients (highest degree first):")
            coefficients = [_prompt(f"Enter {coefficient_label(i, unicode)}: ", float)
                            for i in range(n, -1, -1)]
        x = args.x if args.x is not None else _prompt("Enter x value: ", float)
        trace = horner(coefficients, x)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit(format_horner(trace, unicode=unicode))
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = load_settings(args.config_dir)
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
