from .errors import (ExpressionError, LexicalError, StackUnderflowError,
                     ResultArityError, GrammarError, ConfigError,
                     ConvergenceWarning, SettingsWarning)
from .tokens import Token, TokenKind, SourcePosition
from .engine import (tokenize, to_postfix, eval_postfix, evaluate,
                     try_evaluate, EvalResult, Expression)
from .secant import secant, secant_next, SecantSolver, SecantResult, IterationRow
from .horner import horner, to_subscript

__version__ = '0.1.0'

__all__ = [
    "tokenize", "to_postfix", "eval_postfix", "evaluate", "try_evaluate",
    "EvalResult", "Expression", "Token", "TokenKind", "SourcePosition",
    "ExpressionError", "LexicalError", "StackUnderflowError", "ResultArityError",
    "GrammarError", "ConfigError", "ConvergenceWarning", "SettingsWarning",
    "secant", "secant_next", "SecantSolver", "SecantResult", "IterationRow",
    "horner", "to_subscript",
]
