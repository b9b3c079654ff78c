"""
表达式引擎：词法分析 -> 调度场转换 -> 后缀求值。

每次调用都重新分析表达式，各阶段都不保存调用之间的状态。

>>> evaluate("2^3^2", 0)
512.0
>>> evaluate("2(x+1)", 3)
8.0
"""
from .errors import ExpressionError
from .evaluator import PostfixEvaluator
from .lexergenerator import LexerGenerator
from .parser import PostfixConverter
from .tokens import TokenKind


def build_lexer():
    lg = LexerGenerator()
    lg.add(TokenKind.NUMBER, r"[0-9.]+")
    lg.add(TokenKind.VARIABLE, r"[A-Za-z]+")
    lg.add(TokenKind.OPERATOR, r"[-+*/^]")
    lg.add(TokenKind.LPAREN, r"\(")
    lg.add(TokenKind.RPAREN, r"\)")
    lg.ignore(r"\s+")
    lg.function("sin", "cos")
    return lg.build()


# 三者都只持有不可变的规则表，每次调用的栈和输出都是局部的
_lexer = build_lexer()
_converter = PostfixConverter()
_evaluator = PostfixEvaluator()


def tokenize(expression):
    return list(_lexer.lex(expression))


def to_postfix(tokens):
    return _converter.convert(tokens)


def eval_postfix(rpn, x):
    return _evaluator.evaluate(rpn, x)


def evaluate(expression, x):
    """
    计算 f(x)。
    :raises LexicalError: 表达式中有不支持的字符。
    :raises StackUnderflowError: 运算符缺少操作数。
    :raises ResultArityError: 求值结束时栈中不是恰好一个值。
    """
    return eval_postfix(to_postfix(tokenize(expression)), x)


class EvalResult:
    """带标记的求值结果：要么有 value，要么有 error"""

    __slots__ = ["value", "error"]

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"EvalResult(value={self.value!r})"
        return f"EvalResult(error={self.error!r})"


def try_evaluate(expression, x):
    try:
        return EvalResult(value=evaluate(expression, x))
    except ExpressionError as e:
        return EvalResult(error=e)


class Expression:
    """由调用方持有的 f(x) 表达式；每次调用都完整地重新求值"""

    def __init__(self, text):
        self.text = text

    def __call__(self, x):
        return evaluate(self.text, x)

    def tokens(self):
        return tokenize(self.text)

    def postfix(self):
        return to_postfix(tokenize(self.text))

    def __repr__(self):
        return f"Expression({self.text!r})"

    def __str__(self):
        return self.text
