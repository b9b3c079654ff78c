"""后缀（逆波兰）表达式求值器：栈机器，按 IEEE 双精度语义计算"""
import re

import numpy as np

from .errors import LexicalError, ResultArityError, StackUnderflowError
from .tokens import TokenKind
from .utils import Stack

BINARY_OPERATORS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}

FUNCTIONS = {
    "sin": np.sin,
    "cos": np.cos,
}

# 与 strtod 一致：取最长的合法十进制前缀，"1.2.3" -> 1.2
_NUMBER_PREFIX = re.compile(r"\d+\.?\d*|\.\d+")


def parse_number(token):
    m = _NUMBER_PREFIX.match(token.text)
    if m is None:
        raise LexicalError(f"Malformed number literal {token.text!r}", token.source_pos)
    return np.float64(m.group(0))


class PostfixEvaluator:
    """
    :param operators: 运算符到二元 numpy ufunc 的映射。
    :param functions: 函数名到一元 numpy ufunc 的映射。

    除零、负数的分数次幂、溢出都按 IEEE 规则得到 inf / nan，不抛异常。
    """

    def __init__(self, operators=None, functions=None):
        self.operators = operators if operators is not None else BINARY_OPERATORS
        self.functions = functions if functions is not None else FUNCTIONS

    def _pop(self, stack, token):
        if stack.is_empty():
            raise StackUnderflowError(
                f"Not enough operands for {token.text!r}", token.source_pos
            )
        return stack.pop()

    def evaluate(self, rpn, x):
        stack = Stack()
        value = np.float64(x)

        with np.errstate(all="ignore"):
            for t in rpn:
                kind = t.kind
                if kind is TokenKind.NUMBER:
                    stack.push(parse_number(t))
                elif kind is TokenKind.VARIABLE:
                    # 任何变量名都绑定到同一个 x
                    stack.push(value)
                elif kind is TokenKind.OPERATOR:
                    try:
                        op = self.operators[t.text]
                    except KeyError:
                        raise LexicalError(f"Unknown operator {t.text!r}", t.source_pos)
                    b = self._pop(stack, t)
                    a = self._pop(stack, t)
                    stack.push(op(a, b))
                elif kind is TokenKind.FUNCTION:
                    try:
                        func = self.functions[t.text]
                    except KeyError:
                        raise LexicalError(f"Unknown function {t.text!r}", t.source_pos)
                    a = self._pop(stack, t)
                    stack.push(func(a))
                # 手工构造的序列里残留的括号直接跳过

        if len(stack) != 1:
            raise ResultArityError(
                f"Expression left {len(stack)} values on the stack, expected 1"
            )
        return float(stack.pop())
