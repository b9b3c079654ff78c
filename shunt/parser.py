from .grammar import OperatorTable
from .tokens import TokenKind
from .utils import Stack


class PostfixConverter:
    """
    调度场算法：把中缀记号序列转换为后缀（逆波兰）记号序列。
    :param table: 运算符优先级表（OperatorTable）。

    括号不匹配时不报错：多余的右括号在栈空时什么也不做，
    未闭合的左括号在最后清栈时被丢弃。
    """

    def __init__(self, table=None):
        self.table = table if table is not None else OperatorTable()

    def convert(self, tokens):
        output = []
        ops = Stack()  # 运算符栈，存放 OPERATOR / FUNCTION / LPAREN

        for t in tokens:
            kind = t.kind
            if kind is TokenKind.NUMBER or kind is TokenKind.VARIABLE:
                output.append(t)
            elif kind is TokenKind.FUNCTION or kind is TokenKind.LPAREN:
                ops.push(t)
            elif kind is TokenKind.OPERATOR:
                while (not ops.is_empty()
                       and ops.peek().kind in (TokenKind.OPERATOR, TokenKind.FUNCTION)
                       and self.table.yields_to(ops.peek().text, t.text)):
                    output.append(ops.pop())
                ops.push(t)
            elif kind is TokenKind.RPAREN:
                while not ops.is_empty() and ops.peek().kind is not TokenKind.LPAREN:
                    output.append(ops.pop())
                if not ops.is_empty():
                    ops.pop()
                # 右括号闭合了函数的参数，函数随之输出
                if not ops.is_empty() and ops.peek().kind is TokenKind.FUNCTION:
                    output.append(ops.pop())
            else:
                raise AssertionError(f"Unknown token kind {kind!r}")

        while not ops.is_empty():
            t = ops.pop()
            if t.kind is not TokenKind.LPAREN:
                output.append(t)
        return output
