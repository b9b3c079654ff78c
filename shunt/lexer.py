from .errors import LexicalError
from .tokens import SourcePosition, Token, TokenKind

# 前一个记号属于 MULTIPLIES_AFTER 且当前记号属于 MULTIPLIES_BEFORE 时插入隐式乘号，
# 例如 2x, x2, 2(x+1), (x+1)x, 2sin(x)。FUNCTION 后接 LPAREN 是函数调用，不在此列。
MULTIPLIES_AFTER = frozenset([TokenKind.NUMBER, TokenKind.VARIABLE, TokenKind.RPAREN])
MULTIPLIES_BEFORE = frozenset([TokenKind.NUMBER, TokenKind.VARIABLE, TokenKind.FUNCTION, TokenKind.LPAREN])


class Lexer:
    """词法分析器，lex()获取 Token 流"""

    def __init__(self, rules, ignore_rules, functions=frozenset()):
        self.rules = rules
        self.ignore_rules = ignore_rules
        self.functions = functions

    def lex(self, s):
        return LexerStream(self, s)


class LexerStream:
    """词法分析器流，用于生成 Token 流（含隐式乘号）"""

    def __init__(self, lexer, s):
        self.lexer = lexer  # 词法分析器（包含匹配规则）
        self.s = s          # 输入字符串
        self.idx = 0
        self._lineno = 1
        self._colno = 1
        self._prev = None     # 上一个产出的真实记号
        self._pending = None  # 隐式乘号之后待产出的记号

    def __iter__(self):
        return self

    def _update_pos(self, match):
        # 更新当前索引到匹配结束位置
        self.idx = match.end
        # 统计匹配范围内的换行符数量，更新行号
        self._lineno += self.s.count("\n", match.start, match.end)
        # 计算最后一个换行符的位置，用于更新列号
        last_nl = self.s.rfind("\n", 0, match.start)
        if last_nl < 0:
            return match.start + 1
        else:
            return match.start - last_nl

    def _classify(self, kind, text):
        if kind is TokenKind.VARIABLE and text in self.lexer.functions:
            return TokenKind.FUNCTION
        return kind

    def _next_raw(self):
        # 第一步：跳过忽略规则
        while True:
            if self.idx >= len(self.s):
                raise StopIteration
            for rule in self.lexer.ignore_rules:
                match = rule.matches(self.s, self.idx)
                if match and match.end > match.start:
                    self._update_pos(match)
                    break
            else:
                break

        # 第二步：匹配有效 Token 规则
        for rule in self.lexer.rules:
            match = rule.matches(self.s, self.idx)
            if match and match.end > match.start:
                lineno = self._lineno
                self._colno = self._update_pos(match)
                source_pos = SourcePosition(match.start, lineno, self._colno)
                text = self.s[match.start:match.end]
                return Token(self._classify(rule.kind, text), text, source_pos)

        last_nl = self.s.rfind("\n", 0, self.idx)
        colno = self.idx + 1 if last_nl < 0 else self.idx - last_nl
        raise LexicalError(
            f"Invalid character {self.s[self.idx]!r} in expression",
            SourcePosition(self.idx, self._lineno, colno)
        )

    def __next__(self):
        if self._pending is not None:
            token, self._pending = self._pending, None
            self._prev = token
            return token

        token = self._next_raw()
        prev = self._prev
        if (prev is not None and prev.kind in MULTIPLIES_AFTER
                and token.kind in MULTIPLIES_BEFORE):
            self._pending = token
            return Token(TokenKind.OPERATOR, "*")
        self._prev = token
        return token
