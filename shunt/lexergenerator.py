import re

from .lexer import Lexer
from .tokens import TokenKind


class Match:
    """封装匹配索引"""

    __slots__ = ["start", "end"]

    def __init__(self, start, end):
        self.start = start
        self.end = end


class Rule:
    """封装匹配的记号种类和正则表达式对象"""

    def __init__(self, kind, pattern, flags=0):
        self.kind = kind
        self.re = re.compile(pattern, flags=flags)

    def matches(self, s, pos):
        """
        从位置pos开始解析字符串s
        :return: 如果规则匹配，则返回一个`Match`对象；如果不匹配，则返回None
        """
        m = self.re.match(s, pos)
        return Match(*m.span(0)) if m is not None else None


class LexerGenerator:
    """
    用于生成词法分析器。

    >>> from shunt.lexergenerator import LexerGenerator
    >>> from shunt.tokens import TokenKind
    >>> lg = LexerGenerator()
    >>> lg.add(TokenKind.NUMBER, r'[0-9.]+')
    >>> lg.add(TokenKind.VARIABLE, r'[A-Za-z]+')
    >>> lg.add(TokenKind.OPERATOR, r'[-+*/^]')
    >>> lg.ignore(r'\\s+')
    >>> lexer = lg.build()
    >>> list(lexer.lex('2x + 1'))
    [Token(NUMBER, '2'), Token(OPERATOR, '*'), Token(VARIABLE, 'x'), Token(OPERATOR, '+'), Token(NUMBER, '1')]
    """

    def __init__(self):
        self.rules = []
        self.ignore_rules = []
        self.functions = set()

    def add(self, kind, pattern, flags=0):
        """添加匹配规则，第一条优先"""
        self.rules.append(Rule(TokenKind(kind), pattern, flags=flags))

    def ignore(self, pattern, flags=0):
        """添加忽略规则，第一条优先"""
        self.ignore_rules.append(Rule(None, pattern, flags=flags))

    def function(self, *names):
        """登记函数名：匹配为 VARIABLE 的标识符若在其中，则归类为 FUNCTION"""
        self.functions.update(names)

    def build(self):
        """
        返回一个词法分析器实例，该实例提供一个 `lex` 方法
        该方法必须传递一个字符串，返回一个迭代器生成 `Token` 实例。
        """
        return Lexer(self.rules, self.ignore_rules, frozenset(self.functions))
