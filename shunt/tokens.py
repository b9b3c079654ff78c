from enum import Enum


class TokenKind(Enum):
    """表达式中的六种记号，集合是封闭的"""
    NUMBER = "NUMBER"
    VARIABLE = "VARIABLE"
    OPERATOR = "OPERATOR"
    FUNCTION = "FUNCTION"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


class SourcePosition:
    """封装源位置信息（索引，行号，列号）"""

    __slots__ = ("idx", "lineno", "colno")

    def __init__(self, idx, lineno, colno):
        self.idx = idx
        self.lineno = lineno
        self.colno = colno

    def __eq__(self, other):
        if not isinstance(other, SourcePosition):
            return NotImplemented
        return (self.idx, self.lineno, self.colno) == (other.idx, other.lineno, other.colno)

    def __repr__(self):
        return f"SourcePosition(idx={self.idx}, lineno={self.lineno}, colno={self.colno})"


class Token:
    """
    不可变的记号：种类（TokenKind）与文本。
    source_pos 仅用于诊断，不参与相等比较；隐式插入的乘号没有源位置。
    """

    __slots__ = ("_kind", "_text", "_source_pos")

    def __init__(self, kind, text, source_pos=None):
        object.__setattr__(self, "_kind", TokenKind(kind))
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_source_pos", source_pos)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def kind(self):
        return self._kind

    @property
    def text(self):
        return self._text

    @property
    def source_pos(self):
        return self._source_pos

    def __repr__(self):
        return f"Token({self._kind.name}, {self._text!r})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            # 尝试other的比较方法
            return NotImplemented
        return self._kind is other._kind and self._text == other._text

    def __hash__(self):
        return hash((self._kind, self._text))
