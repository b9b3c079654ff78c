from shunt.tokens import Token, TokenKind


def N(text):
    return Token(TokenKind.NUMBER, text)


def V(text="x"):
    return Token(TokenKind.VARIABLE, text)


def O(text):
    return Token(TokenKind.OPERATOR, text)


def F(text):
    return Token(TokenKind.FUNCTION, text)


def L():
    return Token(TokenKind.LPAREN, "(")


def R():
    return Token(TokenKind.RPAREN, ")")


def texts(tokens):
    return [t.text for t in tokens]
