from shunt import tokenize, to_postfix, eval_postfix, LexicalError, ExpressionError


def demo(code: str, x: float):
    try:
        tokens = tokenize(code)
    except LexicalError as e:
        print(f"Ran into an invalid character at {e.get_source_pos()}")
        return
    rpn = to_postfix(tokens)
    print("tokens :", " ".join(t.text for t in tokens))
    print("postfix:", " ".join(t.text for t in rpn))
    try:
        print("f(x)   =", eval_postfix(rpn, x))
    except ExpressionError as e:
        print("error  :", e.message)


if __name__ == '__main__':
    x = float(input("x = "))
    while True:
        try:
            code = input(">>> ")
        except EOFError:
            break
        demo(code, x)
