from .errors import GrammarError

# 从低到高排列；每项为 (结合性, [运算符])
DEFAULT_PRECEDENCE = [
    ("left", ["+", "-"]),
    ("left", ["*", "/"]),
    ("right", ["^"]),
]


class OperatorTable:
    """
    运算符优先级表。
    :param precedence: 由 (结合性, 运算符列表) 组成的列表，按优先级从低到高排列，
                       结合性为 left 或 right。
    """

    def __init__(self, precedence=DEFAULT_PRECEDENCE):
        self.precedence = {}  # 键：运算符，值：(结合性, 优先级等级)
        for idx, (assoc, ops) in enumerate(precedence, 1):
            for op in ops:
                self.set_precedence(op, assoc, idx)

    def set_precedence(self, op, assoc, level):
        # 检查合法性并存储（结合性必须是left/right）
        if op in self.precedence:
            raise GrammarError(f"Precedence already specified for {op!r}")
        if assoc not in ["left", "right"]:
            raise GrammarError(f"Precedence must be one of left, right; not {assoc!r}")
        self.precedence[op] = (assoc, level)

    def __contains__(self, op):
        return op in self.precedence

    def level(self, op):
        """未登记的符号（包括函数名）优先级为 0"""
        return self.precedence.get(op, ("left", 0))[1]

    def is_right_associative(self, op):
        return self.precedence.get(op, ("left", 0))[0] == "right"

    def yields_to(self, top, op):
        """栈顶 top 是否应在压入 op 之前弹出到输出"""
        top_level = self.level(top)
        op_level = self.level(op)
        return top_level > op_level or (top_level == op_level and not self.is_right_associative(op))
