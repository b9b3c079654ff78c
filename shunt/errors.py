class GrammarError(Exception):
    pass


class ConfigError(Exception):
    pass


class ConvergenceWarning(Warning):
    pass


class SettingsWarning(Warning):
    pass


class ExpressionError(Exception):
    """表达式求值失败的基类，携带错误信息与源位置（可能为 None）"""

    def __init__(self, message, source_pos=None):
        super().__init__(message)
        self.message = message
        self.source_pos = source_pos
        self.context = None  # 调用方可注明出错时正在求值的式子，如 "f(x3)"

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'{type(self).__name__}({self.message!r}, {self.source_pos!r})'


class LexicalError(ExpressionError):
    pass


class StackUnderflowError(ExpressionError):
    pass


class ResultArityError(ExpressionError):
    pass
