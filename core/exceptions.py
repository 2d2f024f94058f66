"""core/exceptions.py"""


class MalformedTokenError(ValueError):
    """表达式中出现既不是变量、运算符，也无法解析为数字的token"""

    def __init__(self, token, position, expression=None):
        self.token = token
        self.position = position
        self.expression = expression
        super().__init__(f"Malformed token '{token}' at position {position}")


class InvalidIntegrationError(ValueError):
    """积分参数不合法（步数、边界或步进方式）"""
