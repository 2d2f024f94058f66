"""core/token_system.py"""
from enum import Enum

from config.config import EXPRESSION_CONFIG
from core.operators import Operators


class Operation(Enum):
    """非数字token的种类"""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    VARIABLE = "variable"


class OperatorInfo:
    def __init__(self, operation, symbol, precedence=None, func=None):
        self.operation = operation
        self.symbol = symbol
        self.precedence = precedence  # VARIABLE 没有优先级，永远不入运算符栈
        self.func = func

    def __repr__(self):
        return f"OperatorInfo({self.operation.name}, {self.symbol!r}, precedence={self.precedence})"


_SYMBOLS = EXPRESSION_CONFIG["operator_symbols"]
_PRECEDENCE = EXPRESSION_CONFIG["precedence"]
VARIABLE_SYMBOL = EXPRESSION_CONFIG["variable_symbol"]


# 运算符元数据（只读，导入时构建一次）
OPERATOR_DEFINITIONS = {
    Operation.ADD: OperatorInfo(Operation.ADD, _SYMBOLS["add"], _PRECEDENCE["add"], Operators.add),
    Operation.SUBTRACT: OperatorInfo(Operation.SUBTRACT, _SYMBOLS["subtract"], _PRECEDENCE["subtract"],
                                     Operators.subtract),
    Operation.MULTIPLY: OperatorInfo(Operation.MULTIPLY, _SYMBOLS["multiply"], _PRECEDENCE["multiply"],
                                     Operators.multiply),
    Operation.DIVIDE: OperatorInfo(Operation.DIVIDE, _SYMBOLS["divide"], _PRECEDENCE["divide"], Operators.divide),
    Operation.POWER: OperatorInfo(Operation.POWER, _SYMBOLS["power"], _PRECEDENCE["power"], Operators.power),
    Operation.VARIABLE: OperatorInfo(Operation.VARIABLE, VARIABLE_SYMBOL),
}

# 符号 -> Operation 的反向映射
SYMBOL_TO_OPERATION = {info.symbol: op for op, info in OPERATOR_DEFINITIONS.items()}

BINARY_OPERATIONS = frozenset(op for op, info in OPERATOR_DEFINITIONS.items() if info.func is not None)


def is_number(token):
    """数字字面量（bool 不算）"""
    return isinstance(token, (int, float)) and not isinstance(token, bool)


def is_binary_operator(token):
    return isinstance(token, Operation) and token in BINARY_OPERATIONS


def format_token(token):
    if isinstance(token, Operation):
        return OPERATOR_DEFINITIONS[token].symbol
    if is_number(token):
        return f"{token:g}"
    return repr(token)


def format_rpn(token_sequence):
    """把RPN序列渲染为空格分隔的字符串，例如 [2.0, 3.0, MULTIPLY] -> '2 3 *'"""
    return ' '.join(format_token(token) for token in token_sequence)
