"""中缀表达式 -> RPN 转换器（shunting-yard）"""
import logging
import math

from core.token_system import Operation, OPERATOR_DEFINITIONS, SYMBOL_TO_OPERATION
from core.exceptions import MalformedTokenError

logger = logging.getLogger(__name__)


class RPNConverter:
    """把按空格分隔的中缀表达式转换为RPN token序列"""

    @staticmethod
    def parse_number(text, position, expression=None):
        try:
            value = float(text)
        except ValueError:
            raise MalformedTokenError(text, position, expression) from None
        # inf / nan 不是合法的数字字面量
        if not math.isfinite(value):
            raise MalformedTokenError(text, position, expression)
        return value

    @staticmethod
    def convert(expression):
        """
        Args:
            expression: 中缀表达式，数字和运算符之间必须有空格，如 "x ^ 2 + 3 * x"
        Returns:
            RPN token列表（float 或 Operation）
        Raises:
            MalformedTokenError: 无法识别的token
        """
        output = []
        operator_stack = []

        for position, text in enumerate(expression.split()):
            operation = SYMBOL_TO_OPERATION.get(text)

            if operation is Operation.VARIABLE:
                output.append(Operation.VARIABLE)
            elif operation is not None:
                precedence = OPERATOR_DEFINITIONS[operation].precedence
                # >= 使同级运算符（包括 ^）左结合
                while operator_stack and OPERATOR_DEFINITIONS[operator_stack[-1]].precedence >= precedence:
                    output.append(operator_stack.pop())
                operator_stack.append(operation)
            else:
                output.append(RPNConverter.parse_number(text, position, expression))

        while operator_stack:
            output.append(operator_stack.pop())

        logger.debug(f"Converted '{expression}' into {len(output)} RPN tokens")
        return output
