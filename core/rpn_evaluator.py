"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import Operation, OPERATOR_DEFINITIONS, is_number, is_binary_operator, format_rpn
from config.config import EXPRESSION_CONFIG

logger = logging.getLogger(__name__)

MALFORMED_RESULT = EXPRESSION_CONFIG["malformed_result"]


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, x):
        """
        评估RPN表达式
        Args:
            token_sequence: RPN token序列
            x: 自由变量的取值
        Returns:
            float结果；表达式不完整（栈不平衡）时记录错误并返回0
        """
        stack = []

        for token in token_sequence:
            if is_number(token):
                stack.append(float(token))

            elif token is Operation.VARIABLE:
                stack.append(float(x))

            elif is_binary_operator(token):
                info = OPERATOR_DEFINITIONS[token]
                if len(stack) < 2:
                    logger.error(f"Insufficient operands for '{info.symbol}' in RPN: {format_rpn(token_sequence)}")
                    return MALFORMED_RESULT
                right = stack.pop()
                left = stack.pop()
                stack.append(info.func(left, right))

            else:
                logger.error(f"Unknown token {token!r} in RPN expression")
                return MALFORMED_RESULT

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            return MALFORMED_RESULT

        return stack[0]
