"""core/operators.py"""
import logging

import numpy as np

from config.config import EXPRESSION_CONFIG

logger = logging.getLogger(__name__)

DIVISION_BY_ZERO_VALUE = EXPRESSION_CONFIG["division_by_zero_value"]


class Operators:
    """所有二元操作符的静态方法集合，参数顺序为 (left, right)"""

    @staticmethod
    def add(left, right):
        """加法操作符"""
        return left + right

    @staticmethod
    def subtract(left, right):
        """减法操作符"""
        return left - right

    @staticmethod
    def multiply(left, right):
        """乘法操作符"""
        return left * right

    @staticmethod
    def divide(left, right):
        """安全除法：除数为0时记录错误并返回替换值，不中断求值"""
        if right == 0:
            logger.error(f"Division by zero: {left} / {right}, substituting {DIVISION_BY_ZERO_VALUE}")
            return DIVISION_BY_ZERO_VALUE
        return left / right

    @staticmethod
    def power(left, right):
        """
        实数幂运算，按 float64 语义：
        负底数配分数指数得到 nan，溢出得到 inf
        """
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            result = np.power(np.float64(left), np.float64(right))
        return float(result)
