"""核心模块 - Token系统、RPN转换器、RPN评估器和操作符"""
from .token_system import (
    Operation, OperatorInfo, OPERATOR_DEFINITIONS, SYMBOL_TO_OPERATION,
    VARIABLE_SYMBOL, is_number, format_rpn
)
from .exceptions import MalformedTokenError, InvalidIntegrationError
from .rpn_converter import RPNConverter
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

convert = RPNConverter.convert
evaluate = RPNEvaluator.evaluate

__all__ = [
    'Operation', 'OperatorInfo', 'OPERATOR_DEFINITIONS', 'SYMBOL_TO_OPERATION',
    'VARIABLE_SYMBOL', 'is_number', 'format_rpn',
    'MalformedTokenError', 'InvalidIntegrationError',
    'RPNConverter', 'RPNEvaluator', 'Operators', 'convert', 'evaluate'
]
