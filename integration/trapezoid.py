"""integration/trapezoid.py - 复合梯形公式"""
import logging
import math
import numbers

from config.config import INTEGRATION_CONFIG, STEPPING_MODES
from core.exceptions import InvalidIntegrationError
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class TrapezoidIntegrator:
    """
    对RPN表达式做定步长梯形积分

    stepping:
        accumulate - x 通过反复累加 h 前进，迭代次数可能因浮点误差比 steps 多/少一次
        indexed    - x = a + i*h，恰好 steps 个小区间
    """

    def __init__(self, stepping=None, cache_boundary=None):
        self.stepping = stepping or INTEGRATION_CONFIG["stepping"]
        if self.stepping not in STEPPING_MODES:
            raise InvalidIntegrationError(
                f"Unknown stepping mode '{self.stepping}', expected one of {STEPPING_MODES}")
        if cache_boundary is None:
            cache_boundary = INTEGRATION_CONFIG["cache_boundary"]
        self.cache_boundary = cache_boundary
        self.evaluator = RPNEvaluator

    @staticmethod
    def _validate(a, b, steps):
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise InvalidIntegrationError(f"steps must be a positive integer, got {steps!r}")
        if steps <= 0:
            raise InvalidIntegrationError(f"steps must be a positive integer, got {steps}")
        if not (math.isfinite(a) and math.isfinite(b)):
            raise InvalidIntegrationError(f"Integration bounds must be finite, got [{a}, {b}]")

    def integrate(self, token_sequence, a, b, steps=None):
        """
        Args:
            token_sequence: RPN token序列
            a, b: 积分区间
            steps: 小区间个数，默认取配置
        Returns:
            积分近似值；a >= b 时为0（不做符号翻转）
        """
        if steps is None:
            steps = INTEGRATION_CONFIG["num_steps"]
        self._validate(a, b, steps)

        if a >= b:
            if a > b:
                logger.debug(f"Reversed interval [{a}, {b}], integral is 0")
            return 0.0

        h = (b - a) / steps
        if self.stepping == "indexed":
            result = self._integrate_indexed(token_sequence, a, h, steps)
        else:
            result = self._integrate_accumulate(token_sequence, a, b, h)

        logger.debug(f"Integral over [{a}, {b}] with {steps} steps ({self.stepping}): {result}")
        return result

    def _integrate_accumulate(self, token_sequence, a, b, h):
        evaluate = self.evaluator.evaluate
        result = 0.0
        x = a
        cached_x = cached_f = None

        while x < b:
            if self.cache_boundary and cached_x == x:
                f0 = cached_f
            else:
                f0 = evaluate(token_sequence, x)
            x_next = x + h
            if x_next <= x:
                # h 相对 x 太小，x 不再前进
                raise InvalidIntegrationError(f"Step {h} is too small to advance from x = {x}")
            f1 = evaluate(token_sequence, x_next)
            result += (f0 + f1) * h / 2
            cached_x, cached_f = x_next, f1
            x = x_next

        return result

    def _integrate_indexed(self, token_sequence, a, h, steps):
        evaluate = self.evaluator.evaluate
        result = 0.0
        cached_x = cached_f = None

        for i in range(steps):
            x = a + i * h
            if self.cache_boundary and cached_x == x:
                f0 = cached_f
            else:
                f0 = evaluate(token_sequence, x)
            x_next = x + h
            f1 = evaluate(token_sequence, x_next)
            result += (f0 + f1) * h / 2
            cached_x, cached_f = x_next, f1

        return result


def integrate(token_sequence, a, b, steps=None, stepping=None):
    """模块级便捷函数"""
    return TrapezoidIntegrator(stepping=stepping).integrate(token_sequence, a, b, steps)
