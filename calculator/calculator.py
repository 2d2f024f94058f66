import logging
from collections import OrderedDict
from typing import List, Optional

from core import RPNConverter, RPNEvaluator, format_rpn
from integration import TrapezoidIntegrator

logger = logging.getLogger(__name__)


class Calculator:
    """把转换、求值、积分串起来，并缓存已转换的表达式"""

    def __init__(self, cache_size=128, stepping=None, cache_boundary=None):
        self.converter = RPNConverter
        self.evaluator = RPNEvaluator
        self.integrator = TrapezoidIntegrator(stepping=stepping, cache_boundary=cache_boundary)
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
        self._rpn_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_hits(self):
        return self._cache_hits

    @property
    def cache_misses(self):
        return self._cache_misses

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._rpn_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._rpn_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._rpn_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def convert_to_rpn(self, expression: str) -> List:
        """
        Args:
            expression: 中缀表达式
        Returns:
            RPN token列表（副本，修改它不影响缓存）
        Raises:
            MalformedTokenError: 表达式中有无法识别的token，不会被缓存
        """
        # 用规范化后的token串作为键，"x  +  1" 与 "x + 1" 视为同一表达式
        cache_key = ' '.join(expression.split())

        if cache_key in self._rpn_cache:
            self._rpn_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {cache_key[:50]}")
            return list(self._rpn_cache[cache_key])

        self._cache_misses += 1
        rpn = self.converter.convert(expression)
        if self.cache_size > 0:
            self._rpn_cache[cache_key] = tuple(rpn)
            self._manage_cache()
        return rpn

    def format_rpn(self, token_sequence) -> str:
        return format_rpn(token_sequence)

    def print_rpn(self, token_sequence):
        text = self.format_rpn(token_sequence)
        logger.debug(f"RPN: {text}")
        print(f"RPN: {text}")
        return text

    def evaluate_rpn(self, token_sequence, x) -> float:
        return self.evaluator.evaluate(token_sequence, x)

    def calculate_integral(self, token_sequence, a, b, steps: Optional[int] = None) -> float:
        return self.integrator.integrate(token_sequence, a, b, steps)

    def integrate_expression(self, expression: str, a, b, steps: Optional[int] = None) -> float:
        """转换（带缓存）后积分"""
        return self.calculate_integral(self.convert_to_rpn(expression), a, b, steps)
