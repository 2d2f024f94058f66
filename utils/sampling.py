"""utils/sampling.py"""
import numpy as np
import pandas as pd
from scipy.integrate import trapezoid

from core.rpn_evaluator import RPNEvaluator


def sample_function(token_sequence, a, b, num_points):
    """在 [a, b] 上等距取 num_points 个点求值，返回以 x 为索引的 Series"""
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    xs = np.linspace(a, b, num_points)
    values = [RPNEvaluator.evaluate(token_sequence, float(x)) for x in xs]
    return pd.Series(values, index=pd.Index(xs, name='x'), name='f(x)', dtype=float)


def reference_integral(token_sequence, a, b, steps):
    """
    用 scipy 的 trapezoid 在同样的 steps+1 个网格点上积分，
    用于核对 TrapezoidIntegrator 的结果。a >= b 时返回0，与积分器一致
    """
    if steps <= 0:
        raise ValueError(f"steps must be positive, got {steps}")
    if a >= b:
        return 0.0
    samples = sample_function(token_sequence, a, b, steps + 1)
    return float(trapezoid(samples.values, x=samples.index.values))


def relative_difference(value, reference):
    """相对误差，分母做零保护"""
    denom = max(abs(reference), 1e-12)
    return abs(value - reference) / denom
