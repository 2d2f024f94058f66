"""工具模块"""
from .sampling import sample_function, reference_integral, relative_difference

__all__ = ['sample_function', 'reference_integral', 'relative_difference']
