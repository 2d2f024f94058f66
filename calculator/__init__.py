"""计算器模块 - 转换、求值和积分的统一入口"""
from .calculator import Calculator

__all__ = ['Calculator']
