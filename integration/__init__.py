"""积分模块"""
from .trapezoid import TrapezoidIntegrator, integrate

__all__ = ['TrapezoidIntegrator', 'integrate']
