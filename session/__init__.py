"""会话模块 - 交互式计算器状态"""
from .calculator import CalculatorSession, TapeEntry

__all__ = ['CalculatorSession', 'TapeEntry']
