"""core/operators.py"""
import numpy as np
import logging

# 除零/模零时压栈的值，格式化阶段统一渲染为 "Error"
FAILURE_VALUE = np.nan

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（float64 标量）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符，溢出得到 inf，由格式化阶段处理"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除数为0时返回 NaN 而不是抛异常"""
        if operand2 == 0:
            logger.debug("Division by zero")
            return np.float64(FAILURE_VALUE)
        with np.errstate(all='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def mod(operand1, operand2):
        """取余：结果符号跟随被除数（fmod 语义），模0返回 NaN"""
        if operand2 == 0:
            logger.debug("Modulo by zero")
            return np.float64(FAILURE_VALUE)
        with np.errstate(all='ignore'):
            return np.fmod(np.float64(operand1), np.float64(operand2))

