"""core/formatter.py - 把求值结果渲染成统一的显示文本"""
import numpy as np

from core.result import EvalResult

ERROR_TEXT = "Error"

EXP_UPPER = 1e12  # |x| >= 1e12 用科学计数法
EXP_LOWER = 1e-9  # 0 < |x| < 1e-9 用科学计数法
EXP_FRACTION_DIGITS = 10
SIGNIFICANT_DIGITS = 14
PLAIN_LOWER = 1e-6  # 舍入后小于它的数按最短形式的科学计数法输出


def _strip_exponent_sign(text):
    return text.replace('e+', 'e')


def format_number(n):
    """
    格式化一个浮点数。

    - NaN/inf -> "Error"
    - -0 -> "0"
    - 极大/极小值：科学计数法，尾数最多10位小数，去掉尾随0，指数不带 '+'
    - 其余：按14位有效数字舍入后取最短表示，不输出尾随0和小数点
    """
    if n is None:
        return ERROR_TEXT
    n = float(n)
    if not np.isfinite(n):
        return ERROR_TEXT
    if n == 0:
        n = 0.0  # 去掉 -0

    abs_n = abs(n)
    if abs_n != 0 and (abs_n >= EXP_UPPER or abs_n < EXP_LOWER):
        text = np.format_float_scientific(
            n, precision=EXP_FRACTION_DIGITS, unique=False, trim='-', exp_digits=1
        )
        return _strip_exponent_sign(text)

    rounded = float(np.format_float_positional(
        n, precision=SIGNIFICANT_DIGITS, unique=False, fractional=False
    ))
    if rounded != 0 and abs(rounded) < PLAIN_LOWER:
        return _strip_exponent_sign(np.format_float_scientific(rounded, trim='-', exp_digits=1))
    return np.format_float_positional(rounded, trim='-')


def format_result(value):
    """接受 EvalResult、数字或 None（失败）"""
    if isinstance(value, EvalResult):
        value = value.value if value.ok else None
    return format_number(value)
