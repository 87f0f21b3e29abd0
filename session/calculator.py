"""交互式计算器会话 - 输入缓冲、记忆寄存器和历史纸带都放在显式的状态对象里"""
import logging
import math
import re
import time
from typing import List, NamedTuple, Optional

from config.config import SESSION_CONFIG
from core import OPERATOR_DEFINITIONS, evaluate_expression, format_result, ERROR_TEXT

logger = logging.getLogger(__name__)

_TRAILING_NUMBER = re.compile(r'(\d+)(\.\d*)?$')
_SIGNED_TRAILING_NUMBER = re.compile(r'(.*?)(-?)(\d+(?:\.\d*)?)')
_NUMBER_START = re.compile(r'\d|\.')


class TapeEntry(NamedTuple):
    """纸带上的一条记录"""
    expr: str
    result: str
    ts: float


def is_operator(ch):
    return len(ch) == 1 and ch in OPERATOR_DEFINITIONS


def last_non_space_char(text):
    stripped = text.rstrip(' ')
    return stripped[-1] if stripped else ''


def _is_prefix_position(last):
    """last 为空、左括号或操作符时，后面的 '-' 是负号"""
    return not last or last == '(' or is_operator(last)


class CalculatorSession:
    """一个用户的计算器状态"""

    def __init__(self, tape_limit=None):
        self.expression = ""
        self.last_value_text = "0"
        self.memory = 0.0
        self.tape: List[TapeEntry] = []
        self.tape_limit = tape_limit or SESSION_CONFIG["tape_limit"]

    @property
    def display(self):
        return self.last_value_text or "0"

    def can_insert_operator(self):
        last = last_non_space_char(self.expression)
        if not last:
            return False
        if last == '(' or is_operator(last):
            return False
        return True

    def insert_text(self, text):
        """按计算器按键规则追加文本，不合规的输入直接忽略"""
        if text == '.':
            # 当前数字里已经有小数点
            m = _TRAILING_NUMBER.search(self.expression)
            if m and m.group(2):
                return
            if not m:
                self.expression += '0'

        if is_operator(text) and not self.can_insert_operator():
            # 开头、'(' 或操作符后面只允许一元负号
            if text == '-' and _is_prefix_position(last_non_space_char(self.expression)):
                self.expression += '-'
            return

        # 显示着上次结果时开始输入新数字，结果清零
        if self.expression == "" and _NUMBER_START.search(text) and self.last_value_text != "0":
            self.last_value_text = "0"

        self.expression += text

    def backspace(self):
        if self.expression:
            self.expression = self.expression[:-1]

    def all_clear(self):
        self.expression = ""
        self.last_value_text = "0"

    def clear_entry(self):
        self.expression = ""

    def smart_paren(self):
        """开头/操作符后开括号；否则有未闭合的括号就闭合，没有就插入 '*('"""
        last = last_non_space_char(self.expression)
        if _is_prefix_position(last):
            self.expression += '('
        else:
            opens = self.expression.count('(')
            closes = self.expression.count(')')
            self.expression += ')' if opens > closes else '*('

    def toggle_sign(self):
        """切换末尾数字的正负号；缓冲为空时切换显示的结果"""
        if not self.expression:
            text = self.last_value_text
            if text and text != "0" and text != ERROR_TEXT:
                self.last_value_text = text[1:] if text.startswith('-') else '-' + text
            return

        m = _SIGNED_TRAILING_NUMBER.fullmatch(self.expression)
        if not m:
            return
        head, sign, num = m.groups()

        # '3-5' 里的 '-' 是二元减号，不是 5 的符号
        if sign and not _is_prefix_position(last_non_space_char(head)):
            head, sign = head + sign, ''

        if sign:
            self.expression = head + num
        elif _is_prefix_position(last_non_space_char(head)):
            self.expression = head + '-' + num
        else:
            self.expression = head + '(-' + num + ')'

    def mem_clear(self):
        self.memory = 0.0

    def mem_recall(self):
        self.insert_text(format_result(self.memory))

    def mem_plus(self):
        try:
            n = float(self.last_value_text)
        except ValueError:
            return
        if math.isfinite(n):
            self.memory += n

    def equals(self) -> Optional[str]:
        """计算当前缓冲，记入纸带，返回格式化后的结果；缓冲为空时返回 None"""
        expr = self.expression.strip()
        if not expr:
            return None

        formatted = format_result(evaluate_expression(expr))
        logger.debug(f"{expr} = {formatted}")

        self.tape.insert(0, TapeEntry(expr, formatted, time.time()))
        del self.tape[self.tape_limit:]

        self.expression = ""
        self.last_value_text = formatted
        return formatted

    def reuse(self, index):
        """把纸带上第 index 条（0 为最新）的结果插入缓冲"""
        self.insert_text(self.tape[index].result)

    def clear_tape(self):
        self.tape = []

    def snapshot(self):
        """导出可序列化的状态，供调用方自行持久化"""
        return {
            "expression": self.expression,
            "last_value_text": self.last_value_text,
            "memory": self.memory,
            "tape": [entry._asdict() for entry in self.tape],
        }
