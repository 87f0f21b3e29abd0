"""core/token_system.py"""
from enum import Enum
from typing import List, NamedTuple, Optional
import logging

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # 二元操作符
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token(NamedTuple):
    """不可变Token：类型 + 原始文本；unary 标记由一元负号改写出来的减号"""
    type: TokenType
    text: str
    unary: bool = False

    def __repr__(self):
        if self.unary:
            return f"Token({self.type.name}, {self.text!r}, unary)"
        return f"Token({self.type.name}, {self.text!r})"


class OperatorDef(NamedTuple):
    name: str  # Operators 中对应的方法名
    precedence: int


# 操作符定义：+ - 为1级，* / % 为2级，全部左结合
OPERATOR_DEFINITIONS = {
    '+': OperatorDef('add', 1),
    '-': OperatorDef('sub', 1),
    '*': OperatorDef('mul', 2),
    '/': OperatorDef('div', 2),
    '%': OperatorDef('mod', 2),
}

# 一元负号改写出的 0 - x 比任何二元操作符结合得更紧，且从右向左结合（--5 == 5）
UNARY_MINUS_PRECEDENCE = 3

WHITESPACE = frozenset(' \t\n\r')
DIGITS = frozenset('0123456789')
NUMBER_CHARS = DIGITS | {'.'}

# 输入中允许出现的全部字符（供调用方做预检）
ALLOWED_CHARS = NUMBER_CHARS | WHITESPACE | frozenset('()') | frozenset(OPERATOR_DEFINITIONS)


def tokenize(text: str) -> Optional[List[Token]]:
    """
    词法分析：把原始文本切成Token序列。

    - 跳过空白（空格、制表符、换行、回车）
    - 数字和小数点的最长连续串作为一个NUMBER（不检查小数点个数，"1.2.3" 留给求值阶段报错）
    - 遇到不认识的字符直接失败，返回 None，不返回部分结果
    """
    tokens = []
    i = 0
    n = len(text)

    while i < n:
        c = text[i]
        if c in WHITESPACE:
            i += 1
            continue
        if c == '(':
            tokens.append(Token(TokenType.LPAREN, c))
            i += 1
            continue
        if c == ')':
            tokens.append(Token(TokenType.RPAREN, c))
            i += 1
            continue
        if c in OPERATOR_DEFINITIONS:
            tokens.append(Token(TokenType.OPERATOR, c))
            i += 1
            continue
        if c in NUMBER_CHARS:
            start = i
            i += 1
            while i < n and text[i] in NUMBER_CHARS:
                i += 1
            tokens.append(Token(TokenType.NUMBER, text[start:i]))
            continue

        logger.debug(f"Unexpected character {c!r} at position {i}")
        return None

    return tokens


def is_unary_position(prev: Optional[Token]) -> bool:
    """前面没有Token、或前一个是操作符/左括号时，'-' 是一元负号"""
    return prev is None or prev.type in (TokenType.OPERATOR, TokenType.LPAREN)


def normalize_unary_minus(tokens: List[Token]) -> List[Token]:
    """
    把一元负号改写成 0 - x，之后的解析只需处理二元操作符。
    改写出的减号带 unary 标记，to_postfix 据此提升它的优先级，
    使 3*-2 == -6、3--2 == 5。
    """
    out = []
    for tok in tokens:
        if tok.type == TokenType.OPERATOR and tok.text == '-':
            prev = out[-1] if out else None
            if is_unary_position(prev):
                out.append(Token(TokenType.NUMBER, '0'))
                out.append(Token(TokenType.OPERATOR, '-', unary=True))
                continue
        out.append(tok)
    return out
