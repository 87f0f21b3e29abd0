"""中缀 -> 后缀（RPN）转换，调度场算法"""
import logging
from typing import List, Optional

from core.token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, UNARY_MINUS_PRECEDENCE
)

logger = logging.getLogger(__name__)


def precedence(token: Token) -> int:
    """操作符优先级；一元负号改写出的减号优先级最高"""
    if token.unary:
        return UNARY_MINUS_PRECEDENCE
    op_def = OPERATOR_DEFINITIONS.get(token.text)
    return op_def.precedence if op_def else 0


def _should_pop(top: Token, incoming: Token) -> bool:
    """栈顶操作符是否要先于 incoming 输出"""
    if top.type != TokenType.OPERATOR:
        return False  # 左括号挡住
    if incoming.unary:
        # 一元负号右结合：只让位给严格更高的
        return precedence(top) > precedence(incoming)
    # 二元操作符左结合
    return precedence(top) >= precedence(incoming)


def to_postfix(tokens: List[Token]) -> Optional[List[Token]]:
    """
    把规范化后的中缀Token序列转成RPN。

    Args:
        tokens: normalize_unary_minus 之后的Token序列
    Returns:
        RPN顺序的Token列表（只含 NUMBER 和 OPERATOR）；括号不匹配时返回 None
    """
    output = []
    stack = []  # 只放 OPERATOR 和 LPAREN

    for tok in tokens:
        if tok.type == TokenType.NUMBER:
            output.append(tok)

        elif tok.type == TokenType.OPERATOR:
            while stack and _should_pop(stack[-1], tok):
                output.append(stack.pop())
            stack.append(tok)

        elif tok.type == TokenType.LPAREN:
            stack.append(tok)

        elif tok.type == TokenType.RPAREN:
            matched = False
            while stack:
                top = stack.pop()
                if top.type == TokenType.LPAREN:
                    matched = True
                    break
                output.append(top)
            if not matched:
                logger.debug("Unmatched ')'")
                return None

        else:
            logger.error(f"Unexpected token type: {tok.type}")
            return None

    # 清空操作符栈
    while stack:
        top = stack.pop()
        if top.type == TokenType.LPAREN:
            logger.debug("Unmatched '('")
            return None
        output.append(top)

    return output
