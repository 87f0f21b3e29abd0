"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging
from typing import List, Optional

from core.token_system import TokenType, Token, OPERATOR_DEFINITIONS
from core.operators import Operators

logger = logging.getLogger(__name__)


def parse_literal(text: str) -> Optional[float]:
    """把NUMBER字面量解析成有限浮点数；"1.2.3"、"." 之类返回 None"""
    try:
        value = float(text)
    except ValueError:
        return None
    if not np.isfinite(value):
        return None
    return value


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(rpn: List[Token]) -> Optional[float]:
        """
        用操作数栈遍历RPN序列。

        Args:
            rpn: to_postfix 产出的Token序列
        Returns:
            栈中唯一剩下的值（可能是 NaN/inf，由格式化阶段处理）；
            字面量非法、操作数不足或结束时栈里不是恰好一个值时返回 None
        """
        stack = []

        for token in rpn:
            if token.type == TokenType.NUMBER:
                value = parse_literal(token.text)
                if value is None:
                    logger.debug(f"Invalid number literal: {token.text!r}")
                    return None
                stack.append(np.float64(value))
                continue

            if token.type != TokenType.OPERATOR:
                logger.error(f"Unexpected token in RPN: {token!r}")
                return None

            # ================== 二元操作符处理 ==================
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.text!r}")
                return None
            operand2 = stack.pop()
            operand1 = stack.pop()

            op_def = OPERATOR_DEFINITIONS.get(token.text)
            op_method = getattr(Operators, op_def.name, None) if op_def else None
            if op_method is None:
                logger.error(f"Unknown binary operator: {token.text!r}")
                return None
            stack.append(op_method(operand1, operand2))

        # 返回结果处理
        if len(stack) == 0:
            logger.debug("Empty stack after evaluation")
            return None
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            return None
        return float(stack[0])
