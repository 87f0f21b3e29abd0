"""表达式求值入口：词法 -> 一元负号规范化 -> 调度场 -> RPN求值"""
import logging

from core.token_system import tokenize, normalize_unary_minus
from core.shunting_yard import to_postfix
from core.rpn_evaluator import RPNEvaluator
from core.result import EvalResult
from core.formatter import format_result

logger = logging.getLogger(__name__)


def evaluate_expression(text: str) -> EvalResult:
    """
    安全地计算算术表达式（不调用 eval）。
    任一阶段失败即短路，返回 EvalResult.failure，不会抛异常。
    """
    if not isinstance(text, str):
        logger.debug(f"Expression must be a string, got {type(text).__name__}")
        return EvalResult.failure('lexical')

    tokens = tokenize(text)
    if tokens is None:
        return EvalResult.failure('lexical')

    rpn = to_postfix(normalize_unary_minus(tokens))
    if rpn is None:
        return EvalResult.failure('structural')

    value = RPNEvaluator.evaluate(rpn)
    if value is None:
        return EvalResult.failure('evaluation')

    return EvalResult.success(value)


def calculate(text: str) -> str:
    """求值并格式化，返回显示文本（失败时为 "Error"）"""
    return format_result(evaluate_expression(text))
