"""核心模块 - Token系统、调度场转换、RPN评估器、操作符和格式化"""
from .token_system import (
    TokenType, Token, OPERATOR_DEFINITIONS, ALLOWED_CHARS,
    tokenize, normalize_unary_minus
)
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .result import EvalResult
from .formatter import format_result, format_number, ERROR_TEXT
from .expression import evaluate_expression, calculate

__all__ = [
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'ALLOWED_CHARS',
    'tokenize', 'normalize_unary_minus', 'to_postfix',
    'RPNEvaluator', 'Operators', 'EvalResult',
    'format_result', 'format_number', 'ERROR_TEXT',
    'evaluate_expression', 'calculate'
]
