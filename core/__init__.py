"""核心模块 - Token系统、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, Operator, OPERATOR_SYMBOLS, INT_MIN, INT_MAX,
    InvalidTokenError, parse_operand, tokenize, trim
)
from .rpn_evaluator import (
    RPNEvaluator, EvaluationResult, EvaluationError, ErrorKind, evaluate
)
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'Operator', 'OPERATOR_SYMBOLS', 'INT_MIN', 'INT_MAX',
    'InvalidTokenError', 'parse_operand', 'tokenize', 'trim',
    'RPNEvaluator', 'EvaluationResult', 'EvaluationError', 'ErrorKind', 'evaluate',
    'Operators'
]
