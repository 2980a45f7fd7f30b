"""RPN表达式求值器 - 调用统一的Operators类"""
from enum import Enum

from core.token_system import TokenType, InvalidTokenError, tokenize, trim
from core.operators import Operators

ERROR_NULL_EMPTY = "Expression cannot be null or empty"
ERROR_INSUFFICIENT_OPERANDS = "Invalid: insufficient operands"
ERROR_TOO_MANY_OPERANDS = "Invalid: too many operands"


class ErrorKind(Enum):
    INVALID_EXPRESSION = "InvalidExpression"  # 结构问题：空输入、操作数不足/过多
    INVALID_TOKEN = "InvalidToken"  # 无法解析为整数的token
    DIVISION_BY_ZERO = "DivisionByZero"  # / 或 % 的右操作数为0


class EvaluationError(Exception):
    """带分类的求值错误"""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message


class EvaluationResult:
    """求值结果：要么是整数值，要么是(错误类型, 错误信息)"""

    def __init__(self, value=None, error_kind=None, message=None):
        self.value = value
        self.error_kind = error_kind
        self.message = message

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error_kind, message):
        return cls(error_kind=error_kind, message=message)

    @property
    def ok(self):
        return self.error_kind is None

    def unwrap(self):
        """成功时返回值，失败时抛出EvaluationError"""
        if not self.ok:
            raise EvaluationError(self.error_kind, self.message)
        return self.value

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return (self.value, self.error_kind, self.message) == \
            (other.value, other.error_kind, other.message)

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value})"
        return f"EvaluationResult(error_kind={self.error_kind.name}, message={self.message!r})"


class RPNEvaluator:
    """评估后缀表达式的值，每次调用使用独立的栈；不记录日志"""

    @staticmethod
    def evaluate(expression):
        """
        评估后缀表达式
        Args:
            expression: 以空白分隔的后缀表达式字符串
        Returns:
            EvaluationResult，从不抛出分类错误
        """
        try:
            value = RPNEvaluator._evaluate_or_raise(expression)
        except EvaluationError as e:
            return EvaluationResult.failure(e.kind, e.message)
        return EvaluationResult.success(value)

    @staticmethod
    def _evaluate_or_raise(expression):
        if expression is None or not trim(expression):
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION, ERROR_NULL_EMPTY)

        stack = []
        try:
            for token in tokenize(trim(expression)):
                if token.type == TokenType.OPERAND:
                    stack.append(token.value)
                    continue

                # ================== 二元操作符处理 ==================
                if len(stack) < token.arity:
                    raise EvaluationError(ErrorKind.INVALID_EXPRESSION, ERROR_INSUFFICIENT_OPERANDS)
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(Operators.apply(token.operator, operand1, operand2))
        except InvalidTokenError as e:
            raise EvaluationError(ErrorKind.INVALID_TOKEN, str(e)) from e
        except ZeroDivisionError as e:
            # 底层算术错误统一转换为DIVISION_BY_ZERO
            raise EvaluationError(ErrorKind.DIVISION_BY_ZERO, str(e)) from e

        # 返回结果处理
        if len(stack) == 0:
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION, ERROR_INSUFFICIENT_OPERANDS)
        if len(stack) > 1:
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION, ERROR_TOO_MANY_OPERANDS)
        return stack[0]


def evaluate(expression):
    """RPNEvaluator.evaluate的快捷方式"""
    return RPNEvaluator.evaluate(expression)
