"""core/operators.py"""
import numpy as np

from core.token_system import Operator


def wrap_int32(value):
    """按二进制补码截断到32位有符号整数（与C/Java的int溢出行为一致）"""
    return int(np.array(value, dtype=np.int64).astype(np.int32))


class Operators:
    """所有操作符的静态方法集合，操作数和结果都是32位整数"""

    @staticmethod
    def add(operand1, operand2):
        return wrap_int32(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        return wrap_int32(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        return wrap_int32(operand1 * operand2)

    @staticmethod
    def div(operand1, operand2):
        """整数除法，向零截断"""
        if operand2 == 0:
            raise ZeroDivisionError("Division by zero")
        quotient = abs(operand1) // abs(operand2)
        if (operand1 < 0) != (operand2 < 0):
            quotient = -quotient
        # INT_MIN / -1 溢出回 INT_MIN
        return wrap_int32(quotient)

    @staticmethod
    def mod(operand1, operand2):
        """截断取余，符号跟随被除数"""
        if operand2 == 0:
            raise ZeroDivisionError("Modulo by zero")
        remainder = abs(operand1) % abs(operand2)
        if operand1 < 0:
            remainder = -remainder
        return wrap_int32(remainder)

    @staticmethod
    def apply(operator, operand1, operand2):
        """
        执行一个二元操作
        Args:
            operator: Operator枚举
            operand1: 左操作数（后出栈的那个）
            operand2: 右操作数（先出栈的那个）
        Raises:
            ZeroDivisionError: / 或 % 的右操作数为0
        """
        return OPERATOR_FUNCTIONS[operator](operand1, operand2)


OPERATOR_FUNCTIONS = {
    Operator.ADD: Operators.add,
    Operator.SUB: Operators.sub,
    Operator.MUL: Operators.mul,
    Operator.DIV: Operators.div,
    Operator.MOD: Operators.mod,
}
