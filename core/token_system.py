"""core/token_system.py"""
import re
from enum import Enum

import numpy as np

INT_MIN = int(np.iinfo(np.int32).min)
INT_MAX = int(np.iinfo(np.int32).max)

# 可选符号 + 任意Unicode十进制数字，不允许下划线
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# 只按ASCII空白切分；去首尾时去掉所有 <= U+0020 的控制字符
_WHITESPACE_PATTERN = re.compile(r"[ \t\n\x0b\f\r]+")
_TRIM_CHARS = "".join(chr(i) for i in range(0x21))


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class Operator(Enum):
    """固定的二元操作符集合"""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    @classmethod
    def from_symbol(cls, symbol):
        """按符号精确匹配，不是操作符时返回None"""
        return OPERATOR_SYMBOLS.get(symbol)


OPERATOR_SYMBOLS = {op.value: op for op in Operator}


class Token:
    def __init__(self, token_type, text, value=None, operator=None):
        self.type = token_type
        self.text = text
        self.value = value  # 操作数的整数值
        self.operator = operator  # 操作符枚举

    @property
    def arity(self):
        return 2 if self.type == TokenType.OPERATOR else 0

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.value, self.operator) == \
            (other.type, other.text, other.value, other.operator)

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


class InvalidTokenError(ValueError):
    """token既不是操作符也不是合法的32位整数"""

    def __init__(self, text):
        super().__init__(f"Invalid token: {text}")
        self.text = text


def parse_operand(text):
    """
    把十进制有符号整数字面量解析为int
    Args:
        text: token文本
    Returns:
        int，范围限制在32位有符号整数
    Raises:
        InvalidTokenError: 格式不对或超出范围
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidTokenError(text)
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        raise InvalidTokenError(text)
    return value


def trim(text):
    """去掉首尾的控制字符和空格（不处理U+00A0等Unicode空白）"""
    return text.strip(_TRIM_CHARS)


def split_tokens(expression):
    """按ASCII空白切分表达式，跳过trim后为空的token"""
    pieces = (trim(piece) for piece in _WHITESPACE_PATTERN.split(expression))
    return [piece for piece in pieces if piece]


def classify_token(text):
    """操作符按符号精确匹配，其余一律按整数解析"""
    operator = Operator.from_symbol(text)
    if operator is not None:
        return Token(TokenType.OPERATOR, text, operator=operator)
    return Token(TokenType.OPERAND, text, value=parse_operand(text))


def tokenize(expression):
    """
    表达式 -> Token生成器
    逐个分类，非法token在读到时才抛出InvalidTokenError，
    所以前面操作符的错误会先于后面的非法token被报告
    """
    for text in split_tokens(expression):
        yield classify_token(text)
