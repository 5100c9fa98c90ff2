"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    NUMERAL = "numeral"  # 十进制数字串
    OPERATOR = "operator"  # 运算符


class OperatorSymbol(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"
    NEG = "~"  # 一元负号，单独的符号，不复用二元减号


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    symbol: OperatorSymbol
    precedence: int
    associativity: Associativity
    arity: int

    @property
    def is_right_assoc(self):
        return self.associativity is Associativity.RIGHT


# 运算符定义表（优先级 / 结合性 / 元数），只读
OPERATOR_DEFINITIONS = {
    OperatorSymbol.NEG: OperatorSpec(OperatorSymbol.NEG, 4, Associativity.RIGHT, 1),
    OperatorSymbol.POW: OperatorSpec(OperatorSymbol.POW, 3, Associativity.RIGHT, 2),
    OperatorSymbol.MUL: OperatorSpec(OperatorSymbol.MUL, 2, Associativity.LEFT, 2),
    OperatorSymbol.DIV: OperatorSpec(OperatorSymbol.DIV, 2, Associativity.LEFT, 2),
    OperatorSymbol.MOD: OperatorSpec(OperatorSymbol.MOD, 2, Associativity.LEFT, 2),
    OperatorSymbol.ADD: OperatorSpec(OperatorSymbol.ADD, 1, Associativity.LEFT, 2),
    OperatorSymbol.SUB: OperatorSpec(OperatorSymbol.SUB, 1, Associativity.LEFT, 2),
}

# 输入中可出现的运算符字符（不含一元负号，它由解析器从 '-' 重新分类得到）
OPERATOR_CHARS = {
    symbol.value: symbol for symbol in OperatorSymbol if symbol is not OperatorSymbol.NEG
}

# 后缀文本中的运算符（含一元负号标记）
POSTFIX_OPERATOR_TEXT = {symbol.value: symbol for symbol in OperatorSymbol}

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def precedence(symbol):
    return OPERATOR_DEFINITIONS[symbol].precedence


def is_right_assoc(symbol):
    return OPERATOR_DEFINITIONS[symbol].is_right_assoc


def arity(symbol):
    return OPERATOR_DEFINITIONS[symbol].arity


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    operator: Optional[OperatorSymbol] = None

    @classmethod
    def numeral(cls, text):
        return cls(TokenType.NUMERAL, text)

    @classmethod
    def for_operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol.value, symbol)

    @classmethod
    def from_text(cls, text):
        """
        将原始文本分类为Token：单个运算符字符（'~' 表示一元负号）为运算符，
        其余一律视为数字，合法性留给求值器检查
        """
        symbol = POSTFIX_OPERATOR_TEXT.get(text) if isinstance(text, str) else None
        if symbol is not None:
            return cls.for_operator(symbol)
        return cls.numeral(text)

    @property
    def is_operator(self):
        return self.type is TokenType.OPERATOR

    def __str__(self):
        return self.text


def parse_postfix(text):
    """把空白分隔的后缀字符串切分为Token序列（不做合法性检查）"""
    return [Token.from_text(part) for part in text.split()]
