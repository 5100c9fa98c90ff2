"""core/operators.py"""
import logging

import numpy as np

from core.exceptions import (
    DivisionByZeroError, ModuloByZeroError, ExponentiationError, UnknownOperatorError
)
from core.token_system import OperatorSymbol

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)
_UINT64_MASK = int(np.iinfo(np.uint64).max)

logger = logging.getLogger(__name__)


def wrap_int64(value):
    """按二进制补码把任意Python整数截断到int64"""
    return int(np.uint64(value & _UINT64_MASK).astype(np.int64))


class Operators:
    """所有运算符的静态方法集合，输入输出均为int64范围内的Python int"""

    # + - * 与取负：原生定长补码运算，溢出时回绕，不做检查
    @staticmethod
    def add(a, b):
        with np.errstate(over='ignore'):
            return int(np.int64(a) + np.int64(b))

    @staticmethod
    def sub(a, b):
        with np.errstate(over='ignore'):
            return int(np.int64(a) - np.int64(b))

    @staticmethod
    def mul(a, b):
        with np.errstate(over='ignore'):
            return int(np.int64(a) * np.int64(b))

    @staticmethod
    def neg(a):
        with np.errstate(over='ignore'):
            return int(-np.int64(a))

    @staticmethod
    def div(a, b):
        """整数除法，向零截断"""
        if b == 0:
            raise DivisionByZeroError()
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        # INT64_MIN / -1 回绕
        return wrap_int64(quotient)

    @staticmethod
    def mod(a, b):
        """余数，符号与被除数一致（与截断除法配套）"""
        if b == 0:
            raise ModuloByZeroError()
        remainder = abs(a) % abs(b)
        return -remainder if a < 0 else remainder

    @staticmethod
    def pow(base, exp):
        """
        快速幂，仅支持非负指数
        每次乘法前先按 INT64_MAX 检查绝对值，可能溢出即报错（保守检查）
        """
        if exp < 0:
            raise ExponentiationError()
        result = 1
        while exp:
            if exp & 1:
                if base != 0 and abs(result) > INT64_MAX // abs(base):
                    raise ExponentiationError()
                result *= base
            exp >>= 1
            if exp:
                if base != 0 and abs(base) > INT64_MAX // abs(base):
                    raise ExponentiationError()
                base *= base
        return result

    @staticmethod
    def apply(symbol, *operands):
        op_method = _DISPATCH.get(symbol)
        if op_method is None:
            logger.debug(f"Unknown operator: {symbol!r}")
            raise UnknownOperatorError()
        return op_method(*operands)


_DISPATCH = {
    OperatorSymbol.ADD: Operators.add,
    OperatorSymbol.SUB: Operators.sub,
    OperatorSymbol.MUL: Operators.mul,
    OperatorSymbol.DIV: Operators.div,
    OperatorSymbol.MOD: Operators.mod,
    OperatorSymbol.POW: Operators.pow,
    OperatorSymbol.NEG: Operators.neg,
}
