"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
import string

from config.config import get_limit
from core.exceptions import (
    UnaryOperandError, BinaryOperandError, InvalidNumberError,
    UnknownOperatorError, OperandCountError, ValueStackOverflowError
)
from core.operators import Operators, INT64_MIN, INT64_MAX
from core.stack import BoundedStack
from core.token_system import Token, OPERATOR_DEFINITIONS, arity

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)


def parse_numeral(text):
    """数字token -> int64；空串、非数字字符或越界均视为非法"""
    if not isinstance(text, str) or not text or not DIGITS.issuperset(text):
        raise InvalidNumberError()
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidNumberError()
    return value


class RPNEvaluator:
    """评估后缀表达式的值，输入序列视为不可信"""

    def __init__(self, max_stack_depth=None):
        self.max_stack_depth = get_limit("max_stack_depth", max_stack_depth)

    def evaluate(self, token_sequence):
        """
        Args:
            token_sequence: Token 或原始字符串组成的后缀序列
        Returns:
            int64 范围内的整数结果
        Raises:
            EvaluationError 的各个子类
        """
        stack = BoundedStack(self.max_stack_depth, ValueStackOverflowError)

        for token in token_sequence:
            if not isinstance(token, Token):
                token = Token.from_text(token)

            if token.is_operator:
                self._apply_operator(token, stack)
            else:
                stack.push(parse_numeral(token.text))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise OperandCountError()
        return stack.pop()

    @staticmethod
    def _apply_operator(token, stack):
        spec = OPERATOR_DEFINITIONS.get(token.operator)
        if spec is None:
            raise UnknownOperatorError()

        # ================== 一元运算符 ==================
        if arity(spec.symbol) == 1:
            if len(stack) < 1:
                raise UnaryOperandError()
            operand = stack.pop()
            stack.push(Operators.apply(spec.symbol, operand))
            return

        # ================== 二元运算符 ==================
        if len(stack) < 2:
            raise BinaryOperandError()
        b = stack.pop()
        a = stack.pop()
        stack.push(Operators.apply(spec.symbol, a, b))


def evaluate_postfix(token_sequence):
    """使用默认容量配置对后缀序列求值"""
    return RPNEvaluator().evaluate(token_sequence)
