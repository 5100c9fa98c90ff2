"""中缀表达式 -> 后缀(RPN)序列，调度场算法"""
import logging
import string
from enum import Enum

from config.config import get_limit
from core.exceptions import (
    InvalidCharacterError, NumberTooLongError, UnexpectedOperatorError,
    MismatchedParenthesesError, UnexpectedEndError, OperatorStackOverflowError,
    TooManyTokensError
)
from core.stack import BoundedStack
from core.token_system import (
    Token, OperatorSymbol, OPERATOR_CHARS, OPEN_PAREN, CLOSE_PAREN,
    precedence, is_right_assoc
)

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
WHITESPACE = frozenset(string.whitespace)


class ParserMode(Enum):
    """解析器状态：下一个有意义的token应是操作数，还是运算符/结尾"""
    EXPECT_OPERAND = "expect_operand"
    EXPECT_OPERATOR_OR_END = "expect_operator_or_end"

    @staticmethod
    def after(token):
        """
        状态转移，只取决于刚读入的token
        Args:
            token: 数字文本、'(' 、')' 或 OperatorSymbol
        """
        if token == OPEN_PAREN or isinstance(token, OperatorSymbol):
            return ParserMode.EXPECT_OPERAND
        return ParserMode.EXPECT_OPERATOR_OR_END


def classify_operator(char, mode):
    """
    把运算符字符映射为 OperatorSymbol
    期望操作数时 '-' 视为一元负号，其他运算符出现在此处即为语法错误
    """
    symbol = OPERATOR_CHARS[char]
    if mode is ParserMode.EXPECT_OPERAND:
        if symbol is OperatorSymbol.SUB:
            return OperatorSymbol.NEG
        raise UnexpectedOperatorError()
    return symbol


def _should_pop(top, current):
    p_top, p_cur = precedence(top), precedence(current)
    return p_top > p_cur or (p_top == p_cur and not is_right_assoc(current))


class InfixParser:
    """单行中缀表达式解析器，每次 parse 使用全新的栈和输出缓冲"""

    def __init__(self, max_tokens=None, max_stack_depth=None, max_numeral_length=None):
        self.max_tokens = get_limit("max_tokens", max_tokens)
        self.max_stack_depth = get_limit("max_stack_depth", max_stack_depth)
        self.max_numeral_length = get_limit("max_numeral_length", max_numeral_length)

    def parse(self, expr):
        """
        Args:
            expr: 原始表达式字符串
        Returns:
            后缀顺序的Token列表（括号已去除，一元负号已区分）
        Raises:
            ParseError 的各个子类
        """
        ops = BoundedStack(self.max_stack_depth, OperatorStackOverflowError)
        output = BoundedStack(self.max_tokens, TooManyTokensError)
        mode = ParserMode.EXPECT_OPERAND

        i, n = 0, len(expr)
        while i < n:
            char = expr[i]

            if char in WHITESPACE:
                i += 1
                continue

            # 数字
            if char in DIGITS:
                start = i
                while i < n and expr[i] in DIGITS:
                    if i - start >= self.max_numeral_length:
                        raise NumberTooLongError()
                    i += 1
                text = expr[start:i]
                output.push(Token.numeral(text))
                mode = mode.after(text)
                continue

            # 括号
            if char == OPEN_PAREN:
                ops.push(OPEN_PAREN)
                mode = mode.after(OPEN_PAREN)
                i += 1
                continue

            if char == CLOSE_PAREN:
                self._close_group(ops, output)
                mode = mode.after(CLOSE_PAREN)
                i += 1
                continue

            # 运算符（含一元负号）
            if char in OPERATOR_CHARS:
                symbol = classify_operator(char, mode)
                while ops and ops.peek() != OPEN_PAREN and _should_pop(ops.peek(), symbol):
                    output.push(Token.for_operator(ops.pop()))
                ops.push(symbol)
                mode = mode.after(symbol)
                i += 1
                continue

            raise InvalidCharacterError(char)

        # 清空运算符栈
        while ops:
            top = ops.pop()
            if top == OPEN_PAREN:
                raise MismatchedParenthesesError()
            output.push(Token.for_operator(top))

        if mode is ParserMode.EXPECT_OPERAND:
            raise UnexpectedEndError()

        postfix = output.to_list()
        logger.debug(f"Parsed {expr.strip()!r} into {len(postfix)} postfix tokens")
        return postfix

    @staticmethod
    def _close_group(ops, output):
        while ops:
            top = ops.pop()
            if top == OPEN_PAREN:
                return
            output.push(Token.for_operator(top))
        raise MismatchedParenthesesError()


def infix_to_postfix(expr):
    """使用默认容量配置把中缀表达式转换为后缀Token序列"""
    return InfixParser().parse(expr)
