"""core/exceptions.py - 解析 / 求值错误类型"""


class CalculatorError(Exception):
    """所有计算器错误的基类，phase 标明出错阶段"""

    phase = None
    message = "Calculator error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class ParseError(CalculatorError):
    phase = "parse"
    message = "Parse error"


class EvaluationError(CalculatorError):
    phase = "evaluate"
    message = "Evaluation error"


# ================== 解析阶段 ==================

class InvalidCharacterError(ParseError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"Invalid character: '{char}'")


class NumberTooLongError(ParseError):
    message = "Number token too long"


class UnexpectedOperatorError(ParseError):
    message = "Unexpected operator"


class MismatchedParenthesesError(ParseError):
    message = "Mismatched parentheses"


class UnexpectedEndError(ParseError):
    message = "Expression ends unexpectedly"


class OperatorStackOverflowError(ParseError):
    message = "Operator stack overflow"


class TooManyTokensError(ParseError):
    message = "Too many tokens"


class ExpressionTooLongError(ParseError):
    message = "Expression too long"


# ================== 求值阶段 ==================

class UnaryOperandError(EvaluationError):
    message = "Not enough operands for unary minus"


class BinaryOperandError(EvaluationError):
    message = "Not enough operands for binary operator"


class DivisionByZeroError(EvaluationError):
    message = "Division by zero"


class ModuloByZeroError(EvaluationError):
    message = "Modulo by zero"


class ExponentiationError(EvaluationError):
    message = "Invalid or overflow in exponentiation"


class InvalidNumberError(EvaluationError):
    message = "Invalid number in postfix"


class UnknownOperatorError(EvaluationError):
    message = "Unknown operator in evaluation"


class OperandCountError(EvaluationError):
    message = "Extra operands or insufficient operators"


class ValueStackOverflowError(EvaluationError):
    message = "Value stack overflow"
