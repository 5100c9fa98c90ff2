"""核心模块 - Token系统、调度场解析器、RPN求值器和运算符"""
from .token_system import (
    TokenType, Token, OperatorSymbol, Associativity, OperatorSpec,
    OPERATOR_DEFINITIONS, parse_postfix
)
from .exceptions import CalculatorError, ParseError, EvaluationError
from .infix_parser import InfixParser, ParserMode, infix_to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'OperatorSymbol', 'Associativity', 'OperatorSpec',
    'OPERATOR_DEFINITIONS', 'parse_postfix',
    'CalculatorError', 'ParseError', 'EvaluationError',
    'InfixParser', 'ParserMode', 'infix_to_postfix',
    'RPNEvaluator', 'evaluate_postfix', 'Operators'
]
