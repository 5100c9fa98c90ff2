import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.config import REPL_CONFIG, get_limit
from core import InfixParser, RPNEvaluator, Token, CalculatorError
from core.exceptions import ExpressionTooLongError
from utils.formatting import render_postfix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    expression: str
    postfix: List[Token] = field(default_factory=list)
    value: Optional[int] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_blank(line: str) -> bool:
    """空行或全空白行表示结束交互"""
    return not line or line.isspace()


class ExpressionCalculator:
    """
    单行表达式计算：解析 -> 求值
    每次调用都新建解析器和求值器，行与行之间不共享任何状态
    """

    def __init__(self, max_expression_length=None, max_tokens=None,
                 max_stack_depth=None, max_numeral_length=None):
        self.max_expression_length = get_limit("max_expression_length", max_expression_length)
        self.max_tokens = max_tokens
        self.max_stack_depth = max_stack_depth
        self.max_numeral_length = max_numeral_length

    def calculate(self, line: str) -> CalculationResult:
        """
        Args:
            line: 一行原始输入（可带换行符）
        Returns:
            CalculationResult，失败时 error 字段记录具体错误
        """
        expression = line.rstrip('\r\n')
        postfix = []
        try:
            if len(expression) > self.max_expression_length:
                raise ExpressionTooLongError()

            parser = InfixParser(self.max_tokens, self.max_stack_depth, self.max_numeral_length)
            postfix = parser.parse(expression)

            evaluator = RPNEvaluator(self.max_stack_depth)
            value = evaluator.evaluate(postfix)
        except CalculatorError as e:
            logger.info(f"Failed to {e.phase} expression {expression[:50]!r}: {e}")
            return CalculationResult(expression, postfix, error=e)

        logger.debug(f"{expression[:50]!r} = {value}")
        return CalculationResult(expression, postfix, value=value)


def format_result(result: CalculationResult) -> List[str]:
    """按交互输出格式渲染结果，返回需要打印的行"""
    if result.error is not None and result.error.phase == "parse":
        return [f"Error ({REPL_CONFIG['parse_error_label']}): {result.error}"]

    lines = [f"Postfix: {render_postfix(result.postfix)}"]
    if result.error is not None:
        lines.append(f"Error ({REPL_CONFIG['evaluate_error_label']}): {result.error}")
    else:
        lines.append(f"Result: {result.value}")
    return lines
