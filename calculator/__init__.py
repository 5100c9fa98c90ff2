"""Calculator模块 - 单行表达式计算与输出格式"""
from .session import ExpressionCalculator, CalculationResult, format_result, is_blank

__all__ = ['ExpressionCalculator', 'CalculationResult', 'format_result', 'is_blank']
