"""utils/formatting.py"""
from config.config import REPL_CONFIG
from core.token_system import OperatorSymbol


def render_token(token):
    if token.operator is OperatorSymbol.NEG:
        return REPL_CONFIG["unary_minus_marker"]
    return token.text


def render_postfix(tokens):
    """后缀序列 -> 单空格分隔的文本，一元负号显示为独立标记"""
    return ' '.join(render_token(t) for t in tokens)


def banner_lines():
    """交互模式启动时打印的说明"""
    lines = [
        REPL_CONFIG["title"],
        "Supports: + - * / % ^, parentheses, unary minus",
        "Examples:",
    ]
    lines.extend(f"  {example}" for example in REPL_CONFIG["examples"])
    lines.append("Enter expression (or empty line to quit):")
    lines.append("")
    return lines
