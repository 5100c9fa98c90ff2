"""主程序入口 - 交互式整数表达式计算器"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, LOGGING_CONFIG
from calculator import ExpressionCalculator, format_result, is_blank
from utils.formatting import banner_lines

logger = logging.getLogger(__name__)


def run_expressions(expressions, calculator, out=None):
    """依次计算命令行给出的表达式，返回失败的个数"""
    out = out or sys.stdout
    failures = 0
    for expression in expressions:
        result = calculator.calculate(expression)
        for line in format_result(result):
            print(line, file=out)
        if not result.ok:
            failures += 1
    return failures


def repl(calculator, stdin=None, out=None, quiet=False):
    """读取-求值-打印循环，空行或输入结束时退出"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    if not quiet:
        for line in banner_lines():
            print(line, file=out)

    while True:
        print(REPL_CONFIG["prompt"], end='', file=out, flush=True)
        line = stdin.readline()
        if not line or is_blank(line):
            break
        for text in format_result(calculator.calculate(line)):
            print(text, file=out)

    if not quiet:
        print(REPL_CONFIG["farewell"], file=out)


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    logger.debug("Starting expression calculator")

    calculator = ExpressionCalculator()

    if args.expression:
        failures = run_expressions(args.expression, calculator)
        return 1 if failures else 0

    repl(calculator, quiet=args.quiet)
    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Integer expression calculator")

    parser.add_argument(
        "-e", "--expression",
        action="append",
        default=[],
        help="Evaluate the given expression and exit (may be repeated)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the banner and farewell in interactive mode"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    sys.exit(main(build_arg_parser().parse_args()))


if __name__ == "__main__":
    cli()
