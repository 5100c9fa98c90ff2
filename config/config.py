"""配置文件"""

# 容量上限（超过即报错，不截断）
LIMITS_CONFIG = {
    "max_expression_length": 4096,  # 单行输入最大长度
    "max_tokens": 4096,  # 后缀序列最多token数
    "max_stack_depth": 4096,  # 运算符栈 / 数值栈最大深度
    "max_numeral_length": 63,  # 单个数字最多位数
}


def get_limit(name, value=None):
    """显式给出的上限（包括0）优先，否则使用 LIMITS_CONFIG 中的默认值"""
    return LIMITS_CONFIG[name] if value is None else value


# 交互循环参数
REPL_CONFIG = {
    "title": "Expression Calculator (integers)",
    "prompt": "> ",
    "farewell": "Goodbye!",
    "examples": [
        "-3 + 4*(2-1) ^ 3",
        "2*-5 + (7 - -(3))",
    ],
    "unary_minus_marker": "~",
    "parse_error_label": "infix->postfix",
    "evaluate_error_label": "evaluate",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert LIMITS_CONFIG["max_numeral_length"] > 0, "数字长度上限必须为正"
    assert LIMITS_CONFIG["max_stack_depth"] > 0, "栈深度上限必须为正"
    assert LIMITS_CONFIG["max_expression_length"] >= LIMITS_CONFIG["max_numeral_length"], "行长度过小"
    assert REPL_CONFIG["unary_minus_marker"] not in "+-*/%^()", "一元负号标记不能与运算符重复"
    print("Configuration validated successfully!")
