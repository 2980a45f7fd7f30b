"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "operators": ["+", "-", "*", "/", "%"],  # 固定操作符集合
    "int_bits": 32,  # 操作数与结果均为32位有符号整数
}

# 批处理参数
BATCH_CONFIG = {
    "default_input_path": "expressions.txt",  # 项目根目录下的表达式文件
    "encoding": "utf-8",
    "results_path": "postfix_results.csv",
}

# 日志参数
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 演示用例 (标题, 表达式)
SAMPLE_EXPRESSIONS = [
    ("Test Case 1 - Single-digit operands", "5 3 + 2 *"),
    ("Test Case 2 - Multi-digit operands", "15 7 1 1 + - / 3 * 2 1 1 + + -"),
    ("Test Case 3 - Division by zero", "5 0 /"),
    ("Test Case 4 - Invalid expression", "1 2 + +"),
    ("Test Case 5 - Empty expression", ""),
]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_SYMBOLS
    assert sorted(EVALUATOR_CONFIG["operators"]) == sorted(OPERATOR_SYMBOLS), "操作符集合与Operator枚举不一致"
    assert EVALUATOR_CONFIG["int_bits"] == 32, "只支持32位整数"
    assert BATCH_CONFIG["default_input_path"], "缺少默认输入文件"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), "未知日志级别"
    assert len(SAMPLE_EXPRESSIONS) == 5, "演示用例应为5个"
