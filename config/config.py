"""配置文件"""

# 表达式参数
EXPRESSION_CONFIG = {
    "variable_symbol": "x",  # 唯一的自由变量
    "operator_symbols": {
        "add": "+",
        "subtract": "-",
        "multiply": "*",
        "divide": "/",
        "power": "^",
    },
    "precedence": {
        "add": 1,
        "subtract": 1,
        "multiply": 2,
        "divide": 2,
        "power": 3,  # 与 * / 一样按左结合处理
    },
    "division_by_zero_value": 0.0,  # 除零时替换的结果
    "malformed_result": 0.0,  # 栈不平衡时的返回值
}

# 积分参数
INTEGRATION_CONFIG = {
    "num_steps": 1000,  # 原程序固定为1000步
    "stepping": "accumulate",  # accumulate: x += h（保留浮点漂移）；indexed: x = a + i*h
    "cache_boundary": True,  # 相邻小区间复用边界点的函数值
}

STEPPING_MODES = ("accumulate", "indexed")

# 输出参数
DISPLAY_CONFIG = {
    "precision": 5,  # 有效数字，对应原程序的 setprecision(5)
    "function_prompt": "Enter a function: ",
    "range_prompt": "Enter the range of integration: ",
}

# 采样参数
SAMPLING_CONFIG = {
    "table_points": 11,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    symbols = EXPRESSION_CONFIG["operator_symbols"]
    assert len(set(symbols.values())) == len(symbols), "运算符符号不能重复"
    assert EXPRESSION_CONFIG["variable_symbol"] not in symbols.values(), "变量符号不能与运算符冲突"
    assert set(EXPRESSION_CONFIG["precedence"]) == set(symbols), "每个运算符都需要优先级"
    assert INTEGRATION_CONFIG["num_steps"] > 0, "积分步数必须为正"
    assert INTEGRATION_CONFIG["stepping"] in STEPPING_MODES, "未知的步进方式"
    assert SAMPLING_CONFIG["table_points"] >= 2, "采样点至少为2"
    return True
