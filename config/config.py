"""配置文件"""
import os

# HTTP服务参数
SERVER_CONFIG = {
    "host": os.environ.get("HOST", "0.0.0.0"),
    "port": int(os.environ.get("PORT", 8000)),
    "eval_path": "/api/eval",
    "health_path": "/api/health",
    "max_body_bytes": 32 * 1024,  # 请求体上限
    "max_expression_length": 240,  # 表达式长度上限（strip 之后）
}

# 交互式会话参数
SESSION_CONFIG = {
    "tape_limit": 200,  # 历史纸带最多保留条数，新的在前
}

# 日志
LOGGING_CONFIG = {
    "level": os.environ.get("LOG_LEVEL", "INFO"),
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 0 < SERVER_CONFIG["port"] < 65536, "端口必须在 1-65535 之间"
    assert SERVER_CONFIG["max_body_bytes"] > 0, "请求体上限必须为正"
    assert SERVER_CONFIG["max_expression_length"] > 0, "表达式长度上限必须为正"
    assert SERVER_CONFIG["eval_path"].startswith("/"), "路径必须以 / 开头"
    assert SERVER_CONFIG["health_path"].startswith("/"), "路径必须以 / 开头"
    assert SESSION_CONFIG["tape_limit"] > 0, "纸带长度上限必须为正"
    return True
