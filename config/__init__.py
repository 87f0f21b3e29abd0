"""配置模块"""
from .config import SERVER_CONFIG, SESSION_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['SERVER_CONFIG', 'SESSION_CONFIG', 'LOGGING_CONFIG', 'validate_config']
