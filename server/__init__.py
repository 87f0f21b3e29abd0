"""HTTP接口模块"""
from .api import app, create_app, run_server

__all__ = ['app', 'create_app', 'run_server']
