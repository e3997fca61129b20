"""
占位符解析 - 解析器实现与替换引擎

固定解析顺序：先环境变量（${NAME}），后进程属性（#{NAME}）
"""

from .environment import EnvironmentVariableResolver
from .placeholder import resolve_placeholders
from .system import SystemPropertyResolver

__all__ = [
    "EnvironmentVariableResolver",
    "SystemPropertyResolver",
    "resolve_placeholders",
]
