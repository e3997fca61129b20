"""
数据模型层 - 定义配置系统核心数据结构

- PropertyEntry: 单个配置项
- ConfigurationSource: 配置文件来源
- SourceKind: 来源类型
"""

from .entry import PropertyEntry
from .source import ConfigurationSource, SourceKind

__all__ = [
    "PropertyEntry",
    "ConfigurationSource",
    "SourceKind",
]
