"""
tinyconf - 日志框架的分层配置解析核心

模块结构：
- config/      配置存储、来源定位与加载器
- resolvers/   占位符解析（环境变量 / 进程属性）
- models/      数据模型定义
- properties   进程级属性表
- diagnostics  内部诊断日志
"""

from .config import Configuration, ConfigurationLoader, LoaderSettings, get_configuration
from .properties import SystemProperties, system_properties

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "ConfigurationLoader",
    "LoaderSettings",
    "get_configuration",
    "SystemProperties",
    "system_properties",
]
