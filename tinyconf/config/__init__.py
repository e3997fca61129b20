"""
配置层 - 配置存储与分层加载

职责：
- 定位配置文件（覆盖属性指定 / 内置默认资源）
- 叠加进程属性覆盖
- 解析占位符
- 提供层级键查询（兄弟 / 子项）
"""

from .loader import ConfigurationLoader, get_configuration
from .settings import LoaderSettings
from .sources import classify, is_url, open_source
from .store import Configuration

__all__ = [
    "Configuration",
    "ConfigurationLoader",
    "LoaderSettings",
    "get_configuration",
    "classify",
    "is_url",
    "open_source",
]
